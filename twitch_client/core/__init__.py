"""
Core functionality for the Twitch API client.

This module contains the core components:
- HTTP client with the generic request verbs
- Credentials management
- OAuth authorization URLs
- Exception definitions
"""

from twitch_client.core.auth import (
    AUTHORIZE_URL,
    Scope,
    authorization_code_url,
    build_auth_url,
    encode_scopes,
    implicit_grant_url,
)
from twitch_client.core.client import TwitchClient
from twitch_client.core.config import Credentials
from twitch_client.core.exceptions import (
    TwitchAPIError,
    TwitchClientError,
    TwitchConfigError,
    TwitchDecodeError,
    TwitchHTTPStatusError,
    TwitchTransportError,
)

__all__ = [
    "TwitchClient",
    "Credentials",
    "Scope",
    "AUTHORIZE_URL",
    "encode_scopes",
    "build_auth_url",
    "authorization_code_url",
    "implicit_grant_url",
    "TwitchClientError",
    "TwitchAPIError",
    "TwitchTransportError",
    "TwitchHTTPStatusError",
    "TwitchDecodeError",
    "TwitchConfigError",
]
