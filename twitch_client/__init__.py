"""
Twitch Kraken API Client Library.

A small Python client for the Twitch Kraken (v5) REST API.

The package provides generic authenticated request verbs, credentials that
persist to a TOML file, a single exception hierarchy for every request
failure, and builders for OAuth authorization URLs.

Main Components:
    - TwitchClient: API client with fetch/create/replace/remove verbs
    - Credentials: client ID and OAuth token, loadable from file or environment
    - Scope and the authorization URL builders
    - Custom exceptions for detailed error handling

Quick Start:
    >>> from twitch_client import TwitchClient, Scope, authorization_code_url
    >>>
    >>> client = TwitchClient("<client_id>")
    >>>
    >>> # Send the user here to grant access
    >>> url = authorization_code_url(
    ...     client, "http://localhost", [Scope.USER_READ], "c3ab8aa609ea11e793ae92361f002671"
    ... )
    >>>
    >>> # Once a token is obtained
    >>> client.set_token("<oauth_token>")
    >>> top = client.fetch("/games/top")
    >>> for entry in top["top"][:20]:
    ...     print(entry["game"]["name"], entry["viewers"])
"""

import logging

# Core functionality
from twitch_client.core import (
    AUTHORIZE_URL,
    Credentials,
    Scope,
    TwitchAPIError,
    TwitchClient,
    TwitchClientError,
    TwitchConfigError,
    TwitchDecodeError,
    TwitchHTTPStatusError,
    TwitchTransportError,
    authorization_code_url,
    build_auth_url,
    encode_scopes,
    implicit_grant_url,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

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

__version__ = "1.0.0"
