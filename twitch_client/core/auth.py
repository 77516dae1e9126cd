"""
OAuth 2.0 authorization URLs for the Twitch Kraken API.

This module builds the URL a user is sent to in order to grant the
application access, for the authorization code flow and the implicit
grant flow. Exchanging the code for a token is left to the caller.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from twitch_client.core.client import TwitchClient

AUTHORIZE_URL = "https://api.twitch.tv/kraken/oauth2/authorize"


class Scope(str, Enum):
    """Permissions an application can request from a user (Kraken v5)."""

    CHANNEL_CHECK_SUBSCRIPTION = "channel_check_subscription"
    CHANNEL_COMMERCIAL = "channel_commercial"
    CHANNEL_EDITOR = "channel_editor"
    CHANNEL_FEED_EDIT = "channel_feed_edit"
    CHANNEL_FEED_READ = "channel_feed_read"
    CHANNEL_READ = "channel_read"
    CHANNEL_STREAM = "channel_stream"
    CHANNEL_SUBSCRIPTIONS = "channel_subscriptions"
    CHAT_LOGIN = "chat_login"
    USER_BLOCKS_EDIT = "user_blocks_edit"
    USER_BLOCKS_READ = "user_blocks_read"
    USER_FOLLOWS_EDIT = "user_follows_edit"
    USER_READ = "user_read"
    USER_SUBSCRIPTIONS = "user_subscriptions"
    VIEWING_ACTIVITY_READ = "viewing_activity_read"

    def __str__(self) -> str:
        return self.value


ScopeLike = Union[Scope, str]


def encode_scopes(scopes: Iterable[ScopeLike]) -> str:
    """
    Join scopes into the ``scope`` query value.

    Order is kept and duplicates are not removed.

    Raises:
        ValueError: If a string is not the name of a known scope.

    Examples:
        >>> encode_scopes([Scope.USER_READ, Scope.CHAT_LOGIN])
        'user_read+chat_login'
        >>> encode_scopes([])
        ''
    """
    return "+".join(Scope(scope).value for scope in scopes)


def build_auth_url(
    client: "TwitchClient",
    response_type: str,
    redirect_uri: str,
    scopes: Iterable[ScopeLike],
    state: str,
) -> str:
    """
    Build an authorization endpoint URL.

    Parameters appear in the order response_type, client_id, redirect_uri,
    scope, state. Values are inserted as given: redirect_uri and state must
    already be percent-encoded if they contain reserved characters.

    Args:
        client: Client whose client ID identifies the application.
        response_type: "code" or "token".
        redirect_uri: URI registered for the application.
        scopes: Requested permissions.
        state: Opaque value echoed back to the redirect URI.
    """
    return (
        f"{AUTHORIZE_URL}"
        f"?response_type={response_type}"
        f"&client_id={client.client_id}"
        f"&redirect_uri={redirect_uri}"
        f"&scope={encode_scopes(scopes)}"
        f"&state={state}"
    )


def authorization_code_url(
    client: "TwitchClient",
    redirect_uri: str,
    scopes: Iterable[ScopeLike],
    state: str,
) -> str:
    """URL for the authorization code flow (``response_type=code``)."""
    return build_auth_url(client, "code", redirect_uri, scopes, state)


def implicit_grant_url(
    client: "TwitchClient",
    redirect_uri: str,
    scopes: Iterable[ScopeLike],
    state: str,
) -> str:
    """URL for the implicit grant flow (``response_type=token``)."""
    return build_auth_url(client, "token", redirect_uri, scopes, state)
