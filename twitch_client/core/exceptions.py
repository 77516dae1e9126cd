"""
Custom exceptions for Twitch client operations.

Every network verb of the client fails with exactly one subclass of
TwitchAPIError. Credentials file problems raise TwitchConfigError.
"""

from typing import Any, Optional


class TwitchClientError(Exception):
    """
    Base exception for all Twitch client errors.

    Examples:
        >>> try:
        ...     client.fetch("/games/top")
        ... except TwitchClientError as e:
        ...     print(f"Twitch error: {e}")
    """

    pass


class TwitchAPIError(TwitchClientError):
    """
    Raised when a request to the Kraken API does not produce a payload.

    Catch this to handle all three failure kinds of the request verbs at once.
    """

    pass


class TwitchTransportError(TwitchAPIError):
    """
    Raised when the request never got a server response.

    Connection refused, DNS resolution, TLS handshake and timeouts all end up
    here. The underlying requests exception is chained as ``__cause__``.
    """

    pass


class TwitchHTTPStatusError(TwitchAPIError):
    """
    Raised when the server answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response.
        response_body: Parsed JSON body if the server sent one, else the raw text.
        url: URL of the failed request.

    Examples:
        >>> try:
        ...     client.fetch("/channels/unknown")
        ... except TwitchHTTPStatusError as e:
        ...     print(f"API error {e.status_code}: {e.response_body}")
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.url = url


class TwitchDecodeError(TwitchAPIError):
    """
    Raised when a successful response cannot be decoded into the expected shape.

    Attributes:
        response_body: Raw response text.
    """

    def __init__(self, message: str, response_body: Optional[str] = None):
        super().__init__(message)
        self.response_body = response_body


class TwitchConfigError(TwitchClientError):
    """
    Raised when credentials cannot be loaded or saved.

    Attributes:
        path: The credentials file involved, if any.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
