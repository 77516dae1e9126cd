"""
Main Twitch Kraken API client.

This module provides the generic request verbs every endpoint wrapper is
built on: fetch (GET), create (POST), replace (PUT) and remove (DELETE).
"""

import dataclasses
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

import requests

from twitch_client.core.config import Credentials, PathLike
from twitch_client.core.exceptions import (
    TwitchDecodeError,
    TwitchHTTPStatusError,
    TwitchTransportError,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")
Decoder = Callable[[Any], R]


def debug_quote(value: str) -> str:
    """
    Render a string the way a debug formatter does: double-quoted, escaped.

    Examples:
        >>> debug_quote('abc')
        '"abc"'
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _to_payload(body: Any) -> Any:
    """Convert a request body into something JSON serializable."""
    if hasattr(body, "to_dict"):
        return body.to_dict()
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    return body


class TwitchClient:
    """
    Client for the Twitch Kraken (v5) REST API.

    The client owns a requests session and a Credentials instance. Headers
    are built for every request from the credentials as they are at send
    time, so set_token() affects all later requests.

    Each verb accepts an optional ``decode`` callable that turns the parsed
    JSON into the caller's type (for example a dataclass ``from_dict``).
    Without it the parsed JSON is returned as is.

    Attributes:
        API_BASE_URL: Root of the Kraken API.
        ACCEPT: Media type pinning API version 5.
        CONTENT_TYPE: Content type sent with every request.

    Examples:
        >>> client = TwitchClient("my_client_id")
        >>> client.set_token("my_oauth_token")
        >>> top = client.fetch("/games/top?limit=20")
        >>> channel = client.replace(
        ...     "/channels/44322889",
        ...     {"channel": {"status": "Playing cool new game!"}},
        ... )
    """

    API_BASE_URL = "https://api.twitch.tv/kraken"
    ACCEPT = "application/vnd.twitchtv.v5+json"
    CONTENT_TYPE = "application/json; charset=UTF-8"

    def __init__(
        self,
        client_id: str,
        session: Optional[requests.Session] = None,
        credentials: Optional[Credentials] = None,
        timeout: Optional[float] = None,
        quote_client_id: bool = True,
    ):
        """
        Initialize the Twitch client.

        Args:
            client_id: Application client ID. Ignored if credentials is given.
            session: Optional pre-configured session (useful for dependency
                     injection). A fresh one is created otherwise.
            credentials: Optional credentials to use instead of a new
                         Credentials(client_id).
            timeout: Request timeout in seconds. None leaves the transport
                     default in place.
            quote_client_id: Send the Client-ID header debug-quoted
                             ("abc" with the quotes) as deployed clients do.
                             Pass False to send the raw ID.
        """
        self._credentials = credentials or Credentials(client_id)
        self._session = session or requests.Session()
        self.timeout = timeout
        self.quote_client_id = quote_client_id

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs: Any) -> "TwitchClient":
        """Create a client that uses existing credentials."""
        return cls(credentials.client_id, credentials=credentials, **kwargs)

    @classmethod
    def from_file(cls, path: PathLike, **kwargs: Any) -> "TwitchClient":
        """
        Create a client from a TOML credentials file.

        Raises:
            TwitchConfigError: If the file cannot be loaded.
        """
        return cls.from_credentials(Credentials.load_from_file(path), **kwargs)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def client_id(self) -> str:
        return self._credentials.client_id

    def set_token(self, token: str) -> None:
        """Use ``token`` for every request sent from now on."""
        self._credentials.set_token(token)

    def _get_headers(self) -> Dict[str, str]:
        client_id = self._credentials.client_id
        if self.quote_client_id:
            client_id = debug_quote(client_id)
        return {
            "Client-ID": client_id,
            "Content-Type": self.CONTENT_TYPE,
            "Accept": self.ACCEPT,
            "Authorization": f"OAuth {self._credentials.token}",
        }

    def _build_request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
    ) -> Dict[str, Any]:
        """
        Assemble the keyword arguments of a session request.

        The path is appended to API_BASE_URL verbatim; callers pass
        already-encoded path segments.
        """
        request_kwargs: Dict[str, Any] = {
            "method": method,
            "url": self.API_BASE_URL + path,
            "headers": self._get_headers(),
            "timeout": self.timeout,
        }
        if json_data is not None:
            request_kwargs["json"] = json_data
        return request_kwargs

    def _make_request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        decode: Optional[Decoder] = None,
    ) -> Any:
        """
        Send a request and turn the response into a payload.

        Raises:
            TwitchTransportError: If no response was received.
            TwitchHTTPStatusError: If the status is not 2xx.
            TwitchDecodeError: If the body is not JSON or ``decode`` rejects it.
        """
        request_kwargs = self._build_request(method, path, json_data)
        logger.debug("%s %s", method, request_kwargs["url"])

        try:
            response = self._session.request(**request_kwargs)
        except requests.exceptions.RequestException as e:
            raise TwitchTransportError(f"Network error: {e}") from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            try:
                response_body = response.json()
            except ValueError:
                response_body = response.text or None
            raise TwitchHTTPStatusError(
                f"API request failed: {e}",
                status_code=response.status_code,
                response_body=response_body,
                url=response.url,
            ) from e

        return self._decode(response, decode)

    @staticmethod
    def _decode(response: requests.Response, decode: Optional[Decoder]) -> Any:
        # 204 No Content and empty bodies carry no payload
        if response.status_code == 204 or not response.content:
            data = None
        else:
            try:
                data = response.json()
            except ValueError as e:
                raise TwitchDecodeError(
                    f"Invalid JSON in response: {e}", response_body=response.text
                ) from e

        if decode is None:
            return data
        try:
            return decode(data)
        except Exception as e:
            raise TwitchDecodeError(
                f"Response does not match the expected shape: {e!r}",
                response_body=response.text,
            ) from e

    def fetch(self, path: str, decode: Optional[Decoder] = None) -> Any:
        """
        Make a GET request to the Kraken API.

        Args:
            path: Path relative to API_BASE_URL (e.g., "/games/top").
            decode: Optional callable applied to the parsed JSON.

        Returns:
            The decoded payload.

        Examples:
            >>> client.fetch("/games/top")
            >>> client.fetch("/users/44322889", decode=User.from_dict)
        """
        return self._make_request("GET", path, decode=decode)

    def create(self, path: str, body: Any, decode: Optional[Decoder] = None) -> Any:
        """
        Make a POST request with ``body`` serialized as JSON.

        ``body`` may be a mapping, list, scalar, dataclass instance or any
        object with a ``to_dict()`` method.
        """
        return self._make_request("POST", path, json_data=_to_payload(body), decode=decode)

    def replace(self, path: str, body: Any, decode: Optional[Decoder] = None) -> Any:
        """Make a PUT request with ``body`` serialized as JSON."""
        return self._make_request("PUT", path, json_data=_to_payload(body), decode=decode)

    def remove(self, path: str, decode: Optional[Decoder] = None) -> Any:
        """Make a DELETE request. Returns None if the server sends no content."""
        return self._make_request("DELETE", path, decode=decode)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "TwitchClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TwitchClient(client_id={self.client_id!r})"
