"""
Credentials management for the Twitch client.

Credentials are a client ID plus an OAuth token. They can be created
directly, loaded from environment variables (a .env file is honoured) or
read from and written to a TOML file with the layout::

    client_id = "uo6dggojyb8d6soh92zknwmi5ej1q2"
    token = "cfabdegwdoklmawdzdo98xt2fo512y"
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w
from dotenv import load_dotenv

from twitch_client.core.exceptions import TwitchConfigError

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Credentials:
    """
    Client ID and OAuth token used to sign every request.

    The client ID is fixed at construction. The token starts empty and is
    replaced with set_token(); the client reads it again for each request.
    Instances compare equal by value and are not hashable.

    Examples:
        >>> creds = Credentials("my_client_id")
        >>> creds.set_token("my_oauth_token")
        >>> creds.save_to_file("credentials.toml")
        >>> Credentials.load_from_file("credentials.toml") == creds
        True
    """

    def __init__(self, client_id: str, token: str = ""):
        self._client_id = client_id
        self.token = token

    @property
    def client_id(self) -> str:
        """The application's client ID."""
        return self._client_id

    def set_token(self, token: str) -> None:
        """Replace the OAuth token. No validation is performed."""
        self.token = token

    def to_dict(self) -> Dict[str, str]:
        """Return the persisted mapping of these credentials."""
        return {"client_id": self._client_id, "token": self.token}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[str] = None) -> "Credentials":
        """
        Build credentials from a parsed credentials document.

        Unknown keys are ignored.

        Raises:
            TwitchConfigError: If client_id or token is missing or not a string.
        """
        for key in ("client_id", "token"):
            if key not in data:
                raise TwitchConfigError(f"Missing required field '{key}'", path=path)
            if not isinstance(data[key], str):
                raise TwitchConfigError(
                    f"Field '{key}' must be a string, got {type(data[key]).__name__}",
                    path=path,
                )
        return cls(client_id=data["client_id"], token=data["token"])

    @classmethod
    def load_from_file(cls, path: PathLike) -> "Credentials":
        """
        Load credentials from a TOML file.

        Args:
            path: Path of the credentials file.

        Returns:
            Credentials read from the file.

        Raises:
            TwitchConfigError: If the file cannot be read, is not valid TOML,
                or lacks a required field.
        """
        path_str = os.fspath(path)
        try:
            content = Path(path_str).read_text(encoding="utf-8")
        except OSError as e:
            raise TwitchConfigError(
                f"There was a problem reading the credentials file: {e}", path=path_str
            ) from e

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise TwitchConfigError(
                f"There was a problem parsing the credentials file: {e}", path=path_str
            ) from e

        logger.debug("Loaded credentials from %s", path_str)
        return cls.from_dict(data, path=path_str)

    def save_to_file(self, path: PathLike) -> None:
        """
        Write the credentials to a TOML file, replacing its contents.

        Raises:
            TwitchConfigError: If the file cannot be written.
        """
        path_str = os.fspath(path)
        try:
            Path(path_str).write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")
        except OSError as e:
            raise TwitchConfigError(
                f"Error writing credentials file: {e}", path=path_str
            ) from e
        logger.debug("Saved credentials to %s", path_str)

    @classmethod
    def from_env(
        cls,
        client_id: Optional[str] = None,
        token: Optional[str] = None,
    ) -> "Credentials":
        """
        Create credentials from environment variables.

        Direct parameters take precedence over the environment.

        Environment variables:
        - TWITCH_CLIENT_ID: application client ID (required)
        - TWITCH_TOKEN: OAuth token (optional, defaults to empty)

        Raises:
            TwitchConfigError: If no client ID is available.
        """
        if client_id is None:
            client_id = os.getenv("TWITCH_CLIENT_ID")
        if token is None:
            token = os.getenv("TWITCH_TOKEN", "")

        if not client_id:
            raise TwitchConfigError(
                "Twitch client ID is required. "
                "Set TWITCH_CLIENT_ID environment variable or pass client_id parameter."
            )
        return cls(client_id=client_id, token=token)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # mutable through set_token(), so unhashable
    __hash__ = None

    def __repr__(self) -> str:
        masked = "***" if self.token else ""
        return f"Credentials(client_id={self._client_id!r}, token={masked!r})"
