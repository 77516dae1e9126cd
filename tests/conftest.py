"""
Pytest configuration and shared fixtures.
"""

import json
from collections.abc import Generator
from typing import Any, Optional

import pytest
import requests

from twitch_client import Credentials, TwitchClient, TwitchConfigError


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    text: Optional[str] = None,
    url: str = "https://api.twitch.tv/kraken/",
) -> requests.Response:
    """
    Build a requests.Response as the transport would return it.

    Args:
        status_code: HTTP status of the response.
        json_body: Object serialized as the JSON body.
        text: Raw body, used when json_body is None.
        url: URL reported by the response.
    """
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeSession:
    """
    Stand-in for requests.Session that records requests.

    Each call to request() stores its keyword arguments in ``calls`` and
    returns the next queued response, or raises ``error`` if one is set.
    """

    def __init__(self, *responses: requests.Response, error: Optional[Exception] = None):
        self.responses = list(responses)
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, **kwargs: Any) -> requests.Response:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return make_response(200, {}, url=kwargs["url"])

    def close(self) -> None:
        self.closed = True

    @property
    def last_headers(self) -> dict[str, str]:
        return self.calls[-1]["headers"]


@pytest.fixture
def fake_session() -> FakeSession:
    """A session answering every request with 200 and an empty JSON object."""
    return FakeSession()


@pytest.fixture
def client(fake_session: FakeSession) -> TwitchClient:
    """A client wired to the fake session."""
    return TwitchClient("test_client_id", session=fake_session)


@pytest.fixture
def credentials_file(tmp_path) -> Generator[Any, None, None]:
    """Path of a credentials file inside a temporary directory."""
    yield tmp_path / "credentials.toml"


@pytest.fixture(scope="session")
def live_credentials() -> Credentials:
    """
    Load credentials for live API tests from environment variables.

    Reads TWITCH_CLIENT_ID and TWITCH_TOKEN. Skips the test when they are
    not set.
    """
    try:
        credentials = Credentials.from_env()
    except TwitchConfigError as e:
        pytest.skip(f"Missing required environment variables: {e}")
    if not credentials.token:
        pytest.skip("Missing required environment variable: TWITCH_TOKEN")
    return credentials


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require actual Twitch credentials)"
    )
