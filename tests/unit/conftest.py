"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests never open a network connection: the API client is an
AsyncMock returning real httpx.Response objects, and the operator is a
scripted terminal.
"""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from shortlink.cli.session import Session
from shortlink.schemas.user import UserIdentity

TEST_BASE_URL = "http://test:8080/api"
TEST_SHORT_HOST = "short.test"


# =============================================================================
# Terminal Fixtures
# =============================================================================


class ScriptedTerminal:
    """
    Terminal fed from a fixed list of replies.

    Raises EOFError once the replies run out, like an exhausted stdin.
    Every prompt and emitted message is recorded for assertions.
    """

    def __init__(self, replies: list[str] | None = None) -> None:
        self.replies = list(replies or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *replies: str) -> None:
        self.replies.extend(replies)

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.replies:
            raise EOFError
        return self.replies.pop(0)

    def emit(self, message: str, style: str | None = None) -> None:
        self.lines.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def terminal() -> ScriptedTerminal:
    """
    Scripted operator.

    Usage:
        def test_exit(terminal):
            terminal.feed("3")
    """
    return ScriptedTerminal()


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


def make_response(
    status_code: int,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """
    Build a real httpx.Response.

    Strings are used as the raw body; anything else is JSON-encoded.
    """
    if body is None:
        content = b""
    elif isinstance(body, str):
        content = body.encode()
    else:
        content = json.dumps(body).encode()
    return httpx.Response(
        status_code,
        content=content,
        headers=headers,
        request=httpx.Request("GET", TEST_BASE_URL),
    )


@pytest.fixture
def response() -> Any:
    """Provide make_response for building backend replies."""
    return make_response


@pytest.fixture
def api_client() -> AsyncMock:
    """
    Mock APIClient.

    Usage:
        async def test_login(api_client, response):
            api_client.post.return_value = response(200, {"userId": "u1", "email": "a@b.com"})
    """
    client = AsyncMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.close = AsyncMock()
    client.url_for = MagicMock(side_effect=lambda path: f"{TEST_BASE_URL}/{path.lstrip('/')}")
    return client


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def identity() -> UserIdentity:
    return UserIdentity(user_id="u1", email="a@b.com")


@pytest.fixture
def session(identity: UserIdentity) -> Session:
    return Session(identity)
