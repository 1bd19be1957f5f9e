"""
URL Operations.

One handler per post-login menu entry. Each handler makes at most one
backend request, reports the outcome, and keeps no state between calls.
Local input checks raise InputValidationError before any request is built.
"""

from urllib.parse import quote

import httpx

from shortlink.cli.client import APIClient
from shortlink.cli.decoding import (
    DecodeFailure,
    ResolveKind,
    classify_resolve,
    decode_records,
)
from shortlink.cli.session import Session
from shortlink.cli.terminal import Terminal
from shortlink.core.exceptions import InputValidationError
from shortlink.core.logging import get_logger, log_with_source
from shortlink.schemas.url import ShortenRequest, ShortUrlRecord

logger = get_logger(__name__)

ALLOWED_SCHEMES = ("http://", "https://")


def validate_long_url(long_url: str) -> str:
    """Return the URL unchanged if it starts with http:// or https://."""
    if not long_url.startswith(ALLOWED_SCHEMES):
        raise InputValidationError(
            "Invalid URL format. Please enter a valid HTTP or HTTPS URL."
        )
    return long_url


def extract_short_code(short_url: str) -> str:
    """Return the segment after the last '/' of a full short URL."""
    if "/" not in short_url:
        raise InputValidationError(
            "Invalid format. Please enter the full shortened URL."
        )
    return short_url.rsplit("/", 1)[1]


def short_code_path(short_code: str) -> str:
    """
    Request path for a short code, sent as a single percent-encoded segment.

    "." and ".." are dot-segments, not codes, and never reach the backend.
    """
    if short_code in (".", ".."):
        raise InputValidationError(
            "Invalid short code. Please enter the full shortened URL."
        )
    return f"/urls/{quote(short_code, safe='')}"


def format_status(response: httpx.Response) -> str:
    """Status code with its reason phrase, e.g. '302 Found'."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def format_record(record: ShortUrlRecord, short_host: str) -> str:
    """One listing line, e.g. 'swisscom.com/Ltvc8Kp -> https://example.org'."""
    return f"{short_host}/{record.short_code} -> {record.long_url}"


class UrlOperations:
    """
    Request/response handlers for the URL menu.

    Usage:
        ops = UrlOperations(client, terminal, session, short_host="swisscom.com")
        await ops.shorten()
    """

    def __init__(
        self,
        client: APIClient,
        terminal: Terminal,
        session: Session,
        short_host: str,
    ) -> None:
        self._client = client
        self._terminal = terminal
        self._session = session
        self._short_host = short_host

    async def shorten(self) -> None:
        """Shorten a long URL; the server's reply is echoed verbatim."""
        long_url = validate_long_url(
            self._terminal.prompt("Enter the URL to shorten (must start with http:// or https://): ")
        )
        request = ShortenRequest(long_url=long_url, user_id=self._session.user_id)

        self._terminal.emit("Sending request to shorten URL...")
        self._terminal.emit(f"Request Body: {request.model_dump_json(by_alias=True)}")

        response = await self._client.post("/urls/shorten", json=request.model_dump(by_alias=True))
        log_with_source(logger, "cli", "info", "Shorten completed", status_code=response.status_code)

        if response.is_success:
            self._terminal.emit(f"Response Code: {format_status(response)}")
            self._terminal.emit(f"Shortened URL: {response.text}", style="green")
        else:
            self._terminal.emit("Error shortening URL.", style="red")
            self._terminal.emit(f"Response Code: {format_status(response)}")
            self._terminal.emit(f"Response Body: {response.text}")

    async def retrieve_mine(self) -> None:
        """List the URLs owned by the session's user."""
        response = await self._client.get(f"/users/{quote(self._session.user_id, safe='')}/urls")
        if not response.is_success:
            log_with_source(logger, "cli", "warning", "User URL listing failed", status_code=response.status_code)
            self._terminal.emit("Error retrieving URLs.", style="red")
            return
        self._show_records("Your URLs:", response.text)

    async def resolve(self) -> None:
        """Resolve a full short URL back to its long URL."""
        short_code = extract_short_code(
            self._terminal.prompt("Enter the full shortened URL (e.g., swisscom.com/Ltvc8Kp): ")
        )
        path = short_code_path(short_code)
        target = self._client.url_for(path)
        try:
            httpx.URL(target)
        except httpx.InvalidURL as e:
            raise InputValidationError(f"Invalid short URL: {e}") from e

        self._terminal.emit(f"Extracted short code: {short_code}")
        self._terminal.emit(f"Sending request to resolve: {target}")

        response = await self._client.get(path)
        self._terminal.emit(f"Response Code: {format_status(response)}")

        outcome = classify_resolve(response)
        log_with_source(logger, "cli", "info", "Resolve completed", outcome=outcome.kind.value)

        if outcome.kind is ResolveKind.REDIRECT:
            self._terminal.emit(f"Redirects to: {outcome.long_url}", style="green")
        elif outcome.kind is ResolveKind.REDIRECT_WITHOUT_LOCATION:
            self._terminal.emit("Short URL resolved, but no Location header found.", style="yellow")
        elif outcome.kind is ResolveKind.RESOLVED_IN_BODY:
            self._terminal.emit(f"Short URL resolved: {outcome.body.strip()}", style="green")
        elif outcome.kind is ResolveKind.RESOLVED_EMPTY_BODY:
            self._terminal.emit("Short URL resolved, but response body is empty.", style="yellow")
        else:
            self._terminal.emit(f"Error: {format_status(response)}", style="red")

    async def retrieve_all(self) -> None:
        """List every URL on the backend, regardless of owner."""
        response = await self._client.get("/urls")
        if not response.is_success:
            log_with_source(logger, "cli", "warning", "Full URL listing failed", status_code=response.status_code)
            self._terminal.emit("Error retrieving all URLs.", style="red")
            return
        self._show_records("All URLs:", response.text)

    def _show_records(self, heading: str, body: str) -> None:
        result = decode_records(body)
        if isinstance(result, DecodeFailure):
            log_with_source(logger, "cli", "warning", "URL listing decode failed", reason=result.reason)
            self._terminal.emit(f"Error: Unexpected response format. Response: {result.raw}", style="red")
            return

        self._terminal.emit(heading, style="bold")
        if not result.value:
            self._terminal.emit("No URLs found.", style="dim")
            return
        for record in result.value:
            self._terminal.emit(format_record(record, self._short_host))
