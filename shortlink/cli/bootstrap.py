"""
Session Bootstrapper.

Runs once before any URL operation: the operator logs in, creates a user,
or exits. A Session is produced only from a successfully decoded identity;
every other outcome returns to the start menu.
"""

import httpx

from shortlink.cli.client import APIClient
from shortlink.cli.decoding import DecodeFailure, decode_identity
from shortlink.cli.session import Session
from shortlink.cli.terminal import Terminal
from shortlink.core.logging import get_logger, log_with_source
from shortlink.schemas.user import CredentialsRequest, UserIdentity

logger = get_logger(__name__)

LOGIN_CHOICE = "1"
CREATE_CHOICE = "2"
EXIT_CHOICE = "3"

START_MENU = (
    (LOGIN_CHOICE, "Log In"),
    (CREATE_CHOICE, "Create New User"),
    (EXIT_CHOICE, "Exit"),
)


class SessionBootstrapper:
    """
    Resolves the user identity for the session.

    Usage:
        session = await SessionBootstrapper(client, terminal).run()
        if session is None:
            return  # operator chose Exit
    """

    def __init__(self, client: APIClient, terminal: Terminal) -> None:
        self._client = client
        self._terminal = terminal

    async def run(self) -> Session | None:
        """Loop on the start menu until authenticated (Session) or exit (None)."""
        while True:
            self._show_menu()
            try:
                choice = self._terminal.prompt("Choose an option: ").strip()

                if choice == EXIT_CHOICE:
                    return None
                if choice == LOGIN_CHOICE:
                    identity = await self._login()
                elif choice == CREATE_CHOICE:
                    identity = await self._create_user()
                else:
                    self._terminal.emit("Invalid choice. Please try again.", style="yellow")
                    continue

            except EOFError:
                return None
            except httpx.HTTPError as e:
                self._terminal.emit(f"Error: could not reach backend ({e})", style="red")
                continue

            if identity is not None:
                log_with_source(logger, "cli", "info", "Session authenticated", user_id=identity.user_id)
                return Session(identity)

    def _show_menu(self) -> None:
        self._terminal.emit("")
        for key, label in START_MENU:
            self._terminal.emit(f"{key}. {label}")

    async def _login(self) -> UserIdentity | None:
        email = self._terminal.prompt("Enter your email to log in: ")
        response = await self._client.post(
            "/users/login",
            json=CredentialsRequest(email=email).model_dump(),
        )

        if not response.is_success:
            log_with_source(logger, "cli", "info", "Login rejected", status_code=response.status_code)
            self._terminal.emit("Login failed. User not found or incorrect email.", style="red")
            return None

        identity = self._adopt(response.text, "logging in")
        if identity is not None:
            self._terminal.emit(
                f"Logged in as {identity.email} (User ID: {identity.user_id})",
                style="green",
            )
        return identity

    async def _create_user(self) -> UserIdentity | None:
        email = self._terminal.prompt("Enter your email to create a new user: ")
        response = await self._client.post(
            "/users",
            json=CredentialsRequest(email=email).model_dump(),
        )

        if not response.is_success:
            log_with_source(logger, "cli", "info", "User creation rejected", status_code=response.status_code)
            self._terminal.emit(f"Error creating user. Response: {response.text}", style="red")
            return None

        identity = self._adopt(response.text, "creating user")
        if identity is not None:
            self._terminal.emit(
                f"User created: {identity.email} (User ID: {identity.user_id})",
                style="green",
            )
        return identity

    def _adopt(self, body: str, action: str) -> UserIdentity | None:
        result = decode_identity(body)
        if isinstance(result, DecodeFailure):
            log_with_source(logger, "cli", "warning", "Identity decode failed", reason=result.reason)
            self._terminal.emit(
                f"Error: Unexpected response format when {action}. Response: {result.raw}",
                style="red",
            )
            return None
        return result.value
