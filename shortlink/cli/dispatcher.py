"""
Operation Dispatcher.

Post-login menu loop. Each iteration reads one choice, runs at most one
operation to completion, and reports its outcome before prompting again.
"""

from collections.abc import Awaitable, Callable

import httpx

from shortlink.cli.client import APIClient
from shortlink.cli.operations import UrlOperations
from shortlink.cli.session import Session
from shortlink.cli.terminal import Terminal
from shortlink.core.exceptions import InputValidationError
from shortlink.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

EXIT_CHOICE = "5"

MAIN_MENU = (
    ("1", "Shorten a URL"),
    ("2", "Retrieve your URLs"),
    ("3", "Resolve a short URL"),
    ("4", "View all URLs"),
    (EXIT_CHOICE, "Exit"),
)


class OperationDispatcher:
    """
    Runs the URL menu for an authenticated session.

    Usage:
        dispatcher = OperationDispatcher(client, terminal, session, short_host)
        await dispatcher.run()
    """

    def __init__(
        self,
        client: APIClient,
        terminal: Terminal,
        session: Session,
        short_host: str,
    ) -> None:
        self._terminal = terminal
        self._operations = UrlOperations(client, terminal, session, short_host)
        self.handlers: dict[str, Callable[[], Awaitable[None]]] = {
            "1": self._operations.shorten,
            "2": self._operations.retrieve_mine,
            "3": self._operations.resolve,
            "4": self._operations.retrieve_all,
        }

    async def run(self) -> None:
        """Loop until the operator chooses Exit or input ends."""
        while True:
            self._show_menu()
            try:
                choice = self._terminal.prompt("Choose an option: ").strip()
            except EOFError:
                return

            if choice == EXIT_CHOICE:
                return

            handler = self.handlers.get(choice)
            if handler is None:
                self._terminal.emit("Invalid option. Please try again.", style="yellow")
                continue

            await self._dispatch(choice, handler)

    async def _dispatch(self, choice: str, handler: Callable[[], Awaitable[None]]) -> None:
        try:
            await handler()
        except InputValidationError as e:
            self._terminal.emit(e.message, style="yellow")
        except EOFError:
            self._terminal.emit("No input received.", style="yellow")
        except httpx.InvalidURL as e:
            log_with_source(logger, "cli", "warning", "Request URL rejected", choice=choice, error=str(e))
            self._terminal.emit(f"Error: invalid request URL ({e})", style="red")
        except httpx.HTTPError as e:
            log_with_source(logger, "cli", "error", "Operation aborted", choice=choice, error=str(e))
            self._terminal.emit(f"Error: could not reach backend ({e})", style="red")

    def _show_menu(self) -> None:
        self._terminal.emit("")
        self._terminal.emit("Options:", style="bold")
        for key, label in MAIN_MENU:
            self._terminal.emit(f"{key}. {label}")
