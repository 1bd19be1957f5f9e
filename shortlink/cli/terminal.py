"""
Terminal I/O.

The session code only ever asks for the next line of operator input and
emits messages. Anything providing those two calls can drive a session:
the Rich console in production, a scripted feed in tests.
"""

from typing import Protocol

from rich.console import Console
from rich.markup import escape


class Terminal(Protocol):
    """Operator-facing input/output used by the bootstrapper and dispatcher."""

    def prompt(self, message: str) -> str:
        """
        Show a prompt and return the operator's reply.

        Raises:
            EOFError: When input is exhausted
        """
        ...

    def emit(self, message: str, style: str | None = None) -> None:
        """Show one message to the operator."""
        ...


class RichTerminal:
    """Terminal backed by a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def prompt(self, message: str) -> str:
        return self.console.input(escape(message))

    def emit(self, message: str, style: str | None = None) -> None:
        # Server text may contain [brackets]; never interpret it as markup.
        self.console.print(escape(message), style=style, soft_wrap=True)
