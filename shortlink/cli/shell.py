"""
Interactive Shell Mode.

Wires the bootstrapper and dispatcher together for one client session.
"""

from shortlink.cli.bootstrap import SessionBootstrapper
from shortlink.cli.client import APIClient
from shortlink.cli.dispatcher import OperationDispatcher
from shortlink.cli.terminal import RichTerminal, Terminal
from shortlink.core.config import get_app_config
from shortlink.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


async def run_shell(
    client: APIClient | None = None,
    terminal: Terminal | None = None,
    short_host: str | None = None,
) -> None:
    """
    Run one interactive session: bootstrap once, then the URL menu.

    Missing collaborators are built from config/settings/application.yaml.
    """
    client = client or APIClient()
    terminal = terminal or RichTerminal()
    if short_host is None:
        short_host = get_app_config().application.api.short_host

    terminal.emit("Welcome to the URL Shortener Client!", style="bold cyan")

    try:
        session = await SessionBootstrapper(client, terminal).run()
        if session is None:
            log_with_source(logger, "cli", "info", "Exited before authentication")
            return

        await OperationDispatcher(client, terminal, session, short_host).run()
        log_with_source(logger, "cli", "info", "Session ended", user_id=session.user_id)
    finally:
        await client.close()
        terminal.emit("Goodbye!", style="dim")
