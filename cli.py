#!/usr/bin/env python3
"""
URL Shortener Client CLI.

Entry point for the interactive client session. Log in or create a user,
then shorten, list and resolve URLs against the backend configured in
config/settings/application.yaml.

Usage:
    python cli.py
    python cli.py --verbose
    python cli.py --debug
"""

import asyncio
import sys
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from shortlink.core.exceptions import ConfigurationError
from shortlink.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (Path.cwd() / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return Path.cwd()


@click.command()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging on stderr).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging on stderr).",
)
def main(verbose: bool, debug: bool) -> None:
    """
    URL Shortener Client.

    Starts an interactive session: log in or create a user, then pick
    operations from the numbered menu until you choose Exit.

    \b
    Examples:
        python cli.py
        python cli.py --debug
    """
    validate_project_root()

    from shortlink.cli.shell import run_shell

    try:
        if debug:
            setup_logging(level="DEBUG", format_type="console", enable_console=True)
        elif verbose:
            setup_logging(level="INFO", format_type="console", enable_console=True)
        else:
            setup_logging()

        structlog.contextvars.bind_contextvars(source="cli")
        logger.debug("CLI invoked", verbose=verbose, debug=debug)

        asyncio.run(run_shell())
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Session interrupted")
        click.echo("\nInterrupted.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
