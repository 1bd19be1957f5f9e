"""
Client Logging.

structlog on top of stdlib logging, configured from the validated
config/settings/logging.yaml. Records go to a rotating JSON lines file by
default; the console handler writes to stderr so log output never mixes
with the interactive menus on stdout.

Fields in every JSON record: timestamp, level, logger, event, func_name,
lineno, plus any bound context such as source="cli".

Usage:
    from shortlink.core.logging import get_logger, setup_logging

    setup_logging()
    setup_logging(level="DEBUG", format_type="console", enable_console=True)

    logger = get_logger(__name__)
    log_with_source(logger, "cli", "info", "Login succeeded", user_id="u1")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from shortlink.core.config import find_project_root, get_app_config


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve the log file path relative to project root."""
    path = Path(configured_path)
    if path.is_absolute():
        return path
    return find_project_root() / path


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the client.

    Settings come from the validated logging.yaml; arguments override them.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Console format, 'json' or 'console'
        enable_console: Whether to log to stderr
        enable_file_logging: Whether to write the JSON lines file

    Raises:
        ConfigurationError: If logging.yaml is missing or invalid
    """
    config = get_app_config().logging
    console_config = config.handlers.console
    file_config = config.handlers.file

    effective_level = level if level is not None else config.level
    effective_format = format_type if format_type is not None else config.format
    effective_console_enabled = (
        enable_console if enable_console is not None else console_config.enabled
    )
    effective_file_enabled = (
        enable_file_logging if enable_file_logging is not None else file_config.enabled
    )

    log_level = getattr(logging, effective_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=shared_processors,
        )
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if effective_console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if effective_file_enabled:
        log_path = _resolve_log_path(file_config.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=file_config.max_bytes,
            backupCount=file_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message tagged with an explicit source ("cli" for operator actions).

    Example:
        log_with_source(logger, "cli", "info", "URL shortened", status_code=200)
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
