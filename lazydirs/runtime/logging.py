"""Logging configuration shared by the CLI and interactive runtime.

Records go to a file because the TUI owns the terminal. ``structlog``'s
``ProcessorFormatter`` renders both stdlib and structlog records.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import structlog

LOG_LEVEL_ENV = "LAZYDIRS_LOG_LEVEL"
LOG_FILE_ENV = "LAZYDIRS_LOG_FILE"


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.WARNING
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging.getLevelNamesMapping().get(value.upper(), logging.WARNING)


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: Path | None = None,
    force: bool = False,
) -> Path | None:
    """Attach a file handler to the root logger and return the log path.

    Returns ``None`` when the log directory cannot be created; logging then
    stays unconfigured rather than failing the CLI.
    """
    resolved_level = _resolve_level(level or os.environ.get(LOG_LEVEL_ENV), debug)
    env_file = os.environ.get(LOG_FILE_ENV)
    if log_file is None:
        from .config import DEFAULT_LOG_PATH

        log_file = Path(env_file) if env_file else DEFAULT_LOG_PATH

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        _configure_structlog()
        return None

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=_pre_chain(),
        )
    )
    if force:
        root_logger.handlers.clear()
    root_logger.setLevel(resolved_level)
    root_logger.addHandler(handler)
    _configure_structlog()
    return log_file
