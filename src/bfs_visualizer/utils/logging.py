"""Structured logging for the BFS Visualizer.

Console output in development, JSON lines elsewhere. Selection and
annotation enums are logged by their plain values.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from bfs_visualizer.config import AppSettings, get_settings

# Third-party loggers and the level they are held at
_QUIET_LOGGERS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
}


def enum_values(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace enum members in the event with their values."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _renderer(app: AppSettings) -> list[Processor]:
    if app.env == "development":
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(app: AppSettings | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        app: Application settings. Defaults to the cached settings.
    """
    app = app or get_settings().app

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            enum_values,
            *_renderer(app),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, app.log_level),
        force=True,
    )
    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


@contextmanager
def log_context(**context: Any) -> Iterator[None]:
    """Attach key-value pairs to every log emitted inside the block.

    Example:
        >>> with log_context(click_x=120, click_y=80):
        ...     machine.click((120, 80))
    """
    with structlog.contextvars.bound_contextvars(**context):
        yield
