"""structlog setup for the ``optres`` logger namespace.

The only records optres emits come from the catching adapters when
``log_caught`` is on. ``configure_logging`` gives the ``optres`` stdlib logger
its own structlog-rendered handler; the root logger and the application's
handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = ['LOGGER_NAME', 'configure_logging', 'get_logger']

LOGGER_NAME = 'optres'

_handler: logging.Handler | None = None


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Route optres records through structlog to ``stream`` (stderr by default).

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name for the ``optres`` logger. Unknown names mean INFO.
        json_output: JSON lines if True, otherwise structlog's console renderer.
        stream: Where rendered records go.

    Returns:
        The configured ``optres`` stdlib logger.
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler
    return library_logger


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.get_logger(name)
