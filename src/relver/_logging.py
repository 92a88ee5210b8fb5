"""structlog setup for relver.

The interpreter never configures logging itself. Host applications call
:func:`configure_logging` once at startup; library code only asks for a
logger through :func:`get_logger`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from relver.config.models import LoggingConfig


def get_logger(logger: Any | None = None, name: str = "relver") -> Any:
    """Return ``logger`` if one was injected, else the named structlog logger."""
    if logger is not None:
        return logger
    return structlog.get_logger(name)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog process-wide.

    Args:
        config: Logging configuration. Defaults to INFO level console output.
    """
    from relver.config.models import LoggingConfig

    config = config or LoggingConfig()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.format == "json":
        processors.extend(
            [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.rich_traceback)
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[config.level]
        ),
        cache_logger_on_first_use=False,
    )
