"""Structured logging configuration using structlog.

Console output for development, JSON lines for production. Evaluation
identifiers (the active mode and the preset name, if any) are carried in
context variables so every log line of one evaluation can be correlated.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from fixturecalc.config import settings

_mode: ContextVar[str | None] = ContextVar("mode", default=None)
_preset: ContextVar[str | None] = ContextVar("preset", default=None)


def set_evaluation_context(
    mode: str | None = None,
    preset: str | None = None,
) -> None:
    """Set correlation fields for the current evaluation.

    Args:
        mode: Active primary dimension mode.
        preset: Name of the example preset being evaluated, if any.
    """
    if mode is not None:
        _mode.set(mode)
    if preset is not None:
        _preset.set(preset)


def clear_evaluation_context() -> None:
    """Clear all correlation context variables."""
    _mode.set(None)
    _preset.set(None)


def _add_evaluation_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add evaluation context to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    mode = _mode.get()
    preset = _preset.get()

    if mode is not None:
        event_dict["mode"] = mode
    if preset is not None:
        event_dict["preset"] = preset

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_evaluation_context,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
