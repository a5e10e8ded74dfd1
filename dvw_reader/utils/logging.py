"""Structured logging for the decoder.

Library modules emit through ``structlog.get_logger(__name__)`` and never
configure output. An application embedding the decoder calls
``setup_logging`` once to route those events through the stdlib root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from dvw_reader.utils.config import Settings, get_settings

_PRE_CHAIN: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.ExceptionRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _attach(root: logging.Logger, handler: logging.Handler, renderer: Processor) -> None:
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))
    root.addHandler(handler)


def setup_logging(settings: Settings | None = None) -> None:
    """
    Route decoder log events to stdout and, optionally, a JSON-lines file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: Logging settings. If None, uses the cached settings.

    Raises:
        OSError: If ``settings.log_file`` is set and cannot be opened.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    console_renderer: Processor = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    _attach(root, logging.StreamHandler(sys.stdout), console_renderer)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        _attach(root, file_handler, structlog.processors.JSONRenderer())

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def log_context(**kwargs: Any) -> None:
    """Bind key-value pairs to every log event of the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context(*keys: str) -> None:
    """
    Remove bound context keys.

    Args:
        *keys: Keys to remove. If none provided, clears all.
    """
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()
