"""Structured logging for uirecorder.

Recorder lifecycle, export and import failures are logged as structlog
events with key-value context. Output is either one JSON object per line
or plain console lines, always on stderr. Change bus handler errors go
through the standard library logger, which configure_logging also sets up.

Usage:
    from uirecorder.logging import configure_logging, get_logger

    configure_logging(json_format=True)

    logger = get_logger("myapp.adapter")
    logger.info("export_finished", path="/tmp/session.json", events=42)

Context binding:
    logger = get_logger("adapter").bind(screen="/checkout")
    logger.info("tap_forwarded", widget_key="pay_button")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

_configured = False


def configure_logging(
    json_format: bool = False,
    level: int = logging.INFO,
    logger_factory: Any = None,
) -> None:
    """Set up structlog and stdlib logging.

    Safe to call again; structlog settings from the latest call win.

    Args:
        json_format: Render JSON lines instead of console lines
        level: Minimum level for both structlog and stdlib loggers
        logger_factory: Replacement structlog logger factory
    """
    global _configured

    # stdlib logging carries the change bus handler errors
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory or structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Return a structlog logger, configuring defaults if nobody has yet."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs.

    Example:
        bind_context(session="checkout-flow")
        logger.info("recording_started")  # includes session
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
