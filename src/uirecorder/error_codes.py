"""
Structured error codes for uirecorder.

Provides semantic error classification and exception chain traversal.

Usage:
    from uirecorder.error_codes import ErrorCode, error_chain, classify_error

    try:
        events = parse_events(text)
    except Exception as e:
        if classify_error(e) == ErrorCode.PARSE_FAILED:
            ...
"""

from __future__ import annotations

import json
from enum import Enum


class ErrorCode(Enum):
    """Semantic error codes for categorizing exceptions.

    Hosts use these to decide whether a failure should be surfaced to the
    user, logged, or ignored.
    """

    # General errors
    UNKNOWN = "UNKNOWN"
    SYSTEM_ERROR = "SYSTEM_ERROR"

    # Import errors
    PARSE_FAILED = "PARSE_FAILED"

    # Export errors
    EXPORT_FAILED = "EXPORT_FAILED"

    # Configuration errors
    CONFIGURATION_INVALID = "CONFIGURATION_INVALID"


def error_chain(error: Exception) -> list[Exception]:
    """Return the exception chain from root cause to leaf.

    Follows ``__cause__`` first and falls back to ``__context__`` unless
    context was suppressed with ``raise ... from None``.

    Args:
        error: The outermost exception

    Returns:
        List of exceptions ordered root first
    """
    chain: list[Exception] = []
    seen: set[int] = set()
    current: BaseException | None = error

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, Exception):
            chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None

    chain.reverse()
    return chain


def find_in_chain(error: Exception, error_type: type) -> Exception | None:
    """Find the first exception of ``error_type`` walking from the leaf."""
    for item in reversed(error_chain(error)):
        if isinstance(item, error_type):
            return item
    return None


def classify_error(error: Exception) -> ErrorCode:
    """Classify an exception into a semantic ErrorCode.

    Recorder errors carry their own code. Standard library errors are
    mapped by type: JSON decoding problems count as parse failures and
    OS-level errors as export failures.
    """
    from uirecorder.errors.base import RecorderBaseException

    recorder_error = find_in_chain(error, RecorderBaseException)
    if recorder_error is not None:
        return recorder_error.error_code  # type: ignore[attr-defined]

    if isinstance(error, (json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCode.PARSE_FAILED

    if isinstance(error, OSError):
        return ErrorCode.EXPORT_FAILED

    return ErrorCode.UNKNOWN
