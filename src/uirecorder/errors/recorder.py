"""Errors raised around the recorder boundary."""

from __future__ import annotations

from uirecorder.error_codes import ErrorCode
from uirecorder.errors.base import RecorderError


class EventParseError(RecorderError):
    """Malformed JSON or wrong shape while loading recorded events.

    Attributes:
        index: Position of the offending event in the array, if known
    """

    code: int = 201
    default_error_code = ErrorCode.PARSE_FAILED

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        if index is not None:
            message = f"event[{index}]: {message}"
        super().__init__(message, cause=cause)
        self.index = index


class ExportError(RecorderError):
    """Recorded events could not be written to storage."""

    code: int = 202
    default_error_code = ErrorCode.EXPORT_FAILED

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class ConfigurationError(RecorderError):
    """Invalid recorder configuration."""

    code: int = 104
    default_error_code = ErrorCode.CONFIGURATION_INVALID
