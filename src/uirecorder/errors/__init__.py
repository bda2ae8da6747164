"""uirecorder error hierarchy."""

from uirecorder.errors.base import RecorderBaseException, RecorderError
from uirecorder.errors.recorder import ConfigurationError, EventParseError, ExportError

__all__ = [
    "ConfigurationError",
    "EventParseError",
    "ExportError",
    "RecorderBaseException",
    "RecorderError",
]
