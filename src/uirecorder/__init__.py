"""
uirecorder - framework-agnostic UI interaction recorder.

Host adapters (gesture handlers, text fields, scroll views, route
observers) forward user interactions to an EventRecorder, which keeps an
ordered in-memory buffer with:
- A recording on/off gate and per-type filtering
- Current-screen tracking driven by navigation events
- Synchronous change notifications for observers
- Per-type and per-screen statistics
- Lossless JSON export/import and asynchronous export to files
"""

__version__ = "0.3.0"

from uirecorder.config import RecorderConfig
from uirecorder.errors import (
    ConfigurationError,
    EventParseError,
    ExportError,
    RecorderBaseException,
    RecorderError,
)
from uirecorder.events import (
    ChangeBus,
    ChangeKind,
    EventRecorder,
    RecorderChange,
    configure_event_recorder,
    get_event_recorder,
    reset_event_recorder,
)
from uirecorder.models import EventType, InteractionEvent, dump_events, parse_events
from uirecorder.storage import FileSink, InMemoryFileSink, LocalFileSink
from uirecorder.tracking import (
    SENSITIVE_PLACEHOLDER,
    NavigationTracker,
    log_masked_text_input,
    mask_sensitive,
)

__all__ = [
    "__version__",
    # Models
    "EventType",
    "InteractionEvent",
    "dump_events",
    "parse_events",
    # Configuration
    "RecorderConfig",
    # Recorder
    "EventRecorder",
    "ChangeBus",
    "ChangeKind",
    "RecorderChange",
    "configure_event_recorder",
    "get_event_recorder",
    "reset_event_recorder",
    # Storage
    "FileSink",
    "LocalFileSink",
    "InMemoryFileSink",
    # Tracking helpers
    "SENSITIVE_PLACEHOLDER",
    "NavigationTracker",
    "log_masked_text_input",
    "mask_sensitive",
    # Errors
    "RecorderBaseException",
    "RecorderError",
    "EventParseError",
    "ExportError",
    "ConfigurationError",
]
