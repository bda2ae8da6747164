"""
Process-wide default recorder.

Hosts that prefer a single shared recorder can use get_event_recorder();
everything in the library also works with explicitly constructed
EventRecorder instances.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uirecorder.config import RecorderConfig
    from uirecorder.events.recorder.composed import EventRecorder
    from uirecorder.storage import FileSink

_event_recorder: EventRecorder | None = None
_recorder_lock = threading.Lock()


def get_event_recorder() -> EventRecorder:
    """Get the default recorder, creating it from the environment on first use."""
    global _event_recorder
    if _event_recorder is None:
        with _recorder_lock:
            if _event_recorder is None:
                from uirecorder.config import RecorderConfig
                from uirecorder.events.recorder.composed import EventRecorder

                _event_recorder = EventRecorder(RecorderConfig.from_env())
    return _event_recorder


def configure_event_recorder(
    config: RecorderConfig | None = None,
    sink: FileSink | None = None,
) -> EventRecorder:
    """
    Replace the default recorder.

    Args:
        config: Initial configuration.
        sink: Destination for export_to_file.

    Returns:
        The configured recorder.
    """
    from uirecorder.events.recorder.composed import EventRecorder

    global _event_recorder
    with _recorder_lock:
        _event_recorder = EventRecorder(config, sink=sink)
    return _event_recorder


def reset_event_recorder() -> None:
    """Drop the default recorder (for testing)."""
    global _event_recorder
    with _recorder_lock:
        _event_recorder = None
