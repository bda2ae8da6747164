"""
Event recorder service.

The recorder holds the interaction buffer, gates logging on the recording
flag and enabled event types, and notifies observers after each mutation.
"""

from uirecorder.events.recorder.base import RECORDING_STARTED, RECORDING_STOPPED
from uirecorder.events.recorder.composed import EventRecorder
from uirecorder.events.recorder.instance import (
    configure_event_recorder,
    get_event_recorder,
    reset_event_recorder,
)

__all__ = [
    "EventRecorder",
    "RECORDING_STARTED",
    "RECORDING_STOPPED",
    "configure_event_recorder",
    "get_event_recorder",
    "reset_event_recorder",
]
