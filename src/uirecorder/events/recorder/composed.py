"""
Composed EventRecorder class.

Combines the mixins into the EventRecorder hosts interact with.
"""

from __future__ import annotations

from uirecorder.events.recorder.base import EventRecorderBase
from uirecorder.events.recorder.export import ExportMixin
from uirecorder.events.recorder.interaction_events import InteractionEventsMixin
from uirecorder.events.recorder.queries import QueriesMixin


class EventRecorder(
    InteractionEventsMixin,
    QueriesMixin,
    ExportMixin,
    EventRecorderBase,
):
    """
    Records user interactions into an ordered in-memory buffer.

    Example:
        recorder = EventRecorder()
        recorder.subscribe(lambda change: print(change.kind, change.event_count))

        recorder.start()
        recorder.log_tap("login_button")
        recorder.log_navigation("/login", "/home")
        recorder.stop()

        payload = recorder.export_to_json()
    """
