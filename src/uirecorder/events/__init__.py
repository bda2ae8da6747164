"""
Interaction event recording for uirecorder.

Quick Start:
    from uirecorder.events import EventRecorder, ChangeKind

    recorder = EventRecorder()
    recorder.changes.subscribe(
        lambda change: print(change.kind.value, change.event_count),
        kinds={ChangeKind.EVENT_LOGGED},
    )

    recorder.start()
    recorder.log_tap("login_button")
    recorder.stop()

    print(recorder.get_event_statistics())
"""

# Change notification
from uirecorder.events.bus import (
    ChangeBus,
    ChangeBusStats,
    ChangeKind,
    RecorderChange,
    Subscription,
)

# Projections
from uirecorder.events.projections import (
    EventCountProjection,
    Projection,
    ScreenActivity,
    ScreenActivityProjection,
)

# Recorder
from uirecorder.events.recorder import (
    RECORDING_STARTED,
    RECORDING_STOPPED,
    EventRecorder,
    configure_event_recorder,
    get_event_recorder,
    reset_event_recorder,
)

__all__ = [
    # Change notification
    "ChangeBus",
    "ChangeBusStats",
    "ChangeKind",
    "RecorderChange",
    "Subscription",
    # Projections
    "Projection",
    "EventCountProjection",
    "ScreenActivity",
    "ScreenActivityProjection",
    # Recorder
    "EventRecorder",
    "RECORDING_STARTED",
    "RECORDING_STOPPED",
    "configure_event_recorder",
    "get_event_recorder",
    "reset_event_recorder",
]
