"""
EventRecorderBase - recorder state and the single logging gate.

Owns the buffer, the recording flag, the current screen and the
configuration. Every mutation runs under one re-entrant lock together with
its change notification, so observers always see the state the mutation
produced and may read the recorder from inside a handler.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from uirecorder.config import RecorderConfig
from uirecorder.events.bus import ChangeBus, ChangeKind, RecorderChange
from uirecorder.logging import get_logger
from uirecorder.models.event import EventType, InteractionEvent, capture_time

if TYPE_CHECKING:
    from uirecorder.storage import FileSink

DEFAULT_SCREEN = "/"

RECORDING_STARTED = "Recording started"
RECORDING_STOPPED = "Recording stopped"


class EventRecorderBase:
    """
    Recording state machine: Stopped -> Recording -> Stopped.

    Provides start/stop, the log_event gate, clear, current-screen tracking
    and configuration updates.
    """

    def __init__(
        self,
        config: RecorderConfig | None = None,
        sink: FileSink | None = None,
        bus: ChangeBus | None = None,
    ) -> None:
        """
        Initialize the recorder.

        Args:
            config: Initial configuration (defaults to RecorderConfig()).
            sink: Destination for export_to_file (defaults to LocalFileSink.from_env()).
            bus: Change bus for observers (a private one is created if omitted).
        """
        config = config or RecorderConfig()
        config.validate()

        self._events: list[InteractionEvent] = []
        self._is_recording = False
        self._current_screen = DEFAULT_SCREEN
        self._config = config
        self._sink = sink
        self._bus = bus or ChangeBus()
        self._lock = threading.RLock()
        self._over_capacity_warned = False
        self._log = get_logger("uirecorder.recorder")

    @property
    def events(self) -> tuple[InteractionEvent, ...]:
        """Immutable snapshot of the buffer, in recording order."""
        with self._lock:
            return tuple(self._events)

    @property
    def event_count(self) -> int:
        with self._lock:
            return len(self._events)

    @property
    def is_recording(self) -> bool:
        return self._is_recording

    @property
    def current_screen(self) -> str:
        return self._current_screen

    @property
    def config(self) -> RecorderConfig:
        return self._config

    @property
    def changes(self) -> ChangeBus:
        """The change bus observers subscribe to."""
        return self._bus

    def subscribe(self, handler: Callable[[RecorderChange], Any], subscription_id: str | None = None) -> str:
        """Register a change observer; returns its subscription ID."""
        return self._bus.subscribe(handler, subscription_id=subscription_id)

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a change observer."""
        return self._bus.unsubscribe(subscription_id)

    def start(self) -> None:
        """
        Start recording.

        Clears the buffer and appends a synthetic ``custom`` event marking
        the start, regardless of the enabled event types. No-op if already
        recording.
        """
        with self._lock:
            if self._is_recording:
                return

            self._is_recording = True
            self._events.clear()
            self._over_capacity_warned = False
            marker = InteractionEvent(
                type=EventType.CUSTOM,
                screen=self._current_screen,
                value=RECORDING_STARTED,
                timestamp=capture_time(),
                meta={"action": "start_recording"},
            )
            self._append(marker)
            self._log.info("recording_started", screen=self._current_screen)
            self._notify(ChangeKind.STARTED, marker)

    def stop(self) -> None:
        """
        Stop recording.

        The synthetic stop event passes through the gate while the recorder
        is still recording, so it is dropped only if ``custom`` events are
        disabled. No-op if already stopped.
        """
        with self._lock:
            if not self._is_recording:
                return

            marker = InteractionEvent(
                type=EventType.CUSTOM,
                screen=self._current_screen,
                value=RECORDING_STOPPED,
                timestamp=capture_time(),
                meta={"action": "stop_recording"},
            )
            appended = self._admit(marker)
            self._is_recording = False
            self._log.info("recording_stopped", events=len(self._events))
            self._notify(ChangeKind.STOPPED, marker if appended else None)

    def log_event(self, event: InteractionEvent) -> bool:
        """
        Record an event if recording and its type is enabled.

        Dropped events are silent: no error and no notification.

        Returns:
            True if the event was appended.
        """
        with self._lock:
            if not self._admit(event):
                return False
            self._notify(ChangeKind.EVENT_LOGGED, event)
            return True

    def update_current_screen(self, screen: str) -> None:
        """Set the current screen without logging or notifying."""
        with self._lock:
            self._current_screen = screen

    def clear(self) -> None:
        """Empty the buffer. Recording state is unchanged."""
        with self._lock:
            self._events.clear()
            self._over_capacity_warned = False
            self._notify(ChangeKind.CLEARED)

    def update_config(self, config: RecorderConfig) -> None:
        """
        Replace the configuration wholesale.

        Only future log_event calls are affected; buffered events stay.

        Raises:
            ConfigurationError: If the new configuration is invalid.
        """
        config.validate()
        with self._lock:
            self._config = config
            self._log.debug("config_updated", **config.to_dict())
            self._notify(ChangeKind.CONFIG_UPDATED)

    def _admit(self, event: InteractionEvent) -> bool:
        if not self._is_recording:
            return False
        if not self._config.is_enabled(event.type):
            return False
        self._append(event)
        return True

    def _append(self, event: InteractionEvent) -> None:
        self._events.append(event)
        self._log.debug("event_logged", type=event.type, screen=event.screen)

        # max_events is advisory; the buffer is never trimmed
        if not self._over_capacity_warned and len(self._events) > self._config.max_events:
            self._over_capacity_warned = True
            self._log.warning(
                "buffer_over_capacity",
                events=len(self._events),
                max_events=self._config.max_events,
            )

    def _notify(self, kind: ChangeKind, event: InteractionEvent | None = None) -> None:
        self._bus.publish(RecorderChange(kind=kind, event_count=len(self._events), event=event))
