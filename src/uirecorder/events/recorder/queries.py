"""
Read-only queries over the recorded buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from uirecorder.events.projections import EventCountProjection, ScreenActivity, ScreenActivityProjection
from uirecorder.models.event import EventType, InteractionEvent, type_tag


class QueriesMixin:
    """Mixin providing filters and statistics. None of these mutate state."""

    if TYPE_CHECKING:
        _events: list[InteractionEvent]
        _lock: Any

    def get_events_by_type(self, event_type: str | EventType) -> list[InteractionEvent]:
        """Events of one type, in recording order."""
        tag = type_tag(event_type)
        with self._lock:
            return [e for e in self._events if e.type == tag]

    def get_events_by_screen(self, screen: str) -> list[InteractionEvent]:
        """Events captured on one screen, in recording order."""
        with self._lock:
            return [e for e in self._events if e.screen == screen]

    def get_event_statistics(self) -> dict[str, int]:
        """Count of buffered events per type tag; absent types are omitted."""
        with self._lock:
            return EventCountProjection().rebuild(self._events)

    def get_screen_activity(self) -> dict[str, ScreenActivity]:
        """Per-screen event counts and first/last activity times."""
        with self._lock:
            return ScreenActivityProjection().rebuild(self._events)
