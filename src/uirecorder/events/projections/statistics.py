"""
Counting projections over recorded events.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from uirecorder.events.projections.base import Projection
from uirecorder.models.event import InteractionEvent, local_time


class EventCountProjection(Projection):
    """
    Counts events per type tag.

    Types that never occurred are absent from the state rather than
    reported as zero.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    @property
    def name(self) -> str:
        return "event_counts"

    def apply(self, event: InteractionEvent) -> None:
        self._counts[event.type] = self._counts.get(event.type, 0) + 1

    def get_state(self) -> dict[str, int]:
        return dict(self._counts)

    def reset(self) -> None:
        self._counts = {}


@dataclass
class ScreenActivity:
    """
    Aggregated activity for one screen.

    Loaded recordings may mix naive and offset-aware timestamps; ordering
    and durations use local time for both.
    """

    screen: str
    event_count: int
    first_seen: datetime
    last_seen: datetime

    @property
    def duration_ms(self) -> int:
        """Milliseconds between the first and last event on this screen."""
        return int((local_time(self.last_seen) - local_time(self.first_seen)).total_seconds() * 1000)


class ScreenActivityProjection(Projection):
    """Builds per-screen event counts and first/last activity times."""

    def __init__(self) -> None:
        self._screens: dict[str, ScreenActivity] = {}

    @property
    def name(self) -> str:
        return "screen_activity"

    def apply(self, event: InteractionEvent) -> None:
        activity = self._screens.get(event.screen)
        if activity is None:
            self._screens[event.screen] = ScreenActivity(
                screen=event.screen,
                event_count=1,
                first_seen=event.timestamp,
                last_seen=event.timestamp,
            )
            return

        activity.event_count += 1
        seen = local_time(event.timestamp)
        if seen < local_time(activity.first_seen):
            activity.first_seen = event.timestamp
        if seen > local_time(activity.last_seen):
            activity.last_seen = event.timestamp

    def get_state(self) -> dict[str, ScreenActivity]:
        return dict(self._screens)

    def reset(self) -> None:
        self._screens = {}
