"""
Base projection class.

Projections are read-only views built by applying recorded events in
order, such as per-type counts or per-screen activity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from uirecorder.models.event import InteractionEvent


class Projection(ABC):
    """
    Abstract base class for projections.

    Projections are stateful and should be reset before replaying a
    buffer from the beginning.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this projection."""
        pass

    @abstractmethod
    def apply(self, event: InteractionEvent) -> None:
        """Apply an event to update the projection state."""
        pass

    @abstractmethod
    def get_state(self) -> Any:
        """Get the current projection state."""
        pass

    def reset(self) -> None:
        """Reset the projection to its initial state."""
        pass

    def handles_event_type(self, event: InteractionEvent) -> bool:
        """Check if this projection handles the given event. All by default."""
        return True

    def rebuild(self, events: Iterable[InteractionEvent]) -> Any:
        """Reset, apply every handled event in order, and return the state."""
        self.reset()
        for event in events:
            if self.handles_event_type(event):
                self.apply(event)
        return self.get_state()
