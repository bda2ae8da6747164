"""
Interaction logging mixin.

Convenience loggers used by host adapters. Each builds an event stamped
with the current screen and capture time and sends it through log_event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from uirecorder.models.event import EventType, InteractionEvent, capture_time


class InteractionEventsMixin:
    """Mixin providing log_tap, log_text_input, log_navigation and friends."""

    if TYPE_CHECKING:
        _current_screen: str
        _lock: Any

        def log_event(self, event: InteractionEvent) -> bool: ...

    def log_tap(self, widget_key: str, meta: dict[str, Any] | None = None) -> bool:
        """Record a tap on a widget."""
        return self.log_event(
            InteractionEvent(
                type=EventType.TAP,
                screen=self._current_screen,
                widget_key=widget_key,
                timestamp=capture_time(),
                meta=meta,
            )
        )

    def log_long_press(self, widget_key: str, meta: dict[str, Any] | None = None) -> bool:
        """Record a long press on a widget."""
        return self.log_event(
            InteractionEvent(
                type=EventType.LONG_PRESS,
                screen=self._current_screen,
                widget_key=widget_key,
                timestamp=capture_time(),
                meta=meta,
            )
        )

    def log_text_input(self, widget_key: str, value: str, meta: dict[str, Any] | None = None) -> bool:
        """
        Record text typed into a widget.

        The value is stored as given. Masking sensitive input is the
        caller's job (see uirecorder.tracking.mask_sensitive).
        """
        return self.log_event(
            InteractionEvent(
                type=EventType.TEXT_INPUT,
                screen=self._current_screen,
                widget_key=widget_key,
                value=value,
                timestamp=capture_time(),
                meta=meta,
            )
        )

    def log_scroll(
        self,
        widget_key: str,
        direction: str,
        distance: float,
        meta: dict[str, Any] | None = None,
    ) -> bool:
        """
        Record a scroll.

        ``direction`` ("up"/"down") becomes the value; ``distance`` is merged
        into meta, where an explicit ``distance`` key in ``meta`` wins.
        """
        return self.log_event(
            InteractionEvent(
                type=EventType.SCROLL,
                screen=self._current_screen,
                widget_key=widget_key,
                value=direction,
                timestamp=capture_time(),
                meta={"distance": distance, **(meta or {})},
            )
        )

    def log_navigation(self, from_screen: str, to_screen: str, meta: dict[str, Any] | None = None) -> bool:
        """
        Record a route change and make ``to_screen`` current.

        The current screen moves even when the navigation event itself is
        dropped by the recording gate, and it has already moved when
        observers are notified.
        """
        with self._lock:
            self._current_screen = to_screen
            return self.log_event(
                InteractionEvent(
                    type=EventType.NAVIGATION,
                    screen=from_screen,
                    value=to_screen,
                    timestamp=capture_time(),
                    meta=meta,
                )
            )

    def log_custom(self, name: str, value: str | None = None, meta: dict[str, Any] | None = None) -> bool:
        """Record an application-defined event; ``name`` becomes the widget key."""
        return self.log_event(
            InteractionEvent(
                type=EventType.CUSTOM,
                screen=self._current_screen,
                widget_key=name,
                value=value,
                timestamp=capture_time(),
                meta=meta,
            )
        )
