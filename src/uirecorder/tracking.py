"""
Framework-agnostic helpers for host adapters.

Adapters call these before or instead of the recorder's convenience
loggers: masking sensitive text and tracking route timing and errors.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

from uirecorder.models.event import capture_time, format_timestamp

if TYPE_CHECKING:
    from uirecorder.events.recorder import EventRecorder

SENSITIVE_PLACEHOLDER = "[SENSITIVE]"


def mask_sensitive(value: str, is_sensitive: bool, include_sensitive_data: bool = False) -> str:
    """
    Mask text from a sensitive field before it is logged.

    Args:
        value: The text as typed.
        is_sensitive: Whether the field holds sensitive data (passwords etc.).
        include_sensitive_data: Record the real text anyway, typically
            ``recorder.config.include_sensitive_data``.

    Returns:
        The value, or SENSITIVE_PLACEHOLDER when it must be hidden.
    """
    if is_sensitive and not include_sensitive_data:
        return SENSITIVE_PLACEHOLDER
    return value


def log_masked_text_input(
    recorder: EventRecorder,
    widget_key: str,
    value: str,
    is_sensitive: bool = False,
    meta: dict[str, Any] | None = None,
) -> bool:
    """
    Log text input with masking driven by the recorder's configuration.

    Adds ``length`` and ``isSensitive`` to meta; the length is always that
    of the real text.
    """
    recorded = mask_sensitive(value, is_sensitive, recorder.config.include_sensitive_data)
    return recorder.log_text_input(
        widget_key,
        recorded,
        meta={"length": len(value), "isSensitive": is_sensitive, **(meta or {})},
    )


class NavigationTracker:
    """Records route-level custom events on a recorder."""

    def __init__(self, recorder: EventRecorder) -> None:
        self._recorder = recorder

    def track_navigation(self, route_name: str, meta: dict[str, Any] | None = None) -> bool:
        """Record that a route was visited."""
        return self._recorder.log_custom(
            "navigation_tracked",
            value=route_name,
            meta={"timestamp": format_timestamp(capture_time()), **(meta or {})},
        )

    def track_route_time(
        self,
        route_name: str,
        time_spent: timedelta,
        meta: dict[str, Any] | None = None,
    ) -> bool:
        """Record how long the user stayed on a route."""
        return self._recorder.log_custom(
            "route_time",
            value=route_name,
            meta={
                "timeSpentMs": int(time_spent.total_seconds() * 1000),
                "timeSpentSeconds": int(time_spent.total_seconds()),
                **(meta or {}),
            },
        )

    def track_route_error(self, route_name: str, error: str, meta: dict[str, Any] | None = None) -> bool:
        """Record an error raised while showing a route."""
        return self._recorder.log_custom(
            "route_error",
            value=route_name,
            meta={
                "error": error,
                "timestamp": format_timestamp(capture_time()),
                **(meta or {}),
            },
        )
