"""Recorder configuration.

RecorderConfig is an immutable value: the recorder replaces it wholesale on
update and never filters events that are already buffered.

Environment Variables:
    UIRECORDER_ENABLED_EVENT_TYPES: Comma separated type tags to record
    UIRECORDER_INCLUDE_SENSITIVE_DATA: Record unmasked sensitive text (true/false)
    UIRECORDER_MAX_EVENTS: Advisory buffer size
    UIRECORDER_AUTO_SAVE: Advisory auto-save switch (true/false)
    UIRECORDER_AUTO_SAVE_INTERVAL: Advisory auto-save interval in seconds
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from uirecorder.errors import ConfigurationError
from uirecorder.models.event import ALL_EVENT_TYPES, EventType, type_tag

DEFAULT_MAX_EVENTS = 1000
DEFAULT_AUTO_SAVE_INTERVAL = 60

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class RecorderConfig:
    """Configuration for an EventRecorder.

    Attributes:
        enabled_event_types: Type tags that pass the recording gate
        include_sensitive_data: Whether adapters may record unmasked sensitive text
        max_events: Advisory buffer size; the recorder never evicts
        auto_save: Advisory auto-save switch for hosts that schedule exports
        auto_save_interval: Advisory auto-save interval in seconds
    """

    enabled_event_types: frozenset[str] = field(default=ALL_EVENT_TYPES)
    include_sensitive_data: bool = False
    max_events: int = DEFAULT_MAX_EVENTS
    auto_save: bool = False
    auto_save_interval: int = DEFAULT_AUTO_SAVE_INTERVAL

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "enabled_event_types",
            frozenset(type_tag(t) for t in self.enabled_event_types),
        )

    def is_enabled(self, event_type: str | EventType) -> bool:
        """Check whether events of this type pass the recording gate."""
        return type_tag(event_type) in self.enabled_event_types

    def with_updates(self, **changes: Any) -> RecorderConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_enabled(self, event_types: Iterable[str | EventType]) -> RecorderConfig:
        """Return a copy recording only the given event types."""
        return replace(self, enabled_event_types=frozenset(type_tag(t) for t in event_types))

    def without(self, *event_types: str | EventType) -> RecorderConfig:
        """Return a copy with the given event types disabled."""
        disabled = {type_tag(t) for t in event_types}
        return replace(self, enabled_event_types=self.enabled_event_types - disabled)

    def validate(self) -> None:
        """Check the configuration for invalid values.

        Raises:
            ConfigurationError: If max_events is negative or the auto-save
                interval is not positive.
        """
        if self.max_events < 0:
            raise ConfigurationError(f"max_events must be >= 0, got {self.max_events}")
        if self.auto_save_interval <= 0:
            raise ConfigurationError(f"auto_save_interval must be > 0, got {self.auto_save_interval}")

    @classmethod
    def from_env(cls) -> RecorderConfig:
        """Load configuration from environment variables.

        Invalid values fall back to defaults.
        """
        types_str = os.getenv("UIRECORDER_ENABLED_EVENT_TYPES")
        if types_str is not None and types_str.strip():
            enabled = frozenset(t.strip() for t in types_str.split(",") if t.strip())
        else:
            enabled = ALL_EVENT_TYPES

        return cls(
            enabled_event_types=enabled,
            include_sensitive_data=_parse_bool_env("UIRECORDER_INCLUDE_SENSITIVE_DATA", False),
            max_events=_parse_int_env("UIRECORDER_MAX_EVENTS", DEFAULT_MAX_EVENTS, minimum=0),
            auto_save=_parse_bool_env("UIRECORDER_AUTO_SAVE", False),
            auto_save_interval=_parse_int_env(
                "UIRECORDER_AUTO_SAVE_INTERVAL", DEFAULT_AUTO_SAVE_INTERVAL, minimum=1
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/debugging."""
        return {
            "enabled_event_types": sorted(self.enabled_event_types),
            "include_sensitive_data": self.include_sensitive_data,
            "max_events": self.max_events,
            "auto_save": self.auto_save,
            "auto_save_interval": self.auto_save_interval,
        }


def _parse_int_env(name: str, default: int, minimum: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default
