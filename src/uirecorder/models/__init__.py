"""Core data models for recorded interactions."""

from uirecorder.models.event import (
    ALL_EVENT_TYPES,
    EventType,
    InteractionEvent,
    JsonValue,
    dump_events,
    parse_events,
)

__all__ = [
    "ALL_EVENT_TYPES",
    "EventType",
    "InteractionEvent",
    "JsonValue",
    "dump_events",
    "parse_events",
]
