"""
Interaction event model.

Defines the immutable event record captured by the recorder, the fixed
vocabulary of event type tags, and the JSON wire codec used by export and
import. Events are plain values: two events with the same fields compare
equal, which is what makes export followed by load lossless.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union

from uirecorder.errors import EventParseError

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

TIMESTAMP_PRECISION = "milliseconds"


class EventType(str, Enum):
    """
    Known interaction event type tags.

    Events may carry any string tag; these are the ones the recorder
    enables by default and the convenience loggers emit.
    """

    TAP = "tap"
    LONG_PRESS = "long_press"
    TEXT_INPUT = "text_input"
    SCROLL = "scroll"
    NAVIGATION = "navigation"
    DIALOG = "dialog"
    BOTTOM_SHEET = "bottom_sheet"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


ALL_EVENT_TYPES: frozenset[str] = frozenset(t.value for t in EventType)


def type_tag(event_type: str | EventType) -> str:
    """Return the plain string tag for an event type."""
    if isinstance(event_type, EventType):
        return event_type.value
    return str(event_type)


def capture_time() -> datetime:
    """Current local time truncated to millisecond precision."""
    now = datetime.now()
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp as ISO-8601 with millisecond precision."""
    return timestamp.isoformat(timespec=TIMESTAMP_PRECISION)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def local_time(timestamp: datetime) -> datetime:
    """Naive local time for a timestamp; offset-aware values are converted."""
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone().replace(tzinfo=None)


def to_json_value(value: Any) -> JsonValue:
    """
    Normalize an arbitrary value into a JSON value tree.

    Mappings become dicts with string keys, other iterables (lists, tuples,
    sets) become lists. Non-finite floats and unknown objects are stored as
    their string form, so serialization of the result cannot fail.
    """
    if isinstance(value, Enum):
        return to_json_value(value.value)
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json_value(v) for v in value]
    return str(value)


@dataclass(frozen=True)
class InteractionEvent:
    """
    Immutable record of one user interaction.

    Attributes:
        type: Event type tag (see EventType); custom tags are allowed.
        screen: Logical screen/route active when the event occurred.
        timestamp: Capture time.
        widget_key: Caller-assigned identifier of the interacting widget.
        value: Event payload (typed text, scroll direction, target route).
        meta: Free-form annotations, normalized to JSON values.
    """

    type: str
    screen: str
    timestamp: datetime = field(default_factory=capture_time)
    widget_key: str | None = None
    value: str | None = None
    meta: dict[str, JsonValue] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", type_tag(self.type))
        if self.meta is not None:
            object.__setattr__(self, "meta", to_json_value(dict(self.meta)))

    def to_dict(self) -> dict[str, Any]:
        """Convert the event to its wire shape."""
        return {
            "type": self.type,
            "screen": self.screen,
            "widgetKey": self.widget_key,
            "value": self.value,
            "timestamp": format_timestamp(self.timestamp),
            "meta": self.meta,
        }

    @classmethod
    def from_dict(cls, data: Any, index: int | None = None) -> InteractionEvent:
        """
        Create an event from its wire shape.

        ``type``, ``screen`` and ``timestamp`` are required strings;
        ``widgetKey`` and ``value`` must be strings or null; ``meta`` must be
        an object or null. Missing optional keys read as null.

        Raises:
            EventParseError: If the shape is wrong.
        """
        if not isinstance(data, dict):
            raise EventParseError(f"expected an object, got {type(data).__name__}", index=index)

        for key in ("type", "screen", "timestamp"):
            if not isinstance(data.get(key), str):
                raise EventParseError(f"'{key}' must be a string", index=index)

        for key in ("widgetKey", "value"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise EventParseError(f"'{key}' must be a string or null", index=index)

        meta = data.get("meta")
        if meta is not None and not isinstance(meta, dict):
            raise EventParseError("'meta' must be an object or null", index=index)

        try:
            timestamp = parse_timestamp(data["timestamp"])
        except ValueError as e:
            raise EventParseError(f"invalid timestamp {data['timestamp']!r}", index=index, cause=e) from e

        return cls(
            type=data["type"],
            screen=data["screen"],
            timestamp=timestamp,
            widget_key=data.get("widgetKey"),
            value=data.get("value"),
            meta=meta,
        )

    def __repr__(self) -> str:
        return (
            f"InteractionEvent(type={self.type}, screen={self.screen}, "
            f"widget_key={self.widget_key}, value={self.value}, "
            f"timestamp={format_timestamp(self.timestamp)})"
        )


def dump_events(events: Iterable[InteractionEvent]) -> str:
    """Serialize events, in order, to a JSON array."""
    return json.dumps([event.to_dict() for event in events])


def parse_events(text: str | bytes) -> list[InteractionEvent]:
    """
    Parse a JSON array of events.

    Either every element parses or nothing is returned.

    Raises:
        EventParseError: On malformed JSON or a wrong shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise EventParseError(f"malformed JSON: {e}", cause=e) from e
    except RecursionError as e:
        raise EventParseError("document nested too deeply", cause=e) from e

    if not isinstance(data, list):
        raise EventParseError(f"expected a JSON array, got {type(data).__name__}")

    events: list[InteractionEvent] = []
    for i, item in enumerate(data):
        try:
            events.append(InteractionEvent.from_dict(item, index=i))
        except RecursionError as e:
            raise EventParseError("meta nested too deeply", index=i, cause=e) from e
    return events
