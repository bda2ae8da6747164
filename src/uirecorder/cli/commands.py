"""CLI command implementations for uirecorder."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from uirecorder.errors import EventParseError
from uirecorder.events.recorder import EventRecorder
from uirecorder.models.event import InteractionEvent, parse_events


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


def _load(path: str) -> EventRecorder:
    """Load an exported recording into a fresh recorder."""
    text = _read(path)
    try:
        parse_events(text)
    except EventParseError as e:
        print(f"Error: {path} is not a valid recording: {e}", file=sys.stderr)
        sys.exit(1)

    recorder = EventRecorder()
    recorder.load_from_json(text)
    return recorder


def stats(path: str) -> None:
    """Print per-type and per-screen counts for an exported recording."""
    recorder = _load(path)

    print(f"Events: {recorder.event_count}")
    print()
    print("By type:")
    for event_type, count in sorted(recorder.get_event_statistics().items(), key=lambda kv: (-kv[1], kv[0])):
        print(f"  {event_type:<16} {count}")

    print()
    print("By screen:")
    for screen, activity in sorted(recorder.get_screen_activity().items()):
        print(f"  {screen:<24} {activity.event_count:>5}  {activity.duration_ms} ms")


def events(path: str, event_type: str | None = None, screen: str | None = None, as_json: bool = False) -> None:
    """List events from an exported recording, optionally filtered."""
    recorder = _load(path)

    selected: list[InteractionEvent]
    if event_type is not None:
        selected = recorder.get_events_by_type(event_type)
    else:
        selected = list(recorder.events)
    if screen is not None:
        selected = [e for e in selected if e.screen == screen]

    if as_json:
        print(json.dumps([e.to_dict() for e in selected], indent=2))
        return

    for e in selected:
        row = e.to_dict()
        print(f"{row['timestamp']}  {e.type:<12} {e.screen:<20} {e.widget_key or '-':<20} {e.value or ''}")


def validate(path: str) -> None:
    """Check that a file is a well-formed recording."""
    text = _read(path)
    try:
        loaded = parse_events(text)
    except EventParseError as e:
        print(f"INVALID: {e}")
        sys.exit(1)
    print(f"OK: {len(loaded)} events")
