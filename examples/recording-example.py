#!/usr/bin/env python3
"""
Recording Example - Demonstrates uirecorder from a host adapter's point of view.

This example shows how to:
1. Record taps, text input, scrolling and navigation
2. Mask sensitive text and track time spent on routes
3. Observe recorder changes as they happen
4. Export a session and load it back into a fresh recorder

Run with:
    python examples/recording-example.py
"""

import asyncio
import logging
import tempfile
from datetime import timedelta

from uirecorder import (
    ChangeKind,
    EventRecorder,
    EventType,
    LocalFileSink,
    NavigationTracker,
    RecorderChange,
    RecorderConfig,
    log_masked_text_input,
)
from uirecorder.logging import configure_logging

configure_logging(level=logging.WARNING)

# =============================================================================
# Example 1: Basic Recording
# =============================================================================


def example_basic_recording() -> EventRecorder:
    """Record a short login flow."""
    print("\n" + "=" * 60)
    print("Example 1: Basic Recording")
    print("=" * 60)

    recorder = EventRecorder()
    recorder.update_current_screen("/login")
    recorder.start()

    recorder.log_tap("email_field")
    log_masked_text_input(recorder, "email_field", "ada@example.com")
    log_masked_text_input(recorder, "password_field", "hunter2", is_sensitive=True)
    recorder.log_tap("login_button")
    recorder.log_navigation("/login", "/home")
    recorder.log_scroll("feed", "down", 420.0)

    recorder.stop()

    for event in recorder.events:
        print(f"  {event.type:<12} {event.screen:<8} {event.widget_key or '-':<16} {event.value}")

    return recorder


# =============================================================================
# Example 2: Observers and Filtering
# =============================================================================


def example_observers() -> None:
    """Watch changes while taps are filtered out."""
    print("\n" + "=" * 60)
    print("Example 2: Observers and Filtering")
    print("=" * 60)

    recorder = EventRecorder(RecorderConfig().without(EventType.TAP))

    def on_change(change: RecorderChange) -> None:
        detail = change.event.type if change.event else ""
        print(f"  [{change.kind.value}] events={change.event_count} {detail}")

    recorder.changes.subscribe(on_change, kinds={ChangeKind.STARTED, ChangeKind.EVENT_LOGGED, ChangeKind.STOPPED})

    recorder.start()
    recorder.log_tap("ignored_button")
    recorder.log_long_press("message")
    NavigationTracker(recorder).track_route_time("/home", timedelta(seconds=12))
    recorder.stop()


# =============================================================================
# Example 3: Export and Import
# =============================================================================


async def example_export(recorder: EventRecorder) -> None:
    """Export to a temporary directory and load the file back."""
    print("\n" + "=" * 60)
    print("Example 3: Export and Import")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as directory:
        exporter = EventRecorder(sink=LocalFileSink(directory))
        exporter.load_from_json(recorder.export_to_json())

        path = await exporter.export_to_file("session.json")
        print(f"  Written: {path}")

        restored = EventRecorder()
        with open(path, encoding="utf-8") as f:
            restored.load_from_json(f.read())

    print(f"  Restored {restored.event_count} events, identical: {restored.events == recorder.events}")
    print(f"  By type: {restored.get_event_statistics()}")
    for screen, activity in restored.get_screen_activity().items():
        print(f"  {screen}: {activity.event_count} events over {activity.duration_ms} ms")


if __name__ == "__main__":
    session = example_basic_recording()
    example_observers()
    asyncio.run(example_export(session))
