"""Shared pytest fixtures for recorder tests."""

from collections.abc import Generator
from datetime import datetime

import pytest

from uirecorder.config import RecorderConfig
from uirecorder.events.recorder import EventRecorder, reset_event_recorder
from uirecorder.models.event import InteractionEvent
from uirecorder.storage import InMemoryFileSink


@pytest.fixture(autouse=True)
def reset_default_recorder() -> Generator[None, None, None]:
    """Drop the process-wide default recorder between tests."""
    reset_event_recorder()
    yield
    reset_event_recorder()


@pytest.fixture
def sink() -> InMemoryFileSink:
    """In-memory export destination."""
    return InMemoryFileSink("/exports")


@pytest.fixture
def recorder(sink: InMemoryFileSink) -> EventRecorder:
    """A fresh, stopped recorder writing exports to memory."""
    return EventRecorder(RecorderConfig(), sink=sink)


@pytest.fixture
def recording(recorder: EventRecorder) -> EventRecorder:
    """A recorder that has been started (buffer holds the start marker)."""
    recorder.start()
    return recorder


@pytest.fixture
def sample_event() -> InteractionEvent:
    """A tap event with every field populated."""
    return InteractionEvent(
        type="tap",
        screen="/home",
        widget_key="login_button",
        value=None,
        timestamp=datetime(2025, 1, 13, 10, 30, 0, 123000),
        meta={"key": "value"},
    )
