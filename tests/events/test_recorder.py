"""Tests for EventRecorder state, gating and notifications."""

import json
import threading

import pytest

from uirecorder.config import RecorderConfig
from uirecorder.errors import ConfigurationError
from uirecorder.events.bus import ChangeKind, RecorderChange
from uirecorder.events.recorder import (
    RECORDING_STARTED,
    RECORDING_STOPPED,
    EventRecorder,
    configure_event_recorder,
    get_event_recorder,
    reset_event_recorder,
)
from uirecorder.models.event import ALL_EVENT_TYPES, EventType, InteractionEvent


def _kinds(changes: list[RecorderChange]) -> list[ChangeKind]:
    return [c.kind for c in changes]


class TestRecordingState:
    """Tests for start/stop transitions."""

    def test_initial_state(self, recorder: EventRecorder) -> None:
        """A new recorder is stopped, empty and on the root screen."""
        assert recorder.is_recording is False
        assert recorder.events == ()
        assert recorder.current_screen == "/"
        assert recorder.config == RecorderConfig()

    def test_start_appends_marker(self, recorder: EventRecorder) -> None:
        """start() leaves exactly one custom start event."""
        recorder.start()

        assert recorder.is_recording is True
        assert recorder.event_count == 1
        marker = recorder.events[0]
        assert marker.type == "custom"
        assert marker.value == RECORDING_STARTED
        assert marker.meta == {"action": "start_recording"}

    def test_start_resets_buffer(self, recorder: EventRecorder) -> None:
        """Restarting discards everything recorded before."""
        recorder.start()
        for i in range(5):
            recorder.log_tap(f"button_{i}")
        recorder.stop()

        recorder.start()

        assert recorder.event_count == 1
        assert recorder.events[0].value == RECORDING_STARTED

    def test_start_marker_bypasses_type_filter(self, recorder: EventRecorder) -> None:
        """The start marker is appended even with custom events disabled."""
        recorder.update_config(RecorderConfig().without(EventType.CUSTOM))
        recorder.start()

        assert recorder.event_count == 1

    def test_start_when_recording_is_noop(self, recording: EventRecorder) -> None:
        """A second start() keeps the buffer and does not notify."""
        recording.log_tap("btn")
        changes: list[RecorderChange] = []
        recording.subscribe(changes.append)

        recording.start()

        assert recording.event_count == 2
        assert changes == []

    def test_stop_appends_marker(self, recording: EventRecorder) -> None:
        """stop() records a custom stop event, then stops."""
        recording.stop()

        assert recording.is_recording is False
        assert recording.event_count == 2
        marker = recording.events[-1]
        assert marker.type == "custom"
        assert marker.value == RECORDING_STOPPED
        assert marker.meta == {"action": "stop_recording"}

    def test_stop_marker_respects_type_filter(self, recording: EventRecorder) -> None:
        """With custom events disabled the stop marker is dropped."""
        recording.update_config(RecorderConfig().without("custom"))
        recording.stop()

        assert recording.is_recording is False
        assert recording.event_count == 1

    def test_stop_when_stopped_is_noop(self, recorder: EventRecorder) -> None:
        """stop() on a stopped recorder changes nothing and does not notify."""
        changes: list[RecorderChange] = []
        recorder.subscribe(changes.append)

        recorder.stop()

        assert recorder.events == ()
        assert changes == []


class TestLogEventGate:
    """Tests for the log_event gate."""

    def test_dropped_when_stopped(self, recorder: EventRecorder) -> None:
        """Nothing is recorded while stopped."""
        assert recorder.log_tap("btn") is False
        assert recorder.log_long_press("btn") is False
        assert recorder.log_text_input("field", "hi") is False
        assert recorder.log_scroll("list", "down", 10.0) is False
        assert recorder.log_navigation("/a", "/b") is False
        assert recorder.log_custom("thing") is False

        assert recorder.event_count == 0

    @pytest.mark.parametrize("disabled", sorted(ALL_EVENT_TYPES - {"custom"}))
    def test_dropped_when_type_disabled(self, recording: EventRecorder, disabled: str) -> None:
        """Events of a disabled type leave the buffer unchanged."""
        recording.update_config(RecorderConfig().without(disabled))
        before = recording.event_count

        appended = recording.log_event(InteractionEvent(type=disabled, screen="/"))

        assert appended is False
        assert recording.event_count == before

    def test_custom_tag_needs_enabling(self, recording: EventRecorder) -> None:
        """Tags outside the vocabulary pass only once enabled."""
        event = InteractionEvent(type="swipe", screen="/")
        assert recording.log_event(event) is False

        recording.update_config(recording.config.with_enabled(ALL_EVENT_TYPES | {"swipe"}))
        assert recording.log_event(event) is True
        assert recording.events[-1] == event

    def test_append_order(self, recording: EventRecorder) -> None:
        """Events are kept in the order they were logged."""
        recording.log_tap("a")
        recording.log_tap("b")
        recording.log_tap("c")

        assert [e.widget_key for e in recording.events[1:]] == ["a", "b", "c"]

    def test_events_snapshot_is_immutable(self, recording: EventRecorder) -> None:
        """The events property is a tuple snapshot."""
        snapshot = recording.events
        recording.log_tap("btn")

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1

    def test_config_update_not_retroactive(self, recording: EventRecorder) -> None:
        """Disabling a type keeps already buffered events of that type."""
        recording.log_tap("btn")
        recording.update_config(RecorderConfig().without("tap"))

        assert len(recording.get_events_by_type("tap")) == 1

    def test_max_events_is_advisory(self, recorder: EventRecorder) -> None:
        """The buffer grows past max_events without eviction."""
        recorder.update_config(RecorderConfig(max_events=3))
        recorder.start()
        for i in range(10):
            recorder.log_tap(f"btn_{i}")

        assert recorder.event_count == 11
        assert recorder.events[0].value == RECORDING_STARTED


class TestConvenienceLoggers:
    """Tests for log_tap, log_scroll and friends."""

    def test_log_tap(self, recording: EventRecorder) -> None:
        recording.update_current_screen("/home")
        recording.log_tap("login_button", meta={"x": 10})

        event = recording.events[-1]
        assert event.type == "tap"
        assert event.screen == "/home"
        assert event.widget_key == "login_button"
        assert event.value is None
        assert event.meta == {"x": 10}

    def test_log_long_press(self, recording: EventRecorder) -> None:
        recording.log_long_press("avatar")

        event = recording.events[-1]
        assert event.type == "long_press"
        assert event.widget_key == "avatar"
        assert event.meta is None

    def test_log_text_input_stores_literal_text(self, recording: EventRecorder) -> None:
        """The recorder does not mask text itself."""
        recording.log_text_input("password", "hunter2")

        event = recording.events[-1]
        assert event.type == "text_input"
        assert event.value == "hunter2"

    def test_log_scroll_merges_distance(self, recording: EventRecorder) -> None:
        """Direction is the value and distance is merged into meta."""
        recording.log_scroll("feed", "down", 240.0, meta={"currentPosition": 480.0})

        event = recording.events[-1]
        assert event.type == "scroll"
        assert event.value == "down"
        assert event.meta == {"distance": 240.0, "currentPosition": 480.0}

    def test_log_navigation(self, recording: EventRecorder) -> None:
        """Navigation records the origin screen and the destination as value."""
        recording.log_navigation("/login", "/home", meta={"action": "push"})

        event = recording.events[-1]
        assert event.type == "navigation"
        assert event.screen == "/login"
        assert event.value == "/home"
        assert recording.current_screen == "/home"

    def test_navigation_moves_screen_when_filtered(self, recording: EventRecorder) -> None:
        """Screen tracking ignores the enabled-types filter."""
        recording.update_config(RecorderConfig().without(EventType.NAVIGATION))

        recording.log_navigation("/a", "/b")

        assert recording.current_screen == "/b"
        assert recording.get_events_by_type("navigation") == []

    def test_navigation_moves_screen_when_stopped(self, recorder: EventRecorder) -> None:
        """Screen tracking also works while stopped."""
        recorder.log_navigation("/a", "/b")
        assert recorder.current_screen == "/b"

    def test_later_events_use_new_screen(self, recording: EventRecorder) -> None:
        recording.log_navigation("/", "/settings")
        recording.log_tap("toggle")

        assert recording.events[-1].screen == "/settings"

    def test_log_custom(self, recording: EventRecorder) -> None:
        """The custom event name becomes the widget key."""
        recording.log_custom("double_tap", value="card_1", meta={"n": 2})

        event = recording.events[-1]
        assert event.type == "custom"
        assert event.widget_key == "double_tap"
        assert event.value == "card_1"

    def test_empty_widget_key_accepted(self, recording: EventRecorder) -> None:
        assert recording.log_tap("") is True
        assert recording.events[-1].widget_key == ""


class TestClearAndScreen:
    """Tests for clear() and update_current_screen()."""

    def test_clear_keeps_recording(self, recording: EventRecorder) -> None:
        """clear() empties the buffer without stopping."""
        recording.clear()

        assert recording.is_recording is True
        assert recording.event_count == 0

        recording.log_tap("btn")
        assert recording.event_count == 1

    def test_clear_when_stopped(self, recorder: EventRecorder) -> None:
        recorder.clear()
        assert recorder.is_recording is False
        assert recorder.event_count == 0

    def test_update_current_screen_does_not_log(self, recording: EventRecorder) -> None:
        changes: list[RecorderChange] = []
        recording.subscribe(changes.append)

        recording.update_current_screen("/profile")

        assert recording.current_screen == "/profile"
        assert recording.event_count == 1
        assert changes == []


class TestQueries:
    """Tests for filters and statistics."""

    @pytest.fixture
    def populated(self, recording: EventRecorder) -> EventRecorder:
        recording.clear()
        recording.update_current_screen("/home")
        recording.log_tap("a")
        recording.log_scroll("feed", "down", 100.0)
        recording.log_tap("b")
        recording.log_navigation("/home", "/detail")
        recording.log_tap("c")
        recording.log_scroll("feed", "up", 50.0)
        return recording

    def test_get_events_by_type(self, populated: EventRecorder) -> None:
        taps = populated.get_events_by_type("tap")
        assert [e.widget_key for e in taps] == ["a", "b", "c"]

    def test_get_events_by_type_accepts_enum(self, populated: EventRecorder) -> None:
        assert len(populated.get_events_by_type(EventType.SCROLL)) == 2

    def test_get_events_by_screen(self, populated: EventRecorder) -> None:
        on_home = populated.get_events_by_screen("/home")
        assert [e.type for e in on_home] == ["tap", "scroll", "tap", "navigation"]

    def test_queries_do_not_mutate(self, populated: EventRecorder) -> None:
        before = populated.events
        populated.get_events_by_type("tap").clear()
        assert populated.events == before

    def test_statistics_exact(self, populated: EventRecorder) -> None:
        """Counts per type; absent types are omitted rather than zero."""
        populated.update_config(RecorderConfig())
        assert populated.get_event_statistics() == {"tap": 3, "scroll": 2, "navigation": 1}

    def test_statistics_tap_and_scroll_only(self, recording: EventRecorder) -> None:
        recording.clear()
        for _ in range(4):
            recording.log_tap("t")
        for _ in range(2):
            recording.log_scroll("s", "down", 1.0)

        assert recording.get_event_statistics() == {"tap": 4, "scroll": 2}

    def test_statistics_empty(self, recorder: EventRecorder) -> None:
        assert recorder.get_event_statistics() == {}

    def test_screen_activity(self, populated: EventRecorder) -> None:
        activity = populated.get_screen_activity()
        assert activity["/home"].event_count == 4
        assert activity["/detail"].event_count == 2


class TestNotifications:
    """Tests for change notifications."""

    @pytest.fixture
    def changes(self, recorder: EventRecorder) -> list[RecorderChange]:
        received: list[RecorderChange] = []
        recorder.subscribe(received.append)
        return received

    def test_one_notification_per_mutation(self, recorder: EventRecorder, changes: list[RecorderChange]) -> None:
        recorder.start()
        recorder.log_tap("btn")
        recorder.clear()
        recorder.update_config(RecorderConfig())
        recorder.stop()

        assert _kinds(changes) == [
            ChangeKind.STARTED,
            ChangeKind.EVENT_LOGGED,
            ChangeKind.CLEARED,
            ChangeKind.CONFIG_UPDATED,
            ChangeKind.STOPPED,
        ]

    def test_navigation_observer_sees_new_screen(self, recording: EventRecorder) -> None:
        seen: list[str] = []
        recording.subscribe(lambda change: seen.append(recording.current_screen))

        recording.log_navigation("/login", "/home")

        assert seen == ["/home"]
        assert recording.events[-1].screen == "/login"

    def test_no_notification_for_dropped_event(
        self, recorder: EventRecorder, changes: list[RecorderChange]
    ) -> None:
        recorder.log_tap("btn")
        recorder.start()
        recorder.update_config(RecorderConfig().without("tap"))
        changes.clear()

        recorder.log_tap("btn")

        assert changes == []

    def test_notification_carries_event_and_count(
        self, recording: EventRecorder, changes: list[RecorderChange]
    ) -> None:
        recording.log_tap("btn")

        assert changes[-1].event is not None
        assert changes[-1].event.widget_key == "btn"
        assert changes[-1].event_count == 2

    def test_observer_sees_completed_mutation(self, recorder: EventRecorder) -> None:
        """Observers can read the recorder and see the new state."""
        seen: list[int] = []
        recorder.subscribe(lambda change: seen.append(recorder.event_count))

        recorder.start()
        recorder.log_tap("btn")

        assert seen == [1, 2]

    def test_failing_observer_does_not_break_logging(self, recording: EventRecorder) -> None:
        def explode(change: RecorderChange) -> None:
            raise RuntimeError("boom")

        recording.subscribe(explode)

        assert recording.log_tap("btn") is True
        assert recording.event_count == 2

    def test_unsubscribe(self, recorder: EventRecorder) -> None:
        received: list[RecorderChange] = []
        sub_id = recorder.subscribe(received.append)

        assert recorder.unsubscribe(sub_id) is True
        recorder.start()

        assert received == []


class TestScenarios:
    """End-to-end recording scenarios."""

    def test_tap_text_stop_export(self, recorder: EventRecorder) -> None:
        recorder.start()
        recorder.log_tap("btn")
        recorder.log_text_input("f", "hi")
        recorder.stop()

        decoded = json.loads(recorder.export_to_json())

        assert [e["type"] for e in decoded] == ["custom", "tap", "text_input", "custom"]
        assert decoded[-1]["value"] == "Recording stopped"

    def test_concurrent_producers(self, recording: EventRecorder) -> None:
        """Concurrent loggers never lose events and observers see every append."""
        notified: list[int] = []
        recording.subscribe(lambda change: notified.append(change.event_count))

        def produce(n: int) -> None:
            for i in range(200):
                recording.log_tap(f"t{n}-{i}")

        threads = [threading.Thread(target=produce, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert recording.event_count == 801
        assert sorted(notified) == list(range(2, 802))


class TestConfigValidation:
    """Tests for configuration validation at the recorder boundary."""

    def test_invalid_config_rejected(self, recording: EventRecorder) -> None:
        with pytest.raises(ConfigurationError):
            recording.update_config(RecorderConfig(max_events=-1))
        assert recording.config == RecorderConfig()

    def test_invalid_initial_config(self) -> None:
        with pytest.raises(ConfigurationError):
            EventRecorder(RecorderConfig(auto_save_interval=0))


class TestDefaultRecorder:
    """Tests for the process-wide default recorder."""

    def test_get_returns_same_instance(self) -> None:
        assert get_event_recorder() is get_event_recorder()

    def test_configure_replaces_instance(self) -> None:
        original = get_event_recorder()
        configured = configure_event_recorder(RecorderConfig(max_events=10))

        assert configured is not original
        assert get_event_recorder() is configured
        assert configured.config.max_events == 10

    def test_reset(self) -> None:
        original = get_event_recorder()
        reset_event_recorder()
        assert get_event_recorder() is not original

    def test_default_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UIRECORDER_ENABLED_EVENT_TYPES", "tap,custom")
        recorder = get_event_recorder()
        assert recorder.config.enabled_event_types == {"tap", "custom"}
