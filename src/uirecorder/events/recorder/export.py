"""
Export and import mixin.

JSON export always reflects the whole buffer, whatever the current
configuration. Import is all-or-nothing: a malformed document leaves the
buffer exactly as it was.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from uirecorder.errors import EventParseError, ExportError
from uirecorder.events.bus import ChangeKind
from uirecorder.models.event import InteractionEvent, dump_events, parse_events

if TYPE_CHECKING:
    from uirecorder.storage import FileSink


class ExportMixin:
    """Mixin providing export_to_json, export_to_file and load_from_json."""

    if TYPE_CHECKING:
        _events: list[InteractionEvent]
        _lock: Any
        _log: Any
        _sink: FileSink | None
        _over_capacity_warned: bool

        def _notify(self, kind: ChangeKind, event: InteractionEvent | None = None) -> None: ...

    @property
    def sink(self) -> FileSink:
        """The file sink used by export_to_file, created from the environment on first use."""
        if self._sink is None:
            from uirecorder.storage import LocalFileSink

            self._sink = LocalFileSink.from_env()
        return self._sink

    def export_to_json(self) -> str:
        """Serialize the buffer, in order, to a JSON array."""
        with self._lock:
            return dump_events(self._events)

    async def export_to_file(self, file_name: str) -> str | None:
        """
        Write export_to_json() to ``file_name`` inside the sink's directory.

        The write runs in a worker thread. Failures are logged and reported
        as ``None``; they never raise.

        Returns:
            The path written, or None on failure.
        """
        content = self.export_to_json()
        try:
            return await asyncio.to_thread(self._write_export, file_name, content)
        except (OSError, ExportError) as e:
            self._log.error("export_failed", file_name=file_name, error=str(e))
            return None

    def _write_export(self, file_name: str, content: str) -> str:
        sink = self.sink
        path = sink.resolve_path(file_name)
        try:
            sink.write_file(path, content)
        except (OSError, ValueError) as e:
            raise ExportError(f"failed to write {path}", path=str(path), cause=e) from e
        self._log.info("export_written", path=str(path), bytes=len(content))
        return str(path)

    def load_from_json(self, text: str | bytes) -> bool:
        """
        Replace the buffer with the events in a JSON array.

        On malformed JSON or a wrong shape the failure is logged, the
        buffer is left unchanged and no notification fires.

        Returns:
            True if the buffer was replaced.
        """
        try:
            loaded = parse_events(text)
        except EventParseError as e:
            self._log.warning("load_failed", error=str(e), index=e.index)
            return False

        with self._lock:
            self._events[:] = loaded
            self._over_capacity_warned = False
            self._log.info("events_loaded", events=len(loaded))
            self._notify(ChangeKind.LOADED)
        return True
