"""
File sinks for recorder exports.

The recorder only needs two capabilities from its host: a writable
directory and a way to write text into it. LocalFileSink provides both on a
local filesystem; InMemoryFileSink keeps written files in a dict.

Environment Variables:
    UIRECORDER_EXPORT_DIR: Directory used by LocalFileSink.from_env()
"""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from uirecorder.errors import ExportError

DEFAULT_EXPORT_DIR = Path("~/.uirecorder/exports")


class FileSink(ABC):
    """Abstract destination for exported recordings."""

    @abstractmethod
    def resolve_writable_directory(self) -> Path:
        """Return the directory exports are written to."""
        pass

    @abstractmethod
    def write_file(self, path: Path, content: str) -> None:
        """
        Write content to path.

        Raises:
            OSError: If the write fails.
        """
        pass

    def resolve_path(self, file_name: str) -> Path:
        """
        Resolve an export file name inside the writable directory.

        Raises:
            ExportError: If the name is empty, invalid or escapes the directory.
        """
        if not file_name:
            raise ExportError("export file name must not be empty")
        if "\x00" in file_name:
            raise ExportError(f"invalid export file name {file_name!r}")
        directory = self.resolve_writable_directory()
        path = directory / file_name
        try:
            inside = path.resolve().is_relative_to(directory.resolve())
        except ValueError as e:
            raise ExportError(f"invalid export file name {file_name!r}", cause=e) from e
        if not inside:
            raise ExportError(f"export file name {file_name!r} escapes {directory}", path=str(path))
        return path


class LocalFileSink(FileSink):
    """Writes exports to a directory on the local filesystem."""

    def __init__(self, directory: str | os.PathLike[str] = DEFAULT_EXPORT_DIR, encoding: str = "utf-8") -> None:
        self._directory = Path(directory).expanduser()
        self._encoding = encoding

    @classmethod
    def from_env(cls) -> LocalFileSink:
        """Create a sink for UIRECORDER_EXPORT_DIR or the default directory."""
        return cls(os.getenv("UIRECORDER_EXPORT_DIR") or DEFAULT_EXPORT_DIR)

    @property
    def directory(self) -> Path:
        return self._directory

    def resolve_writable_directory(self) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        return self._directory

    def write_file(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=self._encoding)


class InMemoryFileSink(FileSink):
    """
    Keeps exports in memory.

    Useful for testing and for hosts that forward exports elsewhere.
    """

    def __init__(self, directory: str | os.PathLike[str] = "/memory") -> None:
        self._directory = Path(directory)
        self._files: dict[Path, str] = {}
        self._lock = threading.Lock()

    def resolve_writable_directory(self) -> Path:
        return self._directory

    def resolve_path(self, file_name: str) -> Path:
        if not file_name:
            raise ExportError("export file name must not be empty")
        path = self._directory / file_name
        if ".." in Path(file_name).parts or Path(file_name).is_absolute():
            raise ExportError(f"export file name {file_name!r} escapes {self._directory}", path=str(path))
        return path

    def write_file(self, path: Path, content: str) -> None:
        with self._lock:
            self._files[path] = content

    def read_file(self, path: str | os.PathLike[str]) -> str:
        """Return previously written content."""
        with self._lock:
            try:
                return self._files[Path(path)]
            except KeyError:
                raise FileNotFoundError(str(path)) from None

    @property
    def files(self) -> dict[Path, str]:
        with self._lock:
            return dict(self._files)
