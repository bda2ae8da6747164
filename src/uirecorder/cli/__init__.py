"""uirecorder CLI for inspecting exported recordings."""

from uirecorder.cli.main import main

__all__ = ["main"]
