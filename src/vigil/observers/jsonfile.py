# src/vigil/observers/jsonfile.py
from __future__ import annotations
import json
from pathlib import Path
from .events import Severity, new_notification
from .file import append_or_report
from .interface import Listener


class JsonFileListener(Listener):
    """Appends every notification to a JSON-lines file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _write(self, severity: Severity, message: str) -> None:
        append_or_report(self.path, json.dumps(new_notification(severity, message).dict()))

    def on_warning(self, message: str) -> None:
        self._write(Severity.WARNING, message)

    def on_error(self, message: str) -> None:
        self._write(Severity.ERROR, message)

    def on_fatal_error(self, message: str) -> None:
        self._write(Severity.FATAL, message)
