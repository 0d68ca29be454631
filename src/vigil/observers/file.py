# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/observers/file.py

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .interface import Listener

log = logging.getLogger("vigil")


@dataclass(frozen=True)
class AppendResult:
    path: Path
    ok: bool
    error: Optional[str] = None


def append_line(path: str | Path, line: str) -> AppendResult:
    """
    Append one line to *path*. The file is closed on every path.
    Unencodable characters are written as backslash escapes.

    Open/write failures come back as a failed result instead of raising.
    Missing parent directories are not created.
    """
    path = Path(path)
    try:
        with path.open("a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(line + "\n")
    except OSError as e:
        log.debug("append to %s failed: %s", path, e)
        return AppendResult(path=path, ok=False, error=str(e))

    log.debug("appended to %s", path)
    return AppendResult(path=path, ok=True)


def report_failure(result: AppendResult) -> None:
    print(f"Failed to open file: {result.path}", file=sys.stderr)


def append_or_report(path: str | Path, line: str) -> AppendResult:
    result = append_line(path, line)
    if not result.ok:
        report_failure(result)
    return result


class FileErrorListener(Listener):
    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def on_error(self, message: str) -> None:
        append_or_report(self._path, f"Error: {message}")


class ConsoleAndFileFatalListener(Listener):
    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def on_fatal_error(self, message: str) -> None:
        line = f"Fatal Error: {message}"
        print(line)
        append_or_report(self._path, line)
