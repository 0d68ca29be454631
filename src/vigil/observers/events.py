# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


# severity -> Listener reaction name
REACTIONS: Dict[Severity, str] = {
    Severity.WARNING: "on_warning",
    Severity.ERROR: "on_error",
    Severity.FATAL: "on_fatal_error",
}


@dataclass(frozen=True)
class Notification:
    ts: str           # ISO timestamp (UTC)
    severity: Severity
    message: str

    def dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["severity"] = self.severity.value
        return d


def new_notification(severity: Severity | str, message: str) -> Notification:
    return Notification(
        ts=datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        severity=Severity(severity),
        message=message,
    )
