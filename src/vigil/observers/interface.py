# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/observers/interface.py

from __future__ import annotations
from typing import Callable

from .events import REACTIONS, Severity


class Listener:
    """
    Reacts to zero or more of warning / error / fatal notifications.

    Every reaction is a no-op by default; a listener overrides only
    the ones it cares about.
    """

    def on_warning(self, message: str) -> None:
        pass

    def on_error(self, message: str) -> None:
        pass

    def on_fatal_error(self, message: str) -> None:
        pass


def reaction_for(listener: Listener, severity: Severity | str) -> Callable[[str], None]:
    return getattr(listener, REACTIONS[Severity(severity)])
