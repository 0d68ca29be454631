# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/observers/dispatcher.py

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .events import Severity
from .interface import Listener, reaction_for

log = logging.getLogger("vigil")


class Subject:
    """
    Holds registered listeners in registration order and broadcasts
    severity notifications to them synchronously.

    The subject keeps plain references and never manages listener
    lifetime. Registering the same listener twice means it is notified
    twice.
    """

    def __init__(
        self,
        listeners: Optional[Iterable[Listener]] = None,
        *,
        isolate_failures: bool = False,
    ):
        self._listeners: List[Listener] = []
        self.isolate_failures = isolate_failures
        for listener in listeners or []:
            self.register(listener)

    @property
    def listeners(self) -> Tuple[Listener, ...]:
        return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def register(self, listener: Listener) -> None:
        if listener is None:
            raise ValueError("listener must not be None")
        self._listeners.append(listener)
        log.debug("registered %s (%d total)", type(listener).__name__, len(self._listeners))

    def deregister(self, listener: Listener) -> None:
        """Remove every occurrence of *listener*; unknown listeners are ignored."""
        before = len(self._listeners)
        # identity, not equality: a listener may define __eq__
        self._listeners = [x for x in self._listeners if x is not listener]
        log.debug(
            "deregistered %s (%d removed)",
            type(listener).__name__,
            before - len(self._listeners),
        )

    def notify(self, severity: Severity | str, message: str) -> None:
        try:
            severity = Severity(severity)
        except ValueError:
            raise ValueError(f"unknown severity: {severity!r}") from None

        # snapshot: reactions that (de)register only affect later notifications
        targets = list(self._listeners)
        log.debug("dispatching %s to %d listener(s)", severity.value, len(targets))

        for listener in targets:
            react = reaction_for(listener, severity)
            if not self.isolate_failures:
                react(message)
                continue
            try:
                react(message)
            except Exception:
                log.exception(
                    "%s failed handling %s notification",
                    type(listener).__name__,
                    severity.value,
                )

    def notify_warning(self, message: str) -> None:
        self.notify(Severity.WARNING, message)

    def notify_error(self, message: str) -> None:
        self.notify(Severity.ERROR, message)

    def notify_fatal(self, message: str) -> None:
        self.notify(Severity.FATAL, message)
