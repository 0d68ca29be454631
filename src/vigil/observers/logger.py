# src/vigil/observers/logger.py
from __future__ import annotations
import logging
from .events import Severity
from .interface import Listener


class LoggerListener(Listener):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def on_warning(self, message: str) -> None:
        self.logger.warning("[%s] %s", Severity.WARNING.value, message)

    def on_error(self, message: str) -> None:
        self.logger.error("[%s] %s", Severity.ERROR.value, message)

    def on_fatal_error(self, message: str) -> None:
        self.logger.critical("[%s] %s", Severity.FATAL.value, message)
