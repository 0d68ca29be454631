# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/core/demo.py

from __future__ import annotations

import logging

from ..config.models import DemoMessages, VigilConfig
from ..observers.console import ConsoleWarningListener
from ..observers.dispatcher import Subject
from ..observers.file import ConsoleAndFileFatalListener, FileErrorListener

log = logging.getLogger("vigil")


def build_subject(cfg: VigilConfig) -> Subject:
    subject = Subject(isolate_failures=cfg.isolate_failures)
    subject.register(ConsoleWarningListener())
    subject.register(FileErrorListener(cfg.error_log))
    subject.register(ConsoleAndFileFatalListener(cfg.fatal_log))
    return subject


def run_demo(subject: Subject, messages: DemoMessages) -> None:
    """One warning, one error, one fatal notification, in that order."""
    log.debug("demo: %d listener(s) registered", len(subject))
    subject.notify_warning(messages.warning)
    subject.notify_error(messages.error)
    subject.notify_fatal(messages.fatal)
