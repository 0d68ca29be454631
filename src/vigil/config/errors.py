# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/config/errors.py
class ConfigError(RuntimeError):
    """Raised when a vigil config file cannot be read or validated."""
