"""Harness-level errors."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Configuration could not be loaded or a client could not be constructed."""
