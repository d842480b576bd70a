"""Exception hierarchy for the training load engine.

Data problems never raise: missing or malformed inputs degrade into default
results. Only programmer errors such as an invalid configuration do.
"""

from __future__ import annotations


class LoadEngineError(Exception):
    """Base exception for all load_engine errors."""


class ConfigError(LoadEngineError, ValueError):
    """A configuration value is out of its valid range."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name
