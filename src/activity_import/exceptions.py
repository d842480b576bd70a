"""Custom exception hierarchy for activity import."""

from __future__ import annotations


class ActivityImportError(Exception):
    """Base exception for all activity_import errors."""


class InvalidActivityError(ActivityImportError):
    """An activity dict cannot be turned into a WorkoutRecord."""

    def __init__(self, message: str, activity_id: str | None = None) -> None:
        super().__init__(message)
        self.activity_id = activity_id
