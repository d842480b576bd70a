"""Raw activity import: provider activity dicts → WorkoutRecords."""

from activity_import.exceptions import ActivityImportError, InvalidActivityError
from activity_import.loader import load_activities
from activity_import.mapper import map_activities, map_activity, parse_datetime

__all__ = [
    "ActivityImportError",
    "InvalidActivityError",
    "load_activities",
    "map_activities",
    "map_activity",
    "parse_datetime",
]
