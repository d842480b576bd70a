"""Read activity exports from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from load_engine.models.workout import WorkoutRecord

from activity_import.exceptions import ActivityImportError
from activity_import.mapper import map_activities

logger = logging.getLogger(__name__)


def load_activities(path: str | Path) -> list[WorkoutRecord]:
    """Load a JSON activity export and map it to WorkoutRecords.

    The file holds either a list of activity dicts or an object with an
    ``activities`` list.

    Raises:
        ActivityImportError: The file is missing, not JSON, or has neither shape.
    """
    path = Path(path)
    try:
        with open(path) as f:
            payload: Any = json.load(f)
    except FileNotFoundError as exc:
        raise ActivityImportError(f"Activity file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ActivityImportError(f"Activity file is not valid JSON: {path}: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("activities")
    if not isinstance(payload, list):
        raise ActivityImportError(f"Expected a list of activities in {path}")

    records = map_activities(payload)
    logger.info("Loaded %d of %d activities from %s", len(records), len(payload), path)
    return records
