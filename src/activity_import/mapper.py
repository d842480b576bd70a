"""Pure functions mapping provider activity dicts to WorkoutRecords.

No I/O. Accepts Strava-style dicts (``start_date``, ``sport_type``,
``average_heartrate``...) and Garmin Connect-style dicts (``startTimeGMT``,
``activityType.typeKey``, ``averageHR``...). Missing or malformed optional
fields map to None; the engine degrades gracefully on them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Optional

from load_engine.models.enums import SportCategory
from load_engine.models.workout import WorkoutRecord

from activity_import.exceptions import InvalidActivityError

logger = logging.getLogger(__name__)

# Perceived exertion is recorded on a 1-10 scale.
_RPE_MIN = 1
_RPE_MAX = 10

# Candidate keys per field, Strava spelling first.
_ID_KEYS = ("id", "activity_id", "activityId")
_NAME_KEYS = ("name", "activityName")
_MOVING_TIME_KEYS = ("moving_time", "movingDuration", "elapsed_time", "duration")
_DISTANCE_KEYS = ("distance",)
_AVG_HR_KEYS = ("average_heartrate", "averageHR")
_MAX_HR_KEYS = ("max_heartrate", "maxHR")
_AVG_POWER_KEYS = ("average_watts", "avgPower")
_WEIGHTED_POWER_KEYS = ("weighted_average_watts", "normPower")
_RPE_KEYS = ("perceived_exertion",)
_STRESS_KEYS = ("training_stress_score", "trainingStressScore")
_RECOVERY_KEYS = ("recovery_time", "recovery_time_h")


def map_activity(raw: dict[str, Any]) -> WorkoutRecord:
    """Map one provider activity dict to a WorkoutRecord.

    Raises:
        InvalidActivityError: *raw* is not a dict or carries no activity id.
    """
    if not isinstance(raw, dict):
        raise InvalidActivityError(f"Expected an activity dict, got {type(raw).__name__}")

    activity_id = _first(raw, _ID_KEYS)
    if activity_id is None or str(activity_id).strip() == "":
        raise InvalidActivityError("Activity has no id")
    activity_id = str(activity_id)

    return WorkoutRecord(
        activity_id=activity_id,
        start_time=_extract_start_time(raw),
        sport=SportCategory.from_activity_type(_extract_activity_type(raw)),
        moving_time_s=_positive_float(_first(raw, _MOVING_TIME_KEYS)),
        distance_m=_positive_float(_first(raw, _DISTANCE_KEYS)),
        avg_hr=_positive_float(_first(raw, _AVG_HR_KEYS)),
        max_hr=_positive_float(_first(raw, _MAX_HR_KEYS)),
        avg_power=_positive_float(_first(raw, _AVG_POWER_KEYS)),
        weighted_avg_power=_positive_float(_first(raw, _WEIGHTED_POWER_KEYS)),
        perceived_exertion=_extract_rpe(_first(raw, _RPE_KEYS)),
        stress_score=_float(_first(raw, _STRESS_KEYS)),
        recovery_time_h=_positive_float(_first(raw, _RECOVERY_KEYS)),
        name=str(_first(raw, _NAME_KEYS) or ""),
    )


def map_activities(raws: Iterable[Any]) -> list[WorkoutRecord]:
    """Map many activity dicts, skipping (and logging) the unusable ones."""
    records = []
    for index, raw in enumerate(raws):
        try:
            records.append(map_activity(raw))
        except InvalidActivityError as exc:
            logger.warning("Skipping activity at index %d: %s", index, exc)
    return records


# ---------------------------------------------------------------------------
# Internal extractors, each handles None input gracefully
# ---------------------------------------------------------------------------


def _first(raw: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _extract_activity_type(raw: dict[str, Any]) -> Optional[str]:
    """Strava ``sport_type``/``type`` or Garmin ``activityType.typeKey``."""
    for key in ("sport_type", "type"):
        value = raw.get(key)
        if isinstance(value, str) and value:
            return value
    activity_type = raw.get("activityType")
    if isinstance(activity_type, dict):
        return activity_type.get("typeKey")
    if isinstance(activity_type, str):
        return activity_type
    return None


def _extract_start_time(raw: dict[str, Any]) -> Optional[datetime]:
    """Prefer the UTC instant; fall back to local wall-clock time (naive)."""
    utc = parse_datetime(raw.get("start_date"))
    if utc is None:
        utc = parse_datetime(raw.get("startTimeGMT"), assume_utc=True)
    if utc is not None:
        return utc

    local = parse_datetime(raw.get("start_date_local")) or parse_datetime(
        raw.get("startTimeLocal")
    )
    if local is not None:
        # Strava marks local times with a misleading "Z"; they are wall-clock.
        return local.replace(tzinfo=None)
    return None


def parse_datetime(value: Any, assume_utc: bool = False) -> Optional[datetime]:
    """ISO 8601 timestamp with a trailing "Z" accepted; None when unparseable."""
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if assume_utc and moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _positive_float(value: Any) -> Optional[float]:
    number = _float(value)
    if number is None or number <= 0:
        return None
    return number


def _extract_rpe(value: Any) -> Optional[float]:
    rpe = _float(value)
    if rpe is None or not _RPE_MIN <= rpe <= _RPE_MAX:
        return None
    return rpe
