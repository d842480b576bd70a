"""Bucket workouts into a gap-free daily load series on the athlete's local calendar."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from load_engine.config import StressConfig
from load_engine.math.stress import estimate_stress
from load_engine.models.load import DailyLoadPoint
from load_engine.models.workout import WorkoutRecord
from load_engine.models.zones import AthleteThresholds

logger = logging.getLogger(__name__)

_DEFAULT_STRESS_CONFIG = StressConfig()


@dataclass(frozen=True)
class DailyLoadSeries:
    """Aggregated daily points plus the ids of workouts left out of them."""

    points: tuple[DailyLoadPoint, ...]
    included: tuple[WorkoutRecord, ...] = field(default_factory=tuple)
    excluded_ids: tuple[str, ...] = field(default_factory=tuple)


def resolve_timezone(tz: tzinfo | str) -> tzinfo:
    """Accept a tzinfo or an IANA name such as "Europe/Paris"."""
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def local_date(moment: datetime, tz: tzinfo | str) -> date:
    """Calendar date of *moment* in the athlete's timezone.

    Naive datetimes are already local wall-clock time.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.date()
    return moment.astimezone(resolve_timezone(tz)).date()


def to_instant(moment: datetime, tz: tzinfo | str) -> datetime:
    """Aware datetime for *moment*, attaching the athlete timezone to naive values."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=resolve_timezone(tz))
    return moment


def window_for(now: datetime, tz: tzinfo | str, days: int) -> tuple[date, date]:
    """Inclusive ``days``-long window ending on the local date of *now*."""
    end = local_date(now, tz)
    start = end - timedelta(days=max(1, days) - 1)
    return start, end


def is_mis_start(record: WorkoutRecord, config: StressConfig = _DEFAULT_STRESS_CONFIG) -> bool:
    """True for a recorded activity no longer than ``config.min_activity_seconds``.

    Workouts without a usable moving time are not mis-starts; the stress
    estimator scores them (external score or zero).
    """
    seconds = record.moving_time_s
    if seconds is None or not math.isfinite(seconds) or seconds <= 0:
        return False
    return seconds <= config.min_activity_seconds


def iter_days(start: date, end: date) -> Iterable[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def aggregate_daily_loads(
    records: Iterable[WorkoutRecord],
    start: date,
    end: date,
    tz: tzinfo | str,
    thresholds: AthleteThresholds | None = None,
    config: StressConfig = _DEFAULT_STRESS_CONFIG,
) -> DailyLoadSeries:
    """Sum per-workout stress into exactly one point per local calendar day.

    Args:
        records: Workout history in any order; may extend beyond the window.
        start: First local date of the window (inclusive).
        end: Last local date of the window (inclusive).
        tz: Athlete timezone used for day boundaries.
        thresholds: Athlete anchors passed through to the stress estimator.
        config: Stress estimation parameters.

    Returns:
        DailyLoadSeries with ``(end - start).days + 1`` ascending points.
        Rest days carry zero load. Workouts with a missing timestamp,
        outside the window, or too short to count (see ``is_mis_start``)
        are excluded, never folded into a nearby day.
    """
    if end < start:
        start, end = end, start
    zone = resolve_timezone(tz)

    loads: dict[date, float] = {day: 0.0 for day in iter_days(start, end)}
    trimps: dict[date, float] = dict.fromkeys(loads, 0.0)
    counts: dict[date, int] = dict.fromkeys(loads, 0)
    included: list[WorkoutRecord] = []
    excluded: list[str] = []

    for record in records:
        if not isinstance(record.start_time, datetime):
            logger.debug("Excluding activity %s: missing start time", record.activity_id)
            excluded.append(record.activity_id)
            continue
        day = local_date(record.start_time, zone)
        if day not in loads:
            logger.debug("Excluding activity %s: %s outside %s..%s", record.activity_id, day, start, end)
            excluded.append(record.activity_id)
            continue
        if is_mis_start(record, config):
            logger.debug(
                "Excluding activity %s: %.0f s at or under %.0f s minimum",
                record.activity_id,
                record.moving_time_s,
                config.min_activity_seconds,
            )
            excluded.append(record.activity_id)
            continue

        estimate = estimate_stress(record, thresholds, config)
        loads[day] += estimate.stress
        trimps[day] += estimate.trimp
        counts[day] += 1
        included.append(record)

    points = tuple(
        DailyLoadPoint(day=day, load=loads[day], trimp=trimps[day], activity_count=counts[day])
        for day in sorted(loads)
    )
    return DailyLoadSeries(points=points, included=tuple(included), excluded_ids=tuple(excluded))
