"""LoadEngine, the orchestrator that turns workout history into load, zones and readiness."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

from load_engine.analysis.readiness import evaluate_readiness
from load_engine.analysis.zone_analyzer import analyze_zones, assess_data_quality
from load_engine.config import EngineConfig, StressConfig
from load_engine.math.aggregation import (
    aggregate_daily_loads,
    is_mis_start,
    local_date,
    resolve_timezone,
    to_instant,
    window_for,
)
from load_engine.math.pmc import calculate_pmc, empty_metrics
from load_engine.math.thresholds import estimate_athlete_thresholds
from load_engine.models.enums import ZoneScheme
from load_engine.models.load import PMCMetrics, TrainingLoadResult
from load_engine.models.readiness import ReadinessResult
from load_engine.models.workout import WorkoutRecord
from load_engine.models.zones import AnalysisResult, AthleteThresholds

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 90


@dataclass(frozen=True)
class EngineReport:
    """Training load, zone analysis and readiness computed from one history snapshot."""

    training_load: TrainingLoadResult
    zones: AnalysisResult
    readiness: ReadinessResult


class LoadEngine:
    """Stateless facade over the stress, PMC, zone and readiness components.

    Usage:
        engine = LoadEngine()
        load = engine.training_load(records, now=now, tz="Europe/Paris")
        zones = engine.analyze_zones(records, max_hr_override=188)
        readiness = engine.readiness(records, now=now, tz="Europe/Paris")

    Every call receives its own complete history and returns a fully
    populated result; nothing is cached between calls.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def thresholds(self, records: Iterable[WorkoutRecord]) -> AthleteThresholds:
        """Estimate athlete thresholds from the full history."""
        return estimate_athlete_thresholds(list(records), self.config.zones)

    def training_load(
        self,
        records: Iterable[WorkoutRecord],
        now: datetime,
        tz: tzinfo | str,
        days: int = DEFAULT_WINDOW_DAYS,
        thresholds: AthleteThresholds | None = None,
    ) -> TrainingLoadResult:
        """Daily load series and PMC trend for the ``days`` ending on today's local date.

        Args:
            records: Workout history; may extend beyond the window.
            now: Current instant; defines "today" in the athlete's timezone.
            tz: Athlete timezone (tzinfo or IANA name).
            days: Window length in days, today included.
            thresholds: Athlete thresholds; estimated from the full history
                when omitted.

        Returns:
            TrainingLoadResult with one point and one PMC entry per day.
        """
        records = list(records)
        zone = resolve_timezone(tz)
        if thresholds is None:
            thresholds = self.thresholds(records)
        start, end = window_for(now, zone, days)

        series = aggregate_daily_loads(records, start, end, zone, thresholds, self.config.stress)
        trend = calculate_pmc(series.points, self.config.pmc)
        # A window without any activity reports the empty-history metrics.
        metrics = trend[-1] if series.included else empty_metrics()

        included = series.included
        with_hr = sum(1 for r in included if r.has_heart_rate)
        with_power = sum(1 for r in included if r.has_power)
        logger.info(
            "Training load %s..%s: %d activities (%d excluded), chronic %.1f acute %.1f status %s",
            start,
            end,
            len(included),
            len(series.excluded_ids),
            metrics.chronic,
            metrics.acute,
            metrics.status.value,
        )
        return TrainingLoadResult(
            start=start,
            end=end,
            points=series.points,
            trend=trend,
            metrics=metrics,
            total_activities=len(included),
            activities_with_hr=with_hr,
            activities_with_power=with_power,
            data_quality=assess_data_quality(with_hr, len(included), self.config.zones),
            excluded_activities=series.excluded_ids,
        )

    def analyze_zones(
        self,
        records: Iterable[WorkoutRecord],
        max_hr_override: int | None = None,
        scheme: ZoneScheme = ZoneScheme.FIVE_ZONE,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Zone analysis over the full history (see ``analyze_zones``)."""
        return analyze_zones(list(records), max_hr_override, scheme, now, self.config.zones)

    def readiness(
        self,
        records: Iterable[WorkoutRecord],
        now: datetime,
        tz: tzinfo | str,
        weekly_target: float | None = None,
        metrics: PMCMetrics | None = None,
        thresholds: AthleteThresholds | None = None,
    ) -> ReadinessResult:
        """Same-day readiness from the full history.

        Days since the last workout and its RPE come from the whole history,
        not from the current week. Week-to-date stress starts on the
        configured weekday in the athlete's timezone. Workouts starting after
        *now* count towards neither. Elapsed time is measured in UTC, so a
        DST change does not shift the recovery-time check.

        Args:
            records: Full workout history.
            now: Current instant.
            tz: Athlete timezone.
            weekly_target: Personalised weekly stress target. Optional.
            metrics: Latest PMC metrics for ``form``; computed when omitted.
            thresholds: Athlete thresholds; estimated when omitted.

        Returns:
            ReadinessResult; neutral defaults when there is no history.
        """
        records = list(records)
        zone = resolve_timezone(tz)
        cfg = self.config.readiness
        if thresholds is None:
            thresholds = self.thresholds(records)
        if metrics is None:
            metrics = self.training_load(records, now, zone, thresholds=thresholds).metrics

        now_instant = _utc_instant(now, zone)
        past = _started_by(records, zone, now_instant, self.config.stress)
        last = _most_recent(past, zone)
        if last is None:
            days_since = cfg.no_history_days
            hours_since = None
            last_rpe = None
            recovery_time_h = None
        else:
            elapsed = now_instant - _utc_instant(last.start_time, zone)
            days_since = max(0, elapsed // timedelta(days=1))
            hours_since = elapsed.total_seconds() / 3600.0
            last_rpe = last.perceived_exertion
            recovery_time_h = last.recovery_time_h

        today = local_date(now, zone)
        week_start = _week_start(today, cfg.week_start_weekday)
        week = aggregate_daily_loads(past, week_start, today, zone, thresholds, self.config.stress)
        weekly_current = sum(p.load for p in week.points)

        return evaluate_readiness(
            days_since_last_workout=days_since,
            weekly_stress_current=weekly_current,
            weekly_stress_target=weekly_target,
            last_rpe=last_rpe,
            recovery_time_h=recovery_time_h,
            hours_since_last_workout=hours_since,
            form=metrics.form if metrics.day is not None else None,
            config=cfg,
        )

    def report(
        self,
        records: Iterable[WorkoutRecord],
        now: datetime,
        tz: tzinfo | str,
        days: int = DEFAULT_WINDOW_DAYS,
        weekly_target: float | None = None,
        max_hr_override: int | None = None,
        scheme: ZoneScheme = ZoneScheme.FIVE_ZONE,
    ) -> EngineReport:
        """Compute training load, zones and readiness from one snapshot."""
        records = list(records)
        thresholds = self.thresholds(records)
        load = self.training_load(records, now, tz, days, thresholds)
        return EngineReport(
            training_load=load,
            zones=self.analyze_zones(records, max_hr_override, scheme, now),
            readiness=self.readiness(records, now, tz, weekly_target, load.metrics, thresholds),
        )


def _utc_instant(moment: datetime, tz: tzinfo) -> datetime:
    """UTC instant of *moment*; naive values are wall-clock time in *tz*."""
    return to_instant(moment, tz).astimezone(timezone.utc)


def _started_by(
    records: list[WorkoutRecord], tz: tzinfo, now_instant: datetime, config: StressConfig
) -> list[WorkoutRecord]:
    """Workouts that started at or before *now_instant*, mis-starts left out."""
    return [
        r
        for r in records
        if isinstance(r.start_time, datetime)
        and _utc_instant(r.start_time, tz) <= now_instant
        and not is_mis_start(r, config)
    ]


def _most_recent(records: list[WorkoutRecord], tz: tzinfo) -> WorkoutRecord | None:
    if not records:
        return None
    return max(records, key=lambda r: _utc_instant(r.start_time, tz))


def _week_start(today: date, weekday: int) -> date:
    return today - timedelta(days=(today.weekday() - weekday) % 7)
