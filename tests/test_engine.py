"""Tests for LoadEngine, full orchestration over a workout history."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable
from zoneinfo import ZoneInfo

import pytest

from load_engine import EngineConfig, EngineReport, LoadEngine
from load_engine.config import PMCConfig
from load_engine.models.enums import (
    EMPTY_HISTORY_RECOMMENDATION,
    DataQuality,
    MaxHRSource,
    ReadinessLevel,
    TrainingStatus,
    ZoneScheme,
)
from load_engine.models.workout import WorkoutRecord

UTC = timezone.utc


class TestTrainingLoad:
    def test_window_and_counts(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        result = LoadEngine().training_load(steady_history, now=now, tz="UTC")
        assert len(result.points) == 90
        assert len(result.trend) == 90
        assert result.end == date(2024, 3, 15)
        assert result.metrics == result.trend[-1]
        assert result.metrics.day == date(2024, 3, 15)
        assert result.total_activities == 21
        assert result.activities_with_hr == 21
        assert result.activities_with_power == 0
        assert result.data_quality == DataQuality.EXCELLENT
        assert result.excluded_activities == ()
        assert result.metrics.chronic > 0

    def test_short_window(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        result = LoadEngine().training_load(steady_history, now=now, tz="UTC", days=7)
        assert len(result.points) == 7
        assert result.total_activities == 3
        assert len(result.excluded_activities) == 18

    def test_total_load_matches_included_stress(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        records = [
            workout_factory(start=now - timedelta(days=d), stress_score=50.0) for d in range(5)
        ]
        result = LoadEngine().training_load(records, now=now, tz="UTC", days=30)
        assert sum(p.load for p in result.points) == pytest.approx(250.0)

    def test_future_workouts_excluded(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        future = workout_factory(start=now + timedelta(days=2), stress_score=90.0, activity_id="f")
        result = LoadEngine().training_load([future], now=now, tz="UTC")
        assert result.excluded_activities == ("f",)

    def test_empty_history(self, now: datetime) -> None:
        result = LoadEngine().training_load([], now=now, tz="Europe/Paris")
        assert len(result.points) == 90
        assert all(p.load == 0.0 for p in result.points)
        assert result.metrics.status == TrainingStatus.RECOVER
        assert result.metrics.recommendation == EMPTY_HISTORY_RECOMMENDATION
        assert result.data_quality == DataQuality.NONE

    def test_config_changes_time_constants(
        self, steady_history: list[WorkoutRecord], now: datetime
    ) -> None:
        default = LoadEngine().training_load(steady_history, now=now, tz="UTC")
        fast = LoadEngine(EngineConfig(pmc=PMCConfig(chronic_days=21))).training_load(
            steady_history, now=now, tz="UTC"
        )
        assert fast.metrics.chronic != pytest.approx(default.metrics.chronic)

    def test_deterministic(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        engine = LoadEngine()
        assert engine.training_load(steady_history, now, "UTC") == engine.training_load(
            list(reversed(steady_history)), now, "UTC"
        )


class TestReadiness:
    def test_from_history(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        result = LoadEngine().readiness(steady_history, now=now, tz="UTC")
        assert result.days_since_last_workout == 1
        # Monday-to-date: the runs on Tuesday and Thursday, 75 points each.
        assert result.weekly_stress_current == pytest.approx(150.0)
        assert result.tss_balance == pytest.approx(250.0)
        assert result.recovery_score == 68
        assert result.level == ReadinessLevel.MEDIUM
        assert result.form is not None

    def test_no_history_is_neutral(self, now: datetime) -> None:
        result = LoadEngine().readiness([], now=now, tz="UTC")
        assert result.days_since_last_workout == 7
        assert result.weekly_stress_current == 0.0
        assert result.last_rpe is None
        assert result.form is None
        assert 0 <= result.recovery_score <= 100

    def test_last_workout_from_full_history(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        """The previous week's workout still drives days-since and RPE."""
        last = workout_factory(start=now - timedelta(days=9), perceived_exertion=9)
        result = LoadEngine().readiness([last], now=now, tz="UTC")
        assert result.days_since_last_workout == 9
        assert result.last_rpe == 9
        assert result.weekly_stress_current == 0.0

    def test_future_workout_ignored(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        past = workout_factory(start=now - timedelta(days=2))
        planned = workout_factory(start=now + timedelta(days=1), perceived_exertion=10)
        result = LoadEngine().readiness([past, planned], now=now, tz="UTC")
        assert result.days_since_last_workout == 2
        assert result.last_rpe is None

    def test_week_starts_in_local_time(
        self, workout_factory: Callable[..., WorkoutRecord], paris: ZoneInfo
    ) -> None:
        # Sunday 23:30 UTC is already Monday in Paris.
        now = datetime(2024, 3, 17, 23, 30, tzinfo=UTC)
        sunday = workout_factory(start=datetime(2024, 3, 17, 20, 0, tzinfo=UTC), stress_score=100.0)
        assert LoadEngine().readiness([sunday], now, paris).weekly_stress_current == 0.0
        assert LoadEngine().readiness([sunday], now, "UTC").weekly_stress_current == 100.0

    def test_recovery_time_requirement(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime, paris: ZoneInfo
    ) -> None:
        # Naive start is Paris wall-clock time: 06:00 local, 13 hours before now.
        recent = workout_factory(start=datetime(2024, 3, 15, 6, 0), recovery_time_h=48)
        result = LoadEngine().readiness([recent], now=now, tz=paris)
        assert result.days_since_last_workout == 0
        assert result.recovery_time_met is False

    def test_recovery_time_across_dst_change(
        self, workout_factory: Callable[..., WorkoutRecord], paris: ZoneInfo
    ) -> None:
        # Clocks go forward on 2024-03-31: noon to noon is only 23 real hours.
        saturday = workout_factory(start=datetime(2024, 3, 30, 12, 0), recovery_time_h=24)
        early = LoadEngine().readiness(
            [saturday], now=datetime(2024, 3, 31, 12, 0, tzinfo=paris), tz=paris
        )
        assert early.recovery_time_met is False
        assert early.days_since_last_workout == 0

        later = LoadEngine().readiness(
            [saturday], now=datetime(2024, 3, 31, 13, 0, tzinfo=paris), tz=paris
        )
        assert later.recovery_time_met is True
        assert later.days_since_last_workout == 1

    def test_later_today_not_in_week_to_date(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        morning = workout_factory(
            start=datetime(2024, 3, 15, 7, 0, tzinfo=UTC), stress_score=40.0, perceived_exertion=4
        )
        evening = workout_factory(
            start=datetime(2024, 3, 15, 20, 0, tzinfo=UTC), stress_score=100.0, perceived_exertion=9
        )
        result = LoadEngine().readiness([morning, evening], now=now, tz="UTC")
        assert result.weekly_stress_current == pytest.approx(40.0)
        assert result.last_rpe == 4

    def test_mis_start_not_last_workout(
        self, workout_factory: Callable[..., WorkoutRecord], now: datetime
    ) -> None:
        run = workout_factory(start=now - timedelta(days=3), perceived_exertion=7)
        blip = workout_factory(start=now - timedelta(hours=2), minutes=0.5, perceived_exertion=1)
        result = LoadEngine().readiness([run, blip], now=now, tz="UTC")
        assert result.days_since_last_workout == 3
        assert result.last_rpe == 7

    def test_weekly_target_used(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        result = LoadEngine().readiness(steady_history, now=now, tz="UTC", weekly_target=600)
        assert result.weekly_stress_target == 600.0
        assert result.tss_balance == pytest.approx(450.0)


class TestAnalyzeZonesAndReport:
    def test_analyze_zones_override(self, steady_history: list[WorkoutRecord]) -> None:
        result = LoadEngine().analyze_zones(steady_history, max_hr_override=195)
        assert result.max_hr_source == MaxHRSource.OVERRIDE
        assert result.zone_model.max_hr == 195

    def test_report_bundles_results(
        self, mixed_history: list[WorkoutRecord], now: datetime
    ) -> None:
        report = LoadEngine().report(
            mixed_history, now=now, tz="Europe/Paris", scheme=ZoneScheme.THREE_ZONE
        )
        assert isinstance(report, EngineReport)
        assert report.training_load.total_activities == 15
        assert report.zones.zone_model.scheme == ZoneScheme.THREE_ZONE
        assert report.readiness.form == pytest.approx(report.training_load.metrics.form)
