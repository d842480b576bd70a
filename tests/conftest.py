"""Shared test fixtures: workout factories, histories, fixed clocks and timezones."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable
from zoneinfo import ZoneInfo

import pytest

from load_engine.models.enums import SportCategory
from load_engine.models.workout import WorkoutRecord

UTC = timezone.utc


@pytest.fixture
def paris() -> ZoneInfo:
    return ZoneInfo("Europe/Paris")


@pytest.fixture
def now() -> datetime:
    """Fixed clock: Friday 2024-03-15 18:00 UTC."""
    return datetime(2024, 3, 15, 18, 0, tzinfo=UTC)


@pytest.fixture
def workout_factory() -> Callable[..., WorkoutRecord]:
    """Factory fixture for creating WorkoutRecord instances.

    Usage:
        run = workout_factory(start=datetime(...), minutes=45, avg_hr=150)
    """
    counter = {"n": 0}

    def factory(
        start: datetime | None = datetime(2024, 3, 15, 7, 0, tzinfo=UTC),
        minutes: float = 60.0,
        sport: SportCategory = SportCategory.RUN,
        avg_hr: float | None = None,
        max_hr: float | None = None,
        avg_power: float | None = None,
        weighted_avg_power: float | None = None,
        perceived_exertion: float | None = None,
        stress_score: float | None = None,
        recovery_time_h: float | None = None,
        activity_id: str | None = None,
    ) -> WorkoutRecord:
        counter["n"] += 1
        return WorkoutRecord(
            activity_id=activity_id or f"a{counter['n']}",
            start_time=start,
            sport=sport,
            moving_time_s=minutes * 60.0,
            avg_hr=avg_hr,
            max_hr=max_hr,
            avg_power=avg_power,
            weighted_avg_power=weighted_avg_power,
            perceived_exertion=perceived_exertion,
            stress_score=stress_score,
            recovery_time_h=recovery_time_h,
        )

    return factory


@pytest.fixture
def steady_history(
    workout_factory: Callable[..., WorkoutRecord], now: datetime
) -> list[WorkoutRecord]:
    """Six weeks of every-other-day one-hour runs with heart rate, peaks 184-186 bpm."""
    records = []
    for i in range(21):
        start = now - timedelta(days=2 * i + 1, hours=10)
        records.append(
            workout_factory(start=start, minutes=60, avg_hr=150, max_hr=184 + (i % 3))
        )
    return records


@pytest.fixture
def mixed_history(
    workout_factory: Callable[..., WorkoutRecord], now: datetime
) -> list[WorkoutRecord]:
    """Runs and rides with heart rate plus a few strength sessions without."""
    records = []
    for i in range(6):
        records.append(
            workout_factory(
                start=now - timedelta(days=i * 3 + 1),
                sport=SportCategory.RUN,
                avg_hr=152,
                max_hr=186 - (i % 2),
            )
        )
        records.append(
            workout_factory(
                start=now - timedelta(days=i * 3 + 2),
                sport=SportCategory.RIDE,
                minutes=90,
                avg_hr=138,
                max_hr=172 + (i % 2),
            )
        )
    for i in range(3):
        records.append(
            workout_factory(
                start=now - timedelta(days=i * 4 + 2, hours=3),
                sport=SportCategory.STRENGTH,
                minutes=40,
            )
        )
    return records
