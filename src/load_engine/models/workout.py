"""Workout record, the engine's only raw input, and its per-activity stress estimate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from load_engine.models.enums import SportCategory, StressMethod


@dataclass(frozen=True)
class WorkoutRecord:
    """One completed activity as supplied by the activity store.

    ``start_time`` should be timezone-aware; a naive value is read as the
    athlete's local wall-clock time. ``stress_score`` is an externally
    supplied TSS that always takes precedence over estimation.
    """

    activity_id: str
    start_time: datetime | None
    sport: SportCategory = SportCategory.OTHER
    moving_time_s: float | None = None
    distance_m: float | None = None
    avg_hr: float | None = None
    max_hr: float | None = None
    avg_power: float | None = None
    weighted_avg_power: float | None = None
    perceived_exertion: float | None = None  # 1-10
    stress_score: float | None = None
    recovery_time_h: float | None = None
    name: str = ""

    @property
    def has_heart_rate(self) -> bool:
        return self.avg_hr is not None and self.avg_hr > 0

    @property
    def has_power(self) -> bool:
        return self.avg_power is not None and self.avg_power > 0

    @property
    def duration_hours(self) -> float:
        seconds = self.moving_time_s
        if not seconds or not math.isfinite(seconds) or seconds <= 0:
            return 0.0
        return seconds / 3600.0

    @property
    def peak_heart_rate(self) -> float | None:
        """Highest HR seen in the activity, falling back to the average."""
        if self.max_hr is not None and self.max_hr > 0:
            return self.max_hr
        if self.has_heart_rate:
            return self.avg_hr
        return None


@dataclass(frozen=True)
class StressEstimate:
    """Stress (TSS-equivalent) and TRIMP for a single workout."""

    stress: float
    trimp: float
    method: StressMethod
