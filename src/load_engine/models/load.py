"""Daily load series and Performance Management Chart outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from load_engine.models.enums import DataQuality, TrainingStatus


@dataclass(frozen=True)
class DailyLoadPoint:
    """Summed stress for one local calendar day (zero on rest days)."""

    day: date
    load: float = 0.0
    trimp: float = 0.0
    activity_count: int = 0


@dataclass(frozen=True)
class PMCMetrics:
    """Fitness/fatigue/form snapshot for one day.

    ``form`` is chronic minus acute (TSB). It is not the readiness
    ``tss_balance``, which compares weekly stress against a target.
    """

    day: date | None
    load: float
    acute: float
    chronic: float
    form: float
    ramp_rate: float
    status: TrainingStatus
    recommendation: str


@dataclass(frozen=True)
class TrainingLoadResult:
    """Everything the training-load view needs for one athlete and window."""

    start: date
    end: date
    points: tuple[DailyLoadPoint, ...]
    trend: tuple[PMCMetrics, ...]
    metrics: PMCMetrics
    total_activities: int = 0
    activities_with_hr: int = 0
    activities_with_power: int = 0
    data_quality: DataQuality = DataQuality.NONE
    excluded_activities: tuple[str, ...] = field(default_factory=tuple)
