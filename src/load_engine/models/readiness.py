"""Readiness evaluation output."""

from __future__ import annotations

from dataclasses import dataclass

from load_engine.models.enums import ReadinessLevel


@dataclass(frozen=True)
class ReadinessResult:
    """Same-day recovery score, tier and guidance.

    ``tss_balance`` is weekly target minus week-to-date stress (negative means
    accumulated fatigue). ``form`` is the PMC chronic-minus-acute value, kept
    for display next to it.
    """

    recovery_score: int
    level: ReadinessLevel
    recommendation: str
    days_since_last_workout: int
    tss_balance: float
    weekly_stress_target: float
    weekly_stress_current: float
    last_rpe: float | None = None
    form: float | None = None
    recovery_time_met: bool | None = None
