"""Personalised weekly stress target from the athlete's training profile."""

from __future__ import annotations

from load_engine.models.enums import (
    DEFAULT_WEEKLY_STRESS_TARGET,
    EXPERIENCE_TARGET_MULTIPLIER,
    EXPERIENCED_HISTORY_ACTIVITIES,
    EXPERIENCED_HISTORY_MULTIPLIER,
    HIGH_HOURS_MULTIPLIER,
    HIGH_HOURS_THRESHOLD,
    LOW_HOURS_MULTIPLIER,
    LOW_HOURS_THRESHOLD,
    PHILOSOPHY_TARGET_MULTIPLIER,
    WEEKLY_TARGET_MAX,
    WEEKLY_TARGET_MIN,
    ExperienceLevel,
    TrainingPhilosophy,
)


def personalized_weekly_target(
    experience: ExperienceLevel,
    philosophy: TrainingPhilosophy | None = None,
    weekly_hours: float | None = None,
    activities_analyzed: int = 0,
) -> float:
    """Scale the default weekly target by experience, philosophy and available time.

    Args:
        experience: Self-reported experience level.
        philosophy: Preferred training distribution. Optional.
        weekly_hours: Hours per week the athlete can train. Optional.
        activities_analyzed: Size of the history behind the estimate.

    Returns:
        Weekly stress target clamped to [200, 1000], rounded to a whole number.
    """
    target = DEFAULT_WEEKLY_STRESS_TARGET * EXPERIENCE_TARGET_MULTIPLIER[experience]
    if philosophy is not None:
        target *= PHILOSOPHY_TARGET_MULTIPLIER[philosophy]
    if weekly_hours:
        if weekly_hours < LOW_HOURS_THRESHOLD:
            target *= LOW_HOURS_MULTIPLIER
        elif weekly_hours > HIGH_HOURS_THRESHOLD:
            target *= HIGH_HOURS_MULTIPLIER
    if activities_analyzed > EXPERIENCED_HISTORY_ACTIVITIES:
        target *= EXPERIENCED_HISTORY_MULTIPLIER
    return float(round(max(WEEKLY_TARGET_MIN, min(WEEKLY_TARGET_MAX, target))))
