"""Same-day readiness: recovery score, tier and guidance.

Score = baseline
      + min(cap, days_rest × bonus_per_day)
      - (rpe - neutral) × penalty_per_point
      ± TSS-balance band adjustment
      ± recovery-time requirement adjustment
clamped to [0, 100].
"""

from __future__ import annotations

from load_engine.config import ReadinessConfig
from load_engine.models.enums import ReadinessLevel
from load_engine.models.readiness import ReadinessResult

_DEFAULT_READINESS_CONFIG = ReadinessConfig()


def effective_weekly_target(
    weekly_target: float | None, config: ReadinessConfig = _DEFAULT_READINESS_CONFIG
) -> float:
    """Personalised target when usable, otherwise the configured fallback."""
    if weekly_target is None or weekly_target <= 0:
        return config.default_weekly_target
    return float(weekly_target)


def recovery_time_met(
    recovery_time_h: float | None, hours_since_last_workout: float | None
) -> bool | None:
    """Whether a stated recovery-time requirement has elapsed; None when not applicable."""
    if not recovery_time_h or recovery_time_h <= 0 or hours_since_last_workout is None:
        return None
    return hours_since_last_workout >= recovery_time_h


def calculate_recovery_score(
    days_since_last_workout: int,
    balance: float,
    last_rpe: float | None = None,
    recovery_met: bool | None = None,
    config: ReadinessConfig = _DEFAULT_READINESS_CONFIG,
) -> int:
    """Combine rest, perceived exertion, TSS balance and recovery time into 0-100."""
    score = config.baseline
    score += min(config.rest_bonus_cap, max(0, days_since_last_workout) * config.rest_bonus_per_day)

    if last_rpe:
        score -= (last_rpe - config.rpe_neutral) * config.rpe_penalty_per_point

    if balance < config.heavy_fatigue_balance:
        score -= config.heavy_fatigue_penalty
    elif balance < config.moderate_fatigue_balance:
        score -= config.moderate_fatigue_penalty
    elif balance > config.well_rested_balance:
        score += config.well_rested_bonus

    if recovery_met is True:
        score += config.recovery_met_bonus
    elif recovery_met is False:
        score -= config.recovery_unmet_penalty

    return int(max(0, min(100, round(score))))


def readiness_level(score: int, config: ReadinessConfig = _DEFAULT_READINESS_CONFIG) -> ReadinessLevel:
    if score >= config.high_score:
        return ReadinessLevel.HIGH
    if score >= config.medium_score:
        return ReadinessLevel.MEDIUM
    return ReadinessLevel.LOW


def readiness_recommendation(
    level: ReadinessLevel,
    days_since_last_workout: int,
    balance: float,
    config: ReadinessConfig = _DEFAULT_READINESS_CONFIG,
) -> str:
    """Pick the canned guidance for a readiness tier."""
    if level is ReadinessLevel.HIGH:
        if days_since_last_workout >= config.accumulated_rest_days:
            return "Ready for a hard workout! Consider intervals or tempo run."
        return "Good energy - perfect for a quality training session."
    if level is ReadinessLevel.MEDIUM:
        if balance < config.moderate_fatigue_balance:
            return "Moderate fatigue - try an easy run or cross-training."
        return "Good for moderate training - steady pace or hills."
    if days_since_last_workout >= config.long_break_days:
        return "Long break detected - ease back with a gentle run."
    return "High fatigue - consider rest day or easy recovery activity."


def evaluate_readiness(
    days_since_last_workout: int,
    weekly_stress_current: float,
    weekly_stress_target: float | None = None,
    last_rpe: float | None = None,
    recovery_time_h: float | None = None,
    hours_since_last_workout: float | None = None,
    form: float | None = None,
    config: ReadinessConfig = _DEFAULT_READINESS_CONFIG,
) -> ReadinessResult:
    """Evaluate same-day readiness.

    Args:
        days_since_last_workout: Whole days since the most recent workout in
            the full history.
        weekly_stress_current: Week-to-date stress.
        weekly_stress_target: Personalised weekly target; the configured
            fallback is used when missing or not positive.
        last_rpe: Perceived exertion (1-10) of the most recent workout.
        recovery_time_h: Recovery requirement attached to that workout.
        hours_since_last_workout: Elapsed hours, used with ``recovery_time_h``.
        form: PMC chronic-minus-acute value, reported alongside.
        config: Score weights and tier bands.

    Returns:
        ReadinessResult with the score clamped to [0, 100].
    """
    target = effective_weekly_target(weekly_stress_target, config)
    balance = target - weekly_stress_current
    met = recovery_time_met(recovery_time_h, hours_since_last_workout)
    score = calculate_recovery_score(days_since_last_workout, balance, last_rpe, met, config)
    level = readiness_level(score, config)
    return ReadinessResult(
        recovery_score=score,
        level=level,
        recommendation=readiness_recommendation(level, days_since_last_workout, balance, config),
        days_since_last_workout=days_since_last_workout,
        tss_balance=balance,
        weekly_stress_target=target,
        weekly_stress_current=weekly_stress_current,
        last_rpe=last_rpe,
        form=form,
        recovery_time_met=met,
    )
