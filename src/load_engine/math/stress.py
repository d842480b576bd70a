"""Per-activity training stress: external TSS, power TSS, HR/duration estimate, TRIMP.

References:
    - Allen & Coggan (2010): power-based TSS and intensity factor
    - Banister (1991): TRIMP formula
"""

from __future__ import annotations

import math

from load_engine.config import StressConfig
from load_engine.models.enums import StressMethod
from load_engine.models.workout import StressEstimate, WorkoutRecord
from load_engine.models.zones import AthleteThresholds

_DEFAULT_STRESS_CONFIG = StressConfig()


def estimate_stress(
    record: WorkoutRecord,
    thresholds: AthleteThresholds | None = None,
    config: StressConfig = _DEFAULT_STRESS_CONFIG,
) -> StressEstimate:
    """Estimate the stress score and TRIMP of a single workout.

    Precedence: an external stress score, then power (when FTP is known),
    then heart rate, then duration and sport alone.

    Args:
        record: The workout to score.
        thresholds: Athlete anchors for power TSS and TRIMP. Optional.
        config: Stress estimation parameters.

    Returns:
        StressEstimate with a non-negative stress value.
    """
    trimp = calculate_trimp(record, thresholds, config)

    if (
        record.stress_score is not None
        and math.isfinite(record.stress_score)
        and record.stress_score >= 0
    ):
        return StressEstimate(stress=float(record.stress_score), trimp=trimp, method=StressMethod.EXTERNAL)

    hours = record.duration_hours
    if hours <= 0:
        return StressEstimate(stress=0.0, trimp=0.0, method=StressMethod.NONE)

    ftp = thresholds.ftp_watts if thresholds is not None else None
    if record.has_power and ftp:
        return StressEstimate(
            stress=calculate_power_tss(record, ftp, config),
            trimp=trimp,
            method=StressMethod.POWER,
        )

    multiplier = intensity_multiplier(record.avg_hr, config)
    stress = max(0.0, hours * config.base_per_hour(record.sport) * multiplier)
    method = StressMethod.HEART_RATE if record.has_heart_rate else StressMethod.DURATION
    return StressEstimate(stress=stress, trimp=trimp, method=method)


def intensity_multiplier(avg_hr: float | None, config: StressConfig = _DEFAULT_STRESS_CONFIG) -> float:
    """Scale factor from average HR relative to the reference HR.

    Clamped to ``[multiplier_min, multiplier_max]``; 1.0 without heart rate.
    """
    if avg_hr is None or avg_hr <= 0:
        return 1.0
    ratio = avg_hr / config.reference_hr
    return max(config.multiplier_min, min(config.multiplier_max, ratio))


def calculate_power_tss(
    record: WorkoutRecord, ftp_watts: float, config: StressConfig = _DEFAULT_STRESS_CONFIG
) -> float:
    """Coggan TSS from average power.

    TSS = (seconds × NP × IF) / (FTP × 3600) × 100, where NP is the weighted
    average power when present, otherwise average power scaled by a
    sport-specific variability index.
    """
    if not ftp_watts or ftp_watts <= 0 or not record.moving_time_s:
        return 0.0
    if record.weighted_avg_power:
        normalized_power = record.weighted_avg_power
    else:
        vi = config.variability_index.get(record.sport, config.default_variability_index)
        normalized_power = (record.avg_power or 0.0) * vi
    intensity_factor = normalized_power / ftp_watts
    tss = (record.moving_time_s * normalized_power * intensity_factor) / (ftp_watts * 3600) * 100
    return max(0.0, tss)


def calculate_trimp(
    record: WorkoutRecord,
    thresholds: AthleteThresholds | None,
    config: StressConfig = _DEFAULT_STRESS_CONFIG,
) -> float:
    """Banister TRIMP weighted by sport.

    TRIMP = minutes × r × 0.64 × e^(1.92 × r), r = HR reserve ratio in [0, 1].
    Zero without heart rate, thresholds or duration.
    """
    if thresholds is None or not record.has_heart_rate or record.duration_hours <= 0:
        return 0.0
    if thresholds.max_hr <= thresholds.resting_hr:
        return 0.0

    minutes = record.duration_hours * 60.0
    ratio = (record.avg_hr - thresholds.resting_hr) / (thresholds.max_hr - thresholds.resting_hr)
    ratio = max(0.0, min(1.0, ratio))
    trimp = minutes * ratio * config.trimp_coefficient * math.exp(config.trimp_exponent * ratio)
    return trimp * config.trimp_multiplier.get(record.sport, config.default_trimp_multiplier)
