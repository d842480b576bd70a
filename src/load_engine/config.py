"""Engine configuration: every tunable threshold in one frozen structure.

Defaults come from the constants in ``load_engine.models.enums``. A handful
of values can be overridden from the environment with ``EngineConfig.from_env()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from load_engine.exceptions import ConfigError
from load_engine.models import enums
from load_engine.models.enums import DataQuality, SportCategory, ZoneScheme


@dataclass(frozen=True)
class StressConfig:
    """Per-activity stress estimation parameters."""

    run_base_per_hour: float = enums.RUN_BASE_STRESS_PER_HOUR
    default_base_per_hour: float = enums.DEFAULT_BASE_STRESS_PER_HOUR
    reference_hr: float = enums.REFERENCE_HEART_RATE
    multiplier_min: float = enums.INTENSITY_MULTIPLIER_MIN
    multiplier_max: float = enums.INTENSITY_MULTIPLIER_MAX
    variability_index: Mapping[SportCategory, float] = field(
        default_factory=lambda: dict(enums.SPORT_VARIABILITY_INDEX)
    )
    default_variability_index: float = enums.DEFAULT_VARIABILITY_INDEX
    trimp_coefficient: float = enums.TRIMP_COEFFICIENT
    trimp_exponent: float = enums.TRIMP_EXPONENT
    trimp_multiplier: Mapping[SportCategory, float] = field(
        default_factory=lambda: dict(enums.SPORT_TRIMP_MULTIPLIER)
    )
    default_trimp_multiplier: float = enums.DEFAULT_TRIMP_MULTIPLIER
    min_activity_seconds: float = enums.MIN_ACTIVITY_SECONDS

    def __post_init__(self) -> None:
        if self.reference_hr <= 0:
            raise ConfigError("reference_hr", "must be positive")
        if not 0 <= self.multiplier_min <= self.multiplier_max:
            raise ConfigError("multiplier_min", "band must satisfy 0 <= min <= max")
        if self.min_activity_seconds < 0:
            raise ConfigError("min_activity_seconds", "must not be negative")

    def base_per_hour(self, sport: SportCategory) -> float:
        if sport is SportCategory.RUN:
            return self.run_base_per_hour
        return self.default_base_per_hour


@dataclass(frozen=True)
class PMCConfig:
    """Performance Management Chart time constants and status cutoffs."""

    chronic_days: int = enums.CHRONIC_TIME_CONSTANT_DAYS
    acute_days: int = enums.ACUTE_TIME_CONSTANT_DAYS
    ramp_window_days: int = enums.RAMP_RATE_WINDOW_DAYS
    peak_ramp_rate: float = enums.PEAK_RAMP_RATE
    flat_ramp_band: float = enums.FLAT_RAMP_BAND
    recover_form: float = enums.RECOVER_FORM

    def __post_init__(self) -> None:
        for name in ("chronic_days", "acute_days", "ramp_window_days"):
            if getattr(self, name) < 1:
                raise ConfigError(name, "must be at least 1 day")
        if self.flat_ramp_band < 0:
            raise ConfigError("flat_ramp_band", "must be non-negative")
        if self.peak_ramp_rate <= self.flat_ramp_band:
            raise ConfigError("peak_ramp_rate", "must exceed flat_ramp_band")


@dataclass(frozen=True)
class ZoneConfig:
    """Max-HR estimation, grading bands and zone boundaries."""

    default_max_hr: int = enums.DEFAULT_MAX_HR
    default_resting_hr: int = enums.DEFAULT_RESTING_HR
    min_valid_max_hr: int = enums.MIN_VALID_MAX_HR
    min_override_max_hr: int = enums.MIN_OVERRIDE_MAX_HR
    plausible_hr_min: int = enums.PLAUSIBLE_HR_MIN
    plausible_hr_max: int = enums.PLAUSIBLE_HR_MAX
    corroboration_bpm: int = enums.MAX_HR_CORROBORATION_BPM
    min_corroborating: int = enums.MAX_HR_MIN_CORROBORATING
    lthr_fraction: float = enums.LTHR_FRACTION_OF_MAX
    resting_hr_percentile: float = enums.RESTING_HR_PERCENTILE
    ftp_percentile: float = enums.FTP_PERCENTILE
    ftp_min_effort_s: float = enums.FTP_MIN_EFFORT_SECONDS
    hr_percentiles: tuple[int, ...] = enums.HR_PERCENTILES
    quality_bands: tuple[tuple[DataQuality, float, int], ...] = enums.DATA_QUALITY_BANDS
    high_intensity_fraction: float = enums.HIGH_INTENSITY_FRACTION
    confidence_recency_days: int = enums.CONFIDENCE_RECENCY_DAYS
    confidence_medium_samples: int = enums.CONFIDENCE_MEDIUM_SAMPLES
    confidence_high_samples: int = enums.CONFIDENCE_HIGH_SAMPLES
    min_sport_activities: int = enums.MIN_SPORT_ACTIVITIES
    low_max_hr_warning: int = enums.LOW_MAX_HR_WARNING
    min_hr_records: int = enums.MIN_HR_RECORDS_FOR_ZONES
    boundaries_pct: Mapping[ZoneScheme, tuple[float, ...]] = field(
        default_factory=lambda: dict(enums.ZONE_BOUNDARIES_PCT_MAX)
    )

    def __post_init__(self) -> None:
        if self.plausible_hr_min >= self.plausible_hr_max:
            raise ConfigError("plausible_hr_min", "must be below plausible_hr_max")
        if self.confidence_medium_samples > self.confidence_high_samples:
            raise ConfigError(
                "confidence_medium_samples", "must not exceed confidence_high_samples"
            )
        for scheme in ZoneScheme:
            bounds = self.boundaries_pct.get(scheme)
            if bounds is None:
                raise ConfigError("boundaries_pct", f"missing scheme {scheme.value}")
            if bounds[0] != 0 or bounds[-1] != 100:
                raise ConfigError("boundaries_pct", f"{scheme.value} must span 0-100")
            if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
                raise ConfigError("boundaries_pct", f"{scheme.value} must be increasing")


@dataclass(frozen=True)
class ReadinessConfig:
    """Recovery score weights, readiness tiers and weekly target fallback."""

    baseline: float = enums.READINESS_BASELINE
    rest_bonus_per_day: float = enums.REST_BONUS_PER_DAY
    rest_bonus_cap: float = enums.REST_BONUS_CAP
    rpe_neutral: float = enums.RPE_NEUTRAL
    rpe_penalty_per_point: float = enums.RPE_PENALTY_PER_POINT
    heavy_fatigue_balance: float = enums.HEAVY_FATIGUE_BALANCE
    heavy_fatigue_penalty: float = enums.HEAVY_FATIGUE_PENALTY
    moderate_fatigue_balance: float = enums.MODERATE_FATIGUE_BALANCE
    moderate_fatigue_penalty: float = enums.MODERATE_FATIGUE_PENALTY
    well_rested_balance: float = enums.WELL_RESTED_BALANCE
    well_rested_bonus: float = enums.WELL_RESTED_BONUS
    recovery_met_bonus: float = enums.RECOVERY_MET_BONUS
    recovery_unmet_penalty: float = enums.RECOVERY_UNMET_PENALTY
    high_score: int = enums.READINESS_HIGH_SCORE
    medium_score: int = enums.READINESS_MEDIUM_SCORE
    accumulated_rest_days: int = enums.ACCUMULATED_REST_DAYS
    long_break_days: int = enums.LONG_BREAK_DAYS
    no_history_days: int = enums.NO_HISTORY_DAYS_SINCE_WORKOUT
    week_start_weekday: int = enums.WEEK_START_WEEKDAY
    default_weekly_target: float = enums.DEFAULT_WEEKLY_STRESS_TARGET

    def __post_init__(self) -> None:
        if self.medium_score > self.high_score:
            raise ConfigError("medium_score", "must not exceed high_score")
        if self.heavy_fatigue_balance > self.moderate_fatigue_balance:
            raise ConfigError(
                "heavy_fatigue_balance", "must not exceed moderate_fatigue_balance"
            )
        if not 0 <= self.week_start_weekday <= 6:
            raise ConfigError("week_start_weekday", "must be 0 (Monday) to 6 (Sunday)")
        if self.default_weekly_target <= 0:
            raise ConfigError("default_weekly_target", "must be positive")


@dataclass(frozen=True)
class EngineConfig:
    """Top-level configuration handed to ``LoadEngine``."""

    stress: StressConfig = field(default_factory=StressConfig)
    pmc: PMCConfig = field(default_factory=PMCConfig)
    zones: ZoneConfig = field(default_factory=ZoneConfig)
    readiness: ReadinessConfig = field(default_factory=ReadinessConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a config, overriding selected defaults from environment variables.

        Recognised variables:
            LOAD_ENGINE_CHRONIC_DAYS, LOAD_ENGINE_ACUTE_DAYS,
            LOAD_ENGINE_WEEKLY_TARGET, LOAD_ENGINE_DEFAULT_MAX_HR
        """
        env = os.environ if environ is None else environ
        pmc = PMCConfig(
            chronic_days=int(env.get("LOAD_ENGINE_CHRONIC_DAYS", enums.CHRONIC_TIME_CONSTANT_DAYS)),
            acute_days=int(env.get("LOAD_ENGINE_ACUTE_DAYS", enums.ACUTE_TIME_CONSTANT_DAYS)),
        )
        readiness = ReadinessConfig(
            default_weekly_target=float(
                env.get("LOAD_ENGINE_WEEKLY_TARGET", enums.DEFAULT_WEEKLY_STRESS_TARGET)
            ),
        )
        zones = ZoneConfig(
            default_max_hr=int(env.get("LOAD_ENGINE_DEFAULT_MAX_HR", enums.DEFAULT_MAX_HR)),
        )
        return cls(pmc=pmc, zones=zones, readiness=readiness)
