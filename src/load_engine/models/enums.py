"""Enumerations and constants for the training load engine.

Thresholds cite their published source where one exists; the rest are
engineering defaults that the config dataclasses expose for tuning.
"""

from enum import Enum, IntEnum, auto


class SportCategory(str, Enum):
    """Closed set of sport categories the stress model distinguishes."""

    RUN = "run"
    RIDE = "ride"
    SWIM = "swim"
    WALK = "walk"
    HIKE = "hike"
    ROW = "row"
    SKI = "ski"
    PADDLE = "paddle"
    STRENGTH = "strength"
    YOGA = "yoga"
    TEAM_SPORT = "team_sport"
    RACKET = "racket"
    CLIMB = "climb"
    OTHER = "other"

    @classmethod
    def from_activity_type(cls, activity_type: str | None) -> "SportCategory":
        """Map a provider activity type ("Run", "VirtualRide", "trail_running") to a category."""
        if not activity_type:
            return cls.OTHER
        key = activity_type.replace("_", "").replace(" ", "").lower()
        if key in _EXACT_SPORT_KEYS:
            return _EXACT_SPORT_KEYS[key]
        for fragment, category in _SPORT_FRAGMENTS:
            if fragment in key:
                return category
        return cls.OTHER


# Exact provider keys (lower-cased, separators stripped) checked before fragments.
_EXACT_SPORT_KEYS = {
    "weighttraining": SportCategory.STRENGTH,
    "strengthtraining": SportCategory.STRENGTH,
    "workout": SportCategory.STRENGTH,
    "crossfit": SportCategory.STRENGTH,
    "yoga": SportCategory.YOGA,
    "pilates": SportCategory.YOGA,
    "soccer": SportCategory.TEAM_SPORT,
    "basketball": SportCategory.TEAM_SPORT,
    "tennis": SportCategory.RACKET,
    "badminton": SportCategory.RACKET,
    "squash": SportCategory.RACKET,
    "rockclimbing": SportCategory.CLIMB,
}

# First matching fragment wins.
_SPORT_FRAGMENTS = (
    ("run", SportCategory.RUN),
    ("ride", SportCategory.RIDE),
    ("bik", SportCategory.RIDE),
    ("cycling", SportCategory.RIDE),
    ("swim", SportCategory.SWIM),
    ("hike", SportCategory.HIKE),
    ("hiking", SportCategory.HIKE),
    ("walk", SportCategory.WALK),
    ("row", SportCategory.ROW),
    ("ski", SportCategory.SKI),
    ("snowboard", SportCategory.SKI),
    ("kayak", SportCategory.PADDLE),
    ("canoe", SportCategory.PADDLE),
    ("paddl", SportCategory.PADDLE),
    ("climb", SportCategory.CLIMB),
)


class StressMethod(IntEnum):
    """Which input path produced a workout's stress score."""

    EXTERNAL = auto()
    POWER = auto()
    HEART_RATE = auto()
    DURATION = auto()
    NONE = auto()


class TrainingStatus(str, Enum):
    """PMC trend classification."""

    BUILD = "build"
    PEAK = "peak"
    MAINTAIN = "maintain"
    RECOVER = "recover"


class ZoneScheme(str, Enum):
    """Available heart-rate zone schemes (all anchored on max HR)."""

    FIVE_ZONE = "five_zone"
    THREE_ZONE = "three_zone"
    POWER_BASED = "power_based"


class DataQuality(IntEnum):
    """Heart-rate data coverage grade, ordered worst to best."""

    NONE = 0
    POOR = 1
    FAIR = 2
    GOOD = 3
    EXCELLENT = 4


class Confidence(IntEnum):
    """Confidence in the max-HR estimate, ordered worst to best."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class MaxHRSource(IntEnum):
    """Where the max HR used for zones came from."""

    ESTIMATED = auto()
    OVERRIDE = auto()
    DEFAULT = auto()


class ReadinessLevel(IntEnum):
    """Same-day readiness tier derived from the recovery score."""

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class ExperienceLevel(str, Enum):
    """Self-reported training experience used for weekly target personalisation."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class TrainingPhilosophy(str, Enum):
    """Preferred training distribution."""

    VOLUME = "volume"
    INTENSITY = "intensity"
    BALANCED = "balanced"
    POLARIZED = "polarized"


# ---------------------------------------------------------------------------
# Stress estimation
# ---------------------------------------------------------------------------
# Duration-based fallback, stress points per hour at reference intensity
RUN_BASE_STRESS_PER_HOUR = 70.0
DEFAULT_BASE_STRESS_PER_HOUR = 60.0

# Average HR that maps to an intensity multiplier of 1.0
REFERENCE_HEART_RATE = 140.0
INTENSITY_MULTIPLIER_MIN = 0.5
INTENSITY_MULTIPLIER_MAX = 1.5

# Activities this short or shorter are treated as mis-starts and left out of daily load
MIN_ACTIVITY_SECONDS = 300.0

# Coggan power TSS = (s × NP × IF) / (FTP × 3600) × 100, Allen & Coggan (2010)
# Variability index (NP / avg power) when no power stream is available
SPORT_VARIABILITY_INDEX = {
    SportCategory.RUN: 1.02,
    SportCategory.RIDE: 1.05,
}
DEFAULT_VARIABILITY_INDEX = 1.03

# Banister (1991) TRIMP weighting: 0.64 × e^(1.92 × ΔHR ratio)
TRIMP_COEFFICIENT = 0.64
TRIMP_EXPONENT = 1.92

# TRIMP sport weighting: cycling reads lower for the same HR, swimming higher
SPORT_TRIMP_MULTIPLIER = {
    SportCategory.RUN: 1.0,
    SportCategory.RIDE: 0.85,
    SportCategory.SWIM: 1.1,
    SportCategory.HIKE: 0.7,
    SportCategory.WALK: 0.5,
    SportCategory.ROW: 1.0,
    SportCategory.SKI: 0.9,
    SportCategory.PADDLE: 0.9,
    SportCategory.STRENGTH: 0.8,
    SportCategory.YOGA: 0.6,
    SportCategory.TEAM_SPORT: 1.0,
    SportCategory.RACKET: 0.9,
    SportCategory.CLIMB: 0.9,
}
DEFAULT_TRIMP_MULTIPLIER = 0.8

# ---------------------------------------------------------------------------
# Performance Management Chart, Banister impulse-response / Coggan PMC
# ---------------------------------------------------------------------------
CHRONIC_TIME_CONSTANT_DAYS = 42
ACUTE_TIME_CONSTANT_DAYS = 7
RAMP_RATE_WINDOW_DAYS = 7

# Status cutoffs (chronic points per week / form points)
PEAK_RAMP_RATE = 8.0
FLAT_RAMP_BAND = 1.0
RECOVER_FORM = 10.0

STATUS_RECOMMENDATIONS = {
    TrainingStatus.PEAK: (
        "High training stress detected. Consider reducing intensity and "
        "incorporating recovery."
    ),
    TrainingStatus.BUILD: (
        "Good building phase. Maintain current training progression while "
        "monitoring recovery."
    ),
    TrainingStatus.MAINTAIN: (
        "Steady training load. Consider varying intensity or adding "
        "progressive overload."
    ),
    TrainingStatus.RECOVER: (
        "Low training stress. Good time for recovery or gradually increasing "
        "training load."
    ),
}
EMPTY_HISTORY_RECOMMENDATION = "Start building your training load gradually."

# ---------------------------------------------------------------------------
# Heart-rate zones and thresholds
# ---------------------------------------------------------------------------
# 220 - age with an assumed age of 30 when nothing better is known
DEFAULT_MAX_HR = 190
DEFAULT_RESTING_HR = 60
MIN_VALID_MAX_HR = 120
MIN_OVERRIDE_MAX_HR = 100

# Samples outside this band are treated as sensor artefacts
PLAUSIBLE_HR_MIN = 80
PLAUSIBLE_HR_MAX = 230

# A peak counts as sustained when another sample sits within this many bpm
MAX_HR_CORROBORATION_BPM = 3
MAX_HR_MIN_CORROBORATING = 1

# LTHR ≈ 85% HRmax, Friel (2009), The Triathlete's Training Bible
LTHR_FRACTION_OF_MAX = 0.85
RESTING_HR_PERCENTILE = 5
FTP_PERCENTILE = 90
FTP_MIN_EFFORT_SECONDS = 1200

HR_PERCENTILES = (50, 75, 85, 90, 95, 99)

# Data quality bands by HR coverage (percent) and HR record count.
# Each tuple: (grade, max_pct_exclusive, max_count_exclusive); first hit wins.
DATA_QUALITY_BANDS = (
    (DataQuality.POOR, 20.0, 5),
    (DataQuality.FAIR, 50.0, 10),
    (DataQuality.GOOD, 80.0, 20),
)

# Confidence by count of recent high-intensity samples
HIGH_INTENSITY_FRACTION = 0.85
CONFIDENCE_RECENCY_DAYS = 365
CONFIDENCE_MEDIUM_SAMPLES = 5
CONFIDENCE_HIGH_SAMPLES = 15

MIN_SPORT_ACTIVITIES = 3
LOW_MAX_HR_WARNING = 160
MIN_HR_RECORDS_FOR_ZONES = 10

# Zone boundaries as % of max HR; zone 1 starts at 0 and the last ends at 100
ZONE_BOUNDARIES_PCT_MAX = {
    ZoneScheme.FIVE_ZONE: (0, 60, 70, 80, 90, 100),
    ZoneScheme.THREE_ZONE: (0, 70, 85, 100),
    # Coggan bands translated to HR; the supra-threshold band is unreachable
    # on heart rate and is folded into the threshold zone.
    ZoneScheme.POWER_BASED: (0, 68, 83, 94, 100),
}

# ---------------------------------------------------------------------------
# Readiness
# ---------------------------------------------------------------------------
READINESS_BASELINE = 50.0
REST_BONUS_PER_DAY = 8.0
REST_BONUS_CAP = 30.0
RPE_NEUTRAL = 5.0
RPE_PENALTY_PER_POINT = 5.0
HEAVY_FATIGUE_BALANCE = -100.0
HEAVY_FATIGUE_PENALTY = 20.0
MODERATE_FATIGUE_BALANCE = -50.0
MODERATE_FATIGUE_PENALTY = 10.0
WELL_RESTED_BALANCE = 50.0
WELL_RESTED_BONUS = 10.0
RECOVERY_MET_BONUS = 15.0
RECOVERY_UNMET_PENALTY = 10.0
READINESS_HIGH_SCORE = 80
READINESS_MEDIUM_SCORE = 60
ACCUMULATED_REST_DAYS = 2
LONG_BREAK_DAYS = 3
NO_HISTORY_DAYS_SINCE_WORKOUT = 7
WEEK_START_WEEKDAY = 0  # Monday

# ---------------------------------------------------------------------------
# Weekly stress target personalisation
# ---------------------------------------------------------------------------
DEFAULT_WEEKLY_STRESS_TARGET = 400.0
WEEKLY_TARGET_MIN = 200.0
WEEKLY_TARGET_MAX = 1000.0
EXPERIENCE_TARGET_MULTIPLIER = {
    ExperienceLevel.BEGINNER: 0.7,
    ExperienceLevel.INTERMEDIATE: 1.0,
    ExperienceLevel.ADVANCED: 1.3,
    ExperienceLevel.ELITE: 1.6,
}
PHILOSOPHY_TARGET_MULTIPLIER = {
    TrainingPhilosophy.VOLUME: 1.2,
    TrainingPhilosophy.INTENSITY: 0.9,
    TrainingPhilosophy.BALANCED: 1.0,
    TrainingPhilosophy.POLARIZED: 1.1,
}
LOW_HOURS_THRESHOLD = 5.0
LOW_HOURS_MULTIPLIER = 0.8
HIGH_HOURS_THRESHOLD = 10.0
HIGH_HOURS_MULTIPLIER = 1.2
EXPERIENCED_HISTORY_ACTIVITIES = 20
EXPERIENCED_HISTORY_MULTIPLIER = 1.1
