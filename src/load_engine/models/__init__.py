"""Data models for the training load engine."""

from load_engine.models.enums import (
    Confidence,
    DataQuality,
    ExperienceLevel,
    MaxHRSource,
    ReadinessLevel,
    SportCategory,
    StressMethod,
    TrainingPhilosophy,
    TrainingStatus,
    ZoneScheme,
)
from load_engine.models.load import DailyLoadPoint, PMCMetrics, TrainingLoadResult
from load_engine.models.readiness import ReadinessResult
from load_engine.models.workout import StressEstimate, WorkoutRecord
from load_engine.models.zones import (
    AnalysisResult,
    AthleteThresholds,
    HeartRateStats,
    SportZoneAnalysis,
    Zone,
    ZoneModel,
)

__all__ = [
    "AnalysisResult",
    "AthleteThresholds",
    "Confidence",
    "DailyLoadPoint",
    "DataQuality",
    "ExperienceLevel",
    "HeartRateStats",
    "MaxHRSource",
    "PMCMetrics",
    "ReadinessLevel",
    "ReadinessResult",
    "SportCategory",
    "SportZoneAnalysis",
    "StressEstimate",
    "StressMethod",
    "TrainingLoadResult",
    "TrainingPhilosophy",
    "TrainingStatus",
    "WorkoutRecord",
    "Zone",
    "ZoneModel",
    "ZoneScheme",
]
