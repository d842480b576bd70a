"""Heart-rate zone models, athlete thresholds and zone analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field

from load_engine.models.enums import (
    Confidence,
    DataQuality,
    MaxHRSource,
    SportCategory,
    ZoneScheme,
)


@dataclass(frozen=True)
class Zone:
    """A single zone covering ``[lower_bpm, upper_bpm)``; the top zone includes max HR."""

    number: int
    name: str
    description: str
    lower_bpm: int
    upper_bpm: int
    lower_pct: float
    upper_pct: float
    color: str


@dataclass(frozen=True)
class ZoneModel:
    """An ordered partition of ``[0, max_hr]`` into named zones."""

    scheme: ZoneScheme
    name: str
    description: str
    max_hr: int
    zones: tuple[Zone, ...]

    def zone_for(self, heart_rate: float) -> Zone:
        """Return the zone containing *heart_rate* (clamped to the model's range)."""
        for zone in self.zones:
            if heart_rate < zone.upper_bpm:
                return zone
        return self.zones[-1]


@dataclass(frozen=True)
class AthleteThresholds:
    """Point estimates of the athlete's physiological anchors."""

    max_hr: int
    resting_hr: int
    ftp_watts: float | None = None
    lthr_bpm: float | None = None


@dataclass(frozen=True)
class HeartRateStats:
    """Summary of heart-rate data across an athlete's history."""

    max_hr: int | None = None
    avg_hr: int | None = None
    resting_hr: int | None = None
    activities_with_hr: int = 0
    total_activities: int = 0
    percentiles: dict[int, float | None] = field(default_factory=dict)


@dataclass(frozen=True)
class SportZoneAnalysis:
    """Per-sport max/avg HR and the five-zone model built from that sport's max."""

    sport: SportCategory
    max_hr: int
    avg_hr: int
    activity_count: int
    zone_model: ZoneModel


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one zone analysis request."""

    stats: HeartRateStats
    thresholds: AthleteThresholds
    zone_model: ZoneModel
    alternative_models: tuple[ZoneModel, ...]
    sport_breakdown: tuple[SportZoneAnalysis, ...]
    data_quality: DataQuality
    confidence: Confidence
    high_intensity_samples: int
    max_hr_source: MaxHRSource
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def needs_more_data(self) -> bool:
        return self.data_quality in (DataQuality.NONE, DataQuality.POOR)
