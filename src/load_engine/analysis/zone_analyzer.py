"""Zone analysis: max-HR estimation, data-quality and confidence grading, zone models.

Grading uses two independent signals:
    - data quality from the share of activities carrying heart rate
    - confidence from the count of recent high-intensity HR samples
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime, timedelta

import numpy as np

from load_engine.config import ZoneConfig
from load_engine.math.thresholds import (
    apply_overrides,
    estimate_athlete_thresholds,
    estimate_max_hr,
    peak_hr_samples,
    percentile,
)
from load_engine.math.zones import build_all_zone_models, build_zone_model
from load_engine.models.enums import (
    Confidence,
    DataQuality,
    MaxHRSource,
    SportCategory,
    ZoneScheme,
)
from load_engine.models.workout import WorkoutRecord
from load_engine.models.zones import AnalysisResult, HeartRateStats, SportZoneAnalysis

logger = logging.getLogger(__name__)

_DEFAULT_ZONE_CONFIG = ZoneConfig()


def assess_data_quality(
    activities_with_hr: int, total_activities: int, config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> DataQuality:
    """Grade HR coverage.

    0% → NONE; then the first band whose percentage or count limit is not
    reached (POOR < 20% or < 5, FAIR < 50% or < 10, GOOD < 80% or < 20);
    otherwise EXCELLENT.
    """
    if total_activities <= 0 or activities_with_hr <= 0:
        return DataQuality.NONE
    hr_pct = activities_with_hr / total_activities * 100.0
    for grade, max_pct, max_count in config.quality_bands:
        if hr_pct < max_pct or activities_with_hr < max_count:
            return grade
    return DataQuality.EXCELLENT


def assess_confidence(high_intensity_samples: int, config: ZoneConfig = _DEFAULT_ZONE_CONFIG) -> Confidence:
    """Grade confidence in the max-HR estimate by high-intensity sample count."""
    if high_intensity_samples <= 0:
        return Confidence.NONE
    if high_intensity_samples >= config.confidence_high_samples:
        return Confidence.HIGH
    if high_intensity_samples >= config.confidence_medium_samples:
        return Confidence.MEDIUM
    return Confidence.LOW


def count_high_intensity_samples(
    records: Sequence[WorkoutRecord],
    max_hr: float,
    now: datetime | None = None,
    config: ZoneConfig = _DEFAULT_ZONE_CONFIG,
) -> int:
    """Count activities whose peak HR reached ``high_intensity_fraction`` of *max_hr*.

    With *now* given, activities older than ``confidence_recency_days`` (or
    without a comparable timestamp) do not count.
    """
    floor = max_hr * config.high_intensity_fraction
    cutoff = now - timedelta(days=config.confidence_recency_days) if now is not None else None
    count = 0
    for record in records:
        peak = record.peak_heart_rate
        if peak is None or peak < floor or peak > config.plausible_hr_max:
            continue
        if cutoff is not None and not _is_on_or_after(record.start_time, cutoff):
            continue
        count += 1
    return count


def heart_rate_stats(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> HeartRateStats:
    """Summarise HR coverage, averages and peak-HR percentiles across history."""
    hr_records = [r for r in records if r.has_heart_rate]
    if not hr_records:
        return HeartRateStats(
            total_activities=len(records),
            percentiles={p: None for p in config.hr_percentiles},
        )

    peaks = peak_hr_samples(records, config)
    averages = [float(r.avg_hr) for r in hr_records]
    thresholds = estimate_athlete_thresholds(records, config)
    max_hr = estimate_max_hr(peaks, config)
    return HeartRateStats(
        max_hr=int(round(max_hr)) if max_hr is not None else None,
        avg_hr=int(round(float(np.mean(averages)))),
        resting_hr=thresholds.resting_hr,
        activities_with_hr=len(hr_records),
        total_activities=len(records),
        percentiles={p: percentile(peaks, p) for p in config.hr_percentiles},
    )


def sport_breakdown(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> tuple[SportZoneAnalysis, ...]:
    """Per-sport max/avg HR and five-zone model for sports with enough HR activities.

    Sports below ``min_sport_activities`` are omitted. Ordered by activity
    count (descending), then sport name.
    """
    groups: dict[SportCategory, list[WorkoutRecord]] = defaultdict(list)
    for record in records:
        if record.has_heart_rate:
            groups[record.sport].append(record)

    analyses = []
    for sport, sport_records in groups.items():
        if len(sport_records) < config.min_sport_activities:
            continue
        max_hr = estimate_max_hr(peak_hr_samples(sport_records, config), config)
        if max_hr is None or max_hr < config.min_valid_max_hr:
            logger.debug("Skipping %s breakdown: no usable max HR", sport.value)
            continue
        avg_hr = int(round(float(np.mean([r.avg_hr for r in sport_records]))))
        analyses.append(
            SportZoneAnalysis(
                sport=sport,
                max_hr=int(round(max_hr)),
                avg_hr=avg_hr,
                activity_count=len(sport_records),
                zone_model=build_zone_model(int(round(max_hr)), ZoneScheme.FIVE_ZONE, config),
            )
        )
    analyses.sort(key=lambda a: (-a.activity_count, a.sport.value))
    return tuple(analyses)


def analyze_zones(
    records: Sequence[WorkoutRecord],
    max_hr_override: int | None = None,
    scheme: ZoneScheme = ZoneScheme.FIVE_ZONE,
    now: datetime | None = None,
    config: ZoneConfig = _DEFAULT_ZONE_CONFIG,
) -> AnalysisResult:
    """Analyse HR history and build personalised zone models.

    Args:
        records: Full workout history.
        max_hr_override: Manual max HR; replaces the estimate when plausible.
        scheme: Zone scheme for the primary model; the others become alternatives.
        now: Reference instant for recency of confidence samples. Optional.
        config: Estimation, grading and zone parameters.

    Returns:
        A fully populated AnalysisResult, including for empty history.
    """
    records = list(records)
    stats = heart_rate_stats(records, config)
    thresholds = estimate_athlete_thresholds(records, config)

    if stats.max_hr is not None and stats.max_hr >= config.min_valid_max_hr:
        source = MaxHRSource.ESTIMATED
    else:
        source = MaxHRSource.DEFAULT

    recommendations: list[str] = []
    if max_hr_override is not None:
        if max_hr_override > config.min_override_max_hr:
            thresholds = apply_overrides(thresholds, max_hr=max_hr_override, config=config)
            source = MaxHRSource.OVERRIDE
            recommendations.append(f"Using custom max heart rate of {int(max_hr_override)} BPM")
        else:
            logger.info("Ignoring implausible max HR override %s", max_hr_override)

    models = build_all_zone_models(thresholds.max_hr, config)
    primary = models[scheme]
    alternatives = tuple(model for s, model in models.items() if s is not scheme)

    # Grade against the estimate so an override does not inflate confidence.
    grading_max = stats.max_hr if stats.max_hr is not None else thresholds.max_hr
    high_intensity = count_high_intensity_samples(
        [r for r in records if r.has_heart_rate], grading_max, now, config
    )
    quality = assess_data_quality(stats.activities_with_hr, stats.total_activities, config)
    confidence = assess_confidence(high_intensity, config)
    breakdown = sport_breakdown(records, config)

    recommendations.extend(_recommendations(stats, quality, breakdown, config))
    logger.debug(
        "Zone analysis: %d/%d HR activities, max HR %d (%s), quality %s, confidence %s",
        stats.activities_with_hr,
        stats.total_activities,
        thresholds.max_hr,
        source.name,
        quality.name,
        confidence.name,
    )
    return AnalysisResult(
        stats=stats,
        thresholds=thresholds,
        zone_model=primary,
        alternative_models=alternatives,
        sport_breakdown=breakdown,
        data_quality=quality,
        confidence=confidence,
        high_intensity_samples=high_intensity,
        max_hr_source=source,
        recommendations=tuple(recommendations),
    )


def _recommendations(
    stats: HeartRateStats,
    quality: DataQuality,
    breakdown: tuple[SportZoneAnalysis, ...],
    config: ZoneConfig,
) -> list[str]:
    recommendations = []
    if quality in (DataQuality.NONE, DataQuality.POOR):
        recommendations.append(
            "Consider using a heart rate monitor for more activities to improve zone accuracy"
        )
    if stats.activities_with_hr < config.min_hr_records:
        recommendations.append("More heart rate data will improve zone recommendations")
    if len(breakdown) > 1:
        recommendations.append(
            "Consider sport-specific zones as your heart rate patterns vary between activities"
        )
    if stats.max_hr is not None and stats.max_hr < config.low_max_hr_warning:
        recommendations.append(
            "Your max heart rate seems low - consider a max HR test for better accuracy"
        )
    return recommendations


def _is_on_or_after(moment: datetime | None, cutoff: datetime) -> bool:
    if not isinstance(moment, datetime):
        return False
    try:
        return moment >= cutoff
    except TypeError:
        # Mixed naive/aware: compare wall-clock values.
        return moment.replace(tzinfo=None) >= cutoff.replace(tzinfo=None)
