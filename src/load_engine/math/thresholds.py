"""Athlete threshold estimation from workout history: max HR, resting HR, FTP, LTHR.

References:
    - Friel (2009): LTHR at roughly 85% of max HR
    - Hyndman & Fan (1996): sample quantile definition 6 (Weibull) for percentiles
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import numpy as np

from load_engine.config import ZoneConfig
from load_engine.models.workout import WorkoutRecord
from load_engine.models.zones import AthleteThresholds

_DEFAULT_ZONE_CONFIG = ZoneConfig()


def percentile(values: Sequence[float], pct: float) -> float | None:
    """Interpolated percentile (R-6 / Excel PERCENTILE.EXC, clamped at the ends)."""
    if len(values) == 0:
        return None
    return float(np.percentile(np.asarray(values, dtype=np.float64), pct, method="weibull"))


def lower_percentile(values: Sequence[float], pct: float) -> float | None:
    """Observed value at index ``floor(n * pct / 100)`` of the ascending sort."""
    if len(values) == 0:
        return None
    ordered = sorted(values)
    idx = min(len(ordered) - 1, int(len(ordered) * pct / 100.0))
    return float(ordered[idx])


def peak_hr_samples(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> list[float]:
    """Per-activity peak HR values that fall inside the plausible band."""
    samples = []
    for record in records:
        peak = record.peak_heart_rate
        if peak is not None and config.plausible_hr_min <= peak <= config.plausible_hr_max:
            samples.append(float(peak))
    return samples


def estimate_max_hr(
    samples: Sequence[float], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> float | None:
    """Highest peak HR that other activities corroborate.

    A peak is accepted once at least ``min_corroborating`` other samples lie
    within ``corroboration_bpm`` below it, so a lone strap spike is skipped
    in favour of the next value that recurs. When no value is corroborated
    the second highest sample is used, or the only sample if there is one.
    """
    if not samples:
        return None
    ordered = np.sort(np.asarray(samples, dtype=np.float64))[::-1]
    for i, candidate in enumerate(ordered):
        # Samples after i are <= candidate; count those within tolerance.
        support = int(np.count_nonzero(ordered[i + 1:] >= candidate - config.corroboration_bpm))
        if support >= config.min_corroborating:
            return float(candidate)
    return float(ordered[1]) if ordered.size > 1 else float(ordered[0])


def estimate_resting_hr(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> float | None:
    """Low percentile of activity average HRs, a proxy when no resting data exists."""
    averages = [r.avg_hr for r in records if r.has_heart_rate]
    return lower_percentile(averages, config.resting_hr_percentile)


def estimate_ftp(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> float | None:
    """High percentile of (weighted) average power over efforts longer than 20 minutes."""
    powers = [
        float(r.weighted_avg_power or r.avg_power)
        for r in records
        if r.has_power and (r.moving_time_s or 0) > config.ftp_min_effort_s
    ]
    return lower_percentile(powers, config.ftp_percentile)


def estimate_athlete_thresholds(
    records: Sequence[WorkoutRecord], config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> AthleteThresholds:
    """Derive athlete thresholds from history, falling back to population defaults.

    Args:
        records: Full workout history.
        config: Estimation parameters.

    Returns:
        AthleteThresholds. Max HR below ``min_valid_max_hr`` (or missing) is
        replaced by ``default_max_hr``; resting HR defaults likewise.
    """
    max_hr = estimate_max_hr(peak_hr_samples(records, config), config)
    if max_hr is None or max_hr < config.min_valid_max_hr:
        max_hr = config.default_max_hr
    resting = estimate_resting_hr(records, config)
    if resting is None or resting >= max_hr:
        resting = config.default_resting_hr
    return AthleteThresholds(
        max_hr=int(round(max_hr)),
        resting_hr=int(round(resting)),
        ftp_watts=estimate_ftp(records, config),
        lthr_bpm=round(max_hr * config.lthr_fraction, 1),
    )


def apply_overrides(
    thresholds: AthleteThresholds,
    max_hr: int | None = None,
    resting_hr: int | None = None,
    ftp_watts: float | None = None,
    lthr_bpm: float | None = None,
    config: ZoneConfig = _DEFAULT_ZONE_CONFIG,
) -> AthleteThresholds:
    """Replace estimated thresholds with explicitly supplied values.

    A max-HR override also re-derives LTHR unless one is given.
    """
    changes: dict[str, object] = {}
    if max_hr is not None:
        changes["max_hr"] = int(max_hr)
        changes["lthr_bpm"] = round(max_hr * config.lthr_fraction, 1)
    if resting_hr is not None:
        changes["resting_hr"] = int(resting_hr)
    if ftp_watts is not None:
        changes["ftp_watts"] = float(ftp_watts)
    if lthr_bpm is not None:
        changes["lthr_bpm"] = float(lthr_bpm)
    return dataclasses.replace(thresholds, **changes)
