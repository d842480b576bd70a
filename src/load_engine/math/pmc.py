"""Performance Management Chart: chronic/acute EWMA, form, ramp rate, status.

References:
    - Banister et al. (1975): impulse-response fitness/fatigue model
    - Allen & Coggan (2010): CTL/ATL/TSB with 42/7-day time constants
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from load_engine.config import PMCConfig
from load_engine.models.enums import (
    EMPTY_HISTORY_RECOMMENDATION,
    STATUS_RECOMMENDATIONS,
    TrainingStatus,
)
from load_engine.models.load import DailyLoadPoint, PMCMetrics

_DEFAULT_PMC_CONFIG = PMCConfig()


def exponential_average(values: Sequence[float], time_constant: int) -> np.ndarray:
    """Day-by-day EWMA with ``alpha = 1 / time_constant`` seeded from the first value.

    Each output element depends only on inputs up to and including its
    position.
    """
    if len(values) == 0:
        return np.zeros(0, dtype=np.float64)
    series = pd.Series(values, dtype=np.float64)
    return series.ewm(alpha=1.0 / time_constant, adjust=False).mean().to_numpy()


def ramp_rates(chronic: np.ndarray, window_days: int) -> np.ndarray:
    """Change in chronic load versus ``window_days`` earlier.

    Days without a full window behind them compare against the first day.
    """
    if chronic.size == 0:
        return chronic.copy()
    reference_idx = np.maximum(np.arange(chronic.size) - window_days, 0)
    return chronic - chronic[reference_idx]


def classify_status(
    ramp_rate: float, form: float, config: PMCConfig = _DEFAULT_PMC_CONFIG
) -> TrainingStatus:
    """Classify the training trend; first matching rule wins.

    1. ramp >= peak_ramp_rate                       → PEAK
    2. ramp <= -flat_ramp_band or form >= recover_form → RECOVER
    3. ramp > flat_ramp_band and form < 0            → BUILD
    4. otherwise                                     → MAINTAIN
    """
    if ramp_rate >= config.peak_ramp_rate:
        return TrainingStatus.PEAK
    if ramp_rate <= -config.flat_ramp_band or form >= config.recover_form:
        return TrainingStatus.RECOVER
    if ramp_rate > config.flat_ramp_band and form < 0:
        return TrainingStatus.BUILD
    return TrainingStatus.MAINTAIN


def recommendation_for(status: TrainingStatus) -> str:
    return STATUS_RECOMMENDATIONS[status]


def calculate_pmc(
    points: Sequence[DailyLoadPoint], config: PMCConfig = _DEFAULT_PMC_CONFIG
) -> tuple[PMCMetrics, ...]:
    """Compute PMC metrics for every day of a gap-free daily series.

    Args:
        points: Daily load points, one per date, ascending.
        config: Time constants and status cutoffs.

    Returns:
        One PMCMetrics per input point. Appending later days never changes
        earlier entries.
    """
    if not points:
        return ()
    loads = [p.load for p in points]
    chronic = exponential_average(loads, config.chronic_days)
    acute = exponential_average(loads, config.acute_days)
    form = chronic - acute
    ramp = ramp_rates(chronic, config.ramp_window_days)

    metrics: list[PMCMetrics] = []
    for i, point in enumerate(points):
        status = classify_status(float(ramp[i]), float(form[i]), config)
        metrics.append(
            PMCMetrics(
                day=point.day,
                load=point.load,
                acute=float(acute[i]),
                chronic=float(chronic[i]),
                form=float(form[i]),
                ramp_rate=float(ramp[i]),
                status=status,
                recommendation=recommendation_for(status),
            )
        )
    return tuple(metrics)


def empty_metrics() -> PMCMetrics:
    """Metrics reported when there is no daily series at all."""
    return PMCMetrics(
        day=None,
        load=0.0,
        acute=0.0,
        chronic=0.0,
        form=0.0,
        ramp_rate=0.0,
        status=TrainingStatus.RECOVER,
        recommendation=EMPTY_HISTORY_RECOMMENDATION,
    )


def latest_metrics(
    points: Sequence[DailyLoadPoint], config: PMCConfig = _DEFAULT_PMC_CONFIG
) -> PMCMetrics:
    """PMC metrics for the most recent day of the series."""
    trend = calculate_pmc(points, config)
    return trend[-1] if trend else empty_metrics()
