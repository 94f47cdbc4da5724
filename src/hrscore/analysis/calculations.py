"""
Core heart rate calculations shared by the zone model and the workout analyzer.
"""
from collections.abc import Sequence
from datetime import datetime

import numpy as np

from hrscore.models.health import Gender


def minutes_between(start: datetime, end: datetime) -> float:
    """Elapsed time between two timestamps in fractional minutes."""
    return (end - start).total_seconds() / 60.0


def heart_rate_variability(heart_rates: Sequence[float]) -> float:
    """
    Calculate heart rate variability as the population standard deviation.

    This is a coarse variability proxy over sampled heart rate values, not a
    beat-to-beat HRV metric.

    Args:
        heart_rates: Raw heart rate values

    Returns:
        Standard deviation (ddof=0), or 0.0 for fewer than two values
    """
    if len(heart_rates) < 2:
        return 0.0
    return float(np.std(np.asarray(heart_rates, dtype=float), ddof=0))


def estimate_max_heart_rate(age: int, gender: Gender) -> int:
    """
    Estimate maximum heart rate from age and gender.

    Uses age-adjusted formulas with a separate fit for athletes aged 40 and over.
    OTHER uses the general formula.
    """
    if gender == Gender.MALE:
        estimate = 216.0 - 0.93 * age if age >= 40 else 208.0 - 0.7 * age
    elif gender == Gender.FEMALE:
        estimate = 200.0 - 0.67 * age if age >= 40 else 206.0 - 0.88 * age
    else:
        estimate = 208.0 - 0.7 * age
    return int(estimate)
