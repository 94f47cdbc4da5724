"""
Heart rate analysis engine.

Provides:
- Heart rate zone model (Karvonen or stored boundaries)
- Sanitizing of client-submitted heart rate series
- Time-in-zone and heart rate statistics for a workout
"""

from hrscore.analysis.engine import analyze_workout
from hrscore.analysis.filters import filter_heart_rate_samples
from hrscore.analysis.models import WorkoutAnalysisResult
from hrscore.analysis.zones import HeartRateZone, ZoneModel
from hrscore.analysis.calculations import (
    estimate_max_heart_rate, heart_rate_variability, minutes_between
)

__all__ = [
    # Main analysis functions
    'analyze_workout',
    'filter_heart_rate_samples',

    # Zone model
    'ZoneModel',
    'HeartRateZone',

    # Result models
    'WorkoutAnalysisResult',

    # Calculation functions
    'estimate_max_heart_rate',
    'heart_rate_variability',
    'minutes_between',
]
