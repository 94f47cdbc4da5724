"""
Workout analysis engine.

Turns an irregularly sampled heart rate series into time-in-zone statistics.
All functions are pure computations without side effects.
"""
from collections.abc import Sequence

from hrscore.analysis.calculations import heart_rate_variability, minutes_between
from hrscore.analysis.models import WorkoutAnalysisResult
from hrscore.analysis.zones import ZoneModel
from hrscore.models.health import ZoneName
from hrscore.models.workout import HeartRateSample

AEROBIC_THRESHOLD_ZONES = frozenset({ZoneName.ZONE_3, ZoneName.ZONE_4, ZoneName.ZONE_5})


def _sample_weight_minutes(samples: Sequence[HeartRateSample], index: int) -> float:
    """
    Minutes credited to the sample at index.

    Every sample gets the interval since its predecessor. The first sample has
    no predecessor and gets the interval to its successor instead (0 for a
    single-sample workout).
    """
    if index == 0:
        if len(samples) > 1:
            return minutes_between(samples[0].timestamp, samples[1].timestamp)
        return 0.0
    return minutes_between(samples[index - 1].timestamp, samples[index].timestamp)


def analyze_workout(
    samples: Sequence[HeartRateSample],
    zones: ZoneModel,
) -> WorkoutAnalysisResult | None:
    """
    Analyze a heart rate series against a zone model.

    Args:
        samples: Heart rate samples; sorted by timestamp internally
        zones: Zone model used to classify each sample

    Returns:
        WorkoutAnalysisResult, or None when there are no samples
    """
    if not samples:
        return None

    sorted_samples = sorted(samples, key=lambda s: s.timestamp)

    total_duration = minutes_between(sorted_samples[0].timestamp, sorted_samples[-1].timestamp)

    zone_durations: dict[ZoneName, float] = {}
    heart_rates: list[float] = []
    hr_sum = 0.0
    peak_hr = sorted_samples[0].heart_rate
    aerobic_minutes = 0
    zone_changes = 0
    prev_zone: ZoneName | None = None

    for index, sample in enumerate(sorted_samples):
        hr = sample.heart_rate
        hr_sum += hr
        peak_hr = max(peak_hr, hr)
        heart_rates.append(hr)

        zone = zones.get_zone(hr)
        duration_min = _sample_weight_minutes(sorted_samples, index)

        zone_durations[zone] = zone_durations.get(zone, 0.0) + duration_min
        if zone in AEROBIC_THRESHOLD_ZONES:
            aerobic_minutes += int(duration_min)

        if prev_zone is not None and prev_zone != zone:
            zone_changes += 1
        prev_zone = zone

    return WorkoutAnalysisResult(
        total_duration_minutes=int(total_duration),
        zone_durations=zone_durations,
        avg_heart_rate=hr_sum / len(sorted_samples),
        peak_heart_rate=peak_hr,
        time_above_aerobic_threshold_minutes=aerobic_minutes,
        heart_rate_variability=heart_rate_variability(heart_rates),
        zone_transition_count=zone_changes,
        sample_count=len(sorted_samples),
    )
