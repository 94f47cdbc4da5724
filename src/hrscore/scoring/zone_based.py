import logging
from collections.abc import Sequence

from hrscore.analysis.engine import analyze_workout
from hrscore.analysis.models import WorkoutAnalysisResult
from hrscore.analysis.zones import ZONE_ORDER, ZoneModel
from hrscore.config import ScoringConfig
from hrscore.exceptions import ComputationError, ZoneConfigurationError
from hrscore.models.health import HealthProfile
from hrscore.models.stats import StatChange, ZoneBreakdown
from hrscore.models.workout import HeartRateSample
from hrscore.scoring.base import ScoringMethod, ScoringMethodType

logger = logging.getLogger(__name__)


def zone_model_for(profile: HealthProfile) -> ZoneModel:
    """Build the profile's zone model, reporting bad baselines as ComputationError."""
    try:
        return ZoneModel.from_profile(profile)
    except ZoneConfigurationError as e:
        raise ComputationError(f"Cannot build heart rate zones for profile: {e}") from e


def score_workout_analysis(
    analysis: WorkoutAnalysisResult,
    zones: ZoneModel,
    config: ScoringConfig,
) -> StatChange:
    """
    Convert time in zone into stamina and strength points.

    Each zone's points are truncated to whole points before summing.

    Args:
        analysis: Analyzer output for the workout
        zones: Zone model the analysis was made with (for breakdown HR limits)
        config: Points per minute for each zone

    Returns:
        StatChange with a per-zone breakdown in zone order
    """
    total_stamina = 0
    total_strength = 0
    breakdown: list[ZoneBreakdown] = []

    for zone in ZONE_ORDER:
        if zone not in analysis.zone_durations:
            continue
        minutes = analysis.zone_durations[zone]
        points = config.points_for(zone)

        zone_stamina = int(minutes * points.stamina)
        zone_strength = int(minutes * points.strength)
        total_stamina += zone_stamina
        total_strength += zone_strength

        bounds = zones.get_bounds(zone)
        breakdown.append(ZoneBreakdown(
            zone=zone,
            minutes=minutes,
            stamina_gained=zone_stamina,
            strength_gained=zone_strength,
            hr_min=bounds.lower,
            hr_max=bounds.upper if bounds.upper is not None else float(zones.max_heart_rate),
        ))

    reasoning = "; ".join(
        f"{b.zone.value}: {b.minutes:.1f} min -> +{b.stamina_gained} stamina, +{b.strength_gained} strength"
        for b in breakdown
    )

    return StatChange(
        stamina_delta=total_stamina,
        strength_delta=total_strength,
        reasoning=reasoning or None,
        scoring_method=ScoringMethodType.ZONE_BASED.value,
        zone_breakdown=breakdown,
    )


class ZoneBasedScoring(ScoringMethod):
    """Scores a workout by minutes spent in each heart rate zone. No I/O."""

    method_type = ScoringMethodType.ZONE_BASED

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    async def compute(
        self,
        profile: HealthProfile,
        samples: Sequence[HeartRateSample],
    ) -> StatChange:
        zones = zone_model_for(profile)

        analysis = analyze_workout(samples, zones)
        if analysis is None:
            logger.warning("Heart rate data is empty - returning zero stats")
            return StatChange(
                reasoning="No heart rate data",
                scoring_method=self.method_type.value,
            )

        logger.info(
            f"Processing {analysis.sample_count} heart rate samples: "
            f"avg={analysis.avg_heart_rate:.1f}, peak={analysis.peak_heart_rate:.1f}, "
            f"duration={analysis.total_duration_minutes} min"
        )
        logger.debug(f"Heart rate zones: {zones!r}")
        for zone, minutes in analysis.zone_durations.items():
            logger.debug(f"{zone.value}: {minutes:.1f} minutes")

        stat_change = score_workout_analysis(analysis, zones, self.config)
        logger.info(
            f"Zone-based stat changes: stamina +{stat_change.stamina_delta}, "
            f"strength +{stat_change.strength_delta}"
        )
        return stat_change
