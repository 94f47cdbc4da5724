import logging
from collections.abc import Sequence

from hrscore.analysis.engine import analyze_workout
from hrscore.clients.classifier.client import ClassifierClient
from hrscore.config import ScoringConfig
from hrscore.models.health import HealthProfile
from hrscore.models.stats import StatChange
from hrscore.models.workout import HeartRateSample
from hrscore.scoring.base import ScoringMethod, ScoringMethodType
from hrscore.scoring.zone_based import score_workout_analysis, zone_model_for

logger = logging.getLogger(__name__)


class ExternallyAssistedScoring(ScoringMethod):
    """
    Zone-based scoring adjusted by an external activity classifier.

    The classifier's prediction selects a multiplier (e.g. 1.5x for strength
    and HIIT workouts) that is applied to the zone-based deltas. Classifier
    failures are raised as ExternalServiceError; falling back to plain
    zone-based scoring is up to the caller.
    """

    method_type = ScoringMethodType.EXTERNALLY_ASSISTED

    def __init__(
        self,
        classifier: ClassifierClient,
        config: ScoringConfig | None = None,
        activity_type: str | None = None,
    ):
        self.classifier = classifier
        self.config = config or ScoringConfig()
        self.activity_type = activity_type

    async def compute(
        self,
        profile: HealthProfile,
        samples: Sequence[HeartRateSample],
    ) -> StatChange:
        zones = zone_model_for(profile)

        analysis = analyze_workout(samples, zones)
        if analysis is None:
            logger.warning("Heart rate data is empty - skipping classification, returning zero stats")
            return StatChange(
                reasoning="No heart rate data",
                scoring_method=self.method_type.value,
            )

        classification = await self.classifier.classify_workout(
            samples,
            user_resting_hr=zones.resting_heart_rate,
            user_max_hr=zones.max_heart_rate,
            activity_type=self.activity_type,
        )

        base = score_workout_analysis(analysis, zones, self.config)
        multiplier = self.config.multiplier_for(classification.prediction, classification.confidence)

        reasoning = (
            f"{base.reasoning}; classified as {classification.prediction} "
            f"({classification.confidence * 100:.0f}%) -> x{multiplier:g}"
        )
        stat_change = base.model_copy(update={
            "stamina_delta": int(base.stamina_delta * multiplier),
            "strength_delta": int(base.strength_delta * multiplier),
            "reasoning": reasoning,
            "scoring_method": self.method_type.value,
            "classification": classification,
            "multiplier": multiplier,
        })

        logger.info(
            f"Assisted stat changes ({classification.prediction}, x{multiplier:g}): "
            f"stamina +{stat_change.stamina_delta}, strength +{stat_change.strength_delta}"
        )
        return stat_change
