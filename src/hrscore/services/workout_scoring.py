import logging
from collections.abc import Sequence
from typing import Protocol

from hrscore.analysis.filters import filter_heart_rate_samples
from hrscore.exceptions import ExternalServiceError
from hrscore.models.health import HealthProfile
from hrscore.models.stats import StatChange, StatChangeRecord
from hrscore.models.workout import HeartRateSample
from hrscore.scoring.calculator import StatsCalculator

logger = logging.getLogger(__name__)


class HealthProfileProvider(Protocol):
    async def get_health_profile(self, user_id: str) -> HealthProfile: ...


class StatChangeSink(Protocol):
    async def store_stat_change(self, record: StatChangeRecord) -> bool: ...


class WorkoutScoringService:
    """Service for scoring uploaded workouts."""

    def __init__(
        self,
        profile_provider: HealthProfileProvider,
        calculator: StatsCalculator,
        fallback_calculator: StatsCalculator | None = None,
        sink: StatChangeSink | None = None,
    ):
        self.profile_provider = profile_provider
        self.calculator = calculator
        self.fallback_calculator = fallback_calculator
        self.sink = sink

    async def score_workout(
        self,
        user_id: str,
        samples: Sequence[HeartRateSample],
        workout_id: str | None = None,
    ) -> StatChange:
        """
        Score a workout for a user.

        The samples are sanitized before scoring. When the primary scoring
        method fails because the external classifier is unavailable, the
        fallback calculator is used if one is configured.

        Args:
            user_id: User the workout belongs to
            samples: Heart rate samples as submitted by the device
            workout_id: Optional workout identifier stored with the result

        Returns:
            The computed StatChange

        Raises:
            ExternalServiceError: If the classifier failed and there is no fallback
            ComputationError: If the stat change could not be computed
        """
        hr_samples = list(samples)
        removed = filter_heart_rate_samples(hr_samples)
        if removed:
            logger.info(f"Removed {removed} out-of-order HR samples for user {user_id}")

        profile = await self.profile_provider.get_health_profile(user_id)

        try:
            stat_change = await self.calculator.calculate_stat_changes(profile, hr_samples)
        except ExternalServiceError as e:
            if self.fallback_calculator is None:
                raise
            logger.warning(f"Classifier unavailable for user {user_id}, falling back: {e}")
            stat_change = await self.fallback_calculator.calculate_stat_changes(profile, hr_samples)

        logger.info(
            f"Calculated stat changes for user {user_id}: "
            f"+{stat_change.stamina_delta} stamina, +{stat_change.strength_delta} strength"
        )

        if self.sink is not None:
            record = StatChangeRecord(user_id=user_id, workout_id=workout_id, stat_change=stat_change)
            await self.sink.store_stat_change(record)

        return stat_change
