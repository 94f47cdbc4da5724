from collections.abc import Sequence

from hrscore.models.health import HealthProfile
from hrscore.models.stats import StatChange
from hrscore.models.workout import HeartRateSample
from hrscore.scoring.base import ScoringMethod


class StatsCalculator:
    """Entry point for stat calculation; delegates to one scoring method."""

    def __init__(self, scoring_method: ScoringMethod):
        self.scoring_method = scoring_method

    async def calculate_stat_changes(
        self,
        profile: HealthProfile,
        samples: Sequence[HeartRateSample],
    ) -> StatChange:
        return await self.scoring_method.compute(profile, samples)
