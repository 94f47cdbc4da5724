from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum

from hrscore.models.health import HealthProfile
from hrscore.models.stats import StatChange
from hrscore.models.workout import HeartRateSample


class ScoringMethodType(str, Enum):
    """Available scoring methods."""
    ZONE_BASED = "zone_based"
    EXTERNALLY_ASSISTED = "externally_assisted"


class ScoringMethod(ABC):
    """Converts a workout's heart rate series into stat changes."""

    method_type: ScoringMethodType

    @abstractmethod
    async def compute(
        self,
        profile: HealthProfile,
        samples: Sequence[HeartRateSample],
    ) -> StatChange:
        """
        Compute stat changes for a workout.

        Raises:
            ComputationError: If no stat change can be produced
        """
