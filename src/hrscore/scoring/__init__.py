"""Pluggable scoring methods and the stats calculator."""

from hrscore.clients.classifier.client import ClassifierClient
from hrscore.config import ScoringConfig
from hrscore.scoring.base import ScoringMethod, ScoringMethodType
from hrscore.scoring.calculator import StatsCalculator
from hrscore.scoring.externally_assisted import ExternallyAssistedScoring
from hrscore.scoring.zone_based import ZoneBasedScoring, score_workout_analysis


def create_scoring_method(
    method_type: ScoringMethodType,
    config: ScoringConfig | None = None,
    classifier: ClassifierClient | None = None,
) -> ScoringMethod:
    """
    Create a scoring method by type.

    Args:
        method_type: Which scoring method to create
        config: Scoring constants (defaults when omitted)
        classifier: Classifier client, required for EXTERNALLY_ASSISTED

    Returns:
        A ScoringMethod instance
    """
    if method_type == ScoringMethodType.ZONE_BASED:
        return ZoneBasedScoring(config)
    elif method_type == ScoringMethodType.EXTERNALLY_ASSISTED:
        if classifier is None:
            raise ValueError("Externally assisted scoring requires a classifier client")
        return ExternallyAssistedScoring(classifier, config)
    raise ValueError(f"Unknown scoring method: {method_type}")


__all__ = [
    "ScoringMethod",
    "ScoringMethodType",
    "ZoneBasedScoring",
    "ExternallyAssistedScoring",
    "StatsCalculator",
    "create_scoring_method",
    "score_workout_analysis",
]
