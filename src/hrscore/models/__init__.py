"""Pydantic models shared by the analysis and scoring engine."""

from hrscore.models.health import Gender, HealthProfile, StoredZoneBoundaries, ZoneName
from hrscore.models.workout import HeartRateSample
from hrscore.models.classification import ActivityClassification, ClassificationRequest
from hrscore.models.stats import StatChange, StatChangeRecord, ZoneBreakdown

__all__ = [
    # Health profile models
    "Gender",
    "ZoneName",
    "StoredZoneBoundaries",
    "HealthProfile",
    # Workout models
    "HeartRateSample",
    # Classifier models
    "ClassificationRequest",
    "ActivityClassification",
    # Stat models
    "StatChange",
    "StatChangeRecord",
    "ZoneBreakdown",
]
