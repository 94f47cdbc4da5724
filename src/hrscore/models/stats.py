from datetime import datetime, timezone

from pydantic import BaseModel, Field

from hrscore.models.classification import ActivityClassification
from hrscore.models.health import ZoneName


class ZoneBreakdown(BaseModel):
    """Points earned in a single heart rate zone."""
    zone: ZoneName
    minutes: float
    stamina_gained: int
    strength_gained: int
    hr_min: float | None = None
    hr_max: float | None = None


class StatChange(BaseModel):
    """Stat deltas produced by a scoring method."""

    stamina_delta: int = 0
    strength_delta: int = 0
    reasoning: str | None = None
    scoring_method: str | None = Field(None, description="Scoring method that produced this change")
    zone_breakdown: list[ZoneBreakdown] = Field(default_factory=list)
    classification: ActivityClassification | None = Field(
        None, description="External classifier prediction, when one was used"
    )
    multiplier: float = Field(default=1.0, description="Multiplier applied to the zone-based deltas")

    @property
    def total_points(self) -> int:
        return self.stamina_delta + self.strength_delta


class StatChangeRecord(BaseModel):
    """A stat change as handed to the persistence sink."""

    user_id: str = Field(..., description="User the workout belongs to")
    workout_id: str | None = Field(None, description="Workout the stats were computed for")
    stat_change: StatChange
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
