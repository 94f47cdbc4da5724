"""
Data models for workout analysis results.
"""
from pydantic import BaseModel, ConfigDict, Field

from hrscore.models.health import ZoneName


class WorkoutAnalysisResult(BaseModel):
    """Aggregate heart rate statistics for one workout."""
    model_config = ConfigDict(frozen=True)

    total_duration_minutes: int = Field(..., description="First to last sample, truncated to whole minutes")
    zone_durations: dict[ZoneName, float] = Field(
        default_factory=dict, description="Minutes credited per zone; only visited zones are present"
    )
    avg_heart_rate: float
    peak_heart_rate: float
    time_above_aerobic_threshold_minutes: int = Field(0, description="Whole minutes credited to zones 3-5")
    heart_rate_variability: float = Field(0.0, description="Population standard deviation of heart rate")
    zone_transition_count: int = 0
    sample_count: int = 0

    @property
    def total_zone_minutes(self) -> float:
        return sum(self.zone_durations.values())
