from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HeartRateSample(BaseModel):
    """A single heart rate reading."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(..., description="When the reading was taken; naive values are read as UTC")
    heart_rate: float = Field(..., allow_inf_nan=False, description="Heart rate (bpm), finite")

    @field_validator('timestamp')
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
