"""Wire models for the external workout classifier."""
from pydantic import BaseModel, Field, field_serializer

from hrscore.models.workout import HeartRateSample


class ClassificationRequest(BaseModel):
    """Body of a POST /classify request."""

    heart_rate_samples: list[HeartRateSample] = Field(
        ..., serialization_alias="heart_rate_data", description="Heart rate series to classify"
    )
    user_resting_hr: int
    user_max_hr: int
    activity_type: str | None = Field(None, description="Activity type reported by the device, if any")

    @field_serializer("heart_rate_samples")
    def _serialize_samples(self, samples: list[HeartRateSample]) -> list[dict]:
        return [
            {"timestamp": s.timestamp.isoformat(), "heart_rate": int(s.heart_rate)}
            for s in samples
        ]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ActivityClassification(BaseModel):
    """Classifier response: predicted activity type and its confidence."""

    prediction: str = "unknown"
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
