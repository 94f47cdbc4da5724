from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Gender(str, Enum):
    """Gender used for max heart rate estimation."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "Gender":
        """Parse free-form profile input ('m', 'Female', ...), defaulting to OTHER."""
        normalized = (value or "").strip().lower()
        if normalized in ("male", "m"):
            return cls.MALE
        if normalized in ("female", "f"):
            return cls.FEMALE
        return cls.OTHER


class ZoneName(str, Enum):
    """The five heart rate zones, lowest intensity first."""
    ZONE_1 = "Zone1"
    ZONE_2 = "Zone2"
    ZONE_3 = "Zone3"
    ZONE_4 = "Zone4"
    ZONE_5 = "Zone5"

    @property
    def number(self) -> int:
        return int(self.value[-1])


class StoredZoneBoundaries(BaseModel):
    """Precomputed zone ceilings (inclusive, bpm) as kept on a health profile."""
    model_config = ConfigDict(frozen=True)

    zone1_max: int = Field(..., ge=0, description="Zone 1 (recovery) ceiling")
    zone2_max: int = Field(..., description="Zone 2 (aerobic base) ceiling")
    zone3_max: int = Field(..., description="Zone 3 (aerobic) ceiling")
    zone4_max: int = Field(..., description="Zone 4 (threshold) ceiling")
    zone5_max: int = Field(..., description="Zone 5 (VO2 max) ceiling")

    @model_validator(mode="after")
    def _check_ascending(self) -> "StoredZoneBoundaries":
        values = self.as_tuple()
        if any(upper <= lower for lower, upper in zip(values, values[1:])):
            raise ValueError(f"Zone boundaries must be strictly ascending, got {values}")
        return self

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.zone1_max, self.zone2_max, self.zone3_max, self.zone4_max, self.zone5_max)


class HealthProfile(BaseModel):
    """Read-only snapshot of a user's physiological baseline."""
    model_config = ConfigDict(frozen=True)

    age: int = Field(default=30, ge=0, description="Age in years")
    gender: Gender = Field(default=Gender.OTHER, description="Gender for max HR estimation")
    resting_heart_rate: int | None = Field(default=60, description="Resting heart rate (bpm)")
    max_heart_rate: int | None = Field(default=None, description="Measured maximum heart rate (bpm)")
    stored_zone_boundaries: StoredZoneBoundaries | None = Field(
        default=None, description="Precomputed zone ceilings, used instead of Karvonen when present"
    )
