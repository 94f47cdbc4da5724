"""
Heart rate zone model.

Five contiguous zones: Zone 1 starts at 0 bpm and Zone 5 has no ceiling, so
every heart rate classifies into exactly one zone.
"""
import logging
from dataclasses import dataclass

from hrscore.analysis.calculations import estimate_max_heart_rate
from hrscore.exceptions import ZoneConfigurationError
from hrscore.models.health import HealthProfile, StoredZoneBoundaries, ZoneName

logger = logging.getLogger(__name__)

DEFAULT_RESTING_HEART_RATE = 60

# Lower bounds of zones 2-5 as percent of heart rate reserve (Karvonen)
KARVONEN_ZONE_PERCENTAGES = (60, 70, 80, 90)

ZONE_ORDER = (
    ZoneName.ZONE_1,
    ZoneName.ZONE_2,
    ZoneName.ZONE_3,
    ZoneName.ZONE_4,
    ZoneName.ZONE_5,
)


@dataclass(frozen=True)
class HeartRateZone:
    """A zone covering [lower, upper); upper None means unbounded."""
    name: ZoneName
    lower: float
    upper: float | None = None

    def contains(self, heart_rate: float) -> bool:
        if heart_rate < self.lower:
            return False
        return self.upper is None or heart_rate < self.upper


class ZoneModel:
    """Five heart rate zones derived from a user's physiological baseline."""

    def __init__(self, lower_bounds: list[float], resting_heart_rate: int, max_heart_rate: int):
        # lower_bounds holds the floors of zones 2-5
        floors = [0.0, *lower_bounds]
        ceilings: list[float | None] = [*lower_bounds, None]
        self.zones = [
            HeartRateZone(name=name, lower=low, upper=high)
            for name, low, high in zip(ZONE_ORDER, floors, ceilings)
        ]
        self.resting_heart_rate = resting_heart_rate
        self.max_heart_rate = max_heart_rate

    @classmethod
    def from_heart_rate_reserve(
        cls,
        heart_rate_reserve: int,
        resting_heart_rate: int,
        max_heart_rate: int,
    ) -> "ZoneModel":
        """
        Build zones with the Karvonen method.

        Args:
            heart_rate_reserve: Max heart rate minus resting heart rate
            resting_heart_rate: Resting heart rate (bpm)
            max_heart_rate: Maximum heart rate (bpm), kept as Zone 5's nominal ceiling

        Returns:
            ZoneModel with zone floors at 60/70/80/90% of the reserve

        Raises:
            ZoneConfigurationError: If the reserve is not positive or resting >= max
        """
        if heart_rate_reserve <= 0:
            raise ZoneConfigurationError(
                f"Heart rate reserve must be positive, got {heart_rate_reserve} "
                f"(resting={resting_heart_rate}, max={max_heart_rate})"
            )
        if resting_heart_rate >= max_heart_rate:
            raise ZoneConfigurationError(
                f"Resting heart rate ({resting_heart_rate}) must be below max heart rate ({max_heart_rate})"
            )
        if resting_heart_rate < 0:
            raise ZoneConfigurationError(f"Resting heart rate must be >= 0, got {resting_heart_rate}")

        lower_bounds = [
            float(resting_heart_rate + heart_rate_reserve * pct // 100)
            for pct in KARVONEN_ZONE_PERCENTAGES
        ]
        if any(upper <= lower for lower, upper in zip(lower_bounds, lower_bounds[1:])):
            raise ZoneConfigurationError(
                f"Heart rate reserve {heart_rate_reserve} is too small to separate five zones"
            )
        return cls(lower_bounds, resting_heart_rate, max_heart_rate)

    @classmethod
    def from_stored_zones(
        cls,
        resting_heart_rate: int,
        zone1_max: int,
        zone2_max: int,
        zone3_max: int,
        zone4_max: int,
        zone5_max: int,
    ) -> "ZoneModel":
        """
        Rebuild zones from stored inclusive ceilings.

        Each zone starts one bpm above the previous zone's ceiling. zone5_max is
        kept as the nominal max heart rate; Zone 5 itself stays unbounded.

        Raises:
            ZoneConfigurationError: If the ceilings are negative or not strictly ascending
        """
        ceilings = (zone1_max, zone2_max, zone3_max, zone4_max, zone5_max)
        if zone1_max < 0:
            raise ZoneConfigurationError(f"Zone 1 ceiling must be >= 0, got {zone1_max}")
        if any(upper <= lower for lower, upper in zip(ceilings, ceilings[1:])):
            raise ZoneConfigurationError(f"Zone ceilings must be strictly ascending, got {ceilings}")

        lower_bounds = [float(ceiling + 1) for ceiling in ceilings[:4]]
        return cls(lower_bounds, resting_heart_rate, zone5_max)

    @classmethod
    def from_profile(cls, profile: HealthProfile) -> "ZoneModel":
        """Use the profile's stored zones if present, otherwise compute Karvonen zones."""
        resting_hr = profile.resting_heart_rate or DEFAULT_RESTING_HEART_RATE

        if profile.stored_zone_boundaries is not None:
            return cls.from_stored_zones(resting_hr, *profile.stored_zone_boundaries.as_tuple())

        max_hr = profile.max_heart_rate
        if max_hr is None:
            max_hr = estimate_max_heart_rate(profile.age, profile.gender)
            logger.info(
                f"No stored zones or max heart rate, estimated max HR {max_hr} "
                f"for age={profile.age}, gender={profile.gender.value}, resting_hr={resting_hr}"
            )
        return cls.from_heart_rate_reserve(max_hr - resting_hr, resting_hr, max_hr)

    def get_zone(self, heart_rate: float) -> ZoneName:
        """
        Classify a heart rate into a zone.

        Zone floors are inclusive, so a value on a boundary lands in the higher
        zone. Negative values are clamped into Zone 1.
        """
        for zone in self.zones:
            if zone.contains(heart_rate):
                return zone.name
        return ZoneName.ZONE_1

    def get_bounds(self, zone_name: ZoneName) -> HeartRateZone:
        return self.zones[ZONE_ORDER.index(zone_name)]

    def to_stored_zones(self) -> StoredZoneBoundaries:
        """Express the zones as inclusive integer ceilings for storage."""
        ceilings = [int(zone.upper) - 1 for zone in self.zones[:4]]
        return StoredZoneBoundaries(
            zone1_max=ceilings[0],
            zone2_max=ceilings[1],
            zone3_max=ceilings[2],
            zone4_max=ceilings[3],
            zone5_max=self.max_heart_rate,
        )

    def __repr__(self) -> str:
        bounds = ", ".join(
            f"{z.name.value}=[{z.lower:g}, {'inf' if z.upper is None else f'{z.upper:g}'})"
            for z in self.zones
        )
        return f"ZoneModel({bounds})"
