import logging
from datetime import datetime, timezone
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from hrscore.analysis.zones import ZoneModel
from hrscore.models.health import Gender, HealthProfile, StoredZoneBoundaries

logger = logging.getLogger(__name__)

ZONE_FIELDS = ("zone1_max", "zone2_max", "zone3_max", "zone4_max", "zone5_max")


class HealthProfileRepository:
    """Repository for user health profiles in MongoDB."""

    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.collection = db["health_profiles"]

    async def get_health_profile(self, user_id: str) -> HealthProfile:
        """
        Get a user's health profile.

        Users without a stored profile get the defaults (age 30, gender other,
        resting HR 60, no max HR) instead of an error.
        """
        doc = await self.collection.find_one({"user_id": user_id})
        if not doc:
            logger.info(f"No health profile for user {user_id}, using defaults")
            return HealthProfile()
        return self._to_profile(doc)

    async def save_health_profile(self, user_id: str, profile: HealthProfile) -> HealthProfile:
        """
        Create or update a user's health profile.

        Zone ceilings are computed from the profile and stored with it when the
        profile does not carry its own.

        Raises:
            ZoneConfigurationError: If zones cannot be derived from the profile
        """
        if profile.stored_zone_boundaries is None:
            zones = ZoneModel.from_profile(profile)
            profile = profile.model_copy(update={"stored_zone_boundaries": zones.to_stored_zones()})

        doc: dict[str, Any] = {
            "user_id": user_id,
            "age": profile.age,
            "gender": profile.gender.value,
            "resting_heart_rate": profile.resting_heart_rate,
            "max_heart_rate": profile.max_heart_rate,
            **profile.stored_zone_boundaries.model_dump(),
            "updated_at": datetime.now(timezone.utc),
        }
        await self.collection.update_one({"user_id": user_id}, {"$set": doc}, upsert=True)
        logger.info(f"Saved health profile for user {user_id}")
        return profile

    @staticmethod
    def _to_profile(doc: dict[str, Any]) -> HealthProfile:
        stored_zones = None
        if all(doc.get(field) is not None for field in ZONE_FIELDS):
            stored_zones = StoredZoneBoundaries(**{field: doc[field] for field in ZONE_FIELDS})

        defaults = HealthProfile()
        return HealthProfile(
            age=doc.get("age") if doc.get("age") is not None else defaults.age,
            gender=Gender.parse(doc.get("gender")),
            resting_heart_rate=doc.get("resting_heart_rate") or defaults.resting_heart_rate,
            max_heart_rate=doc.get("max_heart_rate"),
            stored_zone_boundaries=stored_zones,
        )
