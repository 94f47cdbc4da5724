import logging

from pymongo.asynchronous.database import AsyncDatabase

from hrscore.models.stats import StatChangeRecord

logger = logging.getLogger(__name__)


class StatChangeRepository:
    """Repository for computed stat changes in MongoDB."""

    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.collection = db["stat_changes"]

    async def store_stat_change(self, record: StatChangeRecord) -> bool:
        """
        Store a computed stat change.

        Returns:
            True if stored successfully
        """
        result = await self.collection.insert_one(record.model_dump(mode="json"))
        logger.info(
            f"Stored stat change for user {record.user_id} "
            f"(workout {record.workout_id}): +{record.stat_change.total_points} points"
        )
        return result.acknowledged

    async def get_stat_changes(self, user_id: str, limit: int = 50) -> list[StatChangeRecord]:
        """Get the most recent stat changes for a user."""
        cursor = self.collection.find({"user_id": user_id}).sort("created_at", -1).limit(limit)
        records = []
        async for doc in cursor:
            doc.pop("_id", None)
            records.append(StatChangeRecord(**doc))
        return records
