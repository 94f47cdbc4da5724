import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the MongoDB client holding health profiles and stat changes."""

    def __init__(self, url: str, database: str, server_selection_timeout_ms: int = 5000):
        self.url = url
        self.database = database
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.client: AsyncMongoClient | None = None
        self.db: AsyncDatabase | None = None

    async def connect(self):
        """
        Open the client and verify the server answers.

        A server that does not answer leaves the manager disconnected and
        re-raises the driver error.
        """
        logger.info(f"Connecting to MongoDB database {self.database}")
        client = AsyncMongoClient(self.url, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB did not answer for database {self.database}: {e}")
            await client.close()
            raise
        self.client = client
        self.db = client[self.database]
        logger.info(f"Connected to MongoDB database {self.database}")

    async def disconnect(self):
        if self.client is not None:
            await self.client.close()
            self.client = None
            self.db = None
            logger.info(f"Disconnected from MongoDB database {self.database}")

    async def ping(self) -> bool:
        """True when connected and the server answers a ping."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True


@asynccontextmanager
async def get_database(manager: DatabaseManager) -> AsyncGenerator[AsyncDatabase, None]:
    """Yield the connected database; raises RuntimeError before connect()."""
    if manager.db is None:
        raise RuntimeError(f"MongoDB database {manager.database} is not connected, call connect() first")
    yield manager.db
