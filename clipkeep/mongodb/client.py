"""MongoDB client management with an explicit open/close lifecycle."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from clipkeep.clip_store.errors import StoreUnavailable
from clipkeep.mongodb.config import MongoDBConfig

logger = logging.getLogger(__name__)


class MongoDBClient:
    """Manages MongoDB connection lifecycle.

    The client is constructed closed. ``open()`` connects and pings the
    server; only then does ``database`` hand out a handle. Every access while
    closed raises ``StoreUnavailable``.
    """

    def __init__(self, config: MongoDBConfig) -> None:
        """Initialize the MongoDB client.

        Args:
            config: Connection settings.
        """
        self._config = config
        self._client: AsyncIOMotorClient | None = None
        self._connected = False

    @property
    def config(self) -> MongoDBConfig:
        """Get the current configuration."""
        return self._config

    @property
    def is_connected(self) -> bool:
        """Whether the initial connection succeeded and has not been closed."""
        return self._connected

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get the configured database instance."""
        if not self._connected or self._client is None:
            msg = "Database not connected"
            raise StoreUnavailable(msg)
        return self._client[self._config.database_name]

    async def open(self) -> None:
        """Connect to MongoDB and verify the connection with a ping.

        Raises:
            StoreUnavailable: If the server cannot be reached.
        """
        if self._connected:
            return

        logger.info("Connecting to MongoDB at %s", self._config.sanitized_connection_string)
        self._client = AsyncIOMotorClient(
            self._config.connection_string,
            maxPoolSize=self._config.max_pool_size,
            minPoolSize=self._config.min_pool_size,
            serverSelectionTimeoutMS=self._config.server_selection_timeout_ms,
            socketTimeoutMS=self._config.socket_timeout_ms,
            tz_aware=True,
        )
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            self._client.close()
            self._client = None
            logger.error("Failed to connect to MongoDB: %s", e)
            msg = f"Failed to connect to MongoDB: {e}"
            raise StoreUnavailable(msg) from e

        self._connected = True
        logger.info("Connected to MongoDB, using database: %s", self._config.database_name)

    async def close(self) -> None:
        """Close the MongoDB connection."""
        self._connected = False
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """Check if the connection is alive."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping error: %s", e)
            return False
