"""MongoDB access layer for clips."""

from clipkeep.mongodb.client import MongoDBClient
from clipkeep.mongodb.config import MongoDBConfig, get_mongodb_config

__all__ = [
    "MongoDBClient",
    "MongoDBConfig",
    "get_mongodb_config",
]
