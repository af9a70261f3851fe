"""MongoDB configuration and connection settings."""

import os
import re

from dotenv import load_dotenv

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel

load_dotenv()

_PASSWORD_PATTERN = re.compile(r":([^:@/]+)@")


class MongoDBConfig(BaseClipKeepModel):
    """Configuration for MongoDB connection."""

    connection_string: str
    database_name: str = "clipboard"

    # Fail fast instead of waiting for the driver's 30s default
    server_selection_timeout_ms: int = 5000
    socket_timeout_ms: int = 45000

    # Connection pool settings
    max_pool_size: int = 10
    min_pool_size: int = 1

    @property
    def sanitized_connection_string(self) -> str:
        """Connection string with the password masked, safe for logs."""
        return _PASSWORD_PATTERN.sub(":****@", self.connection_string)


def get_mongodb_config() -> MongoDBConfig:
    """Get MongoDB configuration from environment variables.

    Environment variables:
        MONGODB_CONNECTION_STRING: MongoDB connection string (MONGODB_URI also accepted)
        MONGODB_DATABASE_NAME: Database name (default: clipboard)
    """
    connection_string = os.environ.get("MONGODB_CONNECTION_STRING") or os.environ.get("MONGODB_URI", "")
    if not connection_string:
        msg = "MONGODB_CONNECTION_STRING environment variable is required"
        raise ValueError(msg)

    database_name = os.environ.get("MONGODB_DATABASE_NAME", "clipboard")

    return MongoDBConfig(
        connection_string=connection_string,
        database_name=database_name,
    )
