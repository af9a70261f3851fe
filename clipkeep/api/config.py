"""HTTP server settings."""

import os

from dotenv import load_dotenv

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel

load_dotenv()


class ServerConfig(BaseClipKeepModel):
    """Configuration for the API server process."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Environment variables:
        HOST: Interface to bind (default: 0.0.0.0)
        PORT: Port to listen on (default: 3001)
        CORS_ORIGINS: Comma separated allowed origins (default: *)
        LOG_LEVEL: Root log level (default: INFO)
    """
    origins = os.environ.get("CORS_ORIGINS", "*")
    return ServerConfig(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "3001")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
