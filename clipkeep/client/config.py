"""Client-side settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel

load_dotenv()


class ClientConfig(BaseClipKeepModel):
    """Configuration for the clip client."""

    api_base_url: str = "http://localhost:3001/api"
    state_path: Path = Path("~/.clipkeep/state.json").expanduser()

    # How long a clip shows as "just copied"
    copy_mark_seconds: float = 2.0

    request_timeout_seconds: float = 10.0


def get_client_config() -> ClientConfig:
    """Get client configuration from environment variables.

    Environment variables:
        CLIPKEEP_API_URL: Base URL of the API (default: http://localhost:3001/api)
        CLIPKEEP_STATE_PATH: Local state file (default: ~/.clipkeep/state.json)
    """
    return ClientConfig(
        api_base_url=os.environ.get("CLIPKEEP_API_URL", "http://localhost:3001/api"),
        state_path=Path(os.environ.get("CLIPKEEP_STATE_PATH", "~/.clipkeep/state.json")).expanduser(),
    )
