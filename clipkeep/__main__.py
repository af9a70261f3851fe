"""Run the ClipKeep API server with uvicorn."""

import uvicorn

from clipkeep.api.config import get_server_config


def main() -> None:
    config = get_server_config()
    uvicorn.run(
        "clipkeep.api.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
