"""FastAPI application entry point."""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any, AsyncGenerator

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clipkeep.api.config import ServerConfig, get_server_config
from clipkeep.api.routes import clips
from clipkeep.api.schemas import HealthResponse
from clipkeep.clip_store import ClipStoreError
from clipkeep.mongodb import MongoDBClient, get_mongodb_config

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(config: ServerConfig) -> None:
    """Configure root logging at the server's configured level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _exit_on_unhandled_error(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Treat errors nobody awaited as fatal."""
    logger.critical(
        "Unhandled error in event loop: %s",
        context.get("message"),
        exc_info=context.get("exception"),
    )
    os._exit(1)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database connection before serving and close it on shutdown.

    A missing connection string or a failed initial ping propagates out of
    startup, so the server never comes up without a database.
    """
    client: MongoDBClient | None = app.state.mongodb_client
    if client is None:
        client = MongoDBClient(get_mongodb_config())
        app.state.mongodb_client = client

    await client.open()
    asyncio.get_running_loop().set_exception_handler(_exit_on_unhandled_error)

    yield

    logger.info("Shutting down server")
    await client.close()


async def _store_error_handler(request: Request, exc: ClipStoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def _request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Rejected request body for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(
    mongodb_client: MongoDBClient | None = None,
    server_config: ServerConfig | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        mongodb_client: Optional client. If not provided, one is built from the
            environment when the application starts.
        server_config: Optional server settings. If not provided, reads from environment.
    """
    resolved_config = server_config or get_server_config()
    configure_logging(resolved_config)

    app = FastAPI(
        title="ClipKeep API",
        description="Personal clipboard manager API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.mongodb_client = mongodb_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClipStoreError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(clips.router, prefix="/api/clips", tags=["clips"])

    @app.get("/api/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        client: MongoDBClient | None = app.state.mongodb_client
        connected = client is not None and client.is_connected
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(UTC),
            database="connected" if connected else "disconnected",
        )

    return app


app = create_app()
