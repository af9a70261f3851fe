"""FastAPI dependencies wiring the store client into request handlers."""

from fastapi import Depends, Request

from clipkeep.clip_store import ClipStore, StoreUnavailable
from clipkeep.mongodb import MongoDBClient
from clipkeep.mongodb.repositories import ClipRepository


def get_mongodb_client(request: Request) -> MongoDBClient:
    """Get the MongoDB client owned by the application lifespan."""
    client: MongoDBClient | None = getattr(request.app.state, "mongodb_client", None)
    if client is None:
        msg = "Database not connected"
        raise StoreUnavailable(msg)
    return client


def get_clip_store(client: MongoDBClient = Depends(get_mongodb_client)) -> ClipStore:
    """Build a ClipStore over the connected database."""
    return ClipStore(ClipRepository.create(client))
