"""API schemas for requests and responses."""

from clipkeep.api.schemas.requests import ClipRequest
from clipkeep.api.schemas.responses import (
    ClipResponse,
    DeleteResponse,
    HealthResponse,
)

__all__ = [
    "ClipRequest",
    "ClipResponse",
    "DeleteResponse",
    "HealthResponse",
]
