"""API response schemas."""

from datetime import datetime

from pydantic import Field

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel


class ClipResponse(BaseClipKeepModel):
    """Response containing a single clip."""

    id: str
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")


class DeleteResponse(BaseClipKeepModel):
    """Response after a clip is deleted."""

    message: str
    clip_id: str


class HealthResponse(BaseClipKeepModel):
    """Response for the health check."""

    status: str
    timestamp: datetime
    database: str
