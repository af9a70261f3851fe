"""MongoDB document schemas for ClipKeep entities."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field
from pydantic_mongo import PydanticObjectId


def utc_now_millis() -> datetime:
    """Current UTC time at the millisecond precision BSON dates store."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class ClipDocument(BaseModel):
    """A named text snippet stored in the clips collection."""

    id: PydanticObjectId | None = Field(default=None, alias="_id")

    title: str
    content: str

    # Set once at creation, never rewritten by updates
    created_at: datetime = Field(default_factory=utc_now_millis)

    class Config:
        populate_by_name = True
