"""Client-side views of API payloads."""

from datetime import datetime

from pydantic import Field

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel


class Clip(BaseClipKeepModel):
    """A clip as returned by the API."""

    id: str
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")


class ClipFormData(BaseClipKeepModel):
    """Title and content sent when creating or updating a clip."""

    title: str
    content: str

    @property
    def is_complete(self) -> bool:
        return bool(self.title.strip()) and bool(self.content.strip())
