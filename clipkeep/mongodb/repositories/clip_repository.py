"""Repository for Clip documents."""

from typing import TYPE_CHECKING

from bson import ObjectId
from pydantic_mongo import AsyncAbstractRepository
from pymongo import ReturnDocument

from clipkeep.mongodb.schemas import ClipDocument

if TYPE_CHECKING:
    from clipkeep.mongodb.client import MongoDBClient


def _parse_object_id(clip_id: str) -> ObjectId | None:
    """Return the ObjectId for a clip id, or None if it cannot be one."""
    if not ObjectId.is_valid(clip_id):
        return None
    return ObjectId(clip_id)


class ClipRepository(AsyncAbstractRepository[ClipDocument]):
    """Repository for storing and retrieving clips."""

    class Meta:  # pyright: ignore[reportIncompatibleVariableOverride]
        collection_name = "clips"

    @classmethod
    def create(cls, client: "MongoDBClient") -> "ClipRepository":
        """Create a repository instance bound to an open client's database."""
        return cls(client.database)  # pyright: ignore[reportArgumentType]

    async def create_clip(self, title: str, content: str) -> ClipDocument:
        """Insert a new clip.

        Args:
            title: Label shown for the clip.
            content: Text copied to the clipboard.

        Returns:
            The created ClipDocument with ID and created_at populated.
        """
        doc = ClipDocument(title=title, content=content)
        await self.save(doc)
        return doc

    async def get_clip(self, clip_id: str) -> ClipDocument | None:
        """Get a clip by ID.

        Returns:
            The ClipDocument if found, None otherwise.
        """
        object_id = _parse_object_id(clip_id)
        if object_id is None:
            return None
        return await self.find_one_by_id(object_id)

    async def list_clips(self) -> list[ClipDocument]:
        """List all clips.

        Returns:
            List of all ClipDocuments, ordered by creation date (oldest first).
        """
        clips = await self.find_by({})
        return sorted(clips, key=lambda c: c.created_at)


    async def update_clip(
        self,
        clip_id: str,
        title: str,
        content: str,
    ) -> ClipDocument | None:
        """Overwrite a clip's title and content in a single atomic write.

        Never upserts, so a clip deleted concurrently stays deleted.

        Returns:
            The updated ClipDocument if found, None otherwise.
        """
        object_id = _parse_object_id(clip_id)
        if object_id is None:
            return None

        raw = await self.get_collection().find_one_and_update(
            {"_id": object_id},
            {"$set": {"title": title, "content": content}},
            return_document=ReturnDocument.AFTER,
        )
        if raw is None:
            return None
        return ClipDocument.model_validate(raw)

    async def delete_clip(self, clip_id: str) -> bool:
        """Delete a clip by ID.

        Returns:
            True if deleted, False if not found.
        """
        object_id = _parse_object_id(clip_id)
        if object_id is None:
            return False

        result = await self.get_collection().delete_one({"_id": object_id})
        return result.deleted_count > 0
