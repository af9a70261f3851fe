"""Clip Store service: validation and error translation over the repository."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from pymongo.errors import ConnectionFailure, PyMongoError

from clipkeep.clip_store.errors import NotFound, StoreUnavailable, UnknownStoreError, ValidationError
from clipkeep.mongodb.repositories import ClipRepository
from clipkeep.mongodb.schemas import ClipDocument

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and content are required"
NOT_FOUND_MESSAGE = "Clip not found"


def _require_fields(title: str | None, content: str | None) -> None:
    if not title or not title.strip() or not content or not content.strip():
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    """Map driver errors raised inside the block onto the store taxonomy."""
    try:
        yield
    except ConnectionFailure as e:
        logger.error("Database unavailable while trying to %s: %s", action, e)
        msg = "Database not connected"
        raise StoreUnavailable(msg) from e
    except PyMongoError as e:
        logger.error("Database error while trying to %s: %s", action, e)
        msg = f"Failed to {action}"
        raise UnknownStoreError(msg) from e


class ClipStore:
    """The sole source of truth for clips."""

    def __init__(self, repository: ClipRepository) -> None:
        self._repository = repository

    async def list_clips(self) -> list[ClipDocument]:
        """Return all clips ordered by creation time ascending."""
        with _translate_errors("fetch clips"):
            clips = await self._repository.list_clips()
        logger.info("Retrieved %d clips", len(clips))
        return clips

    async def create_clip(self, title: str | None, content: str | None) -> ClipDocument:
        """Persist a new clip.

        Raises:
            ValidationError: If title or content is missing or blank.
        """
        _require_fields(title, content)
        with _translate_errors("create clip"):
            doc = await self._repository.create_clip(title=title, content=content)  # type: ignore[arg-type]
        logger.info("[clip=%s] Created clip: %s", doc.id, doc.title)
        return doc

    async def update_clip(self, clip_id: str, title: str | None, content: str | None) -> ClipDocument:
        """Overwrite a clip's title and content, keeping its created_at.

        Raises:
            ValidationError: If title or content is missing or blank.
            NotFound: If no clip has this ID.
        """
        _require_fields(title, content)
        with _translate_errors("update clip"):
            doc = await self._repository.update_clip(clip_id, title=title, content=content)  # type: ignore[arg-type]
        if doc is None:
            raise NotFound(NOT_FOUND_MESSAGE)
        logger.info("[clip=%s] Updated clip: %s", clip_id, doc.title)
        return doc

    async def delete_clip(self, clip_id: str) -> bool:
        """Hard delete a clip.

        Raises:
            NotFound: If no clip has this ID.
        """
        with _translate_errors("delete clip"):
            deleted = await self._repository.delete_clip(clip_id)
        if not deleted:
            raise NotFound(NOT_FOUND_MESSAGE)
        logger.info("[clip=%s] Deleted clip", clip_id)
        return True
