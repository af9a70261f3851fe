"""Shared fixtures: an in-memory clip repository and an app wired to it."""

from datetime import UTC, datetime, timedelta

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from clipkeep.api.config import ServerConfig
from clipkeep.api.dependencies import get_clip_store
from clipkeep.api.main import create_app
from clipkeep.clip_store import ClipStore
from clipkeep.mongodb.schemas import ClipDocument


class InMemoryClipRepository:
    """Stands in for ClipRepository with the same async surface."""

    def __init__(self) -> None:
        self.docs: dict[str, ClipDocument] = {}
        self.error: Exception | None = None
        self._clock = datetime(2024, 1, 1, tzinfo=UTC)

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    async def create_clip(self, title: str, content: str) -> ClipDocument:
        self._check()
        # Strictly increasing timestamps keep ordering assertions deterministic
        self._clock += timedelta(seconds=1)
        doc = ClipDocument(id=ObjectId(), title=title, content=content, created_at=self._clock)
        self.docs[str(doc.id)] = doc
        return doc

    async def get_clip(self, clip_id: str) -> ClipDocument | None:
        self._check()
        return self.docs.get(clip_id)

    async def list_clips(self) -> list[ClipDocument]:
        self._check()
        return sorted(self.docs.values(), key=lambda c: c.created_at)

    async def update_clip(self, clip_id: str, title: str, content: str) -> ClipDocument | None:
        self._check()
        doc = self.docs.get(clip_id)
        if doc is None:
            return None
        doc.title = title
        doc.content = content
        return doc

    async def delete_clip(self, clip_id: str) -> bool:
        self._check()
        return self.docs.pop(clip_id, None) is not None


@pytest.fixture
def repository() -> InMemoryClipRepository:
    return InMemoryClipRepository()


@pytest.fixture
def store(repository: InMemoryClipRepository) -> ClipStore:
    return ClipStore(repository)  # type: ignore[arg-type]


@pytest.fixture
def app(store: ClipStore) -> FastAPI:
    application = create_app(server_config=ServerConfig())
    application.dependency_overrides[get_clip_store] = lambda: store
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
