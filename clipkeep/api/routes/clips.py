"""Clip management routes."""

from fastapi import APIRouter, Depends

from clipkeep.api.dependencies import get_clip_store
from clipkeep.api.schemas import ClipRequest, ClipResponse, DeleteResponse
from clipkeep.clip_store import ClipStore
from clipkeep.mongodb.schemas import ClipDocument

router = APIRouter()


def _to_response(doc: ClipDocument) -> ClipResponse:
    """Convert ClipDocument to ClipResponse."""
    return ClipResponse(
        id=str(doc.id),
        title=doc.title,
        content=doc.content,
        created_at=doc.created_at,
    )


@router.get("", response_model=list[ClipResponse])
async def list_clips(store: ClipStore = Depends(get_clip_store)) -> list[ClipResponse]:
    """List all clips, oldest first."""
    docs = await store.list_clips()
    return [_to_response(doc) for doc in docs]


@router.post("", response_model=ClipResponse, status_code=201)
async def create_clip(
    request: ClipRequest,
    store: ClipStore = Depends(get_clip_store),
) -> ClipResponse:
    """Create a new clip."""
    doc = await store.create_clip(title=request.title, content=request.content)
    return _to_response(doc)


@router.put("/{clip_id}", response_model=ClipResponse)
async def update_clip(
    clip_id: str,
    request: ClipRequest,
    store: ClipStore = Depends(get_clip_store),
) -> ClipResponse:
    """Update a clip's title and content."""
    doc = await store.update_clip(clip_id, title=request.title, content=request.content)
    return _to_response(doc)


@router.delete("/{clip_id}", response_model=DeleteResponse)
async def delete_clip(
    clip_id: str,
    store: ClipStore = Depends(get_clip_store),
) -> DeleteResponse:
    """Delete a clip."""
    await store.delete_clip(clip_id)
    return DeleteResponse(message="Clip deleted successfully", clip_id=clip_id)
