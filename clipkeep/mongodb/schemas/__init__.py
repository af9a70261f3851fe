"""MongoDB document schemas."""

from clipkeep.mongodb.schemas.documents import ClipDocument

__all__ = [
    "ClipDocument",
]
