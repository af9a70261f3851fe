"""MongoDB repositories for ClipKeep entities."""

from clipkeep.mongodb.repositories.clip_repository import ClipRepository

__all__ = [
    "ClipRepository",
]
