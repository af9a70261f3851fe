"""Clip Store: validated CRUD over the clips collection."""

from clipkeep.clip_store.errors import (
    ClipStoreError,
    NotFound,
    StoreUnavailable,
    UnknownStoreError,
    ValidationError,
)
from clipkeep.clip_store.service import ClipStore

__all__ = [
    "ClipStore",
    "ClipStoreError",
    "NotFound",
    "StoreUnavailable",
    "UnknownStoreError",
    "ValidationError",
]
