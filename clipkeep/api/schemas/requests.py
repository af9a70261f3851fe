"""API request schemas."""

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel


class ClipRequest(BaseClipKeepModel):
    """Body for creating or updating a clip.

    Emptiness is checked by the store so that blank and missing fields
    fail the same way.
    """

    title: str = ""
    content: str = ""
