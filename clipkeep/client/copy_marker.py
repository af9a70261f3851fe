"""The "just copied" mark shown on a clip for a short window after copying."""

import asyncio
import logging

logger = logging.getLogger(__name__)


class CopyMarker:
    """Holds at most one marked clip id and clears it after a delay.

    Marking a new clip supersedes the previous mark and cancels its pending
    clear, so only the latest copy is ever shown.
    """

    def __init__(self, duration_seconds: float = 2.0) -> None:
        self._duration_seconds = duration_seconds
        self._copied_id: str | None = None
        self._pending_clear: asyncio.TimerHandle | None = None

    @property
    def copied_id(self) -> str | None:
        return self._copied_id

    def is_marked(self, clip_id: str) -> bool:
        return self._copied_id == clip_id

    def mark(self, clip_id: str) -> None:
        """Mark a clip as just copied. Must be called from a running event loop."""
        self._cancel_pending()
        self._copied_id = clip_id
        loop = asyncio.get_running_loop()
        self._pending_clear = loop.call_later(self._duration_seconds, self._expire, clip_id)

    def clear(self) -> None:
        self._cancel_pending()
        self._copied_id = None

    def close(self) -> None:
        """Drop any pending clear. Safe to call repeatedly."""
        self.clear()

    def _expire(self, clip_id: str) -> None:
        self._pending_clear = None
        if self._copied_id == clip_id:
            self._copied_id = None
            logger.debug("[clip=%s] Copy mark expired", clip_id)

    def _cancel_pending(self) -> None:
        if self._pending_clear is not None:
            self._pending_clear.cancel()
            self._pending_clear = None
