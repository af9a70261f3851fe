"""Client-side mirror of the clip collection.

ClipSession keeps an ordered list of clips in step with the server. Every
mutation goes to the API first and touches the local list only once the
server has confirmed it. Positional inserts are a view concern: the store
has no order field, so a fresh ``load()`` always returns creation order.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto

import pyperclip

from clipkeep.client.api_client import ClipApiClient, ClipApiError
from clipkeep.client.config import ClientConfig, get_client_config
from clipkeep.client.copy_marker import CopyMarker
from clipkeep.client.local_state import LocalStateStore
from clipkeep.client.schemas import Clip, ClipFormData
from clipkeep.client.seeds import DEFAULT_SEED_CLIPS

logger = logging.getLogger(__name__)


class ErrorCategory(StrEnum):
    """Which kind of user action failed."""

    LOAD = auto()
    SAVE = auto()
    DELETE = auto()


@dataclass(frozen=True)
class SessionError:
    category: ErrorCategory
    message: str


_ERROR_MESSAGES = {
    ErrorCategory.LOAD: "Failed to load clips. Please try again.",
    ErrorCategory.SAVE: "Failed to save clip. Please try again.",
    ErrorCategory.DELETE: "Failed to delete clip. Please try again.",
}


class ClipSession:
    """Ordered local copy of the clip collection for one user session."""

    def __init__(
        self,
        api: ClipApiClient,
        state_store: LocalStateStore,
        clipboard_writer: Callable[[str], None] | None = None,
        copy_marker: CopyMarker | None = None,
        seed_clips: Sequence[ClipFormData] = DEFAULT_SEED_CLIPS,
    ) -> None:
        self._api = api
        self._state_store = state_store
        self._clipboard_writer = clipboard_writer or pyperclip.copy
        self._copy_marker = copy_marker or CopyMarker()
        self._seed_clips = seed_clips

        self.ordered_clips: list[Clip] = []
        self.error: SessionError | None = None
        self._seeded_this_session = False

    @classmethod
    def create(cls, config: ClientConfig | None = None) -> "ClipSession":
        """Create a session wired to the configured API and state file."""
        resolved_config = config or get_client_config()
        return cls(
            api=ClipApiClient(
                resolved_config.api_base_url,
                timeout_seconds=resolved_config.request_timeout_seconds,
            ),
            state_store=LocalStateStore(resolved_config.state_path),
            copy_marker=CopyMarker(resolved_config.copy_mark_seconds),
        )

    @property
    def copied_id(self) -> str | None:
        return self._copy_marker.copied_id

    def dismiss_error(self) -> None:
        self.error = None

    def _fail(self, category: ErrorCategory, exc: Exception | None = None) -> None:
        # A new error replaces whatever was showing before
        self.error = SessionError(category=category, message=_ERROR_MESSAGES[category])
        if exc is not None:
            logger.error("Clip %s failed: %s", category, exc)

    async def load(self) -> bool:
        """Fetch the full collection, then seed it if this is a first run.

        Returns:
            True if the clips were loaded.
        """
        self.error = None
        try:
            clips = await self._api.get_clips()
        except ClipApiError as e:
            self._fail(ErrorCategory.LOAD, e)
            return False

        self.ordered_clips = list(clips)
        if not self.ordered_clips:
            await self._seed_if_first_run()
        return True

    async def _seed_if_first_run(self) -> None:
        """Create the seed clips one by one.

        Runs at most once per session, and never again once the persisted
        marker is set, so a reload after a partial seed cannot duplicate clips.
        """
        if self._seeded_this_session or self._state_store.is_seeded():
            return
        self._seeded_this_session = True

        for seed in self._seed_clips:
            try:
                clip = await self._api.create_clip(seed)
            except ClipApiError as e:
                self._fail(ErrorCategory.SAVE, e)
                return
            if not self._state_store.is_seeded():
                self._state_store.mark_seeded()
            self.ordered_clips.append(clip)
        logger.info("Seeded %d clips", len(self._seed_clips))

    async def add(self, title: str, content: str, insert_position: int | None = None) -> Clip | None:
        """Create a clip and place it locally.

        Args:
            title: Clip title.
            content: Clip content.
            insert_position: Optional index in the local list. Clamped to the
                list bounds and never sent to the server.

        Returns:
            The created clip, or None if the save failed.
        """
        data = ClipFormData(title=title, content=content)
        if not data.is_complete:
            self._fail(ErrorCategory.SAVE)
            return None
        try:
            clip = await self._api.create_clip(data)
        except ClipApiError as e:
            self._fail(ErrorCategory.SAVE, e)
            return None

        if insert_position is None:
            self.ordered_clips.append(clip)
        else:
            index = min(max(insert_position, 0), len(self.ordered_clips))
            self.ordered_clips.insert(index, clip)
        return clip

    async def edit(self, clip_id: str, title: str, content: str) -> Clip | None:
        """Update a clip, keeping its place in the local list."""
        data = ClipFormData(title=title, content=content)
        if not data.is_complete:
            self._fail(ErrorCategory.SAVE)
            return None
        try:
            updated = await self._api.update_clip(clip_id, data)
        except ClipApiError as e:
            self._fail(ErrorCategory.SAVE, e)
            return None

        self.ordered_clips = [updated if clip.id == clip_id else clip for clip in self.ordered_clips]
        return updated

    async def delete(self, clip_id: str) -> bool:
        try:
            await self._api.delete_clip(clip_id)
        except ClipApiError as e:
            self._fail(ErrorCategory.DELETE, e)
            return False

        self.ordered_clips = [clip for clip in self.ordered_clips if clip.id != clip_id]
        if self._copy_marker.is_marked(clip_id):
            self._copy_marker.clear()
        return True

    def find(self, clip_id: str) -> Clip | None:
        return next((clip for clip in self.ordered_clips if clip.id == clip_id), None)

    def copy(self, clip_id: str) -> bool:
        """Copy a clip's content to the clipboard and mark it as just copied.

        Must be called from a running event loop.

        Returns:
            True if the content reached the clipboard.
        """
        clip = self.find(clip_id)
        if clip is None:
            logger.warning("[clip=%s] Cannot copy unknown clip", clip_id)
            return False
        try:
            self._clipboard_writer(clip.content)
        except Exception as e:
            logger.error("[clip=%s] Failed to copy to clipboard: %s", clip_id, e)
            return False

        self._copy_marker.mark(clip_id)
        return True

    def close(self) -> None:
        """Tear down the session, cancelling any pending copy-mark clear."""
        self._copy_marker.close()

    async def aclose(self) -> None:
        """Tear down the session and release the API client."""
        self.close()
        await self._api.aclose()
