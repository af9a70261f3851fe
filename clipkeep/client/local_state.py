"""Local client state persisted to a JSON file."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError

from clipkeep.common.base_clipkeep_model import BaseClipKeepModel

logger = logging.getLogger(__name__)


class LocalState(BaseClipKeepModel):
    """Everything the client keeps outside the clip store."""

    count: int = Field(default=0, ge=0)
    # Set once first-run seeding has created at least one clip
    seeded: bool = False


class LocalStateStore:
    """Reads and writes LocalState. Last write wins."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LocalState:
        """Load the saved state, falling back to defaults if absent or unparseable."""
        if not self._path.exists():
            return LocalState()
        try:
            return LocalState.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self._path, e)
            return LocalState()

    def save(self, state: LocalState) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(state.model_dump_json(indent=2), encoding="utf-8")

    def load_count(self) -> int:
        return self.load().count

    def save_count(self, count: int) -> None:
        self.save(self.load().model_copy(update={"count": count}))

    def is_seeded(self) -> bool:
        return self.load().seeded

    def mark_seeded(self) -> None:
        self.save(self.load().model_copy(update={"seeded": True}))
