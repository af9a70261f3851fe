"""Persisted counter widget."""

from clipkeep.client.local_state import LocalStateStore


class Counter:
    """A non-negative integer that survives restarts.

    Every mutation is written through to the local state file.
    """

    def __init__(self, state_store: LocalStateStore) -> None:
        self._state_store = state_store
        self._count = state_store.load_count()

    @property
    def count(self) -> int:
        return self._count

    def increment(self) -> int:
        return self._set(self._count + 1)

    def decrement(self) -> int:
        return self._set(max(0, self._count - 1))

    def reset(self) -> int:
        return self._set(0)

    def _set(self, value: int) -> int:
        self._count = value
        self._state_store.save_count(value)
        return value
