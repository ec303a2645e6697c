"""Bounded undo history."""

import copy
from collections import deque

from word_drill.models import HistoryEntry


class HistoryLog:
    """Stack of state snapshots with a hard capacity.

    Pushing past capacity silently drops the oldest entry. Entries are
    deep-copied on push so the caller may keep mutating its own state.
    """

    def __init__(self, capacity: int = 50):
        """Initialize an empty history.

        Args:
            capacity: Maximum number of entries kept
        """
        self.capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    def push(self, entry: HistoryEntry) -> None:
        """Store a deep copy of the entry."""
        if self.capacity == 0:
            return
        self._entries.append(copy.deepcopy(entry))

    def pop(self) -> HistoryEntry | None:
        """Remove and return the most recent entry, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        """Forget all entries."""
        self._entries.clear()

    @property
    def can_undo(self) -> bool:
        """Check if there is anything to undo."""
        return len(self._entries) > 0

    def __len__(self) -> int:
        return len(self._entries)
