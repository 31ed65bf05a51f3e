"""
Poem history.

Fixed-capacity, newest-first record of generated poems.
Adjusted poems are never recorded.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Tuple


@dataclass(frozen=True)
class HistoryEntry:
    """A generated poem and the epoch it was generated in."""
    poem_text: str
    epoch: int


class HistoryBuffer:
    """
    Ring buffer of HistoryEntry, newest first.
    
    Key traits:
    - Capacity fixed at construction (default 5)
    - Inserting at capacity evicts the oldest entry
    - Entries are immutable; list() returns a tuple
    """

    DEFAULT_CAPACITY = 5

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._entries: Deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def record(self, poem_text: str, epoch: int) -> HistoryEntry:
        """
        Prepend a new entry, evicting the oldest one when full.
        
        :param poem_text: Generated poem
        :param epoch: Epoch of the generation request
        :return: The recorded entry
        """
        entry = HistoryEntry(poem_text=poem_text, epoch=epoch)
        self._entries.appendleft(entry)
        return entry

    def list(self) -> Tuple[HistoryEntry, ...]:
        """Entries newest first, for display only."""
        return tuple(self._entries)

    def recent(self, k: int = 3) -> Tuple[HistoryEntry, ...]:
        """The k newest entries."""
        return self.list()[:max(k, 0)]

    def __len__(self) -> int:
        return len(self._entries)
