"""
Match trackers for Jaro-Winkler similarity.

Records which byte positions of one input have been consumed by a match.
Short inputs use a single integer bitmask, longer inputs a list of flags.
"""

from abc import ABC, abstractmethod
from typing import List

# Largest capacity tracked with the integer bitmask.
INLINE_CAPACITY = 128


class MatchTracker(ABC):
    """
    Fixed-size set of matched positions for one side of a comparison.

    Positions are 0-indexed and must lie in ``[0, capacity)``. The tracker
    is never resized and has no removal operation.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Tracker capacity must be non-negative, got {capacity}")
        self.capacity = capacity

    def __len__(self) -> int:
        return self.capacity

    @abstractmethod
    def get(self, index: int) -> bool:
        """Return whether ``index`` has been marked."""

    @abstractmethod
    def set_true(self, index: int) -> None:
        """Mark ``index``. Marking twice is the same as marking once."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of marked positions."""


class BitMaskTracker(MatchTracker):
    """Tracker backed by one integer, bit ``i`` set when position ``i`` matched."""

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._bits = 0

    def get(self, index: int) -> bool:
        return (self._bits >> index) & 1 == 1

    def set_true(self, index: int) -> None:
        self._bits |= 1 << index

    def count(self) -> int:
        return bin(self._bits).count("1")


class ListTracker(MatchTracker):
    """Tracker backed by a list of booleans sized to the capacity."""

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._flags: List[bool] = [False] * capacity

    def get(self, index: int) -> bool:
        return self._flags[index]

    def set_true(self, index: int) -> None:
        self._flags[index] = True

    def count(self) -> int:
        return sum(self._flags)


def build_tracker(capacity: int) -> MatchTracker:
    """
    Build an empty tracker for ``capacity`` positions.

    Args:
        capacity: Number of positions (length of the tracked input)

    Returns:
        BitMaskTracker up to INLINE_CAPACITY positions, ListTracker above it
    """
    if capacity <= INLINE_CAPACITY:
        return BitMaskTracker(capacity)
    return ListTracker(capacity)
