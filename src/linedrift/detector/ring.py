"""Fixed-capacity ring buffer for before-context lines."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class BeforeBuffer(Generic[T]):
    """Holds the most recent *capacity* unemitted lines.

    Slots are written at a cursor modulo capacity; once full, each push
    overwrites the oldest entry. ``drain()`` rebuilds chronological order
    from the cursor position and empties the buffer.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._cursor = 0  # next slot to write
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def push(self, entry: T) -> None:
        if self._capacity == 0:
            return
        self._slots[self._cursor] = entry
        self._cursor = (self._cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1

    def drain(self) -> List[T]:
        """Return entries oldest first, then clear."""
        if self._count < self._capacity:
            order = range(self._count)
        else:
            # full: the cursor points at the oldest entry
            order = (
                (self._cursor + i) % self._capacity for i in range(self._capacity)
            )
        entries = [self._slots[i] for i in order]
        self.clear()
        return entries  # type: ignore[return-value]

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._cursor = 0
        self._count = 0
