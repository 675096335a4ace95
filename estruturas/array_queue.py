"""A queue of fixed capacity stored in a circular buffer."""

from __future__ import annotations

DEFAULT_CAPACITY = 10


class CircularQueue:
    """FIFO queue that holds at most ``max_size`` items in a ring buffer.

    A capacity below 1 falls back to 10.
    """

    def __init__(self, max_size: int = DEFAULT_CAPACITY) -> None:
        self._max = max_size if max_size >= 1 else DEFAULT_CAPACITY
        self._slots: list = [None] * self._max
        self._count = 0
        self._insert = 0
        self._remove = 0

    def enqueue(self, item) -> None:
        """Add ``item`` at the back; raise OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[self._insert] = item
        self._insert = (self._insert + 1) % self._max
        self._count += 1

    def dequeue(self):
        """Remove and return the front item; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("dequeue from an empty queue")
        item = self._slots[self._remove]
        self._remove = (self._remove + 1) % self._max
        self._count -= 1
        return item

    def head(self):
        """Return the front item without removing it; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("head of an empty queue")
        return self._slots[self._remove]

    def __len__(self) -> int:
        return self._count

    def max_size(self) -> int:
        """The capacity of the queue."""
        return self._max

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._max

    def clear(self) -> None:
        """Remove every item and rewind the buffer."""
        self._count = self._insert = self._remove = 0

    def _occupied(self, index: int) -> bool:
        start, stop = self._remove, self._insert
        if start == stop:
            return self._count != 0
        if start < stop:
            return start <= index < stop
        return index >= start or index < stop

    def __str__(self) -> str:
        """The buffer slot by slot, with blank cells for free slots."""
        cells = (
            f"{item}|" if self._occupied(index) else " |"
            for index, item in enumerate(self._slots)
        )
        return "|" + "".join(cells)