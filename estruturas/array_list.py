"""A list of fixed capacity with position-based insertion and removal."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 10


class BoundedList:
    """Sequence that holds at most ``max_size`` items.

    A capacity below 1 falls back to 10. Indices are plain non-negative
    positions; negative indices are rejected.
    """

    def __init__(self, max_size: int = DEFAULT_CAPACITY) -> None:
        self._max = max_size if max_size >= 1 else DEFAULT_CAPACITY
        self._items: list = []

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def append(self, item) -> None:
        """Add ``item`` at the end; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("list is full")
        self._items.append(item)

    def insert(self, index: int, item) -> None:
        """Insert ``item`` before position ``index`` (0 to len inclusive)."""
        if self.is_full():
            raise OverflowError("list is full")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._items.insert(index, item)

    def remove_at(self, index: int):
        """Remove and return the item at ``index``."""
        self._check(index)
        return self._items.pop(index)

    def __getitem__(self, index: int):
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, item) -> None:
        self._check(index)
        self._items[index] = item

    def __contains__(self, item) -> bool:
        return item in self._items

    def index_of(self, item, start: int = 0) -> int:
        """First position of ``item`` at or after ``start``, or -1."""
        if not 0 <= start < len(self._items):
            return -1
        for index in range(start, len(self._items)):
            if self._items[index] == item:
                return index
        return -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def max_size(self) -> int:
        """The capacity of the list."""
        return self._max

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._max

    def clear(self) -> None:
        self._items.clear()

    def __str__(self) -> str:
        """All items joined with nothing between them."""
        return "".join(str(item) for item in self._items)