"""A stack of fixed capacity backed by a Python list."""

from __future__ import annotations

DEFAULT_CAPACITY = 10


class BoundedStack:
    """LIFO stack that holds at most ``max_size`` items.

    A capacity below 1 falls back to 10.
    """

    def __init__(self, max_size: int = DEFAULT_CAPACITY) -> None:
        self._max = max_size if max_size >= 1 else DEFAULT_CAPACITY
        self._items: list = []

    def push(self, item) -> None:
        """Put ``item`` on top; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self):
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self):
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def max_size(self) -> int:
        """The capacity of the stack."""
        return self._max

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._max

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __str__(self) -> str:
        """Bottom-to-top cells, with blank cells for the free capacity."""
        used = "".join(f"{item}|" for item in self._items)
        return "|" + used + " |" * (self._max - len(self._items))