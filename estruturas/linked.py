"""Unbounded stack, queue and deque built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class _DoubleNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data) -> None:
        self.data = data
        self.prev: _DoubleNode | None = None
        self.next: _DoubleNode | None = None


def _cells(items) -> str:
    return "|" + "".join(f"{item}|" for item in items)


class LinkedStack:
    """LIFO stack on a singly linked list."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._count = 0

    def push(self, item) -> None:
        """Put ``item`` on top."""
        self._top = _Node(item, self._top)
        self._count += 1

    def pop(self):
        """Remove and return the top item; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def top(self):
        """Return the top item; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("top of an empty stack")
        return self._top.data

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._top = None
        self._count = 0

    def __iter__(self) -> Iterator:
        """Items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return _cells(self)


class LinkedQueue:
    """FIFO queue on a singly linked list with head and tail references."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0

    def enqueue(self, item) -> None:
        """Add ``item`` at the back."""
        node = _Node(item)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._count += 1

    def dequeue(self):
        """Remove and return the front item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def head(self):
        """Return the front item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("head of an empty queue")
        return self._head.data

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._head = self._tail = None
        self._count = 0

    def __iter__(self) -> Iterator:
        """Items from front to back."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return _cells(self)


class LinkedDeque:
    """Double-ended queue on a doubly linked list."""

    def __init__(self) -> None:
        self._front: _DoubleNode | None = None
        self._back: _DoubleNode | None = None
        self._count = 0

    def add_first(self, item) -> None:
        node = _DoubleNode(item)
        if self._front is None:
            self._front = self._back = node
        else:
            self._front.prev = node
            node.next = self._front
            self._front = node
        self._count += 1

    def add_last(self, item) -> None:
        node = _DoubleNode(item)
        if self._front is None:
            self._front = self._back = node
        else:
            node.prev = self._back
            self._back.next = node
            self._back = node
        self._count += 1

    def remove_first(self):
        """Remove and return the first item; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("remove from an empty deque")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        self._count -= 1
        return node.data

    def remove_last(self):
        """Remove and return the last item; raise IndexError when empty."""
        if self._back is None:
            raise IndexError("remove from an empty deque")
        node = self._back
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        self._count -= 1
        return node.data

    def first(self):
        if self._front is None:
            raise IndexError("first of an empty deque")
        return self._front.data

    def last(self):
        if self._back is None:
            raise IndexError("last of an empty deque")
        return self._back.data

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._front = self._back = None
        self._count = 0

    def __iter__(self) -> Iterator:
        """Items from first to last."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator:
        """Items from last to first, following the back links."""
        node = self._back
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return _cells(self)

    def reverse_str(self) -> str:
        """Cells from last to first."""
        return _cells(reversed(self))