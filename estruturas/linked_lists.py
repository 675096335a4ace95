"""Singly and doubly linked lists with the classic node-level operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


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


def _cells(items: Iterable) -> str:
    return "|" + "".join(f"{item}|" for item in items)


class SinglyLinkedList:
    """Linked list with head and tail references and positional operations."""

    def __init__(self, items: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item) -> None:
        """Add ``item`` before the first node."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._count += 1

    def push_back(self, item) -> None:
        """Add ``item`` after the last node."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._count += 1

    def _link_between(self, prev: _Node | None, node: _Node, current: _Node | None) -> None:
        if prev is None:
            node.next = self._head
            self._head = node
            if self._tail is None:
                self._tail = node
        elif current is None:
            prev.next = node
            self._tail = node
        else:
            prev.next = node
            node.next = current
        self._count += 1

    def insert(self, item, position: int) -> None:
        """Insert ``item`` at ``position``; positions past the end append."""
        if position < 0:
            raise ValueError("position must not be negative")
        prev, current = None, self._head
        for _ in range(position):
            if current is None:
                break
            prev, current = current, current.next
        self._link_between(prev, _Node(item), current)

    def insert_sorted(self, item) -> None:
        """Insert ``item`` before the first node whose value is not smaller."""
        prev, current = None, self._head
        while current is not None and current.data < item:
            prev, current = current, current.next
        self._link_between(prev, _Node(item), current)

    def pop_front(self):
        """Remove and return the first item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def pop_back(self):
        """Remove and return the last item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._head is self._tail:
            return self.pop_front()
        prev = self._head
        while prev.next is not self._tail:
            prev = prev.next
        node = self._tail
        prev.next = None
        self._tail = prev
        self._count -= 1
        return node.data

    def remove(self, position: int):
        """Remove and return the item at ``position``; raise IndexError if absent."""
        if position < 0:
            raise IndexError(f"position {position} out of range")
        prev, current = None, self._head
        for _ in range(position):
            if current is None:
                break
            prev, current = current, current.next
        if current is None:
            raise IndexError(f"position {position} out of range")
        if prev is None:
            return self.pop_front()
        prev.next = current.next
        if current.next is None:
            self._tail = prev
        self._count -= 1
        return current.data

    def swap_nodes(self, first: int, second: int) -> None:
        """Exchange the nodes at two positions by relinking them."""
        for position in (first, second):
            if not 0 <= position < self._count:
                raise IndexError(f"position {position} out of range")
        if first == second:
            return
        if first > second:
            first, second = second, first
        dummy = _Node(None, self._head)
        prev_a = dummy
        for _ in range(first):
            prev_a = prev_a.next
        prev_b = dummy
        for _ in range(second):
            prev_b = prev_b.next
        a, b = prev_a.next, prev_b.next
        if a.next is b:
            prev_a.next = b
            a.next = b.next
            b.next = a
        else:
            prev_a.next = b
            prev_b.next = a
            a.next, b.next = b.next, a.next
        self._head = dummy.next
        if self._tail is b:
            self._tail = a

    def reverse(self) -> None:
        """Reverse the list by moving every node to the front of a new chain."""
        new_head = None
        old_head = self._head
        node = self._head
        while node is not None:
            following = node.next
            node.next = new_head
            new_head = node
            node = following
        self._head = new_head
        self._tail = old_head

    def head(self):
        """The first item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("head of an empty list")
        return self._head.data

    def tail(self):
        """The last item; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("tail of an empty list")
        return self._tail.data

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def diagram(self) -> str:
        """The nodes drawn from head to tail with their links."""
        parts = []
        node = self._head
        while node is not None:
            end = "|X| " if node.next is None else "|| -> "
            parts.append(f"|{node.data}{end}")
            node = node.next
        return "head--> " + "".join(parts) + " <--tail"

    def __str__(self) -> str:
        return _cells(self)


class DoublyLinkedList:
    """Linked list whose nodes point both ways."""

    def __init__(self, items: Iterable = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._count = 0
        self.extend_right(items)

    def push_front(self, item) -> None:
        node = _DoubleNode(item)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._count += 1

    def push_back(self, item) -> None:
        node = _DoubleNode(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._count += 1

    def pop_front(self):
        """Remove and return the first item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._count -= 1
        return node.data

    def pop_back(self):
        """Remove and return the last item; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._count -= 1
        return node.data

    def extend_right(self, items: Iterable) -> None:
        """Append each item at the end, in order."""
        for item in items:
            self.push_back(item)

    def extend_left(self, items: Iterable) -> None:
        """Prepend each item at the front, one after the other."""
        for item in items:
            self.push_front(item)

    def _check_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        if count > self._count:
            raise IndexError("not enough items to drop")

    def drop_left(self, count: int) -> None:
        """Remove ``count`` items from the front."""
        self._check_count(count)
        for _ in range(count):
            self.pop_front()

    def drop_right(self, count: int) -> None:
        """Remove ``count`` items from the end."""
        self._check_count(count)
        for _ in range(count):
            self.pop_back()

    def reverse(self) -> None:
        """Reverse the list by swapping the links of every node."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def diagram(self) -> str:
        """The nodes drawn from head to tail with both links."""
        parts = []
        node = self._head
        while node is not None:
            start = "|X|" if node.prev is None else " <==> ||"
            end = "|X| " if node.next is None else "||"
            parts.append(f"{start}{node.data}{end}")
            node = node.next
        return "head--> " + "".join(parts) + " <--tail"

    def reverse_diagram(self) -> str:
        """The nodes drawn from tail to head with both links."""
        parts = []
        node = self._tail
        while node is not None:
            start = "|X|" if node.next is None else " <==> ||"
            end = "|X| " if node.prev is None else "||"
            parts.append(f"{start}{node.data}{end}")
            node = node.prev
        return "tail--> " + "".join(parts) + " <--head"

    def __str__(self) -> str:
        return _cells(self)


def deque_exercise() -> list[str]:
    """Contents after each step of the insert/drop exercise on a deque of letters."""
    deque = DoublyLinkedList()
    steps = [
        (deque.extend_right, "DESCARTES"),
        (deque.drop_left, 3),
        (deque.drop_right, 4),
        (deque.extend_left, "EDISON"),
        (deque.drop_left, 5),
        (deque.extend_left, "RUTHERFORD"),
        (deque.drop_left, 8),
        (deque.extend_left, "EINSTEIN"),
        (deque.drop_left, 7),
    ]
    shown = []
    for action, argument in steps:
        action(argument)
        shown.append("".join(deque))
    return shown