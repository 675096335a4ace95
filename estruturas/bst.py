"""Binary search tree built on binary nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from estruturas.binary_tree import BinaryNode


class BST:
    """Binary search tree; equal items go to the right subtree."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: BinaryNode | None = None
        self._count = 0
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        """Insert ``item`` as a new leaf."""
        new_node = BinaryNode(item)
        self._count += 1
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if item < node.info:
                if node.left is None:
                    node.set_left(new_node)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.set_right(new_node)
                    return
                node = node.right

    def __contains__(self, item: Any) -> bool:
        node = self._root
        while node is not None:
            if item == node.info:
                return True
            node = node.left if item < node.info else node.right
        return False

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Items in ascending order."""
        if self._root is None:
            return iter(())
        return self._root.inorder()

    def graphviz(self) -> str:
        """The tree as a GraphViz graph, or an empty string when empty."""
        if self._root is None:
            return ""
        return self._root.graphviz()