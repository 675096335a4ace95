"""Binary trees whose nodes hold any value and at most two children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

_MISSING_ROW = "  *  *  *  *  *  *  *  *  *  *"


class BinaryNode:
    """A binary tree node; every node is also the root of its own subtree."""

    def __init__(
        self,
        info: Any,
        left: BinaryNode | None = None,
        right: BinaryNode | None = None,
    ) -> None:
        self.info = info
        self._parent: BinaryNode | None = None
        self._left: BinaryNode | None = None
        self._right: BinaryNode | None = None
        self.set_left(left)
        self.set_right(right)

    @property
    def parent(self) -> BinaryNode | None:
        """The node this one hangs from, or None for a root."""
        return self._parent

    @property
    def left(self) -> BinaryNode | None:
        """The left subtree, or None."""
        return self._left

    @property
    def right(self) -> BinaryNode | None:
        """The right subtree, or None."""
        return self._right

    def set_left(self, subtree: BinaryNode | None) -> None:
        """Replace the left subtree with ``subtree``; the old one is detached."""
        if self._left is not None:
            self._left._parent = None
        self._left = subtree
        if subtree is not None:
            subtree._parent = self

    def set_right(self, subtree: BinaryNode | None) -> None:
        """Replace the right subtree with ``subtree``; the old one is detached."""
        if self._right is not None:
            self._right._parent = None
        self._right = subtree
        if subtree is not None:
            subtree._parent = self

    def remove_left(self) -> None:
        """Drop the left subtree, if any."""
        self.set_left(None)

    def remove_right(self) -> None:
        """Drop the right subtree, if any."""
        self.set_right(None)

    def _children(self) -> Iterator[BinaryNode]:
        if self._left is not None:
            yield self._left
        if self._right is not None:
            yield self._right

    def is_root(self) -> bool:
        return self._parent is None

    def is_internal(self) -> bool:
        """Whether the node has a parent and at least one child."""
        return self._parent is not None and not self.is_external()

    def is_external(self) -> bool:
        """Whether the node has no children."""
        return self._left is None and self._right is None

    def degree(self) -> int:
        """Number of children, from 0 to 2."""
        return sum(1 for _ in self._children())

    def depth(self) -> int:
        """Number of ancestors above this node."""
        count = 0
        node = self._parent
        while node is not None:
            count += 1
            node = node._parent
        return count

    def height(self) -> int:
        """Length of the longest downward path from this node."""
        return max((1 + child.height() for child in self._children()), default=0)

    def size(self) -> int:
        """Number of nodes in this subtree, itself included."""
        return 1 + sum(child.size() for child in self._children())

    def __contains__(self, info: Any) -> bool:
        return self.find(info) is not None

    def find(self, info: Any) -> BinaryNode | None:
        """The first node in pre-order holding ``info``, or None."""
        if self.info == info:
            return self
        for child in self._children():
            found = child.find(info)
            if found is not None:
                return found
        return None

    def _edges(self) -> Iterator[str]:
        for child in self._children():
            yield f"  {self.info} -- {child.info}\n"
            yield from child._edges()

    def graphviz(self, name: str = "NodeBT") -> str:
        """The subtree as an undirected GraphViz graph called ``name``."""
        return (
            f"graph {name} {{\n  node [shape=circle]\n"
            + "".join(self._edges())
            + "}\n"
        )

    def preorder(self) -> Iterator[Any]:
        """Values with each node before its subtrees."""
        yield self.info
        for child in self._children():
            yield from child.preorder()

    def postorder(self) -> Iterator[Any]:
        """Values with each node after its subtrees."""
        for child in self._children():
            yield from child.postorder()
        yield self.info

    def inorder(self) -> Iterator[Any]:
        """Values of the left subtree, then the node, then the right subtree."""
        if self._left is not None:
            yield from self._left.inorder()
        yield self.info
        if self._right is not None:
            yield from self._right.inorder()

    def levelorder(self) -> Iterator[Any]:
        """Values level by level, left to right."""
        pending: deque[BinaryNode] = deque([self])
        while pending:
            node = pending.popleft()
            yield node.info
            pending.extend(node._children())

    def __repr__(self) -> str:
        return f"BinaryNode({self.info!r})"


def node_report(
    root: BinaryNode, labels: Iterable[Any], first: Any, second: Any
) -> str:
    """A table describing the node holding each label, one row per label.

    Columns: parent, is root, is internal, is external, degree, depth,
    height, size, and whether the subtree contains ``first`` and ``second``.
    Labels not in the tree get a row of asterisks.
    """
    lines = [f"N Pa iR iI iE dg dp hg sz f{first} f{second}"]
    for label in labels:
        node = root.find(label)
        if node is None:
            lines.append(f"{label}{_MISSING_ROW}")
            continue
        parent = "*" if node.parent is None else node.parent.info
        values = (
            node.is_root(),
            node.is_internal(),
            node.is_external(),
            node.degree(),
            node.depth(),
            node.height(),
            node.size(),
            first in node,
            second in node,
        )
        cells = " ".join(f"{int(value):>2}" for value in values)
        lines.append(f"{label} {parent!s:>2} {cells}")
    return "\n".join(lines) + "\n"