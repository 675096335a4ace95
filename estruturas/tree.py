"""General trees whose nodes hold any value and any number of children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Tree:
    """A tree node; every node is also the root of its own subtree."""

    def __init__(self, info: Any) -> None:
        self.info = info
        self._parent: Tree | None = None
        self._children: list[Tree] = []

    @property
    def parent(self) -> Tree | None:
        """The node this one hangs from, or None for a root."""
        return self._parent

    def child(self, index: int) -> Tree | None:
        """The child at ``index``, or None when there is no such child."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def is_root(self) -> bool:
        return self._parent is None

    def is_internal(self) -> bool:
        """Whether the node has a parent and at least one child."""
        return self._parent is not None and bool(self._children)

    def is_external(self) -> bool:
        """Whether the node has no children."""
        return not self._children

    def degree(self) -> int:
        """Number of children."""
        return len(self._children)

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
        return max((1 + child.height() for child in self._children), default=0)

    def size(self) -> int:
        """Number of nodes in this subtree, itself included."""
        return 1 + sum(child.size() for child in self._children)

    def add_subtree(self, subtree: Tree | None) -> None:
        """Append ``subtree`` as the last child; None is ignored."""
        if subtree is None:
            return
        self._children.append(subtree)
        subtree._parent = self

    def remove_subtree(self, subtree: Tree) -> None:
        """Detach ``subtree`` from the children; raise ValueError if it is not one."""
        for index, child in enumerate(self._children):
            if child is subtree:
                del self._children[index]
                subtree._parent = None
                return
        raise ValueError("subtree is not a child of this node")

    def __contains__(self, info: Any) -> bool:
        return self.find(info) is not None

    def find(self, info: Any) -> Tree | None:
        """The first node in pre-order holding ``info``, or None."""
        if self.info == info:
            return self
        for child in self._children:
            found = child.find(info)
            if found is not None:
                return found
        return None

    def _edges(self) -> Iterator[str]:
        for child in self._children:
            yield f"  {self.info} -- {child.info}\n"
            yield from child._edges()

    def graphviz(self, name: str = "NodeTree") -> str:
        """The subtree as an undirected GraphViz graph called ``name``."""
        return (
            f"graph {name} {{\n  node [shape=circle]\n"
            + "".join(self._edges())
            + "}\n"
        )

    def preorder(self) -> Iterator[Any]:
        """Values with each node before its children."""
        yield self.info
        for child in self._children:
            yield from child.preorder()

    def postorder(self) -> Iterator[Any]:
        """Values with each node after its children."""
        for child in self._children:
            yield from child.postorder()
        yield self.info

    def levelorder(self) -> Iterator[Any]:
        """Values level by level, left to right."""
        pending: deque[Tree] = deque([self])
        while pending:
            node = pending.popleft()
            yield node.info
            pending.extend(node._children)

    def _render(self, indent: str) -> str:
        text = str(self.info)
        children = self._children
        if not children:
            return text + "\n"
        if len(children) == 1:
            return text + " ─── " + children[0]._render(indent + "      ")
        last = len(children) - 1
        parts = [text]
        for index in range(last, -1, -1):
            child = children[index]
            if index == last:
                parts.append(" ─┬─ " + child._render(indent + "   │  "))
            elif index == 0:
                parts.append(indent + "   └─ " + child._render(indent + "      "))
            else:
                parts.append(indent + "   ├─ " + child._render(indent + "   │  "))
        return "".join(parts)

    def render(self) -> str:
        """The subtree drawn with box characters, one leaf per line."""
        return self._render("")

    def __repr__(self) -> str:
        return f"Tree({self.info!r})"


def build(info: Any, *args: Any) -> Tree:
    """A node holding ``info`` with ``args`` as children.

    Each argument is either a Tree or a value that becomes a leaf.
    """
    node = Tree(info)
    for arg in args:
        node.add_subtree(arg if isinstance(arg, Tree) else Tree(arg))
    return node