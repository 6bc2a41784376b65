"""A binary tree holding values, built level by level, with depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_ROOT: Any = object()


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class ValueBinaryTree:
    """A binary tree that stores its items by value.

    ``root`` is exposed so that callers may attach or rearrange nodes by hand.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self.create_complete_tree(contents)

    def create_complete_tree(self, contents: Iterable[Any]) -> None:
        """Replace the tree with a complete tree filled level by level, left to right."""
        self.clear()
        items = iter(contents)
        try:
            first = next(items)
        except StopIteration:
            return
        self.root = TreeNode(first)
        # Each entry is a parent node and the side of its next free child slot.
        slots: deque[tuple[TreeNode, str]] = deque(
            [(self.root, "left"), (self.root, "right")]
        )
        for item in items:
            parent, side = slots.popleft()
            child = TreeNode(item)
            setattr(parent, side, child)
            slots.append((child, "left"))
            slots.append((child, "right"))

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def _start(self, node: Any) -> Optional[TreeNode]:
        return self.root if node is _ROOT else node

    def pre_order(self, node: Any = _ROOT) -> Iterator[Any]:
        """Yield values node first, then left subtree, then right subtree."""
        cur = self._start(node)
        if cur is not None:
            yield cur.data
            yield from self.pre_order(cur.left)
            yield from self.pre_order(cur.right)

    def in_order(self, node: Any = _ROOT) -> Iterator[Any]:
        """Yield values left subtree first, then the node, then the right subtree."""
        cur = self._start(node)
        if cur is not None:
            yield from self.in_order(cur.left)
            yield cur.data
            yield from self.in_order(cur.right)

    def post_order(self, node: Any = _ROOT) -> Iterator[Any]:
        """Yield values of both subtrees before the node itself."""
        cur = self._start(node)
        if cur is not None:
            yield from self.post_order(cur.left)
            yield from self.post_order(cur.right)
            yield cur.data


def format_traversal(values: Iterable[Any]) -> str:
    """Render values as text, each followed by a single space."""
    return "".join(f"{value} " for value in values)