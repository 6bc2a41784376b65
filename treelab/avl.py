"""A self-balancing binary search tree mapping keys to data."""

from __future__ import annotations

from typing import Any, Optional

from .avl_debug import in_order_text as _in_order_text
from .avl_debug import run_checks
from .avl_debug import vertical_text as _vertical_text
from .avl_node import AVLError, AVLNode
from .avl_ops import find_node, insert_node, remove_key


class AVLTree:
    """An AVL tree with unique keys.

    When ``debug_checks`` is true, every insertion and removal is followed by
    a full consistency check of heights, balance and key order. This is slow
    but catches broken invariants at once.
    """

    def __init__(self, debug_checks: bool = True) -> None:
        self.root: Optional[AVLNode] = None
        self.debug_checks = debug_checks

    def find(self, key: Any) -> Any:
        """Return the data stored under ``key``; raise AVLError if it is absent."""
        node = find_node(self.root, key)
        if node is None:
            raise AVLError("error in find(): key not found")
        return node.data

    def insert(self, key: Any, data: Any) -> None:
        """Add a new entry; raise AVLError if the key already exists."""
        self.root = insert_node(self.root, key, data)
        self.run_debugging_checks()

    def remove(self, key: Any) -> Any:
        """Remove the entry under ``key`` and return its data.

        Raises AVLError if the key is absent.
        """
        self.root, data = remove_key(self.root, key)
        self.run_debugging_checks()
        return data

    def contains(self, key: Any) -> bool:
        """Return True if an entry with ``key`` exists."""
        return find_node(self.root, key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def is_empty(self) -> bool:
        """Return True if the tree holds no entries."""
        return self.root is None

    def clear(self) -> None:
        """Remove every entry."""
        self.root = None

    def run_debugging_checks(self) -> bool:
        """Check every invariant when checks are enabled; raise AVLError on failure."""
        if self.debug_checks:
            run_checks(self.root)
        return True

    def in_order_text(self) -> str:
        """Render the entries in key order as ``[key : data]`` items."""
        return _in_order_text(self.root)

    def vertical_text(self) -> str:
        """Render the tree as an indented outline with balance and height."""
        return _vertical_text(self.root)