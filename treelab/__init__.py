"""Cube value type, complete binary trees with traversals, and an AVL tree."""

__version__ = "0.1.0"