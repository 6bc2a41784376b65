"""Demonstration of depth-first traversals on two small binary trees."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .value_tree import TreeNode, ValueBinaryTree, format_traversal


def build_algebra_tree() -> ValueBinaryTree:
    """Build the syntax tree of ``a - b / c + d * e``.

    The first seven symbols fill a complete tree level by level; the two
    operands of the division are then attached by hand.
    """
    tree = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    assert tree.root is not None and tree.root.left is not None
    slash = tree.root.left.right
    assert slash is not None
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")
    return tree


def _show(title: str, text: str, note: str | None = None) -> None:
    print(title)
    if note is not None:
        print(note)
    print(text)
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Print pre-, in- and post-order traversals of a complete tree and a syntax tree."""
    parser = argparse.ArgumentParser(
        prog="traversal-demo",
        description="Show pre-order, in-order and post-order tree traversals.",
    )
    parser.parse_args(argv)

    seven_tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    _show(
        "Example of pre-order traversal with a complete tree: ",
        format_traversal(seven_tree.pre_order()),
    )
    _show(
        "Example of in-order traversal with a complete tree: ",
        format_traversal(seven_tree.in_order()),
    )
    _show(
        "Example of post-order traversal with a complete tree: ",
        format_traversal(seven_tree.post_order()),
    )

    algebra_tree = build_algebra_tree()
    _show(
        "Pre-order traversal of algebraic syntax tree:",
        format_traversal(algebra_tree.pre_order()),
        " (This output won't make sense...)",
    )
    _show(
        "In-order traversal of algebraic syntax tree:",
        format_traversal(algebra_tree.in_order()),
        " (This one should make sense.)",
    )
    _show(
        "Post-order traversal of algebraic syntax tree:",
        format_traversal(algebra_tree.post_order()),
        " (This output won't make sense...)",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())