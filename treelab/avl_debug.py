"""Consistency checks and text renderings for AVL subtrees."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import pairwise
from typing import Optional

from .avl_node import AVLError, AVLNode, balance_factor, height


def check_heights(node: Optional[AVLNode]) -> bool:
    """Return True if every recorded height is one more than its tallest child's."""
    if node is None:
        return True
    if not check_heights(node.left) or not check_heights(node.right):
        return False
    here = height(node)
    left = height(node.left)
    right = height(node.right)
    if here - max(left, right) != 1:
        print(
            f"check_heights internals:\nhere: {here}\nleft: {left}\nright: {right}",
            file=sys.stderr,
        )
        return False
    return True


def check_balance(node: Optional[AVLNode]) -> bool:
    """Return True if every balance factor lies between -1 and 1."""
    if node is None:
        return True
    if not check_balance(node.left) or not check_balance(node.right):
        return False
    return -1 <= height(node.right) - height(node.left) <= 1


def _walk_keys(node: Optional[AVLNode]) -> Iterator[object]:
    stack: list[AVLNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def check_order(node: Optional[AVLNode]) -> bool:
    """Return True if an in-order walk gives strictly increasing keys."""
    for first, second in pairwise(_walk_keys(node)):
        if first >= second:
            print(
                "ERROR: These keys should be in strictly increasing order:\n"
                f"{first} followed by {second}",
                file=sys.stderr,
            )
            return False
    return True


def run_checks(node: Optional[AVLNode]) -> bool:
    """Run every check on the subtree, raising AVLError on the first failure."""
    if not check_heights(node):
        raise AVLError("ERROR: height check failed")
    if not check_balance(node):
        raise AVLError("ERROR: balance check failed")
    if not check_order(node):
        raise AVLError("ERROR: order check failed")
    return True


def in_order_text(node: Optional[AVLNode]) -> str:
    """Render the subtree in order; every empty child position shows as a space."""
    if node is None:
        return " "
    return (
        in_order_text(node.left)
        + f"[{node.key} : {node.data}]"
        + in_order_text(node.right)
    )


def vertical_text(node: Optional[AVLNode]) -> str:
    """Render the subtree as an indented outline, one node per line.

    Children follow their parent, left first. A node with exactly one child
    shows the missing one as ``[]``.
    """
    lines: list[str] = []
    stack: list[tuple[Optional[AVLNode], int]] = [(node, 0)]
    while stack:
        current, margin = stack.pop()
        prefix = " " * margin + ("|- " if margin > 0 else ". ")
        if current is None:
            lines.append(prefix + "[]\n")
            continue
        if current.left is not None or current.right is not None:
            stack.append((current.right, margin + 1))
            stack.append((current.left, margin + 1))
        lines.append(
            f'{prefix}[{current.key}: "{current.data}"] '
            f"Bal: {balance_factor(current)} Ht: {height(current)}\n"
        )
    return "".join(lines)