"""Search, insertion and removal on AVL subtrees.

Each function that can change which node roots a subtree returns the new
root. The caller stores it back in place of the old one. Removals also
return the data of the removed entry.
"""

from __future__ import annotations

from typing import Any, Optional

from .avl_node import AVLError, AVLNode, ensure_balance


def find_node(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    """Return the node holding ``key`` in the subtree, or None if it is absent."""
    while node is not None:
        if key == node.key:
            return node
        node = node.left if key < node.key else node.right
    return None


def insert_node(node: Optional[AVLNode], key: Any, data: Any) -> AVLNode:
    """Insert a new entry as a leaf, rebalance on the way up and return the root.

    Raises AVLError if the key is already present.
    """
    if node is None:
        return AVLNode(key, data)
    if key == node.key:
        raise AVLError("error in insert(): key already exists")
    if key < node.key:
        node.left = insert_node(node.left, key, data)
    else:
        node.right = insert_node(node.right, key, data)
    balanced = ensure_balance(node)
    assert balanced is not None
    return balanced


def remove_key(node: Optional[AVLNode], key: Any) -> tuple[Optional[AVLNode], Any]:
    """Remove the entry with ``key`` from the subtree.

    Returns the new subtree root and the removed data. Raises AVLError if the
    key is not present.
    """
    if node is None:
        raise AVLError("error in remove(): key not found")
    if key == node.key:
        return remove_node(node)
    if key < node.key:
        node.left, data = remove_key(node.left, key)
    else:
        node.right, data = remove_key(node.right, key)
    return ensure_balance(node), data


def remove_node(node: Optional[AVLNode]) -> tuple[Optional[AVLNode], Any]:
    """Remove the root of a subtree; return what replaces it and the removed data."""
    if node is None:
        raise AVLError("error: remove_node() used on an empty subtree")
    if node.left is None:
        return node.right, node.data
    if node.right is None:
        return node.left, node.data
    return remove_iop(node)


def remove_iop(node: Optional[AVLNode]) -> tuple[AVLNode, Any]:
    """Replace the subtree root by its in-order predecessor and drop the old root.

    The path down to the predecessor is rebalanced as it unwinds. Returns the
    new subtree root and the data of the removed root.
    """
    if node is None:
        raise AVLError("error: remove_iop() called on an empty subtree")
    if node.left is None:
        raise AVLError("error: remove_iop() needs a left subtree")
    remaining, predecessor = _detach_max(node.left)
    predecessor.left = remaining
    predecessor.right = node.right
    predecessor.height = node.height
    balanced = ensure_balance(predecessor)
    assert balanced is not None
    return balanced, node.data


def _detach_max(node: AVLNode) -> tuple[Optional[AVLNode], AVLNode]:
    """Unlink the rightmost node of a subtree; return the rest and that node."""
    if node.right is None:
        return node.left, node
    node.right, largest = _detach_max(node.right)
    return ensure_balance(node), largest