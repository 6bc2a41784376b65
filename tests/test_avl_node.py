import pytest

from treelab.avl_node import (
    AVLError,
    AVLNode,
    balance_factor,
    ensure_balance,
    height,
    rotate_left,
    rotate_left_right,
    rotate_right,
    rotate_right_left,
    update_height,
)


def _node(key, left=None, right=None):
    node = AVLNode(key, str(key), left, right)
    update_height(node)
    return node


def _keys(node):
    if node is None:
        return []
    return _keys(node.left) + [node.key] + _keys(node.right)


def _assert_heights_consistent(node):
    if node is None:
        return
    _assert_heights_consistent(node.left)
    _assert_heights_consistent(node.right)
    assert node.height == 1 + max(height(node.left), height(node.right))


def _assert_balanced(node):
    if node is None:
        return
    _assert_balanced(node.left)
    _assert_balanced(node.right)
    assert -1 <= balance_factor(node) <= 1


def test_empty_subtree_height_and_balance():
    assert height(None) == -1
    assert balance_factor(None) == 0


def test_new_node_is_a_leaf_of_height_zero():
    node = AVLNode(5, "5")
    assert node.height == 0
    assert node.left is None and node.right is None
    assert balance_factor(node) == 0


def test_update_height_follows_children():
    child = _node(2)
    parent = AVLNode(1, "1", right=child)
    update_height(parent)
    assert parent.height == child.height + 1
    assert balance_factor(parent) == child.height + 1


def test_update_height_on_none_does_nothing():
    assert update_height(None) is None


def test_rotate_left_on_right_chain():
    root = _node(1, right=_node(2, right=_node(3)))
    new_root = rotate_left(root)
    assert new_root.key == 2
    assert new_root.left.key == 1
    assert new_root.right.key == 3
    assert _keys(new_root) == [1, 2, 3]
    _assert_heights_consistent(new_root)
    assert balance_factor(new_root) == 0


def test_rotate_right_on_left_chain():
    root = _node(3, left=_node(2, left=_node(1)))
    new_root = rotate_right(root)
    assert new_root.key == 2
    assert _keys(new_root) == [1, 2, 3]
    _assert_heights_consistent(new_root)
    assert balance_factor(new_root) == 0


def test_rotate_left_moves_inner_grandchild():
    inner = _node(15)
    root = _node(10, left=_node(5), right=_node(20, left=inner, right=_node(30, right=_node(40))))
    new_root = rotate_left(root)
    assert new_root.key == 20
    assert new_root.left.right is inner
    assert _keys(new_root) == [5, 10, 15, 20, 30, 40]
    _assert_heights_consistent(new_root)


def test_rotate_right_left_on_zigzag():
    root = _node(1, right=_node(3, left=_node(2)))
    new_root = rotate_right_left(root)
    assert new_root.key == 2
    assert _keys(new_root) == [1, 2, 3]
    _assert_heights_consistent(new_root)


def test_rotate_left_right_on_zigzag():
    root = _node(3, left=_node(1, right=_node(2)))
    new_root = rotate_left_right(root)
    assert new_root.key == 2
    assert _keys(new_root) == [1, 2, 3]
    _assert_heights_consistent(new_root)


@pytest.mark.parametrize("rotation", [rotate_left, rotate_right, rotate_right_left, rotate_left_right])
def test_rotations_reject_empty_subtree(rotation):
    with pytest.raises(AVLError):
        rotation(None)


def test_rotate_left_needs_right_child():
    with pytest.raises(AVLError, match="right child"):
        rotate_left(_node(1, left=_node(0)))


def test_rotate_right_needs_left_child():
    with pytest.raises(AVLError, match="left child"):
        rotate_right(_node(1, right=_node(2)))


def test_ensure_balance_of_none_is_none():
    assert ensure_balance(None) is None


def test_ensure_balance_leaves_balanced_node_in_place():
    root = AVLNode(2, "2", left=_node(1), right=_node(3))
    result = ensure_balance(root)
    assert result is root
    _assert_heights_consistent(result)


@pytest.mark.parametrize(
    "build",
    [
        lambda: _node(1, right=_node(2, right=_node(3))),
        lambda: _node(3, left=_node(2, left=_node(1))),
        lambda: _node(1, right=_node(3, left=_node(2))),
        lambda: _node(3, left=_node(1, right=_node(2))),
    ],
)
def test_ensure_balance_fixes_each_case(build):
    result = ensure_balance(build())
    assert result.key == 2
    assert _keys(result) == [1, 2, 3]
    _assert_balanced(result)
    _assert_heights_consistent(result)


def test_ensure_balance_with_zero_balance_child_after_removal():
    # A right-heavy node whose right child is itself evenly weighted.
    right = _node(20, left=_node(15), right=_node(25))
    root = _node(10, right=right)
    result = ensure_balance(root)
    assert result.key == 20
    assert _keys(result) == [10, 15, 20, 25]
    _assert_balanced(result)
    _assert_heights_consistent(result)


def test_ensure_balance_rejects_excessive_imbalance():
    root = _node(1, right=_node(2, right=_node(3, right=_node(4))))
    with pytest.raises(AVLError, match="initial balance"):
        ensure_balance(root)


def test_ensure_balance_rejects_inconsistent_child_balance():
    grandchild = AVLNode(3, "3", height=1)
    child = AVLNode(2, "2", right=grandchild, height=1)
    root = AVLNode(5, "5", left=child, height=2)
    with pytest.raises(AVLError, match="left balance"):
        ensure_balance(root)


def test_repeated_leaf_insertion_with_ensure_balance_stays_balanced():
    def insert(node, key):
        if node is None:
            return AVLNode(key, str(key))
        if key < node.key:
            node.left = insert(node.left, key)
        else:
            node.right = insert(node.right, key)
        return ensure_balance(node)

    root = None
    keys = list(range(1, 64))
    for key in keys:
        root = insert(root, key)
    assert _keys(root) == keys
    _assert_balanced(root)
    _assert_heights_consistent(root)