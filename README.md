# treelab

A handful of classic data structures written to be read and checked:

- `treelab.cube.Cube`: a cube of a given edge length, with `volume()`,
  `surface_area()` and equality by length.
- `treelab.value_tree.ValueBinaryTree`: builds a complete binary tree level
  by level from a sequence and walks it in pre-order, in-order and
  post-order. Its `root` attribute is open, so nodes (`TreeNode`) can be
  attached by hand.
- `treelab.avl.AVLTree`: a self-balancing AVL tree that maps unique keys to
  data. It can verify its own heights, balance and key order after every
  change.

The building blocks of the AVL tree are usable on their own:
`treelab.avl_node` (nodes, heights, balance factors, rotations,
`ensure_balance`), `treelab.avl_ops` (`find_node`, `insert_node`,
`remove_key`, `remove_node`, `remove_iop`) and `treelab.avl_debug`
(`check_heights`, `check_balance`, `check_order`, `run_checks`,
`in_order_text`, `vertical_text`). Failures raise `treelab.avl_node.AVLError`,
a `RuntimeError`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Using the AVL tree

```python
from treelab.avl import AVLTree

tree = AVLTree()
for key in (37, 19, 51, 55, 4):
    tree.insert(key, str(key))

tree.find(51)        # "51"
51 in tree           # True
tree.remove(19)      # "19"
print(tree.in_order_text())
print(tree.vertical_text())
```

`find` and `remove` raise `AVLError` for a key that is not in the tree, and
`insert` raises it for a key that is already there. `contains` (and the `in`
operator) answers without raising. `is_empty()` and `clear()` do what their
names say. Pass `debug_checks=False` to skip the self-checks after each
insertion and removal.

## Traversals

The traversal methods are generators; called without an argument they start
at the root. `format_traversal` writes each value followed by a space.

```python
from treelab.value_tree import ValueBinaryTree, format_traversal

tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
list(tree.pre_order())                  # [1, 2, 4, 5, 3, 6, 7]
format_traversal(tree.in_order())       # "4 2 5 1 6 3 7 "
format_traversal(tree.post_order())     # "4 5 2 6 7 3 1 "
```

## Demonstrations

Three commands print worked examples:

```
treelab-array-demo
treelab-traversal-demo
treelab-avl-demo
```

`treelab-array-demo` indexes a tuple of numbers and searches a list of cubes;
`treelab-traversal-demo` prints the three traversals of a complete tree and
of the syntax tree of `a - b / c + d * e`; `treelab-avl-demo` inserts,
finds and removes entries, shows the error messages for missing keys, and
then runs a long series of insertions and removals with the checks enabled.

## What it does not do

The trees live in memory only; there is no saving or loading. The AVL tree
keeps one entry per key and has no update-in-place operation: remove a key
and insert it again to change its data.