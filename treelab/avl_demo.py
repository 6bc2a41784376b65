"""Demonstration of an AVL tree: insertion, lookup, removal and stress runs."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .avl import AVLTree
from .avl_node import AVLError

V_SIZE = 1000


def _show_error(error: AVLError) -> None:
    print("(OK) Caught example exception with the following message:")
    print(f'"{error}"')


def _extended_tests(tree: AVLTree) -> None:
    print("\n --- Beginning extended tests ---")
    print("  (Many items will be inserted and removed silently...)")

    tree.clear()

    for i in range(10, 901):
        tree.insert(i, str(i))
    print("\nInsert test OK")

    for i in range(10, 901, 7):
        tree.remove(i)
    for i in range(900, 9, -3):
        if i in tree:
            tree.remove(i)
    print("\nRemove test OK")

    for i in range(10, 900, 2):
        for key in (i, i + 1, 900 - i + 10):
            if key not in tree:
                tree.insert(key, str(key))
    for i in range(10, 901, 7):
        for key in (i, 900 - i + 10):
            if key in tree:
                tree.remove(key)

    print("\n --- End of extended tests ---")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the AVL tree walkthrough and the extended self-checking tests."""
    parser = argparse.ArgumentParser(
        prog="avl-demo",
        description="Exercise an AVL tree with consistency checks after every change.",
    )
    parser.parse_args(argv)

    print("\nCreating AVL tree now...")
    tree = AVLTree()

    empty_at_beginning = tree.is_empty()
    print(f"AVL tree empty at the beginning? {str(empty_at_beginning).lower()}")
    if not empty_at_beginning:
        raise AVLError("Error: empty() should have been true at the beginning")

    print("Inserting items...")
    for key in (37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7):
        tree.insert(key, str(key))

    empty_after_insertions = tree.is_empty()
    print(f"AVL tree empty after insertions? {str(empty_after_insertions).lower()}")
    if empty_after_insertions:
        raise AVLError("Error: empty() should have been false after insertions")

    print("\nCurrent tree contents in order:")
    print(tree.in_order_text())

    print("\nUsing find to show that 51 has been inserted:")
    print(f"t.find(51): {tree.find(51)}")

    print("\nTrying to remove some items:")
    for key in (11, 51, 19, 6):
        print(f"t.remove({key}): {tree.remove(key)}")

    print("\nCurrent tree contents in order:")
    print(tree.in_order_text())

    print("\nVertical printout of the tree:")
    print(tree.vertical_text(), end="")

    print()
    print("Attempting to find a non-existent item, 51: ")
    try:
        print(f"t.find(51): {tree.find(51)}")
    except AVLError as error:
        _show_error(error)

    print()
    print("Attempting to remove a non-existent item, 99: ")
    try:
        print(f"t.remove(99): {tree.remove(99)}")
    except AVLError as error:
        _show_error(error)

    _extended_tests(tree)

    print("\nAVL tree will go out of scope and be destroyed now.")
    print("(All nodes will be removed...)")
    tree.clear()

    print("\nSUCCESS - The program is exiting normally.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())