#!/usr/bin/env python3
"""
Tree Usage Example - fpds

Shows the BinaryTree operations and how each is a specialization of fold.

Run: python examples/tree_usage.py
"""

from fpds.datastructures import binary_tree as tree
from fpds.datastructures.binary_tree import Branch, Leaf


def main() -> None:
    print("🌳 fpds BinaryTree Usage")
    print("=" * 40)

    t = Branch(Branch(Branch(Leaf(2), Branch(Leaf(4), Leaf(12))), Leaf(3)), Leaf(9))
    print(f"tree:        {t}")
    print(f"size:        {tree.size(t)}")
    print(f"depth:       {tree.depth(t)}")
    print(f"maximum:     {tree.maximum(t)}")
    print(f"leaves:      {tree.leaves(t)}")

    incremented = tree.map_tree(t, lambda v: v + 1)
    print(f"map(+1):     {tree.leaves(incremented)}")
    print(f"recursive:   {tree.map_tree_recursive(t, lambda v: v + 1) == incremented}")

    # A custom fold: sum of leaf values
    total = tree.fold(t, lambda v: v, lambda left, right: left + right)
    print(f"leaf sum:    {total}")


if __name__ == "__main__":
    main()
