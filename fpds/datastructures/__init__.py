"""
Persistent data structures: an immutable singly linked list and a
leaf-valued binary tree, with their structural recursion operations.

The two modules share operation names (``fold``, ``map``), so import them as
modules, e.g. ``from fpds.datastructures import immutable_list as lst``.
"""

from .binary_tree import BinaryTree, Branch, Leaf
from .immutable_list import EMPTY, Empty, ImmutableList, Node, construct, from_iterable

__all__ = [
    "BinaryTree",
    "Branch",
    "EMPTY",
    "Empty",
    "ImmutableList",
    "Leaf",
    "Node",
    "construct",
    "from_iterable",
]
