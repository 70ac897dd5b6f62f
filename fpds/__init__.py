"""
fpds - Functional Persistent Data Structures

Introductory functional-programming exercises: an immutable singly linked
list and a leaf-valued binary tree, each with a library of structural
recursion operations (folds, map, filter, flat_map, zip_with).
"""

__version__ = "0.1.0"
__author__ = "fpds Team"
