"""
Persistent binary tree with values stored only at the leaves.

``fold`` is the single traversal primitive; ``size``, ``maximum``, ``depth``,
``map_tree`` and ``leaves`` are specializations of it. ``fold`` runs on an
explicit post-order work stack, so deep trees do not hit the recursion limit.
``map_tree_recursive`` is the direct structural recursion and is bounded by
the interpreter's recursion limit.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from fpds.errors import InvalidArgumentError

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Leaf(Generic[T]):
    """Terminal node holding exactly one value."""
    value: T


@dataclass(frozen=True)
class Branch(Generic[T]):
    """Internal node with two subtrees and no value of its own."""
    left: "BinaryTree[T]"
    right: "BinaryTree[T]"

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, (Leaf, Branch)):
                raise InvalidArgumentError(
                    f"Branch.{side} must be a Leaf or Branch, got {type(child).__name__}",
                    argument=side,
                    value=child,
                )


BinaryTree = Union[Leaf[T], Branch[T]]


def fold(t: "BinaryTree[A]", f: Callable[[A], B], g: Callable[[B, B], B]) -> B:
    """
    Collapse a tree: ``f`` maps each leaf value, ``g`` combines the results
    of the left and right subtrees at each branch.

    Leaves are visited left to right.
    """
    results: list[B] = []
    stack: list[tuple[Any, bool]] = [(t, False)]

    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Leaf):
            results.append(f(node.value))
        elif isinstance(node, Branch):
            if expanded:
                right = results.pop()
                left = results.pop()
                results.append(g(left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"Expected Leaf or Branch, got {type(node).__name__}")

    return results.pop()


def size(t: "BinaryTree[Any]") -> int:
    """Number of nodes, branches included."""
    return fold(t, lambda _: 1, lambda left, right: 1 + left + right)


def maximum(t: "BinaryTree[Any]") -> Any:
    return fold(t, lambda v: v, max)


def depth(t: "BinaryTree[Any]") -> int:
    """Length of the longest root-to-leaf path counted in nodes; a leaf is 1."""
    return fold(t, lambda _: 1, lambda left, right: 1 + max(left, right))


def map_tree(t: "BinaryTree[A]", f: Callable[[A], B]) -> "BinaryTree[B]":
    """Same shape, every leaf value replaced by ``f(value)``."""
    return fold(t, lambda v: Leaf(f(v)), Branch)


def leaves(t: "BinaryTree[T]") -> tuple[T, ...]:
    """Leaf values in left-to-right order."""
    return fold(t, lambda v: (v,), lambda left, right: left + right)


def map_tree_recursive(t: "BinaryTree[A]", f: Callable[[A], B]) -> "BinaryTree[B]":
    if isinstance(t, Leaf):
        return Leaf(f(t.value))
    if isinstance(t, Branch):
        return Branch(map_tree_recursive(t.left, f), map_tree_recursive(t.right, f))
    raise TypeError(f"Expected Leaf or Branch, got {type(t).__name__}")
