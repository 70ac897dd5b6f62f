"""
Persistent singly linked list.

An ``ImmutableList`` is either the ``EMPTY`` singleton or a ``Node`` holding a
head value and the remaining list. Nodes are never mutated, so operations that
return a suffix of their input (``tail``, ``drop``, ``drop_while``) share it
rather than copying.

Stack safety:
- ``fold_left`` and everything built on it is a plain loop.
- ``fold_right`` walks the list into an explicit work stack and folds it
  back from the right, so it is stack-safe as well.
- Equality, hashing, ``repr`` and iteration are iterative.

Under the default policy no operation raises on empty or exhausted input;
``tail``, ``set_head``, ``init`` and ``drop`` degrade to ``EMPTY``. Passing
``strict=True`` makes all four raise ``EmptyStructureError`` instead.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, Union

from fpds.errors import EmptyStructureError, InvalidArgumentError
from fpds.logging import get_structure_logger

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class _ListOps:
    """Iteration, structural equality and repr shared by both variants."""

    def __iter__(self) -> Iterator[Any]:
        return _walk(self)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Empty, Node)):
            return NotImplemented
        left: Any = self
        right: Any = other
        while isinstance(left, Node) and isinstance(right, Node):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left is right

    def __hash__(self) -> int:
        return hash(("ImmutableList", tuple(self)))

    def __repr__(self) -> str:
        return f"List({', '.join(repr(item) for item in self)})"


class Empty(_ListOps):
    """The zero-element list. Always use the ``EMPTY`` singleton."""

    _instance = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance


@dataclass(frozen=True, eq=False, repr=False)
class Node(_ListOps, Generic[T]):
    """A head value followed by the rest of the list."""
    head: T
    tail: "ImmutableList[T]"


EMPTY = Empty()

ImmutableList = Union[Empty, Node[T]]


def _not_a_list(value: Any) -> TypeError:
    return TypeError(f"Expected Empty or Node, got {type(value).__name__}")


def _walk(xs: "ImmutableList[T]") -> Iterator[T]:
    """Yield the elements of ``xs`` front to back."""
    current: Any = xs
    while isinstance(current, Node):
        yield current.head
        current = current.tail
    if not isinstance(current, Empty):
        raise _not_a_list(current)


def _degrade(operation: str, strict: bool, **context: Any) -> Empty:
    """Apply the empty-input policy shared by tail, set_head, init and drop."""
    logger = get_structure_logger(__name__)

    if strict:
        logger.warning("Operation not applicable to empty list",
                       operation=operation, **context)
        raise EmptyStructureError(
            f"{operation} is not applicable to an empty list",
            operation=operation,
            structure="ImmutableList",
            context=context,
        )

    logger.debug("Empty input degraded to EMPTY", operation=operation, **context)
    return EMPTY


# Construction

def construct(*elements: T) -> "ImmutableList[T]":
    """Build a list holding ``elements`` in order; no arguments gives EMPTY."""
    return from_iterable(elements)


def from_iterable(elements: Iterable[T]) -> "ImmutableList[T]":
    """Build a list from any finite iterable, preserving order."""
    result: Any = EMPTY
    for element in reversed(list(elements)):
        result = Node(element, result)
    return result


def to_pylist(xs: "ImmutableList[T]") -> list[T]:
    """Copy the elements into a Python list."""
    return list(_walk(xs))


# Folds

def fold_right(xs: "ImmutableList[A]", z: B, f: Callable[[A, B], B]) -> B:
    """
    Right-associative fold: ``f(a1, f(a2, ... f(an, z)))``.

    The list is first pushed onto an explicit stack so the combination from
    the right needs no recursion.
    """
    stack = list(_walk(xs))
    acc = z
    while stack:
        acc = f(stack.pop(), acc)
    return acc


def fold_left(xs: "ImmutableList[A]", z: B, f: Callable[[B, A], B]) -> B:
    """Left-associative fold: ``f(... f(f(z, a1), a2) ..., an)``. Stack-safe."""
    acc = z
    for item in _walk(xs):
        acc = f(acc, item)
    return acc


def fold_right_via_fold_left(xs: "ImmutableList[A]", z: B, f: Callable[[A, B], B]) -> B:
    """``fold_right`` expressed as ``fold_left`` over the reversed list."""
    return fold_left(reverse(xs), z, lambda b, a: f(a, b))


# Arithmetic

def sum_list(ints: "ImmutableList[Any]") -> Any:
    """Sum of the elements, ``x1 + (x2 + ... + (xn + 0))``; 0 for EMPTY."""
    total = 0
    for item in reversed(to_pylist(ints)):
        total = item + total
    return total


def product(ds: "ImmutableList[float]") -> float:
    """
    Product of the elements; 1.0 for EMPTY.

    Scanning left to right, the first element equal to 0.0 ends the scan and
    the result is 0.0 without multiplying anything.
    """
    factors = []
    for item in _walk(ds):
        if item == 0.0:
            return 0.0
        factors.append(item)

    result = 1.0
    for item in reversed(factors):
        result = item * result
    return result


def sum_via_fold_right(ns: "ImmutableList[Any]") -> Any:
    return fold_right(ns, 0, lambda x, y: x + y)


def product_via_fold_right(ns: "ImmutableList[float]") -> float:
    return fold_right(ns, 1.0, lambda x, y: x * y)


def sum_via_fold_left(ns: "ImmutableList[Any]") -> Any:
    return fold_left(ns, 0, lambda x, y: x + y)


def product_via_fold_left(ns: "ImmutableList[Any]") -> Any:
    return fold_left(ns, 1, lambda x, y: x * y)


# Structural access

def tail(xs: "ImmutableList[T]", strict: bool = False) -> "ImmutableList[T]":
    """Everything after the first element. EMPTY for EMPTY unless strict."""
    if isinstance(xs, Node):
        return xs.tail
    if isinstance(xs, Empty):
        return _degrade("tail", strict)
    raise _not_a_list(xs)


def set_head(xs: "ImmutableList[T]", h: T, strict: bool = False) -> "ImmutableList[T]":
    """Replace the first element. EMPTY stays EMPTY unless strict."""
    if isinstance(xs, Node):
        return Node(h, xs.tail)
    if isinstance(xs, Empty):
        return _degrade("set_head", strict)
    raise _not_a_list(xs)


def drop(xs: "ImmutableList[T]", n: int, strict: bool = False) -> "ImmutableList[T]":
    """
    Remove the first ``n`` elements.

    Dropping more elements than the list holds yields EMPTY, or raises
    ``EmptyStructureError`` when strict. A negative ``n`` also yields EMPTY,
    or raises ``InvalidArgumentError`` when strict.
    """
    if n < 0:
        if strict:
            get_structure_logger(__name__).warning(
                "Negative drop count", operation="drop", requested=n)
            raise InvalidArgumentError(
                f"drop count must be non-negative, got {n}",
                argument="n",
                value=n,
            )
        if not isinstance(xs, (Empty, Node)):
            raise _not_a_list(xs)
        get_structure_logger(__name__).debug(
            "Negative drop count degraded to EMPTY", operation="drop", requested=n)
        return EMPTY

    current: Any = xs
    remaining = n
    while remaining > 0 and isinstance(current, Node):
        current = current.tail
        remaining -= 1

    if not isinstance(current, (Empty, Node)):
        raise _not_a_list(current)
    if remaining > 0:
        return _degrade("drop", strict, requested=n, dropped=n - remaining)
    return current


def drop_while(xs: "ImmutableList[T]", f: Callable[[T], bool]) -> "ImmutableList[T]":
    """Remove leading elements while ``f`` holds; returns the shared suffix."""
    current: Any = xs
    while isinstance(current, Node) and f(current.head):
        current = current.tail
    if not isinstance(current, (Empty, Node)):
        raise _not_a_list(current)
    return current


def init(xs: "ImmutableList[T]", strict: bool = False) -> "ImmutableList[T]":
    """All elements except the last. EMPTY and singletons give EMPTY."""
    if isinstance(xs, Empty):
        return _degrade("init", strict)
    if not isinstance(xs, Node):
        raise _not_a_list(xs)
    return from_iterable(to_pylist(xs)[:-1])


# Derived operations

def length(xs: "ImmutableList[Any]") -> int:
    return fold_right(xs, 0, lambda _, count: count + 1)


def length_via_fold_left(xs: "ImmutableList[Any]") -> int:
    return fold_left(xs, 0, lambda count, _: count + 1)


def reverse(xs: "ImmutableList[T]") -> "ImmutableList[T]":
    """New list with the elements in reverse order; the input is untouched."""
    return fold_left(xs, EMPTY, lambda acc, h: Node(h, acc))


def map_list(xs: "ImmutableList[A]", f: Callable[[A], B]) -> "ImmutableList[B]":
    """Apply ``f`` to every element, front to back."""
    return from_iterable(f(item) for item in _walk(xs))


def filter_list(xs: "ImmutableList[T]", pred: Callable[[T], bool]) -> "ImmutableList[T]":
    """Keep the elements satisfying ``pred``, in their original order."""
    return from_iterable(item for item in _walk(xs) if pred(item))


def append(a1: "ImmutableList[T]", a2: "ImmutableList[T]") -> "ImmutableList[T]":
    """
    Concatenate two lists.

    ``a1`` is rebuilt and ``a2`` becomes the shared tail of the result, so the
    cost is proportional to ``length(a1)`` only.
    """
    if not isinstance(a2, (Empty, Node)):
        raise _not_a_list(a2)
    return fold_right(a1, a2, lambda h, acc: Node(h, acc))


def flat_map(xs: "ImmutableList[A]", f: Callable[[A], "ImmutableList[B]"]) -> "ImmutableList[B]":
    """Map every element to a list and concatenate the results in order."""
    parts = [f(item) for item in _walk(xs)]

    result: Any = EMPTY
    for part in reversed(parts):
        result = append(part, result)
    return result


def zip_with(l1: "ImmutableList[A]", l2: "ImmutableList[B]",
             f: Callable[[A, B], C]) -> "ImmutableList[C]":
    """Combine elements pairwise; stops at the end of the shorter list."""
    return from_iterable(f(a, b) for a, b in zip(_walk(l1), _walk(l2)))


def add_one(xs: "ImmutableList[Any]") -> "ImmutableList[Any]":
    return map_list(xs, lambda x: x + 1)


def numbers_to_strings(xs: "ImmutableList[Any]") -> "ImmutableList[str]":
    return map_list(xs, str)
