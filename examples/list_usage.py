#!/usr/bin/env python3
"""
List Usage Example - fpds

Walks through the ImmutableList operations on a small sample list:
- construction and structural access (tail, set_head, drop, init)
- the fold family and the operations derived from it
- strict mode on empty input

Run: python examples/list_usage.py
"""

from fpds.datastructures import immutable_list as lst
from fpds.errors import EmptyStructureError


def demonstrate_access() -> None:
    """Structural access, including the non-throwing empty cases."""
    print("\n🔎 STRUCTURAL ACCESS")
    print("=" * 40)

    a = lst.construct(1, 2, 3, 4, 5)
    print(f"list:               {a}")
    print(f"tail:               {lst.tail(a)}")
    print(f"set_head(4):        {lst.set_head(a, 4)}")
    print(f"drop(2):            {lst.drop(a, 2)}")
    print(f"drop(10):           {lst.drop(a, 10)}")
    print(f"drop_while(x < 4):  {lst.drop_while(a, lambda x: x < 4)}")
    print(f"init:               {lst.init(a)}")
    print(f"tail(EMPTY):        {lst.tail(lst.EMPTY)}")


def demonstrate_folds() -> None:
    """Folds and everything built on them."""
    print("\n🧮 FOLDS")
    print("=" * 40)

    a = lst.construct(1, 2, 3, 4, 5)
    print(f"sum:                {lst.sum_list(a)}")
    print(f"product:            {lst.product(lst.construct(1.0, 2.0, 3.0))}")
    print(f"length:             {lst.length(a)}")
    print(f"reverse:            {lst.reverse(a)}")
    print(f"fold_right(Node):   {lst.fold_right(a, lst.EMPTY, lst.Node)}")
    print(f"fold_right_via_fl:  {lst.fold_right_via_fold_left(a, 0, lambda x, y: x + y)}")
    print(f"append:             {lst.append(a, lst.construct(6, 7))}")
    print(f"flat_map(x, -x):    {lst.flat_map(a, lambda x: lst.construct(x, -x))}")
    print(f"zip_with(+):        {lst.zip_with(a, lst.construct(10, 20), lambda x, y: x + y)}")

    big = lst.from_iterable(range(100_000))
    print(f"fold_left over 100k: {lst.fold_left(big, 0, lambda acc, x: acc + x)}")


def demonstrate_strict_mode() -> None:
    """Strict mode turns the empty cases into errors."""
    print("\n🚫 STRICT MODE")
    print("=" * 40)

    try:
        lst.tail(lst.EMPTY, strict=True)
    except EmptyStructureError as e:
        print(f"tail(EMPTY, strict=True) raised: {e} (operation={e.operation})")


def main() -> None:
    print("🎯 fpds ImmutableList Usage")
    demonstrate_access()
    demonstrate_folds()
    demonstrate_strict_mode()


if __name__ == "__main__":
    main()
