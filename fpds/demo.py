"""
Demonstration entry point.

Builds the sample list and tree, runs the core operations over them and
prints one line per result.

Run: python -m fpds [--config-dir DIR]
"""

import sys
from pathlib import Path
from typing import Optional

from fpds.config import ConfigLoader, DefaultConfig
from fpds.datastructures import binary_tree as tree
from fpds.datastructures import immutable_list as lst
from fpds.errors import ConfigurationError, StructureError
from fpds.logging import configure_logging, get_logger

SAMPLE_TREE = tree.Branch(
    tree.Branch(
        tree.Branch(tree.Leaf(2), tree.Branch(tree.Leaf(4), tree.Leaf(12))),
        tree.Leaf(3),
    ),
    tree.Leaf(9),
)


def list_demo_lines(config: DefaultConfig) -> list[str]:
    """Results of the list operations over the configured sample list."""
    demo = config.demo
    strict = config.structures.strict_empty
    a = lst.from_iterable(demo.sample_list)
    below = demo.drop_while_below

    return [
        f"list: {a}",
        f"tail: {lst.tail(a, strict=strict)}",
        f"set_head({demo.head_value}): {lst.set_head(a, demo.head_value, strict=strict)}",
        f"drop({demo.drop_count}): {lst.drop(a, demo.drop_count, strict=strict)}",
        f"drop_while(x < {below}): {lst.drop_while(a, lambda x: x < below)}",
        f"init: {lst.init(a, strict=strict)}",
        f"sum: {lst.sum_list(a)}",
        f"sum_via_fold_left: {lst.sum_via_fold_left(a)}",
        f"product: {lst.product(a)}",
        f"length: {lst.length(a)}",
        f"length_via_fold_left: {lst.length_via_fold_left(a)}",
        f"reverse: {lst.reverse(a)}",
        f"fold_right_via_fold_left(+): {lst.fold_right_via_fold_left(a, 0, lambda x, y: x + y)}",
        f"add_one: {lst.add_one(a)}",
        f"numbers_to_strings: {lst.numbers_to_strings(a)}",
        f"filter(even): {lst.filter_list(a, lambda x: x % 2 == 0)}",
        f"flat_map(x, x): {lst.flat_map(a, lambda x: lst.construct(x, x))}",
        f"zip_with(+): {lst.zip_with(a, lst.from_iterable(demo.zip_with_list), lambda x, y: x + y)}",
    ]


def tree_demo_lines(t: "tree.BinaryTree[int]" = SAMPLE_TREE) -> list[str]:
    """Results of the tree operations over ``t``."""
    return [
        f"tree: {t}",
        f"size: {tree.size(t)}",
        f"depth: {tree.depth(t)}",
        f"maximum: {tree.maximum(t)}",
        f"leaves: {list(tree.leaves(t))}",
        f"map(+1) leaves: {list(tree.leaves(tree.map_tree(t, lambda v: v + 1)))}",
    ]


def main(argv: Optional[list[str]] = None) -> int:
    """Load configuration, configure logging and print the demo results."""
    args = sys.argv[1:] if argv is None else argv
    config_dir = None
    if len(args) == 2 and args[0] == "--config-dir":
        config_dir = Path(args[1])
    elif args:
        print("usage: python -m fpds [--config-dir DIR]", file=sys.stderr)
        return 2

    try:
        config = ConfigLoader.create(config_dir).load()
    except ConfigurationError as e:
        configure_logging()
        get_logger(__name__).error(
            "Invalid configuration",
            error=str(e),
            errors=[f"{err.field}: {err.message}" for err in e.errors],
            context=e.context,
        )
        return 1

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )
    logger = get_logger(__name__)

    logger.info("Running list demo", sample_list=list(config.demo.sample_list))
    try:
        for line in list_demo_lines(config):
            print(line)
    except StructureError as e:
        logger.error("List demo failed", error=str(e), context=e.context)
        return 1

    logger.info("Running tree demo")
    for line in tree_demo_lines():
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
