"""Tests for the leaf-valued binary tree"""

import pytest

from fpds.datastructures import binary_tree as tree
from fpds.datastructures.binary_tree import Branch, Leaf
from fpds.errors import InvalidArgumentError


def build_left_spine(n):
    """A degenerate tree of n branches, each with a leaf on the right."""
    t = Leaf(0)
    for i in range(1, n + 1):
        t = Branch(t, Leaf(i))
    return t


TREES = [
    Leaf(1),
    Branch(Leaf(1), Leaf(2)),
    Branch(Leaf(5), Branch(Leaf(-3), Leaf(7))),
    Branch(Branch(Branch(Leaf(2), Branch(Leaf(4), Leaf(12))), Leaf(3)), Leaf(9)),
    build_left_spine(10),
]


class TestConstruction:
    """Test tree construction invariants"""

    def test_branch_requires_two_subtrees(self):
        """Test that a Branch cannot be built with a missing child"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Branch(Leaf(1), None)
        assert exc_info.value.argument == "right"

    def test_trees_are_immutable(self, sample_tree):
        """Test that tree fields cannot be reassigned"""
        with pytest.raises(AttributeError):
            sample_tree.left = Leaf(0)

    def test_structural_equality(self):
        """Test that equal shapes with equal leaves compare equal"""
        assert Branch(Leaf(1), Leaf(2)) == Branch(Leaf(1), Leaf(2))
        assert Branch(Leaf(1), Leaf(2)) != Branch(Leaf(2), Leaf(1))


class TestSampleTree:
    """Test the operations on the five-level sample tree"""

    def test_size(self, sample_tree):
        """Test size counts leaves and branches"""
        assert tree.size(sample_tree) == 9

    def test_depth(self, sample_tree):
        """Test depth counts nodes on the longest path"""
        # root -> branch -> branch -> Branch(Leaf(4), Leaf(12)) -> leaf
        assert tree.depth(sample_tree) == 5

    def test_depth_of_subtrees(self, sample_tree):
        """Test depth of each subtree along the deepest path"""
        assert tree.depth(sample_tree.left) == 4
        assert tree.depth(sample_tree.left.left) == 3
        assert tree.depth(sample_tree.left.left.right) == 2
        assert tree.depth(sample_tree.right) == 1

    def test_maximum(self, sample_tree):
        """Test maximum leaf value"""
        assert tree.maximum(sample_tree) == 12

    def test_leaves_left_to_right(self, sample_tree):
        """Test leaf order"""
        assert tree.leaves(sample_tree) == (2, 4, 12, 3, 9)

    def test_map(self, sample_tree):
        """Test map(+1) increments every leaf in place"""
        mapped = tree.map_tree(sample_tree, lambda v: v + 1)
        assert tree.leaves(mapped) == (3, 5, 13, 4, 10)
        assert mapped == Branch(
            Branch(Branch(Leaf(3), Branch(Leaf(5), Leaf(13))), Leaf(4)), Leaf(10)
        )

    def test_map_leaves_input_untouched(self, sample_tree):
        """Test that mapping builds a new tree"""
        tree.map_tree(sample_tree, lambda v: v * 100)
        assert tree.leaves(sample_tree) == (2, 4, 12, 3, 9)


class TestSingleLeaf:
    """Test the operations on a lone leaf"""

    def test_leaf_operations(self):
        """Test size, depth and maximum of a leaf"""
        leaf = Leaf(42)
        assert tree.size(leaf) == 1
        assert tree.depth(leaf) == 1
        assert tree.maximum(leaf) == 42
        assert tree.map_tree(leaf, str) == Leaf("42")


class TestFold:
    """Test fold and the operations specialized from it"""

    @pytest.mark.parametrize("t", TREES)
    def test_size_is_a_fold(self, t):
        """Test size(t) == fold(t, 1, 1 + l + r)"""
        assert tree.size(t) == tree.fold(t, lambda _: 1, lambda left, right: 1 + left + right)

    @pytest.mark.parametrize("t", TREES)
    def test_depth_is_a_fold(self, t):
        """Test depth(t) == fold(t, 1, 1 + max(l, r))"""
        assert tree.depth(t) == tree.fold(t, lambda _: 1, lambda left, right: 1 + max(left, right))

    @pytest.mark.parametrize("t", TREES)
    def test_map_preserves_shape(self, t):
        """Test map keeps shape and size and applies f to every leaf"""
        mapped = tree.map_tree(t, lambda v: v * 2)
        assert tree.size(mapped) == tree.size(t)
        assert tree.depth(mapped) == tree.depth(t)
        assert tree.leaves(mapped) == tuple(v * 2 for v in tree.leaves(t))

    @pytest.mark.parametrize("t", TREES)
    def test_map_matches_recursive_map(self, t):
        """Test the fold-based map against the direct recursion"""
        assert tree.map_tree(t, str) == tree.map_tree_recursive(t, str)

    def test_fold_visits_leaves_left_to_right(self, sample_tree):
        """Test leaf function call order"""
        seen = []
        tree.fold(sample_tree, seen.append, lambda left, right: None)
        assert seen == [2, 4, 12, 3, 9]

    def test_fold_with_non_commutative_branch_function(self):
        """Test that branch results keep left/right positions"""
        t = Branch(Branch(Leaf("a"), Leaf("b")), Leaf("c"))
        result = tree.fold(t, lambda v: v, lambda left, right: f"({left} {right})")
        assert result == "((a b) c)"

    def test_fold_is_stack_safe(self):
        """Test fold on a tree deeper than the recursion limit"""
        deep = build_left_spine(50_000)
        assert tree.depth(deep) == 50_001
        assert tree.size(deep) == 100_001
        assert tree.maximum(deep) == 50_000

    def test_fold_rejects_non_tree(self):
        """Test that values outside the two variants are rejected"""
        with pytest.raises(TypeError):
            tree.size([1, 2])
