# tests/tree_tests/test_tree_queries.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Test suite for size, height, modal depth, traversal and rendering

"""Test suite for formula tree queries.

Verifies the structural measures, the in-order subformula listing, the
rendering, and the caching contract: ``size`` is only refreshed by
``size_recompute`` and ``rendered`` only by ``copy_rendered``.
"""

import pytest
from syntax import parse
from tree import (
    Node,
    size_recompute,
    size,
    height,
    modal_depth,
    subformulas,
    render,
    same_structure,
    fhash,
)
from utils.logger import get_logger


class TestStructuralMeasures:
    """Test cases for size, height and modal depth."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (formula, size, height, modal_depth)
    MEASURE_CASES = [
        ("a", 1, 0, 0),
        ("¬a", 2, 1, 0),
        ("□a", 2, 1, 1),
        ("a∧b", 3, 1, 0),
        ("□c∧◊d", 5, 2, 1),
        ("□◊□a", 4, 3, 3),
        ("□(a∧◊b)", 5, 3, 2),
        ("□a∧◊◊b", 6, 3, 2),
        ("¬¬¬¬a", 5, 4, 0),
        ("(a∨b)∧(c∨d)", 7, 2, 0),
        ("[L](a→⟨L⟩¬b)", 6, 4, 2),
    ]

    @pytest.mark.parametrize("formula, exp_size, exp_height, exp_modal", MEASURE_CASES)
    def test_measures(self, formula, exp_size, exp_height, exp_modal, abcd_logic):
        """Test size, height and modal depth of parsed formulas.

        Args:
            formula: Infix formula over the letters a-d
            exp_size: Expected number of nodes
            exp_height: Expected height
            exp_modal: Expected modal depth
        """
        f = parse(formula, logic=abcd_logic)
        self.logger.debug(f"Measures of {formula}: {size(f)}, {height(f)}, {modal_depth(f)}")

        assert size(f) == exp_size
        assert size_recompute(f) == exp_size
        assert height(f) == exp_height
        assert modal_depth(f) == exp_modal

    def test_modal_depth_is_not_a_count(self, abcd_logic):
        """Modal operators on different branches do not add up."""
        f = parse("□a∧□b∧□c", logic=abcd_logic)

        assert modal_depth(f) == 1

    def test_size_recurrence_holds_everywhere(self, abcd_logic):
        """size(node) == 1 + size(left) + size(right) for every node."""
        f = parse("¬(a→□b)∨(◊c∧(d∨¬a))", logic=abcd_logic)
        size_recompute(f)

        for node in subformulas(f):
            left = node.leftchild.size if node.leftchild is not None else 0
            right = node.rightchild.size if node.rightchild is not None else 0
            assert node.size == 1 + left + right
            assert height(node) <= node.size - 1

    def test_unary_chain_height_equals_size_minus_one(self, abcd_logic):
        """A purely unary chain is as tall as it can be."""
        f = parse("¬□◊[L]⟨L⟩¬a", logic=abcd_logic)

        assert height(f) == size(f) - 1

    def test_queries_accept_nodes(self, abcd_logic):
        """Queries work on any subtree root, not only on formulas."""
        f = parse("a∧□◊b", logic=abcd_logic)
        right = f.root.rightchild

        assert size(right) == 3
        assert height(right) == 2
        assert modal_depth(right) == 2
        assert render(right) == "□◊b"


class TestSizeCache:
    """Test cases for the lazily recomputed size cache."""

    def test_size_is_stale_until_recomputed(self, abcd_logic):
        """Grafting a subtree does not update cached sizes by itself."""
        f = parse("a∧b", logic=abcd_logic)
        graft = parse("□c", logic=abcd_logic).root

        f.root.leftchild = graft
        graft.parent = f.root

        assert size(f) == 3
        assert render(f) == "(□c∧b)"

        assert size_recompute(f) == 4
        assert size(f) == 4
        assert f.root.leftchild.size == 2


class TestTraversal:
    """Test cases for subformula listing and rendering."""

    def test_subformulas_in_order(self, abcd_logic):
        """Unsorted listing follows the in-order visit."""
        f = parse("(a∧b)∨c", logic=abcd_logic)

        nodes = subformulas(f, sorted=False)

        assert [render(n) for n in nodes] == ["a", "(a∧b)", "b", "((a∧b)∨c)", "c"]

    def test_subformulas_sorted_by_size(self, abcd_logic):
        """Sorted listing is stable with respect to the in-order visit."""
        f = parse("(a∧b)∨c", logic=abcd_logic)

        nodes = subformulas(f)

        assert [render(n) for n in nodes] == ["a", "b", "c", "(a∧b)", "((a∧b)∨c)"]
        assert [n.size for n in nodes] == [1, 1, 1, 3, 5]

    def test_subformulas_are_nodes_of_the_tree(self, abcd_logic):
        """The listing holds the tree's own nodes, not copies."""
        f = parse("□a∧b", logic=abcd_logic)

        nodes = subformulas(f)

        assert all(isinstance(n, Node) for n in nodes)
        assert any(n is f.root for n in nodes)
        assert len(nodes) == size(f)

    def test_str_matches_render(self, abcd_logic):
        """str() of formulas and nodes is the in-order rendering."""
        f = parse("¬(a∨b)→c", logic=abcd_logic)

        assert str(f) == render(f) == "(¬(a∨b)→c)"
        assert str(f.root.leftchild) == "¬(a∨b)"


class TestNodeLinks:
    """Test cases for parent links, cached renderings and hashing."""

    def test_parent_links(self, abcd_logic):
        """Children point back at their parent; the root has none."""
        f = parse("a∧¬b", logic=abcd_logic)
        root = f.root

        assert root.parent is None
        assert root.leftchild.parent is root
        assert root.rightchild.parent is root
        assert root.rightchild.rightchild.parent is root.rightchild

    def test_copy_rendered(self, abcd_logic):
        """copy_rendered is the only way the cached text changes."""
        f = parse("a∧b", logic=abcd_logic)
        g = parse("□c", logic=abcd_logic)

        f.root.copy_rendered(g.root)

        assert f.root.rendered == "□c"
        assert render(f) == "(a∧b)"

    def test_fhash_uses_cached_rendering(self, abcd_logic):
        """Formulas with the same rendering hash alike."""
        f = parse("a ∧ b", logic=abcd_logic)
        g = parse("(a∧b)", logic=abcd_logic)

        assert fhash(f) == fhash(g) == hash("(a∧b)")

    def test_same_structure(self, abcd_logic):
        """Structural identity compares tokens and shape."""
        f = parse("a∧(b∨c)", logic=abcd_logic)

        assert same_structure(f, parse("(a∧(b∨c))", logic=abcd_logic))
        assert not same_structure(f, parse("(a∧b)∨c", logic=abcd_logic))
        assert not same_structure(f, parse("a∧(b∧c)", logic=abcd_logic))
        assert not same_structure(parse("□a", logic=abcd_logic), parse("◊a", logic=abcd_logic))
