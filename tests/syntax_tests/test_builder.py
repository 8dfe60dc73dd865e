# tests/syntax_tests/test_builder.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Test suite for tree construction from postfix sequences

"""Test suite for the tree builder.

Checks node layout per arity, parent links, cached renderings and sizes,
and rejection of unknown tokens and malformed postfix sequences.
"""

import pytest
from logic import Letter, NEGATION, CONJUNCTION, IMPLICATION, BOX, DIAMOND
from syntax import build, UnknownTokenError, MalformedPostfixError, ParseError
from tree import Formula, subformulas
from utils.logger import get_logger

a, b, c, d = (Letter(name) for name in "abcd")


class TestTreeBuilder:
    """Test cases for postfix to tree construction."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_leaf(self):
        """A single letter builds a one-node tree."""
        formula = build([a])

        assert isinstance(formula, Formula)
        assert formula.root.token == a
        assert formula.root.is_leaf
        assert formula.root.rendered == "a"
        assert formula.root.size == 1
        assert formula.logic is None

    def test_unary_operator_uses_right_child(self):
        """The operand of a unary operator is stored as the right child."""
        formula = build([a, BOX])
        root = formula.root

        assert root.token == BOX
        assert root.leftchild is None
        assert root.rightchild.token == a
        assert root.rightchild.parent is root
        assert root.rendered == "□a"
        assert root.arity == 1

    def test_binary_operator_operand_order(self):
        """The most recently pushed node becomes the right child."""
        formula = build([a, b, IMPLICATION])
        root = formula.root

        assert root.leftchild.token == a
        assert root.rightchild.token == b
        assert root.leftchild.parent is root
        assert root.rightchild.parent is root
        assert root.rendered == "(a→b)"
        assert root.arity == 2

    def test_example_tree(self):
        """Postfix c□d◊∧ builds (□c∧◊d)."""
        formula = build([c, BOX, d, DIAMOND, CONJUNCTION])
        root = formula.root

        assert root.rendered == "(□c∧◊d)"
        assert root.leftchild.rendered == "□c"
        assert root.rightchild.rendered == "◊d"
        assert root.size == 5

    def test_sizes_are_computed(self):
        """Every node carries a valid cached size after building."""
        formula = build([a, b, CONJUNCTION, NEGATION, c, IMPLICATION])

        for node in subformulas(formula, sorted=False):
            expected = (
                1
                + (node.leftchild.size if node.leftchild is not None else 0)
                + (node.rightchild.size if node.rightchild is not None else 0)
            )
            assert node.size == expected
        assert formula.root.size == 6

    def test_nodes_match_token_arity(self):
        """Children layout agrees with the arity of each wrapped token."""
        formula = build([a, NEGATION, b, c, CONJUNCTION, BOX, IMPLICATION])

        assert all(node.is_consistent() for node in subformulas(formula))
        assert formula.root.parent is None

    # Test cases: (postfix, description)
    UNKNOWN_TOKEN_CASES = [
        (["a"], "Raw string instead of a Letter"),
        ([a, "x", CONJUNCTION], "Unrecognized symbol"),
        ([a, 42], "Non-token value"),
    ]

    @pytest.mark.parametrize("postfix, description", UNKNOWN_TOKEN_CASES)
    def test_unknown_tokens(self, postfix, description):
        """Test that unrecognized tokens are rejected.

        Args:
            postfix: Postfix sequence with an unknown token
            description: Description of the failure
        """
        self.logger.debug(f"Testing unknown token case: {description}")

        with pytest.raises(UnknownTokenError):
            build(postfix)

    # Test cases: (postfix, description)
    MALFORMED_CASES = [
        ([], "Empty sequence"),
        ([CONJUNCTION], "Operator without operands"),
        ([a, CONJUNCTION], "Binary operator with one operand"),
        ([BOX], "Unary operator without operand"),
        ([a, b], "Two trees left"),
        ([a, b, c, CONJUNCTION], "Operand left over"),
    ]

    @pytest.mark.parametrize("postfix, description", MALFORMED_CASES)
    def test_malformed_postfix(self, postfix, description):
        """Test that sequences not reducing to one tree are rejected.

        Args:
            postfix: Malformed postfix sequence
            description: Description of the failure
        """
        with pytest.raises(MalformedPostfixError) as exc_info:
            build(postfix)

        assert isinstance(exc_info.value, UnknownTokenError)
        assert isinstance(exc_info.value, ParseError)
