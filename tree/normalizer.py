# tree/normalizer.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Canonical child ordering for commutative operators

"""Canonical reordering of commutative operator operands.

``normalize`` walks the tree in pre-order and, at every node wrapping a
commutative operator, swaps the two children when the left token does not
precede the right one. Tokens are compared by precedence, letters by their
code point, so ``(b∧a)∨(d∧c)`` becomes ``(a∧b)∨(c∧d)``.

Only immediate siblings are reordered. Nested applications of the same
operator are neither flattened nor re-associated, so ``(b∧a)∨(d∧c)`` and
``(d∧c)∨(a∧b)`` still normalize to different trees.
"""

from __future__ import annotations
from typing import Union

from logic import Token, precedence, is_commutative
from .fnode import Formula, Node
from .queries import render
from utils.logger import get_logger


def is_less(a: Token, b: Token) -> bool:
    """Comparison used to order the operands of commutative operators."""
    return precedence(a) <= precedence(b)


def normalize(x: Union[Formula, Node]) -> Union[Formula, Node]:
    """Reorder commutative operands in place throughout the tree.

    Idempotent: normalizing an already normalized tree changes nothing.
    Cached ``rendered`` strings are left as they were built; use
    ``tree.queries.render`` for the current text.

    Args:
        x: Formula or subtree root to normalize

    Returns:
        ``x`` itself, for chaining
    """
    logger = get_logger()
    root = x.root if isinstance(x, Formula) else x

    before = render(root)
    _normalize(root)
    logger.normalized(before, render(root))

    return x


def _normalize(v: Node):
    if v.is_leaf:
        return

    if is_commutative(v.token):
        left_child, right_child = v.leftchild, v.rightchild
        if not is_less(left_child.token, right_child.token):
            v.leftchild, v.rightchild = right_child, left_child

    if v.leftchild is not None:
        _normalize(v.leftchild)
    if v.rightchild is not None:
        _normalize(v.rightchild)
