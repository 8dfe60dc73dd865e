# logic/__init__.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Operator catalog and logic definitions

"""Operator catalog consumed by the parsing, tree and generation layers.

This package provides:
  • Letter, Operator: the two kinds of token a formula tree wraps
  • precedence, arity, is_modal, is_commutative: token property queries
  • Logic: an alphabet/operator-set pairing with exact-symbol lookup
  • PROPOSITIONAL_LOGIC, MODAL_LOGIC, DEFAULT_LOGIC: ready-made logics
"""

from .operators import (
    Letter,
    Operator,
    Token,
    OPENING_BRACKETS,
    CLOSING_BRACKETS,
    is_proposition,
    is_operator,
    precedence,
    arity,
    is_modal,
    is_commutative,
    NEGATION,
    CONJUNCTION,
    DISJUNCTION,
    IMPLICATION,
    BOX,
    DIAMOND,
    EX_BOX,
    EX_DIAMOND,
    PROPOSITIONAL_OPERATORS,
    MODAL_OPERATORS,
)
from .logics import (
    Logic,
    letters,
    alphabet,
    operators,
    PROPOSITIONAL_LOGIC,
    MODAL_LOGIC,
    DEFAULT_LOGIC,
)

__all__ = [
    "Letter",
    "Operator",
    "Token",
    "OPENING_BRACKETS",
    "CLOSING_BRACKETS",
    "is_proposition",
    "is_operator",
    "precedence",
    "arity",
    "is_modal",
    "is_commutative",
    "NEGATION",
    "CONJUNCTION",
    "DISJUNCTION",
    "IMPLICATION",
    "BOX",
    "DIAMOND",
    "EX_BOX",
    "EX_DIAMOND",
    "PROPOSITIONAL_OPERATORS",
    "MODAL_OPERATORS",
    "Logic",
    "letters",
    "alphabet",
    "operators",
    "PROPOSITIONAL_LOGIC",
    "MODAL_LOGIC",
    "DEFAULT_LOGIC",
]
