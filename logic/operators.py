# logic/operators.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Token catalog: propositional letters, operators and their properties

"""Tokens that may appear in a formula (syntax) tree.

A token is either a ``Letter`` (an atomic proposition) or an ``Operator``
drawn from a catalog describing its precedence, arity, modality and
commutativity. The module-level query functions accept any token and are
the only interface the parsing and tree layers use to inspect them.

Standard Operators:
    NEGATION (¬), CONJUNCTION (∧), DISJUNCTION (∨), IMPLICATION (→)
    BOX (□), DIAMOND (◊): unary modal operators
    EX_BOX ([L]), EX_DIAMOND (⟨L⟩): bracketed relational modalities
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

# Characters opening and closing a multi-character operator name
OPENING_BRACKETS = ("[", "⟨")
CLOSING_BRACKETS = ("]", "⟩")


@dataclass(frozen=True, slots=True)
class Letter:
    """Atomic proposition identified by a single character.

    Attributes:
        name: The one-character text of the proposition
    """

    name: str

    def __post_init__(self):
        if len(self.name) != 1:
            raise ValueError(
                f"Propositional letters are single characters, got '{self.name}'"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Operator:
    """Connective or modality with a fixed arity.

    Attributes:
        symbol: Textual name, e.g. "∧" or "[L]"
        precedence: Binding strength; higher binds tighter
        arity: Number of operands (1 or 2)
        modal: Whether the operator introduces a modality
        commutative: Whether operand order is irrelevant
    """

    symbol: str
    precedence: int
    arity: int
    modal: bool = False
    commutative: bool = False

    def __post_init__(self):
        if self.arity not in (1, 2):
            raise ValueError(
                f"Operator '{self.symbol}' must be unary or binary, got arity {self.arity}"
            )

    def __str__(self) -> str:
        return self.symbol


Token = Union[Letter, Operator]


def is_proposition(token) -> bool:
    """Return True if ``token`` is a propositional letter."""
    return isinstance(token, Letter)


def is_operator(token) -> bool:
    """Return True if ``token`` is a catalog operator."""
    return isinstance(token, Operator)


def precedence(token) -> int:
    """Return the precedence of ``token``.

    Letters (and raw one-character symbols) are ranked by their code point,
    which gives atoms a total order usable for canonical reordering.
    """
    if isinstance(token, Operator):
        return token.precedence
    if isinstance(token, Letter):
        return ord(token.name)
    return ord(str(token)[0])


def arity(token) -> int:
    """Return the number of operands taken by ``token`` (0 for letters).

    Raises:
        TypeError: ``token`` is neither a letter nor an operator
    """
    if isinstance(token, Operator):
        return token.arity
    if isinstance(token, Letter):
        return 0
    raise TypeError(f"No arity known for token {token!r}")


def is_modal(token) -> bool:
    return isinstance(token, Operator) and token.modal


def is_commutative(token) -> bool:
    return isinstance(token, Operator) and token.commutative


# Standard catalog
NEGATION = Operator("¬", precedence=30, arity=1)
CONJUNCTION = Operator("∧", precedence=20, arity=2, commutative=True)
DISJUNCTION = Operator("∨", precedence=15, arity=2, commutative=True)
IMPLICATION = Operator("→", precedence=10, arity=2)

BOX = Operator("□", precedence=30, arity=1, modal=True)
DIAMOND = Operator("◊", precedence=30, arity=1, modal=True)
EX_BOX = Operator("[L]", precedence=30, arity=1, modal=True)
EX_DIAMOND = Operator("⟨L⟩", precedence=30, arity=1, modal=True)

PROPOSITIONAL_OPERATORS = (NEGATION, CONJUNCTION, DISJUNCTION, IMPLICATION)
MODAL_OPERATORS = PROPOSITIONAL_OPERATORS + (BOX, DIAMOND, EX_BOX, EX_DIAMOND)
