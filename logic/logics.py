# logic/logics.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# A logic pairs an alphabet of letters with the operators legal over it

"""Logic definitions bounding which tokens may appear together.

A ``Logic`` is the pairing of an atom alphabet with an operator set. The
tokenizer, the infix-to-postfix converter and the random generator all take
one to decide which symbols are atoms and which are operators.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Collection, Dict, FrozenSet, Iterable, Tuple

from .operators import Letter, Operator, PROPOSITIONAL_OPERATORS, MODAL_OPERATORS


def letters(names: Iterable[str]) -> FrozenSet[Letter]:
    """Build a finite alphabet from an iterable of one-character names.

    Example:
        >>> sorted(str(p) for p in letters("qp"))
        ['p', 'q']
    """
    return frozenset(Letter(name) for name in names)


@dataclass(frozen=True)
class Logic:
    """Alphabet and operator set defining a logic.

    Attributes:
        name: Human-readable identifier
        alphabet: Letters usable as atoms
        operators: Operators usable as internal nodes
    """

    name: str
    alphabet: Collection[Letter]
    operators: Tuple[Operator, ...]
    _by_symbol: Dict[str, Operator] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self):
        object.__setattr__(self, "operators", tuple(self.operators))
        object.__setattr__(
            self, "_by_symbol", {op.symbol: op for op in self.operators}
        )

    def lookup(self, symbol: str) -> Operator:
        """Return the operator whose symbolic name is exactly ``symbol``.

        Raises:
            KeyError: No operator of this logic is named ``symbol``
        """
        return self._by_symbol[symbol]

    def has_operator(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def __contains__(self, token) -> bool:
        return token in self.alphabet or token in self.operators


def alphabet(logic: Logic) -> Collection[Letter]:
    """Return the atom alphabet of ``logic``."""
    return logic.alphabet


def operators(logic: Logic) -> Tuple[Operator, ...]:
    """Return the operator set of ``logic``."""
    return logic.operators


PROPOSITIONAL_LOGIC = Logic("propositional", letters("pqrs"), PROPOSITIONAL_OPERATORS)
MODAL_LOGIC = Logic("modal", letters("pqrs"), MODAL_OPERATORS)

DEFAULT_LOGIC = MODAL_LOGIC
