# syntax/shunting_yard.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Infix to postfix conversion with the shunting-yard algorithm

"""Infix-to-postfix (Reverse Polish Notation) conversion.

Goal: translate an infix token sequence to postfix notation, e.g. "□c∧◊d"
becomes "c□d◊∧". Postfix order makes building the formula tree a single
stack pass.

Data structures involved:
    postfix: output token list, only ever appended to
    opstack: operators and the literal "(" marker, popped from the top

Given a token ``tok``, one of four scenarios occurs:

1. ``tok`` is a letter of the logic's alphabet
   -> append it to ``postfix``.
2. ``tok`` is "("
   -> push it on ``opstack``.
3. ``tok`` is ")"
   -> pop operators into ``postfix`` until "(" is popped and dropped.
4. ``tok`` is an operator
   -> pop operators into ``postfix`` while they bind strictly tighter than
   ``tok``, then push ``tok``. An operator of equal precedence stays on the
   stack, so chains of equal-precedence operators group to the right:
   "a∧b∧c" reads as "a∧(b∧c)".
"""

from typing import List, Optional, Sequence

from logic import Letter, Logic, alphabet, precedence, DEFAULT_LOGIC
from .exceptions import UnbalancedBracketsError
from utils.logger import get_logger

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def to_postfix(tokens: Sequence, logic: Logic = DEFAULT_LOGIC) -> list:
    """Return ``tokens`` rearranged in postfix notation.

    Args:
        tokens: Infix token sequence, typically produced by ``tokenize``
        logic: Logic whose alphabet decides which symbols are atoms

    Returns:
        Postfix sequence of Letters and Operators

    Raises:
        UnbalancedBracketsError: A ")" has no matching "(" or a "(" is
            never closed
    """
    logger = get_logger()

    postfix: list = []
    opstack: list = []

    for tok in tokens:
        _shunt(postfix, opstack, tok, logic)

    # Remaining operators are moved to postfix
    while opstack:
        op = opstack.pop()
        if op == OPEN_PAREN:
            logger.debug("Unclosed '(' left on the operator stack")
            raise UnbalancedBracketsError("Mismatching brackets: '(' is never closed")
        postfix.append(op)

    logger.postfix_produced(postfix)
    return postfix


def _shunt(postfix: list, opstack: list, tok, logic: Logic) -> None:
    letter = _as_letter(tok, logic)

    # 1
    if letter is not None:
        postfix.append(letter)
    # 2
    elif tok == OPEN_PAREN:
        opstack.append(tok)
    # 3
    elif tok == CLOSE_PAREN:
        while True:
            if not opstack:
                raise UnbalancedBracketsError(
                    "Mismatching brackets: ')' has no matching '('"
                )
            op = opstack.pop()
            if op == OPEN_PAREN:
                break
            postfix.append(op)
    # 4 (unknown symbols land here too and are rejected by the tree builder)
    else:
        while opstack and opstack[-1] != OPEN_PAREN:
            op = opstack.pop()
            if precedence(op) > precedence(tok):
                postfix.append(op)
            else:
                # Last pop is reverted since tok has to be pushed now
                opstack.append(op)
                break
        opstack.append(tok)


def _as_letter(tok, logic: Logic) -> Optional[Letter]:
    if isinstance(tok, Letter):
        return tok if tok in alphabet(logic) else None
    if isinstance(tok, str) and len(tok) == 1:
        letter = Letter(tok)
        if letter in alphabet(logic):
            return letter
    return None
