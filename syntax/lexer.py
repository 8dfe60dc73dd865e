# syntax/lexer.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Lexical analyzer for formula strings using SLY

"""Lexical analyzer for propositional and modal formula strings.

Classical operators such as ∧ are a single character, so after whitespace
removal most of an expression is split character by character. Operators
with a multi-character name are written between brackets, e.g. ``[L]`` or
``⟨My_0p3r4tor⟩``, and each such bracketed slice is kept whole and looked
up verbatim in the operator catalog.

Tokens produced:
- Operator: any catalog operator, bracketed or single-character
- str: any other single character (atoms, "(" and ")"); it is not validated
  against the alphabet here
"""

from typing import Dict, Iterable, List, Optional, Union

from sly import Lexer

from logic import Operator, operators, DEFAULT_LOGIC
from .exceptions import OperatorLookupError
from utils.logger import get_logger

RawToken = Union[Operator, str]


class FormulaSliceLexer(Lexer):
    """SLY-based lexer splitting a formula into slices.

    A BRACKETED slice runs from an opening bracket up to the first closing
    bracket, or stops right before the next opening bracket when none is
    found. Every other character is a SYMBOL slice of its own.

    Attributes:
        tokens: Set of valid slice types
        ignore: Characters to skip during tokenization
    """

    tokens = {"BRACKETED", "SYMBOL"}

    ignore = " \t\r\n"

    BRACKETED = r"[\[⟨][^\[\]⟨⟩]*[\]⟩]?"
    SYMBOL = r"."


def tokenize(expression: str, ops: Optional[Iterable[Operator]] = None) -> List[RawToken]:
    """Split ``expression`` into operators and one-character symbols.

    Args:
        expression: Infix formula, e.g. "□c∧◊d" or "[L]p → q"
        ops: Operators to recognize (defaults to those of DEFAULT_LOGIC)

    Returns:
        Token sequence where every catalog symbol became its Operator

    Raises:
        OperatorLookupError: A bracketed slice names no known operator

    Example:
        >>> [str(tok) for tok in tokenize("□c∧◊d")]
        ['□', 'c', '∧', '◊', 'd']
    """
    logger = get_logger()

    if ops is None:
        ops = operators(DEFAULT_LOGIC)
    sym_to_op: Dict[str, Operator] = {op.symbol: op for op in ops}

    stripped = "".join(expression.split())

    tokens: List[RawToken] = []
    for piece in FormulaSliceLexer().tokenize(stripped):
        if piece.type == "BRACKETED":
            if piece.value not in sym_to_op:
                logger.debug(f"Bracketed slice '{piece.value}' is not an operator")
                raise OperatorLookupError(piece.value)
            tokens.append(sym_to_op[piece.value])
        else:
            tokens.append(piece.value)

    # Single-character operators are recognized
    for i, tok in enumerate(tokens):
        if isinstance(tok, str) and tok in sym_to_op:
            tokens[i] = sym_to_op[tok]

    logger.tokens_produced(expression, tokens)
    return tokens
