# syntax/__init__.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Formula parsing components: tokenizer, shunting-yard converter, tree builder

"""Formula parsing for propositional and modal logic expressions.

The parsing pipeline turns a textual infix expression into a formula
(syntax) tree in three stages, each usable on its own:

    tokenize: string → operators and one-character symbols
    to_postfix: infix tokens → postfix (Reverse Polish) tokens
    build: postfix tokens → Formula

Grammar Features:
    - Operator precedence taken from the operator catalog
    - Equal-precedence chains group to the right
    - Parenthetical grouping
    - Bracketed multi-character operators such as [L] and ⟨L⟩

Example:
    >>> from syntax import parse
    >>> str(parse("(p∧q)∨r"))
    '((p∧q)∨r)'
"""

from logic import Logic, operators, DEFAULT_LOGIC
from tree import Formula
from .exceptions import (
    ParseError,
    OperatorLookupError,
    UnbalancedBracketsError,
    UnknownTokenError,
    MalformedPostfixError,
)
from .lexer import tokenize
from .shunting_yard import to_postfix
from .builder import build
from utils.logger import get_logger


def parse(expression: str, logic: Logic = DEFAULT_LOGIC) -> Formula:
    """Parse an infix formula string into a formula (syntax) tree.

    Args:
        expression: Well-formed infix formula, e.g. "□c∧◊d"
        logic: Logic providing the alphabet and the operator catalog

    Returns:
        Formula whose tree has sizes computed and ``logic`` recorded

    Raises:
        ParseError: The expression is empty or malformed; the specific
            subclass names the failing stage

    Example:
        >>> f = parse("□p∧◊q")
        >>> str(f)
        '(□p∧◊q)'
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {expression}")

    if expression.strip() == "":
        raise ParseError("Input formula is empty.")

    try:
        tokens = tokenize(expression, ops=operators(logic))
        postfix = to_postfix(tokens, logic)
        result = build(postfix, logic)
        logger.debug(f"Formula parsed successfully into {result}")
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "tokenize",
    "to_postfix",
    "build",
    "ParseError",
    "OperatorLookupError",
    "UnbalancedBracketsError",
    "UnknownTokenError",
    "MalformedPostfixError",
]
