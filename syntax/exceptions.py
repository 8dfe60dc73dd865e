# syntax/exceptions.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Custom exceptions for formula tokenization, conversion and tree building

"""Domain-specific exceptions for the textual formula pipeline.

Each stage of the pipeline (tokenizer, infix-to-postfix converter, tree
builder) raises its own subclass of ``ParseError`` at the point of
detection. None of them is caught inside the pipeline: malformed input is
a caller bug, not a transient condition.
"""


class ParseError(RuntimeError):
    """Base exception for every failure of the string → tree pipeline.

    Used by ``syntax.parse`` to provide consistent error handling: any
    unexpected exception raised while parsing is wrapped into this type.
    """

    pass


class OperatorLookupError(ParseError, LookupError):
    """A bracketed slice does not name any operator of the logic."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown bracketed operator '{symbol}'")


class UnbalancedBracketsError(ParseError):
    """A closing bracket has no opener, or an opener is never closed."""

    pass


class UnknownTokenError(ParseError):
    """A postfix token is neither a letter nor an operator of known arity."""

    pass


class MalformedPostfixError(UnknownTokenError):
    """The postfix sequence does not reduce to exactly one tree."""

    pass
