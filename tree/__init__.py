# tree/__init__.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Formula (syntax) tree structure, queries and normalization

"""Formula (syntax) trees and the operations defined over them.

Core Components:
    Node, Formula: tree structure with cached rendering and size
    size_recompute, size, height, modal_depth: structural measures
    subformulas, render: traversal and textual form
    normalize: canonical ordering of commutative operands

Example:
    >>> from syntax import parse
    >>> f = parse("□p∧◊q")
    >>> height(f), modal_depth(f), size(f)
    (2, 1, 5)
"""

from .fnode import Node, Formula
from .queries import (
    size_recompute,
    size,
    height,
    modal_depth,
    subformulas,
    render,
    same_structure,
    fhash,
)
from .normalizer import normalize, is_less

__all__ = [
    "Node",
    "Formula",
    "size_recompute",
    "size",
    "height",
    "modal_depth",
    "subformulas",
    "render",
    "same_structure",
    "fhash",
    "normalize",
    "is_less",
]
