# tree/queries.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Size, height, modal depth, traversal and rendering of formula trees

"""Queries over formula (syntax) trees.

Every function accepts either a ``Formula`` or any ``Node`` and works on the
subtree rooted there. Only ``size_recompute`` writes to the tree: it
refreshes the cached ``size`` of every node it visits. ``size`` reads that
cache, so after a structural edit callers must run ``size_recompute`` again.
"""

from __future__ import annotations
from typing import List, Union

from logic import is_modal
from .fnode import Formula, Node

TreeLike = Union[Formula, Node]


def _root(x: TreeLike) -> Node:
    return x.root if isinstance(x, Formula) else x


def size_recompute(x: TreeLike) -> int:
    """Update the cached sizes in the tree rooted in ``x``.

    Returns:
        The size of the root, i.e. the number of nodes in the tree
    """
    v = _root(x)
    left = size_recompute(v.leftchild) if v.leftchild is not None else 0
    right = size_recompute(v.rightchild) if v.rightchild is not None else 0
    v.size = 1 + left + right
    return v.size


def size(x: TreeLike) -> int:
    """Return the cached size of ``x`` (as of the last recompute pass)."""
    return _root(x).size


def height(x: TreeLike) -> int:
    """Return the height of the tree rooted in ``x`` (0 for a leaf)."""
    v = _root(x)
    if v.is_leaf:
        return 0
    return 1 + max(
        height(v.leftchild) if v.leftchild is not None else 0,
        height(v.rightchild) if v.rightchild is not None else 0,
    )


def modal_depth(x: TreeLike) -> int:
    """Return the maximum number of modal operators along a root-to-leaf path."""
    v = _root(x)
    return int(is_modal(v.token)) + max(
        modal_depth(v.leftchild) if v.leftchild is not None else 0,
        modal_depth(v.rightchild) if v.rightchild is not None else 0,
    )


def subformulas(x: TreeLike, sorted: bool = True) -> List[Node]:
    """Return every node of the tree in in-order (left, self, right).

    Args:
        x: Formula or subtree root
        sorted: Stably re-order the nodes by ascending cached size

    Returns:
        A materialized list of the tree's nodes
    """
    nodes: List[Node] = []
    _collect_inorder(_root(x), nodes)
    if sorted:
        nodes.sort(key=lambda n: n.size)
    return nodes


def _collect_inorder(v: Node, nodes: List[Node]):
    if v.leftchild is not None:
        _collect_inorder(v.leftchild, nodes)

    nodes.append(v)

    if v.rightchild is not None:
        _collect_inorder(v.rightchild, nodes)


def render(x: TreeLike) -> str:
    """Return the in-order visit of the tree as a string.

    Leaves render as their letter, unary applications as the operator
    followed by the operand, binary applications as "(left op right)".
    Unlike the ``rendered`` cache, this always reflects the current shape.
    """
    v = _root(x)
    if v.leftchild is not None:
        return f"({render(v.leftchild)}{v.token}{render(v.rightchild)})"
    if v.rightchild is not None:
        return f"{v.token}{render(v.rightchild)}"
    return str(v.token)


def same_structure(a: TreeLike, b: TreeLike) -> bool:
    """Return True if both trees wrap equal tokens in the same shape."""
    u, v = _root(a), _root(b)
    if u.token != v.token:
        return False
    for cu, cv in ((u.leftchild, v.leftchild), (u.rightchild, v.rightchild)):
        if (cu is None) != (cv is None):
            return False
        if cu is not None and not same_structure(cu, cv):
            return False
    return True


def fhash(x: TreeLike) -> int:
    """Return the hash of the cached rendering of ``x``."""
    return hash(_root(x).rendered)
