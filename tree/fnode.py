# tree/fnode.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Formula (syntax) tree nodes and the formula handle owning a tree

"""Formula (syntax) tree structure.

A ``Node`` wraps one token and exclusively owns its children. The parent
link is a weak reference used for upward navigation only, so a subtree never
keeps its ancestors alive.

Arity is reflected in which children are set:
    - no children: a leaf wrapping a letter
    - right child only: a unary operator applied to its operand
    - both children: a binary operator

Two fields are caches rather than live values:
    rendered: human-readable text of the subtree, fixed when the node is
        built; it is only overwritten by ``copy_rendered``
    size: node count of the subtree, valid only after the last
        ``tree.queries.size_recompute`` pass; structural edits make it stale
"""

from __future__ import annotations
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from logic import Token, arity

if TYPE_CHECKING:
    from logic import Logic


@dataclass(eq=False, repr=False)
class Node:
    """Formula (syntax) tree node.

    Attributes:
        token: Letter or Operator wrapped by this node
        rendered: Cached string form of the subtree rooted here
        size: Cached number of nodes in the subtree rooted here
        leftchild: Left operand (binary operators only)
        rightchild: Sole operand of unary operators, right operand of binary ones
    """

    token: Token
    rendered: str = ""
    size: int = 0
    leftchild: Optional[Node] = None
    rightchild: Optional[Node] = None
    _parent: Optional[weakref.ReferenceType] = field(default=None, compare=False)

    @property
    def parent(self) -> Optional[Node]:
        """Return the parent node, or None for a root (or a detached node)."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional[Node]):
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def is_leaf(self) -> bool:
        return self.leftchild is None and self.rightchild is None

    @property
    def arity(self) -> int:
        """Return the arity realized by this node's children (0, 1 or 2)."""
        if self.leftchild is not None:
            return 2
        return 0 if self.rightchild is None else 1

    def is_consistent(self) -> bool:
        """Check the children layout against the arity of the wrapped token."""
        if self.leftchild is not None and self.rightchild is None:
            return False
        return self.arity == arity(self.token)

    def copy_rendered(self, other: Node):
        """Copy ``other``'s cached rendering into this node."""
        self.rendered = other.rendered

    def __repr__(self) -> str:
        return f"Node({str(self.token)!r}, rendered={self.rendered!r}, size={self.size})"

    def __str__(self) -> str:
        from .queries import render

        return render(self)


@dataclass(eq=False)
class Formula:
    """Formula (syntax) tree handle owning exactly one root node.

    Attributes:
        root: Root node of the tree
        logic: Logic the formula was parsed or generated under, if known
    """

    root: Node
    logic: Optional[Logic] = None

    def __str__(self) -> str:
        from .queries import render

        return render(self.root)
