# syntax/builder.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Formula (syntax) tree construction from postfix notation

"""Formula (syntax) tree generation from a postfix token sequence.

Given a token ``tok``, one of three scenarios occurs:

1. ``tok`` is a propositional letter, hence a leaf
   -> push a new Node(tok) on the node stack.
2. ``tok`` is a unary operator
   -> pop one node, attach it as the right child of a new Node(tok) and
   push the new node.
3. ``tok`` is a binary operator
   -> pop the right operand, then the left one, attach both to a new
   Node(tok) and push it.

At the end the only remaining node on the stack is the root of the tree.
"""

from typing import List, Optional, Sequence

from logic import Letter, Logic, Operator
from tree import Formula, Node, size_recompute, height
from .exceptions import MalformedPostfixError, UnknownTokenError
from utils.logger import get_logger


def build(postfix: Sequence, logic: Optional[Logic] = None) -> Formula:
    """Return the formula tree corresponding to a postfix token sequence.

    Sizes are computed for the whole tree before it is returned.

    Args:
        postfix: Letters and Operators in postfix order
        logic: Logic to record on the resulting formula

    Returns:
        Formula owning the root of the built tree

    Raises:
        UnknownTokenError: A token is neither a letter nor a unary or binary
            operator
        MalformedPostfixError: An operator lacks operands, or the sequence
            does not reduce to exactly one tree
    """
    logger = get_logger()

    nodestack: List[Node] = []
    for tok in postfix:
        _build_step(tok, nodestack)

    if len(nodestack) != 1:
        logger.debug(f"Postfix sequence left {len(nodestack)} nodes on the stack")
        raise MalformedPostfixError(
            f"Postfix sequence reduces to {len(nodestack)} trees instead of 1"
        )

    root = nodestack[0]
    size_recompute(root)
    logger.tree_built(root.rendered, root.size, height(root))

    return Formula(root, logic)


def _build_step(tok, nodestack: List[Node]):
    # 1
    if isinstance(tok, Letter):
        nodestack.append(Node(tok, rendered=str(tok)))
    # 2
    elif isinstance(tok, Operator) and tok.arity == 1:
        child = _pop_operand(nodestack, tok)

        newnode = Node(tok, rightchild=child)
        child.parent = newnode
        newnode.rendered = f"{tok}{child.rendered}"

        nodestack.append(newnode)
    # 3
    elif isinstance(tok, Operator) and tok.arity == 2:
        right_child = _pop_operand(nodestack, tok)
        left_child = _pop_operand(nodestack, tok)

        newnode = Node(tok, leftchild=left_child, rightchild=right_child)
        left_child.parent = newnode
        right_child.parent = newnode
        newnode.rendered = f"({left_child.rendered}{tok}{right_child.rendered})"

        nodestack.append(newnode)
    else:
        raise UnknownTokenError(f"Unknown token {tok!r}")


def _pop_operand(nodestack: List[Node], tok: Operator) -> Node:
    if not nodestack:
        raise MalformedPostfixError(f"Missing operand for operator '{tok}'")
    return nodestack.pop()
