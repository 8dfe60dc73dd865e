# utils/tree_visualizer.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Graphviz rendering of formula (syntax) trees

import os
from typing import TYPE_CHECKING, Optional

from logic import is_modal, is_proposition
from utils.logger import get_logger

# Conditional import of graphviz
try:
    from graphviz import Digraph

    GRAPHVIZ_AVAILABLE = True
except ImportError:
    GRAPHVIZ_AVAILABLE = False

if TYPE_CHECKING:
    from tree import Formula, Node

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"


def _node_style(node: 'Node') -> dict:
    """Pick the Graphviz attributes used for a tree node."""
    if is_proposition(node.token):
        return {"shape": "ellipse", "style": "filled", "fillcolor": "palegreen"}
    if is_modal(node.token):
        return {"shape": "box", "style": "filled", "fillcolor": "lightskyblue"}
    return {"shape": "box", "style": "filled", "fillcolor": "lightgoldenrodyellow"}


def build_formula_digraph(formula: 'Formula', fmt: str = "png") -> Optional['Digraph']:
    """
    Builds a Graphviz digraph of a formula tree. Every node is labelled with
    its token and cached size; edges go from operators to their operands.

    Returns None when the graphviz package is not installed.
    """
    if not GRAPHVIZ_AVAILABLE:
        logger.warning("Graphviz library not installed. Skipping formula tree visualization. "
                       "To enable, install graphviz: pip install graphviz")
        return None

    dot = Digraph(comment=f"Formula tree for {formula}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")

    counter = 0
    pending = [(formula.root, None, None)]
    while pending:
        node, parent_id, side = pending.pop()
        node_id = f"N{counter}"
        counter += 1

        dot.node(node_id, f"{node.token}\nsize={node.size}", **_node_style(node))
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=side)

        # Right child first so the left one is laid out first
        if node.rightchild is not None:
            pending.append((node.rightchild, node_id, "R" if node.leftchild is not None else ""))
        if node.leftchild is not None:
            pending.append((node.leftchild, node_id, "L"))

    return dot


def visualize_formula_tree(formula: 'Formula', base_filename: str, fmt: str = "png") -> Optional[str]:
    """
    Generates a visualization of a formula tree using Graphviz.
    The output image is saved to a dedicated folder ('tree_visualizations').

    Args:
        formula: The formula whose tree is drawn.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the written file, or None when nothing was written.
    """
    dot = build_formula_digraph(formula, fmt=fmt)
    if dot is None:
        return None

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for tree visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        written = dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Formula tree visualization saved to {written}")
        return written
    except Exception as e:
        logger.warning(f"Failed to render formula tree visualization to {output_path}.{fmt}: {e}. "
                       f"Ensure Graphviz executables are installed and in your system's PATH.")
        return None
