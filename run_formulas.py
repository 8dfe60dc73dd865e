#!/usr/bin/env python3
# run_formulas.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Command-line interface for formula parsing and generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Optional

from logic import Logic, MODAL_LOGIC, PROPOSITIONAL_LOGIC
from syntax import parse, ParseError
from tree import Formula, size, height, modal_depth, subformulas, normalize, render
from generation import generate_from_logic, SamplingError
from utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula as string

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def describe_formula(formula: Formula) -> str:
    """One-line summary of a formula and its structural measures."""
    return (
        f"{render(formula)}  "
        f"[size={size(formula)}, height={height(formula)}, "
        f"modal_depth={modal_depth(formula)}]"
    )


def maybe_visualize(formula: Formula, base_filename: Optional[str]) -> None:
    """Write a Graphviz rendering of ``formula`` when a filename was given."""
    if not base_filename:
        return
    from utils.tree_visualizer import visualize_formula_tree

    visualize_formula_tree(formula, base_filename)


def run_parse(args: argparse.Namespace, logic: Logic) -> int:
    """Execute the ``parse`` sub-command."""
    logger = get_logger()

    expression = args.expression
    if expression is None:
        expression = read_formula_file(args.formula_file)

    formula = parse(expression, logic=logic)
    print(describe_formula(formula))

    if args.normalize:
        normalize(formula)
        print(f"normalized: {render(formula)}")

    if args.subformulas:
        for node in subformulas(formula):
            print(f"  {render(node)}  (size={node.size})")

    maybe_visualize(formula, args.graphviz)
    logger.info("✅ Formula parsed")
    return 0


def run_generate(args: argparse.Namespace, logic: Logic) -> int:
    """Execute the ``generate`` sub-command."""
    logger = get_logger()

    for i in range(args.count):
        seed = None if args.seed is None else args.seed + i
        formula = generate_from_logic(
            args.height,
            logic,
            max_modal_depth=args.max_modal_depth,
            pruning_factor=args.pruning_factor,
            rng=seed,
        )
        print(describe_formula(formula))
        if args.graphviz:
            maybe_visualize(formula, f"{args.graphviz}_{i}")

    logger.info(f"✅ Generated {args.count} formula(s)")
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Arbor modal logic formula toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_formulas.py parse -e "□p∧◊q"
  python run_formulas.py parse -e "(q∧p)∨(s∧r)" --normalize --subformulas
  python run_formulas.py parse -f formula.txt --debug
  python run_formulas.py generate --height 3 --max-modal-depth 1 --seed 7 --count 5
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )
    parser.add_argument(
        "--propositional",
        action="store_true",
        help="Use the propositional logic instead of the modal one",
    )
    parser.add_argument(
        "--graphviz",
        metavar="NAME",
        help="Write a Graphviz rendering of the tree(s) under this base filename",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a formula and report its measures")
    source = parse_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expression", help="Infix formula to parse")
    source.add_argument("-f", "--formula-file", type=Path, help="File containing the formula")
    parse_cmd.add_argument(
        "--normalize", action="store_true", help="Reorder commutative operands canonically"
    )
    parse_cmd.add_argument(
        "--subformulas", action="store_true", help="List subformulas by ascending size"
    )

    gen_cmd = subparsers.add_parser("generate", help="Generate random formulas")
    gen_cmd.add_argument("--height", type=int, required=True, help="Height of each formula")
    gen_cmd.add_argument(
        "--max-modal-depth", type=int, default=None, help="Maximum modal operators per path"
    )
    gen_cmd.add_argument(
        "--pruning-factor", type=float, default=0.0, help="Probability of early branch termination"
    )
    gen_cmd.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    gen_cmd.add_argument("--count", type=int, default=1, help="Number of formulas to generate")

    return parser


def main(argv=None) -> int:
    """Main entry point for the formula toolkit.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    logic = PROPOSITIONAL_LOGIC if args.propositional else MODAL_LOGIC

    try:
        if args.command == "parse":
            return run_parse(args, logic)
        return run_generate(args, logic)

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except SamplingError as e:
        logger.error(f"Formula generation error: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 6


if __name__ == "__main__":
    sys.exit(main())
