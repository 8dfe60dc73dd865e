# generation/random_formula.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Random formula generation under height and modal-depth constraints

"""Random generation of well-formed formulas.

The generator never goes through text: it assembles a postfix token stream
directly from the atom and operator pools and hands it to the tree builder.

Construction is recursive on the remaining height and modal budget:

- at height 0, or when a uniform draw falls below ``pruning_factor``, the
  branch ends with a random atom;
- otherwise an operator is drawn (non-modal only once the modal budget is
  spent) and one operand stream is generated per arity slot with height
  lowered by one and the budget lowered by one for modal operators.

With ``pruning_factor=0.0`` every tree has exactly the requested height and
no branch holds more than ``max_modal_depth`` modal operators.
"""

import random
from collections.abc import Collection
from typing import Iterable, List, Optional, Union

from logic import Logic, Operator, alphabet, operators, is_modal, precedence
from syntax import build
from tree import Formula, modal_depth
from .exceptions import SamplingError
from utils.logger import get_logger

RngLike = Union[int, random.Random, None]


def make_rng(rng: RngLike = None) -> random.Random:
    """Return a random number generator for ``rng``.

    Args:
        rng: None for a freshly seeded generator, an int seed, or an
            existing ``random.Random`` instance (returned as is)
    """
    if rng is None:
        return random.Random()
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, int):
        return random.Random(rng)
    raise TypeError(f"Expected a seed or a random.Random instance, got {type(rng).__name__}")


def _as_pool(items: Iterable, what: str) -> list:
    # Sets are ordered so that a seed reproduces the same draws in every process
    if not isinstance(items, Collection):
        raise SamplingError(f"The {what} pool is not finite")
    if isinstance(items, (set, frozenset)):
        return sorted(items, key=lambda tok: (precedence(tok), str(tok)))
    return list(items)


def _draw(rng: random.Random, pool: list, what: str):
    if not pool:
        raise SamplingError(f"Cannot draw from an empty {what} pool")
    return rng.choice(pool)


def sample_atom(atoms: Iterable, rng: RngLike = None):
    """Uniformly draw one atom from a finite alphabet.

    Raises:
        SamplingError: The alphabet is empty or not finite
    """
    return _draw(make_rng(rng), _as_pool(atoms, "atom"), "atom")


def generate(
    height: int,
    atom_pool: Iterable,
    operator_pool: Iterable[Operator],
    max_modal_depth: Optional[int] = None,
    pruning_factor: float = 0.0,
    rng: RngLike = None,
) -> Formula:
    """Return a random formula of (at most) the specified height.

    Args:
        height: Height of the generated tree; exact when pruning_factor is 0
        atom_pool: Letters, candidates to be leaves
        operator_pool: Operators, candidates to be internal nodes
        max_modal_depth: Maximum number of modal operators in a path
            (defaults to ``height``)
        pruning_factor: Probability, in [0, 1], of ending a branch early
            with an atom at each step
        rng: Seed or ``random.Random`` instance; None builds a new one

    Returns:
        The generated Formula

    Raises:
        SamplingError: A required draw has an empty pool, or a parameter is
            out of range
    """
    logger = get_logger()

    if height < 0:
        raise SamplingError(f"Height must be non-negative, got {height}")
    if max_modal_depth is None:
        max_modal_depth = height
    if max_modal_depth < 0:
        raise SamplingError(f"Maximum modal depth must be non-negative, got {max_modal_depth}")
    if not 0.0 <= pruning_factor <= 1.0:
        raise SamplingError(f"Pruning factor must lie in [0, 1], got {pruning_factor}")

    rng = make_rng(rng)
    atoms = _as_pool(atom_pool, "atom")
    ops = _as_pool(operator_pool, "operator")
    nonmodal_ops = [op for op in ops if not is_modal(op)]

    logger.debug(
        f"Generating formula of height {height} from {len(atoms)} atoms and "
        f"{len(ops)} operators (max modal depth {max_modal_depth}, "
        f"pruning factor {pruning_factor})"
    )

    postfix = _gen_postfix(
        height, max_modal_depth, atoms, ops, nonmodal_ops, pruning_factor, rng
    )
    formula = build(postfix)

    logger.formula_generated(str(formula), height, modal_depth(formula))
    return formula


def generate_from_logic(
    height: int,
    logic: Logic,
    max_modal_depth: Optional[int] = None,
    pruning_factor: float = 0.0,
    rng: RngLike = None,
) -> Formula:
    """Return a random formula over the letters and operators of ``logic``.

    See ``generate`` for the meaning of the remaining arguments.
    """
    formula = generate(
        height,
        alphabet(logic),
        operators(logic),
        max_modal_depth=max_modal_depth,
        pruning_factor=pruning_factor,
        rng=rng,
    )
    formula.logic = logic
    return formula


def _gen_postfix(
    height: int,
    modal_budget: int,
    atoms: list,
    ops: list,
    nonmodal_ops: list,
    pruning_factor: float,
    rng: random.Random,
) -> List:
    # Propositional letters are always leaves
    if height == 0 or rng.random() < pruning_factor:
        return [_draw(rng, atoms, "atom")]

    if modal_budget == 0:
        op = _draw(rng, nonmodal_ops, "non-modal operator")
    else:
        op = _draw(rng, ops, "operator")

    postfix: List = []
    for _ in range(op.arity):
        postfix.extend(
            _gen_postfix(
                height - 1,
                modal_budget - int(is_modal(op)),
                atoms,
                ops,
                nonmodal_ops,
                pruning_factor,
                rng,
            )
        )
    postfix.append(op)

    return postfix
