# generation/__init__.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Random formula generation exports

"""Random generation of formulas with controlled height and modal depth.

Example:
    >>> from generation import generate_from_logic
    >>> from logic import MODAL_LOGIC
    >>> f = generate_from_logic(3, MODAL_LOGIC, max_modal_depth=1, rng=42)
"""

from .exceptions import SamplingError
from .random_formula import generate, generate_from_logic, sample_atom, make_rng

__all__ = [
    "generate",
    "generate_from_logic",
    "sample_atom",
    "make_rng",
    "SamplingError",
]
