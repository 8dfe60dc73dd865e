# generation/exceptions.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Custom exceptions for random formula generation


class SamplingError(RuntimeError):
    """Exception raised when a random draw cannot be performed.

    Raised when the atom or operator pool is empty at the moment a draw is
    required, when the modal budget is exhausted and no non-modal operator
    is available, when an alphabet is not finite, or when the generation
    parameters are out of range.
    """

    pass
