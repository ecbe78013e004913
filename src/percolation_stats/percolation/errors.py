"""Error types for the percolation package."""

import numpy as np


class InvalidArgument(ValueError):
    """Raised for a non-positive size or trial count, or an out-of-range coordinate."""


def is_integer(value) -> bool:
    """True for Python and numpy integers, excluding bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))
