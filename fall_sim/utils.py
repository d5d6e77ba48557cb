"""
Falling Objects Simulation - Utility Functions
"""

import numpy as np


def truncate_value(value: float, digits: int) -> float:
    """
    Round a value to `digits` fractional digits by truncation toward zero.

    The value is scaled by 10^digits, the fractional remainder dropped and
    the result scaled back. This is not round-half-up: 1.9999999 -> 1.999999
    and -1.9999999 -> -1.999999 for six digits.
    """
    factor = 10.0 ** digits
    return float(np.trunc(value * factor) / factor)
