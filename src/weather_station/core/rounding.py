"""
Rounding helpers.

Python's built-in round() uses banker's rounding; station values are reported
with half-up rounding instead (2.5 -> 3, -2.5 -> -2).
"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward positive infinity.

    The fractional part is compared directly; adding 0.5 before flooring
    loses precision near 0.5 and for values beyond 2**52.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    if isinstance(value, int):
        return value

    floor = math.floor(value)
    return int(floor) + (1 if value - floor >= 0.5 else 0)
