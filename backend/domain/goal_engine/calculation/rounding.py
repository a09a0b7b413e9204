"""Rounding shared by every calorie and gram value."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would shift goals by one unit on exact halves.

    Example:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
        >>> round_half_away(2249.825)
        2250
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
