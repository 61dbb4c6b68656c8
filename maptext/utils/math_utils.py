"""Numeric helpers shared by the layout and placement code."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity.

    Unlike the built-in ``round``, ``round_half_up(2.5) == 3`` and
    ``round_half_up(-2.5) == -2``.
    """
    return int(math.floor(value + 0.5))
