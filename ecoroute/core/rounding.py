"""Rounding helpers.

Python's built-in :func:`round` rounds halves to even; reported figures
here round halves away from zero (``2.25 -> 2.3``, ``52.5 -> 53``).
"""

import math


def round_half_away(value: float, digits: int = 0) -> float:
    """Round *value* to *digits* decimals, halves away from zero."""
    scale = 10.0**digits
    return math.copysign(math.floor(abs(value) * scale + 0.5) / scale, value)
