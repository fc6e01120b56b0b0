"""Integer rescaling helpers for user-adjustable counts."""

from __future__ import annotations

import math


RATIO = 1.1
_ROUND_DIGITS = 9


def scale_up(value: int, minimum: int, ratio: float = RATIO) -> int:
    """Multiply by ratio and round up, never below minimum."""
    # Round first so 10 * 1.1 == 11.000000000000002 does not ceil to 12.
    return max(minimum, math.ceil(round(value * ratio, _ROUND_DIGITS)))


def scale_down(value: int, minimum: int, ratio: float = RATIO) -> int:
    """Divide by ratio and round down, never below minimum."""
    return max(minimum, math.floor(round(value / ratio, _ROUND_DIGITS)))
