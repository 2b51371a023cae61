from __future__ import annotations

import math
from numbers import Real
from typing import Any


def is_number(x: Any) -> bool:
    # bool is an int subclass, but True is not a coordinate
    return isinstance(x, Real) and not isinstance(x, bool)


def clamp01(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return float(t)


def round_half_away(x: float) -> int:
    """Round to nearest, ties away from zero (``round(2.5) == 3``, unlike ``round``)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def clamp_u8(x: float) -> int:
    n = round_half_away(x)
    return 0 if n < 0 else 255 if n > 255 else n


__all__ = ["is_number", "clamp01", "round_half_away", "clamp_u8"]
