"""Interpolators for scale ranges.

An interpolator takes two range endpoints and returns a function of ``t``,
where ``0.0`` yields the start and ``1.0`` the end. Values of ``t`` outside
``[0, 1]`` extrapolate; clamping is left to the caller (see ``Linear.clamp``).

Algorithms
----------
1. ``lerp``   – numbers, equal-arity tuples, equal-length lists, numpy arrays.
2. ``rgb``    – per-channel sRGB lerp, rounded to 8-bit.
3. ``oklab``  – Euclidean interpolation in OKLab (≈ perceptually uniform).
4. ``oklch``  – polar OKLab, shortest-arc hue, achromatic hue fix-up.

``eased`` wraps any of these so that ``t`` passes through an easing curve
first.
"""

from __future__ import annotations

from math import pi, tau
from typing import Any, Callable, List, Tuple

import numpy as np

from .colors import as_rgb
from .easing import Easing
from .errors import InvalidArgument
from .numeric import clamp_u8, is_number
from .oklab import oklch_to_srgb, oklab_to_srgb, srgb_to_oklab, srgb_to_oklch

Fn = Callable[[float], Any]
Interpolator = Callable[[Any, Any], Fn]

# below this chroma a colour is treated as grey and its hue as undefined
ACHROMATIC_EPS = 1e-12


def lerp(a: Any, b: Any) -> Fn:
    """
    Linear interpolation for numbers and structurally identical composites.

    >>> lerp(0, 10)(0.25)
    2.5
    >>> lerp((0, 0), (10, 20))(0.5)
    (5.0, 10.0)
    """
    if is_number(a) and is_number(b):
        return lambda t: a + (b - a) * t

    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray):
        if a.shape != b.shape:
            raise InvalidArgument(f"lerp shape mismatch: {a.shape} and {b.shape}")
        if not all(np.issubdtype(x.dtype, np.number) for x in (a, b)):
            raise InvalidArgument("lerp expects numeric arrays")
        a64 = a.astype(np.float64)
        d = b.astype(np.float64) - a64
        return lambda t: a64 + d * t

    if isinstance(a, tuple) and isinstance(b, tuple) and len(a) == len(b):
        parts = _lerp_parts(a, b)
        return lambda t: tuple(p(t) for p in parts)

    if isinstance(a, list) and isinstance(b, list) and len(a) == len(b):
        parts = _lerp_parts(a, b)
        return lambda t: [p(t) for p in parts]

    raise InvalidArgument(
        "lerp expects numbers or same-sized tuples/lists, "
        f"got: {a!r} and {b!r}"
    )


def _lerp_parts(a, b) -> List[Fn]:
    return [lerp(x, y) for x, y in zip(a, b)]


def rgb(c0: Any, c1: Any) -> Callable[[float], Tuple[int, int, int]]:
    """
    Per-channel interpolation of ``(r, g, b)`` on the 0–255 scale.

    >>> rgb((255, 0, 0), (0, 0, 255))(0.5)
    (128, 0, 128)
    """
    r0, g0, b0 = as_rgb(c0)
    r1, g1, b1 = as_rgb(c1)
    ir, ig, ib = lerp(r0, r1), lerp(g0, g1), lerp(b0, b1)

    def _interp(t: float) -> Tuple[int, int, int]:
        return clamp_u8(ir(t)), clamp_u8(ig(t)), clamp_u8(ib(t))

    return _interp


def oklab(c0: Any, c1: Any) -> Callable[[float], Tuple[int, int, int]]:
    lab0 = srgb_to_oklab(as_rgb(c0))
    d = srgb_to_oklab(as_rgb(c1)) - lab0

    def _interp(t: float) -> Tuple[int, int, int]:
        return oklab_to_srgb(lab0 + d * t)

    return _interp


def angle(h0: float, h1: float) -> Fn:
    """Interpolate two angles (radians) along the shorter arc, ``|Δ| <= π``."""
    delta = (h1 - h0) % tau
    if delta > pi:
        delta -= tau
    return lambda t: h0 + delta * t


def oklch(c0: Any, c1: Any) -> Callable[[float], Tuple[int, int, int]]:
    L0, C0, H0 = srgb_to_oklch(as_rgb(c0))
    L1, C1, H1 = srgb_to_oklch(as_rgb(c1))

    # a grey has no meaningful hue, borrow the other endpoint's
    grey0, grey1 = C0 < ACHROMATIC_EPS, C1 < ACHROMATIC_EPS
    if grey0 and grey1:
        H0 = H1 = 0.0
    elif grey0:
        H0 = H1
    elif grey1:
        H1 = H0

    il, ic, ih = lerp(L0, L1), lerp(C0, C1), angle(H0, H1)

    def _interp(t: float) -> Tuple[int, int, int]:
        return oklch_to_srgb((il(t), ic(t), ih(t)))

    return _interp


def eased(interpolate: Interpolator, easing: Easing) -> Interpolator:
    """Reparameterize ``interpolate`` so that ``t`` is eased before use."""

    def _build(a: Any, b: Any) -> Fn:
        base = interpolate(a, b)
        return lambda t: base(easing(t))

    return _build


def samples(fn: Fn, n: int) -> list:
    """``n`` evenly spaced samples of ``fn`` from ``t=0`` to ``t=1`` inclusive."""
    if not isinstance(n, int) or n < 2:
        raise InvalidArgument(f"n must be an integer >= 2, got: {n!r}")
    return [fn(i / (n - 1)) for i in range(n)]


__all__ = [
    "Interpolator",
    "ACHROMATIC_EPS",
    "lerp",
    "rgb",
    "oklab",
    "oklch",
    "angle",
    "eased",
    "samples",
]
