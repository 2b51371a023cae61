from __future__ import annotations

from math import cos, pi
from typing import Callable

from .errors import InvalidArgument
from .numeric import clamp01

Easing = Callable[[float], float]


def _normalize(t: float, edge0: float, edge1: float) -> float:
    if edge0 == edge1:
        raise InvalidArgument(f"easing edges must differ, got {edge0} and {edge1}")
    return clamp01((t - edge0) / (edge1 - edge0))


def smoothstep(t: float, edge0: float = 0.0, edge1: float = 1.0) -> float:
    """Hermite ease, ``3t² - 2t³`` over ``t`` rescaled from ``[edge0, edge1]``."""
    u = _normalize(t, edge0, edge1)
    return u * u * (3.0 - 2.0 * u)


def smootherstep(t: float, edge0: float = 0.0, edge1: float = 1.0) -> float:
    """Perlin's ``6t⁵ - 15t⁴ + 10t³``, flat first and second derivative at the edges."""
    u = _normalize(t, edge0, edge1)
    return u * u * u * (u * (u * 6.0 - 15.0) + 10.0)


def linear(t: float) -> float:
    return t


def cosine(t: float) -> float:
    # ease-in/out, denser near both ends
    return 0.5 - 0.5 * cos(pi * clamp01(t))


def ease_in(gamma: float = 1.35) -> Easing:
    """Power ease concentrating samples toward the start (``t**gamma``)."""
    g = max(1.001, float(gamma))

    def _ease(t: float) -> float:
        return clamp01(t) ** g

    return _ease


def ease_out(gamma: float = 1.35) -> Easing:
    g = max(1.001, float(gamma))

    def _ease(t: float) -> float:
        return 1.0 - (1.0 - clamp01(t)) ** g

    return _ease


__all__ = [
    "Easing",
    "smoothstep",
    "smootherstep",
    "linear",
    "cosine",
    "ease_in",
    "ease_out",
]
