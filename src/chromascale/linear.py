from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple

from .errors import InvalidArgument, InvalidRange
from .interpolate import Interpolator, lerp
from .numeric import clamp01, is_number


def _pair(value: Any, label: str, *, numeric: bool) -> Tuple[Any, Any]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        a, b = value
        if numeric and not (is_number(a) and is_number(b)):
            raise InvalidArgument(
                f"Linear {label} endpoints must be numbers, got: {value!r}"
            )
        return a, b
    raise InvalidArgument(
        f"Linear {label} must be a 2-element list/tuple, got: {value!r}"
    )


@dataclass(frozen=True)
class Linear:
    """
    Continuous scale from a numeric domain to any interpolatable range.

    >>> s = Linear(domain=(0, 10), range=(0, 800))
    >>> s.map(2.5)
    200.0
    >>> s.invert(200)
    2.5

    A colour range works the same way but cannot be inverted:

    >>> from chromascale.interpolate import rgb
    >>> red_blue = Linear(range=((255, 0, 0), (0, 0, 255)), interpolate=rgb)
    >>> red_blue.map(0.5)
    (128, 0, 128)

    A zero-width domain maps everything to the start of the range.
    """

    domain: Tuple[float, float] = (0.0, 1.0)
    range: Tuple[Any, Any] = (0.0, 1.0)
    interpolate: Interpolator = lerp
    clamp: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", _pair(self.domain, "domain", numeric=True))
        object.__setattr__(self, "range", _pair(self.range, "range", numeric=False))
        if not callable(self.interpolate):
            raise InvalidArgument(
                f"Linear interpolate must be callable, got: {self.interpolate!r}"
            )
        if not isinstance(self.clamp, bool):
            raise InvalidArgument(f"Linear clamp must be boolean, got: {self.clamp!r}")

    def with_domain(self, domain) -> "Linear":
        return replace(self, domain=domain)

    def with_range(self, range) -> "Linear":
        return replace(self, range=range)

    def with_interpolate(self, interpolate: Interpolator) -> "Linear":
        return replace(self, interpolate=interpolate)

    def with_clamp(self, clamp: bool) -> "Linear":
        return replace(self, clamp=clamp)

    def map(self, x: Any) -> Any:
        if not is_number(x):
            raise InvalidArgument(f"Linear expects a numeric input, got: {x!r}")
        d0, d1 = self.domain
        denom = d1 - d0
        t = 0.0 if denom == 0 else (x - d0) / denom
        if self.clamp:
            t = clamp01(t)
        r0, r1 = self.range
        return self.interpolate(r0, r1)(t)

    def invert(self, y: Any) -> float:
        r0, r1 = self.range
        if not (is_number(r0) and is_number(r1) and is_number(y)):
            raise InvalidRange(f"cannot invert a non-numeric range {self.range!r}")
        denom = r1 - r0
        if denom == 0:
            raise InvalidRange(f"cannot invert a zero-width range {self.range!r}")
        t = (y - r0) / denom
        if self.clamp:
            t = clamp01(t)
        d0, d1 = self.domain
        return d0 + t * (d1 - d0)


__all__ = ["Linear"]
