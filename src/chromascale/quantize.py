from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, List, Sequence, Tuple

from .errors import InvalidArgument, InvalidDomain, InvalidRange, UnknownRangeValue
from .numeric import is_number


def _domain(value: Any) -> Tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        a, b = value
        if is_number(a) and is_number(b):
            return a, b
    raise InvalidArgument(
        f"Quantize domain must be a 2-element list/tuple of numbers, got: {value!r}"
    )


@dataclass(frozen=True)
class Quantize:
    """
    Split a continuous domain into ``len(range)`` equal buckets.

    Inputs outside the domain clamp to the first/last range value. ``invert``
    returns the ``(x0, x1)`` extent of the bucket a range value owns.

    >>> s = Quantize(domain=(0, 100), range=("a", "b", "c", "d", "e"))
    >>> s.map(20), s.map(99.9), s.map(200)
    ('b', 'e', 'e')
    >>> s.invert("c")
    (40.0, 60.0)
    """

    domain: Tuple[float, float] = (0.0, 1.0)
    range: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", _domain(self.domain))
        if isinstance(self.range, (str, bytes)) or not isinstance(self.range, Sequence):
            raise InvalidArgument(
                f"Quantize range must be a list/tuple, got: {self.range!r}"
            )
        object.__setattr__(self, "range", tuple(self.range))

    def with_domain(self, domain) -> "Quantize":
        return replace(self, domain=domain)

    def with_range(self, range) -> "Quantize":
        return replace(self, range=range)

    def _lower(self, idx: int) -> float:
        # the one place bucket boundaries are computed; map, invert and
        # thresholds must agree on them exactly
        d0, d1 = self.domain
        return d0 + (d1 - d0) / len(self.range) * idx

    def map(self, x: Any) -> Any:
        if not is_number(x) or x != x:  # NaN
            raise InvalidArgument(f"Quantize expects a numeric input, got: {x!r}")
        d0, d1 = self.domain
        if not self.range:
            return None
        if d0 == d1 or x <= d0:
            return self.range[0]
        if x >= d1:
            return self.range[-1]
        n = len(self.range)
        idx = min(math.floor((x - d0) / (d1 - d0) * n), n - 1)
        # the floor can land one bucket off right at a boundary
        if idx < n - 1 and x >= self._lower(idx + 1):
            idx += 1
        elif idx > 0 and x < self._lower(idx):
            idx -= 1
        return self.range[idx]

    def invert(self, value: Any) -> Tuple[float, float]:
        d0, d1 = self.domain
        n = len(self.range)
        if n == 0:
            raise InvalidRange("Quantize range is empty")
        if d0 == d1:
            raise InvalidDomain(f"Quantize domain {self.domain!r} has zero width")
        try:
            idx = self.range.index(value)
        except ValueError:
            raise UnknownRangeValue(f"{value!r} is not in the range") from None
        x1 = d1 if idx == n - 1 else self._lower(idx + 1)
        return float(self._lower(idx)), float(x1)

    def thresholds(self) -> List[float]:
        """Interior bucket boundaries, ``n - 1`` of them, as ``invert`` reports them."""
        return [float(self._lower(i)) for i in range(1, len(self.range))]


__all__ = ["Quantize"]
