from __future__ import annotations

import logging
import math
from dataclasses import InitVar, dataclass, field, replace
from typing import Any, Dict, Hashable, Iterable, Optional, Tuple

from .errors import InvalidArgument, NotInvertible
from .numeric import is_number, round_half_away

log = logging.getLogger(__name__)

DEFAULT_ALIGN = 0.5


def _range(value: Any) -> Tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        a, b = value
        if is_number(a) and is_number(b):
            return a, b
    raise InvalidArgument(
        f"Band range must be a 2-element list/tuple of numbers, got: {value!r}"
    )


def _padding(p: Any, label: str) -> float:
    if is_number(p) and p >= 0:
        return float(p)
    raise InvalidArgument(f"Band {label} must be a number >= 0, got: {p!r}")


def _align(a: Any) -> float:
    if is_number(a) and 0 <= a <= 1:
        return float(a)
    raise InvalidArgument(f"Band align must be a number in [0, 1], got: {a!r}")


@dataclass(frozen=True)
class Band:
    """
    Lay out discrete domain values as uniform bands inside a numeric range.

    ``map`` returns the band *start*; the band covers
    ``[map(v), map(v) + bandwidth)``. Use ``center`` for label positions.
    Values outside the domain map to ``None``.

    >>> s = Band(domain=("a", "b", "c"), range=(0, 300))
    >>> s.map("a"), s.map("b"), s.bandwidth
    (0.0, 100.0, 100.0)

    Options
    -------
    padding_inner – fraction of the step left empty between bands.
    padding_outer – space before the first / after the last band, in steps.
    padding       – sets both of the above (init only).
    align         – where leftover space goes: 0 start, 0.5 centred, 1 end.
    round         – snap step, start and bandwidth to whole pixels.

    ``index``, ``step`` and ``bandwidth`` are derived and recomputed on every
    construction, so every ``with_*`` call yields a fully laid out scale.
    """

    domain: Tuple[Hashable, ...] = ()
    range: Tuple[float, float] = (0.0, 1.0)
    padding_inner: float = 0.0
    padding_outer: float = 0.0
    align: float = DEFAULT_ALIGN
    round: bool = False
    padding: InitVar[Optional[float]] = None

    index: Dict[Hashable, float] = field(init=False, repr=False, compare=False)
    step: float = field(init=False, compare=False)
    bandwidth: float = field(init=False, compare=False)

    def __post_init__(self, padding: Optional[float]) -> None:
        if isinstance(self.domain, (str, bytes)) or not isinstance(
            self.domain, Iterable
        ):
            raise InvalidArgument(f"Band domain must be a list, got: {self.domain!r}")
        object.__setattr__(self, "domain", tuple(self.domain))
        object.__setattr__(self, "range", _range(self.range))
        if padding is not None:
            p = _padding(padding, "padding")
            object.__setattr__(self, "padding_inner", p)
            object.__setattr__(self, "padding_outer", p)
        else:
            object.__setattr__(
                self, "padding_inner", _padding(self.padding_inner, "padding_inner")
            )
            object.__setattr__(
                self, "padding_outer", _padding(self.padding_outer, "padding_outer")
            )
        object.__setattr__(self, "align", _align(self.align))
        if not isinstance(self.round, bool):
            raise InvalidArgument(f"Band round must be boolean, got: {self.round!r}")
        self._rescale()

    def _rescale(self) -> None:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (float(r1), float(r0)) if reverse else (float(r0), float(r1))
        pi, po = self.padding_inner, self.padding_outer

        if n == 0:
            step = 0.0
        else:
            step = (stop - start) / max(1.0, n - pi + po * 2.0)
        if self.round:
            step = float(math.floor(step))

        if n:
            start += (stop - start - step * (n - pi)) * self.align
        bandwidth = step * (1.0 - pi)
        if self.round:
            start = float(round_half_away(start))
            bandwidth = float(round_half_away(bandwidth))

        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()
        # duplicates: the last occurrence wins
        index = dict(zip(self.domain, positions))

        log.debug(
            "band layout n=%d step=%g bandwidth=%g start=%g reverse=%s",
            n,
            step,
            bandwidth,
            start,
            reverse,
        )
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "step", step)
        object.__setattr__(self, "bandwidth", bandwidth)

    def with_domain(self, domain) -> "Band":
        return replace(self, domain=domain)

    def with_range(self, range) -> "Band":
        return replace(self, range=range)

    def with_padding(self, padding: float) -> "Band":
        return replace(self, padding=padding)

    def with_padding_inner(self, padding_inner: float) -> "Band":
        return replace(self, padding_inner=padding_inner)

    def with_padding_outer(self, padding_outer: float) -> "Band":
        return replace(self, padding_outer=padding_outer)

    def with_align(self, align: float) -> "Band":
        return replace(self, align=align)

    def with_round(self, round: bool) -> "Band":
        return replace(self, round=round)

    def map(self, value: Any) -> Optional[float]:
        return self.index.get(value)

    def center(self, value: Any) -> Optional[float]:
        start = self.index.get(value)
        return None if start is None else start + self.bandwidth / 2

    def invert(self, value: Any) -> Any:
        raise NotInvertible("Band scales are not invertible")


__all__ = ["Band", "DEFAULT_ALIGN"]
