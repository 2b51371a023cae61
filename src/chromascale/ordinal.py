from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Hashable, Sequence, Tuple

from .errors import InvalidArgument, NotInvertible


def _seq(value: Any, label: str) -> Tuple[Any, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgument(f"Ordinal {label} must be a list/tuple, got: {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class Ordinal:
    """
    Index lookup from a discrete domain to a discrete range (e.g. a palette).

    The range repeats when the domain is longer; unknown values map to
    ``unknown``.

    >>> s = Ordinal(domain=("a", "b", "c"), range=(1, 2))
    >>> s.map("a"), s.map("c"), s.map("missing")
    (1, 1, None)
    """

    domain: Tuple[Hashable, ...] = ()
    range: Tuple[Any, ...] = ()
    unknown: Any = None
    index: Dict[Hashable, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", _seq(self.domain, "domain"))
        object.__setattr__(self, "range", _seq(self.range, "range"))
        object.__setattr__(
            self, "index", {value: i for i, value in enumerate(self.domain)}
        )

    def with_domain(self, domain) -> "Ordinal":
        return replace(self, domain=domain)

    def with_range(self, range) -> "Ordinal":
        return replace(self, range=range)

    def with_unknown(self, unknown: Any) -> "Ordinal":
        return replace(self, unknown=unknown)

    def map(self, value: Any) -> Any:
        idx = self.index.get(value)
        if idx is None or not self.range:
            return self.unknown
        return self.range[idx % len(self.range)]

    def invert(self, value: Any) -> Any:
        raise NotInvertible("Ordinal scales are not invertible")


__all__ = ["Ordinal"]
