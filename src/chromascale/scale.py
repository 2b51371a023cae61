"""The uniform contract every scale implements.

Charting code can hold any scale and call ``domain``, ``range``, ``map`` and
``invert`` without knowing which variant it has::

    def axis_positions(scale: AnyScale, values):
        return [scale.map(v) for v in values]

``invert`` returns the inverted value, or raises a subclass of
``chromascale.errors.InvertError`` whose ``reason`` names the failure.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from .band import Band
from .linear import Linear
from .ordinal import Ordinal
from .quantize import Quantize


@runtime_checkable
class Scale(Protocol):
    domain: Any
    range: Any

    def map(self, value: Any) -> Any: ...

    def invert(self, value: Any) -> Any: ...


AnyScale = Union[Linear, Quantize, Band, Ordinal]

SCALES = (Linear, Quantize, Band, Ordinal)


__all__ = ["Scale", "AnyScale", "SCALES"]
