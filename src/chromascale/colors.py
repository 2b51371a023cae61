from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

import numpy as np
from coloraide import Color

from .errors import InvalidArgument
from .numeric import clamp_u8, is_number

log = logging.getLogger(__name__)

RGB = Tuple[float, float, float]


def parse_color(s: str) -> Tuple[int, int, int]:
    """Parse any CSS colour string into an 8-bit sRGB triple."""
    try:
        color = Color(s.strip())
    except ValueError as exc:
        raise InvalidArgument(f"invalid color: {s!r}") from exc
    srgb = color.convert("srgb").fit(method="clip")
    r, g, b = (clamp_u8(float(c) * 255.0) for c in srgb.coords())
    log.debug("parsed %r as (%d, %d, %d)", s, r, g, b)
    return r, g, b


def as_rgb(value: Any) -> RGB:
    """
    Coerce a colour endpoint to an ``(r, g, b)`` triple on the 0–255 scale.
    Strings go through ColorAide; numeric triples pass through untouched so
    ``rgb`` can still lerp fractional channels.
    """
    if isinstance(value, str):
        return parse_color(value)
    if (
        isinstance(value, (Sequence, np.ndarray))
        and len(value) == 3
        and all(is_number(c) for c in value)
    ):
        r, g, b = value
        return r, g, b
    raise InvalidArgument(
        f"expected an (r, g, b) triple or a color string, got: {value!r}"
    )


def to_hex(rgb: Sequence[float]) -> str:
    r, g, b = (clamp_u8(c) for c in as_rgb(rgb))
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = ["parse_color", "as_rgb", "to_hex"]
