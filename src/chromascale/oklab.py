# oklab.py – 8-bit sRGB ↔ OKLab ↔ OKLCH
#   - sRGB companding with gamma 2.4 and IEC 61966-2-1 thresholds
#   - Björn Ottosson's OKLab matrices, white-balanced so greys have zero chroma
#   - polar OKLCH with hue in radians, atan2 convention

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .numeric import clamp_u8

RGB8 = Tuple[int, int, int]
LCh = Tuple[float, float, float]

# --- constants ---------------------------------------------------------------
_GAMMA = 2.4
_DECODE_THRESHOLD = 0.04045
_ENCODE_THRESHOLD = 0.0031308

# --- 1) OKLab matrices --------------------------------------------------------
# Ottosson's published 10-digit constants. Their rows do not sum exactly to
# 1 (or 0), which leaves greys with ~1e-8 of chroma and a noise hue, so the
# rows are re-balanced below and the inverses taken from the corrected pair.
_LRGB_TO_LMS_PUBLISHED = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_LAB_PUBLISHED = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)


def _white_balanced(lrgb_to_lms: np.ndarray, lms_to_lab: np.ndarray):
    # white (1, 1, 1) → LMS (1, 1, 1) → Lab (1, 0, 0)
    m1 = lrgb_to_lms / lrgb_to_lms.sum(axis=1, keepdims=True)
    m2 = lms_to_lab.copy()
    m2[0] /= m2[0].sum()
    m2[1:] -= m2[1:].sum(axis=1, keepdims=True) / 3.0
    return m1, m2


_LRGB_TO_LMS, _LMS_TO_LAB = _white_balanced(
    _LRGB_TO_LMS_PUBLISHED, _LMS_TO_LAB_PUBLISHED
)
_LAB_TO_LMS = np.linalg.inv(_LMS_TO_LAB)
_LMS_TO_LRGB = np.linalg.inv(_LRGB_TO_LMS)


# --- 2) IEC 61966-2-1 companding --------------------------------------------
def _uncompand(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, np.float64)
    m = v > _DECODE_THRESHOLD
    out = np.empty_like(v)
    out[m] = ((v[m] + 0.055) / 1.055) ** _GAMMA
    out[~m] = v[~m] / 12.92
    return out


def _compand(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, np.float64)
    m = v > _ENCODE_THRESHOLD
    out = np.empty_like(v)
    out[m] = 1.055 * np.power(v[m], 1 / _GAMMA) - 0.055
    out[~m] = v[~m] * 12.92
    return out


def srgb_to_linear(rgb: Sequence[float]) -> np.ndarray:
    """8-bit sRGB channels (0–255) → linear-light RGB in [0, 1]."""
    return _uncompand(np.asarray(rgb, np.float64) / 255.0)


def linear_to_srgb(lrgb: np.ndarray) -> RGB8:
    """Linear-light RGB → 8-bit sRGB, clamped to the displayable gamut."""
    srgb = np.clip(_compand(lrgb), 0.0, 1.0) * 255.0
    r, g, b = (clamp_u8(float(c)) for c in srgb)
    return r, g, b


# --- 3) sRGB ↔ OKLab ------------------------------------------------------------
def srgb_to_oklab(rgb: Sequence[float]) -> np.ndarray:
    lms = _LRGB_TO_LMS @ srgb_to_linear(rgb)
    # np.cbrt is the signed cube root, negative LMS stays negative
    return _LMS_TO_LAB @ np.cbrt(lms)


def oklab_to_srgb(lab: Sequence[float]) -> RGB8:
    lms_ = _LAB_TO_LMS @ np.asarray(lab, np.float64)
    return linear_to_srgb(_LMS_TO_LRGB @ lms_**3)


# --- 4) OKLab ↔ OKLCH -----------------------------------------------------------
def oklab_to_oklch(lab: Sequence[float]) -> LCh:
    L, a, b = (float(v) for v in lab)
    return L, math.sqrt(a * a + b * b), math.atan2(b, a)


def oklch_to_oklab(lch: Sequence[float]) -> np.ndarray:
    L, C, H = (float(v) for v in lch)
    return np.array([L, C * math.cos(H), C * math.sin(H)], dtype=np.float64)


def srgb_to_oklch(rgb: Sequence[float]) -> LCh:
    return oklab_to_oklch(srgb_to_oklab(rgb))


def oklch_to_srgb(lch: Sequence[float]) -> RGB8:
    return oklab_to_srgb(oklch_to_oklab(lch))


__all__ = [
    "RGB8",
    "srgb_to_linear",
    "linear_to_srgb",
    "srgb_to_oklab",
    "oklab_to_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "srgb_to_oklch",
    "oklch_to_srgb",
]
