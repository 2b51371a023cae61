from __future__ import annotations


class ScaleError(Exception):
    """Base class for every error raised by chromascale."""


class InvalidArgument(ScaleError, ValueError):
    """Non-numeric input, mismatched shapes, degenerate easing edges or bad options."""


class InvertError(ScaleError, ValueError):
    reason = "invert_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason.replace("_", " "))


class NotInvertible(InvertError):
    reason = "not_invertible"


class UnknownRangeValue(InvertError):
    reason = "unknown_range_value"


class InvalidDomain(InvertError):
    reason = "invalid_domain"


class InvalidRange(InvertError):
    reason = "invalid_range"


__all__ = [
    "ScaleError",
    "InvalidArgument",
    "InvertError",
    "NotInvertible",
    "UnknownRangeValue",
    "InvalidDomain",
    "InvalidRange",
]
