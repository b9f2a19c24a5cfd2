"""Exceptions and warnings raised by the paired-plot annotation helpers."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when caller-supplied data violates an input contract."""


class DegenerateGeometryError(ArithmeticError):
    """Raised when a coordinate cannot be projected (NaN or infinite input)."""


class AxisScaleMismatchError(InvalidInputError):
    """Raised when a strict overlay is drawn on axes with unequal ranges."""


class AxisScaleMismatchWarning(UserWarning):
    """Issued when a decorative overlay is drawn on unequally scaled axes."""


__all__ = [
    "InvalidInputError",
    "DegenerateGeometryError",
    "AxisScaleMismatchError",
    "AxisScaleMismatchWarning",
]
