"""Diagonal projection of histogram bins onto the identity line.

A paired scatterplot places each subject at ``(x, y)``; the identity line
``y = x`` marks equal measurements. The helpers in this module take a
histogram of the paired differences ``x - y`` and rotate every bin by 45
degrees so that the histogram stands on the identity line: the difference
axis runs perpendicular to the diagonal and bin heights run along it.

Each corner of a bin is treated as the hypotenuse of a right isosceles
triangle whose legs give the horizontal and vertical displacement from a
point ``(origin, origin)`` on the diagonal. All functions are pure; the
rendering of the resulting shapes lives in :mod:`paired_plots.layers`.
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from paired_plots.errors import (
    AxisScaleMismatchError,
    AxisScaleMismatchWarning,
    DegenerateGeometryError,
    InvalidInputError,
)

Point = Tuple[float, float]

ROTATION_DEGREES = 45.0
# cos and sin coincide at 45 degrees.
COS_45 = math.cos(math.radians(ROTATION_DEGREES))


@dataclass(frozen=True)
class HistogramBin:
    """One histogram bin with its height normalised to the tallest bin.

    Parameters
    ----------
    x_min:
        Lower edge of the bin on the difference axis.
    x_max:
        Upper edge of the bin on the difference axis.
    relative_height:
        Bin height divided by the tallest bin height, in ``[0, 1]``.
    """

    x_min: float
    x_max: float
    relative_height: float


@dataclass(frozen=True)
class Anchor:
    """Placement of the rotated histogram on the identity line.

    Parameters
    ----------
    origin:
        Coordinate on the identity line treated as zero difference; the
        histogram base passes through ``(origin, origin)``.
    max_height:
        Extent of the tallest bin along the identity line.
    """

    origin: float
    max_height: float


@dataclass(frozen=True)
class RotatedPolygon:
    """Four corners of a rotated bin: bottom-left, bottom-right, top-right, top-left."""

    points: Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class MeanIndicator:
    """Line segment marking the mean difference across the histogram.

    Parameters
    ----------
    segment:
        ``(bottom, top)`` end points of the projected mean line.
    label_offset:
        Distance along ``(+1, +1)`` from the top end point to the label
        position used for significance markers.
    """

    segment: Tuple[Point, Point]
    label_offset: float = 0.0

    @property
    def label_point(self) -> Point:
        top_x, top_y = self.segment[1]
        return top_x + self.label_offset, top_y + self.label_offset


def _sign(value: float) -> float:
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0


def validate_anchor(anchor: Anchor) -> None:
    """Raise :class:`InvalidInputError` when ``anchor`` cannot place a histogram."""

    if not math.isfinite(anchor.origin):
        raise InvalidInputError(f"Anchor origin must be finite, got {anchor.origin}")
    if not math.isfinite(anchor.max_height) or anchor.max_height <= 0.0:
        raise InvalidInputError(
            f"Anchor max_height must be a positive number, got {anchor.max_height}"
        )


def project_point(hypotenuse: float, origin: float) -> Point:
    """Return the rotated position of one corner.

    Parameters
    ----------
    hypotenuse:
        Signed difference score for the corner. Positive values (x larger
        than y) land below the identity line, negative values above it.
    origin:
        Position on the identity line that the corner is measured from.

    Returns
    -------
    Tuple[float, float]
        ``(x, y)`` coordinates in the scatterplot frame. A zero hypotenuse
        collapses onto ``(origin, origin)``.

    Raises
    ------
    DegenerateGeometryError
        If either argument is NaN or infinite.
    """

    if not (math.isfinite(hypotenuse) and math.isfinite(origin)):
        raise DegenerateGeometryError(
            f"Cannot project hypotenuse={hypotenuse} from origin={origin}"
        )
    if hypotenuse == 0.0:
        return origin, origin

    leg = hypotenuse * COS_45
    # Equivalent to h**2 / (2 * h) without dividing by zero.
    y_offset = hypotenuse / 2.0
    x_offset = math.sqrt(max(leg * leg - y_offset * y_offset, 0.0))

    y_coord = origin - y_offset
    x_coord = origin - _sign(y_coord - origin) * x_offset
    return x_coord, y_coord


def project_bins(
    bins: Sequence[HistogramBin], anchor: Anchor
) -> List[RotatedPolygon]:
    """Rotate every histogram bin onto the identity line.

    Parameters
    ----------
    bins:
        Non-empty sequence of bins with relative heights in ``[0, 1]``.
    anchor:
        Base origin and height of the tallest bin.

    Returns
    -------
    List[RotatedPolygon]
        One polygon per bin, in input order.

    Raises
    ------
    InvalidInputError
        If ``bins`` is empty, a relative height falls outside ``[0, 1]``,
        or the anchor is invalid.
    """

    if not bins:
        raise InvalidInputError("Cannot project an empty set of histogram bins")
    validate_anchor(anchor)
    for index, hist_bin in enumerate(bins):
        if not 0.0 <= hist_bin.relative_height <= 1.0:
            raise InvalidInputError(
                f"Bin {index} has relative height {hist_bin.relative_height}; "
                "expected a value in [0, 1]"
            )

    polygons: List[RotatedPolygon] = []
    for hist_bin in bins:
        bottom = anchor.origin
        top = anchor.origin + anchor.max_height * hist_bin.relative_height
        corners = (
            project_point(hist_bin.x_min, bottom),
            project_point(hist_bin.x_max, bottom),
            project_point(hist_bin.x_max, top),
            project_point(hist_bin.x_min, top),
        )
        polygons.append(RotatedPolygon(points=corners))

    logging.debug("Projected %d histogram bins from origin %s", len(bins), anchor.origin)
    return polygons


def project_mean_indicator(
    mean_value: float,
    anchor: Anchor,
    extension_offset: float = 0.0,
    label_offset: float = 0.0,
) -> MeanIndicator:
    """Project the mean difference as a segment spanning the histogram.

    The segment runs from ``origin - extension_offset`` to
    ``origin + max_height + extension_offset`` along the identity line,
    displaced perpendicular to it by ``mean_value``.
    """

    validate_anchor(anchor)
    bottom = project_point(mean_value, anchor.origin - extension_offset)
    top = project_point(
        mean_value, anchor.origin + anchor.max_height + extension_offset
    )
    return MeanIndicator(segment=(bottom, top), label_offset=label_offset)


def check_axis_scales(
    x_range: Sequence[float],
    y_range: Sequence[float],
    *,
    strict: bool,
    tolerance: float = 1e-9,
) -> bool:
    """Return whether the x and y axis ranges match.

    Parameters
    ----------
    x_range, y_range:
        ``(lower, upper)`` limits of each axis.
    strict:
        When true a mismatch raises :class:`AxisScaleMismatchError`;
        otherwise :class:`AxisScaleMismatchWarning` is issued and the caller
        may continue drawing.
    tolerance:
        Absolute tolerance applied to each limit.
    """

    x_low, x_high = (float(value) for value in x_range)
    y_low, y_high = (float(value) for value in y_range)
    if math.isclose(x_low, y_low, abs_tol=tolerance) and math.isclose(
        x_high, y_high, abs_tol=tolerance
    ):
        return True

    message = (
        f"The axes are not identically scaled (x: {x_low:g}..{x_high:g}, "
        f"y: {y_low:g}..{y_high:g})"
    )
    if strict:
        raise AxisScaleMismatchError(message)
    logging.warning("%s; overlay will probably be misleading.", message)
    warnings.warn(message, AxisScaleMismatchWarning, stacklevel=2)
    return False


__all__ = [
    "Point",
    "COS_45",
    "HistogramBin",
    "Anchor",
    "RotatedPolygon",
    "MeanIndicator",
    "validate_anchor",
    "project_point",
    "project_bins",
    "project_mean_indicator",
    "check_axis_scales",
]
