"""
Tests for the diagonal histogram projection.
"""

from __future__ import annotations

import math

import pytest

from paired_plots.errors import (
    AxisScaleMismatchError,
    AxisScaleMismatchWarning,
    DegenerateGeometryError,
    InvalidInputError,
)
from paired_plots.geometry import (
    Anchor,
    HistogramBin,
    project_bins,
    project_mean_indicator,
    project_point,
    check_axis_scales,
)


def _diagonal_offset(point, origin: float) -> float:
    """Return how far ``point`` sits along the identity line from ``origin``."""

    return (point[0] + point[1]) / 2.0 - origin


def test_project_bins_matches_hand_computed_corners() -> None:
    """Two bins anchored at (100, 50) should land on the trigonometric corners."""

    bins = [
        HistogramBin(x_min=0.0, x_max=10.0, relative_height=0.5),
        HistogramBin(x_min=10.0, x_max=20.0, relative_height=1.0),
    ]
    anchor = Anchor(origin=100.0, max_height=50.0)

    polygons = project_bins(bins, anchor)

    assert len(polygons) == 2
    # leg = 10 * cos(45) ~= 7.071, offsets sqrt(50 - 25) = 5 on both axes.
    first = polygons[0].points
    assert first[0] == pytest.approx((100.0, 100.0))
    assert first[1] == pytest.approx((105.0, 95.0))
    assert first[2] == pytest.approx((130.0, 120.0))
    assert first[3] == pytest.approx((125.0, 125.0))

    second = polygons[1].points
    assert second[0] == pytest.approx((105.0, 95.0))
    assert second[1] == pytest.approx((110.0, 90.0))
    assert second[2] == pytest.approx((160.0, 140.0))
    assert second[3] == pytest.approx((155.0, 145.0))
    assert _diagonal_offset(second[2], 100.0) == pytest.approx(50.0)
    assert _diagonal_offset(second[3], 100.0) == pytest.approx(50.0)


def test_full_height_bins_reach_max_height() -> None:
    """Every bin with relative height 1 should top out at max_height."""

    bins = [
        HistogramBin(x_min=-30.0, x_max=-12.5, relative_height=1.0),
        HistogramBin(x_min=-12.5, x_max=4.0, relative_height=0.3),
        HistogramBin(x_min=4.0, x_max=21.0, relative_height=1.0),
    ]
    anchor = Anchor(origin=-7.0, max_height=12.0)

    polygons = project_bins(bins, anchor)

    for hist_bin, polygon in zip(bins, polygons):
        bottom_left, bottom_right, top_right, top_left = polygon.points
        assert _diagonal_offset(bottom_left, -7.0) == pytest.approx(0.0)
        assert _diagonal_offset(bottom_right, -7.0) == pytest.approx(0.0)
        expected = 12.0 * hist_bin.relative_height
        assert _diagonal_offset(top_right, -7.0) == pytest.approx(expected)
        assert _diagonal_offset(top_left, -7.0) == pytest.approx(expected)


def test_zero_width_bin_has_coinciding_edges() -> None:
    """A bin with x_min == x_max should collapse its left and right edges."""

    polygon = project_bins(
        [HistogramBin(x_min=6.0, x_max=6.0, relative_height=0.8)],
        Anchor(origin=20.0, max_height=5.0),
    )[0]

    bottom_left, bottom_right, top_right, top_left = polygon.points
    assert bottom_left == bottom_right
    assert top_left == top_right


def test_project_bins_is_idempotent() -> None:
    """Repeated calls with the same inputs should return identical output."""

    bins = [
        HistogramBin(x_min=-3.0, x_max=1.5, relative_height=0.25),
        HistogramBin(x_min=1.5, x_max=6.0, relative_height=1.0),
    ]
    anchor = Anchor(origin=42.0, max_height=9.0)

    assert project_bins(bins, anchor) == project_bins(bins, anchor)


@pytest.mark.parametrize("hypotenuse", [0.5, 3.0, 17.25, 1200.0])
def test_project_point_is_sign_symmetric(hypotenuse: float) -> None:
    """Opposite hypotenuses should reflect across the origin on both axes."""

    origin = 250.0
    pos_x, pos_y = project_point(hypotenuse, origin)
    neg_x, neg_y = project_point(-hypotenuse, origin)

    assert pos_x - origin == pytest.approx(-(neg_x - origin))
    assert pos_y - origin == pytest.approx(-(neg_y - origin))
    # Positive differences (x > y) fall below the identity line.
    assert pos_x > pos_y
    assert neg_x < neg_y


def test_project_point_preserves_difference() -> None:
    """The projected point should keep x - y equal to the hypotenuse."""

    x_coord, y_coord = project_point(-8.0, 3.0)

    assert x_coord - y_coord == pytest.approx(-8.0)
    assert x_coord == pytest.approx(-1.0)
    assert y_coord == pytest.approx(7.0)


def test_zero_hypotenuse_collapses_to_origin() -> None:
    """A zero hypotenuse should resolve to the origin without raising."""

    assert project_point(0.0, 12.5) == (12.5, 12.5)

    polygon = project_bins(
        [HistogramBin(x_min=0.0, x_max=0.0, relative_height=0.0)],
        Anchor(origin=1.0, max_height=2.0),
    )[0]
    assert all(point == (1.0, 1.0) for point in polygon.points)


@pytest.mark.parametrize(
    "hypotenuse,origin",
    [(math.nan, 0.0), (math.inf, 0.0), (1.0, -math.inf)],
)
def test_project_point_rejects_non_finite_input(hypotenuse: float, origin: float) -> None:
    """NaN or infinite inputs cannot be projected."""

    with pytest.raises(DegenerateGeometryError):
        project_point(hypotenuse, origin)


def test_project_bins_rejects_empty_bins() -> None:
    """An empty bin list is an input contract violation."""

    with pytest.raises(InvalidInputError):
        project_bins([], Anchor(origin=0.0, max_height=1.0))


@pytest.mark.parametrize("height", [-0.1, 1.5])
def test_project_bins_rejects_out_of_range_heights(height: float) -> None:
    """Relative heights must stay within [0, 1]."""

    bins = [
        HistogramBin(x_min=0.0, x_max=1.0, relative_height=1.0),
        HistogramBin(x_min=1.0, x_max=2.0, relative_height=height),
    ]
    with pytest.raises(InvalidInputError, match="Bin 1"):
        project_bins(bins, Anchor(origin=0.0, max_height=1.0))


@pytest.mark.parametrize("max_height", [0.0, -4.0, math.nan])
def test_project_bins_rejects_non_positive_max_height(max_height: float) -> None:
    """The anchor height must be a positive number."""

    with pytest.raises(InvalidInputError):
        project_bins(
            [HistogramBin(x_min=0.0, x_max=1.0, relative_height=1.0)],
            Anchor(origin=0.0, max_height=max_height),
        )


def test_mean_indicator_endpoints() -> None:
    """The mean line should span the histogram plus the extension on both ends."""

    indicator = project_mean_indicator(
        15.0, Anchor(origin=100.0, max_height=50.0), extension_offset=5.0
    )

    bottom, top = indicator.segment
    # Origins 95 and 155, each shifted by (+7.5, -7.5).
    assert bottom == pytest.approx((102.5, 87.5))
    assert top == pytest.approx((162.5, 147.5))


def test_mean_indicator_label_point_offsets_along_diagonal() -> None:
    """The label point should sit label_offset along (+1, +1) from the top."""

    indicator = project_mean_indicator(
        -4.0,
        Anchor(origin=10.0, max_height=6.0),
        extension_offset=1.0,
        label_offset=2.5,
    )

    top_x, top_y = indicator.segment[1]
    assert top_x == pytest.approx(15.0)
    assert top_y == pytest.approx(19.0)
    assert indicator.label_point == pytest.approx((17.5, 21.5))


def test_mean_indicator_negative_mean_lies_above_identity() -> None:
    """A negative mean difference (y larger than x) sits above the diagonal."""

    indicator = project_mean_indicator(-10.0, Anchor(origin=50.0, max_height=20.0))

    for x_coord, y_coord in indicator.segment:
        assert y_coord > x_coord


def test_check_axis_scales_accepts_equal_ranges() -> None:
    """Identical ranges pass in both strict and lenient modes."""

    assert check_axis_scales((0.0, 1500.0), (0.0, 1500.0), strict=True)
    assert check_axis_scales((0.0, 1500.0), (0.0, 1500.0 + 1e-12), strict=False)


def test_check_axis_scales_strict_raises() -> None:
    """Strict callers should get an error on mismatched ranges."""

    with pytest.raises(AxisScaleMismatchError):
        check_axis_scales((0.0, 10.0), (0.0, 20.0), strict=True)


def test_check_axis_scales_lenient_warns() -> None:
    """Lenient callers should get a warning and a False result."""

    with pytest.warns(AxisScaleMismatchWarning):
        result = check_axis_scales((0.0, 10.0), (-5.0, 10.0), strict=False)
    assert result is False
