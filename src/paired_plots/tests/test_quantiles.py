"""
Tests for quantile guide line construction.
"""

from __future__ import annotations

import math

import pytest

from paired_plots.errors import InvalidInputError
from paired_plots.quantiles import (
    DEFAULT_MIDDLE_STYLE,
    DEFAULT_STYLE,
    middle_indices,
    quantile_line_layers,
    quantile_points,
)
from paired_plots.style import LineStyle


@pytest.mark.parametrize(
    "count,expected",
    [(1, {0}), (2, {0, 1}), (3, {1}), (4, {1, 2}), (5, {2}), (0, set())],
)
def test_middle_indices(count: int, expected: set) -> None:
    """Odd counts have one middle line, even counts have two."""

    assert middle_indices(count) == expected


def test_quantile_points_interpolate_linearly() -> None:
    """Quantiles should interpolate between order statistics and skip NaN."""

    points = quantile_points(
        [1.0, 2.0, 3.0, 4.0, 5.0, math.nan],
        [10.0, 20.0, 30.0, 40.0, 50.0, 60.0],
        [0.25, 0.5, 0.75],
    )

    assert points[0] == pytest.approx((2.0, 22.5))
    assert points[1] == pytest.approx((3.0, 35.0))
    assert points[2] == pytest.approx((4.0, 47.5))


@pytest.mark.parametrize("probs", [[], [0.5, 1.2], [-0.1]])
def test_quantile_points_rejects_invalid_probs(probs) -> None:
    """Probabilities must be present and within [0, 1]."""

    with pytest.raises(InvalidInputError):
        quantile_points([1.0, 2.0], [1.0, 2.0], probs)


def test_quantile_points_rejects_empty_columns() -> None:
    """A column without observations has no quantiles."""

    with pytest.raises(InvalidInputError):
        quantile_points([math.nan], [1.0], [0.5])


def test_quantile_line_layers_alternate_and_style_middle() -> None:
    """Segments alternate horizontal/vertical and the median uses the middle style."""

    x_values = [1.0, 2.0, 3.0, 4.0, 5.0]
    y_values = [2.0, 4.0, 6.0, 8.0, 10.0]

    layers = quantile_line_layers(x_values, y_values, [0.25, 0.5, 0.75])

    assert len(layers) == 6
    horizontal, vertical = layers[2], layers[3]
    assert horizontal.start == (-math.inf, pytest.approx(6.0))
    assert horizontal.end == pytest.approx((3.0, 6.0))
    assert vertical.start == (pytest.approx(3.0), -math.inf)
    assert vertical.end == pytest.approx((3.0, 6.0))

    assert [layer.style for layer in layers] == [
        DEFAULT_STYLE,
        DEFAULT_STYLE,
        DEFAULT_MIDDLE_STYLE,
        DEFAULT_MIDDLE_STYLE,
        DEFAULT_STYLE,
        DEFAULT_STYLE,
    ]


def test_quantile_line_layers_custom_styles() -> None:
    """Custom styles should be applied to the matching segments."""

    middle = LineStyle(colour="black", linewidth=0.5, linestyle="longdash")
    other = LineStyle(colour="grey", linewidth=0.25, linestyle="dashed")

    layers = quantile_line_layers(
        [1.0, 2.0], [1.0, 2.0], [0.1, 0.9], middle_style=middle, style=other
    )

    # Two probabilities means both are middle lines.
    assert all(layer.style == middle for layer in layers)


def test_quantile_points_rejects_infinite_values() -> None:
    """Infinite observations produce an input error."""

    with pytest.raises(InvalidInputError):
        quantile_points([1.0, math.inf], [1.0, 2.0], [0.5])
