"""Quantile guide lines for paired scatterplots.

For each requested probability the lines run horizontally from the left
edge of the panel to the ``(q_x, q_y)`` quantile point and vertically from
the bottom edge up to it, which shows how the two conditions line up across
their distributions. The middle quantile (or the two middle ones for an
even count) gets its own style.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Set, Tuple

import numpy as np

from paired_plots.errors import InvalidInputError
from paired_plots.histogram import finite_values
from paired_plots.layers import SegmentLayer
from paired_plots.style import COLOR_QUANTILE, COLOR_QUANTILE_MIDDLE, LineStyle

DEFAULT_PROBS = (0.25, 0.5, 0.75)
DEFAULT_MIDDLE_STYLE = LineStyle(
    colour=COLOR_QUANTILE_MIDDLE, linewidth=1.0, linestyle="dashed"
)
DEFAULT_STYLE = LineStyle(colour=COLOR_QUANTILE, linewidth=0.5, linestyle="dashed")


def _validate_probs(probs: Sequence[float]) -> List[float]:
    values = [float(prob) for prob in probs]
    if not values:
        raise InvalidInputError("At least one quantile probability is required")
    for prob in values:
        if not 0.0 <= prob <= 1.0:
            raise InvalidInputError(f"Quantile probability {prob} is outside [0, 1]")
    return values


def quantile_points(
    x: Sequence[float], y: Sequence[float], probs: Sequence[float]
) -> List[Tuple[float, float]]:
    """Return ``(q_x, q_y)`` pairs for each probability in ``probs``.

    NaN values are ignored independently in each column; infinite values
    raise :class:`~paired_plots.errors.InvalidInputError`. Quantiles use
    linear interpolation between order statistics.
    """

    prob_values = _validate_probs(probs)
    x_values = finite_values(x)
    y_values = finite_values(y)
    if x_values.size == 0 or y_values.size == 0:
        raise InvalidInputError("Quantiles require at least one observation per axis")

    q_x = np.quantile(x_values, prob_values)
    q_y = np.quantile(y_values, prob_values)
    return [(float(qx), float(qy)) for qx, qy in zip(q_x, q_y)]


def middle_indices(count: int) -> Set[int]:
    """Return the zero-based indices of the middle line(s) among ``count`` lines."""

    if count < 1:
        return set()
    middle = (count + 1) / 2
    return {math.floor(middle) - 1, math.ceil(middle) - 1}


def quantile_line_layers(
    x: Sequence[float],
    y: Sequence[float],
    probs: Sequence[float] = DEFAULT_PROBS,
    *,
    middle_style: LineStyle = DEFAULT_MIDDLE_STYLE,
    style: LineStyle = DEFAULT_STYLE,
) -> List[SegmentLayer]:
    """Build horizontal and vertical quantile segments, alternating per quantile."""

    points = quantile_points(x, y, probs)
    middles = middle_indices(len(points))

    layers: List[SegmentLayer] = []
    for index, (q_x, q_y) in enumerate(points):
        line_style = middle_style if index in middles else style
        layers.append(
            SegmentLayer(start=(-math.inf, q_y), end=(q_x, q_y), style=line_style)
        )
        layers.append(
            SegmentLayer(start=(q_x, -math.inf), end=(q_x, q_y), style=line_style)
        )
    return layers


__all__ = [
    "DEFAULT_PROBS",
    "DEFAULT_MIDDLE_STYLE",
    "DEFAULT_STYLE",
    "quantile_points",
    "middle_indices",
    "quantile_line_layers",
]
