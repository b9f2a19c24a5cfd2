"""
Matplotlib helpers for building and decorating paired scatterplots.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.artist import Artist

from paired_plots.errors import InvalidInputError
from paired_plots.geometry import (
    Anchor,
    check_axis_scales,
    project_bins,
    project_mean_indicator,
)
from paired_plots.histogram import (
    build_histogram,
    finite_values,
    mean_difference,
    paired_differences,
)
from paired_plots.layers import (
    Layer,
    PolygonLayer,
    SegmentLayer,
    TextLayer,
    draw_layers,
)
from paired_plots.quantiles import (
    DEFAULT_MIDDLE_STYLE,
    DEFAULT_PROBS,
    DEFAULT_STYLE,
    quantile_line_layers,
)
from paired_plots.style import (
    COLOR_IDENTITY,
    COLOR_POINT,
    FillStyle,
    LineStyle,
    TextStyle,
)

SIGSTARS_ROTATION = -45.0


def default_limits(
    x: Sequence[float], y: Sequence[float], padding: float = 0.05
) -> Tuple[float, float]:
    """Return shared axis limits covering both columns with relative padding."""

    values = np.concatenate([finite_values(x), finite_values(y)])
    if values.size == 0:
        raise InvalidInputError("Cannot derive axis limits without observations")
    low = float(values.min())
    high = float(values.max())
    span = high - low
    margin = span * padding if span > 0 else 1.0
    return low - margin, high + margin


def paired_scatter(
    ax: plt.Axes,
    x: Sequence[float],
    y: Sequence[float],
    *,
    limits: Optional[Tuple[float, float]] = None,
    point_colour: str = COLOR_POINT,
    point_size: float = 30.0,
    identity_colour: str = COLOR_IDENTITY,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
    title: Optional[str] = None,
) -> plt.Axes:
    """Draw a paired scatterplot with an identity line and equal axes.

    Parameters
    ----------
    ax:
        Axes to draw into.
    x, y:
        Paired measurements for the first and second condition.
    limits:
        Shared ``(low, high)`` limits for both axes. When omitted they are
        derived from the data via :func:`default_limits`.
    point_colour, point_size:
        Fill colour and marker area of the scatter points.
    identity_colour:
        Colour of the ``y = x`` reference line.
    xlabel, ylabel, title:
        Optional axis labels and title.

    Returns
    -------
    matplotlib.axes.Axes
        The same ``ax`` for chaining.
    """

    low, high = limits if limits is not None else default_limits(x, y)
    ax.plot([low, high], [low, high], color=identity_colour, linewidth=1.0, zorder=1.5)
    ax.scatter(
        x,
        y,
        s=point_size,
        facecolor=point_colour,
        edgecolor="black",
        linewidth=0.5,
        zorder=2.0,
    )
    ax.set_xlim(low, high)
    ax.set_ylim(low, high)
    ax.set_aspect("equal", adjustable="box")
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    return ax


def paired_diff_hist_layers(
    x: Sequence[float],
    y: Sequence[float],
    *,
    origin: float,
    max_height: float,
    bin_style: FillStyle = FillStyle(),
    bins: Optional[int] = None,
    binwidth: Optional[float] = None,
    meanline: bool = False,
    meanline_pos: float = 0.0,
    meanline_style: LineStyle = LineStyle(),
    sigstars: Optional[int] = None,
    sigstars_pos: float = 0.0,
    sigstars_style: TextStyle = TextStyle(),
    sigstars_rotation: float = SIGSTARS_ROTATION,
) -> List[Layer]:
    """Return the layers for a difference histogram standing on the identity line.

    The histogram is built from ``x - y``; its base is centred on
    ``(origin, origin)`` and the tallest bin reaches ``max_height`` along
    the diagonal. With ``meanline`` a segment marks the mean difference,
    extended ``meanline_pos`` beyond both ends of the histogram. With
    ``sigstars`` that many ``*`` characters are placed ``sigstars_pos``
    beyond the top of the mean line.
    """

    if sigstars is not None and sigstars < 0:
        raise InvalidInputError(f"sigstars must be non-negative, got {sigstars}")

    diffs = paired_differences(x, y)
    hist_bins = build_histogram(diffs, bins=bins, binwidth=binwidth)
    anchor = Anchor(origin=origin, max_height=max_height)

    layers: List[Layer] = [
        PolygonLayer.from_rotated(polygon, bin_style)
        for polygon in project_bins(hist_bins, anchor)
    ]

    if meanline or sigstars is not None:
        indicator = project_mean_indicator(
            mean_difference(diffs),
            anchor,
            extension_offset=meanline_pos,
            label_offset=sigstars_pos,
        )
        if meanline:
            layers.append(SegmentLayer.from_mean_indicator(indicator, meanline_style))
        if sigstars is not None:
            layers.append(
                TextLayer(
                    position=indicator.label_point,
                    text="*" * sigstars,
                    style=sigstars_style,
                    rotation=sigstars_rotation,
                )
            )
    return layers


def axis_ranges(ax: plt.Axes) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Return the current ``(xlim, ylim)`` of ``ax``."""

    return tuple(ax.get_xlim()), tuple(ax.get_ylim())


def add_paired_diff_hist(
    ax: plt.Axes, x: Sequence[float], y: Sequence[float], **kwargs
) -> List[Artist]:
    """Draw a difference histogram on the identity line of an existing plot.

    The axes must be identically scaled; otherwise
    :class:`~paired_plots.errors.AxisScaleMismatchError` is raised before
    anything is drawn. Keyword arguments are forwarded to
    :func:`paired_diff_hist_layers`.
    """

    x_range, y_range = axis_ranges(ax)
    check_axis_scales(x_range, y_range, strict=True)
    layers = paired_diff_hist_layers(x, y, **kwargs)
    logging.info("Adding %d difference histogram layers", len(layers))
    return draw_layers(ax, layers, position="above")


def add_quantile_lines(
    ax: plt.Axes,
    x: Sequence[float],
    y: Sequence[float],
    probs: Sequence[float] = DEFAULT_PROBS,
    *,
    middle_style: LineStyle = DEFAULT_MIDDLE_STYLE,
    style: LineStyle = DEFAULT_STYLE,
) -> List[Artist]:
    """Draw quantile guide lines beneath the existing layers of ``ax``.

    Unequal axis scales only trigger a warning, because the lines remain
    readable even if they are harder to compare across axes.
    """

    x_range, y_range = axis_ranges(ax)
    check_axis_scales(x_range, y_range, strict=False)
    layers = quantile_line_layers(
        x, y, probs, middle_style=middle_style, style=style
    )
    return draw_layers(ax, layers, position="below")


def save_figure(output_path: Path, fig: plt.Figure) -> Path:
    """Expand, create parent directories, and save a Matplotlib figure."""

    resolved = output_path.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(resolved)
    plt.close(fig)
    logging.info("Wrote figure to %s", resolved)
    return resolved


__all__ = [
    "SIGSTARS_ROTATION",
    "default_limits",
    "paired_scatter",
    "paired_diff_hist_layers",
    "axis_ranges",
    "add_paired_diff_hist",
    "add_quantile_lines",
    "save_figure",
]
