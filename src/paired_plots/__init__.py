"""Annotation helpers for paired scatterplots.

This package decorates a scatterplot of paired measurements with a
histogram of their differences rotated onto the identity line, a
mean-difference indicator, and quantile guide lines.

Submodules
----------
geometry
    Pure 45-degree projection of histogram bins and the mean indicator.
histogram
    Paired difference scores and relative-height binning.
quantiles
    Quantile guide line segments.
layers
    Styled overlay shapes, layer composition, and Matplotlib rendering.
plots
    Scatterplot construction and the ``add_*`` convenience helpers.
cli
    The ``paired_diff_plot`` command-line entry point.
"""

from __future__ import annotations

from paired_plots.errors import (
    AxisScaleMismatchError,
    AxisScaleMismatchWarning,
    DegenerateGeometryError,
    InvalidInputError,
)
from paired_plots.geometry import (
    Anchor,
    HistogramBin,
    MeanIndicator,
    RotatedPolygon,
    check_axis_scales,
    project_bins,
    project_mean_indicator,
    project_point,
)

__all__ = [
    "Anchor",
    "AxisScaleMismatchError",
    "AxisScaleMismatchWarning",
    "DegenerateGeometryError",
    "HistogramBin",
    "InvalidInputError",
    "MeanIndicator",
    "RotatedPolygon",
    "check_axis_scales",
    "project_bins",
    "project_mean_indicator",
    "project_point",
]
