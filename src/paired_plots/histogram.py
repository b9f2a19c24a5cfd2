"""Binning helpers for paired difference scores.

These functions turn two paired measurement columns into the relative-height
bins consumed by :func:`paired_plots.geometry.project_bins`.
"""

from __future__ import annotations

import logging
import numbers
from typing import List, Optional, Sequence

import numpy as np

from paired_plots.errors import InvalidInputError
from paired_plots.geometry import HistogramBin

DEFAULT_BIN_COUNT = 30


def paired_differences(x: Sequence[float], y: Sequence[float]) -> np.ndarray:
    """Return ``x - y`` for every pair where both values are present.

    Parameters
    ----------
    x, y:
        Paired measurements of equal length. Pairs containing NaN are
        dropped; infinite values are rejected.

    Returns
    -------
    numpy.ndarray
        One-dimensional float array of difference scores.
    """

    x_values = np.asarray(x, dtype=float)
    y_values = np.asarray(y, dtype=float)
    if x_values.shape != y_values.shape:
        raise InvalidInputError(
            f"Paired inputs differ in length: {x_values.size} vs {y_values.size}"
        )
    if np.isinf(x_values).any() or np.isinf(y_values).any():
        raise InvalidInputError("Paired inputs contain infinite values")
    diffs = x_values - y_values
    return diffs[~np.isnan(diffs)]


def finite_values(values: Sequence[float]) -> np.ndarray:
    """Return ``values`` as a float array with NaN entries removed.

    Raises
    ------
    InvalidInputError
        If any value is positive or negative infinity.
    """

    array = np.asarray(values, dtype=float)
    array = array[~np.isnan(array)]
    if np.isinf(array).any():
        raise InvalidInputError("Values must be finite; found an infinite value")
    return array


def bins_from_counts(
    edges: Sequence[float], counts: Sequence[float]
) -> List[HistogramBin]:
    """Return bins with heights normalised to the largest count.

    Parameters
    ----------
    edges:
        Monotonic bin edges; one more than ``counts``.
    counts:
        Non-negative bin counts with at least one positive value.
    """

    edge_values = np.asarray(edges, dtype=float)
    count_values = np.asarray(counts, dtype=float)
    if edge_values.size != count_values.size + 1:
        raise InvalidInputError(
            f"Expected {count_values.size + 1} bin edges for "
            f"{count_values.size} counts, got {edge_values.size}"
        )
    if count_values.size == 0:
        raise InvalidInputError("Histogram has no bins")
    if np.any(count_values < 0):
        raise InvalidInputError("Histogram counts must be non-negative")
    tallest = float(count_values.max())
    if tallest <= 0.0:
        raise InvalidInputError("Histogram has no observations")

    return [
        HistogramBin(
            x_min=float(edge_values[index]),
            x_max=float(edge_values[index + 1]),
            relative_height=float(count_values[index]) / tallest,
        )
        for index in range(count_values.size)
    ]


def build_histogram(
    differences: Sequence[float],
    *,
    bins: Optional[int] = None,
    binwidth: Optional[float] = None,
) -> List[HistogramBin]:
    """Bin difference scores into relative-height histogram bins.

    ``binwidth`` takes precedence over ``bins`` when both are supplied. With
    neither, :data:`DEFAULT_BIN_COUNT` equal-width bins are used.
    """

    values = finite_values(differences)
    if values.size == 0:
        raise InvalidInputError("Cannot build a histogram from no differences")
    if bins is not None and (
        isinstance(bins, bool) or not isinstance(bins, numbers.Integral)
    ):
        raise InvalidInputError(f"bins must be an integer, got {bins!r}")

    if binwidth is not None:
        if not np.isfinite(binwidth) or binwidth <= 0:
            raise InvalidInputError(f"binwidth must be positive, got {binwidth}")
        low = float(values.min())
        edges = np.arange(low, float(values.max()) + binwidth, binwidth)
        if edges.size < 2:
            edges = np.array([low, low + binwidth])
        if edges[-1] < values.max():
            edges = np.append(edges, edges[-1] + binwidth)
        counts, edges = np.histogram(values, bins=edges)
    else:
        if bins is None:
            logging.info(
                "Using %d bins for the difference histogram; pick a better "
                "value with bins or binwidth.",
                DEFAULT_BIN_COUNT,
            )
            bins = DEFAULT_BIN_COUNT
        if bins < 1:
            raise InvalidInputError(f"bins must be at least 1, got {bins}")
        counts, edges = np.histogram(values, bins=int(bins))

    return bins_from_counts(edges, counts)


def mean_difference(differences: Sequence[float]) -> float:
    """Return the NaN-ignoring mean of ``differences``."""

    values = finite_values(differences)
    if values.size == 0:
        raise InvalidInputError("Cannot average an empty set of differences")
    return float(values.mean())


__all__ = [
    "DEFAULT_BIN_COUNT",
    "paired_differences",
    "finite_values",
    "bins_from_counts",
    "build_histogram",
    "mean_difference",
]
