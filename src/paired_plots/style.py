"""Shared visual styling constants and helpers for paired-plot overlays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from paired_plots.errors import InvalidInputError

# Scatter and reference line colors.
COLOR_POINT = "grey"
COLOR_IDENTITY = "black"

# Histogram overlay colors.
COLOR_HIST_EDGE = "black"
COLOR_HIST_FILL = "grey"

# Quantile guideline colors.
COLOR_QUANTILE_MIDDLE = "darkgrey"
COLOR_QUANTILE = "grey"

# Line types understood by ggplot-style APIs, mapped onto Matplotlib dashes.
LINETYPES = {
    "solid": "solid",
    "dashed": "dashed",
    "dotted": "dotted",
    "dotdash": "dashdot",
    "longdash": (0, (10, 4)),
    "twodash": (0, (6, 2, 2, 2)),
    "blank": "None",
}

LineStyleSpec = Union[str, Tuple[int, Tuple[int, ...]]]


def resolve_linestyle(name: str) -> LineStyleSpec:
    """Return the Matplotlib linestyle for a ggplot-style line type name.

    Parameters
    ----------
    name:
        One of ``solid``, ``dashed``, ``dotted``, ``dotdash``, ``longdash``,
        ``twodash`` or ``blank`` (case-insensitive).

    Returns
    -------
    str or tuple
        Named Matplotlib linestyle or an ``(offset, dashes)`` tuple.
    """

    try:
        return LINETYPES[name.strip().lower()]
    except KeyError as exc:
        raise InvalidInputError(
            f"Unknown line type {name!r}; expected one of {sorted(LINETYPES)}"
        ) from exc


@dataclass(frozen=True)
class LineStyle:
    """Stroke attributes for line segments."""

    colour: str = "black"
    linewidth: float = 1.0
    linestyle: str = "solid"


@dataclass(frozen=True)
class FillStyle:
    """Edge and fill attributes for polygons."""

    colour: str = COLOR_HIST_EDGE
    fill: str = COLOR_HIST_FILL
    linewidth: float = 1.0
    alpha: float = 1.0


@dataclass(frozen=True)
class TextStyle:
    """Font attributes for text annotations."""

    colour: str = "black"
    fontsize: float = 12.0


__all__ = [
    "COLOR_POINT",
    "COLOR_IDENTITY",
    "COLOR_HIST_EDGE",
    "COLOR_HIST_FILL",
    "COLOR_QUANTILE_MIDDLE",
    "COLOR_QUANTILE",
    "LINETYPES",
    "resolve_linestyle",
    "LineStyle",
    "FillStyle",
    "TextStyle",
]
