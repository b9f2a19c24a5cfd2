"""Renderer-independent overlay shapes and their Matplotlib rendering.

Geometry helpers return plain coordinates; this module wraps them in small
layer records that carry style attributes, merges them with a caller-held
layer list in a chosen order, and finally draws them onto an existing
Matplotlib ``Axes`` above or below the artists already present.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.patches import Polygon

from paired_plots.errors import InvalidInputError
from paired_plots.geometry import MeanIndicator, Point, RotatedPolygon
from paired_plots.style import FillStyle, LineStyle, TextStyle, resolve_linestyle

POSITIONS = ("above", "below")
DEFAULT_BASE_ZORDER = 2.0


@dataclass(frozen=True)
class PolygonLayer:
    """Closed filled polygon, such as one rotated histogram bin."""

    points: Tuple[Point, ...]
    style: FillStyle = field(default_factory=FillStyle)

    @classmethod
    def from_rotated(cls, polygon: RotatedPolygon, style: FillStyle) -> "PolygonLayer":
        return cls(points=tuple(polygon.points), style=style)

    def draw(self, ax: plt.Axes, zorder: float) -> Artist:
        patch = Polygon(
            list(self.points),
            closed=True,
            facecolor=self.style.fill,
            edgecolor=self.style.colour,
            linewidth=self.style.linewidth,
            alpha=self.style.alpha,
            zorder=zorder,
        )
        ax.add_patch(patch)
        return patch


@dataclass(frozen=True)
class SegmentLayer:
    """Straight line segment.

    Infinite coordinates are clamped to the axis limits when drawn, so a
    start of ``(-inf, y)`` runs from the left edge of the panel.
    """

    start: Point
    end: Point
    style: LineStyle = field(default_factory=LineStyle)

    @classmethod
    def from_mean_indicator(
        cls, indicator: MeanIndicator, style: LineStyle
    ) -> "SegmentLayer":
        bottom, top = indicator.segment
        return cls(start=bottom, end=top, style=style)

    def draw(self, ax: plt.Axes, zorder: float) -> Artist:
        x_limits = ax.get_xlim()
        y_limits = ax.get_ylim()
        xs = [_clamp_to_limits(value, x_limits) for value in (self.start[0], self.end[0])]
        ys = [_clamp_to_limits(value, y_limits) for value in (self.start[1], self.end[1])]
        (line,) = ax.plot(
            xs,
            ys,
            color=self.style.colour,
            linewidth=self.style.linewidth,
            linestyle=resolve_linestyle(self.style.linestyle),
            zorder=zorder,
        )
        return line


@dataclass(frozen=True)
class TextLayer:
    """Text label centred on ``position``, rotated by ``rotation`` degrees."""

    position: Point
    text: str
    style: TextStyle = field(default_factory=TextStyle)
    rotation: float = 0.0

    def draw(self, ax: plt.Axes, zorder: float) -> Artist:
        return ax.text(
            self.position[0],
            self.position[1],
            self.text,
            rotation=self.rotation,
            rotation_mode="anchor",
            ha="center",
            va="center",
            color=self.style.colour,
            fontsize=self.style.fontsize,
            zorder=zorder,
        )


Layer = Union[PolygonLayer, SegmentLayer, TextLayer]


def _clamp_to_limits(value: float, limits: Tuple[float, float]) -> float:
    if math.isinf(value):
        low, high = min(limits), max(limits)
        return low if value < 0 else high
    return value


def _check_position(position: str) -> None:
    if position not in POSITIONS:
        raise InvalidInputError(
            f"Unknown layer position {position!r}; expected one of {POSITIONS}"
        )


def compose_layers(
    existing: Sequence[Layer], new: Sequence[Layer], *, position: str = "above"
) -> List[Layer]:
    """Return a new layer list with ``new`` placed above or below ``existing``.

    Neither input is modified. Earlier entries are drawn first, so
    ``"below"`` prepends ``new`` and ``"above"`` appends it.
    """

    _check_position(position)
    if position == "below":
        return list(new) + list(existing)
    return list(existing) + list(new)


def _existing_zorders(ax: plt.Axes) -> List[float]:
    artists: List[Artist] = [
        *ax.collections,
        *ax.lines,
        *ax.patches,
        *ax.texts,
        *ax.images,
    ]
    return [artist.get_zorder() for artist in artists]


def draw_layers(
    ax: plt.Axes, layers: Sequence[Layer], *, position: str = "above"
) -> List[Artist]:
    """Draw ``layers`` onto ``ax`` and return the created artists.

    Parameters
    ----------
    ax:
        Target axes holding the existing plot.
    layers:
        Layers in drawing order; later entries end up on top.
    position:
        ``"above"`` places every layer over the highest existing artist,
        ``"below"`` places every layer under the lowest one.

    Notes
    -----
    The axis limits in effect before drawing are restored afterwards so that
    overlays never rescale the host plot.
    """

    _check_position(position)
    if not layers:
        return []

    zorders = _existing_zorders(ax)
    step = 1.0 / len(layers)
    if position == "below":
        start = (min(zorders) if zorders else DEFAULT_BASE_ZORDER) - 1.0
    else:
        start = (max(zorders) if zorders else DEFAULT_BASE_ZORDER) + 1.0

    x_limits = ax.get_xlim()
    y_limits = ax.get_ylim()
    artists = [
        layer.draw(ax, zorder=start + index * step)
        for index, layer in enumerate(layers)
    ]
    ax.set_xlim(x_limits)
    ax.set_ylim(y_limits)
    return artists


__all__ = [
    "POSITIONS",
    "PolygonLayer",
    "SegmentLayer",
    "TextLayer",
    "Layer",
    "compose_layers",
    "draw_layers",
]
