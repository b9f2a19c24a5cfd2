"""Render a paired scatterplot with a difference histogram from a CSV file.

The input CSV holds one row per subject with the two paired measurements in
separate columns. The script draws the paired scatterplot with an identity
line, optional quantile guide lines underneath, and the histogram of
``x - y`` differences standing on the identity line.

Example
-------
$ paired_diff_plot crime.csv --x-col y1983 --y-col y1993 \
      --limits 0 1500 --origin 1250 --max-height 100 --bins 6 \
      --meanline --sigstars 3 --sigstars-pos 25
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import pandas as pd

from paired_plots.errors import InvalidInputError
from paired_plots.plots import (
    add_paired_diff_hist,
    add_quantile_lines,
    default_limits,
    paired_scatter,
    save_figure,
)
from paired_plots.quantiles import DEFAULT_PROBS
from paired_plots.style import FillStyle, LineStyle, TextStyle
from utils.cli import (
    add_column_arguments,
    add_log_level_argument,
    add_output_argument,
    add_probs_argument,
    configure_logging,
)

DEFAULT_OUTPUT = Path("figures") / "paired_diff_hist.pdf"


def _build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser for the paired difference plot.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser instance.
    """

    parser = argparse.ArgumentParser(
        description=(
            "Plot paired measurements as a scatterplot with a histogram of "
            "their differences on the identity line."
        )
    )
    parser.add_argument(
        "input_csv",
        type=Path,
        help="CSV file with one row per subject and two measurement columns.",
    )
    add_column_arguments(parser)
    parser.add_argument(
        "--limits",
        type=float,
        nargs=2,
        metavar=("LOW", "HIGH"),
        default=None,
        help="Shared axis limits (default: data range with 5%% padding).",
    )
    parser.add_argument(
        "--origin",
        type=float,
        default=None,
        help="Identity-line position of the histogram base "
        "(default: 80%% along the axis range).",
    )
    parser.add_argument(
        "--max-height",
        type=float,
        default=None,
        help="Height of the tallest bin (default: 10%% of the axis range).",
    )
    parser.add_argument("--bins", type=int, default=None, help="Number of bins.")
    parser.add_argument(
        "--binwidth",
        type=float,
        default=None,
        help="Width of each bin; overrides --bins.",
    )
    parser.add_argument(
        "--meanline",
        action="store_true",
        help="Draw a line at the mean difference.",
    )
    parser.add_argument(
        "--meanline-pos",
        type=float,
        default=0.0,
        help="Extension of the mean line beyond the histogram (default: 0).",
    )
    parser.add_argument(
        "--sigstars",
        type=int,
        default=None,
        help="Number of significance stars to place above the mean line.",
    )
    parser.add_argument(
        "--sigstars-pos",
        type=float,
        default=0.0,
        help="Diagonal shift of the stars from the top of the mean line.",
    )
    add_probs_argument(parser, default_probs=DEFAULT_PROBS)
    parser.add_argument(
        "--no-quantiles",
        action="store_true",
        help="Skip the quantile guide lines.",
    )
    parser.add_argument("--title", default=None, help="Optional figure title.")
    add_output_argument(
        parser,
        default_output=DEFAULT_OUTPUT,
        help_text="Output path for the rendered figure",
    )
    add_log_level_argument(parser)
    return parser


def _load_pairs(
    csv_path: Path, x_col: Optional[str], y_col: Optional[str]
) -> Tuple[pd.Series, pd.Series, str, str]:
    """Return the numeric paired columns and their names from ``csv_path``."""

    resolved = csv_path.expanduser().resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"Input CSV not found at {resolved}")
    try:
        frame = pd.read_csv(resolved)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidInputError(f"Could not parse {resolved.name}: {exc}") from exc
    if frame.shape[1] < 2 and (x_col is None or y_col is None):
        raise InvalidInputError("CSV must contain at least two columns")

    x_name = x_col or str(frame.columns[0])
    y_name = y_col or str(frame.columns[1])
    for name in (x_name, y_name):
        if name not in frame.columns:
            raise KeyError(f"Column {name!r} not found in {resolved.name}")

    x_values = pd.to_numeric(frame[x_name], errors="coerce")
    y_values = pd.to_numeric(frame[y_name], errors="coerce")
    return x_values, y_values, x_name, y_name


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the paired difference plot script.

    Parameters
    ----------
    argv:
        Optional sequence of command-line arguments. When omitted,
        :data:`sys.argv` semantics are used.

    Returns
    -------
    int
        Zero on success; non-zero when loading or plotting fails.
    """

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    plt.switch_backend("Agg")

    try:
        x_values, y_values, x_name, y_name = _load_pairs(
            args.input_csv, args.x_col, args.y_col
        )
        limits = (
            tuple(args.limits)
            if args.limits
            else default_limits(x_values, y_values)
        )
        low, high = limits
        span = high - low
        origin = args.origin if args.origin is not None else low + 0.8 * span
        max_height = args.max_height if args.max_height is not None else 0.1 * span

        fig, ax = plt.subplots(figsize=(6, 6))
        paired_scatter(
            ax,
            x_values,
            y_values,
            limits=limits,
            xlabel=x_name,
            ylabel=y_name,
            title=args.title,
        )
        if not args.no_quantiles:
            add_quantile_lines(ax, x_values, y_values, args.quantiles)
        add_paired_diff_hist(
            ax,
            x_values,
            y_values,
            origin=origin,
            max_height=max_height,
            bin_style=FillStyle(),
            bins=args.bins,
            binwidth=args.binwidth,
            meanline=args.meanline,
            meanline_pos=args.meanline_pos,
            meanline_style=LineStyle(),
            sigstars=args.sigstars,
            sigstars_pos=args.sigstars_pos,
            sigstars_style=TextStyle(),
        )
    except (InvalidInputError, FileNotFoundError, KeyError) as exc:
        logging.error("Could not build paired difference plot: %s", exc)
        plt.close("all")
        return 1

    fig.tight_layout()
    save_figure(args.output, fig)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
