"""CLI helper utilities for shared argparse patterns.

This module centralizes command-line argument definitions that plotting
entry points share so that flag names, defaults, and help texts stay
consistent across tools.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--log-level`` argument for logging verbosity.

    Parameters
    ----------
    parser:
        Target argument parser.
    """

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity.",
    )


def configure_logging(level_name: str) -> None:
    """Configure root logging with the shared timestamped format."""

    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def add_output_argument(
    parser: argparse.ArgumentParser,
    *,
    default_output: Path | str,
    help_text: str,
) -> None:
    """Add a shared ``--output/-o`` figure path argument.

    Parameters
    ----------
    parser:
        Target argument parser.
    default_output:
        Default file path for the rendered figure.
    help_text:
        Description of the output; the default is appended automatically.
    """

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(default_output),
        help=f"{help_text} (default: {default_output}).",
    )


def add_column_arguments(parser: argparse.ArgumentParser) -> None:
    """Add shared ``--x-col`` and ``--y-col`` arguments for paired CSV input.

    Both default to ``None`` so that callers can fall back to the first two
    columns of the table.
    """

    parser.add_argument(
        "--x-col",
        default=None,
        help="Column holding the first condition (default: first column).",
    )
    parser.add_argument(
        "--y-col",
        default=None,
        help="Column holding the second condition (default: second column).",
    )


def add_probs_argument(
    parser: argparse.ArgumentParser,
    *,
    default_probs: Sequence[float],
) -> None:
    """Add a shared ``--quantiles`` argument accepting probabilities in [0, 1].

    Parameters
    ----------
    parser:
        Target argument parser.
    default_probs:
        Probabilities used when the flag is omitted.
    """

    parser.add_argument(
        "--quantiles",
        type=float,
        nargs="+",
        default=list(default_probs),
        metavar="P",
        help=(
            "Probabilities at which to draw quantile lines "
            f"(default: {' '.join(str(prob) for prob in default_probs)})."
        ),
    )
