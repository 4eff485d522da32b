"""
nanostat.cli
============

Command-line interface: check for statistically valid differences between
sets of measurements stored one value per line.

Usage:
    nanostat CONTROL EXPERIMENT... [OPTIONS]

Examples:
    nanostat before.txt after.txt
    nanostat before.txt after-a.txt after-b.txt --confidence 99
    nanostat before.txt after.txt --pooled --confidence P98
    nanostat before.txt after.txt --plot boxes.png --output results.csv
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import typer

from nanostat.__version__ import __version__
from nanostat.api.compare import ComparisonConfig, compare_samples
from nanostat.backends.polars.io import comparisons_frame, read_samples, sink_for
from nanostat.core.errors import InvalidParameterError, NanostatError
from nanostat.reporting.boxplot import save_box_plot
from nanostat.reporting.text import format_report
from nanostat.stats.common.critical_table import ConfidenceLevel

app = typer.Typer(
    add_completion=False,
    help="Check for statistically valid differences between sets of measurements.",
)


def parse_confidence(text: str, pooled: bool) -> Union[float, ConfidenceLevel]:
    """
    Interpret the ``--confidence`` option.

    Level names such as ``P95`` are accepted in both modes. Welch's test takes
    any percentage in (0, 100); the pooled test only the tabulated levels.
    """
    if pooled or text.strip().upper() in ConfidenceLevel.__members__:
        return ConfidenceLevel.parse(text)
    token = text.strip()
    token = token[:-1] if token.endswith("%") else token
    try:
        return float(token)
    except ValueError:
        raise InvalidParameterError(f"Unrecognized confidence level: {text!r}") from None


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nanostat {__version__}")
        raise typer.Exit()


@app.command()
def main(
    control: Path = typer.Argument(
        ..., help="The path to a file with per-line floating point values."
    ),
    experiments: List[Path] = typer.Argument(
        ..., help="The path to one or more files with per-line floating point values."
    ),
    confidence: str = typer.Option(
        "95",
        "--confidence",
        "-c",
        metavar="PERCENTAGE",
        help="Confidence level, e.g. 95, 99.5% or P99.",
    ),
    pooled: bool = typer.Option(
        False,
        "--pooled",
        help="Use the pooled Student's t-test from the critical-value table.",
    ),
    plot: Optional[Path] = typer.Option(
        None, "--plot", help="Write a box plot of all samples to this image file."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write results as CSV (or Parquet for .parquet)."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", help="Compare experiments on this many threads."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    Compare CONTROL against each EXPERIMENT using Welch's t-test.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        config = ComparisonConfig(
            confidence=parse_confidence(confidence, pooled),
            method="pooled" if pooled else "welch",
            max_workers=workers,
        )
        config.validate()

        # A list, not a dict: a path given twice is reported twice.
        control_values = read_samples(str(control))
        experiment_values = [
            (str(path), read_samples(str(path))) for path in experiments
        ]
        comparisons = compare_samples(control_values, experiment_values, config)
    except NanostatError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(format_report(comparisons))

    if output is not None:
        sink_for(str(output)).write(comparisons_frame(comparisons))
    if plot is not None:
        save_box_plot(
            [(str(control), control_values)] + experiment_values, str(plot)
        )


def run() -> None:
    """Console-script entry point."""
    app()
