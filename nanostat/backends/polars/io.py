"""
nanostat.backends.polars.io
===========================

Polars-backed reading of sample files and writing of comparison results.

- `read_samples`: one floating point value per line, no header
- `comparisons_frame`: comparison results as a DataFrame
- Sinks: Parquet file, CSV file

This module contains no statistics, just I/O.

Doctest (smoke):
>>> import polars as pl
>>> from nanostat.backends.polars.io import CsvFileSink, read_samples
>>> read_samples("timings.txt")  # doctest: +SKIP
>>> CsvFileSink("_tmp.csv").write(pl.DataFrame({"x": [1, 2, 3]}))  # doctest: +SKIP
"""

from __future__ import annotations
import logging
import os
from typing import Protocol, Sequence, TYPE_CHECKING

import polars as pl

from nanostat.core.difference import Difference
from nanostat.core.errors import SampleFileError

if TYPE_CHECKING:
    from nanostat.api.compare import Comparison

logger = logging.getLogger(__name__)


def read_samples(path: str) -> pl.Series:
    """
    Read a sample file with one floating point value per line.

    Args:
        path: Path to the file

    Returns:
        A Float64 series named after the file

    Raises:
        SampleFileError: If the file is missing, empty or holds a line that is
            not a number
    """
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise SampleFileError(path, "no such file")
    try:
        df = pl.read_csv(path, has_header=False, schema={"value": pl.Float64})
    except pl.exceptions.NoDataError:
        raise SampleFileError(path, "file is empty") from None
    except pl.exceptions.PolarsError as e:
        raise SampleFileError(path, f"not a list of numbers ({e})") from e

    values = df["value"]
    if values.len() == 0:
        raise SampleFileError(path, "file is empty")
    if values.null_count() > 0:
        raise SampleFileError(path, "contains blank lines")
    logger.debug("read %d values from %s", values.len(), path)
    return values.alias(os.path.basename(path))


def comparisons_frame(comparisons: Sequence["Comparison"]) -> pl.DataFrame:
    """
    Tabulate comparison results, one row per experiment.

    Columns that only exist for Welch's test (``p_value``, ``effect_size``,
    ``beta``) are null for pooled comparisons.
    """
    rows = []
    for c in comparisons:
        d = c.difference
        welch = isinstance(d, Difference)
        rows.append(
            {
                "name": c.name,
                "control_n": c.control.n,
                "control_mean": c.control.mean,
                "control_variance": c.control.variance,
                "experiment_n": c.experiment.n,
                "experiment_mean": c.experiment.mean,
                "experiment_variance": c.experiment.variance,
                "effect": d.effect,
                "critical_value": d.critical_value,
                "effect_size": d.effect_size if welch else None,
                "p_value": d.p_value if welch else None,
                "alpha": d.alpha,
                "beta": d.beta if welch else None,
                "significant": d.is_significant(),
            }
        )
    return pl.DataFrame(
        rows,
        schema={
            "name": pl.Utf8,
            "control_n": pl.Float64,
            "control_mean": pl.Float64,
            "control_variance": pl.Float64,
            "experiment_n": pl.Float64,
            "experiment_mean": pl.Float64,
            "experiment_variance": pl.Float64,
            "effect": pl.Float64,
            "critical_value": pl.Float64,
            "effect_size": pl.Float64,
            "p_value": pl.Float64,
            "alpha": pl.Float64,
            "beta": pl.Float64,
            "significant": pl.Boolean,
        },
    )


class ResultSink(Protocol):
    """A write-only sink: DataFrame -> storage."""
    def write(self, df: pl.DataFrame) -> None: ...


class ParquetFileSink:
    def __init__(self, path: str) -> None:
        self.path = path
    def write(self, df: pl.DataFrame) -> None:
        logger.debug("writing %d rows to %s", df.height, self.path)
        df.write_parquet(self.path)


class CsvFileSink:
    def __init__(self, path: str) -> None:
        self.path = path
    def write(self, df: pl.DataFrame) -> None:
        logger.debug("writing %d rows to %s", df.height, self.path)
        df.write_csv(self.path)


def sink_for(path: str) -> ResultSink:
    """Pick a sink from the file extension (``.parquet`` or anything else as CSV)."""
    if os.fspath(path).lower().endswith(".parquet"):
        return ParquetFileSink(path)
    return CsvFileSink(path)
