"""Tests for the polars-backed sample reader and result sinks."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import polars as pl
import pytest

from nanostat.api.compare import ComparisonConfig, compare_samples
from nanostat.backends.polars.io import (
    CsvFileSink,
    ParquetFileSink,
    comparisons_frame,
    read_samples,
    sink_for,
)
from nanostat.core.errors import SampleFileError

WriteSamples = Callable[[str, Sequence[float]], Path]


def test_read_samples(sample_file: WriteSamples) -> None:
    path = sample_file("timings.txt", [0.1, 0.45, 0.42, 3.0])
    values = read_samples(str(path))
    assert values.dtype == pl.Float64
    assert values.name == "timings.txt"
    assert values.to_list() == pytest.approx([0.1, 0.45, 0.42, 3.0])


def test_read_samples_accepts_scientific_notation(tmp_path: Path) -> None:
    path = tmp_path / "sci.txt"
    path.write_text("1e-3\n-2.5E2\n7\n")
    assert read_samples(str(path)).to_list() == pytest.approx([0.001, -250.0, 7.0])


def test_read_samples_rejects_text(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("1.0\nfast\n2.0\n")
    with pytest.raises(SampleFileError) as excinfo:
        read_samples(str(path))
    assert excinfo.value.path == str(path)


def test_read_samples_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SampleFileError, match="no such file"):
        read_samples(str(tmp_path / "missing.txt"))


def test_read_samples_rejects_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(SampleFileError):
        read_samples(str(path))


# ---------------------------------------------------------------------------
# Result frames and sinks


def _comparisons(method: str = "welch"):
    return compare_samples(
        [1.0, 2.0, 3.0, 4.0],
        {"same": [1.0, 2.0, 3.0, 4.0], "bigger": [10.0, 20.0, 30.0, 40.0]},
        ComparisonConfig(confidence=80.0, method=method),  # type: ignore[arg-type]
    )


def test_comparisons_frame_welch() -> None:
    df = comparisons_frame(_comparisons())
    assert df.height == 2
    assert df["name"].to_list() == ["same", "bigger"]
    assert df["significant"].to_list() == [False, True]
    assert df["p_value"].to_list() == pytest.approx([1.0, 0.03916791618893325], rel=1e-6)
    assert df["control_n"].to_list() == [4.0, 4.0]


def test_comparisons_frame_pooled_has_null_welch_columns() -> None:
    df = comparisons_frame(_comparisons("pooled"))
    assert df["p_value"].null_count() == 2
    assert df["effect_size"].null_count() == 2
    assert df["beta"].null_count() == 2
    assert df["alpha"].to_list() == pytest.approx([0.2, 0.2])


def test_csv_sink_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "results.csv"
    CsvFileSink(str(path)).write(comparisons_frame(_comparisons()))
    df = pl.read_csv(path)
    assert df["name"].to_list() == ["same", "bigger"]
    assert df["effect"].to_list() == pytest.approx([0.0, 22.5])


def test_parquet_sink_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "results.parquet"
    ParquetFileSink(str(path)).write(comparisons_frame(_comparisons()))
    assert pl.read_parquet(path)["significant"].to_list() == [False, True]


def test_sink_for_picks_by_suffix() -> None:
    assert isinstance(sink_for("out.parquet"), ParquetFileSink)
    assert isinstance(sink_for("out.PARQUET"), ParquetFileSink)
    assert isinstance(sink_for("out.csv"), CsvFileSink)
