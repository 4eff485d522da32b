"""Shared fixtures for the nanostat test-suite."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable, Sequence

import matplotlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

matplotlib.use("Agg")

from nanostat.core.summary import Summary


@pytest.fixture
def small() -> Summary:
    return Summary.of([1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def large() -> Summary:
    return Summary.of([10.0, 20.0, 30.0, 40.0])


@pytest.fixture
def sample_file(tmp_path: Path) -> Callable[[str, Sequence[float]], Path]:
    """Write values one per line and return the file path."""

    def _write(name: str, values: Sequence[float]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{v}\n" for v in values))
        return path

    return _write
