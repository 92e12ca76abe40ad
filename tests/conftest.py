from pathlib import Path
from typing import Callable

import pytest

from quadra_geometry import Point, Rectangle

SAMPLE_ROWS = [
    # containment
    (0, 0, 10, 10, 2, 2, 5, 5),
    (0, 0, 10, 10, 0, 0, 10, 10),
    # adjacency: proper, subline, partial, corner
    (5, 5, 5, 5, 10, 5, 5, 5),
    (5, 5, 5, 10, 10, 7, 5, 5),
    (5, 5, 5, 10, 10, 7, 5, 25),
    (10, 10, 10, 10, 20, 0, 10, 10),
    # intersection: 4 points, 2 points
    (5, 5, 10, 10, 7, 3, 5, 20),
    (5, 5, 10, 10, 7, 7, 5, 20),
    # disjoint
    (5, 5, 10, 10, 25, 5, 5, 20),
]

HEADER = "origin1x,origin1y,width1,height1,origin2x,origin2y,width2,height2"


def write_csv(path: Path, rows, header: str = HEADER) -> Path:
    lines = [header] + [",".join(str(value) for value in row) for row in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def rect() -> Callable[..., Rectangle]:
    """Factory: rect(x, y, width, height)."""

    def _make(x: float, y: float, width: float, height: float) -> Rectangle:
        return Rectangle(origin=Point(x, y), width=width, height=height)

    return _make


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    return write_csv(tmp_path / "rectangles.csv", SAMPLE_ROWS)


@pytest.fixture
def config_file(tmp_path: Path, sample_csv: Path) -> Path:
    path = tmp_path / "analysis.yaml"
    path.write_text(
        "data_path: rectangles.csv\n"
        "output_format: text\n"
        "log_level: INFO\n"
        "skip_invalid_rows: true\n"
    )
    return path


@pytest.fixture
def csv_writer() -> Callable[..., Path]:
    """write_csv(path, rows, header=HEADER)."""
    return write_csv
