from pathlib import Path

import pytest

from quadra_analysis import CSV_COLUMNS, RectangleDataLoader, RectanglePair
from quadra_geometry import InvalidDimensionError, Point


@pytest.fixture
def loader() -> RectangleDataLoader:
    return RectangleDataLoader()


class TestRectanglePairFromRow:
    def test_builds_both_rectangles(self):
        row = dict(zip(CSV_COLUMNS, ["5", "7", "10", "20", 1, 2, 3, 4]))

        pair = RectanglePair.from_row(row, row_index=3)

        assert pair.row_index == 3
        assert pair.first.origin == Point(5, 7)
        assert (pair.first.width, pair.first.height) == (10, 20)
        assert pair.second.origin == Point(1, 2)
        assert (pair.second.width, pair.second.height) == (3, 4)

    def test_missing_column(self):
        row = dict(zip(CSV_COLUMNS[:-1], [0] * 7))

        with pytest.raises(ValueError, match="missing column 'height2'"):
            RectanglePair.from_row(row, row_index=0)

    def test_non_numeric_value(self):
        row = dict(zip(CSV_COLUMNS, [0, 0, "wide", 1, 0, 0, 1, 1]))

        with pytest.raises(ValueError, match="Row 0: invalid value"):
            RectanglePair.from_row(row, row_index=0)

    def test_empty_value(self):
        row = dict(zip(CSV_COLUMNS, [0, 0, float("nan"), 1, 0, 0, 1, 1]))

        with pytest.raises(ValueError, match="empty value"):
            RectanglePair.from_row(row, row_index=0)

    def test_invalid_dimension_propagates(self):
        row = dict(zip(CSV_COLUMNS, [0, 0, 1, 1, 0, 0, 1, -1]))

        with pytest.raises(InvalidDimensionError):
            RectanglePair.from_row(row, row_index=0)


class TestRectangleDataLoader:
    def test_loads_every_row(self, loader, sample_csv):
        result = loader.load(sample_csv)

        assert len(result.pairs) == 9
        assert result.rejected == []
        assert [pair.row_index for pair in result.pairs] == list(range(9))

        first = result.pairs[0]
        assert first.first.origin == Point(0, 0)
        assert first.second.width == 5

    def test_skips_invalid_rows(self, loader, tmp_path, csv_writer):
        path = csv_writer(tmp_path / "mixed.csv", [
            (0, 0, 10, 10, 2, 2, 5, 5),
            (0, 0, -10, 10, 2, 2, 5, 5),
            (0, 0, 10, 10, 2, 2, "abc", 5),
            (5, 5, 5, 5, 10, 5, 5, 5),
        ])

        result = loader.load(path)

        assert [pair.row_index for pair in result.pairs] == [0, 3]
        assert [index for index, _ in result.rejected] == [1, 2]
        assert "Width cannot be 0 or negative value" in result.rejected[0][1]

    def test_strict_mode_raises_first_invalid_row(self, loader, tmp_path, csv_writer):
        path = csv_writer(tmp_path / "bad.csv", [
            (0, 0, 10, 10, 2, 2, 5, 5),
            (0, 0, 10, 0, 2, 2, 5, 5),
        ])

        with pytest.raises(InvalidDimensionError) as exc:
            loader.load(path, skip_invalid=False)

        assert exc.value.dimension == "height"

    def test_empty_cell_is_rejected(self, loader, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text(
            "origin1x,origin1y,width1,height1,origin2x,origin2y,width2,height2\n"
            "0,0,10,10,2,2,,5\n"
        )

        result = loader.load(path)

        assert result.pairs == []
        assert result.rejected[0][0] == 0

    def test_whitespace_after_commas(self, loader, tmp_path):
        path = tmp_path / "spaced.csv"
        path.write_text(
            "origin1x, origin1y, width1, height1, origin2x, origin2y, width2, height2\n"
            "0, 0, 10, 10, 2, 2, 5, 5\n"
        )

        assert len(loader.load(path).pairs) == 1

    def test_missing_columns(self, loader, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text("origin1x,origin1y,width1,height1\n0,0,1,1\n")

        with pytest.raises(ValueError, match="missing required columns"):
            loader.load(path)

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            loader.load(tmp_path / "nope.csv")

    def test_empty_file(self, loader, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")

        with pytest.raises(ValueError, match="empty"):
            loader.load(path)

    def test_header_only(self, loader, tmp_path, csv_writer):
        result = loader.load(csv_writer(tmp_path / "header.csv", []))

        assert result.pairs == []
        assert result.rejected == []

    def test_accepts_string_path(self, loader, sample_csv: Path):
        assert len(loader.load(str(sample_csv)).pairs) == 9
