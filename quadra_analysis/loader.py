"""
Rectangle Data Loader
=====================

Reads rectangle pairs from a CSV file.

Expected layout (header row required, extra columns ignored):

    origin1x,origin1y,width1,height1,origin2x,origin2y,width2,height2
    0,0,10,10,2,2,5,5
"""

from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from quadra_geometry import InvalidDimensionError
from quadra_logging import LogEvent, StructuredLogger, create_logger

from .schemas import CSV_COLUMNS, LoadResult, RectanglePair


class RectangleDataLoader:
    """
    Loads RectanglePair records from CSV.

    Invalid rows are either collected as rejects (skip_invalid=True) or
    raised immediately.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or create_logger("loader")

    def read_frame(self, path: Path) -> pd.DataFrame:
        """
        Read the CSV file and check required columns.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is empty or lacks required columns
        """
        path = Path(path)
        if not path.exists():
            error = FileNotFoundError(f"Data file not found: {path}")
            self.logger.error(
                event=LogEvent.INPUT_READ_ERROR,
                message="Data file not found",
                metadata={'data_path': str(path)},
                exc_info=error
            )
            raise error

        try:
            frame = pd.read_csv(path, skipinitialspace=True)
        except pd.errors.EmptyDataError as e:
            raise ValueError(f"Data file is empty: {path}") from e
        except pd.errors.ParserError as e:
            raise ValueError(f"Malformed CSV in {path}: {e}") from e

        frame.columns = [str(column).strip() for column in frame.columns]

        missing = [column for column in CSV_COLUMNS if column not in frame.columns]
        if missing:
            raise ValueError(
                f"Data file {path} is missing required columns: {', '.join(missing)}"
            )

        return frame

    def load(self, path: Path, skip_invalid: bool = True) -> LoadResult:
        """
        Parse every row of the file into rectangle pairs.

        Args:
            path: CSV file path
            skip_invalid: Collect invalid rows as rejects instead of raising

        Returns:
            LoadResult with parsed pairs and (row_index, reason) rejects

        Raises:
            ValueError: On the first invalid row when skip_invalid is False
        """
        frame = self.read_frame(path)

        pairs: List[RectanglePair] = []
        rejected: List[Tuple[int, str]] = []

        for row_index, row in enumerate(frame.to_dict(orient="records")):
            try:
                pair = RectanglePair.from_row(row, row_index)
            except ValueError as e:
                event = (
                    LogEvent.INVALID_DIMENSION_ERROR
                    if isinstance(e, InvalidDimensionError)
                    else LogEvent.ROW_INVALID
                )
                if not skip_invalid:
                    self.logger.error(
                        event=event,
                        message=f"Invalid row {row_index}",
                        metadata={'row_index': row_index},
                        exc_info=e
                    )
                    raise

                self.logger.warning(
                    event=event,
                    message=f"Skipping row {row_index}: {e}",
                    metadata={'row_index': row_index}
                )
                rejected.append((row_index, str(e)))
                continue

            self.logger.debug(
                event=LogEvent.ROW_LOADED,
                message=f"Loaded row {row_index}",
                metadata={'row_index': row_index}
            )
            pairs.append(pair)

        return LoadResult(pairs=pairs, rejected=rejected)
