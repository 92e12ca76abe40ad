"""
Analysis Schemas
================

Bounded Context: Data Structures

Immutable records exchanged between the loader, the analyzer and the
report formatters.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Serialization: to_dict() for JSON export
- Validation: from_row() rejects malformed input rows
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from quadra_geometry import AdjacencyResult, NOT_ADJACENT, Point, Rectangle

CSV_COLUMNS = (
    "origin1x", "origin1y", "width1", "height1",
    "origin2x", "origin2y", "width2", "height2",
)


class RelationType(str, Enum):
    """Relation reported for a rectangle pair (first match wins)."""

    CONTAINMENT = "containment"
    ADJACENCY = "adjacency"
    INTERSECTION = "intersection"
    DISJOINT = "disjoint"


@dataclass(frozen=True)
class RectanglePair:
    """
    Two rectangles read from one input row.

    Attributes:
        row_index: Zero-based data row index in the source file
        first: Rectangle 1 (origin1x, origin1y, width1, height1)
        second: Rectangle 2 (origin2x, origin2y, width2, height2)
    """

    row_index: int
    first: Rectangle
    second: Rectangle

    @classmethod
    def from_row(cls, row: Mapping[str, Any], row_index: int) -> "RectanglePair":
        """
        Build a pair from a CSV row.

        Raises:
            InvalidDimensionError: If a width or height is not positive
            ValueError: If a column is missing or not numeric
        """
        try:
            values = {column: float(row[column]) for column in CSV_COLUMNS}
        except KeyError as e:
            raise ValueError(f"Row {row_index}: missing column {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Row {row_index}: invalid value ({e})")

        if any(math.isnan(value) for value in values.values()):
            raise ValueError(f"Row {row_index}: empty value")

        return cls(
            row_index=row_index,
            first=Rectangle(
                origin=Point(values["origin1x"], values["origin1y"]),
                width=values["width1"],
                height=values["height1"],
            ),
            second=Rectangle(
                origin=Point(values["origin2x"], values["origin2y"]),
                width=values["width2"],
                height=values["height2"],
            ),
        )


@dataclass(frozen=True)
class PairAnalysis:
    """
    Outcome of analysing one rectangle pair.

    Attributes:
        row_index: Source row index
        first: Rectangle 1
        second: Rectangle 2
        relation: Strongest relation found
        container: 1 or 2 when one rectangle contains the other
            (1 for identical rectangles), otherwise None
        adjacency: Adjacency verdict (NOT_ADJACENT unless relation is ADJACENCY)
        intersections: Crossing points (empty unless relation is INTERSECTION)
    """

    row_index: int
    first: Rectangle
    second: Rectangle
    relation: RelationType
    container: Optional[int] = None
    adjacency: AdjacencyResult = NOT_ADJACENT
    intersections: Tuple[Point, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "row_index": self.row_index,
            "first": self.first.to_dict(),
            "second": self.second.to_dict(),
            "relation": self.relation.value,
            "container": self.container,
            "adjacency": self.adjacency.to_dict(),
            "intersections": [point.to_dict() for point in self.intersections],
        }


@dataclass(frozen=True)
class AnalysisSummary:
    """Aggregate counts for a batch run."""

    rows_processed: int
    rows_rejected: int
    relation_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_results(
        cls,
        results: Sequence[PairAnalysis],
        rejected: Sequence[Tuple[int, str]] = ()
    ) -> "AnalysisSummary":
        counts = {relation.value: 0 for relation in RelationType}
        for result in results:
            counts[result.relation.value] += 1

        return cls(
            rows_processed=len(results) + len(rejected),
            rows_rejected=len(rejected),
            relation_counts=counts,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows_processed": self.rows_processed,
            "rows_rejected": self.rows_rejected,
            "relation_counts": dict(self.relation_counts),
        }


@dataclass(frozen=True)
class LoadResult:
    """Pairs parsed from a file, plus rejected rows as (row_index, reason)."""

    pairs: List[RectanglePair]
    rejected: List[Tuple[int, str]] = field(default_factory=list)
