"""
Adjacency Classification Module
===============================

Stateless side-by-side adjacency tests between rectangle sides.

Design:
- classify_sides(): one colinear side pair -> AdjacencyResult
- merge_adjacency(): combine two results (no mutation, returns new value)
- fold_adjacency(): pure reduction over all pair results

Strength ordering used when merging:
    none < partial < {subline, proper}

A later "partial" pair never downgrades an established "subline" or
"proper" result. Corner contact shows up as "partial" on one pair while
another pair may share a full edge.
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import Any, Dict, Iterable

from quadra_geometry.primitives import (
    RectangleSide,
    colinear_point_within_segment,
    segment_intersection,
)


class AdjacencyType(str, Enum):
    """Kind of contact between two colinear sides."""

    NONE = "none"
    """No shared boundary point."""

    PARTIAL = "partial"
    """Sides overlap over a strict partial extent, or touch at one point."""

    SUBLINE = "subline"
    """One side lies entirely within the other."""

    PROPER = "proper"
    """Sides coincide over their full length."""


STRONG_ADJACENCY_TYPES = frozenset({AdjacencyType.SUBLINE, AdjacencyType.PROPER})


@dataclass(frozen=True)
class AdjacencyResult:
    """
    Immutable adjacency verdict.

    Attributes:
        is_adjacent: True when the two shapes share boundary points
        adjacency_type: Classification of the shared boundary
    """

    is_adjacent: bool = False
    adjacency_type: AdjacencyType = AdjacencyType.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "is_adjacent": self.is_adjacent,
            "adjacency_type": self.adjacency_type.value,
        }


NOT_ADJACENT = AdjacencyResult()


def classify_sides(side: RectangleSide, other: RectangleSide) -> AdjacencyResult:
    """
    Classify the contact between two sides of the same orientation.

    Endpoints of each side are tested against the bounds of the other:
    - all four inside          -> proper
    - both of one side inside  -> subline
    - anything else inside     -> partial
    - nothing inside           -> none

    Non-colinear sides are never adjacent.
    """
    if not segment_intersection(side, other).is_colinear:
        return NOT_ADJACENT

    start_in_other = colinear_point_within_segment(side.start, other)
    end_in_other = colinear_point_within_segment(side.end, other)
    other_start_in_side = colinear_point_within_segment(other.start, side)
    other_end_in_side = colinear_point_within_segment(other.end, side)

    side_within = start_in_other and end_in_other
    other_within = other_start_in_side and other_end_in_side

    if side_within and other_within:
        return AdjacencyResult(True, AdjacencyType.PROPER)

    if side_within or other_within:
        return AdjacencyResult(True, AdjacencyType.SUBLINE)

    if start_in_other or end_in_other or other_start_in_side or other_end_in_side:
        return AdjacencyResult(True, AdjacencyType.PARTIAL)

    return NOT_ADJACENT


def merge_adjacency(running: AdjacencyResult, new: AdjacencyResult) -> AdjacencyResult:
    """
    Combine an accumulated result with the next pair result.

    Args:
        running: Result accumulated so far
        new: Result of the next side pair

    Returns:
        New result (inputs untouched)
    """
    if not running.is_adjacent and new.is_adjacent:
        return new

    if new.adjacency_type in STRONG_ADJACENCY_TYPES:
        return replace(running, adjacency_type=new.adjacency_type)

    return running


def fold_adjacency(results: Iterable[AdjacencyResult]) -> AdjacencyResult:
    """Reduce pair results left to right, starting from NOT_ADJACENT."""
    return reduce(merge_adjacency, results, NOT_ADJACENT)
