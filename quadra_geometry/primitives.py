"""
Segment Primitives Module
=========================

Pure 2D line-geometry helpers - NO rectangles, NO state.

Design:
- Immutable values (frozen dataclass pattern)
- Cross products on numpy vectors for intersection parameters
- Explicit absolute tolerance (EPSILON) for every float comparison
- Reused by Rectangle for containment, crossing and adjacency queries
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np

EPSILON = 1e-9
"""Absolute tolerance for colinearity and boundary-inclusion tests."""


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> Point(x=5, y=7).to_dict()
        {'x': 5, 'y': 7}
    """

    x: float
    y: float

    def as_array(self) -> np.ndarray:
        """Return the point as a float numpy vector."""
        return np.array([self.x, self.y], dtype=float)

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Point":
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(x=float(data["x"]), y=float(data["y"]))
        except KeyError as e:
            raise ValueError(f"Missing required Point field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Point data: {e}")


@dataclass(frozen=True)
class RectangleSide:
    """
    Immutable segment between two points (one side of a rectangle).

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @property
    def is_vertical(self) -> bool:
        return abs(self.start.x - self.end.x) <= EPSILON

    @property
    def is_horizontal(self) -> bool:
        return abs(self.start.y - self.end.y) <= EPSILON


class IntersectionKind(str, Enum):
    """Outcome of testing two segments against each other."""

    INTERSECTING = "intersecting"
    """Segments cross (or touch) at exactly one point."""

    PARALLEL = "parallel"
    """Segments are parallel on distinct lines."""

    COLINEAR = "colinear"
    """Segments lie on the same infinite line."""

    NONE = "none"
    """Lines cross, but outside at least one of the segments."""


@dataclass(frozen=True)
class SegmentIntersection:
    """
    Result of segment_intersection().

    Attributes:
        kind: Classification of the segment pair
        point: Crossing point, only set when kind is INTERSECTING
    """

    kind: IntersectionKind
    point: Optional[Point] = None

    @property
    def is_intersecting(self) -> bool:
        return self.kind is IntersectionKind.INTERSECTING

    @property
    def is_colinear(self) -> bool:
        return self.kind is IntersectionKind.COLINEAR


def _cross(u: np.ndarray, v: np.ndarray) -> float:
    """z-component of the cross product of two 2D vectors."""
    return float(u[0] * v[1] - u[1] * v[0])


def _distance_from_line(offset: np.ndarray, direction: np.ndarray) -> float:
    """Perpendicular distance of offset from the line through the origin along direction."""
    length = float(np.linalg.norm(direction))
    if length == 0.0:
        return float(np.linalg.norm(offset))
    return abs(_cross(direction, offset)) / length


def _within_unit(value: float, slack: float) -> bool:
    return -slack <= value <= 1 + slack


def segment_intersection(
    first: RectangleSide,
    second: RectangleSide
) -> SegmentIntersection:
    """
    Classify two segments as intersecting, parallel, colinear or disjoint.

    Parametrises both segments (first = P + t*r, second = Q + u*s) and
    solves for t and u with cross products:

        denom = r x s
        t     = (s x (P - Q)) / denom   # position along first
        u     = (r x (P - Q)) / denom   # position along second

    Every tolerance is a distance in coordinate units, so the outcome does
    not depend on segment length:

    - parallel when |denom| <= EPSILON * |r| * |s| (sine of the angle)
    - colinear when parallel and P lies within EPSILON of the line Q + u*s
      (and Q of the line P + t*r)
    - t and u get a slack of EPSILON / |r| and EPSILON / |s|

    Endpoints are inclusive, so segments touching at a corner are
    INTERSECTING.

    Args:
        first: Segment P -> P + r
        second: Segment Q -> Q + s

    Returns:
        SegmentIntersection with the crossing point when INTERSECTING
    """
    p = first.start.as_array()
    r = first.end.as_array() - p
    q = second.start.as_array()
    s = second.end.as_array() - q
    offset = p - q

    length_first = float(np.linalg.norm(r))
    length_second = float(np.linalg.norm(s))
    denom = _cross(r, s)

    if abs(denom) <= EPSILON * length_first * length_second:
        if (
            _distance_from_line(offset, s) <= EPSILON
            and _distance_from_line(offset, r) <= EPSILON
        ):
            return SegmentIntersection(kind=IntersectionKind.COLINEAR)
        return SegmentIntersection(kind=IntersectionKind.PARALLEL)

    t = _cross(s, offset) / denom
    u = _cross(r, offset) / denom

    if (
        _within_unit(t, EPSILON / length_first)
        and _within_unit(u, EPSILON / length_second)
    ):
        x, y = p + t * r
        return SegmentIntersection(
            kind=IntersectionKind.INTERSECTING,
            point=Point(x=float(x), y=float(y))
        )

    return SegmentIntersection(kind=IntersectionKind.NONE)


def colinear_point_within_segment(point: Point, segment: RectangleSide) -> bool:
    """
    Check whether a point already known to be on the segment's line lies
    within the segment bounds (inclusive).

    Only one axis is compared: x for non-vertical segments, y for vertical
    ones. The result is meaningless for points off the line.
    """
    start, end = segment.start, segment.end

    if not segment.is_vertical:
        low, high = min(start.x, end.x), max(start.x, end.x)
        return low - EPSILON <= point.x <= high + EPSILON

    low, high = min(start.y, end.y), max(start.y, end.y)
    return low - EPSILON <= point.y <= high + EPSILON
