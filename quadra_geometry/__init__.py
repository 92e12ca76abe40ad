"""
Geometry Layer
==============

Bounded Context: Axis-aligned rectangle geometry.

Responsibilities:
- Point, side and rectangle representation (immutable)
- Segment intersection and colinear bounds tests
- Containment, crossing points and adjacency classification
- NO I/O, NO logging, NO state

Usage:

    from quadra_geometry import Point, Rectangle

    first = Rectangle(origin=Point(5, 5), width=5, height=5)
    second = Rectangle(origin=Point(10, 5), width=5, height=5)

    first.is_contained_inside(second)   # False
    first.intersecting_points(second)   # [Point(x=10.0, y=5.0), ...]
    first.is_adjacent(second)           # AdjacencyResult(True, PROPER)
"""

from quadra_geometry.primitives import (
    EPSILON,
    IntersectionKind,
    Point,
    RectangleSide,
    SegmentIntersection,
    colinear_point_within_segment,
    segment_intersection,
)
from quadra_geometry.adjacency import (
    NOT_ADJACENT,
    AdjacencyResult,
    AdjacencyType,
    classify_sides,
    fold_adjacency,
    merge_adjacency,
)
from quadra_geometry.rectangle import InvalidDimensionError, Rectangle

__all__ = [
    # Primitives
    "EPSILON",
    "IntersectionKind",
    "Point",
    "RectangleSide",
    "SegmentIntersection",
    "colinear_point_within_segment",
    "segment_intersection",
    # Adjacency
    "NOT_ADJACENT",
    "AdjacencyResult",
    "AdjacencyType",
    "classify_sides",
    "fold_adjacency",
    "merge_adjacency",
    # Rectangle
    "InvalidDimensionError",
    "Rectangle",
]

__version__ = "1.0.0"
