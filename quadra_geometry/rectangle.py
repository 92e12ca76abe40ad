"""
Rectangle Module
================

Immutable axis-aligned rectangle with derived geometric queries.

Design:
- Frozen dataclass, validated at construction (fail-fast)
- Corners and sides derived on demand, never stored
- Queries are pure functions of both rectangles' corner data
- Thread-safe by design (immutability)

Corners:

    B------C
    |      |
    |      |
    A------D

    A (x, y), B (x, y + h), C (x + w, y + h), D (x + w, y)
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from quadra_geometry.adjacency import AdjacencyResult, classify_sides, fold_adjacency
from quadra_geometry.primitives import EPSILON, Point, RectangleSide, segment_intersection


class InvalidDimensionError(ValueError):
    """
    Raised when a rectangle is constructed with a non-positive dimension.

    Attributes:
        dimension: Name of the failing dimension ("width" or "height")
        value: Rejected value
    """

    def __init__(self, dimension: str, value: float):
        self.dimension = dimension
        self.value = value
        super().__init__(
            f"{dimension.capitalize()} cannot be 0 or negative value, got {value}"
        )


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable axis-aligned rectangle.

    Attributes:
        origin: Corner A (lowest x and y)
        width: Extent along x, must be > 0
        height: Extent along y, must be > 0

    Example:
        >>> rect = Rectangle(origin=Point(0, 0), width=10, height=10)
        >>> rect.area()
        100
        >>> Rectangle(origin=Point(2, 2), width=5, height=5).is_contained_inside(rect)
        True
    """

    origin: Point
    width: float
    height: float

    def __post_init__(self):
        """Validate dimensions (NaN fails both checks)."""
        if not self.width > 0:
            raise InvalidDimensionError("width", self.width)
        if not self.height > 0:
            raise InvalidDimensionError("height", self.height)

    # ------------------------------------------------------------------
    # Corners & sides
    # ------------------------------------------------------------------

    @property
    def corner_a(self) -> Point:
        return self.origin

    @property
    def corner_b(self) -> Point:
        return Point(self.origin.x, self.origin.y + self.height)

    @property
    def corner_c(self) -> Point:
        return Point(self.origin.x + self.width, self.origin.y + self.height)

    @property
    def corner_d(self) -> Point:
        return Point(self.origin.x + self.width, self.origin.y)

    @property
    def corners(self) -> List[Point]:
        """Corners in cyclic order A, B, C, D."""
        return [self.corner_a, self.corner_b, self.corner_c, self.corner_d]

    @property
    def horizontal_sides(self) -> List[RectangleSide]:
        """Sides A-D and B-C."""
        return [
            RectangleSide(self.corner_a, self.corner_d),
            RectangleSide(self.corner_b, self.corner_c),
        ]

    @property
    def vertical_sides(self) -> List[RectangleSide]:
        """Sides A-B and C-D."""
        return [
            RectangleSide(self.corner_a, self.corner_b),
            RectangleSide(self.corner_c, self.corner_d),
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def area(self) -> float:
        return self.width * self.height

    def is_contained_inside(self, container: "Rectangle") -> bool:
        """
        Check if every point of this rectangle lies inside or on the
        boundary of container.

        Containment is inclusive: identical rectangles are contained in
        each other.

            B -------------- C
            |   B---------C  |
            |   |  self   |  |
            |   A---------D  |
            |                |
            A----------------D   container
        """
        # A larger rectangle can never fit; skips the corner comparison.
        if self.area() > container.area():
            return False

        lower, upper = self.corner_a, self.corner_c
        container_lower, container_upper = container.corner_a, container.corner_c

        return (
            lower.x >= container_lower.x - EPSILON
            and lower.y >= container_lower.y - EPSILON
            and upper.x <= container_upper.x + EPSILON
            and upper.y <= container_upper.y + EPSILON
        )

    def intersecting_points(self, other: "Rectangle") -> List[Point]:
        """
        Points where a side of one rectangle crosses a perpendicular side
        of the other.

        Order: own vertical sides x other's horizontal sides, then own
        horizontal sides x other's vertical sides. Duplicates are kept.
        Colinear sides are left to is_adjacent().

        Returns:
            List of crossing points (usually 0, 2 or 4)
        """
        side_pairs = [
            (side, other_side)
            for side in self.vertical_sides
            for other_side in other.horizontal_sides
        ] + [
            (side, other_side)
            for side in self.horizontal_sides
            for other_side in other.vertical_sides
        ]

        points = []
        for side, other_side in side_pairs:
            result = segment_intersection(side, other_side)
            if result.is_intersecting:
                points.append(result.point)

        return points

    def is_adjacent(self, other: "Rectangle") -> AdjacencyResult:
        """
        Classify shared boundary between the two rectangles.

        Compares horizontal sides with horizontal sides, then vertical
        with vertical, and folds the per-pair classifications.
        """
        pair_results = [
            classify_sides(side, other_side)
            for side in self.horizontal_sides
            for other_side in other.horizontal_sides
        ] + [
            classify_sides(side, other_side)
            for side in self.vertical_sides
            for other_side in other.vertical_sides
        ]

        return fold_adjacency(pair_results)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "origin": self.origin.to_dict(),
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rectangle":
        """Deserialize from dict.

        Raises:
            InvalidDimensionError: If width or height is not positive
            ValueError: If required keys missing or invalid values
        """
        try:
            origin = Point.from_dict(data["origin"])
            width = float(data["width"])
            height = float(data["height"])
        except KeyError as e:
            raise ValueError(f"Missing required Rectangle field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Rectangle data: {e}")

        return cls(origin=origin, width=width, height=height)
