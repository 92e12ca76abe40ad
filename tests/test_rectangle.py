import pytest

from quadra_geometry import (
    AdjacencyType,
    InvalidDimensionError,
    Point,
    Rectangle,
    RectangleSide,
)


def flatten(points):
    return [coordinate for point in points for coordinate in (point.x, point.y)]


class TestConstruction:
    def test_valid_rectangle(self, rect):
        assert rect(0, 0, 10, 10) is not None

    @pytest.mark.parametrize("width", [0, -10, -0.5])
    def test_rejects_non_positive_width(self, rect, width):
        with pytest.raises(InvalidDimensionError, match="Width cannot be 0 or negative value") as exc:
            rect(0, 0, width, 10)

        assert exc.value.dimension == "width"
        assert exc.value.value == width

    @pytest.mark.parametrize("height", [0, -10])
    def test_rejects_non_positive_height(self, rect, height):
        with pytest.raises(InvalidDimensionError, match="Height cannot be 0 or negative value") as exc:
            rect(0, 0, 10, height)

        assert exc.value.dimension == "height"

    def test_width_checked_before_height(self, rect):
        with pytest.raises(InvalidDimensionError) as exc:
            rect(0, 0, -1, -1)

        assert exc.value.dimension == "width"

    @pytest.mark.parametrize("width, height, dimension", [
        (float("nan"), 1, "width"),
        (1, float("nan"), "height"),
    ])
    def test_rejects_nan(self, rect, width, height, dimension):
        with pytest.raises(InvalidDimensionError) as exc:
            rect(0, 0, width, height)

        assert exc.value.dimension == dimension

    def test_invalid_dimension_is_value_error(self, rect):
        with pytest.raises(ValueError):
            rect(0, 0, 10, 0)

    def test_rectangles_are_immutable(self, rect):
        with pytest.raises(AttributeError):
            rect(0, 0, 10, 10).width = 20


class TestAccessors:
    def test_origin_width_height(self, rect):
        r = rect(5, 7, 10, 20)

        assert r.origin == Point(5, 7)
        assert r.width == 10
        assert r.height == 20

    def test_corners_form_cycle(self, rect):
        r = rect(5, 7, 10, 20)

        assert r.corners == [Point(5, 7), Point(5, 27), Point(15, 27), Point(15, 7)]

    def test_named_corners(self, rect):
        r = rect(0, 0, 10, 10)

        assert r.corner_a == Point(0, 0)
        assert r.corner_b == Point(0, 10)
        assert r.corner_c == Point(10, 10)
        assert r.corner_d == Point(10, 0)

    def test_sides(self, rect):
        r = rect(5, 7, 10, 20)

        assert r.horizontal_sides == [
            RectangleSide(Point(5, 7), Point(15, 7)),
            RectangleSide(Point(5, 27), Point(15, 27)),
        ]
        assert r.vertical_sides == [
            RectangleSide(Point(5, 7), Point(5, 27)),
            RectangleSide(Point(15, 27), Point(15, 7)),
        ]
        assert all(side.is_horizontal for side in r.horizontal_sides)
        assert all(side.is_vertical for side in r.vertical_sides)

    @pytest.mark.parametrize("width, height", [(10, 10), (2.5, 4), (1, 100)])
    def test_area(self, rect, width, height):
        assert rect(3, -4, width, height).area() == width * height

    def test_dict_round_trip(self, rect):
        r = rect(5, 7, 10, 20)

        assert r.to_dict() == {"origin": {"x": 5, "y": 7}, "width": 10, "height": 20}
        assert Rectangle.from_dict(r.to_dict()) == r

    def test_from_dict_validates(self):
        with pytest.raises(InvalidDimensionError):
            Rectangle.from_dict({"origin": {"x": 0, "y": 0}, "width": 0, "height": 1})

        with pytest.raises(ValueError, match="Missing required Rectangle field"):
            Rectangle.from_dict({"origin": {"x": 0, "y": 0}, "width": 1})


class TestContainment:
    def test_smaller_inside_larger(self, rect):
        outer = rect(0, 0, 10, 10)
        inner = rect(2, 2, 5, 5)

        assert inner.is_contained_inside(outer)
        assert not outer.is_contained_inside(inner)

    def test_identical_rectangles_contain_each_other(self, rect):
        first = rect(0, 0, 10, 10)
        second = rect(0, 0, 10, 10)

        assert first.is_contained_inside(second)
        assert second.is_contained_inside(first)

    def test_touching_inner_boundary_is_contained(self, rect):
        assert rect(0, 0, 5, 10).is_contained_inside(rect(0, 0, 10, 10))
        assert rect(5, 0, 5, 10).is_contained_inside(rect(0, 0, 10, 10))

    def test_smaller_area_but_sticking_out(self, rect):
        assert not rect(8, 8, 5, 5).is_contained_inside(rect(0, 0, 10, 10))

    def test_thin_rectangle_wider_than_container(self, rect):
        # smaller area, wider extent
        assert not rect(-1, 4, 12, 1).is_contained_inside(rect(0, 0, 10, 10))

    def test_disjoint(self, rect):
        assert not rect(20, 20, 1, 1).is_contained_inside(rect(0, 0, 10, 10))


class TestIntersectingPoints:
    def test_four_points(self, rect):
        first = rect(5, 5, 10, 10)
        second = rect(7, 3, 5, 20)

        points = first.intersecting_points(second)

        assert len(points) == 4
        assert flatten(points) == pytest.approx([7, 5, 12, 5, 7, 15, 12, 15])

    def test_two_points(self, rect):
        points = rect(5, 5, 10, 10).intersecting_points(rect(7, 7, 5, 20))

        assert len(points) == 2
        assert flatten(points) == pytest.approx([7, 15, 12, 15])

    def test_no_points(self, rect):
        assert rect(5, 5, 10, 10).intersecting_points(rect(25, 5, 5, 20)) == []

    def test_own_vertical_sides_enumerated_first(self, rect):
        # first's vertical sides cross second's horizontal sides
        points = rect(7, 3, 5, 20).intersecting_points(rect(5, 5, 10, 10))

        assert flatten(points) == pytest.approx([7, 5, 7, 15, 12, 5, 12, 15])

    def test_corner_touch_keeps_duplicates(self, rect):
        points = rect(10, 10, 10, 10).intersecting_points(rect(20, 0, 10, 10))

        assert len(points) == 2
        assert flatten(points) == pytest.approx([20, 10, 20, 10])

    def test_colinear_sides_are_not_crossings(self, rect):
        # shared edge on x=10; crossings only at its endpoints
        points = rect(5, 5, 5, 5).intersecting_points(rect(10, 5, 5, 5))

        assert flatten(points) == pytest.approx([10, 5, 10, 10, 10, 5, 10, 10])

    def test_contained_rectangle_has_no_crossings(self, rect):
        assert rect(2, 2, 5, 5).intersecting_points(rect(0, 0, 10, 10)) == []


class TestAdjacency:
    def test_proper(self, rect):
        adjacency = rect(5, 5, 5, 5).is_adjacent(rect(10, 5, 5, 5))

        assert adjacency.is_adjacent
        assert adjacency.adjacency_type is AdjacencyType.PROPER

    def test_proper_is_symmetric(self, rect):
        adjacency = rect(10, 5, 5, 5).is_adjacent(rect(5, 5, 5, 5))

        assert adjacency.adjacency_type is AdjacencyType.PROPER

    def test_subline(self, rect):
        adjacency = rect(5, 5, 5, 10).is_adjacent(rect(10, 7, 5, 5))

        assert adjacency.is_adjacent
        assert adjacency.adjacency_type == "subline"

    def test_partial(self, rect):
        adjacency = rect(5, 5, 5, 10).is_adjacent(rect(10, 7, 5, 25))

        assert adjacency.is_adjacent
        assert adjacency.adjacency_type is AdjacencyType.PARTIAL

    def test_partial_corner_only(self, rect):
        adjacency = rect(10, 10, 10, 10).is_adjacent(rect(20, 0, 10, 10))

        assert adjacency.is_adjacent
        assert adjacency.adjacency_type is AdjacencyType.PARTIAL

    def test_not_adjacent(self, rect):
        adjacency = rect(5, 5, 5, 10).is_adjacent(rect(25, 7, 5, 25))

        assert not adjacency.is_adjacent
        assert adjacency.adjacency_type is AdjacencyType.NONE

    def test_stacked_vertically(self, rect):
        adjacency = rect(0, 0, 10, 5).is_adjacent(rect(0, 5, 10, 5))

        assert adjacency.adjacency_type is AdjacencyType.PROPER

    @pytest.mark.parametrize("first, second", [
        # top of the first is 0.1 + 0.2, not 0.3, along a 1e8 long side
        ((0, 0.1, 1e8, 0.2), (0, 0.3, 1e8, 1)),
        ((0, 0, 100, 1), (0, 1 + 5e-10, 100, 1)),
    ])
    def test_proper_despite_float_noise(self, rect, first, second):
        adjacency = rect(*first).is_adjacent(rect(*second))

        assert adjacency.adjacency_type is AdjacencyType.PROPER


def test_queries_are_idempotent(rect):
    first = rect(5, 5, 10, 10)
    second = rect(7, 3, 5, 20)

    assert first.intersecting_points(second) == first.intersecting_points(second)
    assert first.is_adjacent(second) == first.is_adjacent(second)
    assert first.is_contained_inside(second) == first.is_contained_inside(second)
    assert first.area() == first.area()
