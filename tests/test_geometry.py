import math

import pytest

from geometry import (
    Point,
    cross_product,
    distance,
    hull_edges,
    is_counterclockwise,
    is_left_turn,
    is_right_turn,
    locate_point,
    point_on_segment,
    polygon_area,
    polygon_perimeter,
    same_point,
)

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_point_unpacks_like_a_tuple():
    x, y = Point(1.5, -2.0)
    assert (x, y) == (1.5, -2.0)
    assert Point(1, 2) == (1, 2)


@pytest.mark.parametrize(
    "c, sign",
    [((0, 1), 1), ((0, -1), -1), ((2, 0), 0), ((-3, 0), 0)],
)
def test_cross_product_sign(c, sign):
    value = cross_product((0, 0), (1, 0), c)
    assert (value > 0) - (value < 0) == sign


def test_cross_product_is_twice_the_triangle_area():
    assert cross_product((0, 0), (4, 0), (0, 3)) == 12


def test_turn_predicates_respect_tolerance():
    assert is_left_turn((0, 0), (1, 0), (2, 1))
    assert is_right_turn((0, 0), (1, 0), (2, -1))
    assert not is_left_turn((0, 0), (1, 0), (2, 1e-12))
    assert not is_right_turn((0, 0), (1, 0), (2, -1e-12))


def test_distance():
    assert distance((0, 0), (3, 4)) == 5
    assert distance((1, 1), (1, 1)) == 0


def test_same_point_uses_tolerance():
    assert same_point((1, 1), (1 + 1e-12, 1 - 1e-12))
    assert not same_point((1, 1), (1 + 1e-6, 1))
    assert same_point((1, 1), (1.05, 1), eps=0.1)


def test_hull_edges():
    assert hull_edges([]) == []
    assert hull_edges([Point(0, 0)]) == []
    assert hull_edges([Point(0, 0), Point(1, 0)]) == [(Point(0, 0), Point(1, 0))]
    edges = hull_edges(SQUARE)
    assert len(edges) == 4
    assert edges[-1] == (Point(0, 2), Point(0, 0))


def test_area_and_perimeter_of_square():
    assert polygon_area(SQUARE) == 4
    assert polygon_area(list(reversed(SQUARE))) == 4
    assert polygon_perimeter(SQUARE) == 8


def test_area_and_perimeter_of_degenerate_hulls():
    assert polygon_area([Point(0, 0), Point(3, 4)]) == 0
    assert polygon_perimeter([Point(0, 0), Point(3, 4)]) == 10
    assert polygon_perimeter([Point(0, 0)]) == 0
    assert polygon_area([]) == 0


def test_is_counterclockwise():
    assert is_counterclockwise(SQUARE)
    assert not is_counterclockwise(list(reversed(SQUARE)))


def test_point_on_segment():
    assert point_on_segment((0, 0), (2, 2), (1, 1))
    assert not point_on_segment((0, 0), (2, 2), (3, 3))
    assert point_on_segment((1, 1), (1, 1), (1, 1))


@pytest.mark.parametrize("polygon", [SQUARE, list(reversed(SQUARE))])
@pytest.mark.parametrize(
    "p, expected",
    [((1, 1), "inside"), ((2, 1), "on boundary"), ((0, 0), "on boundary"), ((3, 1), "outside")],
)
def test_locate_point_in_either_winding(polygon, p, expected):
    assert locate_point(polygon, p) == expected


def test_locate_point_on_degenerate_hulls():
    assert locate_point([], (0, 0)) is None
    assert locate_point([Point(1, 1)], (1, 1)) == "on boundary"
    assert locate_point([Point(1, 1)], (1, 2)) == "outside"
    segment = [Point(0, 0), Point(2, 0)]
    assert locate_point(segment, (1, 0)) == "on boundary"
    assert locate_point(segment, (1, 1)) == "outside"


def test_locate_point_on_circle_polygon():
    polygon = [Point(math.cos(a), math.sin(a)) for a in (0, math.pi / 2, math.pi, 3 * math.pi / 2)]
    assert locate_point(polygon, (0, 0)) == "inside"
    assert locate_point(polygon, (0.9, 0.9)) == "outside"
