import random

import pytest

from geometry import Point, is_counterclockwise
from hull import convex_hull
from oracles import brute_force_hull, graham_scan

CORNERS = {Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)}


@pytest.mark.parametrize("oracle", [graham_scan, brute_force_hull])
def test_square_with_interior_point(oracle, square_with_center):
    hull = oracle(square_with_center)
    assert set(hull) == CORNERS
    assert is_counterclockwise(hull)


@pytest.mark.parametrize("oracle", [graham_scan, brute_force_hull])
def test_collinear_points(oracle):
    assert set(oracle([(0, 0), (1, 0), (2, 0), (3, 0)])) == {Point(0, 0), Point(3, 0)}


@pytest.mark.parametrize("oracle", [graham_scan, brute_force_hull])
def test_points_on_edges_are_skipped(oracle):
    points = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 0), (2, 1), (1, 2), (0, 1)]
    assert set(oracle(points)) == {Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)}


@pytest.mark.parametrize("oracle", [graham_scan, brute_force_hull])
def test_small_inputs_are_deduplicated(oracle):
    assert oracle([(1, 1), (1, 1), (2, 2)]) == [Point(1, 1), Point(2, 2)]


def test_graham_scan_starts_at_lowest_point(random_cloud):
    hull = graham_scan(random_cloud)
    assert hull[0] == min(hull, key=lambda p: (p.y, p.x))


def test_oracles_agree_with_divide_and_conquer(random_cloud):
    expected = set(convex_hull(random_cloud))
    assert set(graham_scan(random_cloud)) == expected
    assert set(brute_force_hull(random_cloud)) == expected


@pytest.mark.parametrize("seed", range(25))
def test_agreement_on_integer_points(seed):
    rng = random.Random(seed)
    points = [(rng.randint(-5, 5), rng.randint(-5, 5)) for _ in range(rng.randint(3, 40))]
    if len(set(points)) < 3:
        pytest.skip("degenerate sample")
    expected = set(brute_force_hull(points))
    assert set(convex_hull(points)) == expected
    assert set(graham_scan(points)) == expected
