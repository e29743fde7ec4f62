from geometry import Point, cross_product, locate_point


def assert_contains_all(hull, points, eps=1e-7):
    for p in points:
        assert locate_point(hull, Point(*p), eps) != "outside", f"{p} lies outside {hull}"


def assert_vertices_are_inputs(hull, points):
    inputs = {Point(float(x), float(y)) for x, y in points}
    assert set(hull) <= inputs


def assert_strictly_convex_ccw(hull, eps=1e-9):
    n = len(hull)
    if n < 3:
        return
    for k in range(n):
        turn = cross_product(hull[k - 1], hull[k], hull[(k + 1) % n])
        assert turn > eps, f"turn at {hull[k]} is {turn}"


def assert_minimal(hull):
    for k, vertex in enumerate(hull):
        rest = hull[:k] + hull[k + 1:]
        assert locate_point(rest, vertex) == "outside", f"{vertex} is redundant in {hull}"
