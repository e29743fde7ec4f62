"""Divide-and-conquer planar convex hull.

Points are deduplicated, sorted by (x, y), split at the median index and solved
recursively; the two half hulls are joined along their upper and lower tangents.
Every hull this module returns is counterclockwise with no collinear vertices.
"""
import logging
import math
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from geometry import EPSILON, Point, cross_product, distance, same_point

logger = logging.getLogger(__name__)

Tangent = Tuple[int, int]

# neighbour directions around a counterclockwise hull, and which side of the
# candidate tangent a neighbour has to be on for the search to move to it
CCW, CW = 1, -1
LEFT, RIGHT = 1, -1


class InvalidArgumentError(ValueError):
    """Input that cannot produce a convex hull."""


class Ring:
    """Read-only circular view over the vertices of a hull."""

    def __init__(self, vertices: Sequence[Point]):
        self.vertices = vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, index: int) -> Point:
        return self.vertices[index % len(self.vertices)]

    def step(self, index: int, direction: int) -> int:
        return (index + direction) % len(self.vertices)

    def walk(self, start: int, stop: int) -> Iterator[Point]:
        """Yield vertices counterclockwise from start to stop, both included."""
        index = start
        while True:
            yield self.vertices[index]
            if index == stop:
                return
            index = self.step(index, CCW)


def preprocess(points: Iterable[Point], eps: float = EPSILON) -> List[Point]:
    """Deduplicate points within eps and sort them by x, then y.

    The first point in sorted order of each cluster is kept.
    """
    ordered = sorted(points)
    if eps == 0:
        seen = set()
        exact: List[Point] = []
        for point in ordered:
            if point not in seen:
                seen.add(point)
                exact.append(point)
        return exact

    # points within eps of each other fall in the same or a neighbouring eps-sized cell
    cells: Dict[Tuple[int, int], List[Point]] = {}
    unique: List[Point] = []
    for point in ordered:
        cx, cy = math.floor(point[0] / eps), math.floor(point[1] / eps)
        duplicate = any(
            same_point(point, kept, eps)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            for kept in cells.get((cx + dx, cy + dy), ())
        )
        if not duplicate:
            cells.setdefault((cx, cy), []).append(point)
            unique.append(point)
    return unique


def solve_base_case(points: Sequence[Point], eps: float = EPSILON) -> List[Point]:
    """Hull of at most three distinct points."""
    if len(points) > 3:
        raise ValueError(f"base case takes at most 3 points, got {len(points)}")
    if len(points) < 3:
        return list(points)

    p1, p2, p3 = points
    cross = cross_product(p1, p2, p3)
    if abs(cross) <= eps:
        pairs = [(p1, p2), (p1, p3), (p2, p3)]
        return list(max(pairs, key=lambda pair: distance(*pair)))
    if cross > 0:
        return [p1, p2, p3]
    return [p1, p3, p2]


def _rightmost(hull: Sequence[Point]) -> int:
    return max(range(len(hull)), key=lambda i: (hull[i][0], hull[i][1]))


def _leftmost(hull: Sequence[Point]) -> int:
    return min(range(len(hull)), key=lambda i: (hull[i][0], hull[i][1]))


def _advance(anchor: Point, ring: Ring, index: int, direction: int, side: int, eps: float) -> int:
    """Slide index around ring while the line anchor->ring[index] can be improved.

    A neighbour is taken when it lies strictly on `side` of the line, or on the
    line and farther from anchor. The walk never exceeds one lap.
    """
    for _ in range(len(ring)):
        candidate = ring.step(index, direction)
        turn = side * cross_product(anchor, ring[index], ring[candidate])
        if turn > eps:
            index = candidate
        elif abs(turn) <= eps and distance(anchor, ring[candidate]) > distance(anchor, ring[index]) + eps:
            index = candidate
        else:
            break
    return index


def _search_tangent(
    left: Ring,
    right: Ring,
    i: int,
    j: int,
    right_move: Tuple[int, int],
    left_move: Tuple[int, int],
    eps: float,
) -> Tangent:
    while True:
        next_j = _advance(left[i], right, j, *right_move, eps)
        next_i = _advance(right[next_j], left, i, *left_move, eps)
        if (next_i, next_j) == (i, j):
            return i, j
        i, j = next_i, next_j


def upper_tangent(left: Ring, right: Ring, i: int, j: int, eps: float = EPSILON) -> Tangent:
    # above a rightward line is its left side, above a leftward line its right side
    return _search_tangent(left, right, i, j, (CW, LEFT), (CCW, RIGHT), eps)


def lower_tangent(left: Ring, right: Ring, i: int, j: int, eps: float = EPSILON) -> Tangent:
    return _search_tangent(left, right, i, j, (CCW, RIGHT), (CW, LEFT), eps)


def _tangent_indices(
    left_hull: Sequence[Point], right_hull: Sequence[Point], eps: float
) -> Tuple[Tangent, Tangent]:
    left, right = Ring(left_hull), Ring(right_hull)
    i, j = _rightmost(left_hull), _leftmost(right_hull)
    return upper_tangent(left, right, i, j, eps), lower_tangent(left, right, i, j, eps)


def find_tangents(
    left_hull: Sequence[Point], right_hull: Sequence[Point], eps: float = EPSILON
) -> Tuple[Tuple[Point, Point], Tuple[Point, Point]]:
    """Upper and lower tangents between two separated hulls, as (left, right) pairs."""
    (ui, uj), (li, lj) = _tangent_indices(left_hull, right_hull, eps)
    return (left_hull[ui], right_hull[uj]), (left_hull[li], right_hull[lj])


def _drop_collinear(polygon: List[Point], eps: float) -> List[Point]:
    if len(polygon) < 3:
        return polygon
    n = len(polygon)
    kept = [
        vertex
        for k, vertex in enumerate(polygon)
        if abs(cross_product(polygon[k - 1], vertex, polygon[(k + 1) % n])) > eps
    ]
    if len(kept) < 3:
        # everything lies on one line
        return [min(polygon), max(polygon)]
    return kept


def merge_hulls(left_hull: Sequence[Point], right_hull: Sequence[Point], eps: float = EPSILON) -> List[Point]:
    """Hull of the union of two hulls, the left one lexicographically before the right.

    Neither input is modified.
    """
    if not left_hull:
        return list(right_hull)
    if not right_hull:
        return list(left_hull)

    (ui, uj), (li, lj) = _tangent_indices(left_hull, right_hull, eps)
    left, right = Ring(left_hull), Ring(right_hull)
    merged = list(left.walk(ui, li))
    merged.extend(right.walk(lj, uj))
    merged = _drop_collinear(merged, eps)

    logger.debug(
        "merged hulls of %d and %d vertices into %d (upper %s-%s, lower %s-%s)",
        len(left_hull), len(right_hull), len(merged),
        left_hull[ui], right_hull[uj], left_hull[li], right_hull[lj],
    )
    return merged


def divide_and_conquer(points: Sequence[Point], eps: float = EPSILON) -> List[Point]:
    """Hull of points already sorted by (x, y) and free of duplicates."""
    if len(points) <= 3:
        return solve_base_case(points, eps)
    mid = len(points) // 2
    left_hull = divide_and_conquer(points[:mid], eps)
    right_hull = divide_and_conquer(points[mid:], eps)
    return merge_hulls(left_hull, right_hull, eps)


def _to_point(value) -> Point:
    try:
        x, y = value
        point = Point(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"not a 2-D point: {value!r}") from exc
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise InvalidArgumentError(f"point has a non-finite coordinate: {value!r}")
    return point


def _rotate_to_lowest(hull: List[Point]) -> List[Point]:
    start = _leftmost(hull)
    return hull[start:] + hull[:start]


def convex_hull(points: Optional[Iterable[Point]], eps: float = EPSILON) -> List[Point]:
    """Convex hull of a planar point set.

    Returns the hull vertices counterclockwise, starting from the vertex with the
    smallest (x, y). All-collinear input gives its two extreme points.

    Raises:
        InvalidArgumentError: points is None or empty, has fewer than three
            distinct points, holds something that is not a finite (x, y) pair,
            or eps is negative, not finite or not a number.
    """
    if points is None:
        raise InvalidArgumentError("points must not be None")
    try:
        valid_eps = math.isfinite(eps) and eps >= 0
    except TypeError as exc:
        raise InvalidArgumentError(f"eps must be a number, got {eps!r}") from exc
    if not valid_eps:
        raise InvalidArgumentError(f"eps must be a finite non-negative number, got {eps!r}")

    try:
        values = iter(points)
    except TypeError as exc:
        raise InvalidArgumentError(f"points must be iterable, got {type(points).__name__}") from exc
    candidates = [_to_point(p) for p in values]
    if not candidates:
        raise InvalidArgumentError("points must not be empty")

    unique = preprocess(candidates, eps)
    if len(unique) < 3:
        raise InvalidArgumentError(
            f"a convex hull needs at least 3 distinct points, got {len(unique)}"
        )

    logger.debug("computing hull of %d points (%d distinct)", len(candidates), len(unique))
    return _rotate_to_lowest(divide_and_conquer(unique, eps))
