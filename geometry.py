import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

EPSILON = 1e-9


class Point(NamedTuple):
    x: float
    y: float


Segment = Tuple[Point, Point]


def cross_product(a: Point, b: Point, c: Point) -> float:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def same_point(a: Point, b: Point, eps: float = EPSILON) -> bool:
    return abs(a[0] - b[0]) <= eps and abs(a[1] - b[1]) <= eps


def is_left_turn(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    return cross_product(a, b, c) > eps


def is_right_turn(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    return cross_product(a, b, c) < -eps


def hull_edges(hull: Sequence[Point]) -> List[Segment]:
    if len(hull) < 2:
        return []
    if len(hull) == 2:
        return [(hull[0], hull[1])]
    return [(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def signed_area(polygon: Sequence[Point]) -> float:
    n = len(polygon)
    if n < 3:
        return 0.0
    total = 0.0
    for i in range(n):
        x0, y0 = polygon[i]
        x1, y1 = polygon[(i + 1) % n]
        total += x0 * y1 - x1 * y0
    return total / 2.0


def is_counterclockwise(polygon: Sequence[Point]) -> bool:
    return signed_area(polygon) > 0.0


def polygon_area(hull: Sequence[Point]) -> float:
    return abs(signed_area(hull))


def polygon_perimeter(hull: Sequence[Point]) -> float:
    if len(hull) < 2:
        return 0.0
    n = len(hull)
    # a segment is walked there and back
    return sum(distance(hull[i], hull[(i + 1) % n]) for i in range(n))


def point_on_segment(a: Point, b: Point, p: Point, eps: float = EPSILON) -> bool:
    (ax, ay), (bx, by), (px, py) = a, b, p
    abx, aby = (bx - ax), (by - ay)
    apx, apy = (px - ax), (py - ay)

    ab2 = abx * abx + aby * aby
    if ab2 == 0.0:
        return math.hypot(apx, apy) <= eps

    t = max(0.0, min(1.0, (apx * abx + apy * aby) / ab2))
    qx, qy = ax + t * abx, ay + t * aby
    return math.hypot(px - qx, py - qy) <= eps


def locate_point(hull: Sequence[Point], p: Point, eps: float = EPSILON) -> Optional[str]:
    if not hull:
        return None
    if len(hull) == 1:
        return "on boundary" if distance(hull[0], p) <= eps else "outside"
    if len(hull) == 2:
        return "on boundary" if point_on_segment(hull[0], hull[1], p, eps) else "outside"

    sign = 1.0 if is_counterclockwise(hull) else -1.0
    on_boundary = False
    for a, b in hull_edges(hull):
        if point_on_segment(a, b, p, eps):
            on_boundary = True
            continue
        if sign * cross_product(a, b, p) < -eps:
            return "outside"
    return "on boundary" if on_boundary else "inside"
