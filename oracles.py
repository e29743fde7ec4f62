"""Slow or independent hull algorithms used to cross-check the divide-and-conquer one."""
import math
from functools import cmp_to_key
from typing import Iterable, List

from geometry import EPSILON, Point, cross_product, distance, point_on_segment
from hull import preprocess


def graham_scan(points: Iterable[Point], eps: float = EPSILON) -> List[Point]:
    pts = preprocess((Point(float(x), float(y)) for x, y in points), eps)
    if len(pts) < 3:
        return pts

    pivot = min(pts, key=lambda p: (p[1], p[0]))
    rest = [p for p in pts if p is not pivot]

    def by_angle(a: Point, b: Point) -> int:
        turn = cross_product(pivot, a, b)
        if turn > eps:
            return -1
        if turn < -eps:
            return 1
        da, db = distance(pivot, a), distance(pivot, b)
        return (da > db) - (da < db)

    rest.sort(key=cmp_to_key(by_angle))

    stack: List[Point] = [pivot]
    for p in rest:
        while len(stack) >= 2 and cross_product(stack[-2], stack[-1], p) <= eps:
            stack.pop()
        stack.append(p)
    return stack


def brute_force_hull(points: Iterable[Point], eps: float = EPSILON) -> List[Point]:
    pts = preprocess((Point(float(x), float(y)) for x, y in points), eps)
    if len(pts) < 3:
        return pts

    vertices = set()
    for p in pts:
        for q in pts:
            if p is q:
                continue
            if all(
                cross_product(p, q, r) > eps or point_on_segment(p, q, r, eps)
                for r in pts
                if r is not p and r is not q
            ):
                vertices.update((p, q))

    cx = sum(p[0] for p in vertices) / len(vertices)
    cy = sum(p[1] for p in vertices) / len(vertices)
    return sorted(vertices, key=lambda p: math.atan2(p[1] - cy, p[0] - cx))
