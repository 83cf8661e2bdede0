"""Planar geometry on integer points: orientation, segment intersection, convex hulls."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: int
    y: int


def orientation(p: Point, q: Point, r: Point) -> int:
    """Turn made by p -> q -> r: COLLINEAR, CLOCKWISE or COUNTERCLOCKWISE."""
    value = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if value == 0:
        return COLLINEAR
    return CLOCKWISE if value > 0 else COUNTERCLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """True if q lies in the bounding box of the segment p-r."""
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """True if the closed segments p1-q1 and p2-q2 share at least one point."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == COLLINEAR and on_segment(p1, p2, q1))
        or (o2 == COLLINEAR and on_segment(p1, q2, q1))
        or (o3 == COLLINEAR and on_segment(p2, p1, q2))
        or (o4 == COLLINEAR and on_segment(p2, q1, q2))
    )


def _square_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """Convex hull by Graham's scan, counterclockwise from the lowest, leftmost point.

    Raises ValueError when fewer than three non-collinear directions remain.
    """
    pts = list(points)
    if not pts:
        raise ValueError("convex hull not possible")
    ref = min(pts, key=lambda p: (p.y, p.x))
    ref_index = pts.index(ref)
    rest = pts[:ref_index] + pts[ref_index + 1:]

    def compare(a: Point, b: Point) -> int:
        turn = orientation(ref, a, b)
        if turn == COLLINEAR:
            return -1 if _square_distance(ref, b) >= _square_distance(ref, a) else 1
        return -1 if turn == COUNTERCLOCKWISE else 1

    rest.sort(key=cmp_to_key(compare))

    # Of points sharing a direction from ref, keep only the farthest.
    kept = [ref]
    for i, point in enumerate(rest):
        if i + 1 < len(rest) and orientation(ref, point, rest[i + 1]) == COLLINEAR:
            continue
        kept.append(point)

    if len(kept) < 3:
        raise ValueError("convex hull not possible")

    stack = kept[:3]
    for point in kept[3:]:
        while len(stack) > 1 and orientation(stack[-2], stack[-1], point) != COUNTERCLOCKWISE:
            stack.pop()
        stack.append(point)
    return stack


def jarvis_march(points: Iterable[Point]) -> list[Point]:
    """Convex hull by gift wrapping, counterclockwise from the leftmost point.

    Raises ValueError for fewer than three points.
    """
    pts = list(points)
    count = len(pts)
    if count < 3:
        raise ValueError("convex hull not possible with less than 3 points")
    start = min(range(count), key=lambda i: pts[i].x)

    hull: list[Point] = []
    seen: set[int] = set()
    current = start
    while True:
        hull.append(pts[current])
        seen.add(current)
        candidate = (current + 1) % count
        for i, point in enumerate(pts):
            if orientation(pts[current], point, pts[candidate]) == COUNTERCLOCKWISE:
                candidate = i
        current = candidate
        if current == start or current in seen:
            return hull