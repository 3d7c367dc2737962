"""Convex hull and extreme triangle areas of a point set (areas doubled)."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]


def _cross(a: Point, b: Point, c: Point) -> int:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _chain(points: Iterable[Point]) -> list[Point]:
    out: list[Point] = []
    for p in points:
        while len(out) >= 2 and _cross(out[-2], out[-1], p) <= 0:
            out.pop()
        out.append(p)
    return out


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Counter-clockwise hull without collinear points (monotone chain)."""
    pts = sorted(tuple(p) for p in points)
    if len(pts) < 3:
        return pts
    lower = _chain(pts)
    upper = _chain(reversed(pts))
    return lower[:-1] + upper[:-1]


def _hull_area2(points: Iterable[Point]):
    hull = convex_hull(points)

    def area2(i: int, j: int, k: int) -> int:
        return abs(_cross(hull[i], hull[j], hull[k]))

    return hull, area2


def max_triangle_double_area(points: Iterable[Point]) -> int:
    """Twice the largest triangle area found by rotating calipers on the hull."""
    hull, area2 = _hull_area2(points)
    n = len(hull)
    if n < 3:
        return 0
    if n == 3:
        return area2(0, 1, 2)
    best = 0
    j, k = 1, 2
    for i in range(n):
        j = max(j, i + 1)
        k = max(k, j + 1)
        while j < i + n and k < i + n:
            jj, kk = j % n, k % n
            current = area2(i, jj, kk)
            if area2(i, jj, (kk + 1) % n) > current:
                k += 1
            else:
                best = max(best, current)
                j += 1
    return best


def min_triangle_double_area(points: Iterable[Point]) -> int:
    """Twice the smallest positive triangle area found on hull edges."""
    hull, area2 = _hull_area2(points)
    n = len(hull)
    if n < 3:
        return 0
    if n == 3:
        return area2(0, 1, 2)
    candidates = []
    for i in range(n):
        following = (i + 1) % n
        k = i + 2
        while area2(i, following, (k + 1) % n) < area2(i, following, k % n):
            k += 1
        current = area2(i, following, k % n)
        if current > 0:
            candidates.append(current)
    return min(candidates)