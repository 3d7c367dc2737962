"""Plane geometry on points represented as complex numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-9


def points_equal(a: complex, b: complex) -> bool:
    """Whether two points coincide within EPS on both coordinates."""
    return abs(a.real - b.real) < EPS and abs(a.imag - b.imag) < EPS


def sgn(value: float) -> int:
    """Sign of a number: -1, 0 or 1."""
    return (value > 0) - (value < 0)


def sq(p: complex) -> float:
    """Squared length of a vector."""
    return p.real * p.real + p.imag * p.imag


def perp(p: complex) -> complex:
    """The vector rotated by a quarter turn counter-clockwise."""
    return complex(-p.imag, p.real)


def dot(v: complex, w: complex) -> float:
    return v.real * w.real + v.imag * w.imag


def cross(v: complex, w: complex) -> float:
    return v.real * w.imag - v.imag * w.real


def is_perp(v: complex, w: complex) -> bool:
    return dot(v, w) == 0


def scale(c: complex, factor: float, p: complex) -> complex:
    """Scale point p by a factor around centre c."""
    return c + (p - c) * factor


def rotate(p: complex, c: complex, angle: float) -> complex:
    """Rotate point p by an angle around centre c."""
    v = p - c
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return complex(
        c.real + v.real * cos_a - v.imag * sin_a,
        c.imag + v.real * sin_a + v.imag * cos_a,
    )


def linear_transform(p: complex, q: complex, r: complex, fp: complex, fq: complex) -> complex:
    """Image of r under the similarity mapping p to fp and q to fq."""
    pq = q - p
    num = complex(cross(pq, fq - fp), dot(pq, fq - fp))
    return fp + complex(cross(r - p, num), dot(r - p, num)) / sq(pq)


def orient(a: complex, b: complex, c: complex) -> float:
    """Positive if c is left of AB, negative if right, zero if aligned."""
    return cross(b - a, c - a)


def in_angle(a: complex, b: complex, c: complex, p: complex) -> bool:
    """Whether p lies inside the angle BAC taken counter-clockwise."""
    abp, acp, abc = orient(a, b, p), orient(a, c, p), orient(a, b, c)
    if abc < 0:
        abp, acp = acp, abp
    return (abp >= 0 and acp <= 0) != (abc < 0)


def angle(v: complex, w: complex) -> float:
    """Unsigned angle between two vectors, in [0, pi]."""
    cosine = dot(v, w) / abs(v) / abs(w)
    return math.acos(max(-1.0, min(1.0, cosine)))


def oriented_angle(a: complex, b: complex, c: complex) -> float:
    """Counter-clockwise angle BAC, in [0, 2*pi)."""
    if orient(a, b, c) >= 0:
        return angle(b - a, c - a)
    return 2 * math.pi - angle(b - a, c - a)


def angle_travelled(a: complex, p: complex, q: complex) -> float:
    """Signed amplitude travelled around a when going from p to q."""
    amplitude = angle(p - a, q - a)
    return amplitude if orient(a, p, q) > 0 else -amplitude


def half(p: complex) -> bool:
    return p.imag > 0 or (p.imag == 0 and p.real < 0)


@dataclass(frozen=True)
class Line:
    """Line given by direction vector v and offset c: cross(v, p) == c."""

    v: complex
    c: float

    @classmethod
    def from_equation(cls, a: float, b: float, c: float) -> "Line":
        """Line of equation a*x + b*y = c."""
        return cls(complex(b, -a), c)

    @classmethod
    def through(cls, p: complex, q: complex) -> "Line":
        v = q - p
        return cls(v, cross(v, p))

    def side(self, p: complex) -> float:
        return cross(self.v, p) - self.c

    def dist(self, p: complex) -> float:
        return abs(self.side(p)) / abs(self.v)

    def sq_dist(self, p: complex) -> float:
        s = self.side(p)
        return s * s / sq(self.v)

    def perp_through(self, p: complex) -> "Line":
        return Line.through(p, p + perp(self.v))

    def cmp_proj(self, p: complex, q: complex) -> bool:
        """Whether p comes before q along the direction of the line."""
        return dot(self.v, p) < dot(self.v, q)

    def translate(self, t: complex) -> "Line":
        return Line(self.v, self.c + cross(self.v, t))

    def shift_left(self, dist: float) -> "Line":
        return Line(self.v, self.c + dist * abs(self.v))

    def proj(self, p: complex) -> complex:
        return p - perp(self.v) * self.side(p) / sq(self.v)

    def refl(self, p: complex) -> complex:
        return p - perp(self.v) * 2.0 * self.side(p) / sq(self.v)


def line_intersection(l1: Line, l2: Line) -> complex | None:
    """Intersection point of two lines, or None when they are parallel."""
    d = cross(l1.v, l2.v)
    if abs(d) <= EPS:
        return None
    return (l2.v * l1.c - l1.v * l2.c) / d


def bisector(l1: Line, l2: Line, interior: bool) -> Line:
    """Interior or exterior angle bisector of two non-parallel lines."""
    if cross(l1.v, l2.v) == 0:
        raise ValueError("parallel lines have no bisector")
    sign = 1 if interior else -1
    n1, n2 = abs(l1.v), abs(l2.v)
    return Line(l2.v / n2 + l1.v / n1 * sign, l2.c / n2 + l1.c / n1 * sign)


def in_disk(a: complex, b: complex, p: complex) -> bool:
    """Whether p lies in the disk of diameter AB."""
    return dot(a - p, b - p) <= EPS


def on_segment(a: complex, b: complex, p: complex) -> bool:
    return abs(orient(a, b, p)) <= EPS and in_disk(a, b, p)


def proper_intersection(a: complex, b: complex, c: complex, d: complex) -> complex | None:
    """Single interior crossing point of segments AB and CD, if any."""
    oa, ob = orient(c, d, a), orient(c, d, b)
    oc, od = orient(a, b, c), orient(a, b, d)
    if sgn(oa) * sgn(ob) < 0 and sgn(oc) * sgn(od) < 0:
        return (a * ob - b * oa) / (ob - oa)
    return None


def segment_intersections(a: complex, b: complex, c: complex, d: complex) -> set[tuple[float, float]]:
    """Intersection points of segments AB and CD as (x, y) pairs."""
    found: set[tuple[float, float]] = set()
    if points_equal(a, c) or points_equal(a, d):
        found.add((a.real, a.imag))
    if points_equal(b, c) or points_equal(b, d):
        found.add((b.real, b.imag))
    if found:
        return found
    crossing = proper_intersection(a, b, c, d)
    if crossing is not None:
        return {(crossing.real, crossing.imag)}
    for first, second, p in ((c, d, a), (c, d, b), (a, b, c), (a, b, d)):
        if on_segment(first, second, p):
            found.add((p.real, p.imag))
    return found


def segment_point_distance(a: complex, b: complex, p: complex) -> float:
    if not points_equal(a, b):
        line = Line.through(a, b)
        if line.cmp_proj(a, p) and line.cmp_proj(p, b):
            return line.dist(p)
    return min(abs(p - a), abs(p - b))


def segment_segment_distance(a: complex, b: complex, c: complex, d: complex) -> float:
    if proper_intersection(a, b, c, d) is not None:
        return 0.0
    return min(
        segment_point_distance(a, b, c),
        segment_point_distance(a, b, d),
        segment_point_distance(c, d, a),
        segment_point_distance(c, d, b),
    )


def _edges(points: list[complex]):
    return zip(points, points[1:] + points[:1])


def is_convex(points: list[complex]) -> bool:
    has_pos = has_neg = False
    n = len(points)
    for i, p in enumerate(points):
        # Orientations are truncated to integers, so tiny turns count as straight.
        o = math.trunc(orient(p, points[(i + 1) % n], points[(i + 2) % n]))
        has_pos = has_pos or o > 0
        has_neg = has_neg or o < 0
    return not (has_pos and has_neg)


def triangle_area(a: complex, b: complex, c: complex) -> float:
    return abs(cross(b - a, c - a)) / 2.0


def polygon_area(points: list[complex]) -> float:
    points = list(points)
    return abs(sum(cross(p, q) for p, q in _edges(points))) / 2.0


def above(a: complex, p: complex) -> bool:
    """Whether p is at least as high as a."""
    return p.imag >= a.imag


def crosses_ray(a: complex, p: complex, q: complex) -> bool:
    """Whether segment PQ crosses the rightward ray from a."""
    return (int(above(a, q)) - int(above(a, p))) * orient(a, p, q) > 0


def in_polygon(points: list[complex], a: complex, strict: bool = True) -> bool:
    """Point-in-polygon test; with strict, boundary points count as outside."""
    points = list(points)
    crossings = 0
    for p, q in _edges(points):
        if on_segment(p, q, a):
            return not strict
        crossings += crosses_ray(a, p, q)
    return crossings % 2 == 1


def circumcircle(a: complex, b: complex, c: complex) -> tuple[complex, float]:
    """Centre and radius of the circle through three points."""
    b, c = b - a, c - a
    d = cross(b, c)
    if d == 0:
        raise ValueError("aligned points have no circumcircle")
    offset = perp(b * sq(c) - c * sq(b)) / d / 2
    return a + offset, abs(offset)


def circle_line(o: complex, r: float, line: Line) -> tuple[complex, ...]:
    """Intersection points of a circle and a line (zero, one or two)."""
    h2 = r * r - line.sq_dist(o)
    if h2 < 0:
        return ()
    p = line.proj(o)
    h = line.v * (math.sqrt(h2) / abs(line.v))
    return (p - h, p + h) if h2 > 0 else (p - h,)


def circle_circle(o1: complex, r1: float, o2: complex, r2: float) -> tuple[complex, ...]:
    """Intersection points of two circles (zero, one or two)."""
    d = o2 - o1
    d2 = sq(d)
    if d2 == 0:
        if r1 == r2:
            raise ValueError("identical circles")
        return ()
    pd = (d2 + r1 * r1 - r2 * r2) / 2
    h2 = r1 * r1 - pd * pd / d2
    if h2 < 0:
        return ()
    p = o1 + d * pd / d2
    h = perp(d) * math.sqrt(h2 / d2)
    return (p - h, p + h) if h2 > 0 else (p - h,)


def tangents(
    o1: complex, r1: float, o2: complex, r2: float, inner: bool = False
) -> list[tuple[complex, complex]]:
    """Common tangents as pairs of touching points on the first and second circle."""
    if inner:
        r2 = -r2
    d = o2 - o1
    dr = r1 - r2
    d2 = sq(d)
    h2 = d2 - dr * dr
    if d2 == 0 or h2 < 0:
        if h2 == 0:
            raise ValueError("identical circles")
        return []
    result = []
    for sign in (-1, 1):
        v = (d * dr + perp(d) * math.sqrt(h2) * sign) / d2
        result.append((o1 + v * r1, o2 + v * r2))
    return result if h2 > 0 else result[:1]