import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.geometry import (
    Line,
    above,
    angle,
    angle_travelled,
    bisector,
    circle_circle,
    circle_line,
    circumcircle,
    cross,
    crosses_ray,
    dot,
    half,
    in_angle,
    in_disk,
    in_polygon,
    is_convex,
    is_perp,
    line_intersection,
    linear_transform,
    on_segment,
    orient,
    oriented_angle,
    perp,
    points_equal,
    polygon_area,
    proper_intersection,
    rotate,
    scale,
    segment_intersections,
    segment_point_distance,
    segment_segment_distance,
    sgn,
    sq,
    tangents,
    triangle_area,
)

coords = st.integers(min_value=-50, max_value=50)
points = st.builds(complex, coords, coords)

SQUARE = [0j, 2 + 0j, 2 + 2j, 2j]


def close(a, b):
    return abs(a - b) < 1e-6


def test_points_equal_tolerance():
    assert points_equal(1 + 1j, 1 + 1j + 1e-12)
    assert not points_equal(1 + 1j, 1.1 + 1j)


@given(st.floats(min_value=-1e6, max_value=1e6))
def test_sgn_invariants(value):
    s = sgn(value)
    assert s * value >= 0
    assert (s == 0) == (value == 0)
    assert abs(s) <= 1


@given(points, points)
def test_vector_products(v, w):
    assert cross(v, v) == 0
    assert cross(v, w) == -cross(w, v)
    assert dot(v, perp(v)) == 0
    assert is_perp(v, perp(v))
    assert sq(v) == pytest.approx(abs(v) ** 2)


@given(points, points)
def test_scale_identity_and_collapse(c, p):
    assert scale(c, 1, p) == p
    assert scale(c, 0, p) == c


@given(points, points, st.floats(min_value=-7, max_value=7))
def test_rotate_keeps_distance(p, c, a):
    r = rotate(p, c, a)
    assert abs(r - c) == pytest.approx(abs(p - c), abs=1e-6)
    assert close(rotate(r, c, -a), p)


def test_rotate_full_turn():
    r = rotate(3 + 4j, 1 - 1j, 2 * math.pi)
    assert r.real == pytest.approx(3.0, abs=1e-9)
    assert r.imag == pytest.approx(4.0, abs=1e-9)


def test_rotate_quarter_turn():
    r = rotate(2 + 0j, 0j, math.pi / 2)
    assert r.real == pytest.approx(0.0, abs=1e-9)
    assert r.imag == pytest.approx(2.0, abs=1e-9)


def test_linear_transform_maps_reference_points():
    p, q, fp, fq = 1 + 1j, 4 + 2j, -2 + 3j, 5 - 1j
    image_p = linear_transform(p, q, p, fp, fq)
    image_q = linear_transform(p, q, q, fp, fq)
    assert image_p.real == pytest.approx(-2.0, abs=1e-9)
    assert image_p.imag == pytest.approx(3.0, abs=1e-9)
    assert image_q.real == pytest.approx(5.0, abs=1e-9)
    assert image_q.imag == pytest.approx(-1.0, abs=1e-9)


def test_orient_and_in_angle():
    assert orient(0j, 1 + 0j, 1j) > 0
    assert orient(0j, 1 + 0j, -1j) < 0
    assert in_angle(0j, 1 + 0j, 1j, 1 + 1j)
    assert not in_angle(0j, 1 + 0j, 1j, -1 - 1j)


def test_angle_right():
    assert angle(1 + 0j, 1j) == pytest.approx(math.pi / 2)


def test_oriented_angles_sum_to_full_turn():
    a, b, c = 0j, 3 + 1j, -1 + 2j
    assert oriented_angle(a, b, c) + oriented_angle(a, c, b) == pytest.approx(2 * math.pi)


def test_angle_travelled_antisymmetric():
    a, p, q = 1 + 1j, 4 + 1j, 1 + 5j
    assert angle_travelled(a, p, q) > 0
    assert angle_travelled(a, p, q) == pytest.approx(-angle_travelled(a, q, p))


def test_half():
    assert half(1j) and half(-1 + 0j)
    assert not half(-1j) and not half(1 + 0j)


def test_line_from_equation_contains_solution():
    line = Line.from_equation(1, 1, 2)
    assert line.side(1 + 1j) == pytest.approx(0)
    assert line.side(0 + 2j) == pytest.approx(0)


@given(points, points, points)
def test_line_projection_and_reflection(p, q, r):
    if p == q:
        return_value = Line.through(p, p + 1)
        assert return_value.side(p) == pytest.approx(0)
        return
    line = Line.through(p, q)
    assert line.side(p) == pytest.approx(0, abs=1e-6)
    assert line.side(q) == pytest.approx(0, abs=1e-6)
    assert abs(line.side(line.proj(r))) < 1e-6
    assert close(line.refl(line.refl(r)), r)
    assert close((line.refl(r) + r) / 2, line.proj(r))
    assert line.dist(r) == pytest.approx(math.sqrt(line.sq_dist(r)), abs=1e-6)


def test_line_perp_through_translate_shift():
    line = Line.through(0j, 2 + 1j)
    m = line.perp_through(3 + 3j)
    assert dot(line.v, m.v) == 0
    assert m.side(3 + 3j) == pytest.approx(0)
    moved = line.translate(1 + 5j)
    assert moved.side(2 + 1j + 1 + 5j) == pytest.approx(0)
    shifted = line.shift_left(1.5)
    assert shifted.dist(0j) == pytest.approx(1.5)
    assert line.cmp_proj(0j, 2 + 1j)
    assert not line.cmp_proj(2 + 1j, 0j)


def test_line_intersection():
    l1 = Line.through(0j, 4 + 4j)
    l2 = Line.through(4 + 0j, 4j)
    point = line_intersection(l1, l2)
    assert abs(l1.side(point)) < 1e-9 and abs(l2.side(point)) < 1e-9
    assert line_intersection(l1, Line.through(1 + 0j, 5 + 4j)) is None


def test_bisector_equidistant():
    l1 = Line.through(0j, 1 + 0j)
    l2 = Line.through(0j, 1 + 2j)
    for interior in (True, False):
        b = bisector(l1, l2, interior)
        assert b.side(0j) == pytest.approx(0)
        point = b.proj(3 + 7j)
        assert l1.dist(point) == pytest.approx(l2.dist(point))
    with pytest.raises(ValueError):
        bisector(l1, Line.through(1j, 1 + 1j), True)


def test_on_segment_and_in_disk():
    assert on_segment(0j, 4 + 4j, 2 + 2j)
    assert not on_segment(0j, 4 + 4j, 5 + 5j)
    assert in_disk(0j, 2 + 0j, 1 + 0.5j)
    assert not in_disk(0j, 2 + 0j, 3 + 3j)


def test_proper_intersection():
    point = proper_intersection(0j, 2 + 2j, 2 + 0j, 2j)
    assert on_segment(0j, 2 + 2j, point) and on_segment(2 + 0j, 2j, point)
    assert proper_intersection(0j, 2 + 0j, 2 + 0j, 2 + 2j) is None


def test_segment_intersections_cases():
    assert segment_intersections(0j, 2 + 0j, 2 + 0j, 2 + 2j) == {(2.0, 0.0)}
    overlap = segment_intersections(0j, 4 + 0j, 1 + 0j, 6 + 0j)
    assert overlap == {(1.0, 0.0), (4.0, 0.0)}
    (x, y), = segment_intersections(0j, 2 + 2j, 2 + 0j, 2j)
    assert on_segment(0j, 2 + 2j, complex(x, y))
    assert segment_intersections(0j, 1 + 0j, 0j + 3j, 1 + 3j) == set()


def test_segment_distances():
    line = Line.through(0j, 4 + 0j)
    assert segment_point_distance(0j, 4 + 0j, 2 + 3j) == pytest.approx(line.dist(2 + 3j))
    assert segment_point_distance(0j, 4 + 0j, 7 + 4j) == pytest.approx(abs(7 + 4j - 4))
    assert segment_segment_distance(0j, 2 + 2j, 2 + 0j, 2j) == 0
    d1 = segment_segment_distance(0j, 1 + 0j, 3 + 1j, 5 + 2j)
    d2 = segment_segment_distance(3 + 1j, 5 + 2j, 0j, 1 + 0j)
    assert d1 == pytest.approx(d2)
    assert d1 == pytest.approx(segment_point_distance(3 + 1j, 5 + 2j, 1 + 0j))


def test_convexity():
    assert is_convex(SQUARE)
    assert not is_convex([0j, 4 + 0j, 2 + 1j, 4 + 4j, 4j])


def test_areas_agree():
    assert polygon_area(SQUARE) == pytest.approx(
        triangle_area(SQUARE[0], SQUARE[1], SQUARE[2])
        + triangle_area(SQUARE[0], SQUARE[2], SQUARE[3])
    )
    tri = [0j, 3 + 0j, 1 + 5j]
    assert polygon_area(tri) == pytest.approx(triangle_area(*tri))
    assert polygon_area(list(reversed(tri))) == polygon_area(tri)


def test_polygon_membership():
    assert in_polygon(SQUARE, 1 + 1j)
    assert not in_polygon(SQUARE, 3 + 1j)
    assert not in_polygon(SQUARE, 2 + 1j)
    assert in_polygon(SQUARE, 2 + 1j, strict=False)
    assert above(0j, 1j) and not above(1j, 0j)
    assert crosses_ray(1 + 1j, 2 + 0j, 2 + 2j)
    assert not crosses_ray(1 + 1j, 0j, 2j)


def test_circumcircle():
    a, b, c = 0j, 4 + 0j, 1 + 3j
    centre, radius = circumcircle(a, b, c)
    for p in (a, b, c):
        assert abs(p - centre) == pytest.approx(radius)
    with pytest.raises(ValueError):
        circumcircle(0j, 1 + 1j, 2 + 2j)


def test_circle_line():
    line = Line.through(-5 + 1j, 5 + 1j)
    points_found = circle_line(0j, 2, line)
    assert len(points_found) == 2
    for p in points_found:
        assert abs(p) == pytest.approx(2)
        assert line.side(p) == pytest.approx(0)
    touch = circle_line(0j, 1, line)
    assert len(touch) == 1 and close(touch[0], 1j)
    assert circle_line(0j, 0.5, line) == ()


def test_circle_circle():
    found = circle_circle(0j, 3, 4 + 0j, 2)
    assert len(found) == 2
    for p in found:
        assert abs(p) == pytest.approx(3)
        assert abs(p - 4) == pytest.approx(2)
    assert len(circle_circle(0j, 1, 2 + 0j, 1)) == 1
    assert circle_circle(0j, 1, 5 + 0j, 1) == ()
    assert circle_circle(0j, 1, 0j, 2) == ()
    with pytest.raises(ValueError):
        circle_circle(1j, 2, 1j, 2)


@pytest.mark.parametrize("inner", [False, True])
def test_tangents_touch_both_circles(inner):
    o1, r1, o2, r2 = 0j, 1.0, 6 + 1j, 2.0
    pairs = tangents(o1, r1, o2, r2, inner)
    assert len(pairs) == 2
    for p1, p2 in pairs:
        assert abs(p1 - o1) == pytest.approx(r1)
        assert abs(p2 - o2) == pytest.approx(r2)
        assert dot(p2 - p1, p1 - o1) == pytest.approx(0, abs=1e-9)


def test_tangents_degenerate():
    assert tangents(0j, 5, 1 + 0j, 1) == []
    with pytest.raises(ValueError):
        tangents(2j, 1, 2j, 1)