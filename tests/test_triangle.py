import pytest

from patina.ray3 import Ray3
from patina.segment3 import Segment3
from patina.triangle import Triangle
from patina.vec3 import Vec3


def _corner_triangle():
    return Triangle((Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)))


def _xy_triangle():
    return Triangle((Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)))


def test_triangle_segment_intersect():
    tri = _corner_triangle()
    seg = Segment3(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
    t = tri.intersect_segment(seg)
    assert t is not None
    assert abs(t - 1.0 / 3.0) < 1e-5


def test_requires_three_points():
    with pytest.raises(ValueError):
        Triangle((Vec3.zero(), Vec3.axis_x()))


def test_normal_of_counter_clockwise_triangle():
    assert _xy_triangle().normal() == Vec3.axis_z()


def test_plane_passes_through_first_point():
    tri = _xy_triangle()
    plane = tri.plane()
    assert plane.origin == tri.points[0]
    assert plane.normal == tri.normal()


def test_intersect_ray_inside_and_outside():
    tri = _xy_triangle()
    hit = Ray3(Vec3(0.25, 0.25, -1.0), Vec3.axis_z())
    miss = Ray3(Vec3(2.0, 2.0, -1.0), Vec3.axis_z())
    assert tri.intersect_ray(hit) == 1.0
    assert tri.intersect_ray(miss) is None


def test_intersect_segment_too_short():
    tri = _corner_triangle()
    seg = Segment3(Vec3(0.0, 0.0, 0.0), Vec3(0.1, 0.1, 0.1))
    assert tri.intersect_segment(seg) is None


def test_project_corners():
    tri = _xy_triangle()
    assert tri.project(tri.points[0]).length() < 1e-12
    p = tri.project(Vec3(0.3, 0.6, 0.0))
    assert abs(p.x - 0.3) < 1e-12
    assert abs(p.y - 0.6) < 1e-12


def test_midpoint():
    tri = Triangle((Vec3(0.0, 0.0, 0.0), Vec3(3.0, 0.0, 0.0), Vec3(0.0, 3.0, 3.0)))
    assert tri.midpoint().distance(Vec3(1.0, 1.0, 1.0)) < 1e-12


def test_edges_form_closed_loop():
    tri = _corner_triangle()
    edges = tri.edges()
    assert [e.p1 for e in edges] == list(tri.points)
    assert [e.p2 for e in edges] == list(tri.points[1:] + tri.points[:1])


def test_intersects_crossing_and_apart():
    flat = Triangle((Vec3(-1.0, -1.0, 0.0), Vec3(2.0, -1.0, 0.0), Vec3(-1.0, 2.0, 0.0)))
    upright = Triangle((Vec3(0.0, 0.0, -1.0), Vec3(1.0, 0.0, -1.0), Vec3(0.0, 0.0, 1.0)))
    far = Triangle((Vec3(0.0, 0.0, 5.0), Vec3(1.0, 0.0, 5.0), Vec3(0.0, 1.0, 5.0)))
    assert flat.intersects(upright)
    assert upright.intersects(flat)
    assert not flat.intersects(far)


def test_normals_and_projection():
    tri = _corner_triangle()
    assert tri.normals() == (tri.normal(),)
    interval = tri.project_onto(Vec3.axis_x())
    assert interval.min == 0.0
    assert interval.max == 1.0