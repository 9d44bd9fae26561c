import math

import pytest

from patina.aabb import AABB
from patina.sat import sat_intersects
from patina.triangle import Triangle
from patina.vec3 import Vec3


@pytest.fixture
def unit_box():
    return AABB(Vec3.zero(), Vec3.splat(1.0))


def test_from_point_is_degenerate():
    p = Vec3(1.5, -2.0, 3.0)
    box = AABB.from_point(p)
    assert box.min == p
    assert box.max == p
    assert box.surface_area() == 0.0


def test_empty_is_identity_for_union():
    box = AABB(Vec3(-1.0, 2.0, 0.5), Vec3(3.0, 4.0, 1.5))
    assert AABB.empty().union(box) == box
    assert box.union(AABB.empty()) == box


def test_empty_has_zero_area_and_dimensions():
    assert AABB.empty().surface_area() == 0.0
    assert AABB.empty().dimensions() == Vec3.zero()


def test_union_contains_both_boxes():
    a = AABB(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
    b = AABB(Vec3(-1.0, 0.5, 2.0), Vec3(0.5, 3.0, 4.0))
    u = a.union(b)
    assert u.min == a.min.min(b.min)
    assert u.max == a.max.max(b.max)
    for box in (a, b):
        assert all(lo <= x for lo, x in zip(u.min, box.min))
        assert all(x <= hi for hi, x in zip(u.max, box.max))


def test_intersect_of_overlapping_boxes():
    a = AABB(Vec3(0.0, 0.0, 0.0), Vec3(2.0, 2.0, 2.0))
    b = AABB(Vec3(1.0, 1.0, 1.0), Vec3(3.0, 3.0, 3.0))
    i = a.intersect(b)
    assert i.min == b.min
    assert i.max == a.max
    assert a.intersects(b)
    assert b.intersects(a)


def test_dimensions_never_negative():
    box = AABB(Vec3(2.0, 0.0, 5.0), Vec3(1.0, 3.0, 4.0))
    dims = box.dimensions()
    assert dims.x == 0.0
    assert dims.y == 3.0
    assert dims.z == 0.0


def test_surface_area_grows_with_union(unit_box):
    bigger = unit_box.union(AABB.from_point(Vec3(2.0, 1.0, 1.0)))
    assert bigger.surface_area() > unit_box.surface_area()


def test_vertices_follow_bit_pattern():
    box = AABB(Vec3(-1.0, -2.0, -3.0), Vec3(1.0, 2.0, 3.0))
    vs = box.vertices()
    assert len(vs) == 8
    assert len(set(vs)) == 8
    assert vs[0b000] == box.min
    assert vs[0b111] == box.max
    assert vs[0b101] == Vec3(box.max.x, box.min.y, box.max.z)
    assert vs[0b010] == Vec3(box.min.x, box.max.y, box.min.z)


def test_as_mesh_is_closed_manifold(unit_box):
    mesh = unit_box.as_mesh()
    assert len(mesh.vertices) == 8
    assert len(mesh.triangles) == 12
    mesh.check_manifold()


def test_as_mesh_faces_point_outward(unit_box):
    mesh = unit_box.as_mesh()
    center = Vec3.splat(0.5)
    for t in mesh.triangles:
        tri = t.for_vertices(mesh.vertices)
        assert tri.normal().dot(tri.midpoint() - center) > 0.0


def test_normals_are_the_axes(unit_box):
    assert tuple(unit_box.normals()) == Vec3.axes()


def test_project_onto_spans_corners():
    box = AABB(Vec3(1.0, 2.0, 3.0), Vec3(4.0, 6.0, 8.0))
    interval = box.project_onto(Vec3.axis_y())
    assert interval.min == box.min.y
    assert interval.max == box.max.y
    diag = box.project_onto(Vec3.splat(1.0))
    assert math.isclose(diag.min, box.min.x + box.min.y + box.min.z)
    assert math.isclose(diag.max, box.max.x + box.max.y + box.max.z)


def test_sat_with_triangle(unit_box):
    inside = Triangle((Vec3(0.2, 0.2, 0.5), Vec3(0.8, 0.2, 0.5), Vec3(0.2, 0.8, 0.5)))
    far = Triangle((Vec3(5.0, 5.0, 5.0), Vec3(6.0, 5.0, 5.0), Vec3(5.0, 6.0, 5.0)))
    assert sat_intersects(unit_box, inside)
    assert not sat_intersects(unit_box, far)