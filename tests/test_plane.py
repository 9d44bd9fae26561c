from patina.plane import Plane
from patina.ray3 import Ray3
from patina.vec3 import Vec3


def test_ray_hits_plane_ahead():
    plane = Plane(Vec3(0.0, 0.0, 2.0), Vec3.axis_z())
    ray = Ray3(Vec3.zero(), Vec3.axis_z())
    t = plane.intersect_ray(ray)
    assert t == 2.0
    assert ray.at_time(t).z == plane.origin.z


def test_oblique_ray_lands_on_plane():
    plane = Plane(Vec3(1.0, 1.0, 1.0), Vec3(1.0, 2.0, 3.0).normalize())
    ray = Ray3(Vec3(-3.0, -2.0, -5.0), Vec3(0.3, 0.4, 0.9))
    t = plane.intersect_ray(ray)
    assert t is not None and t >= 0.0
    assert abs((ray.at_time(t) - plane.origin).dot(plane.normal)) < 1e-9


def test_plane_behind_ray():
    plane = Plane(Vec3(0.0, 0.0, -2.0), Vec3.axis_z())
    ray = Ray3(Vec3.zero(), Vec3.axis_z())
    assert plane.intersect_ray(ray) is None


def test_parallel_ray_misses():
    plane = Plane(Vec3(0.0, 0.0, 2.0), Vec3.axis_z())
    ray = Ray3(Vec3.zero(), Vec3.axis_x())
    assert plane.intersect_ray(ray) is None


def test_ray_in_plane_misses():
    plane = Plane(Vec3.zero(), Vec3.axis_z())
    ray = Ray3(Vec3.zero(), Vec3.axis_x())
    assert plane.intersect_ray(ray) is None