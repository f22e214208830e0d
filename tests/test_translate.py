import pytest

from raytracer.hittable import Hittable
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.translate import Translate
from raytracer.vec3 import Vec3

OFFSET = Vec3(5.0, -2.0, 3.0)


class _Boxless(Hittable):
    def hit(self, r, t_min, t_max):
        return None

    def bounding_box(self, t0, t1):
        return None


def test_hit_is_shifted_by_offset():
    sphere = Sphere(Vec3.zero(), 1.0, None)
    moved = Translate(sphere, OFFSET)
    plain = sphere.hit(Ray(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf"))
    shifted = moved.hit(Ray(Vec3(0.0, 0.0, 10.0) + OFFSET, Vec3(0.0, 0.0, -1.0)), 0.001, float("inf"))
    assert shifted.t == pytest.approx(plain.t)
    assert tuple(shifted.position) == pytest.approx(tuple(plain.position + OFFSET))
    assert tuple(shifted.normal) == pytest.approx(tuple(plain.normal))


def test_original_location_is_empty():
    moved = Translate(Sphere(Vec3.zero(), 1.0, None), OFFSET)
    assert moved.hit(Ray(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf")) is None


def test_bounding_box_is_shifted():
    sphere = Sphere(Vec3.zero(), 1.0, None)
    box = Translate(sphere, OFFSET).bounding_box(0.0, 1.0)
    original = sphere.bounding_box(0.0, 1.0)
    assert box.minimum == original.minimum + OFFSET
    assert box.maximum == original.maximum + OFFSET


def test_no_box_stays_none():
    assert Translate(_Boxless(), OFFSET).bounding_box(0.0, 1.0) is None