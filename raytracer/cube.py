"""Axis-aligned boxes built from six quads."""

from __future__ import annotations

from typing import Any

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.hittable_list import HittableList
from raytracer.quad import Plane, Quad
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


class Cube(Hittable):
    """A box spanning ``minimum`` to ``maximum`` with one material on every side."""

    def __init__(self, minimum: Vec3, maximum: Vec3, material: Any) -> None:
        self.minimum = minimum
        self.maximum = maximum
        lo, hi = minimum, maximum
        self.sides = HittableList(
            [
                Quad(Plane.XY, lo.x, hi.x, lo.y, hi.y, hi.z, material),
                Quad(Plane.XY, lo.x, hi.x, lo.y, hi.y, lo.z, material),
                Quad(Plane.XZ, lo.x, hi.x, lo.z, hi.z, hi.y, material),
                Quad(Plane.XZ, lo.x, hi.x, lo.z, hi.z, lo.y, material),
                Quad(Plane.YZ, lo.y, hi.y, lo.z, hi.z, hi.x, material),
                Quad(Plane.YZ, lo.y, hi.y, lo.z, hi.z, lo.x, material),
            ]
        )

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self.sides.hit(r, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return AABB(self.minimum, self.maximum)