"""Rotation of an object about a coordinate axis."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum
from itertools import product

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


class Axis(Enum):
    """The rotation axis; the value gives (rotation axis, first axis, second axis)."""

    X = (0, 1, 2)
    Y = (1, 0, 2)
    Z = (2, 0, 1)

    @property
    def axes(self) -> tuple[int, int, int]:
        return self.value


class Rotate(Hittable):
    """Wraps an object rotated by ``angle`` degrees about ``axis``."""

    def __init__(self, axis: Axis, hittable: Hittable, angle: float) -> None:
        self.axis = axis
        self.hittable = hittable
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        box = hittable.bounding_box(0.0, 1.0)
        self.aabb = None if box is None else self._rotated_box(box)

    def _to_world(self, v: Vec3) -> Vec3:
        _, a, b = self.axis.axes
        return v.with_component(a, self.cos_theta * v[a] + self.sin_theta * v[b]).with_component(
            b, -self.sin_theta * v[a] + self.cos_theta * v[b]
        )

    def _to_object(self, v: Vec3) -> Vec3:
        _, a, b = self.axis.axes
        return v.with_component(a, self.cos_theta * v[a] - self.sin_theta * v[b]).with_component(
            b, self.sin_theta * v[a] + self.cos_theta * v[b]
        )

    def _rotated_box(self, box: AABB) -> AABB:
        corners = [
            self._to_world(Vec3(x, y, z))
            for x, y, z in product(*zip(box.minimum, box.maximum))
        ]
        minimum = Vec3(*(min(c[axis] for c in corners) for axis in range(3)))
        maximum = Vec3(*(max(c[axis] for c in corners) for axis in range(3)))
        return AABB(minimum, maximum)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rotated_ray = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.hittable.hit(rotated_ray, t_min, t_max)
        if rec is None:
            return None
        result = replace(rec, position=self._to_world(rec.position))
        result.set_face_normal(rotated_ray, self._to_world(rec.normal))
        return result

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.aabb