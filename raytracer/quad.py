"""Axis-aligned rectangles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3

_PAD = 1e-4


class Plane(Enum):
    """The plane a quad lies in; the value gives (normal axis, first axis, second axis)."""

    XY = (2, 0, 1)
    XZ = (1, 0, 2)
    YZ = (0, 1, 2)

    @property
    def axes(self) -> tuple[int, int, int]:
        return self.value


@dataclass(frozen=True, eq=False)
class Quad(Hittable):
    """A rectangle spanning [a0, a1] x [b0, b1] at offset ``k`` along the normal axis."""

    plane: Plane
    a0: float
    a1: float
    b0: float
    b1: float
    k: float
    material: Any

    def _compose(self, a: float, b: float, k: float) -> Vec3:
        k_axis, a_axis, b_axis = self.plane.axes
        return (
            Vec3.zero()
            .with_component(k_axis, k)
            .with_component(a_axis, a)
            .with_component(b_axis, b)
        )

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        k_axis, a_axis, b_axis = self.plane.axes
        d_k = r.direction[k_axis]
        if d_k == 0.0:
            return None
        t = (self.k - r.origin[k_axis]) / d_k
        if t < t_min or t > t_max:
            return None
        a = r.origin[a_axis] + t * r.direction[a_axis]
        b = r.origin[b_axis] + t * r.direction[b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        u = (a - self.a0) / (self.a1 - self.a0)
        v = (b - self.b0) / (self.b1 - self.b0)
        normal = Vec3.zero().with_component(k_axis, 1.0)
        rec = HitRecord(r.at(t), normal, t, u, v, False, self.material)
        rec.set_face_normal(r, normal)
        return rec

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        # Padded along the normal so the box is never flat.
        return AABB(
            self._compose(self.a0, self.b0, self.k - _PAD),
            self._compose(self.a1, self.b1, self.k + _PAD),
        )

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        rec = self.hit(Ray(origin, direction, 0.0), 0.001, math.inf)
        if rec is None:
            return 0.0
        area = (self.a1 - self.a0) * (self.b1 - self.b0)
        length = direction.length()
        distance_squared = rec.t * rec.t * length * length
        cosine = abs(direction.dot(rec.normal)) / length
        if cosine == 0.0:
            return 0.0
        return distance_squared / (cosine * area)

    def random(self, origin: Vec3) -> Vec3:
        point = self._compose(
            random.uniform(self.a0, self.a1),
            random.uniform(self.b0, self.b1),
            self.k,
        )
        return point - origin