"""Triangles intersected with the Möller–Trumbore algorithm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass(frozen=True, eq=False)
class Triangle(Hittable):
    """A triangle given by three vertices."""

    vertices: tuple[Vec3, Vec3, Vec3]
    material: Any

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) != 3:
            raise ValueError(f"a triangle needs 3 vertices, got {len(vertices)}")
        object.__setattr__(self, "vertices", vertices)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        v0, v1, v2 = self.vertices
        s = r.origin - v0
        e1 = v1 - v0
        e2 = v2 - v0
        s1 = Vec3.cross(r.direction, e2)
        s2 = Vec3.cross(s, e1)
        s1_e1 = s1.dot(e1)
        if s1_e1 == 0.0:
            return None
        t = s2.dot(e2) / s1_e1
        b1 = s1.dot(s) / s1_e1
        b2 = s2.dot(r.direction) / s1_e1

        if t < t_min or t > t_max:
            return None
        if b1 < 0.0 or b2 < 0.0 or (1.0 - b1 - b2) < 0.0:
            return None

        normal = Vec3.cross(e1, e2).unit()
        rec = HitRecord(r.at(t), normal, t, b1, b2, False, self.material)
        rec.set_face_normal(r, normal)
        return rec

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        minimum = Vec3(*(min(components) for components in zip(*self.vertices)))
        maximum = Vec3(*(max(components) for components in zip(*self.vertices)))
        return AABB(minimum, maximum)