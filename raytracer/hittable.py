"""Hit records and the interface shared by every object a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any

from raytracer.aabb import AABB
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    position: Vec3
    normal: Vec3
    t: float
    u: float
    v: float
    front_face: bool = False
    material: Any = None

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the incoming ray and record the side hit."""
        self.front_face = r.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -1.0 * outward_normal


class Hittable(ABC):
    """An object that rays can intersect."""

    @abstractmethod
    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the nearest hit within [t_min, t_max], or None."""

    @abstractmethod
    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """Return a box enclosing the object over the time interval."""

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Vec3) -> Vec3:
        """Sample a direction from ``origin`` towards this object."""
        return Vec3(1.0, 0.0, 0.0)


class FlipNormal(Hittable):
    """Wraps an object and reports hits on the opposite face."""

    def __init__(self, hittable: Hittable) -> None:
        self.hittable = hittable

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rec = self.hittable.hit(r, t_min, t_max)
        if rec is None:
            return None
        return replace(rec, front_face=not rec.front_face)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.hittable.bounding_box(t0, t1)

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        return self.hittable.pdf_value(origin, direction)

    def random(self, origin: Vec3) -> Vec3:
        return self.hittable.random(origin)