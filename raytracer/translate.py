"""Translation of an object by a fixed offset."""

from __future__ import annotations

from dataclasses import dataclass, replace

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass(frozen=True, eq=False)
class Translate(Hittable):
    """Wraps an object moved by ``offset``."""

    hittable: Hittable
    offset: Vec3

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        moved = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.hittable.hit(moved, t_min, t_max)
        if rec is None:
            return None
        return replace(rec, position=rec.position + self.offset)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        box = self.hittable.bounding_box(t0, t1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)