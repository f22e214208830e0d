"""A flat collection of hittable objects."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Iterator

from raytracer.aabb import AABB, surrounding_box
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


class HittableList(Hittable):
    """Objects tested one after another; the nearest hit wins."""

    def __init__(self, objects: Iterable[Hittable] | None = None) -> None:
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest = None
        closest_t = t_max
        for obj in self.objects:
            rec = obj.hit(r, t_min, closest_t)
            if rec is not None:
                closest_t = rec.t
                closest = rec
        return closest

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        result = None
        for obj in self.objects:
            box = obj.bounding_box(t0, t1)
            if box is None:
                return None
            result = box if result is None else surrounding_box(result, box)
        return result

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Average of the members' densities; NaN for an empty list."""
        if not self.objects:
            return math.nan
        return sum(obj.pdf_value(origin, direction) for obj in self.objects) / len(self.objects)

    def random(self, origin: Vec3) -> Vec3:
        if not self.objects:
            raise IndexError("cannot sample a direction from an empty list")
        return random.choice(self.objects).random(origin)