"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.ray import Ray
from raytracer.vec3 import Vec3


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True)
class AABB:
    """A box spanning ``minimum`` to ``maximum`` on every axis."""

    minimum: Vec3
    maximum: Vec3

    def hit(self, r: Ray, t_min: float, t_max: float) -> bool:
        """Slab test: whether the ray passes through the box within [t_min, t_max]."""
        t_in, t_out = t_min, t_max
        for axis in range(3):
            inv_d = _inverse(r.direction[axis])
            origin = r.origin[axis]
            t0 = (self.minimum[axis] - origin) * inv_d
            t1 = (self.maximum[axis] - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_in = max(t_in, t0)
            t_out = min(t_out, t1)
            if t_out <= t_in:
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """The smallest box containing both boxes."""
    return AABB(
        Vec3(*(min(a, b) for a, b in zip(box0.minimum, box1.minimum))),
        Vec3(*(max(a, b) for a, b in zip(box0.maximum, box1.maximum))),
    )