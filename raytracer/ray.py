"""Rays with an origin, a direction and a time stamp."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A ray ``origin + t * direction`` sent at ``time``."""

    origin: Vec3
    direction: Vec3
    time: float = 0.0

    def at(self, t: float) -> Vec3:
        return self.origin + t * self.direction