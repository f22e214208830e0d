"""A thin-lens camera with motion-blur shutter interval."""

from __future__ import annotations

import math
import random

from raytracer.ray import Ray
from raytracer.vec3 import Vec3


class Camera:
    """Generates rays through the viewport with depth of field."""

    def __init__(
        self,
        lookfrom: Vec3,
        lookat: Vec3,
        vup: Vec3,
        vfov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
        time0: float,
        time1: float,
    ) -> None:
        theta = math.radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = viewport_height * aspect_ratio

        w = (lookfrom - lookat).unit()
        u = Vec3.cross(vup, w).unit()
        v = Vec3.cross(w, u)

        self.origin = lookfrom
        self.horizontal = focus_dist * viewport_width * u
        self.vertical = focus_dist * viewport_height * v
        self.lower_left_corner = lookfrom - self.horizontal / 2.0 - self.vertical / 2.0 - focus_dist * w
        self.cu = u
        self.cv = v
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

    def get_ray(self, u: float, v: float) -> Ray:
        """Ray through viewport coordinates ``(u, v)`` in [0, 1]."""
        rd = self.lens_radius * Vec3.random_in_unit_disk()
        offset = self.cu * rd.x + self.cv * rd.y
        time = self.time0 + random.random() * (self.time1 - self.time0)
        origin = self.origin + offset
        target = self.lower_left_corner + u * self.horizontal + v * self.vertical
        return Ray(origin, target - origin, time)