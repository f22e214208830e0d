"""Static and moving spheres."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any

from raytracer.aabb import AABB, surrounding_box
from raytracer.hittable import HitRecord, Hittable
from raytracer.onb import ONB
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


def get_sphere_uv(p: Vec3) -> tuple[float, float]:
    """Texture coordinates of a point ``p`` on the unit sphere."""
    u = (math.atan2(p.z, p.x) + math.pi) / (2.0 * math.pi)
    v = math.acos(min(max(p.y, -1.0), 1.0)) / math.pi
    return u, v


def _hit_sphere(
    center: Vec3, radius: float, material: Any, r: Ray, t_min: float, t_max: float
) -> HitRecord | None:
    oc = r.origin - center
    a = r.direction.squared_length()
    if a == 0.0:
        return None
    half_b = oc.dot(r.direction)
    c = oc.squared_length() - radius * radius
    discriminant = half_b * half_b - a * c
    if discriminant < 0.0:
        return None

    sqrt_d = math.sqrt(discriminant)
    root = (-half_b - sqrt_d) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_d) / a
        if root < t_min or root > t_max:
            return None

    position = r.at(root)
    outward_normal = (position - center) / radius
    u, v = get_sphere_uv(outward_normal)
    rec = HitRecord(position, outward_normal, root, u, v, False, material)
    rec.set_face_normal(r, outward_normal)
    return rec


def _box_around(center: Vec3, radius: float) -> AABB:
    extent = Vec3(radius, radius, radius)
    return AABB(center - extent, center + extent)


@dataclass(frozen=True, eq=False)
class Sphere(Hittable):
    """A sphere fixed in space."""

    center: Vec3
    radius: float
    material: Any

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _hit_sphere(self.center, self.radius, self.material, r, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return _box_around(self.center, self.radius)

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        if self.hit(Ray(origin, direction, 0.0), 0.001, sys.float_info.max) is None:
            return 0.0
        ratio = 1.0 - self.radius * self.radius / (self.center - origin).squared_length()
        cos_theta_max = math.sqrt(ratio) if ratio >= 0.0 else math.nan
        solid_angle = 2.0 * math.pi * (1.0 - cos_theta_max)
        if solid_angle == 0.0:
            return math.inf
        return 1.0 / solid_angle

    def random(self, origin: Vec3) -> Vec3:
        direction = self.center - origin
        uvw = ONB.build_from_w(direction)
        return uvw.local(Vec3.random_to_sphere(self.radius, direction.squared_length()))


@dataclass(frozen=True, eq=False)
class MovingSphere(Hittable):
    """A sphere whose centre moves linearly between two times."""

    center_st: Vec3
    center_ed: Vec3
    time_st: float
    time_ed: float
    radius: float
    material: Any

    def center(self, time: float) -> Vec3:
        fraction = (time - self.time_st) / (self.time_ed - self.time_st)
        return self.center_st + fraction * (self.center_ed - self.center_st)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _hit_sphere(self.center(r.time), self.radius, self.material, r, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return surrounding_box(
            _box_around(self.center_st, self.radius),
            _box_around(self.center_ed, self.radius),
        )