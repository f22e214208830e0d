"""Surface materials: how light scatters from and is emitted by surfaces."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from raytracer.hittable import HitRecord
from raytracer.pdf import PDF, CosinePDF
from raytracer.ray import Ray
from raytracer.texture import Texture
from raytracer.vec3 import Vec3


@dataclass(frozen=True)
class SpecularScatter:
    """A scattering along one deterministic ray."""

    specular_ray: Ray
    attenuation: Vec3


@dataclass(frozen=True)
class PdfScatter:
    """A diffuse scattering described by a direction distribution."""

    pdf: PDF
    attenuation: Vec3


ScatterRecord = SpecularScatter | PdfScatter


class Material:
    """Base material: absorbs everything and emits nothing."""

    def scatter(self, r_in: Ray, rec: HitRecord) -> tuple[Vec3, Ray] | None:
        """Simple scattering: attenuation and scattered ray, or None if absorbed."""
        return None

    def scatter_monte_carlo(self, r_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        """Scattering for importance-sampled rendering, or None if absorbed."""
        return None

    def emitted(self, rec: HitRecord) -> Vec3:
        return Vec3.zero()

    def scatter_pdf(self, r_in: Ray, rec: HitRecord, ray_out: Ray) -> float:
        return 0.0


@dataclass(frozen=True)
class Lambertian(Material):
    """An ideal diffuse surface."""

    albedo: Texture

    def scatter(self, r_in: Ray, rec: HitRecord) -> tuple[Vec3, Ray] | None:
        direction = rec.normal + Vec3.random_in_unit_sphere().unit()
        if direction.near_zero():
            direction = rec.normal
        scattered = Ray(rec.position, direction, r_in.time)
        return self.albedo.texture_map(rec.u, rec.v, rec.position), scattered

    def scatter_monte_carlo(self, r_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        return PdfScatter(
            pdf=CosinePDF(rec.normal),
            attenuation=self.albedo.texture_map(rec.u, rec.v, rec.position),
        )

    def scatter_pdf(self, r_in: Ray, rec: HitRecord, ray_out: Ray) -> float:
        return max(rec.normal.dot(ray_out.direction.unit()), 0.0) / math.pi


@dataclass(frozen=True)
class Metal(Material):
    """A reflective surface with optional fuzz."""

    albedo: Vec3
    fuzz: float

    def _reflect(self, r_in: Ray, rec: HitRecord) -> Ray | None:
        reflected = Vec3.reflect(r_in.direction, rec.normal).unit()
        scattered = Ray(
            rec.position,
            reflected + self.fuzz * Vec3.random_in_unit_sphere(),
            r_in.time,
        )
        if scattered.direction.dot(rec.normal) > 0.0:
            return scattered
        return None

    def scatter(self, r_in: Ray, rec: HitRecord) -> tuple[Vec3, Ray] | None:
        scattered = self._reflect(r_in, rec)
        return None if scattered is None else (self.albedo, scattered)

    def scatter_monte_carlo(self, r_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        scattered = self._reflect(r_in, rec)
        if scattered is None:
            return None
        return SpecularScatter(specular_ray=scattered, attenuation=self.albedo)


@dataclass(frozen=True)
class Dielectric(Material):
    """A clear refractive surface with index of refraction ``ir``."""

    ir: float

    @staticmethod
    def reflectance(cosine: float, ir: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = ((1.0 - ir) / (1.0 + ir)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5

    def _direction(self, r_in: Ray, rec: HitRecord) -> Ray:
        ratio = 1.0 / self.ir if rec.front_face else self.ir
        unit_direction = r_in.direction.unit()
        cos_theta = min((-1.0 * unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        cannot_refract = ratio * sin_theta > 1.0
        will_reflect = random.random() < self.reflectance(cos_theta, ratio)
        if cannot_refract or will_reflect:
            direction = Vec3.reflect(unit_direction, rec.normal)
        else:
            direction = Vec3.refract(unit_direction, rec.normal, ratio)
        return Ray(rec.position, direction, r_in.time)

    def scatter(self, r_in: Ray, rec: HitRecord) -> tuple[Vec3, Ray] | None:
        return Vec3.ones(), self._direction(r_in, rec)

    def scatter_monte_carlo(self, r_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        return SpecularScatter(specular_ray=self._direction(r_in, rec), attenuation=Vec3.ones())


@dataclass(frozen=True)
class DiffuseLight(Material):
    """A surface that emits light from its front face."""

    emit: Texture

    def emitted(self, rec: HitRecord) -> Vec3:
        if rec.front_face:
            return self.emit.texture_map(rec.u, rec.v, rec.position)
        return Vec3.zero()