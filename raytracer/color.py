"""Colour conversion and the path-tracing radiance estimate."""

from __future__ import annotations

import math

from raytracer.hittable import Hittable
from raytracer.material import SpecularScatter
from raytracer.pdf import HittablePDF, MixturePDF
from raytracer.ray import Ray
from raytracer.vec3 import Vec3

Color = Vec3

_T_MIN = 0.00001


def _channel(value: float, samples_per_pixel: int) -> int:
    scaled = value / samples_per_pixel
    if not scaled > 0.0:
        return 0
    return int(256.0 * min(math.sqrt(scaled), 0.999))


def to_rgb(color: Vec3, samples_per_pixel: int) -> tuple[int, int, int]:
    """Average accumulated samples, gamma-correct and quantise to 8-bit channels."""
    return (
        _channel(color.x, samples_per_pixel),
        _channel(color.y, samples_per_pixel),
        _channel(color.z, samples_per_pixel),
    )


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ray_color(ray: Ray, background: Vec3, world: Hittable, lights: Hittable, depth: int) -> Vec3:
    """Estimate the radiance carried back along ``ray``."""
    if depth == 0:
        return Vec3.zero()
    rec = world.hit(ray, _T_MIN, math.inf)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec)
    srec = rec.material.scatter_monte_carlo(ray, rec)
    if srec is None:
        return emitted
    if isinstance(srec, SpecularScatter):
        return srec.attenuation * ray_color(srec.specular_ray, background, world, lights, depth - 1)

    mixture = MixturePDF(HittablePDF(rec.position, lights), srec.pdf)
    scattered = Ray(rec.position, mixture.generate(), ray.time)
    pdf_value = mixture.value(scattered.direction)
    weight = _ratio(rec.material.scatter_pdf(ray, rec, scattered), pdf_value)
    incoming = ray_color(scattered, background, world, lights, depth - 1)
    return emitted + srec.attenuation * incoming * weight