import math
import random

import pytest

from raytracer.hittable import HitRecord
from raytracer.material import (
    Dielectric,
    DiffuseLight,
    Lambertian,
    Material,
    Metal,
    PdfScatter,
    SpecularScatter,
)
from raytracer.ray import Ray
from raytracer.texture import ConstantTexture
from raytracer.vec3 import Vec3

UP = Vec3(0.0, 1.0, 0.0)


def _record(material, front_face=True, normal=UP):
    return HitRecord(Vec3(1.0, 2.0, 3.0), normal, 1.0, 0.0, 0.0, front_face, material)


def _approx(v):
    return pytest.approx(tuple(v))


def test_lambertian_monte_carlo_uses_cosine_pdf():
    colour = Vec3(0.2, 0.4, 0.6)
    mat = Lambertian(ConstantTexture(colour))
    srec = mat.scatter_monte_carlo(Ray(Vec3.zero(), -UP), _record(mat))
    assert isinstance(srec, PdfScatter)
    assert srec.attenuation == colour
    assert srec.pdf.value(UP) == pytest.approx(1.0 / math.pi)


def test_lambertian_scatter_pdf():
    mat = Lambertian(ConstantTexture(Vec3.ones()))
    rec = _record(mat)
    r_in = Ray(Vec3.zero(), -UP)
    assert mat.scatter_pdf(r_in, rec, Ray(rec.position, UP * 3.0)) == pytest.approx(1.0 / math.pi)
    assert mat.scatter_pdf(r_in, rec, Ray(rec.position, -UP)) == 0.0


def test_lambertian_scatter_leaves_surface():
    random.seed(1)
    colour = Vec3(0.5, 0.5, 0.5)
    mat = Lambertian(ConstantTexture(colour))
    rec = _record(mat)
    for _ in range(50):
        attenuation, scattered = mat.scatter(Ray(Vec3.zero(), -UP, 0.5), rec)
        assert attenuation == colour
        assert scattered.origin == rec.position
        assert scattered.time == 0.5
        assert scattered.direction.dot(UP) >= -1e-12


def test_metal_reflects_mirror_like():
    albedo = Vec3(0.9, 0.8, 0.7)
    mat = Metal(albedo, 0.0)
    srec = mat.scatter_monte_carlo(Ray(Vec3.zero(), Vec3(1.0, -1.0, 0.0)), _record(mat))
    assert isinstance(srec, SpecularScatter)
    assert srec.attenuation == albedo
    assert tuple(srec.specular_ray.direction) == _approx(Vec3(1.0, 1.0, 0.0).unit())


def test_metal_absorbs_rays_leaving_below():
    mat = Metal(Vec3.ones(), 0.0)
    r_in = Ray(Vec3.zero(), UP)
    assert mat.scatter_monte_carlo(r_in, _record(mat)) is None
    assert mat.scatter(r_in, _record(mat)) is None


def test_metal_emits_nothing():
    mat = Metal(Vec3.ones(), 0.0)
    assert mat.emitted(_record(mat)) == Vec3.zero()


def test_reflectance_limits():
    assert Dielectric.reflectance(0.0, 1.5) == pytest.approx(1.0)
    r0 = Dielectric.reflectance(1.0, 1.5)
    assert 0.0 < r0 < 0.1
    assert Dielectric.reflectance(1.0, 1.0) == 0.0


def test_dielectric_total_internal_reflection():
    random.seed(2)
    mat = Dielectric(1.5)
    srec = mat.scatter_monte_carlo(Ray(Vec3.zero(), Vec3(1.0, -0.1, 0.0)), _record(mat, front_face=False))
    assert isinstance(srec, SpecularScatter)
    assert srec.attenuation == Vec3.ones()
    assert tuple(srec.specular_ray.direction) == _approx(Vec3(1.0, 0.1, 0.0).unit())


def test_dielectric_matched_index_passes_straight_through():
    random.seed(4)
    mat = Dielectric(1.0)
    attenuation, scattered = mat.scatter(Ray(Vec3.zero(), -UP), _record(mat))
    assert attenuation == Vec3.ones()
    assert tuple(scattered.direction) == _approx(-UP)


def test_diffuse_light_emits_from_front_only():
    glow = Vec3(4.0, 4.0, 4.0)
    mat = DiffuseLight(ConstantTexture(glow))
    assert mat.emitted(_record(mat, front_face=True)) == glow
    assert mat.emitted(_record(mat, front_face=False)) == Vec3.zero()
    assert mat.scatter(Ray(Vec3.zero(), -UP), _record(mat)) is None
    assert mat.scatter_monte_carlo(Ray(Vec3.zero(), -UP), _record(mat)) is None


def test_base_material_defaults():
    mat = Material()
    rec = _record(mat)
    r = Ray(Vec3.zero(), -UP)
    assert mat.scatter_pdf(r, rec, r) == 0.0
    assert mat.emitted(rec) == Vec3.zero()