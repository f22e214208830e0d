import math
import random

from raytracer.perlin import Perlin
from raytracer.vec3 import Vec3

P = Vec3(0.37, 1.21, 2.9)


def test_same_seed_same_noise():
    a = Perlin(random.Random(1))
    b = Perlin(random.Random(1))
    assert a.perlin(P, 1.3) == b.perlin(P, 1.3)
    assert a.turb(P, 0.7, 7) == b.turb(P, 0.7, 7)


def test_lattice_points_are_zero():
    noise = Perlin(random.Random(2))
    assert noise.perlin(Vec3(3, 5, 7), 1.0) == 0.0


def test_noise_is_bounded():
    noise = Perlin(random.Random(4))
    rng = random.Random(5)
    for _ in range(100):
        p = Vec3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        assert abs(noise.perlin(p, 1.0)) <= math.sqrt(3)


def test_negative_coordinates_share_first_cell():
    noise = Perlin(random.Random(6))
    assert noise.perlin(Vec3(-0.5, -0.5, -0.5), 1.0) == noise.perlin(Vec3(0.5, 0.5, 0.5), 1.0)


def test_scale_matches_scaled_point():
    noise = Perlin(random.Random(8))
    assert noise.perlin(P, 2.0) == noise.perlin(P * 2.0, 1.0)


def test_turbulence_properties():
    noise = Perlin(random.Random(9))
    assert noise.turb(P, 1.0, 0) == 0.0
    assert noise.turb(P, 1.0, 1) == abs(noise.perlin(P, 1.0))
    assert noise.turb(P, 0.5, 7) >= 0.0