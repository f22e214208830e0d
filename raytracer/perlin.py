"""Perlin gradient noise."""

from __future__ import annotations

import math
import random
from itertools import product

from raytracer.vec3 import Vec3

_POINT_COUNT = 256


def _random_in_unit_sphere(rng: random.Random) -> Vec3:
    while True:
        p = Vec3(rng.random() * 2.0 - 1.0, rng.random() * 2.0 - 1.0, rng.random() * 2.0 - 1.0)
        if p.squared_length() < 1.0:
            return p


def _permutation(rng: random.Random) -> list[int]:
    perm = list(range(_POINT_COUNT))
    rng.shuffle(perm)
    return perm


def _lattice_index(value: float) -> int:
    # Negative and NaN coordinates saturate to the first lattice cell.
    floored = math.floor(value) if math.isfinite(value) else 0
    return max(int(floored), 0)


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _interpolate(corners: dict[tuple[int, int, int], Vec3], u: float, v: float, w: float) -> float:
    uu, vv, ww = _smooth(u), _smooth(v), _smooth(w)
    accum = 0.0
    for i, j, k in product((0, 1), repeat=3):
        weight = Vec3(u - i, v - j, w - k)
        accum += (
            (i * uu + (1 - i) * (1.0 - uu))
            * (j * vv + (1 - j) * (1.0 - vv))
            * (k * ww + (1 - k) * (1.0 - ww))
            * corners[i, j, k].dot(weight)
        )
    return accum


class Perlin:
    """Gradient noise over random unit-ball vectors on a 256-cell lattice."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.rd_vec = [_random_in_unit_sphere(rng) for _ in range(_POINT_COUNT)]
        self.perm_x = _permutation(rng)
        self.perm_y = _permutation(rng)
        self.perm_z = _permutation(rng)

    def perlin(self, p: Vec3, scale: float) -> float:
        sx, sy, sz = scale * p.x, scale * p.y, scale * p.z
        u = _smooth(sx - math.floor(sx))
        v = _smooth(sy - math.floor(sy))
        w = _smooth(sz - math.floor(sz))
        i, j, k = _lattice_index(sx), _lattice_index(sy), _lattice_index(sz)

        corners = {
            (di, dj, dk): self.rd_vec[
                self.perm_x[(i + di) & 255] ^ self.perm_y[(j + dj) & 255] ^ self.perm_z[(k + dk) & 255]
            ]
            for di, dj, dk in product((0, 1), repeat=3)
        }
        return _interpolate(corners, u, v, w)

    def turb(self, p: Vec3, scale: float, depth: int) -> float:
        """Sum of ``depth`` octaves of noise, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.perlin(temp_p, scale)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)