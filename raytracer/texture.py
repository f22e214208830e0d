"""Surface textures mapping hit coordinates to colours."""

from __future__ import annotations

import math
import os
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image

from raytracer.perlin import Perlin
from raytracer.vec3 import Vec3


def _clamp01(x: float) -> float:
    return min(max(x, 0.0), 1.0)


class Texture(ABC):
    """Maps surface coordinates ``(u, v)`` and point ``p`` to a colour."""

    @abstractmethod
    def texture_map(self, u: float, v: float, p: Vec3) -> Vec3:
        """Colour at the given surface coordinates and point."""


@dataclass(frozen=True)
class ConstantTexture(Texture):
    """A single solid colour."""

    value: Vec3

    def texture_map(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.value


@dataclass(frozen=True)
class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""

    odd: Texture
    even: Texture

    def texture_map(self, u: float, v: float, p: Vec3) -> Vec3:
        sines = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if sines < 0.0:
            return self.odd.texture_map(u, v, p)
        return self.even.texture_map(u, v, p)


@dataclass(frozen=True)
class ImageTexture(Texture):
    """An RGB image, 3 bytes per pixel in row-major order, sampled by (u, v)."""

    data: bytes
    width: int
    height: int

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> ImageTexture:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
            width, height = rgb.size
            return cls(rgb.tobytes(), width, height)

    def texture_map(self, u: float, v: float, p: Vec3) -> Vec3:
        i = min(int(_clamp01(u) * self.width), self.width - 1)
        j = min(int(_clamp01(1.0 - v) * self.height), self.height - 1)
        idx = 3 * i + 3 * self.width * j
        r, g, b = self.data[idx:idx + 3]
        return Vec3(r, g, b) / 255.0


class NoiseTexture(Texture):
    """Marble-like texture driven by Perlin turbulence."""

    def __init__(self, scale: float, rng: random.Random | None = None) -> None:
        self.noise = Perlin(rng)
        self.scale = scale

    def texture_map(self, u: float, v: float, p: Vec3) -> Vec3:
        return (
            Vec3.ones()
            * 0.5
            * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p, self.scale, 7)))
        )