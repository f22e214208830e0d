"""Probability density functions over scattering directions."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.hittable import Hittable
from raytracer.onb import ONB
from raytracer.vec3 import Vec3


class PDF(ABC):
    """A distribution of directions that can be sampled and evaluated."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Density of the distribution in ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Draw a direction from the distribution."""


class CosinePDF(PDF):
    """Cosine-weighted hemisphere around ``w``."""

    def __init__(self, w: Vec3) -> None:
        self.uvw = ONB.build_from_w(w)

    def value(self, direction: Vec3) -> float:
        cosine = direction.unit().dot(self.uvw.w)
        return cosine / math.pi if cosine > 0.0 else 0.0

    def generate(self) -> Vec3:
        return self.uvw.local(Vec3.random_cos_direction())


@dataclass(frozen=True)
class HittablePDF(PDF):
    """Directions from ``origin`` towards an object."""

    origin: Vec3
    hittable: Hittable

    def value(self, direction: Vec3) -> float:
        return self.hittable.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.hittable.random(self.origin)


@dataclass(frozen=True)
class MixturePDF(PDF):
    """An even mixture of two distributions."""

    p0: PDF
    p1: PDF

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p0.value(direction) + 0.5 * self.p1.value(direction)

    def generate(self) -> Vec3:
        if random.random() < 0.5:
            return self.p0.generate()
        return self.p1.generate()