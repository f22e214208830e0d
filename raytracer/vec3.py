"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Iterator

_NEAR_ZERO = 1e-8


class Vec3:
    """An immutable 3D vector with arithmetic operators."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def ones(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"vector index out of range: {index}")

    def with_component(self, index: int, value: float) -> Vec3:
        """Return a copy with the component at ``index`` replaced."""
        if index == 0:
            return Vec3(value, self.y, self.z)
        if index == 1:
            return Vec3(self.x, value, self.z)
        if index == 2:
            return Vec3(self.x, self.y, value)
        raise IndexError(f"vector index out of range: {index}")

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    @staticmethod
    def cross(u: Vec3, v: Vec3) -> Vec3:
        return Vec3(
            u.y * v.z - u.z * v.y,
            u.z * v.x - u.x * v.z,
            u.x * v.y - u.y * v.x,
        )

    def unit(self) -> Vec3:
        length = self.length()
        if length == 0.0:
            raise ZeroDivisionError("cannot normalise a zero-length vector")
        return self / length

    def near_zero(self) -> bool:
        return abs(self.x) < _NEAR_ZERO and abs(self.y) < _NEAR_ZERO and abs(self.z) < _NEAR_ZERO

    @staticmethod
    def reflect(v: Vec3, n: Vec3) -> Vec3:
        return v - n * v.dot(n) * 2.0

    @staticmethod
    def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
        cos_theta = (-uv).dot(n)
        r_out_perp = (uv + n * cos_theta) * etai_over_etat
        r_out_parallel = -n * math.sqrt(abs(1.0 - r_out_perp.squared_length()))
        return r_out_perp + r_out_parallel

    @classmethod
    def random(cls) -> Vec3:
        return cls(_random.random(), _random.random(), _random.random())

    @classmethod
    def random_range(cls, low: float, high: float) -> Vec3:
        span = high - low
        return cls(
            low + span * _random.random(),
            low + span * _random.random(),
            low + span * _random.random(),
        )

    @classmethod
    def random_in_unit_sphere(cls) -> Vec3:
        while True:
            p = cls.random_range(-1.0, 1.0)
            if p.squared_length() < 1.0:
                return p

    @classmethod
    def random_unit_vector(cls) -> Vec3:
        return cls.random_in_unit_sphere().unit()

    @classmethod
    def random_in_unit_disk(cls) -> Vec3:
        """Sample a point in the unit disk lying in the XZ plane."""
        while True:
            p = cls(_random.random() * 2.0 - 1.0, 0.0, _random.random() * 2.0 - 1.0)
            if p.squared_length() < 1.0:
                return p

    @classmethod
    def random_cos_direction(cls) -> Vec3:
        r1, r2 = _random.random(), _random.random()
        phi = 2.0 * math.pi * r1
        z = math.sqrt(1.0 - r2)
        x = math.cos(phi) * math.sqrt(r2)
        y = math.sin(phi) * math.sqrt(r2)
        return cls(x, y, z)

    @classmethod
    def random_to_sphere(cls, radius: float, distance_squared: float) -> Vec3:
        r1, r2 = _random.random(), _random.random()
        z = 1.0 + r2 * (math.sqrt(1.0 - radius * radius / distance_squared) - 1.0)
        phi = 2.0 * math.pi * r1
        s = math.sqrt(1.0 - z * z)
        return cls(math.cos(phi) * s, math.sin(phi) * s, z)

    def __add__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"


Point3 = Vec3