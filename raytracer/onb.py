"""Orthonormal bases."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.vec3 import Vec3


@dataclass(frozen=True)
class ONB:
    """An orthonormal basis (u, v, w)."""

    axes: tuple[Vec3, Vec3, Vec3]

    @classmethod
    def build_from_w(cls, n: Vec3) -> ONB:
        """Build a basis whose w axis points along ``n``."""
        w = n.unit()
        helper = Vec3(0.0, 1.0, 0.0) if abs(w.x) > 0.9 else Vec3(1.0, 0.0, 0.0)
        v = Vec3.cross(w, helper).unit()
        u = Vec3.cross(w, v)
        return cls((u, v, w))

    @property
    def u(self) -> Vec3:
        return self.axes[0]

    @property
    def v(self) -> Vec3:
        return self.axes[1]

    @property
    def w(self) -> Vec3:
        return self.axes[2]

    def local(self, a: Vec3) -> Vec3:
        """Express local coordinates ``a`` in world space."""
        return a.x * self.u + a.y * self.v + a.z * self.w