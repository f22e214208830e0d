"""Triangle meshes, optionally loaded from Wavefront OBJ files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.hittable_list import HittableList
from raytracer.ray import Ray
from raytracer.triangle import Triangle
from raytracer.vec3 import Vec3

_DEFAULT_NAME = "unnamed_object"


class MeshLoadError(Exception):
    """Raised when an OBJ file cannot be read or understood."""


def _face_index(token: str, vertex_count: int) -> int:
    raw = int(token.split("/", 1)[0])
    if raw > 0:
        return raw - 1
    if raw < 0:
        return vertex_count + raw
    raise ValueError("vertex index 0 is not valid")


def _parse_obj(path: str | os.PathLike[str]) -> tuple[list[Vec3], list[tuple[str, list[tuple[int, ...]]]]]:
    vertices: list[Vec3] = []
    models: list[tuple[str, list[tuple[int, ...]]]] = []
    name = _DEFAULT_NAME
    faces: list[tuple[int, ...]] = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue
            keyword, *args = line.split()
            try:
                if keyword == "v":
                    if len(args) < 3:
                        raise ValueError("vertex needs three coordinates")
                    vertices.append(Vec3(*(float(a) for a in args[:3])))
                elif keyword == "f":
                    if len(args) < 3:
                        raise ValueError("face needs at least three vertices")
                    faces.append(tuple(_face_index(tok, len(vertices)) for tok in args))
                elif keyword in ("o", "g"):
                    if faces:
                        models.append((name, faces))
                        faces = []
                    name = " ".join(args) or _DEFAULT_NAME
            except ValueError as err:
                raise MeshLoadError(f"Failed to load obj: line {line_number}: {err}") from err
    if faces:
        models.append((name, faces))
    return vertices, models


class Mesh(Hittable):
    """A collection of triangles sharing one material."""

    def __init__(self, positions: Iterable[Vec3], indices: Iterable[int], material: Any) -> None:
        positions = list(positions)
        corners = iter(indices)
        self.triangles = HittableList(
            Triangle((positions[a], positions[b], positions[c]), material)
            for a, b, c in zip(corners, corners, corners)
        )

    @classmethod
    def load_obj(
        cls,
        path: str | os.PathLike[str],
        offset: Vec3,
        scale: float,
        material: Any,
    ) -> Mesh:
        """Load the first model of an OBJ file, scaled and then offset."""
        try:
            vertices, models = _parse_obj(path)
        except OSError as err:
            raise MeshLoadError(f"Failed to load obj: {err}") from err
        if not models:
            raise MeshLoadError("Failed to load obj: the file holds no faces")

        name, faces = models[0]
        print(f"Loading model {name}")

        remap: dict[int, int] = {}
        positions: list[Vec3] = []
        indices: list[int] = []
        for face in faces:
            first, *rest = face
            for second, third in zip(rest, rest[1:]):
                for vertex in (first, second, third):
                    if not 0 <= vertex < len(vertices):
                        raise MeshLoadError(
                            f"Failed to load obj: vertex index {vertex + 1} out of range"
                        )
                    if vertex not in remap:
                        remap[vertex] = len(positions)
                        positions.append(vertices[vertex] * scale + offset)
                    indices.append(remap[vertex])

        print(f"{name} has {len(indices) // 3} triangles")
        return cls(positions, indices, material)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self.triangles.hit(r, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.triangles.bounding_box(t0, t1)