import math

import pytest

from raytracer.mesh import Mesh, MeshLoadError
from raytracer.ray import Ray
from raytracer.vec3 import Vec3

MATERIAL = object()
SQUARE = [
    Vec3(0.0, 0.0, -2.0),
    Vec3(1.0, 0.0, -2.0),
    Vec3(1.0, 1.0, -2.0),
    Vec3(0.0, 1.0, -2.0),
]
SQUARE_OBJ = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"


def test_builds_one_triangle_per_index_triple():
    mesh = Mesh(SQUARE, [0, 1, 2, 0, 2, 3], MATERIAL)
    assert len(mesh.triangles) == 2


def test_trailing_indices_ignored():
    mesh = Mesh(SQUARE, [0, 1, 2, 0, 2, 3, 1], MATERIAL)
    assert len(mesh.triangles) == 2


def test_bad_index_raises():
    with pytest.raises(IndexError):
        Mesh(SQUARE, [0, 1, 9], MATERIAL)


def test_hit_on_both_triangles():
    mesh = Mesh(SQUARE, [0, 1, 2, 0, 2, 3], MATERIAL)
    for x, y in ((0.8, 0.2), (0.2, 0.8)):
        rec = mesh.hit(Ray(Vec3(x, y, 0.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec is not None
        assert rec.position.z == pytest.approx(SQUARE[0].z)
        assert rec.material is MATERIAL


def test_miss():
    mesh = Mesh(SQUARE, [0, 1, 2, 0, 2, 3], MATERIAL)
    assert mesh.hit(Ray(Vec3(2.0, 2.0, 0.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf) is None


def test_bounding_box():
    mesh = Mesh(SQUARE, [0, 1, 2, 0, 2, 3], MATERIAL)
    box = mesh.bounding_box(0.0, 1.0)
    assert box.minimum == SQUARE[0]
    assert box.maximum == SQUARE[2]


def test_load_obj_scales_and_offsets(tmp_path):
    path = tmp_path / "square.obj"
    path.write_text(SQUARE_OBJ)
    offset = Vec3(10.0, 0.0, 0.0)
    mesh = Mesh.load_obj(path, offset, 2.0, MATERIAL)
    assert len(mesh.triangles) == 2
    box = mesh.bounding_box(0.0, 1.0)
    assert box.minimum == offset
    assert box.maximum == Vec3(1.0, 1.0, 0.0) * 2.0 + offset
    rec = mesh.hit(Ray(Vec3(10.5, 0.5, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
    assert rec is not None


def test_load_obj_slashed_and_negative_indices(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(
        "# a triangle\nv 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvn 0 0 1\n"
        "f 1/1/1 2/1/1 3/1/1\nf -3//1 -2//1 -1//1\n"
    )
    mesh = Mesh.load_obj(path, Vec3.zero(), 1.0, MATERIAL)
    assert len(mesh.triangles) == 2
    assert mesh.bounding_box(0.0, 1.0).maximum == Vec3(1.0, 1.0, 0.0)


def test_load_obj_uses_first_object_only(tmp_path):
    path = tmp_path / "two.obj"
    path.write_text(
        "o first\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
        "o second\nv 5 5 5\nv 6 5 5\nv 5 6 5\nf 4 5 6\nf 4 6 5\n"
    )
    mesh = Mesh.load_obj(path, Vec3.zero(), 1.0, MATERIAL)
    assert len(mesh.triangles) == 1
    assert mesh.bounding_box(0.0, 1.0).maximum == Vec3(1.0, 1.0, 0.0)


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(MeshLoadError, match="Failed to load obj"):
        Mesh.load_obj(tmp_path / "absent.obj", Vec3.zero(), 1.0, MATERIAL)


def test_load_obj_without_faces(tmp_path):
    path = tmp_path / "points.obj"
    path.write_text("v 0 0 0\nv 1 0 0\n")
    with pytest.raises(MeshLoadError):
        Mesh.load_obj(path, Vec3.zero(), 1.0, MATERIAL)


def test_load_obj_bad_vertex(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 zero 0\nf 1 1 1\n")
    with pytest.raises(MeshLoadError):
        Mesh.load_obj(path, Vec3.zero(), 1.0, MATERIAL)


def test_load_obj_index_out_of_range(tmp_path):
    path = tmp_path / "range.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 7\n")
    with pytest.raises(MeshLoadError):
        Mesh.load_obj(path, Vec3.zero(), 1.0, MATERIAL)