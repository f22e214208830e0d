"""Example scenes: objects, lights, background and camera."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from itertools import product
from pathlib import Path

from raytracer.bvh import BVH
from raytracer.camera import Camera
from raytracer.cube import Cube
from raytracer.hittable import FlipNormal, Hittable
from raytracer.hittable_list import HittableList
from raytracer.material import Dielectric, DiffuseLight, Lambertian, Metal
from raytracer.mesh import Mesh
from raytracer.quad import Plane, Quad
from raytracer.rotate import Axis, Rotate
from raytracer.sphere import MovingSphere, Sphere
from raytracer.texture import CheckerTexture, ConstantTexture, ImageTexture, NoiseTexture
from raytracer.translate import Translate
from raytracer.triangle import Triangle
from raytracer.vec3 import Vec3

DEFAULT_ASPECT_RATIO = 1.0

_VUP = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Scene:
    """Everything needed to render a picture."""

    world: Hittable
    lights: Hittable
    background: Vec3
    camera: Camera


def _asset(asset_dir: str | os.PathLike[str], *parts: str) -> Path:
    return Path(asset_dir).joinpath(*parts)


def _load_image(path: Path) -> ImageTexture:
    texture = ImageTexture.from_file(path)
    print(f"nx: {texture.width}, ny: {texture.height}")
    return texture


def _far_camera(aspect_ratio: float) -> Camera:
    return Camera(
        Vec3(13.0, 2.0, 3.0), Vec3.zero(), _VUP, 20.0, aspect_ratio, 0.1, 10.0, 0.0, 1.0
    )


def _box_camera(lookfrom: Vec3, aspect_ratio: float, aperture: float) -> Camera:
    return Camera(
        lookfrom, Vec3(278.0, 278.0, 0.0), _VUP, 40.0, aspect_ratio, aperture, 10.0, 0.0, 1.0
    )


def random_scene(aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> Scene:
    """A field of small random spheres around three large ones."""
    ground = Lambertian(
        CheckerTexture(
            ConstantTexture(Vec3(1.0, 1.0, 1.0)),
            ConstantTexture(Vec3(0.3, 1.0, 0.3)),
        )
    )
    world: list[Hittable] = [Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, ground)]

    for a, b in product(range(-11, 12), repeat=2):
        choose_mat = random.random()
        center = Vec3(a + random.uniform(0.0, 0.9), 0.2, b + random.uniform(0.0, 0.9))
        if choose_mat < 0.8:
            albedo = Vec3.random_range(0.0, 1.0) * Vec3.random_range(0.0, 1.0)
            center1 = center + Vec3(0.0, random.uniform(0.0, 0.5), 0.0)
            world.append(
                MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(ConstantTexture(albedo)))
            )
        elif choose_mat < 0.95:
            albedo = Vec3.random_range(0.4, 1.0)
            fuzz = random.uniform(0.0, 0.5)
            world.append(Sphere(center, 0.2, Metal(albedo, fuzz)))
        else:
            world.append(Sphere(center, 0.2, Dielectric(1.5)))

    world.append(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.append(
        Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(ConstantTexture(Vec3(0.4, 0.2, 0.1))))
    )
    world.append(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))

    return Scene(
        BVH(world, 0.0, 1.0), HittableList(), Vec3(0.7, 0.8, 1.0), _far_camera(aspect_ratio)
    )


def earth_sphere(
    asset_dir: str | os.PathLike[str] = ".", aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Scene:
    """A single sphere wrapped in an image texture."""
    texture = ImageTexture.from_file(_asset(asset_dir, "img", "e.jpg"))
    world = Sphere(Vec3.zero(), 2.0, Lambertian(texture))
    return Scene(world, HittableList(), Vec3(0.7, 0.8, 1.0), _far_camera(aspect_ratio))


def cornell_box(aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> Scene:
    """The classic Cornell box with a glass sphere and a rotated block."""
    red = Lambertian(ConstantTexture(Vec3(0.65, 0.05, 0.05)))
    white = Lambertian(ConstantTexture(Vec3(0.73, 0.73, 0.73)))
    green = Lambertian(ConstantTexture(Vec3(0.12, 0.45, 0.15)))
    light = DiffuseLight(ConstantTexture(Vec3(15.0, 15.0, 15.0)))
    rect_light = FlipNormal(Quad(Plane.XZ, 213.0, 343.0, 227.0, 332.0, 554.0, light))

    world = HittableList(
        [
            Quad(Plane.YZ, 0.0, 555.0, 0.0, 555.0, 555.0, green),
            Quad(Plane.YZ, 0.0, 555.0, 0.0, 555.0, 0.0, red),
            Quad(Plane.XZ, 0.0, 555.0, 0.0, 555.0, 0.0, white),
            Quad(Plane.XZ, 0.0, 555.0, 0.0, 555.0, 555.0, white),
            Quad(Plane.XY, 0.0, 555.0, 0.0, 555.0, 555.0, white),
            rect_light,
            Sphere(Vec3(190.0, 90.0, 190.0), 90.0, Dielectric(1.5)),
            Translate(
                Rotate(Axis.Y, Cube(Vec3.zero(), Vec3(165.0, 330.0, 165.0), white), 15.0),
                Vec3(265.0, 0.0, 295.0),
            ),
        ]
    )
    lights = HittableList([rect_light])
    camera = _box_camera(Vec3(278.0, 278.0, -800.0), aspect_ratio, 0.05)
    return Scene(world, lights, Vec3.zero(), camera)


def weekend_final_scene(
    asset_dir: str | os.PathLike[str] = ".", aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Scene:
    """A showcase of every feature: boxes, motion blur, textures, noise and instancing."""
    world = HittableList()

    ground = Lambertian(ConstantTexture(Vec3(0.48, 0.83, 0.53)))
    boxes_per_side = 20
    width = 100.0
    floor: list[Hittable] = []
    for i, j in product(range(boxes_per_side), repeat=2):
        x0 = -1000.0 + i * width
        z0 = -1000.0 + j * width
        y1 = 100.0 * (random.random() + 0.01)
        floor.append(Cube(Vec3(x0, 0.0, z0), Vec3(x0 + width, y1, z0 + width), ground))
    world.add(BVH(floor, 0.0, 1.0))

    light = DiffuseLight(ConstantTexture(Vec3(7.0, 7.0, 7.0)))
    rect_light = FlipNormal(Quad(Plane.XZ, 147.0, 412.0, 123.0, 423.0, 554.0, light))
    world.add(rect_light)

    center = Vec3(400.0, 400.0, 200.0)
    world.add(
        MovingSphere(
            center,
            center + Vec3(30.0, 0.0, 0.0),
            0.0,
            1.0,
            50.0,
            Lambertian(ConstantTexture(Vec3(0.7, 0.3, 0.1))),
        )
    )
    world.add(Sphere(Vec3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(0.0, 150.0, 145.0), 50.0, Metal(Vec3(0.8, 0.8, 0.9), 1.0)))

    badge = _load_image(_asset(asset_dir, "img", "SJTU-Badge.png"))
    world.add(Sphere(Vec3(400.0, 200.0, 400.0), 100.0, Lambertian(badge)))
    world.add(Sphere(Vec3(220.0, 280.0, 300.0), 80.0, Lambertian(NoiseTexture(0.1))))

    white = Lambertian(ConstantTexture(Vec3(0.73, 0.73, 0.73)))
    cluster = [
        Sphere(
            Vec3(165.0 * random.random(), 165.0 * random.random(), 165.0 * random.random()),
            10.0,
            white,
        )
        for _ in range(1000)
    ]
    world.add(
        Translate(
            Rotate(Axis.Y, BVH(cluster, 0.0, 0.1), 15.0),
            Vec3(-100.0, 270.0, 395.0),
        )
    )

    lights = HittableList([rect_light])
    camera = _box_camera(Vec3(478.0, 278.0, -600.0), aspect_ratio, 0.01)
    return Scene(world, lights, Vec3.zero(), camera)


def cornell_test(
    asset_dir: str | os.PathLike[str] = ".", aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Scene:
    """A Cornell box holding a loaded mesh, a textured cube, glass and a mirror triangle."""
    white = Lambertian(ConstantTexture(Vec3(0.73, 0.73, 0.73)))
    tomato = Lambertian(ConstantTexture(Vec3(1.0, 0.39, 0.28)))
    violet = Lambertian(ConstantTexture(Vec3(0.93, 0.51, 0.93)))
    metal = Metal(Vec3(0.8, 0.85, 0.88), 0.02)
    light = DiffuseLight(ConstantTexture(Vec3(1.0, 1.0, 0.88) * 2.0))
    gate = _load_image(_asset(asset_dir, "img", "SJTU_gate.jpg"))

    teapot = Mesh.load_obj(
        _asset(asset_dir, "objects", "teapot.obj"), Vec3(208.0, 55.0, 208.0), 1.0, metal
    )

    rect_light = FlipNormal(Quad(Plane.XZ, 100.0, 455.0, 100.0, 455.0, 554.0, light))
    cube = Cube(Vec3.zero(), Vec3(175.0, 175.0, 175.0), Lambertian(gate))
    mirror = Triangle(
        (Vec3(0.0, 0.0, 465.0), Vec3(555.0, 0.0, 465.0), Vec3(278.0, 455.0, 555.0)),
        metal,
    )

    world = HittableList(
        [
            teapot,
            Quad(Plane.YZ, 0.0, 555.0, 0.0, 555.0, 555.0, violet),
            Quad(Plane.YZ, 0.0, 555.0, 0.0, 555.0, 0.0, tomato),
            Quad(Plane.XZ, 0.0, 555.0, 0.0, 555.0, 0.0, white),
            Quad(Plane.XZ, 0.0, 555.0, 0.0, 555.0, 555.0, white),
            Quad(Plane.XY, 0.0, 555.0, 0.0, 555.0, 555.0, white),
            rect_light,
            Sphere(Vec3(50.0, 50.0, 50.0), 49.0, Dielectric(1.5)),
            Translate(Rotate(Axis.Y, cube, 30.0), Vec3(278.0, 0.0, 278.0)),
            mirror,
        ]
    )
    lights = HittableList([rect_light])
    camera = _box_camera(Vec3(278.0, 278.0, -800.0), aspect_ratio, 0.01)
    return Scene(world, lights, Vec3.zero(), camera)


def scene_select(
    selector: int,
    asset_dir: str | os.PathLike[str] = ".",
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> Scene:
    """Build scene 1 (random), 2 (earth), 3 (Cornell box), 4 (final) or 5 (Cornell test).

    Any other selector gives the random scene.
    """
    if selector == 2:
        return earth_sphere(asset_dir, aspect_ratio)
    if selector == 3:
        return cornell_box(aspect_ratio)
    if selector == 4:
        return weekend_final_scene(asset_dir, aspect_ratio)
    if selector == 5:
        return cornell_test(asset_dir, aspect_ratio)
    return random_scene(aspect_ratio)