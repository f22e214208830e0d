import pytest
from PIL import Image

from raytracer.camera import Camera
from raytracer.hittable_list import HittableList
from raytracer.material import DiffuseLight
from raytracer.quad import Plane, Quad
from raytracer.render import RenderConfig, main, render, render_pixel
from raytracer.scene import Scene
from raytracer.texture import ConstantTexture
from raytracer.vec3 import Vec3


def _camera(aspect_ratio=1.0):
    return Camera(Vec3(0.0, 0.0, 1.0), Vec3.zero(), Vec3(0.0, 1.0, 0.0),
                  90.0, aspect_ratio, 0.0, 1.0, 0.0, 1.0)


def _empty_scene(background, aspect_ratio=1.0):
    return Scene(HittableList(), HittableList(), background, _camera(aspect_ratio))


def _upper_light_scene():
    light = DiffuseLight(ConstantTexture(Vec3.ones()))
    quad = Quad(Plane.XY, -2.0, 2.0, 0.1, 2.0, 0.0, light)
    return Scene(HittableList([quad]), HittableList(), Vec3.zero(), _camera())


def test_default_config_matches_settings():
    config = RenderConfig()
    assert config.width == 480
    assert config.height == 480
    assert config.samples_per_pixel == 2000
    assert config.max_depth == 200


def test_height_follows_aspect_ratio():
    config = RenderConfig(width=8, aspect_ratio=2.0, samples_per_pixel=1, max_depth=1)
    assert config.height == 4


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 1},
        {"width": 4, "aspect_ratio": 4.0},
        {"samples_per_pixel": 0},
        {"max_depth": -1},
        {"aspect_ratio": 0.0},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_pixel_of_white_background_is_full():
    config = RenderConfig(width=4, samples_per_pixel=3, max_depth=5)
    assert render_pixel(_empty_scene(Vec3.ones()), config, 1, 2) == (255, 255, 255)


def test_pixel_of_black_background_is_zero():
    config = RenderConfig(width=4, samples_per_pixel=3, max_depth=5)
    assert render_pixel(_empty_scene(Vec3.zero()), config, 0, 0) == (0, 0, 0)


def test_zero_depth_gives_black():
    config = RenderConfig(width=4, samples_per_pixel=2, max_depth=0)
    assert render_pixel(_empty_scene(Vec3.ones()), config, 2, 2) == (0, 0, 0)


def test_render_image_size():
    config = RenderConfig(width=6, aspect_ratio=2.0, samples_per_pixel=1, max_depth=2)
    img = render(_empty_scene(Vec3.ones(), aspect_ratio=2.0), config, progress=False)
    assert img.size == (6, 3)
    assert img.mode == "RGB"
    assert set(img.getdata()) == {(255, 255, 255)}


def test_render_puts_top_of_scene_in_first_row():
    config = RenderConfig(width=4, samples_per_pixel=2, max_depth=3)
    img = render(_upper_light_scene(), config, progress=False)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((3, 0)) == (255, 255, 255)
    assert img.getpixel((0, 3)) == (0, 0, 0)
    assert img.getpixel((3, 3)) == (0, 0, 0)


def test_main_writes_image(tmp_path):
    output = tmp_path / "out" / "picture.png"
    code = main([
        "--scene", "3",
        "--width", "2",
        "--samples", "1",
        "--max-depth", "2",
        "--output", str(output),
        "--quiet",
    ])
    assert code == 0
    with Image.open(output) as img:
        assert img.size == (2, 2)


def test_main_rejects_bad_width(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--width", "1", "--output", str(tmp_path / "x.png"), "--quiet"])
    assert excinfo.value.code == 2