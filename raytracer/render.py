"""Render a scene to an image file."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image
from tqdm import tqdm

from raytracer.color import ray_color, to_rgb
from raytracer.scene import Scene, scene_select
from raytracer.vec3 import Vec3

DEFAULT_WIDTH = 480
DEFAULT_ASPECT_RATIO = 1.0
DEFAULT_SAMPLES_PER_PIXEL = 2000
DEFAULT_MAX_DEPTH = 200
DEFAULT_SCENE = 5
DEFAULT_OUTPUT = "output/test.png"


@dataclass(frozen=True)
class RenderConfig:
    """Image size and sampling settings."""

    width: int = DEFAULT_WIDTH
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.aspect_ratio <= 0.0:
            raise ValueError("aspect ratio must be positive")
        if self.width < 2 or self.height < 2:
            raise ValueError("image must be at least 2 pixels wide and high")
        if self.samples_per_pixel < 1:
            raise ValueError("samples per pixel must be at least 1")
        if self.max_depth < 0:
            raise ValueError("max depth must not be negative")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)


def render_pixel(scene: Scene, config: RenderConfig, i: int, j: int) -> tuple[int, int, int]:
    """Colour of column ``i``, row ``j`` counted from the bottom of the image."""
    total = Vec3.zero()
    for _ in range(config.samples_per_pixel):
        u = (i + random.random()) / (config.width - 1)
        v = (j + random.random()) / (config.height - 1)
        ray = scene.camera.get_ray(u, v)
        total = total + ray_color(ray, scene.background, scene.world, scene.lights, config.max_depth)
    return to_rgb(total, config.samples_per_pixel)


def render(scene: Scene, config: RenderConfig, progress: bool = True) -> Image.Image:
    """Render every pixel of ``scene`` into an RGB image."""
    width, height = config.width, config.height
    img = Image.new("RGB", (width, height))
    start = time.monotonic()
    for j in tqdm(range(height), disable=not progress):
        for i in range(width):
            img.putpixel((i, height - j - 1), render_pixel(scene, config, i, j))
        if progress:
            elapsed = time.monotonic() - start
            remaining = elapsed / (j + 1) * (height - j - 1)
            print(
                f"Time elapsed is: {elapsed:.3f}s, "
                f"estimated time remaining is: {remaining:.3f}s"
            )
    return img


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an example scene with a path tracer.")
    parser.add_argument("--scene", type=int, default=DEFAULT_SCENE,
                        help="1 random, 2 earth, 3 Cornell box, 4 final, 5 Cornell test")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--aspect-ratio", type=float, default=DEFAULT_ASPECT_RATIO)
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES_PER_PIXEL)
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
    parser.add_argument("--assets", default=".", help="directory holding img/ and objects/")
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--quiet", action="store_true", help="hide progress output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        config = RenderConfig(args.width, args.aspect_ratio, args.samples, args.max_depth)
    except ValueError as err:
        _parser().error(str(err))
    scene = scene_select(args.scene, args.assets, config.aspect_ratio)
    img = render(scene, config, progress=not args.quiet)
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    img.save(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())