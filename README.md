# raytracer

A physically based path tracer. It renders scenes built from spheres, moving
spheres, axis-aligned quads, cubes, triangles and OBJ meshes, with Lambertian,
metal, dielectric and emissive materials and constant, checker, image and
Perlin-noise textures. Lighting uses Monte Carlo integration with an even
mixture of cosine-weighted and light-directed importance sampling, and large
groups of objects can be accelerated with a bounding volume hierarchy (`BVH`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Rendering from the command line

```
raytracer
```

This renders one of the built-in scenes and saves it as an image. While it
runs it shows a progress bar over the image rows and prints, after each row,
the time elapsed and an estimate of the time remaining.

Options:

- `--scene N` — which scene to build (default 5, see below)
- `--width W` — image width in pixels (default 480)
- `--aspect-ratio R` — width divided by height (default 1.0)
- `--samples S` — samples per pixel (default 2000)
- `--max-depth D` — maximum number of bounces per path (default 200)
- `--assets DIR` — directory holding the `img/` and `objects/` files (default `.`)
- `--output PATH` — where to save the image (default `output/test.png`; missing
  parent directories are created)
- `--quiet` — hide the progress bar and timing lines

The image must be at least 2 pixels wide and high, samples per pixel must be at
least 1 and the maximum depth must not be negative; otherwise the command stops
with an error message.

The built-in scenes are:

1. a random field of diffuse (moving), metal and glass spheres
2. an image-textured sphere (needs `img/e.jpg`)
3. the Cornell box with a glass sphere and a rotated block
4. the "final scene": a ground of boxes, a moving sphere, noise and image
   textures and a rotated cluster of spheres (needs `img/SJTU-Badge.png`)
5. a Cornell box variant with a mesh, an image-textured cube, a glass sphere and
   a mirror triangle (needs `img/SJTU_gate.jpg` and `objects/teapot.obj`)

Any other number gives the random scene. Asset paths are taken relative to
`--assets`.

## Using the library

```python
from raytracer.render import RenderConfig, render
from raytracer.scene import cornell_box

scene = cornell_box(1.0)
config = RenderConfig(width=64, samples_per_pixel=8, max_depth=10)
image = render(scene, config, progress=False)
image.save("cornell.png")
```

`render` returns a Pillow RGB image. `render_pixel(scene, config, i, j)` gives
the 8-bit colour of a single pixel (row `j` counted from the bottom), and
`raytracer.color.to_rgb` turns an accumulated colour into gamma-corrected 8-bit
channels.

A `Scene` (in `raytracer.scene`) holds the world to trace, the lights used for
importance sampling, the background colour and the camera. The example scenes
are available as `random_scene`, `earth_sphere`, `cornell_box`,
`weekend_final_scene`, `cornell_test` and `scene_select`.

To build your own scene, combine the pieces in:

- `raytracer.sphere` — `Sphere`, `MovingSphere`
- `raytracer.quad` — `Quad` on a `Plane` (`XY`, `XZ`, `YZ`)
- `raytracer.cube`, `raytracer.triangle` — `Cube`, `Triangle`
- `raytracer.mesh` — `Mesh`, with `Mesh.load_obj(path, offset, scale, material)`
- `raytracer.material` — `Lambertian`, `Metal`, `Dielectric`, `DiffuseLight`
- `raytracer.texture` — `ConstantTexture`, `CheckerTexture`, `ImageTexture`
  (`ImageTexture.from_file`), `NoiseTexture`
- `raytracer.rotate`, `raytracer.translate` — `Rotate` about an `Axis`, `Translate`
- `raytracer.hittable` — `FlipNormal`, which reports hits on the opposite face
  (used for downward-facing ceiling lights)
- `raytracer.hittable_list`, `raytracer.bvh` — `HittableList`, `BVH`
- `raytracer.camera` — `Camera` with depth of field and a shutter interval

Objects used as lights for importance sampling go in the scene's `lights`;
spheres and quads can be sampled this way.

## OBJ loading

`Mesh.load_obj` reads vertex (`v`) and face (`f`) lines and the `o`/`g` object
names. Polygon faces are split into triangle fans, and negative indices are
supported. Only the first object in the file is used; its vertices are scaled
and then offset. Normals, texture coordinates and material libraries are
ignored. Problems reading or parsing the file raise `MeshLoadError`.

## Limitations

Rendering runs in pure Python on a single core, with no parallel or GPU
rendering, so it is slow: start with a small image and few samples per pixel.
Output is a still image only; there is no preview window.