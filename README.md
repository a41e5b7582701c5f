# raytrace

A small ray tracer. It reads a plain-text scene script that describes
spheres, planes, lights and a camera, traces it with anti-aliasing, soft
shadows and depth of field, and writes the picture as a raw 8-bit RGB file.

## Installing

    pip install .

The package has no dependencies outside the standard library.

## Running

    raytrace scene.txt --width 320 --height 240 --output scene.raw --seed 1

All arguments are optional:

| Argument    | Default                  | Meaning                          |
|-------------|--------------------------|----------------------------------|
| `scene`     | `../src/SceneScript.txt` | scene script to read             |
| `--width`   | `400`                    | image width in pixels            |
| `--height`  | `400`                    | image height in pixels           |
| `--output`  | `render.raw`             | raw image file to write          |
| `--seed`    | none (random)            | seed that makes a render repeatable |

The command renders on a black background with no ambient light. Progress
and every property loaded from the script are logged to standard error. If
the scene file cannot be opened, the command reports it and exits with
status 1.

The output holds three bytes (red, green, blue) per pixel, row by row from
the top, with no header. Open it in any image tool that accepts raw RGB data
by giving it the width and height.

## Scene scripts

A scene script is a sequence of whitespace-separated words. Each entity is a
type name followed by its properties between `{` and `}`:

    Camera
    {
        eye 0 2 -10
        lookAt 0 0 0
        worldUp 0 1 0
        fov 60
        fstop 16
    }

    Sphere
    {
        position 0 1 0
        radius 1
        material diffuse
    }

    Plane
    {
        normal 0 1 0
        dValue 0
        material diffuse
    }

    PointLight
    {
        position 5 10 -5
        color 1 1 1
        intensity 1
    }

    DirectionalLight
    {
        direction 0 -1 1
        color 1 1 1
        intensity 0.5
    }

Entity types and their properties:

| Type               | Properties                                          |
|--------------------|-----------------------------------------------------|
| `Camera`           | `eye`, `lookAt`, `worldUp` (x y z), `fov`, `fstop`  |
| `Sphere`           | `position` (x y z), `radius`, `material`            |
| `Plane`            | `normal` (x y z), `dValue`, `material`              |
| `PointLight`       | `position`, `color` (x y z), `intensity`            |
| `DirectionalLight` | `direction`, `color` (x y z), `intensity`           |

A plane is the set of points `p` with `p · normal + dValue = 0`. The camera's
`fov` is in degrees.

`material diffuse` gives an object a diffuse (Lambertian) surface; any other
material name is logged and ignored. Every object that is rendered needs a
material, or rendering raises `ValueError`.

Unknown type names are skipped. A property name the entity does not know is
logged as not valid; its values are not consumed, so they are read as the
next property names. A script that ends inside `{ ... }`, or has a
non-number where a number is expected, raises
`raytrace.entity.SceneFormatError`, as does a `{` before any type name.

Shading details:

- Each pixel is the average of 16 jittered samples.
- Point lights are sampled 4 times over a disc of radius 0.3, which gives
  soft shadow edges.
- The camera's `fstop` sets the lens radius as the eye-to-`lookAt` distance
  divided by `2 * fstop`; smaller values blur more away from the `lookAt`
  point. Without an `fstop` the lens is a pinhole and nothing is blurred.

## Using it from Python

    import random

    from raytrace.scene import Scene
    from raytrace.renderer import render, write_raw

    scene = Scene()
    scene.load("scene.txt")
    pixels = render(scene, 320, 240, random.Random(1))
    write_raw("scene.raw", pixels)

- `Scene.loads` takes the script as a string, and `Scene.load_tokens` takes
  it as already-split words. `Scene.type_names` lists the type of every
  object, then every light, in load order. `background_color` and
  `ambient_light` are plain attributes.
- `render` returns a row-major list of `Vector3` colours; `encode_raw` turns
  them into the raw bytes that `write_raw` saves.
- `raytrace.vector.Vector3` (also named `Color3`) is an immutable vector with
  `+`, `-`, `*`, `/`, `dot`, `cross`, `length`, `normalized` and `clamped`.
- `raytrace.primitives.Sphere` and `raytrace.primitives.Plane` give the ray
  distance from `check_for_hit` and the surface normal from `normal_at`.
- `raytrace.tracer.Tracer` traces single rays: `trace_pixel` from normalised
  image coordinates, `trace` from an eye and direction, and `shadow_trace`
  to test for occlusion.
- `raytrace.entity.Registry` maps type names to factories; a scene's
  `primitive_types` and `light_types` registries decide which type names its
  scripts accept.

## What it does not do

- The only output is raw RGB; there is no PNG or other image format.
- Surfaces are diffuse only. `SpecularMaterial` exists but adds nothing
  unless given a fixed `highlight` colour in Python, and scripts cannot
  select it. `Tracer.reflection_trace` is available but no material uses it,
  so there are no reflections.

## Tests

    pip install ".[test]"
    pytest