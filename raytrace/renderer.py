"""Rendering a scene to raw RGB pixels, and the command that does it."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Iterable, Sequence
from os import PathLike

from .scene import Scene
from .tracer import Tracer
from .vector import Color3

log = logging.getLogger("raytrace")

ANTIALIAS_SAMPLES = 16
_PRECISION = 10
DEFAULT_SCENE = "../src/SceneScript.txt"
DEFAULT_OUTPUT = "render.raw"
DEFAULT_SIZE = 400


def _jitter(rng: random.Random) -> float:
    return (rng.randrange(_PRECISION * 2) - _PRECISION) / _PRECISION


def render(
    scene: Scene, width: int, height: int, rng: random.Random | None = None
) -> list[Color3]:
    """Render the scene into row-major pixels, anti-aliased by jittered sampling."""
    if width <= 0 or height <= 0:
        raise ValueError("image width and height must be positive")
    rng = rng if rng is not None else random.Random()
    tracer = Tracer(scene, rng)
    log.info("Drawing Scene ...")

    pixels: list[Color3] = []
    for y in range(height):
        for x in range(width):
            color = Color3()
            for _ in range(ANTIALIAS_SAMPLES):
                nx = (x + _jitter(rng)) / width
                ny = (y + _jitter(rng)) / height
                color = color + tracer.trace_pixel(nx, ny) / ANTIALIAS_SAMPLES
            pixels.append(color)
    return pixels


def _byte(component: float) -> int:
    return min(255, max(0, int(component * 255)))


def encode_raw(pixels: Iterable[Color3]) -> bytes:
    """Pixels as interleaved 8-bit red, green and blue bytes."""
    return bytes(_byte(c) for pixel in pixels for c in pixel)


def write_raw(path: str | PathLike[str], pixels: Iterable[Color3]) -> None:
    """Write pixels to a raw RGB file."""
    log.info("Writing to File")
    with open(path, "wb") as handle:
        handle.write(encode_raw(pixels))


def main(argv: Sequence[str] | None = None) -> int:
    """Load a scene script, render it and save the raw image."""
    parser = argparse.ArgumentParser(description="Render a scene script to raw RGB.")
    parser.add_argument("scene", nargs="?", default=DEFAULT_SCENE, help="scene script")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="raw image to write")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    scene = Scene()
    try:
        scene.load(args.scene)
    except OSError as exc:
        log.error("Unable to open file: %s", exc)
        return 1
    scene.background_color = Color3(0.0, 0.0, 0.0)
    scene.ambient_light = Color3(0.0, 0.0, 0.0)

    pixels = render(scene, args.width, args.height, random.Random(args.seed))
    write_raw(args.output, pixels)
    return 0