import math
import random
from dataclasses import dataclass, field

import pytest

from raytrace.camera import Camera
from raytrace.lights import DirectionalLight
from raytrace.materials import DiffuseMaterial, Material
from raytrace.primitives import Plane, Sphere
from raytrace.records import HitRecord
from raytrace.tracer import Tracer
from raytrace.vector import Color3, Vector3


class FixedMaterial(Material):
    def __init__(self, value):
        self.value = value
        self.hits = []

    def color(self, hit, tracer):
        self.hits.append(hit)
        return self.value


@dataclass
class StubScene:
    objects: list = field(default_factory=list)
    lights: list = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    background_color: Color3 = Color3(0.0, 0.0, 0.0)
    ambient_light: Color3 = Color3(0.0, 0.0, 0.0)


BACKGROUND = Color3(0.05, 0.1, 0.15)
RED = Color3(0.9, 0.1, 0.1)
BLUE = Color3(0.1, 0.1, 0.9)


def make_tracer(objects=(), **kwargs):
    scene = StubScene(objects=list(objects), background_color=BACKGROUND, **kwargs)
    return Tracer(scene, random.Random(0))


def test_trace_empty_scene_returns_background():
    tracer = make_tracer()
    assert tracer.trace(Vector3(), Vector3(0.0, 0.0, 1.0)) == BACKGROUND


def test_trace_hit_builds_record():
    material = FixedMaterial(RED)
    sphere = Sphere(radius=1.0, position=Vector3(0.0, 0.0, 5.0), material=material)
    tracer = make_tracer([sphere])
    eye = Vector3(0.0, 0.0, 0.0)
    view = Vector3(0.0, 0.0, 1.0)
    assert tracer.trace(eye, view) == RED
    (hit,) = material.hits
    assert hit.primitive is sphere
    assert hit.ray_origin == eye
    assert hit.ray_direction == view
    assert hit.recurse_depth == 1
    assert (hit.hit_point - sphere.position).length() == pytest.approx(sphere.radius)
    assert hit.normal == sphere.normal_at(hit.hit_point)


def test_trace_picks_closest_object():
    far = Sphere(radius=1.0, position=Vector3(0.0, 0.0, 10.0), material=FixedMaterial(BLUE))
    near = Sphere(radius=1.0, position=Vector3(0.0, 0.0, 4.0), material=FixedMaterial(RED))
    assert make_tracer([far, near]).trace(Vector3(), Vector3(0.0, 0.0, 1.0)) == RED
    assert make_tracer([near, far]).trace(Vector3(), Vector3(0.0, 0.0, 1.0)) == RED


def test_shadow_trace_blocked_and_clear():
    sphere = Sphere(radius=1.0, position=Vector3(0.0, 0.0, 5.0))
    tracer = make_tracer([sphere])
    direction = Vector3(0.0, 0.0, 1.0)
    assert tracer.shadow_trace(Vector3(), direction, 100.0) is True
    assert tracer.shadow_trace(Vector3(), direction, 2.0) is False
    assert tracer.shadow_trace(Vector3(), Vector3(0.0, 1.0, 0.0), 100.0) is False


def test_shadow_trace_empty_scene():
    assert make_tracer().shadow_trace(Vector3(), Vector3(1.0, 0.0, 0.0), 1e9) is False


def test_shadow_trace_ignores_hit_at_origin():
    plane = Plane(d_value=0.0, normal=Vector3(0.0, 1.0, 0.0))
    tracer = make_tracer([plane])
    assert tracer.shadow_trace(Vector3(1.0, 0.0, 1.0), Vector3(0.0, -1.0, 0.0), 10.0) is False


def test_reflection_trace_hits_object():
    material = FixedMaterial(BLUE)
    sphere = Sphere(radius=1.0, position=Vector3(0.0, 5.0, 0.0), material=material)
    tracer = make_tracer([sphere])
    start = HitRecord(hit_point=Vector3(), recurse_depth=3)
    direction = Vector3(0.0, 1.0, 0.0)
    assert tracer.reflection_trace(start, direction) == BLUE
    (hit,) = material.hits
    assert hit.recurse_depth == 3
    assert hit.ray_origin == start.hit_point
    assert hit.ray_direction == direction
    assert (hit.hit_point - sphere.position).length() == pytest.approx(sphere.radius)


def test_reflection_trace_ignores_surface_at_start():
    plane = Plane(d_value=0.0, normal=Vector3(0.0, 1.0, 0.0), material=FixedMaterial(RED))
    tracer = make_tracer([plane])
    start = HitRecord(hit_point=Vector3(2.0, 0.0, 2.0))
    assert tracer.reflection_trace(start, Vector3(0.0, -1.0, 0.0)) == BACKGROUND


def looking_camera():
    return Camera(
        eye=Vector3(0.0, 0.0, -5.0),
        look_at=Vector3(0.0, 0.0, 0.0),
        world_up=Vector3(0.0, 1.0, 0.0),
        fov=60.0,
        fstop=math.inf,
    )


def test_trace_pixel_centre_hits_sphere():
    sphere = Sphere(radius=1.0, position=Vector3(), material=FixedMaterial(RED))
    tracer = make_tracer([sphere], camera=looking_camera())
    assert tracer.trace_pixel(0.5, 0.5) == RED


def test_trace_pixel_corner_misses_sphere():
    sphere = Sphere(radius=1.0, position=Vector3(), material=FixedMaterial(RED))
    tracer = make_tracer([sphere], camera=looking_camera())
    assert tracer.trace_pixel(0.0, 0.0) == BACKGROUND


def test_trace_pixel_clamps_colour():
    sphere = Sphere(radius=1.0, position=Vector3(), material=FixedMaterial(Color3(2.0, -1.0, 0.5)))
    tracer = make_tracer([sphere], camera=looking_camera())
    assert tracer.trace_pixel(0.5, 0.5) == Color3(1.0, 0.0, 0.5)


def test_trace_pixel_with_diffuse_material_and_light():
    sphere = Sphere(radius=1.0, position=Vector3(), material=DiffuseMaterial())
    light = DirectionalLight(direction=Vector3(0.0, 0.0, 1.0), color=Color3(1.0, 1.0, 1.0), intensity=1.0)
    tracer = make_tracer([sphere], camera=looking_camera(), lights=[light])
    colour = tracer.trace_pixel(0.5, 0.5)
    assert colour.x == pytest.approx(1.0)
    assert colour.y == pytest.approx(1.0)
    assert colour.z == pytest.approx(1.0)


def test_trace_pixel_is_reproducible_with_seeded_rng():
    sphere = Sphere(radius=1.0, position=Vector3(), material=FixedMaterial(RED))
    camera = looking_camera()
    camera.fstop = 2.0
    first = Tracer(StubScene(objects=[sphere], camera=camera), random.Random(7))
    second = Tracer(StubScene(objects=[sphere], camera=camera), random.Random(7))
    results_a = [first.trace_pixel(x / 4, 0.5) for x in range(5)]
    results_b = [second.trace_pixel(x / 4, 0.5) for x in range(5)]
    assert results_a == results_b