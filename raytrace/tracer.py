"""Casting rays into a scene."""

from __future__ import annotations

import math
import random
from typing import Any

from .records import HitRecord
from .vector import DOUBLE_MAX, PI, Color3, Vector3

PIXEL_SAMPLES = 1
REFLECTION_BIAS = 0.003
SHADOW_BIAS = 0.001


class Tracer:
    """Traces rays through a scene, using an RNG for lens jitter and soft shadows."""

    def __init__(self, scene: Any, rng: random.Random | None = None) -> None:
        self.scene = scene
        self.rng = rng if rng is not None else random.Random()

    def _closest(self, origin: Vector3, direction: Vector3, bias: float | None):
        closest = None
        closest_distance = DOUBLE_MAX
        for obj in self.scene.objects:
            distance = obj.check_for_hit(origin, direction)
            if distance < closest_distance and (bias is None or distance > bias):
                closest = obj
                closest_distance = distance
        return closest, closest_distance

    def trace_pixel(self, nx: float, ny: float) -> Color3:
        """Colour seen through normalised image coordinates (0..1, y downwards)."""
        camera = self.scene.camera
        look = camera.look_at - camera.eye
        right = camera.world_up.cross(look).normalized()
        up = look.cross(right).normalized()
        lens_radius = look.length() / (2 * camera.fstop)

        total = Color3()
        for _ in range(PIXEL_SAMPLES):
            eye = camera.eye
            eye = eye + right * lens_radius * (self.rng.random() * 2.0 - 1.0)
            eye = eye + up * lens_radius * (self.rng.random() * 2.0 - 1.0)

            distance = (camera.look_at - eye).length()
            scale = 2 * distance * math.tan(camera.fov * PI / 180.0 / 2.0)
            target = camera.look_at + right * scale * (nx - 0.5) + up * scale * (0.5 - ny)
            view = (target - eye).normalized()

            sample = self.trace(eye, view) / PIXEL_SAMPLES
            total = total + sample.clamped(0.0, 1.0)
        return total.clamped(0.0, 1.0)

    def trace(self, eye: Vector3, view: Vector3) -> Color3:
        """Colour of the nearest surface along the ray, or the background."""
        closest, distance = self._closest(eye, view, None)
        if closest is None:
            return self.scene.background_color
        point = eye + view * distance
        hit = HitRecord(
            hit_point=point,
            normal=closest.normal_at(point),
            ray_origin=eye,
            ray_direction=view,
            recurse_depth=1,
            primitive=closest,
        )
        return closest.color(hit, self)

    def reflection_trace(self, hit: HitRecord, reflection: Vector3) -> Color3:
        """Colour seen from a hit point along a reflected direction."""
        closest, distance = self._closest(hit.hit_point, reflection, REFLECTION_BIAS)
        if closest is None:
            return self.scene.background_color
        new_hit = HitRecord(
            hit_point=hit.hit_point + reflection * distance,
            normal=closest.normal_at(hit.hit_point),
            ray_origin=hit.hit_point,
            ray_direction=reflection,
            recurse_depth=hit.recurse_depth,
            primitive=closest,
        )
        return closest.color(new_hit, self)

    def shadow_trace(self, origin: Vector3, direction: Vector3, max_dist: float) -> bool:
        """True if any surface lies along the ray between the bias and max_dist."""
        return any(
            SHADOW_BIAS < obj.check_for_hit(origin, direction) < max_dist
            for obj in self.scene.objects
        )