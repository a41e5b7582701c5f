"""Light sources and the shading information they give at a hit point."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from .entity import Entity, Registry, log, read_float, read_vector
from .records import HitRecord, LightRecord
from .vector import Color3, Vector3

POINT_LIGHT_SAMPLES = 4
SAMPLE_DISK_RADIUS = 0.30
_PRECISION = 10


class Light(Entity, ABC):
    """A source of light in the scene."""

    type_name: ClassVar[str] = "Light"

    @abstractmethod
    def light_info(self, hit: HitRecord, tracer: Any) -> LightRecord:
        """Direction, colour, intensity and visibility of this light at the hit."""


def _load_light_property(light: Any, tokens: Iterator[str], name: str) -> bool:
    """Read the properties shared by the built-in lights; False if unknown."""
    if name == "intensity":
        light.intensity = read_float(tokens)
        log.info("%s::%s was loaded as %g", light.type_name, name, light.intensity)
    elif name == "color":
        light.color = read_vector(tokens)
        log.info("%s::%s was loaded as %s", light.type_name, name, light.color)
    else:
        return False
    return True


@dataclass
class PointLight(Light):
    """A light at a position, sampled over a small disk for soft shadows."""

    type_name: ClassVar[str] = "PointLight"

    position: Vector3 = Vector3()
    color: Color3 = Color3(1.0, 1.0, 1.0)
    intensity: float = 1.0

    def _jitter(self, rng: Any) -> float:
        return (rng.randrange(_PRECISION * 2) - _PRECISION) / _PRECISION

    def light_info(self, hit: HitRecord, tracer: Any) -> LightRecord:
        incident = (self.position - hit.hit_point).normalized()
        right = incident.cross(Vector3(0.0, 1.0, 0.0)).normalized()
        up = right.cross(incident).normalized()

        occluded = 0
        for _ in range(POINT_LIGHT_SAMPLES):
            sample = self.position
            sample = sample + right * self._jitter(tracer.rng) * SAMPLE_DISK_RADIUS
            sample = sample + up * self._jitter(tracer.rng) * SAMPLE_DISK_RADIUS
            to_sample = sample - hit.hit_point
            distance = to_sample.length()
            if tracer.shadow_trace(hit.hit_point, to_sample.normalized(), distance):
                occluded += 1

        return LightRecord(
            incident=incident,
            color=self.color,
            intensity=self.intensity,
            occlusion=1.0 - occluded / POINT_LIGHT_SAMPLES,
        )

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        if name == "position":
            self.position = read_vector(tokens)
            log.info("PointLight::%s was loaded as %s", name, self.position)
        elif not _load_light_property(self, tokens, name):
            super().process_property(tokens, name)


@dataclass
class DirectionalLight(Light):
    """A light shining from infinitely far away along one direction."""

    type_name: ClassVar[str] = "DirectionalLight"

    direction: Vector3 = Vector3(0.0, -1.0, 0.0)
    color: Color3 = Color3(1.0, 1.0, 1.0)
    intensity: float = 1.0

    def light_info(self, hit: HitRecord, tracer: Any) -> LightRecord:
        toward_light = self.direction * -1
        distance = toward_light.length()
        incident = toward_light.normalized()
        occluded = bool(tracer.shadow_trace(hit.hit_point, incident, distance))
        return LightRecord(
            incident=incident,
            color=self.color,
            intensity=self.intensity,
            occluded=occluded,
            occlusion=0.0 if occluded else 1.0,
        )

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        if name == "direction":
            self.direction = read_vector(tokens)
            log.info("DirectionalLight::%s was loaded as %s", name, self.direction)
        elif not _load_light_property(self, tokens, name):
            super().process_property(tokens, name)


def default_lights() -> Registry[Light]:
    """A registry holding every built-in light type."""
    registry: Registry[Light] = Registry()
    registry.register(PointLight.type_name, PointLight)
    registry.register(DirectionalLight.type_name, DirectionalLight)
    return registry