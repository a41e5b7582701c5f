"""Surface materials that turn a ray hit into a colour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, ClassVar

from .entity import Entity, Registry, SceneFormatError, log
from .records import HitRecord
from .vector import Color3

BLACK = Color3(0.0, 0.0, 0.0)


class Material(Entity, ABC):
    """Something that decides the colour of a surface at a hit point."""

    type_name: ClassVar[str] = "Material"

    @abstractmethod
    def color(self, hit: HitRecord, tracer: Any) -> Color3:
        """Colour seen at the hit, using the tracer's scene for lights."""


class DiffuseMaterial(Material):
    """Lambertian shading from every light in the scene plus ambient light."""

    type_name: ClassVar[str] = "DiffuseMaterial"

    def color(self, hit: HitRecord, tracer: Any) -> Color3:
        total = self.diffuse(hit, tracer) + tracer.scene.ambient_light
        return total.clamped(0.0, 1.0)

    def diffuse(self, hit: HitRecord, tracer: Any) -> Color3:
        """Sum of the clamped contributions of the lights facing the hit."""
        result = BLACK
        for light in tracer.scene.lights:
            info = light.light_info(hit, tracer)
            facing = hit.normal.dot(info.incident)
            if facing > 0:
                contribution = info.color * info.intensity * facing * info.occlusion
                result = result + contribution.clamped(0.0, 1.0)
        return result.clamped(0.0, 1.0)

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        value = next(tokens, None)
        if value is None:
            raise SceneFormatError(f"unexpected end of scene while reading {name}")
        log.info("%s was loaded as %s", name, value)


class SpecularMaterial(DiffuseMaterial):
    """Diffuse shading with a specular term added on top."""

    type_name: ClassVar[str] = "SpecularMaterial"

    def __init__(self, highlight: Color3 = BLACK) -> None:
        self.highlight = highlight

    def color(self, hit: HitRecord, tracer: Any) -> Color3:
        return self.specular(hit) + super().color(hit, tracer)

    def specular(self, hit: HitRecord) -> Color3:
        """Specular highlight at the hit; black unless a highlight is given."""
        return self.highlight.clamped(0.0, 1.0)

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        super().process_property(tokens, name)


def default_materials() -> Registry[Material]:
    """A registry holding every built-in material type."""
    registry: Registry[Material] = Registry()
    registry.register(DiffuseMaterial.type_name, DiffuseMaterial)
    registry.register(SpecularMaterial.type_name, SpecularMaterial)
    return registry