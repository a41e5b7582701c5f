"""Geometric primitives that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from .entity import Entity, Registry, SceneFormatError, log, read_float, read_vector
from .materials import Material, default_materials
from .records import HitRecord
from .vector import DOUBLE_MAX, Color3, Vector3

_MATERIALS = default_materials()

# Material names accepted in a scene script, mapped to registered material types.
MATERIAL_NAMES = {"diffuse": "DiffuseMaterial"}


class Primitive(Entity, ABC):
    """A surface in the scene with a material."""

    type_name: ClassVar[str] = "Primitive"
    material: Material | None = None

    @abstractmethod
    def check_for_hit(self, origin: Vector3, direction: Vector3) -> float:
        """Distance along the ray to the surface, or DOUBLE_MAX if it is missed."""

    @abstractmethod
    def normal_at(self, point: Vector3) -> Vector3:
        """Surface normal at a point on the primitive."""

    def color(self, hit: HitRecord, tracer: Any) -> Color3:
        """Colour of the surface at the hit, as given by its material."""
        if self.material is None:
            raise ValueError(f"{self.type_name} has no material")
        return self.material.color(hit, tracer)

    def _read_material(self, tokens: Iterator[str], name: str) -> None:
        value = next(tokens, None)
        if value is None:
            raise SceneFormatError(f"unexpected end of scene while reading {name}")
        material_type = MATERIAL_NAMES.get(value)
        if material_type is None:
            log.warning("%s is not a known material", value)
            return
        self.material = _MATERIALS.create(material_type)


@dataclass
class Plane(Primitive):
    """An infinite plane: the points p with p . normal + d_value == 0."""

    type_name: ClassVar[str] = "Plane"

    d_value: float = 0.0
    normal: Vector3 = Vector3(0.0, 1.0, 0.0)
    material: Material | None = None

    def check_for_hit(self, origin: Vector3, direction: Vector3) -> float:
        vd = direction.dot(self.normal)
        if vd >= 0:
            return DOUBLE_MAX
        vo = -(origin.dot(self.normal) + self.d_value)
        distance = vo / vd
        return DOUBLE_MAX if distance < 0 else distance

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        if name == "dValue":
            self.d_value = read_float(tokens)
            log.info("%s was loaded as %g", name, self.d_value)
        elif name == "normal":
            self.normal = read_vector(tokens)
            log.info("%s was loaded as %s", name, self.normal)
        elif name == "material":
            self._read_material(tokens, name)
        else:
            super().process_property(tokens, name)


@dataclass
class Sphere(Primitive):
    """A sphere given by its centre and radius."""

    type_name: ClassVar[str] = "Sphere"

    radius: float = 1.0
    position: Vector3 = Vector3()
    material: Material | None = None

    def check_for_hit(self, origin: Vector3, direction: Vector3) -> float:
        """Nearer root of the ray-sphere equation; direction must be normalised."""
        offset = origin - self.position
        b = 2 * direction.dot(offset)
        c = offset.dot(offset) - self.radius**2
        discriminant = b**2 - 4 * c
        if discriminant < 0.0:
            return DOUBLE_MAX
        return (-b - math.sqrt(discriminant)) / 2

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self.position).normalized()

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        if name == "radius":
            self.radius = read_float(tokens)
            log.info("Sphere::%s was loaded as %g", name, self.radius)
        elif name == "position":
            self.position = read_vector(tokens)
            log.info("Sphere::%s was loaded as %s", name, self.position)
        elif name == "material":
            self._read_material(tokens, name)
        else:
            super().process_property(tokens, name)


def default_primitives() -> Registry[Primitive]:
    """A registry holding every built-in primitive type."""
    registry: Registry[Primitive] = Registry()
    registry.register(Sphere.type_name, Sphere)
    registry.register(Plane.type_name, Plane)
    return registry