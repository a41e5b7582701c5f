"""A scene: primitives, lights and a camera, loaded from a script."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .camera import Camera
from .entity import Entity, Registry, SceneFormatError
from .lights import Light, default_lights
from .primitives import Primitive, default_primitives
from .vector import Color3

PROPERTIES_START = "{"
CAMERA_TYPE = "Camera"


@dataclass
class Scene:
    """Everything that is rendered, plus background and ambient colours."""

    objects: list[Primitive] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    background_color: Color3 = Color3()
    ambient_light: Color3 = Color3()
    primitive_types: Registry[Primitive] = field(
        default_factory=default_primitives, repr=False
    )
    light_types: Registry[Light] = field(default_factory=default_lights, repr=False)

    def load(self, path: str | PathLike[str]) -> None:
        """Read a scene script from a file and add what it describes."""
        with open(path, encoding="utf-8") as handle:
            self.loads(handle.read())

    def loads(self, text: str) -> None:
        """Read a scene script held in a string."""
        self.load_tokens(text.split())

    def load_tokens(self, tokens: Iterable[str]) -> None:
        """Read a scene script given as whitespace-separated tokens.

        A type name starts a new entity; a following "{" loads its properties.
        Unknown type names are skipped and leave the current entity unchanged.
        """
        stream = iter(tokens)
        entity: Entity | None = None
        for token in stream:
            if token == PROPERTIES_START:
                if entity is None:
                    raise SceneFormatError("properties given before any entity type")
                entity.load_properties(stream)
            elif token in self.primitive_types:
                primitive = self.primitive_types.create(token)
                self.objects.append(primitive)
                entity = primitive
            elif token in self.light_types:
                light = self.light_types.create(token)
                self.lights.append(light)
                entity = light
            elif token == CAMERA_TYPE:
                entity = self.camera

    def type_names(self) -> list[str]:
        """Type names of every primitive, then of every light, in load order."""
        return [obj.type_name for obj in self.objects] + [
            light.type_name for light in self.lights
        ]