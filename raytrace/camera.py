"""The scene camera."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from .entity import Entity, log, read_float, read_vector
from .vector import Vector3

_VECTOR_PROPERTIES = {"worldUp": "world_up", "eye": "eye", "lookAt": "look_at"}
_NUMBER_PROPERTIES = {"fov": "fov", "fstop": "fstop"}


@dataclass
class Camera(Entity):
    """Eye position, target, up direction, field of view in degrees and f-stop."""

    eye: Vector3 = Vector3()
    look_at: Vector3 = Vector3()
    world_up: Vector3 = Vector3()
    fov: float = 60.0
    fstop: float = math.inf

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        if name in _VECTOR_PROPERTIES:
            value = read_vector(tokens)
            setattr(self, _VECTOR_PROPERTIES[name], value)
            log.info("Camera::%s was loaded as %s", name, value)
        elif name in _NUMBER_PROPERTIES:
            number = read_float(tokens)
            setattr(self, _NUMBER_PROPERTIES[name], number)
            log.info("Camera::%s was loaded as %g", name, number)
        else:
            super().process_property(tokens, name)