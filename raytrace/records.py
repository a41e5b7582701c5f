"""Records passed between the tracer, primitives, materials and lights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .vector import Color3, Vector3


@dataclass
class HitRecord:
    """Where a ray struck a primitive."""

    hit_point: Vector3 = Vector3()
    normal: Vector3 = Vector3()
    ray_origin: Vector3 = Vector3()
    ray_direction: Vector3 = Vector3()
    recurse_depth: int = 1
    primitive: Any = None


@dataclass
class LightRecord:
    """What a light contributes at a hit point."""

    incident: Vector3 = Vector3()
    color: Color3 = Color3()
    intensity: float = 0.0
    occluded: bool = False
    occlusion: float = 1.0