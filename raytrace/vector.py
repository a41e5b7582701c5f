"""Three-component vectors used for positions, directions and colours."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass

PI = 3.14159265
DOUBLE_MAX = sys.float_info.max


def _g(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector; also used as an RGB colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector gives NaN components."""
        length = self.length()
        if length == 0.0:
            return Vector3(math.nan, math.nan, math.nan)
        return self * (1.0 / length)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def clamped(self, low: float, high: float) -> Vector3:
        """Each component limited to the range [low, high]."""
        return Vector3(
            min(high, max(low, self.x)),
            min(high, max(low, self.y)),
            min(high, max(low, self.z)),
        )

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vector3:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector3:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        if scale == 0:
            return self * math.copysign(math.inf, scale)
        return self * (1.0 / scale)

    def __neg__(self) -> Vector3:
        return self * -1

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"<{_g(self.x)}, {_g(self.y)}, {_g(self.z)}>"


Color3 = Vector3