"""Two-dimensional vector maths used by the game's entities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector."""
        size = self.length()
        return self / size if size != 0 else Vec2(0.0, 0.0)


def get_direction(origin: Vec2, target: Vec2) -> Vec2:
    """Unit vector pointing from ``origin`` to ``target`` (zero if they coincide)."""
    return (target - origin).normalized()


def rotate_vector(vector: Vec2, angle_deg: float) -> Vec2:
    """Rotate ``vector`` by ``angle_deg`` degrees (clockwise in screen space)."""
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return Vec2(
        vector.x * cos_a - vector.y * sin_a,
        vector.x * sin_a + vector.y * cos_a,
    )


def distance(a: Vec2, b: Vec2) -> float:
    """Distance between two points."""
    return (a - b).length()