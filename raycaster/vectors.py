"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_FAR = 1e30


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def scale(self, s: float) -> Vec2:
        """Return the vector multiplied by ``s``."""
        return self * s

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec2(0.0, 0.0)
        return self.scale(1.0 / length)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def rotate(self, angle: float) -> Vec2:
        """Rotate counter-clockwise by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def reciprocal(self) -> Vec2:
        """Componentwise absolute reciprocal; zero components map to a huge value."""
        return Vec2(
            _FAR if self.x == 0 else abs(1.0 / self.x),
            _FAR if self.y == 0 else abs(1.0 / self.y),
        )