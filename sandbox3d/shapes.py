"""Three-component vectors and the collision shapes bodies can carry.

Shapes hold only their size; where they sit comes from the rigid body.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: object) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Vec3(self.x * s, self.y * s, self.z * s)

    def __rmul__(self, scalar: object) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Vec3(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero vector")
        return self / length


@dataclass(frozen=True)
class Plane:
    """A flat horizontal rectangle of the given width (x) and height (z)."""

    width: float = 1.0
    height: float = 1.0


@dataclass(frozen=True)
class Sphere:
    radius: float = 1.0


@dataclass(frozen=True)
class Box:
    """An axis-aligned box described by its half extents."""

    half_extents: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class Capsule:
    radius: float
    height: float