"""Rigid bodies, colliders and the contacts found between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union

from sandbox3d.shapes import Box, Capsule, Plane, Sphere, Vec3

ShapeType = Union[Plane, Sphere, Box, Capsule]


class _PositionOwner(Protocol):
    def set_world_position(self, position: Vec3) -> None: ...


@dataclass
class PhysicalMaterial:
    restitution: float = 0.2
    friction: float = 0.05


@dataclass(eq=False)
class RigidBody:
    """A point mass with linear motion only."""

    position: Vec3 = field(default_factory=Vec3)
    owner: Optional[_PositionOwner] = None
    mass: float = 1.0
    linear_velocity: Vec3 = field(default_factory=Vec3)
    force: Vec3 = field(default_factory=Vec3)
    simulate_physics: bool = True
    material: PhysicalMaterial = field(default_factory=PhysicalMaterial)

    def apply_force(self, force: Vec3) -> None:
        """Set the force acting on the body for this step."""
        self.force = force


@dataclass(eq=False)
class Collider:
    """A shape attached to an optional rigid body that places it."""

    shape: ShapeType
    body: Optional[RigidBody] = None
    owner: Any = None


@dataclass
class Contact:
    """A contact point; the normal points from ``b`` towards ``a``."""

    point: Vec3
    normal: Vec3
    penetration: float
    a: Optional[Collider] = None
    b: Optional[Collider] = None