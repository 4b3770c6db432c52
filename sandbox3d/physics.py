"""A simple impulse-based physics scene with linear dynamics."""

from __future__ import annotations

import math

from sandbox3d.bodies import Collider, Contact, RigidBody
from sandbox3d.collision import collide, make_world_shape
from sandbox3d.shapes import Vec3

DEFAULT_GRAVITY = Vec3(0.0, -9.8, 0.0)

SLOP = 0.005
BETA = 0.2
BOUNCE_THRESHOLD = 1.0
RESTING_THRESHOLD = 0.01
SOLVER_ITERATIONS = 1


class PhysicsScene:
    """Steps rigid bodies and resolves contacts between their colliders."""

    def __init__(self, gravity: Vec3 = DEFAULT_GRAVITY) -> None:
        self.gravity = gravity
        self._bodies: list[RigidBody] = []
        self._colliders: list[Collider] = []
        self._contacts: list[Contact] = []

    def add_rigid_body(self, body: RigidBody) -> None:
        self._bodies.append(body)

    def add_collider(self, collider: Collider) -> None:
        self._colliders.append(collider)

    def tick(self, delta: float) -> None:
        """Advance the simulation by ``delta`` seconds."""
        if delta <= 0.0:
            raise ValueError("delta must be positive")
        simulated = [b for b in self._bodies if b.simulate_physics]
        for body in simulated:
            body.apply_force(self.gravity)
        for body in simulated:
            body.linear_velocity = body.linear_velocity + body.force / body.mass * delta
            body.force = Vec3()
        self.detect_collisions()
        self.resolve_contacts(delta)
        for body in simulated:
            body.position = body.position + body.linear_velocity * delta
        for body in self._bodies:
            if body.owner is not None:
                body.owner.set_world_position(body.position)

    def detect_collisions(self) -> list[Contact]:
        """Test every pair of colliders and keep the contacts found."""
        placed = [(make_world_shape(c), c) for c in self._colliders]
        contacts = []
        for i, (shape_a, owner_a) in enumerate(placed):
            for shape_b, owner_b in placed[i + 1 :]:
                contact = collide(shape_a, shape_b, owner_a, owner_b)
                if contact is not None:
                    contacts.append(contact)
        self._contacts = contacts
        return list(contacts)

    def resolve_contacts(self, dt: float) -> None:
        """Apply normal and friction impulses for the stored contacts."""
        for _ in range(SOLVER_ITERATIONS):
            for contact in self._contacts:
                self._resolve(contact, dt)

    @staticmethod
    def _resolve(contact: Contact, dt: float) -> None:
        a = contact.a.body if contact.a is not None else None
        b = contact.b.body if contact.b is not None else None

        inv_a = 1.0 / a.mass if a is not None and a.mass > 0.0 else 0.0
        inv_b = 1.0 / b.mass if b is not None and b.mass > 0.0 else 0.0
        inv_sum = inv_a + inv_b
        if inv_sum == 0.0:
            return

        normal = contact.normal
        vel_a = a.linear_velocity if a is not None else Vec3()
        vel_b = b.linear_velocity if b is not None else Vec3()
        rel_vel = vel_a - vel_b
        vn = rel_vel.dot(normal)

        bias = (BETA / dt) * max(contact.penetration - SLOP, 0.0)

        e = min(
            a.material.restitution if a is not None else 0.0,
            b.material.restitution if b is not None else 0.0,
        )
        restitution = e if vn < -BOUNCE_THRESHOLD else 0.0

        if abs(vn) < RESTING_THRESHOLD:
            vn = 0.0
        if vn >= 0.0:
            return

        jn = (-(1.0 + restitution) * vn + bias) / inv_sum
        impulse_n = normal * jn
        if a is not None:
            a.linear_velocity = a.linear_velocity + impulse_n * inv_a
        if b is not None:
            b.linear_velocity = b.linear_velocity - impulse_n * inv_b

        vt = rel_vel - normal * vn
        if vt.length_sq() < 1e-6:
            return
        vt_unit = vt.normalized()
        jt = -rel_vel.dot(vt_unit) / inv_sum

        mu = math.sqrt(
            (a.material.friction if a is not None else 0.0)
            * (b.material.friction if b is not None else 0.0)
        )
        jt_max = mu * jn
        jt = min(max(jt, -jt_max), jt_max)

        impulse_t = vt_unit * jt
        if a is not None:
            a.linear_velocity = a.linear_velocity + impulse_t * inv_a
        if b is not None:
            b.linear_velocity = b.linear_velocity - impulse_t * inv_b

    def contacts(self) -> list[Contact]:
        """Contacts found by the most recent detection pass."""
        return list(self._contacts)