"""World-space shapes and narrow-phase collision tests.

Contact normals point from the second shape towards the first.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Optional, Union

from sandbox3d.bodies import Collider, Contact
from sandbox3d.shapes import Box, Plane, Sphere, Vec3

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AABB:
    min: Vec3
    max: Vec3


@dataclass(frozen=True)
class SphereWS:
    center: Vec3
    radius: float


@dataclass(frozen=True)
class PlaneWS:
    """A bounded plane satisfying ``dot(p, normal) + d == 0``."""

    normal: Vec3
    d: float
    width: float
    height: float
    center: Vec3
    right: Vec3 = field(default_factory=lambda: Vec3(1.0, 0.0, 0.0))
    forward: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))


@dataclass(frozen=True)
class Interval:
    min: float
    max: float


WorldShape = Union[SphereWS, AABB, PlaneWS]


class _Hit(NamedTuple):
    point: Vec3
    normal: Vec3
    penetration: float


def make_world_shape(collider: Collider) -> WorldShape:
    """Place a collider's shape at its body's position."""
    center = collider.body.position if collider.body is not None else Vec3()
    shape = collider.shape
    if isinstance(shape, Sphere):
        return SphereWS(center, shape.radius)
    if isinstance(shape, Box):
        return AABB(center - shape.half_extents, center + shape.half_extents)
    if isinstance(shape, Plane):
        normal = Vec3(0.0, 1.0, 0.0)
        return PlaneWS(normal, -normal.dot(center), shape.width, shape.height, center)
    raise TypeError(f"shape not supported: {type(shape).__name__}")


def interval_overlap(a: Interval, b: Interval) -> bool:
    return not (a.max < b.min or a.min > b.max)


def closest_point(box: AABB, point: Vec3) -> Vec3:
    """The point of ``box`` nearest to ``point``."""
    return Vec3(
        min(max(point.x, box.min.x), box.max.x),
        min(max(point.y, box.min.y), box.max.y),
        min(max(point.z, box.min.z), box.max.z),
    )


def signed_distance(plane: PlaneWS, point: Vec3) -> float:
    return plane.normal.dot(point) + plane.d


def _aabb_aabb(a: AABB, b: AABB) -> Optional[_Hit]:
    for lo_a, hi_a, lo_b, hi_b in (
        (a.min.x, a.max.x, b.min.x, b.max.x),
        (a.min.y, a.max.y, b.min.y, b.max.y),
        (a.min.z, a.max.z, b.min.z, b.max.z),
    ):
        if not interval_overlap(Interval(lo_a, hi_a), Interval(lo_b, hi_b)):
            return None

    dx = min(a.max.x - b.min.x, b.max.x - a.min.x)
    dy = min(a.max.y - b.min.y, b.max.y - a.min.y)
    dz = min(a.max.z - b.min.z, b.max.z - a.min.z)

    if dx < dy and dx < dz:
        normal = Vec3(-1.0, 0.0, 0.0) if a.min.x < b.min.x else Vec3(1.0, 0.0, 0.0)
        penetration = dx
    elif dy < dz:
        normal = Vec3(0.0, -1.0, 0.0) if a.min.y < b.min.y else Vec3(0.0, 1.0, 0.0)
        penetration = dy
    else:
        normal = Vec3(0.0, 0.0, -1.0) if a.min.z < b.min.z else Vec3(0.0, 0.0, 1.0)
        penetration = dz

    low = Vec3(max(a.min.x, b.min.x), max(a.min.y, b.min.y), max(a.min.z, b.min.z))
    high = Vec3(min(a.max.x, b.max.x), min(a.max.y, b.max.y), min(a.max.z, b.max.z))
    return _Hit((low + high) * 0.5, normal, penetration)


def _sphere_sphere(a: SphereWS, b: SphereWS) -> Optional[_Hit]:
    a2b = b.center - a.center
    dist_sq = a2b.length_sq()
    r_sum = a.radius + b.radius
    if dist_sq >= r_sum * r_sum:
        return None
    dist = math.sqrt(dist_sq)
    normal = (-a2b).normalized() if dist > 1e-6 else Vec3(1.0, 0.0, 0.0)
    surface_a = a.center - normal * a.radius
    surface_b = b.center + normal * b.radius
    return _Hit((surface_a + surface_b) * 0.5, normal, r_sum - dist)


def _sphere_aabb(s: SphereWS, box: AABB) -> Optional[_Hit]:
    nearest = closest_point(box, s.center)
    offset = s.center - nearest
    dist_sq = offset.length_sq()
    if dist_sq > s.radius * s.radius:
        return None
    dist = math.sqrt(dist_sq)
    normal = offset / dist if dist > 0.0001 else Vec3(0.0, 1.0, 0.0)
    return _Hit(nearest, normal, s.radius - dist)


def _aabb_sphere(box: AABB, s: SphereWS) -> Optional[_Hit]:
    hit = _sphere_aabb(s, box)
    return None if hit is None else hit._replace(normal=-hit.normal)


def _aabb_plane(box: AABB, plane: PlaneWS) -> Optional[_Hit]:
    center = (box.min + box.max) * 0.5
    extents = (box.max - box.min) * 0.5
    n = plane.normal
    r = extents.x * abs(n.x) + extents.y * abs(n.y) + extents.z * abs(n.z)
    d = n.dot(center) + plane.d
    if abs(d) > r:
        return None

    projected = center - n * d
    local = projected - plane.center
    u = local.dot(plane.right)
    v = local.dot(plane.forward)
    if abs(u) > plane.width * 0.5 + extents.x or abs(v) > plane.height * 0.5 + extents.z:
        return None

    normal = -n if d < 0 else n
    return _Hit(projected, normal, r - abs(d))


def _plane_aabb(plane: PlaneWS, box: AABB) -> Optional[_Hit]:
    hit = _aabb_plane(box, plane)
    return None if hit is None else hit._replace(normal=-hit.normal)


def _sphere_plane(s: SphereWS, plane: PlaneWS) -> Optional[_Hit]:
    if abs(signed_distance(plane, s.center)) > s.radius:
        return None
    half_right = plane.right * (0.5 * plane.width)
    half_forward = plane.forward * (0.5 * plane.height)
    patch = AABB(
        plane.center - half_right - half_forward,
        plane.center + half_right + half_forward,
    )
    return _sphere_aabb(s, patch)


def _plane_sphere(plane: PlaneWS, s: SphereWS) -> Optional[_Hit]:
    hit = _sphere_plane(s, plane)
    return None if hit is None else hit._replace(normal=-hit.normal)


_HANDLERS: dict[tuple[type, type], Callable[[Any, Any], Optional[_Hit]]] = {
    (AABB, AABB): _aabb_aabb,
    (SphereWS, SphereWS): _sphere_sphere,
    (SphereWS, AABB): _sphere_aabb,
    (AABB, SphereWS): _aabb_sphere,
    (AABB, PlaneWS): _aabb_plane,
    (PlaneWS, AABB): _plane_aabb,
    (SphereWS, PlaneWS): _sphere_plane,
    (PlaneWS, SphereWS): _plane_sphere,
}

# Pairs whose contact reports the owners in swapped order.
_SWAPPED = {(PlaneWS, AABB), (PlaneWS, SphereWS)}


def collide(
    a: WorldShape,
    b: WorldShape,
    owner_a: Optional[Collider] = None,
    owner_b: Optional[Collider] = None,
) -> Optional[Contact]:
    """Test two world shapes; return the contact, or None if they do not touch.

    Unsupported shape pairs never collide.
    """
    pair = (type(a), type(b))
    handler = _HANDLERS.get(pair)
    if handler is None:
        _log.debug("unsupported collision: %s vs %s", pair[0].__name__, pair[1].__name__)
        return None
    hit = handler(a, b)
    if hit is None:
        return None
    first, second = (owner_b, owner_a) if pair in _SWAPPED else (owner_a, owner_b)
    return Contact(hit.point, hit.normal, hit.penetration, first, second)