import math

import pytest

from sandbox3d.bodies import Collider, RigidBody
from sandbox3d.collision import (
    AABB,
    Interval,
    PlaneWS,
    SphereWS,
    closest_point,
    collide,
    interval_overlap,
    make_world_shape,
    signed_distance,
)
from sandbox3d.shapes import Box, Capsule, Plane, Sphere, Vec3


def box_at(center, half=1.0):
    he = Vec3(half, half, half)
    return AABB(center - he, center + he)


def ground(y=0.0, size=10.0):
    collider = Collider(Plane(size, size), RigidBody(Vec3(0.0, y, 0.0)))
    return make_world_shape(collider)


def test_interval_overlap():
    assert interval_overlap(Interval(0.0, 1.0), Interval(1.0, 2.0))
    assert interval_overlap(Interval(0.0, 3.0), Interval(1.0, 2.0))
    assert not interval_overlap(Interval(0.0, 1.0), Interval(1.5, 2.0))
    assert not interval_overlap(Interval(1.5, 2.0), Interval(0.0, 1.0))


def test_closest_point_inside_is_identity():
    box = box_at(Vec3())
    p = Vec3(0.25, -0.5, 0.75)
    assert closest_point(box, p) == p


def test_closest_point_outside_is_on_surface():
    box = box_at(Vec3())
    q = closest_point(box, Vec3(5.0, 0.5, -7.0))
    assert q == Vec3(box.max.x, 0.5, box.min.z)


def test_make_world_shape_box_uses_body_position():
    he = Vec3(1.0, 2.0, 3.0)
    pos = Vec3(4.0, 5.0, 6.0)
    shape = make_world_shape(Collider(Box(he), RigidBody(pos)))
    assert shape == AABB(pos - he, pos + he)


def test_make_world_shape_without_body_sits_at_origin():
    shape = make_world_shape(Collider(Sphere(2.0)))
    assert shape == SphereWS(Vec3(), 2.0)


def test_make_world_shape_plane():
    shape = ground(y=-4.0, size=15.0)
    assert isinstance(shape, PlaneWS)
    assert shape.normal == Vec3(0.0, 1.0, 0.0)
    assert signed_distance(shape, shape.center) == 0.0
    assert signed_distance(shape, Vec3(0.0, 1.0, 0.0)) > 0.0
    assert signed_distance(shape, Vec3(0.0, -10.0, 0.0)) < 0.0


def test_make_world_shape_unsupported_shape():
    with pytest.raises(TypeError):
        make_world_shape(Collider(Capsule(1.0, 2.0)))


def test_separated_boxes_do_not_collide():
    assert collide(box_at(Vec3(-2.0, 0.0, 0.0)), box_at(Vec3(2.0, 0.0, 0.0))) is None


def test_overlapping_boxes():
    a, b = box_at(Vec3()), box_at(Vec3(1.5, 0.0, 0.0))
    contact = collide(a, b, "a", "b")
    assert contact.normal == Vec3(-1.0, 0.0, 0.0)
    assert contact.penetration == pytest.approx(0.5)
    assert (contact.a, contact.b) == ("a", "b")
    reverse = collide(b, a)
    assert reverse.normal == -contact.normal
    assert reverse.point == contact.point


def test_sphere_sphere_normal_points_from_b_to_a():
    a = SphereWS(Vec3(), 1.0)
    b = SphereWS(Vec3(1.0, 1.0, 0.0), 1.0)
    contact = collide(a, b)
    assert math.isclose(contact.normal.length(), 1.0)
    assert contact.normal.dot(a.center - b.center) > 0.0
    dist = (b.center - a.center).length()
    assert contact.penetration == pytest.approx(a.radius + b.radius - dist)


def test_touching_spheres_do_not_collide():
    assert collide(SphereWS(Vec3(), 1.0), SphereWS(Vec3(2.0, 0.0, 0.0), 1.0)) is None


def test_coincident_spheres_fall_back_to_x_axis():
    contact = collide(SphereWS(Vec3(), 1.0), SphereWS(Vec3(), 1.0))
    assert contact.normal == Vec3(1.0, 0.0, 0.0)


def test_sphere_inside_box_uses_up_normal():
    contact = collide(SphereWS(Vec3(), 0.5), box_at(Vec3()))
    assert contact.normal == Vec3(0.0, 1.0, 0.0)
    assert contact.penetration == pytest.approx(0.5)


def test_box_sphere_negates_normal_without_swapping_owners():
    s = SphereWS(Vec3(1.5, 0.0, 0.0), 1.0)
    box = box_at(Vec3())
    forward = collide(s, box, "s", "box")
    backward = collide(box, s, "box", "s")
    assert backward.normal == -forward.normal
    assert (backward.a, backward.b) == ("box", "s")
    assert forward.normal.dot(s.center - forward.point) > 0.0


def test_sphere_resting_on_plane():
    plane = ground()
    s = SphereWS(Vec3(0.0, 0.5, 0.0), 1.0)
    contact = collide(s, plane, "s", "p")
    assert contact.normal == Vec3(0.0, 1.0, 0.0)
    assert (contact.a, contact.b) == ("s", "p")
    assert contact.penetration == pytest.approx(s.radius - s.center.y)


def test_plane_sphere_swaps_owners_and_negates_normal():
    plane = ground()
    s = SphereWS(Vec3(0.0, 0.5, 0.0), 1.0)
    forward = collide(s, plane, "s", "p")
    backward = collide(plane, s, "p", "s")
    assert backward.normal == -forward.normal
    assert (backward.a, backward.b) == ("s", "p")


def test_sphere_beside_plane_misses():
    plane = ground(size=2.0)
    assert collide(SphereWS(Vec3(5.0, 0.0, 0.0), 1.0), plane) is None


def test_box_below_plane_gets_downward_normal():
    plane = ground()
    box = box_at(Vec3(0.0, -0.5, 0.0))
    contact = collide(box, plane)
    assert contact.normal == Vec3(0.0, -1.0, 0.0)
    assert contact.penetration == pytest.approx(0.5)
    flipped = collide(plane, box, "p", "box")
    assert flipped.normal == -contact.normal
    assert (flipped.a, flipped.b) == ("box", "p")


def test_box_far_from_plane_misses():
    assert collide(box_at(Vec3(0.0, 5.0, 0.0)), ground()) is None


def test_unsupported_pair_never_collides():
    assert collide(ground(), ground()) is None