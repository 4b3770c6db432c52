from sandbox3d.bodies import Collider, Contact, PhysicalMaterial, RigidBody
from sandbox3d.shapes import Sphere, Vec3


def test_material_defaults():
    m = PhysicalMaterial()
    assert (m.restitution, m.friction) == (0.2, 0.05)


def test_rigid_body_defaults():
    body = RigidBody(Vec3(1.0, 2.0, 3.0))
    assert body.position == Vec3(1.0, 2.0, 3.0)
    assert body.mass == 1.0
    assert body.simulate_physics is True
    assert body.linear_velocity == Vec3()
    assert body.force == Vec3()


def test_apply_force_replaces_previous_force():
    body = RigidBody()
    body.apply_force(Vec3(0.0, -9.8, 0.0))
    body.apply_force(Vec3(1.0, 0.0, 0.0))
    assert body.force == Vec3(1.0, 0.0, 0.0)


def test_materials_are_not_shared():
    b1 = RigidBody()
    b2 = RigidBody()
    b1.material.friction = 1.0
    assert b2.material.friction == 0.05


def test_collider_links_body_and_shape():
    body = RigidBody()
    collider = Collider(Sphere(2.0), body, owner="ball")
    assert collider.body is body
    assert collider.shape.radius == 2.0
    assert collider.owner == "ball"


def test_contact_fields():
    a = Collider(Sphere())
    b = Collider(Sphere())
    c = Contact(Vec3(), Vec3(0.0, 1.0, 0.0), 0.25, a, b)
    assert c.a is a and c.b is b
    assert c.normal == Vec3(0.0, 1.0, 0.0)
    assert c.penetration == 0.25