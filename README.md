# sandbox3d

Small, dependency-free building blocks for experimenting with a 3D engine in Python.

## Modules

- `sandbox3d.matrix`: `Matrix(rows, cols, values=None)`, a fixed-size matrix stored column
  by column, with flat indexing, element-wise `+` and `==`. `Matrix.col(i)` returns a
  `ColView`, a writable view of one column: writes through it (item assignment or
  `ColView.assign`) change the matrix. `view_to_vector` copies a column into an `n x 1`
  matrix. Out-of-range indices raise `IndexError`.
- `sandbox3d.entity`: `Entity`, a 32-bit id packing a 24-bit index and an 8-bit version.
  `Entity.create(index, version)`, `index()`, `version()`, `is_null()` and `raw_id()`;
  the default entity is the null id. Entities compare and order by their raw id.
- `sandbox3d.ecs`: `ECS` hands out actors from a fixed pool (`ActorManager`, lowest id first)
  and keeps each registered component type in a sparse set (`ComponentStorage`) that stays
  densely packed by swapping the last component into a removed slot.
  `component_views(type)` returns parallel lists of actor ids and components. Invalid
  operations (pool exhausted, inactive actor, unregistered or duplicate type, duplicate
  component) raise `ECSError`.
- `sandbox3d.delegate`: `Delegate.connect(func, kind)` with `CallbackKind.PERSISTENT` or
  `CallbackKind.ONE_SHOT` returns a `DelegateHandle`; closing the handle (or leaving its
  `with` block) disconnects the callback. `broadcast(*args, **kwargs)` calls callbacks in
  connection order and drops one-shot ones after their call. `len(delegate)` counts live
  callbacks.
- `sandbox3d.shapes`: the immutable `Vec3` and the shapes `Plane`, `Sphere`, `Box` (half
  extents) and `Capsule`.
- `sandbox3d.bodies`: `RigidBody`, `PhysicalMaterial`, `Collider` and `Contact`.
- `sandbox3d.collision`: `make_world_shape` places a collider's shape at its body's position
  (`SphereWS`, `AABB`, `PlaneWS`; capsules raise `TypeError`). `collide(a, b, owner_a,
  owner_b)` returns a `Contact` or `None` for sphere/sphere, box/box, sphere/box and
  box or sphere against a plane; other pairs never collide. Contact normals point from the
  second shape towards the first.
- `sandbox3d.physics`: `PhysicsScene(gravity)` whose `tick(delta)` applies gravity,
  integrates velocity, detects contacts, resolves them with normal and friction impulses
  (with positional bias and restitution) and integrates positions. Only bodies with
  `simulate_physics` set move; a body's `owner`, if set, receives `set_world_position`.
- `sandbox3d.mesh`: procedural `CubeMesh`, `PlaneMesh` and `SphereMesh` built on
  `StaticMesh` and `StaticMeshData`, with interleaved `StaticMeshVertex` data, 16-bit
  indices, a `Topology`, and `static_mesh_input_layout()` describing the vertex layout.
- `sandbox3d.buffers`: `BufferUsage` flags, `BufferDesc`, and `heap_type` / `initial_state`
  giving the `HeapType` and `ResourceState` a buffer with those flags starts with.
- `sandbox3d.descriptors`: `DescriptorHeapAllocator` (a linear slot allocator),
  `ShaderParameters` that lays out a stage's SRVs, CBVs and UAVs into a descriptor table,
  and `prepare_root_signature(vertex, pixel)` which places both tables back to back in a
  `RootSignatureLayout`.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## A short tour

```python
from sandbox3d.ecs import ECS
from sandbox3d.delegate import Delegate, CallbackKind

ecs = ECS(100)
ecs.register_component(dict)
actor = ecs.create_actor()
ecs.add_component(actor, dict, {"x": 1.0})
actors, components = ecs.component_views(dict)   # [0], [{"x": 1.0}]

on_hit = Delegate()
handle = on_hit.connect(print, CallbackKind.ONE_SHOT)
on_hit.broadcast(42)   # prints 42, then the callback is dropped
```

```python
from sandbox3d.physics import PhysicsScene
from sandbox3d.bodies import RigidBody, Collider
from sandbox3d.shapes import Vec3, Sphere

scene = PhysicsScene(Vec3(0.0, -9.8, 0.0))
body = RigidBody(position=Vec3(0.0, 5.0, 0.0))
scene.add_rigid_body(body)
scene.add_collider(Collider(shape=Sphere(1.0), body=body))
scene.tick(0.016)
```

## What it does not do

The package draws nothing. It opens no window, talks to no graphics device, creates no GPU
buffers or pipelines, and loads no images, models or shaders from disk: meshes, buffer
descriptions and descriptor layouts are plain data for a renderer to use. There is no
command to run; it is a library only.