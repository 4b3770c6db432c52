from dataclasses import dataclass

import pytest

from sandbox3d.ecs import ECS, MAX_ACTORS, ActorManager, ComponentStorage, ECSError


@dataclass
class Pos:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Vel:
    dx: float = 0.0
    dy: float = 0.0


@pytest.fixture
def populated():
    ecs = ECS()
    ecs.register_component(Pos)
    ecs.register_component(Vel)
    actor0 = ecs.create_actor()
    ecs.add_component(actor0, Pos)
    ecs.add_component(actor0, Vel)
    for i in range(1, 10):
        entity = ecs.create_actor()
        ecs.add_component(entity, Pos)
        if i % 2 == 0:
            ecs.add_component(entity, Vel)
    return ecs, actor0


def test_actors_are_handed_out_lowest_first():
    manager = ActorManager()
    assert [manager.create_actor() for _ in range(3)] == [0, 1, 2]


def test_scenario_active_slots(populated):
    ecs, actor0 = populated
    assert actor0 == 0
    slots = ecs.actor_manager.active_slots()
    assert len(slots) == MAX_ACTORS
    assert all(slots[:10])
    assert not any(slots[10:])


def test_scenario_remove_actor(populated):
    ecs, actor0 = populated
    ecs.remove_actor(actor0)
    assert not ecs.actor_manager.active_slots()[0]
    actors, comps = ecs.component_views(Pos)
    assert actors == [9, 1, 2, 3, 4, 5, 6, 7, 8]
    assert len(comps) == len(actors)
    vel_actors, _ = ecs.component_views(Vel)
    assert sorted(vel_actors) == [2, 4, 6, 8]


def test_swap_keeps_sparse_index_consistent(populated):
    ecs, actor0 = populated
    ecs.remove_actor(actor0)
    ecs.remove_actor(9)
    actors, comps = ecs.component_views(Pos)
    assert sorted(actors) == list(range(1, 9))
    assert len(comps) == 8


def test_default_component_is_constructed():
    ecs = ECS()
    ecs.register_component(Pos)
    a = ecs.create_actor()
    ecs.add_component(a, Pos)
    assert ecs.component_views(Pos) == ([a], [Pos()])


def test_explicit_component_is_stored():
    ecs = ECS()
    ecs.register_component(Pos)
    a = ecs.create_actor()
    ecs.add_component(a, Pos, Pos(1.5, 2.5))
    assert ecs.component_views(Pos)[1] == [Pos(1.5, 2.5)]


def test_removed_id_is_reused():
    ecs = ECS()
    a = ecs.create_actor()
    ecs.create_actor()
    ecs.remove_actor(a)
    assert ecs.create_actor() == a


def test_register_twice_fails():
    ecs = ECS()
    ecs.register_component(Pos)
    with pytest.raises(ECSError):
        ecs.register_component(Pos)


def test_add_to_dead_actor_fails():
    ecs = ECS()
    ecs.register_component(Pos)
    with pytest.raises(ECSError):
        ecs.add_component(3, Pos)


def test_add_unregistered_fails():
    ecs = ECS()
    a = ecs.create_actor()
    with pytest.raises(ECSError):
        ecs.add_component(a, Pos)


def test_duplicate_component_fails():
    ecs = ECS()
    ecs.register_component(Pos)
    a = ecs.create_actor()
    ecs.add_component(a, Pos)
    with pytest.raises(ECSError):
        ecs.add_component(a, Pos)


def test_pool_exhaustion():
    ecs = ECS(capacity=2)
    ecs.create_actor()
    ecs.create_actor()
    with pytest.raises(ECSError):
        ecs.create_actor()


def test_remove_dead_actor_fails():
    ecs = ECS()
    with pytest.raises(ECSError):
        ecs.remove_actor(0)


def test_views_of_unregistered_type_fail():
    with pytest.raises(ECSError):
        ECS().component_views(Vel)


def test_storage_add_remove():
    storage = ComponentStorage(capacity=4)
    storage.add(1, "a")
    storage.add(3, "b")
    assert storage.has(1) and storage.has(3)
    storage.remove(1)
    assert not storage.has(1)
    assert storage.actors() == [3]
    assert storage.components() == ["b"]
    with pytest.raises(ECSError):
        storage.remove(1)


def test_storage_actor_out_of_range():
    storage = ComponentStorage(capacity=2)
    with pytest.raises(ECSError):
        storage.add(2, "x")