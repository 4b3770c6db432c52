"""A small entity-component system built on sparse sets."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

MAX_ACTORS = 100

C = TypeVar("C")


class ECSError(Exception):
    """Raised when an actor or component operation is invalid."""


def _check_actor(actor: int, capacity: int) -> None:
    if not isinstance(actor, int) or isinstance(actor, bool):
        raise TypeError("actor id must be an int")
    if not 0 <= actor < capacity:
        raise ECSError(f"actor id {actor} out of range")


class ComponentStorage(Generic[C]):
    """Sparse-set storage for one component type.

    Components are kept densely packed; removal swaps the last component
    into the freed slot.
    """

    def __init__(self, capacity: int = MAX_ACTORS) -> None:
        self._capacity = capacity
        self._actor_to_comp: list[int | None] = [None] * capacity
        self._comp_to_actor: list[int] = []
        self._dense: list[C] = []

    def add(self, actor: int, component: C) -> None:
        _check_actor(actor, self._capacity)
        if self._actor_to_comp[actor] is not None:
            raise ECSError("actor already has this component")
        self._dense.append(component)
        self._comp_to_actor.append(actor)
        self._actor_to_comp[actor] = len(self._dense) - 1

    def remove(self, actor: int) -> None:
        _check_actor(actor, self._capacity)
        slot = self._actor_to_comp[actor]
        if slot is None:
            raise ECSError("actor does not have this component")
        last = len(self._dense) - 1
        self._dense[slot], self._dense[last] = self._dense[last], self._dense[slot]
        self._comp_to_actor[slot], self._comp_to_actor[last] = (
            self._comp_to_actor[last],
            self._comp_to_actor[slot],
        )
        self._dense.pop()
        self._comp_to_actor.pop()
        self._actor_to_comp[actor] = None
        if slot != last:
            self._actor_to_comp[self._comp_to_actor[slot]] = slot

    def has(self, actor: int) -> bool:
        return 0 <= actor < self._capacity and self._actor_to_comp[actor] is not None

    def actors(self) -> list[int]:
        """Actor ids in dense order, parallel to :meth:`components`."""
        return list(self._comp_to_actor)

    def components(self) -> list[C]:
        return list(self._dense)


class ActorManager:
    """Hands out actor ids from a fixed pool, lowest first."""

    def __init__(self, capacity: int = MAX_ACTORS) -> None:
        self._capacity = capacity
        self._alive = [False] * capacity
        self._free = list(reversed(range(capacity)))

    def create_actor(self) -> int:
        if not self._free:
            raise ECSError("run out of object pool")
        actor = self._free.pop()
        self._alive[actor] = True
        return actor

    def remove_actor(self, actor: int) -> None:
        if not self.is_alive(actor):
            raise ECSError("actor is not active")
        self._free.append(actor)
        self._alive[actor] = False

    def is_alive(self, actor: int) -> bool:
        return 0 <= actor < self._capacity and self._alive[actor]

    def active_slots(self) -> tuple[bool, ...]:
        return tuple(self._alive)


class ECS:
    """Actors plus one component storage per registered type."""

    def __init__(self, capacity: int = MAX_ACTORS) -> None:
        self._capacity = capacity
        self.actor_manager = ActorManager(capacity)
        self._storages: dict[type, ComponentStorage[Any]] = {}

    def create_actor(self) -> int:
        return self.actor_manager.create_actor()

    def register_component(self, component_type: type) -> None:
        if component_type in self._storages:
            raise ECSError("component type already registered")
        self._storages[component_type] = ComponentStorage(self._capacity)

    def _storage(self, component_type: type) -> ComponentStorage[Any]:
        try:
            return self._storages[component_type]
        except KeyError:
            raise ECSError("component type not registered") from None

    def add_component(
        self, actor: int, component_type: type, component: Any = None
    ) -> None:
        """Attach a component; a default-constructed one if none is given."""
        if not self.actor_manager.is_alive(actor):
            raise ECSError("actor is not active")
        storage = self._storage(component_type)
        storage.add(actor, component_type() if component is None else component)

    def remove_actor(self, actor: int) -> None:
        """Free the actor and drop every component it holds."""
        self.actor_manager.remove_actor(actor)
        for storage in self._storages.values():
            if storage.has(actor):
                storage.remove(actor)

    def component_views(self, component_type: type) -> tuple[list[int], list[Any]]:
        """Return parallel lists of actor ids and their components."""
        storage = self._storage(component_type)
        return storage.actors(), storage.components()