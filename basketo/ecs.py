"""Entity-component-system core: entities, component storage and system bookkeeping."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, Iterator, List, Optional, Set, Type

MAX_ENTITIES = 5000
NO_ENTITY = MAX_ENTITIES
MAX_COMPONENTS = 32


class EcsError(Exception):
    """Raised when the entity-component-system is used inconsistently."""


def _check_entity(entity: int) -> None:
    if not 0 <= entity < MAX_ENTITIES:
        raise EcsError(f"entity {entity} is out of range (0..{MAX_ENTITIES - 1})")


class Signature:
    """A fixed-width set of component type bits."""

    __slots__ = ("_bits",)

    def __init__(self, *bits: int) -> None:
        self._bits = 0
        for bit in bits:
            self.set(bit)

    @staticmethod
    def _check(bit: int) -> None:
        if not 0 <= bit < MAX_COMPONENTS:
            raise IndexError(f"bit {bit} is out of range (0..{MAX_COMPONENTS - 1})")

    @property
    def value(self) -> int:
        """The bits as an integer."""
        return self._bits

    def set(self, bit: int) -> "Signature":
        """Turn on one bit; returns self for chaining."""
        self._check(bit)
        self._bits |= 1 << bit
        return self

    def reset(self, bit: Optional[int] = None) -> "Signature":
        """Turn off one bit, or every bit when none is given."""
        if bit is None:
            self._bits = 0
        else:
            self._check(bit)
            self._bits &= ~(1 << bit)
        return self

    def test(self, bit: int) -> bool:
        """Whether one bit is on."""
        self._check(bit)
        return bool(self._bits >> bit & 1)

    def contains(self, other: "Signature") -> bool:
        """Whether every bit of ``other`` is also on here."""
        return self._bits & other._bits == other._bits

    def copy(self) -> "Signature":
        result = Signature()
        result._bits = self._bits
        return result

    def __and__(self, other: "Signature") -> "Signature":
        result = Signature()
        result._bits = self._bits & other._bits
        return result

    def __or__(self, other: "Signature") -> "Signature":
        result = Signature()
        result._bits = self._bits | other._bits
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[int]:
        return (bit for bit in range(MAX_COMPONENTS) if self._bits >> bit & 1)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __bool__(self) -> bool:
        return self._bits != 0

    def __repr__(self) -> str:
        return f"Signature({', '.join(map(str, self))})"


class ComponentArray:
    """Densely packed storage of one component type, keyed by entity."""

    def __init__(self) -> None:
        self._data: List[Any] = []
        self._entities: List[int] = []
        self._index: Dict[int, int] = {}

    def insert(self, entity: int, component: Any) -> None:
        if entity in self._index:
            raise EcsError(f"entity {entity} already has this component")
        if len(self._data) >= MAX_ENTITIES:
            raise EcsError("component array is full")
        self._index[entity] = len(self._data)
        self._data.append(component)
        self._entities.append(entity)

    def remove(self, entity: int) -> None:
        try:
            index = self._index.pop(entity)
        except KeyError:
            raise EcsError(f"entity {entity} does not have this component") from None
        last_entity = self._entities.pop()
        last_component = self._data.pop()
        if last_entity != entity:
            self._data[index] = last_component
            self._entities[index] = last_entity
            self._index[last_entity] = index

    def get(self, entity: int) -> Any:
        try:
            return self._data[self._index[entity]]
        except KeyError:
            raise EcsError(f"entity {entity} does not have this component") from None

    def entity_destroyed(self, entity: int) -> None:
        if entity in self._index:
            self.remove(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._entities))


class ComponentManager:
    """Registers component types and stores components per entity."""

    def __init__(self) -> None:
        self._types: Dict[type, int] = {}
        self._arrays: Dict[type, ComponentArray] = {}
        self._next_type = 0

    def register_component(self, component_type: type) -> int:
        """Register a component class and return its type number."""
        number = self._next_type
        self._types[component_type] = number
        self._arrays[component_type] = ComponentArray()
        self._next_type += 1
        return number

    def is_component_registered(self, component_type: type) -> bool:
        return component_type in self._types

    def get_component_type(self, component_type: type) -> int:
        try:
            return self._types[component_type]
        except KeyError:
            raise EcsError(f"component {component_type.__name__} is not registered") from None

    def _array(self, component_type: type) -> ComponentArray:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise EcsError(f"component {component_type.__name__} is not registered") from None

    def add_component(self, entity: int, component: Any) -> None:
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: int, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: int, component_type: type) -> Any:
        return self._array(component_type).get(entity)

    def has_component(self, entity: int, component_type: type) -> bool:
        return entity in self._array(component_type)

    def entity_destroyed(self, entity: int) -> None:
        for array in self._arrays.values():
            array.entity_destroyed(entity)


class EntityManager:
    """Hands out entity ids and keeps each entity's signature."""

    def __init__(self) -> None:
        self._available: deque[int] = deque(range(MAX_ENTITIES))
        self._signatures: List[Signature] = [Signature() for _ in range(MAX_ENTITIES)]
        self._active: Set[int] = set()

    def create_entity(self) -> int:
        if not self._available:
            raise EcsError(f"cannot create more than {MAX_ENTITIES} entities")
        entity = self._available.popleft()
        self._active.add(entity)
        return entity

    def destroy_entity(self, entity: int) -> None:
        _check_entity(entity)
        if entity not in self._active:
            raise EcsError(f"entity {entity} is not alive")
        self._signatures[entity].reset()
        self._available.append(entity)
        self._active.discard(entity)

    def set_signature(self, entity: int, signature: Signature) -> None:
        _check_entity(entity)
        self._signatures[entity] = signature.copy()

    def signature(self, entity: int) -> Signature:
        _check_entity(entity)
        return self._signatures[entity].copy()

    @property
    def active_entities(self) -> List[int]:
        """Living entities in ascending order."""
        return sorted(self._active)

    @property
    def living_entity_count(self) -> int:
        return len(self._active)


class System:
    """Base for systems; holds the entities whose signatures match."""

    def __init__(self) -> None:
        self.entities: Set[int] = set()


class SystemManager:
    """Keeps systems and updates their entity sets as signatures change."""

    def __init__(self) -> None:
        self._systems: Dict[Type[System], System] = {}
        self._signatures: Dict[Type[System], Signature] = {}

    def register_system(self, system: System) -> System:
        system_type = type(system)
        if system_type in self._systems:
            raise EcsError(f"system {system_type.__name__} is already registered")
        self._systems[system_type] = system
        return system

    def set_signature(self, system_type: Type[System], signature: Signature) -> None:
        if system_type in self._signatures:
            raise EcsError(f"system {system_type.__name__} already has a signature")
        self._signatures[system_type] = signature.copy()

    def entity_destroyed(self, entity: int) -> None:
        for system in self._systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: int, signature: Signature) -> None:
        for system_type, system in self._systems.items():
            required = self._signatures.get(system_type)
            if required is None:
                continue
            if signature.contains(required):
                system.entities.add(entity)
            else:
                system.entities.discard(entity)