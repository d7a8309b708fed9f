from typing import Iterator

from entities.base import Entity
from entities.entity_id import EntityID
from systems.errors import ChainIntegrityError
from systems.system import System


class ECS:
    """Entity arena plus the ordered list of systems run on every update"""

    def __init__(self):
        self._entities: dict[str, Entity] = {}
        self._systems: list[System] = []

    def add_entity(self, entity: Entity):
        if entity.hash in self._entities:
            raise ValueError("Entity already added!")
        self._entities[entity.hash] = entity

    def get_entity(self, entity_hash: str) -> Entity:
        entity = self._entities.get(entity_hash)
        if entity is None:
            raise ChainIntegrityError(f"No live entity with hash '{entity_hash}'")
        return entity

    def get_component(self, entity_hash: str, component_type):
        component = self.get_entity(entity_hash).get_component(component_type)
        if component is None:
            raise ChainIntegrityError(
                f"Entity '{entity_hash}' has no {component_type.__name__} component"
            )
        return component

    def first(self, entity_id: EntityID) -> Entity:
        for entity in self.entities(entity_id):
            return entity
        raise ChainIntegrityError(f"No {entity_id.name} entity in the world")

    def entities(self, entity_id: EntityID = None) -> Iterator[Entity]:
        for entity in self._entities.values():
            if entity_id is None or entity.id == entity_id:
                yield entity

    def with_components(self, *component_types) -> Iterator[Entity]:
        for entity in self._entities.values():
            if all(entity.has_component(ct) for ct in component_types):
                yield entity

    def add_system(self, system: System):
        self._systems.append(system)

    def setup(self):
        for system in self._systems:
            system.setup()

    def update(self):
        for system in self._systems:
            system.run(self)

    def __len__(self):
        return len(self._entities)
