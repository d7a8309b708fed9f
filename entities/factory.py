import hashlib
import itertools

from entities.base import Entity
from entities.configuration import get_entities_configuration
from entities.entity_id import EntityID


class EntityFactory:
    def __init__(self):
        self._config = get_entities_configuration()
        self._counter = itertools.count()
        self._used_hashes = set()

    def create_entity(self, entity_id: EntityID, *components):
        """Create an entity of the given kind.

        Every component type configured for the kind is attached with its
        defaults, then the given component instances replace them.
        """
        entity_components = self._config.get_components(entity_id)
        entity = Entity(entity_id, self._get_entity_hash(entity_id))
        for component_type in entity_components:
            entity.add_component(component_type)
        for component in components:
            entity.set_component(component)
        return entity

    def _get_entity_hash(self, entity_id: EntityID):
        hashed = self._hash(entity_id)
        while hashed in self._used_hashes:
            hashed = self._hash(entity_id)
        self._used_hashes.add(hashed)
        return hashed

    def _hash(self, entity_id: EntityID):
        seed = f"{entity_id.name}:{next(self._counter)}"
        return hashlib.sha256(seed.encode()).hexdigest()
