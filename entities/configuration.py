from components.body.snake import SnakeTail
from components.color import ColorComponent
from components.movement.component import MovementComponent
from components.position import Position
from components.render import RenderComponent
from entities.entity_id import EntityID


def get_entities_configuration():
    entities_config = EntityConfiguration()
    entities_config.add_configuration(
        EntityID.SNAKE_HEAD,
        components=[Position, MovementComponent, SnakeTail, RenderComponent, ColorComponent],
    )
    entities_config.add_configuration(
        EntityID.TAIL_SEGMENT, components=[Position, RenderComponent, ColorComponent]
    )
    entities_config.add_configuration(
        EntityID.FRUIT, components=[Position, RenderComponent, ColorComponent]
    )
    return entities_config


class EntityConfiguration(dict):
    """Component types every kind of entity is created with"""

    def add_configuration(self, entity_id: EntityID, components: list):
        if not isinstance(entity_id, EntityID):
            raise ValueError("Key must be an EntityID")
        if entity_id in self:
            raise ValueError(f"{entity_id.name} entity configuration already exists")
        if not all(isinstance(component, type) for component in components):
            raise ValueError("Components must be component classes")
        self[entity_id] = tuple(components)

    def get_components(self, entity_id: EntityID) -> tuple:
        if entity_id not in self:
            raise ValueError(f"{entity_id.name} entity configuration does not exist")
        return self[entity_id]
