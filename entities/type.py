from components.body.snake import SnakeTail
from components.color import ColorComponent
from components.movement.component import MovementComponent
from components.movement.facing import Facing
from components.position import Position
from components.render import RenderComponent, RenderLayer
from entities.base import Entity
from entities.entity_id import EntityID
from entities.factory import EntityFactory
from systems.ecs import ECS


class Snake:
    """View over the head entity and the tail segments it references"""

    def __init__(self, world: ECS, head_hash: str):
        self._world = world
        self._head_hash = head_hash

    @classmethod
    def spawn(cls, world: ECS, factory: EntityFactory, position: Position, color, facing=Facing.UP):
        head = factory.create_entity(
            EntityID.SNAKE_HEAD,
            position,
            MovementComponent(facing),
            SnakeTail(),
            RenderComponent(layer=RenderLayer.HEAD),
            ColorComponent(color),
        )
        world.add_entity(head)
        return cls(world, head.hash)

    @property
    def head(self) -> Entity:
        return self._world.get_entity(self._head_hash)

    @property
    def position(self) -> Position:
        return self._world.get_component(self._head_hash, Position)

    @position.setter
    def position(self, new_position: Position):
        self.head.set_component(new_position)

    @property
    def movement(self) -> MovementComponent:
        return self._world.get_component(self._head_hash, MovementComponent)

    @property
    def facing(self) -> Facing:
        return self.movement.facing

    @property
    def tail(self) -> SnakeTail:
        return self._world.get_component(self._head_hash, SnakeTail)

    @property
    def segments(self) -> list[Entity]:
        return [self._world.get_entity(segment_hash) for segment_hash in self.tail]

    def tail_positions(self) -> list[Position]:
        return [self._world.get_component(segment_hash, Position) for segment_hash in self.tail]

    def grow(self, factory: EntityFactory, position: Position, color, size: float = 1.0) -> Entity:
        """Append a new segment at the end of the chain"""
        segment = factory.create_entity(
            EntityID.TAIL_SEGMENT,
            position,
            RenderComponent(size, RenderLayer.TAIL),
            ColorComponent(color),
        )
        self._world.add_entity(segment)
        self.tail.append(segment.hash)
        return segment

    def __len__(self):
        return len(self.tail)


class Fruit:
    def __init__(self, world: ECS, fruit_hash: str):
        self._world = world
        self._fruit_hash = fruit_hash

    @classmethod
    def spawn(cls, world: ECS, factory: EntityFactory, position: Position, color):
        fruit = factory.create_entity(
            EntityID.FRUIT, position, RenderComponent(layer=RenderLayer.FRUIT), ColorComponent(color)
        )
        world.add_entity(fruit)
        return cls(world, fruit.hash)

    @property
    def entity(self) -> Entity:
        return self._world.get_entity(self._fruit_hash)

    @property
    def position(self) -> Position:
        return self._world.get_component(self._fruit_hash, Position)

    @position.setter
    def position(self, new_position: Position):
        self.entity.set_component(new_position)
