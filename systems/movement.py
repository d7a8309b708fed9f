from components.position import Position
from entities.type import Snake
from systems.ecs import ECS
from systems.system import System


class MovementSystem(System):
    def __init__(self, snake: Snake):
        self._snake = snake

    def run(self, world: ECS):
        head = self._snake.head
        movement = self._snake.movement

        # Snapshot the whole chain before anything moves
        old_head = self._snake.position
        snapshot = [old_head] + self._snake.tail_positions()

        movement.previous_position = old_head
        movement.last_moved = movement.facing
        head.set_component(old_head.shifted(movement.facing))

        for index, segment_hash in enumerate(self._snake.tail):
            leader: Position = snapshot[index]
            world.get_entity(segment_hash).set_component(leader.model_copy())
