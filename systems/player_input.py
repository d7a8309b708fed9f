import logging
from typing import Collection

from components.movement.facing import DIRECTION_KEYS, Facing
from entities.type import Snake
from systems.ecs import ECS
from systems.system import System

logger = logging.getLogger(__name__)

_KEY_PRIORITY = {key: index for index, (key, _) in enumerate(DIRECTION_KEYS)}


def pressed_direction_keys(pressed) -> set[int]:
    """Collect the bound direction keys held down in a pygame key state"""
    return {key for key, _ in DIRECTION_KEYS if pressed[key]}


class InputSystem(System):
    def __init__(self, snake: Snake, reversal_guard: bool = False):
        self._snake = snake
        self._reversal_guard = reversal_guard

    def run(self, world: ECS, pressed_keys: Collection[int] = ()):
        bound_keys = sorted(
            (key for key in pressed_keys if key in _KEY_PRIORITY), key=_KEY_PRIORITY.get
        )
        if not bound_keys:
            return

        movement = self._snake.movement
        # Every pressed key overwrites the facing, so the last one in
        # DIRECTION_KEYS order wins
        for key in bound_keys:
            facing = Facing.from_key(key)
            if not movement.turn(facing, self._reversal_guard):
                logger.debug("Ignored reversal from %s to %s", movement.facing.name, facing.name)
