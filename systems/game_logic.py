import logging
import random

from components.position import Position
from components.score import ScoreBoard
from entities.factory import EntityFactory
from entities.type import Fruit, Snake
from schemas.config import Colors, Grid
from systems.ecs import ECS
from systems.errors import ChainIntegrityError, OutOfBoundsError
from systems.system import System

logger = logging.getLogger(__name__)


class CollisionSystem(System):
    """Ends the game when the head leaves the grid.

    Only the grid bounds are checked, the head may overlap its own tail.
    """

    def __init__(self, snake: Snake, grid: Grid) -> None:
        self._snake = snake
        self._grid = grid

    def run(self, world: ECS):
        head_position = self._snake.position
        if not head_position.in_bounds(self._grid):
            raise OutOfBoundsError(head_position)


class EatingSystem(System):
    def __init__(
        self,
        snake: Snake,
        fruit: Fruit,
        score_board: ScoreBoard,
        grid: Grid,
        factory: EntityFactory,
        colors: Colors,
        rng: random.Random = None,
    ) -> None:
        self._snake = snake
        self._fruit = fruit
        self._score_board = score_board
        self._grid = grid
        self._factory = factory
        self._colors = colors
        self._rng = rng or random.Random()

    def run(self, world: ECS):
        if self._snake.position != self._fruit.position:
            return

        vacated = self._snake.movement.previous_position
        if vacated is None:
            raise ChainIntegrityError("Fruit eaten before the snake ever moved")

        # Fruit may land on the snake itself
        self._fruit.position = Position.random(self._grid, self._rng)
        score = self._score_board.increment()
        self._snake.grow(self._factory, vacated.model_copy(), self._colors.tail)

        eaten_at = self._snake.position
        logger.debug(
            "Fruit eaten at (%d, %d), score %d, next fruit at (%d, %d)",
            eaten_at.x,
            eaten_at.y,
            score,
            self._fruit.position.x,
            self._fruit.position.y,
        )
