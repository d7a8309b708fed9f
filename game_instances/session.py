import logging
import random
from typing import Collection, Optional

from components.position import Position
from components.score import ScoreBoard
from entities.factory import EntityFactory
from entities.type import Fruit, Snake
from schemas.config import GameConfig
from schemas.game import GamePhase, GameResult, GameSnapshot
from systems.ecs import ECS
from systems.errors import OutOfBoundsError
from systems.game_logic import CollisionSystem, EatingSystem
from systems.movement import MovementSystem
from systems.player_input import InputSystem
from systems.render import RenderTransformSystem

logger = logging.getLogger(__name__)


class GameSession:
    """One game from the first tick to game over.

    Input sampling and movement ticks are driven separately by the caller.
    A tick always runs move, collide, eat and transform refresh in that
    order, and leaving the grid moves the session to GAME_OVER for good.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.grid = config.grid()
        self._rng = rng or random.Random(config.seed)
        self._setup()

    def _setup(self):
        self.world = ECS()
        self.score_board = ScoreBoard()
        self.factory = EntityFactory()
        self.phase = GamePhase.RUNNING
        self.result: Optional[GameResult] = None

        colors = self.config.colors
        self.snake = Snake.spawn(self.world, self.factory, Position.center(self.grid), colors.head)
        self.fruit = Fruit.spawn(
            self.world, self.factory, Position.random(self.grid, self._rng), colors.fruit
        )

        self._input_system = InputSystem(self.snake, self.config.reversal_guard)
        self.world.add_system(MovementSystem(self.snake))
        self.world.add_system(CollisionSystem(self.snake, self.grid))
        self.world.add_system(
            EatingSystem(
                self.snake,
                self.fruit,
                self.score_board,
                self.grid,
                self.factory,
                colors,
                self._rng,
            )
        )
        render_transform = RenderTransformSystem(self.grid.cell_size, self.config.window_size)
        self.world.add_system(render_transform)
        self.world.setup()

        # Place everything on screen before the first move
        render_transform.run(self.world)

        logger.info(
            "New game on a %dx%d grid, head at (%d, %d), fruit at (%d, %d)",
            self.grid.width,
            self.grid.height,
            self.snake.position.x,
            self.snake.position.y,
            self.fruit.position.x,
            self.fruit.position.y,
        )

    @property
    def score(self) -> int:
        return self.score_board.score

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def sample_input(self, pressed_keys: Collection[int]):
        if self.is_over:
            return
        self._input_system.run(self.world, pressed_keys)

    def tick(self) -> GamePhase:
        if self.is_over:
            return self.phase

        try:
            self.world.update()
        except OutOfBoundsError as e:
            self._end(str(e), e.position)
        return self.phase

    def restart(self):
        self._setup()

    def _end(self, reason: str, head: Position):
        self.phase = GamePhase.GAME_OVER
        self.result = GameResult(score=self.score, reason=reason, head=head)
        logger.info("Game over: %s. Final score %d", reason, self.score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            score=self.score,
            facing=self.snake.facing,
            head=self.snake.position,
            tail=self.snake.tail_positions(),
            fruit=self.fruit.position,
            result=self.result,
        )
