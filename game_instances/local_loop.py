import logging

import pygame

from game_instances.session import GameSession
from schemas.config import GameConfig
from systems.player_input import pressed_direction_keys
from systems.render import RenderSystem
from utils.timer import FixedStepTimer

logger = logging.getLogger(__name__)


class LocalLoop:
    def __init__(self, config: GameConfig):
        self.config = config
        self.rendering_system = RenderSystem(config)
        self.move_timer = FixedStepTimer(config.moves_per_second)
        self.session = None

    def setup(self):
        pygame.init()

        self.rendering_system.setup()
        self.session = GameSession(self.config)

        self._clock = pygame.time.Clock()
        self._running = True

    def close(self):
        pygame.quit()

    def run(self):
        self.setup()
        try:
            while self._running:
                self.step_frame(self._clock.tick(self.config.frames_per_second))
        except KeyboardInterrupt:
            pass
        finally:
            self.close()

    def step_frame(self, elapsed_ms: float) -> int:
        """Run one frame and return how many movement ticks it ran"""
        self._process_events()
        if not self._running:
            return 0

        # Input runs every frame, movement only on whole fixed steps
        self.session.sample_input(pressed_direction_keys(pygame.key.get_pressed()))
        ticks = 0
        for _ in range(self.move_timer.advance(elapsed_ms)):
            if self.session.is_over:
                break
            self.session.tick()
            ticks += 1
            if self.session.is_over:
                self._show_game_over()

        self.rendering_system.run(self.session.world)
        return ticks

    def _process_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_r and self.session.is_over:
                    self._restart()

    def _restart(self):
        logger.info("Restarting game")
        self.session.restart()
        self.move_timer.reset()
        pygame.display.set_caption("Snake Game")

    def _show_game_over(self):
        pygame.display.set_caption(
            f"Snake Game - Game over, score {self.session.score} (R to restart, Esc to quit)"
        )
