import pygame

from components.color import ColorComponent
from components.position import Position
from components.render import RenderComponent
from schemas.config import GameConfig
from systems.ecs import ECS
from systems.system import System
from utils.transform import grid_to_real, screen_to_pixels


class RenderTransformSystem(System):
    def __init__(self, cell_size: float, window_size: tuple[float, float]):
        self._cell_size = cell_size
        self._window_size = window_size

    def run(self, world: ECS):
        for entity in world.with_components(Position, RenderComponent):
            rc: RenderComponent = entity.get_component(RenderComponent)
            side = self._cell_size * rc.size
            rc.scale = (side, side)
            rc.translation = grid_to_real(
                entity.get_component(Position), self._cell_size, self._window_size
            )


class RenderSystem(System):
    def __init__(self, config: GameConfig):
        self._window_size = config.window_size
        self._background = config.colors.background
        self.window = None

    def setup(self):
        self.window = pygame.display.set_mode(
            (int(self._window_size[0]), int(self._window_size[1]))
        )
        pygame.display.set_caption("Snake Game")
        self.window.fill(self._background)
        pygame.display.flip()

    def run(self, world: ECS):
        self.window.fill(self._background)

        drawables = sorted(
            world.with_components(RenderComponent, ColorComponent),
            key=lambda entity: entity.get_component(RenderComponent).layer,
        )
        for entity in drawables:
            rc: RenderComponent = entity.get_component(RenderComponent)
            pygame.draw.rect(
                self.window,
                entity.get_component(ColorComponent).color,
                screen_to_pixels(rc.translation, rc.scale, self._window_size),
            )

        pygame.display.flip()
