import random

import numpy as np
from pydantic import BaseModel

from components.movement.facing import Facing
from schemas.config import Grid


class Position(BaseModel):
    x: int = 0
    y: int = 0

    def in_bounds(self, grid: Grid) -> bool:
        return 0 <= self.x < grid.width and 0 <= self.y < grid.height

    def shifted(self, facing: Facing) -> "Position":
        new_xy = np.add(np.array(self.as_tuple()).astype(int), facing.offset)
        return Position(x=int(new_xy[0]), y=int(new_xy[1]))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def random(cls, grid: Grid, rng: random.Random = None) -> "Position":
        rng = rng or random
        return cls(x=rng.randint(0, grid.width - 1), y=rng.randint(0, grid.height - 1))

    @classmethod
    def center(cls, grid: Grid) -> "Position":
        return cls(x=grid.width // 2, y=grid.height // 2)
