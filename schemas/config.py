import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

Color = tuple[int, int, int]


class Grid(BaseModel):
    model_config = ConfigDict(frozen=True)

    cell_size: float = Field(gt=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @classmethod
    def from_window(cls, width: float, height: float, cells_across: int = 20) -> "Grid":
        cell_size = min(width, height) / cells_across
        return cls(
            cell_size=cell_size,
            width=math.floor(width / cell_size),
            height=math.floor(height / cell_size),
        )


class Colors(BaseModel):
    model_config = ConfigDict(frozen=True)

    fruit: Color = (255, 0, 0)
    head: Color = (51, 255, 0)
    tail: Color = (0, 255, 0)
    background: Color = (0, 0, 0)


class GameConfig(BaseModel):
    """Startup configuration, built once and shared by every system"""

    model_config = ConfigDict(frozen=True)

    window_width: float = Field(default=800.0, gt=0)
    window_height: float = Field(default=600.0, gt=0)
    cells_across: int = Field(default=20, gt=0)
    moves_per_second: float = Field(default=5.0, gt=0)
    frames_per_second: int = Field(default=60, gt=0)
    colors: Colors = Colors()
    seed: Optional[int] = None
    # Ignore direction keys that would turn the snake back onto itself
    reversal_guard: bool = False

    @property
    def window_size(self) -> tuple[float, float]:
        return (self.window_width, self.window_height)

    def grid(self) -> Grid:
        return Grid.from_window(self.window_width, self.window_height, self.cells_across)
