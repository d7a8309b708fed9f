from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from components.movement.facing import Facing
from components.position import Position


class GamePhase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameResult(BaseModel):
    score: int
    reason: str
    head: Position


class GameSnapshot(BaseModel):
    phase: GamePhase
    score: int
    facing: Facing
    head: Position
    tail: List[Position]
    fruit: Position
    result: Optional[GameResult] = None
