from typing import Optional

from components.movement.facing import Facing
from components.position import Position


class MovementComponent:
    def __init__(self, facing: Facing = Facing.UP):
        self.facing = facing
        # Facing used by the latest move and where the entity stood before it
        self.last_moved: Optional[Facing] = None
        self.previous_position: Optional[Position] = None

    def turn(self, facing: Facing, reversal_guard: bool = False) -> bool:
        reference = self.last_moved or self.facing
        if reversal_guard and facing.is_opposite(reference):
            return False
        self.facing = facing
        return True
