from enum import Enum
from typing import Optional

import pygame


class Facing(Enum):
    # ! Do not change member order it is being used for finding the
    # ! opposite direction
    UP = "UP"
    LEFT = "LEFT"
    DOWN = "DOWN"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Facing":
        # Opposite direction is 2 positions away in the member order
        members = list(Facing)
        return members[(members.index(self) + 2) % len(members)]

    def is_opposite(self, other: "Facing") -> bool:
        return self.opposite is other

    @classmethod
    def from_key(cls, key: int) -> Optional["Facing"]:
        return _KEY_BINDINGS.get(key)


_OFFSETS = {
    Facing.UP: (0, -1),
    Facing.LEFT: (-1, 0),
    Facing.DOWN: (0, 1),
    Facing.RIGHT: (1, 0),
}

# Priority order for simultaneous presses: later bindings win
DIRECTION_KEYS: tuple[tuple[int, Facing], ...] = (
    (pygame.K_UP, Facing.UP),
    (pygame.K_DOWN, Facing.DOWN),
    (pygame.K_LEFT, Facing.LEFT),
    (pygame.K_RIGHT, Facing.RIGHT),
    (pygame.K_w, Facing.UP),
    (pygame.K_s, Facing.DOWN),
    (pygame.K_a, Facing.LEFT),
    (pygame.K_d, Facing.RIGHT),
    (pygame.K_k, Facing.UP),
    (pygame.K_j, Facing.DOWN),
    (pygame.K_h, Facing.LEFT),
    (pygame.K_l, Facing.RIGHT),
)

_KEY_BINDINGS = dict(DIRECTION_KEYS)
