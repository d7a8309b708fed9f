from enum import Enum, auto


class EntityID(Enum):
    SNAKE_HEAD = auto()
    TAIL_SEGMENT = auto()
    FRUIT = auto()
