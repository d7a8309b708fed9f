from components.position import Position


class GameError(Exception):
    pass


class OutOfBoundsError(GameError):
    def __init__(self, position: Position):
        super().__init__(f"Snake head left the grid at ({position.x}, {position.y})")
        self.position = position


class ChainIntegrityError(GameError, LookupError):
    """An entity handle or a required component could not be resolved"""
