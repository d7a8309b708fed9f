from enum import IntEnum


class RenderLayer(IntEnum):
    # Higher layers are drawn last, on top of lower ones
    TAIL = 0
    HEAD = 1
    FRUIT = 2


class RenderComponent:
    def __init__(self, size: float = 1.0, layer: RenderLayer = RenderLayer.TAIL):
        # Size in cells, the drawn rectangle is size * cell_size wide
        self.size = size
        self.layer = layer
        self.scale: tuple[float, float] = (0.0, 0.0)
        self.translation: tuple[float, float] = (0.0, 0.0)
