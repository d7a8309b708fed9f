class ColorComponent:
    def __init__(self, color: tuple[int, int, int] = (255, 255, 255)):
        self.color = color
