from .config import Colors, GameConfig, Grid
