import numpy as np

from components.position import Position


def grid_to_real(
    position: Position, cell_size: float, window_size: tuple[float, float]
) -> tuple[float, float]:
    """Center of a grid cell in screen space.

    Screen space has its origin at the window center and y growing upwards,
    grid (0, 0) is the top-left cell of a grid centered in the window.
    """
    window = np.array(window_size, dtype=float)
    origin = np.array([-window[0] + cell_size, window[1] - cell_size]) / 2.0
    step = np.array([position.x, -position.y], dtype=float) * cell_size
    real = origin + step
    return (float(real[0]), float(real[1]))


def screen_to_pixels(
    translation: tuple[float, float], scale: tuple[float, float], window_size: tuple[float, float]
) -> tuple[float, float, float, float]:
    """Turn a centered screen-space square into a top-left pixel rectangle"""
    left = window_size[0] / 2.0 + translation[0] - scale[0] / 2.0
    top = window_size[1] / 2.0 - translation[1] - scale[1] / 2.0
    return (left, top, scale[0], scale[1])
