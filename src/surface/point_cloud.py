from __future__ import annotations

import numpy as np

from shared.constants import MIN_GRID_SIZE
from shared.errors import InvalidArgumentError
from surface.geometry import Bounds, Point2


def sample(
    nx: int,
    ny: int,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
) -> list[Point2]:
    """
    Regular grid of nx * ny points over [x_min, x_max] x [y_min, y_max].

    Point (i, j) sits at x_min + i/(nx-1) * (x_max - x_min) (same for y/j).
    Layout: i is the outer index, j the inner one.

    Raises:
        InvalidArgumentError: nx or ny is below 2.

    """
    if nx < MIN_GRID_SIZE or ny < MIN_GRID_SIZE:
        msg = f'Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {nx}x{ny}'
        raise InvalidArgumentError(msg)

    xs = np.linspace(x_min, x_max, nx, dtype=np.float64)
    ys = np.linspace(y_min, y_max, ny, dtype=np.float64)
    return [Point2(float(x), float(y)) for x in xs for y in ys]


def sample_bounds(nx: int, ny: int, bounds: Bounds) -> list[Point2]:
    return sample(nx, ny, bounds.x_min, bounds.x_max, bounds.y_min, bounds.y_max)


def expand_bounds(bounds: Bounds, ratio: float) -> Bounds:
    """Scale a rectangle about its center by `ratio`."""
    cx = (bounds.x_min + bounds.x_max) / 2.0
    cy = (bounds.y_min + bounds.y_max) / 2.0
    half_w = bounds.width * ratio / 2.0
    half_h = bounds.height * ratio / 2.0
    return Bounds(cx - half_w, cx + half_w, cy - half_h, cy + half_h)
