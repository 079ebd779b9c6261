from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from shared.constants import TRIANGLE_VERTEX_COUNT
from shared.errors import InvalidArgumentError


class Point2(NamedTuple):
    x: float
    y: float


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    @property
    def xy(self) -> Point2:
        return Point2(self.x, self.y)


class Segment(NamedTuple):
    """Two points, each on a distinct edge of the triangle that produced it."""

    start: Point2
    end: Point2


@dataclass(frozen=True)
class Triangle3D:
    """A triangle of the elevated surface; always exactly 3 vertices."""

    vertices: tuple[Point3, Point3, Point3]

    def __post_init__(self) -> None:
        if len(self.vertices) != TRIANGLE_VERTEX_COUNT:
            msg = (
                f'Triangle needs exactly {TRIANGLE_VERTEX_COUNT} vertices, '
                f'got {len(self.vertices)}'
            )
            raise InvalidArgumentError(msg)
        # Допускаем list на входе, храним кортеж
        object.__setattr__(self, 'vertices', tuple(self.vertices))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle (window or sampling domain)."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def centered(cls, width: float, height: float) -> Bounds:
        """Rectangle of the given size centered at the origin (window coords)."""
        return cls(-width / 2.0, width / 2.0, -height / 2.0, height / 2.0)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, p: tuple[float, float]) -> bool:
        """Strictly inside (points on the border are outside)."""
        return self.x_min < p[0] < self.x_max and self.y_min < p[1] < self.y_max


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
