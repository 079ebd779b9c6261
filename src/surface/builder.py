from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from shared.constants import TRIANGLE_VERTEX_COUNT
from shared.errors import InvalidArgumentError, TriangulationError
from surface.geometry import Point3, Triangle3D
from surface.triangulation import triangulate

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)


def build(
    points: Sequence[tuple[float, float]],
    triangulation_indices: Sequence[int],
    elevation_fn: Callable[[float, float], float],
) -> list[Triangle3D]:
    """
    Lift a triangulated point set into 3D triangles.

    Every consecutive index triple becomes one Triangle3D whose vertices are
    the referenced points with z = elevation_fn(x, y). Each point is elevated
    once, even when it is shared by several triangles.

    Raises:
        TriangulationError: the index list is empty (no triangulation).
        InvalidArgumentError: the index list is not made of whole triples or
            references a point that does not exist.

    """
    n_indices = len(triangulation_indices)
    if n_indices == 0:
        msg = 'No triangulation exists for the point set'
        raise TriangulationError(msg)
    if n_indices % TRIANGLE_VERTEX_COUNT:
        msg = f'Triangulation indices must come in triples, got {n_indices}'
        raise InvalidArgumentError(msg)

    lifted: dict[int, Point3] = {}

    def vertex(idx: int) -> Point3:
        p3 = lifted.get(idx)
        if p3 is None:
            if not (0 <= idx < len(points)):
                msg = f'Triangulation index {idx} out of range for {len(points)} points'
                raise InvalidArgumentError(msg)
            x, y = points[idx]
            p3 = Point3(float(x), float(y), float(elevation_fn(x, y)))
            lifted[idx] = p3
        return p3

    return [
        Triangle3D(
            (
                vertex(triangulation_indices[k]),
                vertex(triangulation_indices[k + 1]),
                vertex(triangulation_indices[k + 2]),
            ),
        )
        for k in range(0, n_indices, TRIANGLE_VERTEX_COUNT)
    ]


def build_surface(
    points: Sequence[tuple[float, float]],
    elevation_fn: Callable[[float, float], float],
) -> list[Triangle3D]:
    """Triangulate `points` and lift them with `elevation_fn`."""
    logger.info('Triangulating %d points ...', len(points))
    t0 = time.monotonic()
    indices = triangulate(points)
    t1 = time.monotonic()
    logger.info('Mapping to Triangle3D ...')
    triangles = build(points, indices, elevation_fn)
    t2 = time.monotonic()
    logger.info(
        'Surface ready: %d triangles (triangulation %.3fs, elevation %.3fs)',
        len(triangles),
        t1 - t0,
        t2 - t1,
    )
    return triangles
