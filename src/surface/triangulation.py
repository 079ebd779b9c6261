from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from scipy.spatial import Delaunay, QhullError

from shared.constants import MIN_TRIANGULATION_POINTS
from shared.errors import InvalidArgumentError, TriangulationError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def triangulate(points: Sequence[tuple[float, float]]) -> list[int]:
    """
    Delaunay triangulation of a 2D point set.

    Returns:
        Flat list of point indices, every 3 consecutive values are one triangle.

    Raises:
        InvalidArgumentError: fewer than 3 points.
        TriangulationError: qhull could not triangulate (e.g. collinear points).

    """
    if len(points) < MIN_TRIANGULATION_POINTS:
        msg = (
            f'Need at least {MIN_TRIANGULATION_POINTS} points to triangulate, '
            f'got {len(points)}'
        )
        raise InvalidArgumentError(msg)

    pts = np.asarray(points, dtype=np.float64)
    try:
        tri = Delaunay(pts)
    except (QhullError, ValueError) as e:
        msg = f'No triangulation exists for {len(points)} points'
        raise TriangulationError(msg) from e

    indices = tri.simplices.astype(np.int64).ravel().tolist()
    logger.debug(
        'Triangulated %d points into %d triangles', len(points), len(indices) // 3
    )
    return indices
