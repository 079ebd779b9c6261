"""
Meandering triangles: the contour of one threshold across a triangulated surface.

Each triangle straddling the threshold contributes one short segment; the
collection for a threshold is an unordered bag (see contours.stitcher to
chain it into polylines).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from surface.geometry import Point2, Segment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from surface.geometry import Point3, Triangle3D


def _crossing(minority: Point3, majority: Point3, threshold: float) -> Point2:
    # доля длины ребра, на которой оно пересекает уровень
    t = (threshold - majority.z) / (minority.z - majority.z)
    return Point2(
        t * minority.x + (1.0 - t) * majority.x,
        t * minority.y + (1.0 - t) * majority.y,
    )


def contour_line(triangle: Triangle3D, threshold: float) -> Segment | None:
    """
    Segment where the triangle crosses `threshold`, or None.

    A vertex exactly at the threshold counts as above it. When the vertices
    split 1/2, both points lie on the two edges leaving the lone vertex, in
    the order of the other two vertices.
    """
    below = [v for v in triangle.vertices if v.z < threshold]
    above = [v for v in triangle.vertices if v.z >= threshold]

    if not below or not above:
        return None

    minority, majority = (above, below) if len(above) < len(below) else (below, above)
    lone = minority[0]
    return Segment(
        _crossing(lone, majority[0], threshold),
        _crossing(lone, majority[1], threshold),
    )


def calc_contour(triangles: Iterable[Triangle3D], threshold: float) -> list[Segment]:
    """All segments of one threshold; not contiguous, one per crossed triangle."""
    segments: list[Segment] = []
    for triangle in triangles:
        segment = contour_line(triangle, threshold)
        if segment is not None:
            segments.append(segment)
    return segments
