"""
Подготовка сшитых изолиний к заливке полигонами.

Незамкнутая изолиния, оба конца которой ушли за пределы окна, при заливке
как есть прорезала бы изображение хордой. Такие линии дополняются двумя
фиктивными концами далеко за окном, чтобы хорда прошла вне видимой области.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from surface.geometry import Point2, distance

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from contours.stitcher import Polyline
    from surface.geometry import Bounds


def _outside(p: Point2, window: Bounds) -> bool:
    return (
        window.x_min > p.x
        or p.x > window.x_max
        or window.y_min > p.y
        or p.y > window.y_max
    )


def terminals_in_view(front: Point2, back: Point2, window: Bounds) -> bool:
    return window.contains(front) and window.contains(back)


def terminals_out_of_view(front: Point2, back: Point2, window: Bounds) -> bool:
    return _outside(front, window) and _outside(back, window)


def should_fill(front: Point2, back: Point2, window: Bounds) -> bool:
    """Fill only when both ends are visible or both are hidden."""
    return terminals_in_view(front, back, window) or terminals_out_of_view(
        front, back, window
    )


def _terminals_on_opposite_sides(front: Point2, back: Point2, window: Bounds) -> bool:
    return (front.x < window.x_min and back.x > window.x_max) or (
        back.x < window.x_min and front.x > window.x_max
    )


def extended_terminals(
    front: Point2, back: Point2, window: Bounds
) -> tuple[Point2, Point2]:
    """
    Two synthetic end points one window size away from the real ones.

    Ends on opposite left/right sides are pushed up or down, otherwise left
    or right; the direction follows the midpoint of the ends relative to the
    window center.
    """
    cx = (window.x_min + window.x_max) / 2.0
    cy = (window.y_min + window.y_max) / 2.0
    mid_x = (front.x + back.x) / 2.0
    mid_y = (front.y + back.y) / 2.0
    if _terminals_on_opposite_sides(front, back, window):
        dy = -window.height if mid_y < cy else window.height
        return Point2(front.x, front.y + dy), Point2(back.x, back.y + dy)
    dx = -window.width if mid_x < cx else window.width
    return Point2(front.x + dx, front.y), Point2(back.x + dx, back.y)


def extend_open_polyline(
    points: Sequence[Point2],
    window: Bounds,
    closure_tolerance: float,
) -> list[Point2]:
    """Points with synthetic ends added when the line is open and leaves the window."""
    line = [Point2(*p) for p in points]
    if not line:
        return line
    front, back = line[0], line[-1]
    if distance(front, back) < closure_tolerance:
        return line
    if not terminals_out_of_view(front, back, window):
        return line
    start, end = extended_terminals(front, back, window)
    return [start, *line, end]


def fill_polygons(
    polylines: Iterable[Polyline],
    window: Bounds,
    closure_tolerance: float,
) -> list[list[Point2]]:
    """Polygons ready for filling: extended where needed, dangling ones dropped."""
    polygons: list[list[Point2]] = []
    for polyline in polylines:
        if not polyline.points:
            continue
        front, back = polyline.points[0], polyline.points[-1]
        if should_fill(front, back, window):
            polygons.append(
                extend_open_polyline(polyline.points, window, closure_tolerance)
            )
    return polygons
