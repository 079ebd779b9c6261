"""
Построение изолиний одного кадра.

Порядок: уровни -> сетка точек (окно с припуском) -> триангуляция и
карта высот (один раз на кадр) -> для каждого уровня сегменты и, при
необходимости, сшитые полилинии. Уровни независимы и могут считаться
параллельно; список треугольников только читается.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from contours.extractor import calc_contour
from contours.stitcher import Polyline, stitch
from contours.thresholds import contour_thresholds
from shared.constants import LOG_MEMORY_AFTER_SURFACE
from shared.diagnostics import log_memory_usage
from shared.errors import InvalidArgumentError, TriangulationError
from shared.progress import ConsoleProgress
from surface.builder import build_surface
from surface.geometry import Bounds
from surface.point_cloud import expand_bounds, sample_bounds
from surface.scalar_field import elevation_fn

if TYPE_CHECKING:
    from domain.models import SketchSettings
    from surface.geometry import Segment, Triangle3D

logger = logging.getLogger(__name__)


@dataclass
class ContourLevel:
    threshold: float
    segments: list[Segment]
    # None, если сшивка выключена
    polylines: list[Polyline] | None = None


@dataclass
class FrameContours:
    thresholds: list[float]
    levels: list[ContourLevel] = field(default_factory=list)
    triangle_count: int = 0
    # Кадр без изолиний из-за ошибки построения поверхности
    degraded: bool = False
    error: str | None = None


def contour_level(
    triangles: list[Triangle3D],
    threshold: float,
    settings: SketchSettings,
) -> ContourLevel:
    """Segments (and stitched polylines when enabled) for one threshold."""
    segments = calc_contour(triangles, threshold)
    polylines = None
    if settings.stitch:
        polylines = stitch(segments, settings.stitch_tolerance, settings.tie_break)
    return ContourLevel(threshold=threshold, segments=segments, polylines=polylines)


def _build_levels(
    triangles: list[Triangle3D],
    thresholds: list[float],
    settings: SketchSettings,
) -> list[ContourLevel]:
    progress = ConsoleProgress(total=len(thresholds), label='Изолинии')

    def process_level(threshold: float) -> ContourLevel:
        level = contour_level(triangles, threshold, settings)
        progress.step_sync(1)
        return level

    # Определяем количество воркеров
    num_workers = min(
        settings.parallel_workers, max(1, os.cpu_count() or 1), len(thresholds)
    )
    try:
        if num_workers > 1:
            with ThreadPoolExecutor(max_workers=num_workers) as executor:
                # map сохраняет порядок уровней
                return list(executor.map(process_level, thresholds))
        return [process_level(threshold) for threshold in thresholds]
    finally:
        progress.close()


def compute_frame_contours(
    settings: SketchSettings,
    window: Bounds | None = None,
) -> FrameContours:
    """
    Contours of every configured threshold for one frame.

    The surface is rebuilt on every call. If it cannot be built (bad grid,
    no triangulation) the frame is returned empty with `degraded=True`
    instead of raising.
    """
    if window is None:
        window = Bounds.centered(settings.window_width, settings.window_height)
    noise = settings.noise_settings()
    thresholds = contour_thresholds(
        settings.n_contours,
        noise.z_scale,
        settings.min_contour,
        settings.max_contour,
        descending=settings.contour_descending,
    )
    frame = FrameContours(thresholds=thresholds)

    logger.info(
        'Creating point cloud for %d x %d = %d points ...',
        settings.grid,
        settings.grid,
        settings.grid * settings.grid,
    )
    t0 = time.monotonic()
    try:
        points = sample_bounds(
            settings.grid, settings.grid, expand_bounds(window, settings.margin_ratio)
        )
        triangles = build_surface(points, elevation_fn(noise))
    except (InvalidArgumentError, TriangulationError) as e:
        logger.warning('No contours this frame: %s', e)
        frame.degraded = True
        frame.error = str(e)
        return frame

    frame.triangle_count = len(triangles)
    if LOG_MEMORY_AFTER_SURFACE:
        log_memory_usage('after surface')

    frame.levels = _build_levels(triangles, thresholds, settings)
    logger.info(
        'Frame contours: %d levels, %d segments total in %.2fs',
        len(frame.levels),
        sum(len(level.segments) for level in frame.levels),
        time.monotonic() - t0,
    )
    return frame
