"""Entry point: compute the contours of one frame from a settings profile."""

import argparse
import logging
import random
import sys
from pathlib import Path

from contours.polygons import fill_polygons
from domain.models import SketchSettings, random_noise_settings
from domain.profiles import load_profile
from frame.pipeline import compute_frame_contours
from shared.constants import LOG_FORMAT
from shared.diagnostics import log_thread_status, log_timing
from surface.geometry import Bounds

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Configure root logging: stdout plus an optional UTF-8 log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def run(settings: SketchSettings) -> int:
    """Compute one frame and log a per-level summary. Returns an exit code."""
    window = Bounds.centered(settings.window_width, settings.window_height)
    with log_timing('Frame', log=logger, level=logging.INFO):
        frame = compute_frame_contours(settings, window)
    if frame.degraded:
        logger.warning('Frame degraded: %s', frame.error)
        return 1

    for n, level in enumerate(frame.levels, start=1):
        if level.polylines is None:
            logger.info(
                'contour %d of %d (%.3f threshold): %d segments',
                n,
                len(frame.levels),
                level.threshold,
                len(level.segments),
            )
            continue
        closed = sum(1 for p in level.polylines if p.is_closed(settings.stitch_tolerance))
        polygons = fill_polygons(level.polylines, window, settings.closure_tolerance)
        logger.info(
            'contour %d of %d (%.3f threshold): %d segments -> %d polylines '
            '(%d closed, %d fillable)',
            n,
            len(frame.levels),
            level.threshold,
            len(level.segments),
            len(level.polylines),
            closed,
            len(polygons),
        )
    log_thread_status('frame done')
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    parser = argparse.ArgumentParser(
        description='Meandering-triangles contours of a procedural terrain'
    )
    parser.add_argument('--profile', help='Имя профиля или путь к TOML файлу')
    parser.add_argument(
        '--random-terrain',
        type=int,
        metavar='SEED',
        help='Случайные параметры рельефа из заданного зерна',
    )
    parser.add_argument('--log-file', type=Path, help='Дублировать лог в файл')
    parser.add_argument('--verbose', action='store_true', help='DEBUG логирование')
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    logger.info('Starting meander contours')

    try:
        settings = load_profile(args.profile) if args.profile else SketchSettings()
    except (FileNotFoundError, ValueError) as e:
        logger.error('Failed to load profile: %s', e)
        return 2

    if args.random_terrain is not None:
        rng = random.Random(args.random_terrain)
        noise = random_noise_settings(rng, z_scale=settings.noise_z_scale)
        settings = settings.with_noise(noise)
        logger.info('Random terrain: %s', noise.model_dump(mode='json'))

    return run(settings)


if __name__ == '__main__':
    sys.exit(main())
