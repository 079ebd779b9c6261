"""
Функция высот рельефа (ScalarField).

Высота точки (x, y): фрактальный шум OpenSimplex, переведённый из
документированного диапазона [-1, 1] в [0, z_scale]. Конфигурация
неизменяема (NoiseSettings), сама функция чистая: одинаковые настройки и
координаты всегда дают одинаковую высоту.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from opensimplex import OpenSimplex

from shared.constants import NOISE_MAX, NOISE_MIN, RIDGED_ATTENUATION, NoiseKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import NoiseSettings


@functools.lru_cache(maxsize=32)
def _noise_source(seed: int) -> OpenSimplex:
    return OpenSimplex(seed=seed)


def _octaves(settings: NoiseSettings, x: float, y: float):
    """Yield (amplitude, raw noise) per octave at the scaled point."""
    source = _noise_source(int(settings.seed))
    px = x / settings.noise_scale * settings.frequency
    py = y / settings.noise_scale * settings.frequency
    # зерно служит постоянной третьей координатой, её не масштабируем
    pz = settings.seed
    amplitude = 1.0
    for _ in range(settings.octaves):
        yield amplitude, source.noise3(px, py, pz)
        px *= settings.lacunarity
        py *= settings.lacunarity
        amplitude *= settings.persistence


def _fbm(settings: NoiseSettings, x: float, y: float) -> float:
    total = 0.0
    norm = 0.0
    for amplitude, n in _octaves(settings, x, y):
        total += n * amplitude
        norm += amplitude
    return total / norm


def _billow(settings: NoiseSettings, x: float, y: float) -> float:
    total = 0.0
    norm = 0.0
    for amplitude, n in _octaves(settings, x, y):
        total += (2.0 * abs(n) - 1.0) * amplitude
        norm += amplitude
    return total / norm


def _ridged(settings: NoiseSettings, x: float, y: float) -> float:
    total = 0.0
    norm = 0.0
    weight = 1.0
    for amplitude, n in _octaves(settings, x, y):
        signal = 1.0 - abs(n)
        signal *= signal
        signal *= weight
        # вес следующей октавы зависит от текущего сигнала
        weight = min(1.0, max(0.0, signal / RIDGED_ATTENUATION))
        total += signal * amplitude
        norm += amplitude
    # [0, norm] -> [-1, 1]
    return 2.0 * total / norm - 1.0


_FRACTALS: dict[NoiseKind, Callable[[NoiseSettings, float, float], float]] = {
    NoiseKind.FBM: _fbm,
    NoiseKind.BILLOW: _billow,
    NoiseKind.RIDGED: _ridged,
}


def noise_value(settings: NoiseSettings, x: float, y: float) -> float:
    """Raw fractal value, clamped to the documented [-1, 1] range."""
    value = _FRACTALS[settings.kind](settings, x, y)
    return min(NOISE_MAX, max(NOISE_MIN, value))


def elevation(settings: NoiseSettings, x: float, y: float) -> float:
    """Elevation at (x, y), always within [0, z_scale]."""
    n = noise_value(settings, x, y)
    return (n - NOISE_MIN) / (NOISE_MAX - NOISE_MIN) * settings.z_scale


def elevation_fn(settings: NoiseSettings) -> Callable[[float, float], float]:
    """(x, y) -> z for the given settings (used by the surface builder)."""
    return functools.partial(elevation, settings)


class ScalarField:
    """Callable wrapper around `elevation` bound to one NoiseSettings."""

    def __init__(self, settings: NoiseSettings) -> None:
        self.settings = settings

    @property
    def z_scale(self) -> float:
        return self.settings.z_scale

    def elevation(self, x: float, y: float) -> float:
        return elevation(self.settings, x, y)

    __call__ = elevation
