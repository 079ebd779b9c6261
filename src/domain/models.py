from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, field_validator, model_validator

from shared.constants import (
    CONTOUR_PARALLEL_WORKERS,
    DEFAULT_CLOSURE_TOLERANCE,
    DEFAULT_FREQUENCY,
    DEFAULT_GRID_SIZE,
    DEFAULT_LACUNARITY,
    DEFAULT_MAX_CONTOUR,
    DEFAULT_MIN_CONTOUR,
    DEFAULT_N_CONTOURS,
    DEFAULT_NOISE_KIND,
    DEFAULT_NOISE_SCALE,
    DEFAULT_OCTAVES,
    DEFAULT_PERSISTENCE,
    DEFAULT_SEED,
    DEFAULT_STITCH_TOLERANCE,
    DEFAULT_TIE_BREAK,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    DEFAULT_Z_SCALE,
    MAX_OCTAVES,
    MIN_GRID_SIZE,
    POINT_CLOUD_MARGIN_RATIO,
    RANDOM_FREQUENCY_RANGE,
    RANDOM_LACUNARITY_RANGE,
    RANDOM_NOISE_SCALE_RANGE,
    RANDOM_OCTAVES_RANGE,
    RANDOM_PERSISTENCE_RANGE,
    RANDOM_SEED_RANGE,
    NoiseKind,
    TieBreak,
)

if TYPE_CHECKING:
    import random


def _positive(name: str, v: float) -> float:
    v = float(v)
    if v <= 0.0:
        msg = f'{name} должен быть больше нуля'
        raise ValueError(msg)
    return v


def _validate_octaves(v: int) -> int:
    v = int(v)
    if not (1 <= v <= MAX_OCTAVES):
        msg = f'octaves должен быть в диапазоне [1, {MAX_OCTAVES}]'
        raise ValueError(msg)
    return v


class NoiseSettings(BaseModel):
    """Неизменяемая конфигурация функции высот (ScalarField)."""

    model_config = {'frozen': True}

    kind: NoiseKind = DEFAULT_NOISE_KIND
    # Зерно шума; одновременно третья координата выборки
    seed: float = DEFAULT_SEED
    # Масштаб «волн» шума (координаты делятся на него)
    noise_scale: float = DEFAULT_NOISE_SCALE
    # Максимальная высота рельефа
    z_scale: float = DEFAULT_Z_SCALE
    octaves: int = DEFAULT_OCTAVES
    frequency: float = DEFAULT_FREQUENCY
    lacunarity: float = DEFAULT_LACUNARITY
    # Низкая persistence при низкой lacunarity = более длинная «волна»
    persistence: float = DEFAULT_PERSISTENCE

    @field_validator('noise_scale', 'z_scale', 'frequency', 'lacunarity', 'persistence')
    @classmethod
    def validate_positive(cls, v: float | str, info: Any) -> float:
        return _positive(info.field_name, float(v))

    @field_validator('octaves')
    @classmethod
    def validate_octaves(cls, v: int | str) -> int:
        return _validate_octaves(int(v))


def random_noise_settings(rng: random.Random, **overrides: Any) -> NoiseSettings:
    """
    Draw a terrain parameter set from the sketch ranges.

    Randomness comes only from `rng`; pass a seeded `random.Random` for a
    reproducible frame. Keyword overrides win over the drawn values.
    """
    values: dict[str, Any] = {
        'seed': rng.uniform(*RANDOM_SEED_RANGE),
        'noise_scale': rng.uniform(*RANDOM_NOISE_SCALE_RANGE),
        'octaves': rng.randint(*RANDOM_OCTAVES_RANGE),
        'frequency': rng.uniform(*RANDOM_FREQUENCY_RANGE),
        'lacunarity': rng.uniform(*RANDOM_LACUNARITY_RANGE),
        'persistence': rng.uniform(*RANDOM_PERSISTENCE_RANGE),
    }
    values.update(overrides)
    return NoiseSettings(**values)


class SketchSettings(BaseModel):
    """Все параметры кадра в одной плоской модели (секции есть только в TOML)."""

    model_config = {
        'extra': 'ignore',  # игнорировать лишние поля из профилей
    }

    # Узлов сетки по каждой оси
    grid: int = DEFAULT_GRID_SIZE
    # Размер окна (px); сетка строится на окне, увеличенном в margin_ratio раз
    window_width: float = DEFAULT_WINDOW_WIDTH
    window_height: float = DEFAULT_WINDOW_HEIGHT
    margin_ratio: float = POINT_CLOUD_MARGIN_RATIO
    # Потоков для параллельной обработки уровней
    parallel_workers: int = CONTOUR_PARALLEL_WORKERS

    # Рельеф
    noise_kind: NoiseKind = DEFAULT_NOISE_KIND
    noise_seed: float = DEFAULT_SEED
    noise_scale: float = DEFAULT_NOISE_SCALE
    noise_z_scale: float = DEFAULT_Z_SCALE
    noise_octaves: int = DEFAULT_OCTAVES
    noise_frequency: float = DEFAULT_FREQUENCY
    noise_lacunarity: float = DEFAULT_LACUNARITY
    noise_persistence: float = DEFAULT_PERSISTENCE

    # Изолинии
    n_contours: int = DEFAULT_N_CONTOURS
    # Границы уровней как доля z_scale
    min_contour: float = DEFAULT_MIN_CONTOUR
    max_contour: float = DEFAULT_MAX_CONTOUR
    # Рисовать от верхнего уровня к нижнему
    contour_descending: bool = False
    # Сшивать сегменты в полилинии (нужно для полигонов)
    stitch: bool = False
    stitch_tolerance: float = DEFAULT_STITCH_TOLERANCE
    tie_break: TieBreak = DEFAULT_TIE_BREAK
    closure_tolerance: float = DEFAULT_CLOSURE_TOLERANCE

    # Валидации через Pydantic validators
    @field_validator('grid')
    @classmethod
    def validate_grid(cls, v: int | str) -> int:
        v = int(v)
        if v < MIN_GRID_SIZE:
            msg = f'grid должен быть не меньше {MIN_GRID_SIZE}'
            raise ValueError(msg)
        return v

    @field_validator(
        'window_width',
        'window_height',
        'margin_ratio',
        'noise_scale',
        'noise_z_scale',
        'noise_frequency',
        'noise_lacunarity',
        'noise_persistence',
        'stitch_tolerance',
        'closure_tolerance',
    )
    @classmethod
    def validate_positive(cls, v: float | str, info: Any) -> float:
        return _positive(info.field_name, float(v))

    @field_validator('noise_octaves')
    @classmethod
    def validate_octaves(cls, v: int | str) -> int:
        return _validate_octaves(int(v))

    @field_validator('n_contours', 'parallel_workers')
    @classmethod
    def validate_at_least_one(cls, v: int | str, info: Any) -> int:
        v = int(v)
        if v < 1:
            msg = f'{info.field_name} должен быть не меньше 1'
            raise ValueError(msg)
        return v

    @field_validator('min_contour', 'max_contour')
    @classmethod
    def validate_fraction(cls, v: float | str) -> float:
        v = float(v)
        if not (0.0 <= v <= 1.0):
            msg = 'Значение должно быть в диапазоне [0.0, 1.0]'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def validate_contour_range(self) -> SketchSettings:
        if self.min_contour > self.max_contour:
            msg = 'min_contour не может быть больше max_contour'
            raise ValueError(msg)
        return self

    def noise_settings(self) -> NoiseSettings:
        return NoiseSettings(
            kind=self.noise_kind,
            seed=self.noise_seed,
            noise_scale=self.noise_scale,
            z_scale=self.noise_z_scale,
            octaves=self.noise_octaves,
            frequency=self.noise_frequency,
            lacunarity=self.noise_lacunarity,
            persistence=self.noise_persistence,
        )

    def with_noise(self, noise: NoiseSettings) -> SketchSettings:
        """Copy with the terrain fields replaced (e.g. by random_noise_settings)."""
        return self.model_copy(
            update={
                'noise_kind': noise.kind,
                'noise_seed': noise.seed,
                'noise_scale': noise.noise_scale,
                'noise_z_scale': noise.z_scale,
                'noise_octaves': noise.octaves,
                'noise_frequency': noise.frequency,
                'noise_lacunarity': noise.lacunarity,
                'noise_persistence': noise.persistence,
            },
        )
