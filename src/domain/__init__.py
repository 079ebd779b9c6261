"""Domain layer - settings models and profiles."""
from domain.models import NoiseSettings, SketchSettings, random_noise_settings
from domain.profiles import (
    delete_profile,
    ensure_profiles_dir,
    list_profiles,
    load_profile,
    save_profile,
)

__all__ = [
    'NoiseSettings',
    'SketchSettings',
    'delete_profile',
    'ensure_profiles_dir',
    'list_profiles',
    'load_profile',
    'random_noise_settings',
    'save_profile',
]
