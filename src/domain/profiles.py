import logging
import os
from pathlib import Path

import tomlkit

from domain.models import SketchSettings
from domain.toml_sections import flat_to_sectioned, sectioned_to_flat
from shared.constants import PROFILES_APP_DIR, PROFILES_DIR_ENV

logger = logging.getLogger(__name__)


def _user_profiles_dir() -> Path:
    """
    Determine profiles directory.

    1) If <project_root>/configs/profiles exists, use it (run-from-repo setups).
    2) Otherwise the directory named by MEANDER_PROFILES_DIR, if set.
    3) Otherwise ~/.meander/profiles.
    """
    project_root = Path(__file__).resolve().parent.parent.parent
    local_profiles = project_root / 'configs' / 'profiles'
    if local_profiles.exists():
        return local_profiles

    env_dir = os.getenv(PROFILES_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    return Path.home() / PROFILES_APP_DIR / 'profiles'


def ensure_profiles_dir() -> Path:
    profiles_dir = _user_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)
    return profiles_dir


def list_profiles() -> list[str]:
    """Список имён профилей без расширения."""
    folder = ensure_profiles_dir()
    return sorted(p.stem for p in folder.glob('*.toml') if p.is_file())


def profile_path(name: str) -> Path:
    """Путь к файлу профиля по имени."""
    return ensure_profiles_dir() / f'{name}.toml'


def load_profile(name_or_path: str) -> SketchSettings:
    """
    Загрузка и валидация профиля TOML -> SketchSettings.

    Поддерживает как имя профиля (без .toml) из каталога profiles,
    так и абсолютный/относительный путь до TOML файла.
    """
    p = Path(name_or_path)
    path = (
        p if p.suffix.lower() == '.toml' and p.exists() else profile_path(name_or_path)
    )
    if not path.exists():
        msg = f'Профиль не найден: {path}'
        raise FileNotFoundError(msg)
    text = path.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()
    settings = SketchSettings.model_validate(sectioned_to_flat(data))
    logger.info(
        'Profile %s loaded: grid=%s, n_contours=%s, stitch=%s',
        path.name,
        settings.grid,
        settings.n_contours,
        settings.stitch,
    )
    return settings


def save_profile(name: str, settings: SketchSettings) -> Path:
    """Сохранение профиля в TOML (без атомарности и бэкапов)."""
    path = profile_path(name)
    data = flat_to_sectioned(settings.model_dump(mode='json'))
    text = tomlkit.dumps(data)
    path.write_text(text, encoding='utf-8')
    logger.info('Profile saved: %s', path)
    return path


def delete_profile(name: str) -> None:
    """Удаление файла профиля, если он существует."""
    path = profile_path(name)
    if path.exists():
        path.unlink()
