"""Mapping layer between flat SketchSettings fields and sectioned TOML format.

SketchSettings remains a flat Pydantic model. This module provides two functions:
- flat_to_sectioned(): flat dict → sectioned dict (for TOML save)
- sectioned_to_flat(): sectioned dict → flat dict (for TOML load)
"""

from __future__ import annotations

# {section_name: {flat_field_name: short_name_in_toml}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'noise': {
        'noise_kind': 'kind',
        'noise_seed': 'seed',
        'noise_scale': 'scale',
        'noise_z_scale': 'z_scale',
        'noise_octaves': 'octaves',
        'noise_frequency': 'frequency',
        'noise_lacunarity': 'lacunarity',
        'noise_persistence': 'persistence',
    },
    'contours': {
        'n_contours': 'count',
        'min_contour': 'min',
        'max_contour': 'max',
        'contour_descending': 'descending',
        'stitch': 'stitch',
        'stitch_tolerance': 'tolerance',
        'tie_break': 'tie_break',
        'closure_tolerance': 'closure_tolerance',
    },
}

# Reverse index: flat_field → (section, short_name)
_FLAT_TO_SECTION: dict[str, tuple[str, str]] = {}
for _section, _fields in SECTION_MAP.items():
    for _flat, _short in _fields.items():
        _FLAT_TO_SECTION[_flat] = (_section, _short)

# Reverse index: (section, short_name) → flat_field
_SECTION_TO_FLAT: dict[str, dict[str, str]] = {}
for _section, _fields in SECTION_MAP.items():
    _SECTION_TO_FLAT[_section] = {v: k for k, v in _fields.items()}


def flat_to_sectioned(flat: dict) -> dict:
    """Convert flat SketchSettings dict to sectioned dict for TOML output."""
    result: dict = {'common': {}}
    for key, value in flat.items():
        if key in _FLAT_TO_SECTION:
            section, short_name = _FLAT_TO_SECTION[key]
            if section not in result:
                result[section] = {}
            result[section][short_name] = value
        else:
            result['common'][key] = value
    return result


def sectioned_to_flat(data: dict) -> dict:
    """Convert sectioned TOML dict to flat dict for SketchSettings validation."""
    flat: dict = {}
    for key, value in data.items():
        if isinstance(value, dict) and key in _SECTION_TO_FLAT:
            # Known section: expand short names to flat names
            mapping = _SECTION_TO_FLAT[key]
            for short_name, field_value in value.items():
                flat_name = mapping.get(short_name, short_name)
                flat[flat_name] = field_value
        elif isinstance(value, dict):
            # common и неизвестные секции: ключи как есть
            flat.update(value)
        else:
            # Top-level key (flat TOML)
            flat[key] = value
    return flat
