"""Tests for TOML sectioned profile mapping layer."""

import tomlkit

from domain.models import SketchSettings
from domain.toml_sections import (
    SECTION_MAP,
    flat_to_sectioned,
    sectioned_to_flat,
)


class TestFlatToSectioned:
    """Tests for flat_to_sectioned()."""

    def test_creates_expected_sections(self):
        flat = SketchSettings().model_dump(mode='json')
        result = flat_to_sectioned(flat)
        assert set(result) == {'common', 'noise', 'contours'}

    def test_noise_fields_in_section(self):
        flat = SketchSettings().model_dump(mode='json')
        noise = flat_to_sectioned(flat)['noise']
        assert 'kind' in noise
        assert 'seed' in noise
        assert 'scale' in noise
        assert 'octaves' in noise
        # Flat name must NOT be in noise section
        assert 'noise_seed' not in noise

    def test_contours_fields_in_section(self):
        flat = SketchSettings(n_contours=12).model_dump(mode='json')
        contours = flat_to_sectioned(flat)['contours']
        assert contours['count'] == 12
        assert 'tolerance' in contours
        assert 'tie_break' in contours

    def test_common_fields(self):
        flat = SketchSettings(grid=33).model_dump(mode='json')
        common = flat_to_sectioned(flat)['common']
        assert common['grid'] == 33
        assert 'window_width' in common
        assert 'n_contours' not in common

    def test_every_mapped_field_exists(self):
        fields = set(SketchSettings.model_fields)
        for mapping in SECTION_MAP.values():
            assert set(mapping) <= fields


class TestSectionedToFlat:
    """Tests for sectioned_to_flat()."""

    def test_expands_short_names(self):
        data = {'noise': {'seed': 7.0}, 'contours': {'count': 3, 'min': 0.1}}
        flat = sectioned_to_flat(data)
        assert flat == {'noise_seed': 7.0, 'n_contours': 3, 'min_contour': 0.1}

    def test_common_and_unknown_sections_pass_through(self):
        data = {'common': {'grid': 5}, 'extra': {'foo': 1}}
        assert sectioned_to_flat(data) == {'grid': 5, 'foo': 1}

    def test_top_level_keys(self):
        assert sectioned_to_flat({'grid': 9, 'stitch': True}) == {
            'grid': 9,
            'stitch': True,
        }

    def test_unknown_short_name_kept(self):
        assert sectioned_to_flat({'noise': {'mystery': 1}}) == {'mystery': 1}


class TestRoundTrip:
    """flat -> sectioned -> TOML -> flat."""

    def test_round_trip_through_toml(self):
        settings = SketchSettings(
            grid=42,
            noise_kind='RIDGED',
            noise_seed=123.0,
            n_contours=9,
            stitch=True,
            tie_break='NEAREST',
        )
        text = tomlkit.dumps(flat_to_sectioned(settings.model_dump(mode='json')))
        data = tomlkit.parse(text).unwrap()
        restored = SketchSettings.model_validate(sectioned_to_flat(data))
        assert restored == settings
