"""Pytest configuration and fixtures for contour tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from shared import progress  # noqa: E402
from surface.geometry import Point3, Triangle3D  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_progress(monkeypatch):
    """Keep the single-line progress bar out of captured stdout."""
    monkeypatch.setattr(progress.DEFAULT_WRITER, 'write_line', lambda msg: None)
    monkeypatch.setattr(progress.DEFAULT_WRITER, 'clear_line', lambda: None)
    monkeypatch.setattr(progress._CbStore, 'progress', None)


@pytest.fixture
def make_triangle():
    """Build a Triangle3D from three (x, y, z) tuples."""

    def _make(a, b, c):
        return Triangle3D((Point3(*a), Point3(*b), Point3(*c)))

    return _make


@pytest.fixture
def unit_square_points():
    """Corners of the unit square in point-cloud layout order."""
    return [(0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)]
