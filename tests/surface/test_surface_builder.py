"""Tests for surface.builder module."""

import logging
from unittest.mock import MagicMock

import pytest

from shared.errors import InvalidArgumentError, TriangulationError
from surface.builder import build, build_surface
from surface.geometry import Point3, Triangle3D


def plane(x, y):
    return x + 2 * y


class TestBuild:
    """Tests for build function."""

    def test_one_triangle(self):
        """Vertices should be the referenced points lifted by the elevation."""
        points = [(0, 0), (1, 0), (0, 1)]
        result = build(points, [0, 1, 2], plane)
        assert result == [
            Triangle3D((Point3(0, 0, 0), Point3(1, 0, 1), Point3(0, 1, 2))),
        ]

    def test_vertex_order_follows_indices(self):
        """Triangle vertices should follow the order of the index triple."""
        points = [(0, 0), (1, 0), (0, 1)]
        (tri,) = build(points, [2, 0, 1], plane)
        assert [v.xy for v in tri.vertices] == [(0, 1), (0, 0), (1, 0)]

    def test_triangle_count(self, unit_square_points):
        """len(indices) / 3 triangles should be produced."""
        result = build(unit_square_points, [0, 1, 2, 1, 3, 2], plane)
        assert len(result) == 2

    def test_elevation_called_once_per_point(self, unit_square_points):
        """Shared vertices should be elevated only once."""
        fn = MagicMock(side_effect=plane)
        build(unit_square_points, [0, 1, 2, 1, 3, 2], fn)
        assert fn.call_count == 4

    def test_empty_indices(self):
        """Empty triangulation should raise TriangulationError."""
        with pytest.raises(TriangulationError):
            build([(0, 0), (1, 1)], [], plane)

    def test_partial_triple(self):
        """Index count not divisible by three should raise."""
        with pytest.raises(InvalidArgumentError):
            build([(0, 0), (1, 0), (0, 1)], [0, 1], plane)

    @pytest.mark.parametrize('bad', [3, -1, 100])
    def test_index_out_of_range(self, bad):
        """Indices outside the point list should raise."""
        with pytest.raises(InvalidArgumentError):
            build([(0, 0), (1, 0), (0, 1)], [0, 1, bad], plane)


class TestBuildSurface:
    """Tests for build_surface function."""

    def test_unit_square(self, unit_square_points):
        """Unit square should produce two lifted triangles."""
        result = build_surface(unit_square_points, plane)
        assert len(result) == 2
        for tri in result:
            for v in tri.vertices:
                assert v.z == plane(v.x, v.y)

    def test_collinear_propagates(self):
        """TriangulationError should reach the caller."""
        with pytest.raises(TriangulationError):
            build_surface([(0, 0), (1, 0), (2, 0)], plane)

    def test_logs_progress(self, unit_square_points, caplog):
        """Surface construction should log its steps."""
        with caplog.at_level(logging.INFO, logger='surface.builder'):
            build_surface(unit_square_points, plane)
        assert 'Triangulating 4 points' in caplog.text
        assert 'Surface ready: 2 triangles' in caplog.text
