"""Tests for surface.triangulation module."""

import pytest

from shared.errors import InvalidArgumentError, TriangulationError
from surface.point_cloud import sample
from surface.triangulation import triangulate


class TestTriangulate:
    """Tests for triangulate function."""

    def test_unit_square(self, unit_square_points):
        """Four corners of a square should give two triangles."""
        indices = triangulate(unit_square_points)
        assert len(indices) == 6
        assert set(indices) == {0, 1, 2, 3}

    def test_single_triangle(self):
        """Three non-collinear points should give one triangle."""
        indices = triangulate([(0, 0), (1, 0), (0, 1)])
        assert sorted(indices) == [0, 1, 2]

    def test_indices_are_ints(self):
        """Indices should be plain Python ints."""
        indices = triangulate([(0, 0), (1, 0), (0, 1)])
        assert all(type(i) is int for i in indices)

    def test_grid_triangle_count(self):
        """An n x m grid should triangulate into 2(n-1)(m-1) triangles."""
        indices = triangulate(sample(5, 4, 0, 10, 0, 10))
        assert len(indices) == 3 * 2 * 4 * 3

    @pytest.mark.parametrize('count', [0, 1, 2])
    def test_too_few_points(self, count):
        """Fewer than three points should raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            triangulate([(float(i), 0.0) for i in range(count)])

    def test_collinear_points(self):
        """Collinear points have no triangulation."""
        with pytest.raises(TriangulationError) as exc_info:
            triangulate([(0, 0), (1, 1), (2, 2), (3, 3)])
        assert exc_info.value.__cause__ is not None
