"""Tests for surface.point_cloud module."""

import pytest

from shared.errors import InvalidArgumentError
from surface.geometry import Bounds, Point2
from surface.point_cloud import expand_bounds, sample, sample_bounds


class TestSample:
    """Tests for sample function."""

    def test_two_by_two_layout(self):
        """2x2 grid should return the four corners in documented order."""
        result = sample(2, 2, 0, 10, 0, 10)
        assert result == [(0, 0), (0, 10), (10, 0), (10, 10)]

    def test_returns_point2(self):
        """Points should be Point2 values."""
        result = sample(2, 3, 0, 1, 0, 1)
        assert all(isinstance(p, Point2) for p in result)

    def test_length(self):
        """Grid should contain nx * ny points."""
        assert len(sample(7, 4, -1, 1, -2, 2)) == 28

    def test_interpolation(self):
        """Point (i, j) should sit at the linear interpolation of the bounds."""
        nx, ny = 5, 3
        result = sample(nx, ny, -10, 30, 100, 200)
        for i in range(nx):
            for j in range(ny):
                p = result[i * ny + j]
                assert p.x == pytest.approx(-10 + i / (nx - 1) * 40)
                assert p.y == pytest.approx(100 + j / (ny - 1) * 100)

    def test_endpoints_exact(self):
        """Last point should be exactly the max corner."""
        result = sample(11, 13, -512.0, 512.0, -300.0, 300.0)
        assert result[0] == (-512.0, -300.0)
        assert result[-1] == (512.0, 300.0)

    @pytest.mark.parametrize(('nx', 'ny'), [(1, 5), (5, 1), (0, 0), (1, 1)])
    def test_rejects_small_grid(self, nx, ny):
        """Grid of one point per axis should raise, not divide by zero."""
        with pytest.raises(InvalidArgumentError):
            sample(nx, ny, 0, 10, 0, 10)

    def test_invalid_argument_is_value_error(self):
        """InvalidArgumentError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            sample(1, 2, 0, 1, 0, 1)


class TestBoundsHelpers:
    """Tests for sample_bounds and expand_bounds."""

    def test_sample_bounds_matches_sample(self):
        """sample_bounds should unpack the rectangle."""
        bounds = Bounds(0, 10, 0, 10)
        assert sample_bounds(2, 2, bounds) == sample(2, 2, 0, 10, 0, 10)

    def test_expand_centered(self):
        """Expanding a centered window should scale every side."""
        result = expand_bounds(Bounds.centered(1024, 1024), 1.25)
        assert result.x_min == pytest.approx(-640)
        assert result.x_max == pytest.approx(640)
        assert result.y_min == pytest.approx(-640)
        assert result.y_max == pytest.approx(640)

    def test_expand_keeps_center(self):
        """Off-center rectangles should grow about their own center."""
        result = expand_bounds(Bounds(10, 20, 0, 4), 2.0)
        assert result == Bounds(5, 25, -2, 6)

    def test_ratio_one_is_identity(self):
        """Ratio 1 should return the same rectangle."""
        bounds = Bounds(-3, 7, 1, 2)
        assert expand_bounds(bounds, 1.0) == bounds
