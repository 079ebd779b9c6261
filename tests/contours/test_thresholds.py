"""Tests for contours.thresholds module."""

import pytest

from contours.thresholds import contour_thresholds
from shared.errors import InvalidArgumentError


class TestContourThresholds:
    """Tests for contour_thresholds function."""

    def test_evenly_spaced(self):
        """Levels should be evenly spaced between the fractions of z_scale."""
        result = contour_thresholds(5, 100.0, 0.0, 1.0)
        assert result == pytest.approx([0, 25, 50, 75, 100])

    def test_descending(self):
        """Descending order should reverse the levels."""
        asc = contour_thresholds(4, 10.0, 0.1, 0.7)
        desc = contour_thresholds(4, 10.0, 0.1, 0.7, descending=True)
        assert desc == list(reversed(asc))

    def test_last_level_exact(self):
        """The top level should be exactly z_scale * max_contour."""
        result = contour_thresholds(70, 350.0, 0.01, 0.99)
        assert len(result) == 70
        assert result[0] == 350.0 * 0.01
        assert result[-1] == 350.0 * 0.99

    def test_single_level(self):
        """One contour should sit at the lower bound."""
        assert contour_thresholds(1, 200.0, 0.25, 0.75) == [50.0]

    def test_equal_bounds(self):
        """Equal fractions should give repeated levels."""
        assert contour_thresholds(3, 10.0, 0.5, 0.5) == pytest.approx([5, 5, 5])

    @pytest.mark.parametrize(
        ('n', 'lo', 'hi'),
        [
            (0, 0.0, 1.0),
            (3, -0.1, 1.0),
            (3, 0.0, 1.1),
            (3, 0.8, 0.2),
        ],
    )
    def test_invalid_arguments(self, n, lo, hi):
        """Bad counts or fractions should raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            contour_thresholds(n, 100.0, lo, hi)
