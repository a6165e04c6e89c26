"""Tests for haul classification."""

import pytest

from career.haul import MEDIUM_HAUL_MAX_MIN, SHORT_HAUL_MAX_MIN, classify_haul, haul_bounds


class TestClassifyHaul:
    """Fixed duration thresholds: short <= 180 < medium <= 360 < long."""

    @pytest.mark.parametrize(
        "duration,expected",
        [
            (1, "short"),
            (75, "short"),
            (180, "short"),
            (181, "medium"),
            (330, "medium"),
            (360, "medium"),
            (361, "long"),
            (840, "long"),
        ],
    )
    def test_thresholds(self, duration, expected):
        assert classify_haul(duration) == expected

    def test_threshold_constants(self):
        """Thresholds are 3 and 6 hours."""
        assert SHORT_HAUL_MAX_MIN == 180
        assert MEDIUM_HAUL_MAX_MIN == 360


class TestHaulBounds:
    """Duration bands agree with classify_haul at their edges."""

    @pytest.mark.parametrize("haul", ["short", "medium", "long"])
    def test_bounds_match_classification(self, haul):
        low, high = haul_bounds(haul)
        assert classify_haul(low + 1) == haul
        if high != float("inf"):
            assert classify_haul(high) == haul
            assert classify_haul(high + 1) != haul
