"""
Tests for application defaults: viewport and degree range.
"""

import pytest

from pypolyreg.core.defaults import (
    DEFAULT_DEGREE,
    DEFAULT_POINTS,
    DEFAULT_VIEWPORT,
    MAX_DEGREE,
    MIN_DEGREE,
    Viewport,
    clamp_degree,
)
from pypolyreg.core.exceptions import ValidationError


class TestConstants:

    def test_degree_range(self):
        assert MIN_DEGREE == 1
        assert MAX_DEGREE == 15
        assert MIN_DEGREE <= DEFAULT_DEGREE <= MAX_DEGREE

    def test_seed_points_inside_default_viewport(self):
        assert all(DEFAULT_VIEWPORT.contains(p) for p in DEFAULT_POINTS)

    def test_default_viewport(self):
        assert (DEFAULT_VIEWPORT.x_min, DEFAULT_VIEWPORT.x_max) == (0.0, 100.0)
        assert DEFAULT_VIEWPORT.steps == 200


class TestViewport:

    def test_contains_edges(self):
        vp = Viewport(0, 10, 0, 5, 10)
        assert vp.contains((0, 0))
        assert vp.contains((10, 5))
        assert not vp.contains((10.5, 1))
        assert not vp.contains((1, -0.1))

    def test_empty_x_range_rejected(self):
        with pytest.raises(ValidationError, match="x_min"):
            Viewport(5, 5, 0, 1, 10)

    def test_inverted_y_range_rejected(self):
        with pytest.raises(ValidationError, match="y_min"):
            Viewport(0, 1, 2, 1, 10)

    def test_zero_steps_rejected(self):
        with pytest.raises(ValidationError, match="steps"):
            Viewport(0, 1, 0, 1, 0)

    def test_non_finite_bound_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Viewport(0, float("inf"), 0, 1, 10)


class TestClampDegree:

    @pytest.mark.parametrize("degree, expected", [
        (0, 1),
        (1, 1),
        (7, 7),
        (15, 15),
        (40, 15),
    ])
    def test_clamp(self, degree, expected):
        assert clamp_degree(degree) == expected

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            clamp_degree(-3)
