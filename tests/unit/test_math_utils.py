"""Tests for math_utils.py - Angle and scalar helpers."""

from __future__ import annotations

import numpy as np
import pytest

from aura_color.math_utils import (
    clamp_double,
    clamp_int,
    difference_degrees,
    lerp,
    matrix_multiply,
    rotation_direction,
    round_half_up,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
)


class TestSanitizeDegrees:
    """Tests for wrapping angles into [0, 360)."""

    @pytest.mark.parametrize(
        "degrees,expected",
        [(0.0, 0.0), (360.0, 0.0), (-30.0, 330.0), (725.5, 5.5), (359.9, 359.9)],
    )
    def test_double(self, degrees: float, expected: float):
        assert sanitize_degrees_double(degrees) == pytest.approx(expected)

    @pytest.mark.parametrize("degrees,expected", [(0, 0), (360, 0), (-1, 359), (721, 1)])
    def test_int(self, degrees: int, expected: int):
        assert sanitize_degrees_int(degrees) == expected

    def test_tiny_negative_stays_below_360(self):
        """Float modulo of a tiny negative angle must not return 360."""
        assert 0.0 <= sanitize_degrees_double(-1e-20) < 360.0


class TestDifferenceDegrees:
    """Tests for difference_degrees() - unsigned shortest distance."""

    def test_across_zero(self):
        assert difference_degrees(10.0, 350.0) == pytest.approx(20.0)

    def test_opposite(self):
        assert difference_degrees(0.0, 180.0) == pytest.approx(180.0)

    def test_symmetric(self):
        assert difference_degrees(30.0, 100.0) == difference_degrees(100.0, 30.0)


class TestRotationDirection:
    """Tests for rotation_direction()."""

    def test_clockwise(self):
        assert rotation_direction(10.0, 20.0) == 1.0

    def test_counter_clockwise(self):
        assert rotation_direction(20.0, 10.0) == -1.0

    def test_clockwise_across_zero(self):
        assert rotation_direction(350.0, 10.0) == 1.0

    def test_counter_clockwise_across_zero(self):
        assert rotation_direction(10.0, 350.0) == -1.0


class TestScalars:
    """Tests for signum, lerp, clamping and rounding."""

    def test_signum(self):
        assert signum(-3.0) == -1.0
        assert signum(0.0) == 0.0
        assert signum(2.5) == 1.0

    def test_lerp_endpoints(self):
        assert lerp(2.0, 6.0, 0.0) == 2.0
        assert lerp(2.0, 6.0, 1.0) == 6.0
        assert lerp(2.0, 6.0, 0.25) == pytest.approx(3.0)

    def test_clamp(self):
        assert clamp_int(0, 255, 300) == 255
        assert clamp_int(0, 255, -4) == 0
        assert clamp_double(0.0, 1.0, 0.5) == 0.5
        assert clamp_double(0.0, 1.0, 1.5) == 1.0

    def test_round_half_up(self):
        """Ties round up, unlike Python's banker's rounding."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(199.49) == 199


class TestMatrixMultiply:
    """Tests for matrix_multiply()."""

    def test_identity(self):
        result = matrix_multiply((1.0, 2.0, 3.0), np.eye(3))
        assert list(result) == [1.0, 2.0, 3.0]

    def test_rows_dot_vector(self):
        matrix = np.array([[1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0]])
        assert list(matrix_multiply((1.0, 2.0, 3.0), matrix)) == [1.0, 3.0, 6.0]
