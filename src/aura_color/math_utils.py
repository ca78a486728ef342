"""Angle and scalar helpers shared by the color math."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def signum(num: float) -> float:
    """Sign of a number: -1.0, 0.0 or 1.0."""
    if num < 0:
        return -1.0
    if num == 0:
        return 0.0
    return 1.0


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation, amount 0.0 returns start and 1.0 returns stop."""
    return (1.0 - amount) * start + amount * stop


def clamp_int(low: int, high: int, value: int) -> int:
    """Clamp an integer into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_double(low: float, high: float, value: float) -> float:
    """Clamp a float into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity (not to even)."""
    return int(math.floor(value + 0.5))


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap an angle into [0.0, 360.0)."""
    degrees = degrees % 360.0
    # -1e-20 % 360.0 == 360.0 in floating point
    if degrees >= 360.0:
        degrees -= 360.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """
    Sign of the shortest rotation between two angles.

    Returns:
        1.0 if rotating clockwise (increasing degrees) from ``from_degrees``
        reaches ``to_degrees`` within 180 degrees, otherwise -1.0.
    """
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Unsigned distance between two angles, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """Multiply a 3x3 matrix by a column vector."""
    return matrix @ np.asarray(row, dtype=np.float64)
