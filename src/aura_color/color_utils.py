"""Color space conversions between packed ARGB, linear RGB, XYZ and CIELAB.

Colors cross module boundaries as packed 32-bit ARGB integers (0xAARRGGBB).
Linear RGB and XYZ components are scaled to 0-100, matching Y = 100 for
the D65 white point.
"""

from __future__ import annotations

import math
import string
from typing import Sequence

import numpy as np

from .math_utils import clamp_int, matrix_multiply, round_half_up

SRGB_TO_XYZ = np.array(
    [
        [0.41233895, 0.35762064, 0.18051042],
        [0.2126, 0.7152, 0.0722],
        [0.01932141, 0.11916382, 0.95034478],
    ]
)

XYZ_TO_SRGB = np.array(
    [
        [3.2413774792388685, -1.5376652402851851, -0.49885366846268053],
        [-0.9691452513005321, 1.8758853451067872, 0.04156585616912061],
        [0.05562093689691305, -0.20395524564742123, 1.0571799111220335],
    ]
)

# D65 reference white
WHITE_POINT_D65 = (95.047, 100.0, 108.883)

# CIE constants, exact rational forms
LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque 8-bit channels into an ARGB integer."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


def linearized(rgb_component: float) -> float:
    """
    Undo sRGB gamma for one channel.

    Args:
        rgb_component: 0-255 channel value, fractional values allowed

    Returns:
        Linear component on a 0-100 scale
    """
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """
    Apply sRGB gamma to one linear channel.

    Args:
        rgb_component: Linear component on a 0-100 scale

    Returns:
        0-255 channel value, rounded and clamped
    """
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_up(value * 255.0))


def argb_from_linrgb(linrgb: Sequence[float]) -> int:
    """Convert a linear RGB triple (0-100) to ARGB."""
    r = delinearized(float(linrgb[0]))
    g = delinearized(float(linrgb[1]))
    b = delinearized(float(linrgb[2]))
    return argb_from_rgb(r, g, b)


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """Convert CIE XYZ (Y on a 0-100 scale) to ARGB."""
    linear = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_linrgb(linear)


def xyz_from_argb(argb: int) -> tuple[float, float, float]:
    """Convert ARGB to CIE XYZ (Y on a 0-100 scale)."""
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    x, y, z = matrix_multiply((r, g, b), SRGB_TO_XYZ)
    return float(x), float(y), float(z)


def lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return (LAB_KAPPA * t + 16) / 116


def lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > LAB_EPSILON:
        return ft3
    return (116 * ft - 16) / LAB_KAPPA


def lab_from_argb(argb: int) -> tuple[float, float, float]:
    """Convert ARGB to CIELAB (L*, a*, b*) under D65."""
    x, y, z = xyz_from_argb(argb)
    fx = lab_f(x / WHITE_POINT_D65[0])
    fy = lab_f(y / WHITE_POINT_D65[1])
    fz = lab_f(z / WHITE_POINT_D65[2])
    L = 116.0 * fy - 16
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return L, a, b


def argb_from_lab(L: float, a: float, b: float) -> int:
    """Convert CIELAB (L*, a*, b*) under D65 to ARGB."""
    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = lab_invf(fx) * WHITE_POINT_D65[0]
    y = lab_invf(fy) * WHITE_POINT_D65[1]
    z = lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


def y_from_lstar(lstar: float) -> float:
    """Convert L* (0-100) to relative luminance Y (0-100)."""
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y (0-100) to L* (0-100)."""
    return lab_f(y / 100.0) * 116.0 - 16.0


def argb_from_lstar(lstar: float) -> int:
    """The gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    """L* (tone) of an ARGB color."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * lab_f(y / 100.0) - 16.0


def hex_from_argb(argb: int) -> str:
    """Format an ARGB color as ``#rrggbb``; alpha is dropped."""
    return f"#{red_from_argb(argb):02x}{green_from_argb(argb):02x}{blue_from_argb(argb):02x}"


def argb_from_hex(hex_color: str) -> int:
    """
    Parse a hex color string into ARGB.

    Accepts ``rgb``, ``rrggbb`` and ``aarrggbb`` forms, with or without a
    leading ``#``. Three and six digit forms are opaque.

    Raises:
        ValueError: If the string is not a hex color.
    """
    digits = hex_color.strip().removeprefix("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits = "ff" + digits
    if len(digits) != 8 or any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"Not a hex color: {hex_color!r}")
    return int(digits, 16)
