"""Blending between two colors in HCT and CAM16-UCS."""

from __future__ import annotations

from . import hct_solver
from .cam16 import Cam16
from .color_utils import lstar_from_argb
from .hct import Hct
from .math_utils import difference_degrees, rotation_direction, sanitize_degrees_double

# Largest hue shift harmonize() applies
MAX_HARMONIZE_ROTATION = 15.0


def harmonize(design_color: int, source_color: int) -> int:
    """
    Shift a design color's hue toward a source color's hue.

    The result stays recognizable as the design color: the rotation is half
    the angular distance, capped at 15 degrees, in whichever direction is
    shorter. Chroma and tone are kept.

    Args:
        design_color: ARGB of an arbitrary color, e.g. a brand or error color
        source_color: ARGB of the theme's main color

    Returns:
        ARGB of the harmonized design color
    """
    from_hct = Hct.from_argb(design_color)
    to_hue = Hct.hue_of(source_color)
    difference = difference_degrees(from_hct.hue, to_hue)
    rotation = min(difference * 0.5, MAX_HARMONIZE_ROTATION)
    output_hue = sanitize_degrees_double(from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hue))
    return hct_solver.solve_to_int(output_hue, from_hct.chroma, from_hct.tone)


def hct_hue(from_color: int, to_color: int, amount: float) -> int:
    """
    Blend hue from one color into another, keeping chroma and tone.

    The hue is found by interpolating in CAM16-UCS, which follows perceived
    hue more closely than interpolating the angle.

    Args:
        from_color: ARGB of the color to shift
        to_color: ARGB of the color to shift toward
        amount: 0.0 keeps from_color's hue, 1.0 takes to_color's

    Returns:
        ARGB of from_color with the blended hue

    Raises:
        ValueError: If amount is outside [0, 1]
    """
    if not 0.0 <= amount <= 1.0:
        raise ValueError(f"amount must be within [0, 1], got {amount}")
    ucs = cam16_ucs(from_color, to_color, amount)
    ucs_cam = Cam16.from_argb(ucs)
    from_cam = Cam16.from_argb(from_color)
    return hct_solver.solve_to_int(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_color))


def cam16_ucs(from_color: int, to_color: int, amount: float) -> int:
    """
    Interpolate two colors linearly in CAM16-UCS.

    Unlike hct_hue, lightness and chroma move too.

    Args:
        from_color: ARGB of the start color
        to_color: ARGB of the end color
        amount: 0.0 returns from_color, 1.0 returns to_color

    Returns:
        ARGB of the interpolated color
    """
    from_cam = Cam16.from_argb(from_color)
    to_cam = Cam16.from_argb(to_color)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_argb()
