"""
Solve HCT (hue, chroma, tone) to an sRGB color.

There is no closed form: tone is CIE L*, a function of Y alone, while hue
and chroma come from CAM16. The solver fixes Y from the requested tone,
which pins the answer to a plane through the linear RGB cube, then

1. tries to hit the requested hue and chroma exactly with a Newton search
   on CAM16 lightness J, and
2. if that lands outside the cube, walks the edge of the plane's
   intersection with the cube to the point with the requested hue. That
   point has the highest chroma reachable at this hue and tone.

Both stages are bounded, so every call terminates after a fixed amount of
work.
"""

from __future__ import annotations

import math

import numpy as np

from .cam16 import Cam16
from .color_utils import argb_from_linrgb, argb_from_lstar, linearized, y_from_lstar
from .math_utils import matrix_multiply, sanitize_degrees_double, signum
from .viewing_conditions import ViewingConditions

SCALED_DISCOUNT_FROM_LINRGB = np.array(
    [
        [0.001200833568784504, 0.002389694492170889, 0.0002795742885861124],
        [0.0005891086651375999, 0.0029785502573438758, 0.0003270666104008398],
        [0.00010146692491640572, 0.0005364214359186694, 0.0032979401770712076],
    ]
)

LINRGB_FROM_SCALED_DISCOUNT = np.array(
    [
        [1373.2198709594231, -1100.4251190754821, -7.278681089101213],
        [-271.815969077903, 559.6580465940733, -32.46047482791194],
        [1.9622899599665666, -57.173814538844006, 308.7233197812385],
    ]
)

Y_FROM_LINRGB = (0.2126, 0.7152, 0.0722)


# Linear values halfway between adjacent 8-bit channel values. Crossing one
# of these planes changes the rounded channel.
CRITICAL_PLANES = tuple(linearized(i + 0.5) for i in range(255))

_NO_VERTEX = (-1.0, -1.0, -1.0)


def _sanitize_radians(angle: float) -> float:
    return (angle + math.pi * 8) % (math.pi * 2)


def _true_delinearized(rgb_component: float) -> float:
    """Delinearize to a 0-255 value without rounding."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized = normalized * 12.92
    else:
        delinearized = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return delinearized * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = math.pow(abs(component), 0.42)
    return signum(component) * 400.0 * af / (af + 27.13)


def _hue_of(linrgb) -> float:
    """CAM16 hue of a linear RGB color, in radians."""
    scaled_discount = matrix_multiply(linrgb, SCALED_DISCOUNT_FROM_LINRGB)
    r_a = _chromatic_adaptation(float(scaled_discount[0]))
    g_a = _chromatic_adaptation(float(scaled_discount[1]))
    b_a = _chromatic_adaptation(float(scaled_discount[2]))
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    delta_a_b = _sanitize_radians(b - a)
    delta_a_c = _sanitize_radians(c - a)
    return delta_a_b < delta_a_c


def _intercept(source: float, mid: float, target: float) -> float:
    """Fraction of the way from source to target where mid lies."""
    return (mid - source) / (target - source)


def _lerp_point(source, t: float, target) -> tuple[float, float, float]:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source, coordinate: float, target, axis: int) -> tuple[float, float, float]:
    t = _intercept(source[axis], coordinate, target[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> tuple[float, float, float]:
    """
    The nth possible vertex of the polygon where the plane of constant Y
    cuts the RGB cube.

    Args:
        y: Relative luminance, 0-100
        n: Index in 0..11, one per cube edge

    Returns:
        Linear RGB of the vertex, or (-1, -1, -1) if this edge does not
        intersect the plane
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g = coord_a
        b = coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else _NO_VERTEX
    if n < 8:
        b = coord_a
        r = coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else _NO_VERTEX
    r = coord_a
    g = coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else _NO_VERTEX


def _bisect_to_segment(y: float, target_hue: float):
    """Find the polygon edge whose endpoint hues bracket the target hue."""
    left = _NO_VERTEX
    right = left
    left_hue = 0.0
    right_hue = 0.0
    initialized = False
    uncut = True
    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid[0] < 0:
            continue
        mid_hue = _hue_of(mid)
        if not initialized:
            left = mid
            right = mid
            left_hue = mid_hue
            right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue
    return left, right


def _midpoint(a, b) -> tuple[float, float, float]:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2, (a[2] + b[2]) / 2)


def _critical_plane_below(x: float) -> int:
    return int(math.floor(x - 0.5))


def _critical_plane_above(x: float) -> int:
    return int(math.ceil(x - 0.5))


def _bisect_to_limit(y: float, target_hue: float) -> tuple[float, float, float]:
    """
    Narrow the bracketing edge down to the target hue.

    Each axis is bisected over the critical planes between the two
    endpoints, so the result is accurate to one 8-bit step.
    """
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)
    for axis in range(3):
        if left[axis] != right[axis]:
            if left[axis] < right[axis]:
                l_plane = _critical_plane_below(_true_delinearized(left[axis]))
                r_plane = _critical_plane_above(_true_delinearized(right[axis]))
            else:
                l_plane = _critical_plane_above(_true_delinearized(left[axis]))
                r_plane = _critical_plane_below(_true_delinearized(right[axis]))
            for _ in range(8):
                if abs(r_plane - l_plane) <= 1:
                    break
                m_plane = int(math.floor((l_plane + r_plane) / 2.0))
                mid_plane_coordinate = CRITICAL_PLANES[m_plane]
                mid = _set_coordinate(left, mid_plane_coordinate, right, axis)
                mid_hue = _hue_of(mid)
                if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                    right = mid
                    r_plane = m_plane
                else:
                    left = mid
                    left_hue = mid_hue
                    l_plane = m_plane
    return _midpoint(left, right)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return signum(adapted) * math.pow(base, 1.0 / 0.42)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> int:
    """
    Newton search for an exact in-gamut answer.

    Returns:
        ARGB of the solution, or 0 if none was found inside the cube
    """
    # Initial estimate of J assumes the color is achromatic
    j = math.sqrt(y) * 11.0
    vc = ViewingConditions.DEFAULT
    t_inner_coeff = 1 / math.pow(1.64 - math.pow(0.29, vc.n), 0.73)
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    k_r, k_g, k_b = Y_FROM_LINRGB
    for iteration_round in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = math.pow(alpha * t_inner_coeff, 1.0 / 0.9)
        ac = vc.aw * math.pow(j_normalized, 1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        r_c_scaled = _inverse_chromatic_adaptation(r_a)
        g_c_scaled = _inverse_chromatic_adaptation(g_a)
        b_c_scaled = _inverse_chromatic_adaptation(b_a)
        linrgb = matrix_multiply((r_c_scaled, g_c_scaled, b_c_scaled), LINRGB_FROM_SCALED_DISCOUNT)
        if linrgb[0] < 0 or linrgb[1] < 0 or linrgb[2] < 0:
            return 0
        fnj = k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]
        if fnj <= 0:
            return 0
        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if linrgb[0] > 100.01 or linrgb[1] > 100.01 or linrgb[2] > 100.01:
                return 0
            return argb_from_linrgb(linrgb)
        # 2 * fn(j) / j approximates fn'(j)
        j = j - (fnj - y) * j / (2 * fnj)
    return 0


def solve_to_int(hue_degrees: float, chroma: float, lstar: float) -> int:
    """
    Find the sRGB color with the given hue, chroma and L*, if possible.

    When the requested chroma is out of gamut, the result keeps hue and L*
    and has the highest chroma available.

    Args:
        hue_degrees: CAM16 hue, any angle (wrapped into [0, 360))
        chroma: CAM16 chroma, >= 0
        lstar: CIE L*, 0-100

    Returns:
        ARGB of the color
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return argb_from_lstar(lstar)
    hue_degrees = sanitize_degrees_double(hue_degrees)
    hue_radians = hue_degrees / 180 * math.pi
    y = y_from_lstar(lstar)
    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer != 0:
        return exact_answer
    linrgb = _bisect_to_limit(y, hue_radians)
    return argb_from_linrgb(linrgb)


def solve_to_cam(hue_degrees: float, chroma: float, lstar: float) -> Cam16:
    """Same as solve_to_int, returning the CAM16 correlates of the result."""
    return Cam16.from_argb(solve_to_int(hue_degrees, chroma, lstar))
