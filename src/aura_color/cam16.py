"""
CAM16 color appearance model.

CAM16 predicts how a color looks under given viewing conditions, producing
correlates for hue, chroma, lightness (J), brightness (Q), colorfulness (M)
and saturation (s). It also defines CAM16-UCS, a uniform space (J*, a*, b*)
where Euclidean distance tracks perceived difference.

Only the fixed ``ViewingConditions.DEFAULT`` is used for conversion from
ARGB. Converting back with ``to_argb`` is approximate; use the HCT solver
when tone must be exact.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .color_utils import argb_from_xyz, xyz_from_argb
from .math_utils import matrix_multiply, signum
from .viewing_conditions import CAM16RGB_FROM_XYZ, ViewingConditions

# Inverse of viewing_conditions.CAM16RGB_FROM_XYZ
XYZ_FROM_CAM16RGB = np.array(
    [
        [1.86206786, -1.01125463, 0.14918677],
        [0.38752654, 0.62144744, -0.00897398],
        [-0.01584150, -0.03412294, 1.04996444],
    ]
)


@dataclass(frozen=True)
class Cam16:
    """
    CAM16 correlates of a single color.

    Attributes:
        hue: Hue angle in degrees, [0, 360)
        chroma: Colorfulness relative to a similarly lit white
        j: Lightness
        q: Brightness
        m: Colorfulness
        s: Saturation
        jstar: CAM16-UCS J*
        astar: CAM16-UCS a*
        bstar: CAM16-UCS b*
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: Cam16) -> float:
        """CAM16-UCS color difference, scaled to match CIEDE2000 perceptually."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * math.pow(d_e_prime, 0.63)

    @classmethod
    def from_argb(cls, argb: int) -> Cam16:
        """CAM16 correlates of an ARGB color under the default viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, ViewingConditions.DEFAULT)

    @classmethod
    def from_argb_in_viewing_conditions(cls, argb: int, vc: ViewingConditions) -> Cam16:
        x, y, z = xyz_from_argb(argb)
        return cls.from_xyz(x, y, z, vc)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, vc: ViewingConditions | None = None) -> Cam16:
        """
        CAM16 correlates of a color given in XYZ.

        Args:
            x, y, z: CIE XYZ with Y on a 0-100 scale
            vc: Viewing conditions, default if omitted
        """
        vc = vc or ViewingConditions.DEFAULT

        # Cone responses
        r_c, g_c, b_c = (float(v) for v in matrix_multiply((x, y, z), CAM16RGB_FROM_XYZ))

        # Chromatic adaptation
        r_d = vc.rgb_d[0] * r_c
        g_d = vc.rgb_d[1] * g_c
        b_d = vc.rgb_d[2] * b_c

        r_af = math.pow(vc.fl * abs(r_d) / 100.0, 0.42)
        g_af = math.pow(vc.fl * abs(g_d) / 100.0, 0.42)
        b_af = math.pow(vc.fl * abs(b_d) / 100.0, 0.42)
        r_a = signum(r_d) * 400.0 * r_af / (r_af + 27.13)
        g_a = signum(g_d) * 400.0 * g_af / (g_af + 27.13)
        b_a = signum(b_d) * 400.0 * b_af / (b_af + 27.13)

        # Opponent channels
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.degrees(math.atan2(b, a))
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = math.pow(1.64 - math.pow(0.29, vc.n), 0.73) * math.pow(t, 0.9)
        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)

        return cls(hue, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float, vc: ViewingConditions | None = None) -> Cam16:
        """Build from lightness J, chroma and hue in degrees."""
        vc = vc or ViewingConditions.DEFAULT
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = 0.0 if j == 0.0 else c / math.sqrt(j / 100.0)
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(h, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float, vc: ViewingConditions | None = None) -> Cam16:
        """Build from CAM16-UCS coordinates."""
        vc = vc or ViewingConditions.DEFAULT
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / vc.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch(j, c, h, vc)

    def to_argb(self) -> int:
        """ARGB of this color under the default viewing conditions."""
        return self.viewed(ViewingConditions.DEFAULT)

    def viewed(self, vc: ViewingConditions) -> int:
        """ARGB of this color when viewed under ``vc``."""
        x, y, z = self.xyz_in_viewing_conditions(vc)
        return argb_from_xyz(x, y, z)

    def xyz_in_viewing_conditions(self, vc: ViewingConditions) -> tuple[float, float, float]:
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(alpha / math.pow(1.64 - math.pow(0.29, vc.n), 0.73), 1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * math.pow(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c_base = max(0.0, (27.13 * abs(r_a)) / (400.0 - abs(r_a)))
        r_c = signum(r_a) * (100.0 / vc.fl) * math.pow(r_c_base, 1.0 / 0.42)
        g_c_base = max(0.0, (27.13 * abs(g_a)) / (400.0 - abs(g_a)))
        g_c = signum(g_a) * (100.0 / vc.fl) * math.pow(g_c_base, 1.0 / 0.42)
        b_c_base = max(0.0, (27.13 * abs(b_a)) / (400.0 - abs(b_a)))
        b_c = signum(b_a) * (100.0 / vc.fl) * math.pow(b_c_base, 1.0 / 0.42)

        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        x, y, z = matrix_multiply((r_f, g_f, b_f), XYZ_FROM_CAM16RGB)
        return float(x), float(y), float(z)
