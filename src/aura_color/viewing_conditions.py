"""CAM16 viewing conditions.

The appearance of a color depends on its surroundings. CAM16 folds those
surroundings into a handful of derived parameters, computed once here.
Everything in this package uses ``ViewingConditions.DEFAULT``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from .color_utils import WHITE_POINT_D65, y_from_lstar
from .math_utils import clamp_double, lerp, matrix_multiply

# XYZ to CAM16 cone response
CAM16RGB_FROM_XYZ = np.array(
    [
        [0.401288, 0.650173, -0.051461],
        [-0.250268, 1.204414, 0.045854],
        [-0.002079, 0.048952, 0.953127],
    ]
)


@dataclass(frozen=True)
class ViewingConditions:
    """Derived CAM16 parameters for one set of viewing conditions."""

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    DEFAULT: ClassVar[ViewingConditions]

    @classmethod
    def make(
        cls,
        white_point: tuple[float, float, float] = WHITE_POINT_D65,
        adapting_luminance: float | None = None,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> ViewingConditions:
        """
        Build viewing conditions from physical parameters.

        Args:
            white_point: XYZ of the adapted white, Y = 100
            adapting_luminance: Luminance of the adapting field in cd/m^2.
                Defaults to a 200 lux room, ``200/pi * Y(L*=50) / 100``.
            background_lstar: L* of the background around the color
            surround: 0 is dark (movie theater), 1 dim, 2 average
            discounting_illuminant: Whether the eye fully adapts to the
                illuminant

        Returns:
            ViewingConditions
        """
        if adapting_luminance is None:
            adapting_luminance = 200.0 / math.pi * y_from_lstar(50.0) / 100.0
        background_lstar = max(0.1, background_lstar)

        r_w, g_w, b_w = (float(v) for v in matrix_multiply(white_point, CAM16RGB_FROM_XYZ))

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp_double(0.0, 1.0, d)

        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb

        rgb_a_factors = [
            math.pow(fl * rgb_d[0] * r_w / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * g_w / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * b_w / 100.0, 0.42),
        ]
        rgb_a = [400.0 * factor / (factor + 27.13) for factor in rgb_a_factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=f,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )


ViewingConditions.DEFAULT = ViewingConditions.make()
