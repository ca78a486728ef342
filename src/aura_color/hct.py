"""
HCT: hue, chroma, tone.

Hue and chroma are CAM16's, tone is CIE L*. Tone alone determines contrast
between two colors, which makes HCT convenient for building palettes with
guaranteed contrast.

An ``Hct`` always describes a real sRGB color: constructing one from hue,
chroma and tone solves to the closest displayable color and stores *that*
color's coordinates. Asking for more chroma than the gamut allows is not an
error; compare the requested and stored chroma to detect it.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import hct_solver
from .cam16 import Cam16
from .color_utils import hex_from_argb, lstar_from_argb


@dataclass(frozen=True)
class Hct:
    """An sRGB color expressed in HCT."""

    hue: float
    chroma: float
    tone: float
    argb: int

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Hct:
        """
        Solve hue, chroma and tone to the closest sRGB color.

        Args:
            hue: Any angle in degrees, wrapped into [0, 360)
            chroma: Requested chroma; clamped to what the gamut allows
            tone: L*, 0-100
        """
        return cls.from_argb(hct_solver.solve_to_int(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> Hct:
        cam = Cam16.from_argb(argb)
        return cls(hue=cam.hue, chroma=cam.chroma, tone=lstar_from_argb(argb), argb=argb)

    @staticmethod
    def hue_of(argb: int) -> float:
        """HCT hue of an ARGB color without building a full Hct."""
        return Cam16.from_argb(argb).hue

    def to_argb(self) -> int:
        return self.argb

    @property
    def hex(self) -> str:
        return hex_from_argb(self.argb)

    def copy(
        self,
        hue: float | None = None,
        chroma: float | None = None,
        tone: float | None = None,
    ) -> Hct:
        """A new color with the given fields replaced, re-solved to sRGB."""
        return Hct.from_hct(
            self.hue if hue is None else hue,
            self.chroma if chroma is None else chroma,
            self.tone if tone is None else tone,
        )

    def with_hue(self, hue: float) -> Hct:
        return self.copy(hue=hue)

    def with_chroma(self, chroma: float) -> Hct:
        return self.copy(chroma=chroma)

    def with_tone(self, tone: float) -> Hct:
        return self.copy(tone=tone)

    def __str__(self) -> str:
        return f"HCT({self.hue:.0f}, {self.chroma:.0f}, {self.tone:.0f})"
