"""Tonal palettes: one hue and chroma at every tone."""

from __future__ import annotations

from .hct import Hct

# Tone of the key color built for a bare (hue, chroma) pair
KEY_COLOR_TONE = 50.0

# Integer tones memoized by TonalPalette.tone()
MIN_TONE = 0
MAX_TONE = 100


class TonalPalette:
    """
    All colors sharing a hue and chroma, indexed by tone.

    Tones are solved lazily. Integer tones 0-100 are memoized; the memo holds
    only derived values and may be dropped at any time. Hue, chroma and key
    color are fixed at construction.
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct):
        self._hue = hue
        self._chroma = chroma
        self._key_color = key_color
        self._cache: dict[int, int] = {}

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        """Palette with the hue and chroma of ``hct``, which becomes the key color."""
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> TonalPalette:
        return cls(hue, chroma, Hct.from_hct(hue, chroma, KEY_COLOR_TONE))

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def key_color(self) -> Hct:
        return self._key_color

    def tone(self, tone: int) -> int:
        """
        ARGB of this palette at the given tone.

        Args:
            tone: L*, 0-100. Tones outside the integers 0-100 are solved
                without being memoized.

        Returns:
            ARGB; chroma is clamped where the gamut requires it
        """
        if not isinstance(tone, int) or not MIN_TONE <= tone <= MAX_TONE:
            return self.get_hct(tone).argb
        argb = self._cache.get(tone)
        if argb is None:
            argb = Hct.from_hct(self._hue, self._chroma, float(tone)).argb
            self._cache[tone] = argb
        return argb

    def get_hct(self, tone: float) -> Hct:
        """HCT of this palette at any tone, including fractional ones."""
        return Hct.from_hct(self._hue, self._chroma, tone)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self._hue:.1f}, chroma={self._chroma:.1f})"
