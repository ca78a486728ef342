"""
Detect and fix universally disliked colors.

Color science studies of preference agree that dark yellow-greens
("bile", "mucus") are the least liked colors. Lightening them is enough to
make them pleasant while keeping their hue and chroma.
"""

from __future__ import annotations

from .hct import Hct
from .math_utils import round_half_up

DISLIKED_HUE_MIN = 90
DISLIKED_HUE_MAX = 111
DISLIKED_CHROMA_ABOVE = 16
DISLIKED_TONE_BELOW = 65
FIXED_TONE = 70.0


def is_disliked(hct: Hct) -> bool:
    """Whether the color is a dark yellow-green."""
    hue_passes = DISLIKED_HUE_MIN <= round_half_up(hct.hue) <= DISLIKED_HUE_MAX
    chroma_passes = round_half_up(hct.chroma) > DISLIKED_CHROMA_ABOVE
    tone_passes = round_half_up(hct.tone) < DISLIKED_TONE_BELOW
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to tone 70; return anything else unchanged."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, FIXED_TONE)
    return hct
