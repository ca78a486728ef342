"""aura-color: HCT color science and dynamic color schemes."""

from .blend import cam16_ucs, harmonize, hct_hue
from .cam16 import Cam16
from .color_utils import argb_from_hex, hex_from_argb
from .dislike import fix_if_disliked, is_disliked
from .hct import Hct
from .palettes import TonalPalette
from .scheme import DynamicScheme, PaletteRole, ToneMapper, Variant
from .temperature import TemperatureCache, raw_temperature
from .viewing_conditions import ViewingConditions

__all__ = [
    "Cam16",
    "ViewingConditions",
    "Hct",
    "TemperatureCache",
    "raw_temperature",
    "harmonize",
    "hct_hue",
    "cam16_ucs",
    "TonalPalette",
    "is_disliked",
    "fix_if_disliked",
    "DynamicScheme",
    "PaletteRole",
    "ToneMapper",
    "Variant",
    "hex_from_argb",
    "argb_from_hex",
]
