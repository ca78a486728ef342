"""
Dynamic schemes: five tonal palettes derived from one source color.

Each ``Variant`` maps to a recipe, a pure function from the source color's
HCT to the hue and chroma of the primary, secondary, tertiary, neutral and
neutral variant palettes. Dark mode and contrast level are carried on the
scheme for whoever assigns tones to roles; they never change the palettes.

Usage:
    scheme = DynamicScheme.from_variant(Hct.from_argb(0xFF6750A4), Variant.CONTENT)
    scheme.get_argb(PaletteRole.PRIMARY, 40)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol, Sequence, runtime_checkable

from .dislike import fix_if_disliked
from .hct import Hct
from .math_utils import sanitize_degrees_double
from .palettes import TonalPalette
from .temperature import TemperatureCache

logger = logging.getLogger(__name__)

# Error palette shared by every variant
ERROR_HUE = 25.0
ERROR_CHROMA = 84.0

# Hue breakpoints for variants whose rotation depends on the source hue
ROTATION_HUES = (0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0)
VIBRANT_SECONDARY_ROTATIONS = (18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0, 12.0)
VIBRANT_TERTIARY_ROTATIONS = (35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0, 25.0)
EXPRESSIVE_SECONDARY_ROTATIONS = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0)
EXPRESSIVE_TERTIARY_ROTATIONS = (120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0, 120.0)


class Variant(Enum):
    """Palette derivation strategies."""

    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit_salad"


class PaletteRole(Enum):
    """Palettes a scheme exposes for color roles."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    NEUTRAL = "neutral"
    NEUTRAL_VARIANT = "neutral_variant"
    ERROR = "error"


@dataclass(frozen=True)
class SchemePalettes:
    """The five palettes a variant recipe produces."""

    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette


def rotated_hue(source: Hct, hues: Sequence[float], rotations: Sequence[float]) -> float:
    """
    Rotate the source hue by the amount assigned to its hue interval.

    Args:
        source: Source color
        hues: Ascending breakpoints, 0 through 360
        rotations: Rotation for the interval starting at each breakpoint. A
            single rotation applies to every hue.

    Returns:
        Rotated hue in [0, 360). A source hue sitting exactly on a breakpoint
        is returned unrotated.
    """
    source_hue = source.hue
    if len(rotations) == 1:
        return sanitize_degrees_double(source_hue + rotations[0])
    for i in range(len(hues) - 1):
        if hues[i] < source_hue < hues[i + 1]:
            return sanitize_degrees_double(source_hue + rotations[i])
    # Source hue falls on a breakpoint
    return source_hue


def _palette(hue: float, chroma: float) -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue), chroma)


def content_palettes(source: Hct) -> SchemePalettes:
    """
    Primary holds the source color as-is; tertiary is its analog when the
    wheel is divided in six, found by increasing hue.
    """
    tertiary = TemperatureCache(source).analogous_color_at(count=3, divisions=6, index=2)
    return SchemePalettes(
        primary=_palette(source.hue, source.chroma),
        secondary=_palette(source.hue, max(source.chroma - 32.0, source.chroma * 0.5)),
        tertiary=TonalPalette.from_hct(fix_if_disliked(tertiary)),
        neutral=_palette(source.hue, source.chroma / 8.0),
        neutral_variant=_palette(source.hue, source.chroma / 8.0 + 4.0),
    )


def fidelity_palettes(source: Hct) -> SchemePalettes:
    """Like content, with the temperature complement as tertiary."""
    tertiary = TemperatureCache(source).complement
    return SchemePalettes(
        primary=_palette(source.hue, source.chroma),
        secondary=_palette(source.hue, max(source.chroma - 32.0, source.chroma * 0.5)),
        tertiary=TonalPalette.from_hct(fix_if_disliked(tertiary)),
        neutral=_palette(source.hue, source.chroma / 8.0),
        neutral_variant=_palette(source.hue, source.chroma / 8.0 + 4.0),
    )


def vibrant_palettes(source: Hct) -> SchemePalettes:
    """A loud theme: primary at maximum colorfulness, the rest raised."""
    return SchemePalettes(
        primary=_palette(source.hue, 200.0),
        secondary=_palette(rotated_hue(source, ROTATION_HUES, VIBRANT_SECONDARY_ROTATIONS), 24.0),
        tertiary=_palette(rotated_hue(source, ROTATION_HUES, VIBRANT_TERTIARY_ROTATIONS), 32.0),
        neutral=_palette(source.hue, 10.0),
        neutral_variant=_palette(source.hue, 12.0),
    )


def expressive_palettes(source: Hct) -> SchemePalettes:
    """A playful theme whose primary deliberately leaves the source hue."""
    return SchemePalettes(
        primary=_palette(source.hue + 240.0, 40.0),
        secondary=_palette(rotated_hue(source, ROTATION_HUES, EXPRESSIVE_SECONDARY_ROTATIONS), 24.0),
        tertiary=_palette(rotated_hue(source, ROTATION_HUES, EXPRESSIVE_TERTIARY_ROTATIONS), 32.0),
        neutral=_palette(source.hue + 15.0, 8.0),
        neutral_variant=_palette(source.hue + 15.0, 12.0),
    )


def tonal_spot_palettes(source: Hct) -> SchemePalettes:
    """Calm theme with a muted source hue and a 60 degree tertiary accent."""
    return SchemePalettes(
        primary=_palette(source.hue, 36.0),
        secondary=_palette(source.hue, 16.0),
        tertiary=_palette(source.hue + 60.0, 24.0),
        neutral=_palette(source.hue, 6.0),
        neutral_variant=_palette(source.hue, 8.0),
    )


def neutral_palettes(source: Hct) -> SchemePalettes:
    return SchemePalettes(
        primary=_palette(source.hue, 12.0),
        secondary=_palette(source.hue, 8.0),
        tertiary=_palette(source.hue, 16.0),
        neutral=_palette(source.hue, 2.0),
        neutral_variant=_palette(source.hue, 2.0),
    )


def monochrome_palettes(source: Hct) -> SchemePalettes:
    return SchemePalettes(
        primary=_palette(source.hue, 0.0),
        secondary=_palette(source.hue, 0.0),
        tertiary=_palette(source.hue, 0.0),
        neutral=_palette(source.hue, 0.0),
        neutral_variant=_palette(source.hue, 0.0),
    )


def rainbow_palettes(source: Hct) -> SchemePalettes:
    """Chromatic accents over grayscale neutrals."""
    return SchemePalettes(
        primary=_palette(source.hue, 48.0),
        secondary=_palette(source.hue, 16.0),
        tertiary=_palette(source.hue + 60.0, 24.0),
        neutral=_palette(source.hue, 0.0),
        neutral_variant=_palette(source.hue, 0.0),
    )


def fruit_salad_palettes(source: Hct) -> SchemePalettes:
    """Primary and secondary rotated 50 degrees back; tertiary keeps the source hue."""
    return SchemePalettes(
        primary=_palette(source.hue - 50.0, 48.0),
        secondary=_palette(source.hue - 50.0, 36.0),
        tertiary=_palette(source.hue, 36.0),
        neutral=_palette(source.hue, 10.0),
        neutral_variant=_palette(source.hue, 16.0),
    )


VARIANT_RECIPES: dict[Variant, Callable[[Hct], SchemePalettes]] = {
    Variant.MONOCHROME: monochrome_palettes,
    Variant.NEUTRAL: neutral_palettes,
    Variant.TONAL_SPOT: tonal_spot_palettes,
    Variant.VIBRANT: vibrant_palettes,
    Variant.EXPRESSIVE: expressive_palettes,
    Variant.FIDELITY: fidelity_palettes,
    Variant.CONTENT: content_palettes,
    Variant.RAINBOW: rainbow_palettes,
    Variant.FRUIT_SALAD: fruit_salad_palettes,
}


@runtime_checkable
class ToneMapper(Protocol):
    """Chooses the tone a role uses in a scheme, e.g. from contrast and mode."""

    def tone_for(self, scheme: DynamicScheme, role: PaletteRole) -> float:
        """Tone (L*, 0-100) for ``role`` in ``scheme``."""
        ...


@dataclass(frozen=True)
class DynamicScheme:
    """
    A source color, a variant, a mode and a contrast level, with the
    palettes the variant derives from the source.

    Attributes:
        source_color_hct: Seed color
        variant: Recipe the palettes came from
        is_dark: Dark mode flag, for tone mapping
        contrast_level: -1.0 (reduced) to 1.0 (high), 0.0 is standard
    """

    source_color_hct: Hct
    variant: Variant
    is_dark: bool
    contrast_level: float
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette = field(
        default_factory=lambda: TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA)
    )

    def __post_init__(self):
        if not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(f"contrast_level must be within [-1, 1], got {self.contrast_level}")

    @classmethod
    def from_variant(
        cls,
        source_color_hct: Hct,
        variant: Variant,
        is_dark: bool = False,
        contrast_level: float = 0.0,
    ) -> DynamicScheme:
        """Build a scheme by running the variant's recipe on the source color."""
        palettes = VARIANT_RECIPES[variant](source_color_hct)
        logger.debug(
            "Built %s scheme from %s: primary %r, secondary %r, tertiary %r",
            variant.value,
            source_color_hct,
            palettes.primary,
            palettes.secondary,
            palettes.tertiary,
        )
        return cls(
            source_color_hct=source_color_hct,
            variant=variant,
            is_dark=is_dark,
            contrast_level=contrast_level,
            primary_palette=palettes.primary,
            secondary_palette=palettes.secondary,
            tertiary_palette=palettes.tertiary,
            neutral_palette=palettes.neutral,
            neutral_variant_palette=palettes.neutral_variant,
        )

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.argb

    def palette(self, role: PaletteRole) -> TonalPalette:
        return {
            PaletteRole.PRIMARY: self.primary_palette,
            PaletteRole.SECONDARY: self.secondary_palette,
            PaletteRole.TERTIARY: self.tertiary_palette,
            PaletteRole.NEUTRAL: self.neutral_palette,
            PaletteRole.NEUTRAL_VARIANT: self.neutral_variant_palette,
            PaletteRole.ERROR: self.error_palette,
        }[role]

    def get_argb(self, role: PaletteRole, tone: int) -> int:
        """ARGB of a role's palette at an integer tone."""
        return self.palette(role).tone(tone)

    def get_hct(self, role: PaletteRole, tone: float) -> Hct:
        return self.palette(role).get_hct(tone)

    def resolve(self, role: PaletteRole, mapper: ToneMapper) -> int:
        """ARGB of a role at the tone chosen by ``mapper``."""
        return self.palette(role).get_hct(mapper.tone_for(self, role)).argb


def scheme_content(source_color_hct: Hct, is_dark: bool = False, contrast_level: float = 0.0) -> DynamicScheme:
    return DynamicScheme.from_variant(source_color_hct, Variant.CONTENT, is_dark, contrast_level)


def scheme_vibrant(source_color_hct: Hct, is_dark: bool = False, contrast_level: float = 0.0) -> DynamicScheme:
    return DynamicScheme.from_variant(source_color_hct, Variant.VIBRANT, is_dark, contrast_level)


def scheme_tonal_spot(source_color_hct: Hct, is_dark: bool = False, contrast_level: float = 0.0) -> DynamicScheme:
    return DynamicScheme.from_variant(source_color_hct, Variant.TONAL_SPOT, is_dark, contrast_level)


def scheme_fidelity(source_color_hct: Hct, is_dark: bool = False, contrast_level: float = 0.0) -> DynamicScheme:
    return DynamicScheme.from_variant(source_color_hct, Variant.FIDELITY, is_dark, contrast_level)
