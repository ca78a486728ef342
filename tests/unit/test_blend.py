"""Tests for blend.py - Harmonizing and interpolating colors."""

from __future__ import annotations

import pytest

from aura_color.blend import MAX_HARMONIZE_ROTATION, cam16_ucs, harmonize, hct_hue
from aura_color.hct import Hct
from aura_color.math_utils import difference_degrees, rotation_direction

RED = 0xFFFF0000
BLUE = 0xFF0000FF
GREEN = 0xFF00FF00
YELLOW = 0xFFFFFF00


def _channels(argb: int) -> tuple[int, int, int]:
    return (argb >> 16) & 255, (argb >> 8) & 255, argb & 255


class TestHarmonize:
    """Tests for harmonize() against known results."""

    @pytest.mark.parametrize(
        "design,source,expected",
        [
            (RED, BLUE, 0xFFFB0057),
            (RED, GREEN, 0xFFD85600),
            (RED, YELLOW, 0xFFD85600),
            (BLUE, GREEN, 0xFF0047A3),
            (BLUE, RED, 0xFF5700DC),
            (BLUE, YELLOW, 0xFF0047A3),
            (GREEN, BLUE, 0xFF00FC94),
            (GREEN, RED, 0xFFB1F000),
            (GREEN, YELLOW, 0xFFB1F000),
            (YELLOW, BLUE, 0xFFEBFFBA),
            (YELLOW, GREEN, 0xFFEBFFBA),
            (YELLOW, RED, 0xFFFFF6E3),
        ],
    )
    def test_known_results(self, design: int, source: int, expected: int):
        assert harmonize(design, source) == expected

    def test_same_color_unchanged(self, source_hct):
        assert harmonize(source_hct.argb, source_hct.argb) == source_hct.argb

    def test_rotation_is_capped(self):
        design = Hct.from_argb(RED)
        result = Hct.from_argb(harmonize(RED, BLUE))
        assert difference_degrees(design.hue, result.hue) <= MAX_HARMONIZE_ROTATION + 1.0

    def test_rotates_toward_source(self):
        design = Hct.from_argb(BLUE)
        source_hue = Hct.hue_of(RED)
        result = Hct.from_argb(harmonize(BLUE, RED))
        assert difference_degrees(result.hue, source_hue) < difference_degrees(design.hue, source_hue)
        assert rotation_direction(design.hue, result.hue) == rotation_direction(design.hue, source_hue)

    def test_small_difference_rotates_half(self):
        """Below the cap the design color moves halfway to the source hue."""
        design = Hct.from_hct(200.0, 30.0, 50.0)
        source = Hct.from_hct(210.0, 30.0, 50.0)
        result = Hct.from_argb(harmonize(design.argb, source.argb))
        expected = design.hue + difference_degrees(design.hue, source.hue) / 2
        assert difference_degrees(result.hue, expected) <= 1.5

    def test_keeps_tone(self, source_hct):
        result = Hct.from_argb(harmonize(source_hct.argb, GREEN))
        assert result.tone == pytest.approx(source_hct.tone, abs=0.5)


class TestHctHue:
    """Tests for hct_hue() - hue blending at fixed chroma and tone."""

    def test_amount_zero_keeps_hue(self, source_hct):
        result = Hct.from_argb(hct_hue(source_hct.argb, RED, 0.0))
        assert difference_degrees(result.hue, source_hct.hue) <= 1.0

    def test_amount_one_takes_hue(self, source_hct):
        result = Hct.from_argb(hct_hue(source_hct.argb, RED, 1.0))
        assert difference_degrees(result.hue, Hct.hue_of(RED)) <= 2.0

    def test_keeps_tone(self, source_hct):
        result = Hct.from_argb(hct_hue(source_hct.argb, GREEN, 0.5))
        assert result.tone == pytest.approx(source_hct.tone, abs=0.5)

    @pytest.mark.parametrize("amount", [-0.1, 1.5])
    def test_amount_out_of_range(self, amount: float):
        with pytest.raises(ValueError):
            hct_hue(RED, BLUE, amount)


class TestCam16Ucs:
    """Tests for cam16_ucs() - linear interpolation in CAM16-UCS."""

    @pytest.mark.parametrize("amount,expected", [(0.0, RED), (1.0, BLUE)])
    def test_endpoints(self, amount: float, expected: int):
        result = cam16_ucs(RED, BLUE, amount)
        for actual, wanted in zip(_channels(result), _channels(expected)):
            assert abs(actual - wanted) <= 1

    def test_midpoint_between_tones(self):
        red_tone = Hct.from_argb(RED).tone
        blue_tone = Hct.from_argb(BLUE).tone
        middle = Hct.from_argb(cam16_ucs(RED, BLUE, 0.5)).tone
        assert min(red_tone, blue_tone) < middle < max(red_tone, blue_tone)
