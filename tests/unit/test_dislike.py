"""Tests for dislike.py - Dark yellow-green detection."""

from __future__ import annotations

import pytest

from aura_color.dislike import FIXED_TONE, fix_if_disliked, is_disliked
from aura_color.hct import Hct


class TestIsDisliked:
    """Tests for is_disliked()."""

    def test_olive_is_disliked(self, olive_hct):
        assert is_disliked(olive_hct)

    @pytest.mark.parametrize("argb", [0xFF95884B, 0xFF716B40, 0xFFB08E00, 0xFF4C4308, 0xFF464521])
    def test_known_disliked(self, argb: int):
        assert is_disliked(Hct.from_argb(argb))

    @pytest.mark.parametrize("argb", [0xFF0000FF, 0xFFFF0000, 0xFF6750A4, 0xFFFFFFFF])
    def test_liked(self, argb: int):
        assert not is_disliked(Hct.from_argb(argb))

    def test_low_chroma_is_fine(self):
        assert not is_disliked(Hct.from_hct(100.0, 10.0, 40.0))

    def test_light_tone_is_fine(self):
        assert not is_disliked(Hct.from_hct(100.0, 25.0, 75.0))


class TestFixIfDisliked:
    """Tests for fix_if_disliked()."""

    def test_lightens_olive(self, olive_hct):
        fixed = fix_if_disliked(olive_hct)
        assert fixed.tone == pytest.approx(FIXED_TONE, abs=0.5)
        assert not is_disliked(fixed)

    def test_liked_unchanged(self, source_hct):
        assert fix_if_disliked(source_hct) is source_hct
