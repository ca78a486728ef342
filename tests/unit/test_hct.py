"""Tests for hct.py and hct_solver.py - HCT values and the solver."""

from __future__ import annotations

import dataclasses

import pytest

from aura_color import hct_solver
from aura_color.color_utils import lstar_from_argb
from aura_color.hct import Hct
from aura_color.math_utils import difference_degrees


def _channels(argb: int) -> tuple[int, int, int]:
    return (argb >> 16) & 255, (argb >> 8) & 255, argb & 255


def _on_gamut_boundary(argb: int) -> bool:
    return any(c in (0, 255) for c in _channels(argb))


class TestFromArgb:
    """Tests for Hct.from_argb()."""

    def test_red(self, red_hct):
        assert red_hct.hue == pytest.approx(27.408, abs=0.01)
        assert red_hct.chroma == pytest.approx(113.357, abs=0.01)
        assert red_hct.tone == pytest.approx(53.233, abs=0.01)
        assert red_hct.argb == 0xFFFF0000

    def test_hex(self, red_hct):
        assert red_hct.hex == "#ff0000"

    def test_hue_of(self):
        assert Hct.hue_of(0xFF0000FF) == pytest.approx(282.788, abs=0.01)

    def test_frozen(self, red_hct):
        with pytest.raises(dataclasses.FrozenInstanceError):
            red_hct.hue = 10.0  # type: ignore[misc]


class TestBoundaryTones:
    """Tone 0 and tone 100 each have exactly one color."""

    @pytest.mark.parametrize("hue", [0.0, 27.0, 120.0, 282.0, 359.0])
    @pytest.mark.parametrize("chroma", [0.0, 40.0, 150.0])
    def test_tone_zero_is_black(self, hue: float, chroma: float):
        assert Hct.from_hct(hue, chroma, 0.0).argb == 0xFF000000

    @pytest.mark.parametrize("hue", [0.0, 27.0, 120.0, 282.0, 359.0])
    @pytest.mark.parametrize("chroma", [0.0, 40.0, 150.0])
    def test_tone_hundred_is_white(self, hue: float, chroma: float):
        assert Hct.from_hct(hue, chroma, 100.0).argb == 0xFFFFFFFF

    def test_zero_chroma_is_gray(self):
        r, g, b = _channels(Hct.from_hct(200.0, 0.0, 60.0).argb)
        assert r == g == b


class TestRoundTrip:
    """Solving an existing color's coordinates reproduces the color."""

    @pytest.mark.parametrize(
        "argb",
        [0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFFFFFF00, 0xFF6750A4, 0xFF1A1B26, 0xFFC0CAF5, 0xFF94A3B8],
    )
    def test_preserves_color(self, argb: int):
        hct = Hct.from_argb(argb)
        reconstructed = Hct.from_hct(hct.hue, hct.chroma, hct.tone)
        assert reconstructed.tone == pytest.approx(hct.tone, abs=0.5)
        assert difference_degrees(reconstructed.hue, hct.hue) <= 0.5
        assert reconstructed.chroma == pytest.approx(hct.chroma, abs=1.0)

    def test_sufficiently_close(self):
        """Requested coordinates are met, or chroma is clipped at the gamut boundary."""
        for hue in range(15, 360, 30):
            for chroma in range(0, 101, 10):
                for tone in range(20, 81, 10):
                    color = Hct.from_hct(float(hue), float(chroma), float(tone))
                    if chroma > 0:
                        assert difference_degrees(color.hue, hue) <= 4.0
                    assert 0.0 <= color.chroma <= chroma + 2.5
                    if color.chroma < chroma - 2.5:
                        assert _on_gamut_boundary(color.argb)
                    assert color.tone == pytest.approx(tone, abs=0.5)


class TestGamutClamp:
    """Unreachable chroma is clamped, never rejected."""

    @pytest.mark.parametrize("hue,tone", [(120.0, 50.0), (282.0, 30.0), (27.0, 90.0), (200.0, 20.0)])
    def test_clamps_to_boundary(self, hue: float, tone: float):
        color = Hct.from_hct(hue, 200.0, tone)
        assert color.chroma < 200.0
        assert _on_gamut_boundary(color.argb)
        assert all(0 <= c <= 255 for c in _channels(color.argb))
        assert color.tone == pytest.approx(tone, abs=0.5)

    @pytest.mark.parametrize("hue,tone", [(120.0, 50.0), (282.0, 30.0), (27.0, 90.0), (200.0, 20.0)])
    def test_clamps_to_maximum_chroma(self, hue: float, tone: float):
        """No lower chroma request at the same hue and tone yields more chroma."""
        clamped = Hct.from_hct(hue, 200.0, tone)
        for chroma in range(5, 200, 5):
            assert clamped.chroma >= Hct.from_hct(hue, float(chroma), tone).chroma - 2.0

    @pytest.mark.parametrize("hue,tone", [(120.0, 50.0), (282.0, 30.0), (27.0, 90.0), (200.0, 20.0)])
    def test_clamped_chroma_is_reachable(self, hue: float, tone: float):
        """Requesting the clamped chroma directly lands on the same color."""
        clamped = Hct.from_hct(hue, 200.0, tone)
        again = Hct.from_hct(hue, clamped.chroma, tone)
        assert again.chroma == pytest.approx(clamped.chroma, abs=2.0)
        assert difference_degrees(again.hue, clamped.hue) <= 2.0
        assert again.tone == pytest.approx(clamped.tone, abs=0.5)

    def test_solver_matches_hct(self):
        assert hct_solver.solve_to_int(120.0, 200.0, 50.0) == Hct.from_hct(120.0, 200.0, 50.0).argb

    def test_solve_to_cam(self):
        cam = hct_solver.solve_to_cam(282.0, 40.0, 40.0)
        assert difference_degrees(cam.hue, 282.0) <= 1.0
        assert cam.chroma == pytest.approx(40.0, abs=1.0)

    def test_solver_tone_exact(self):
        argb = hct_solver.solve_to_int(50.0, 60.0, 65.0)
        assert lstar_from_argb(argb) == pytest.approx(65.0, abs=0.5)


class TestHueWrapping:
    """Hue is any angle; it wraps into [0, 360)."""

    def test_negative(self):
        assert Hct.from_hct(-30.0, 40.0, 50.0).argb == Hct.from_hct(330.0, 40.0, 50.0).argb

    def test_above_360(self):
        assert Hct.from_hct(390.0, 40.0, 50.0).argb == Hct.from_hct(30.0, 40.0, 50.0).argb


class TestCopy:
    """Tests for copy-with-one-field-changed."""

    def test_with_tone(self, source_hct):
        lighter = source_hct.with_tone(90.0)
        assert lighter.tone == pytest.approx(90.0, abs=0.5)
        assert difference_degrees(lighter.hue, source_hct.hue) <= 4.0
        assert source_hct.argb == 0xFF6750A4

    def test_with_hue(self, source_hct):
        rotated = source_hct.with_hue(source_hct.hue + 60.0)
        assert difference_degrees(rotated.hue, source_hct.hue + 60.0) <= 2.0
        assert rotated.tone == pytest.approx(source_hct.tone, abs=0.5)

    def test_with_chroma(self, source_hct):
        muted = source_hct.with_chroma(8.0)
        assert muted.chroma == pytest.approx(8.0, abs=1.0)
        assert muted.tone == pytest.approx(source_hct.tone, abs=0.5)

    def test_copy_without_changes_keeps_color(self, source_hct):
        assert source_hct.copy().argb == source_hct.argb

    def test_to_argb(self, source_hct):
        assert source_hct.to_argb() == 0xFF6750A4
