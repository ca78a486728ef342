"""Shared pytest fixtures for aura-color tests."""

from __future__ import annotations

import pytest

from aura_color.hct import Hct


# =============================================================================
# Seed colors
# =============================================================================

@pytest.fixture
def red_hct():
    """Pure sRGB red (#ff0000)."""
    return Hct.from_argb(0xFFFF0000)


@pytest.fixture
def blue_hct():
    """Pure sRGB blue (#0000ff)."""
    return Hct.from_argb(0xFF0000FF)


@pytest.fixture
def source_hct():
    """A mid-tone purple, a typical brand seed color."""
    return Hct.from_argb(0xFF6750A4)


@pytest.fixture
def teal_seed():
    """A moderate seed at hue 200; every hue can reach its chroma at its tone."""
    return Hct.from_hct(200.0, 20.0, 50.0)


@pytest.fixture
def olive_hct():
    """A dark yellow-green, the kind of color the dislike fixer targets."""
    return Hct.from_hct(100.0, 25.0, 40.0)
