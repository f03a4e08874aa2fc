"""Tests for depth and theme color adjustment."""

import pytest

from rainbow_delimiters.adjust import adjust_color
from rainbow_delimiters.colors import HSLColor

BASE = HSLColor(90.0, 70, 50)


@pytest.mark.parametrize(
    ("depth", "expected"),
    [(0, 35), (1, 40), (2, 45), (3, 35), (4, 40), (5, 45)],
)
def test_light_theme_lightness_cycle(depth: int, expected: int) -> None:
    """Test the three step lightness cycle on a light theme."""
    assert adjust_color(BASE, depth, is_dark=False).l == expected


@pytest.mark.parametrize(
    ("depth", "expected"),
    [(0, 65), (1, 60), (2, 55), (3, 65), (4, 60), (5, 55)],
)
def test_dark_theme_lightness_cycle(depth: int, expected: int) -> None:
    """Test the three step lightness cycle on a dark theme."""
    assert adjust_color(BASE, depth, is_dark=True).l == expected


@pytest.mark.parametrize(
    ("depth", "expected"),
    [(0, 70), (2, 70), (3, 60), (5, 60), (6, 50), (9, 40), (30, 40)],
)
def test_saturation_fades_with_depth(depth: int, expected: int) -> None:
    """Test saturation drops every three levels and stops at 40."""
    assert adjust_color(BASE, depth, is_dark=False).s == expected
    assert adjust_color(BASE, depth, is_dark=True).s == expected


def test_hue_preserved_and_base_untouched() -> None:
    """Test that adjustment keeps the hue and returns a new value."""
    adjusted = adjust_color(BASE, 4, is_dark=True)

    assert adjusted.h == BASE.h
    assert adjusted is not BASE
    assert BASE == HSLColor(90.0, 70, 50)
