"""Depth and theme adjustment of base palette colors."""

from __future__ import annotations

from dataclasses import replace

from .colors import HSLColor

LIGHT_BASE_LIGHTNESS = 35
DARK_BASE_LIGHTNESS = 65
LIGHTNESS_STEP = 5  # Per position in the 3-level lightness cycle
LIGHTNESS_CYCLE = 3
SATURATION_STEP = 10  # Removed for every LIGHTNESS_CYCLE levels of depth
MIN_SATURATION = 40


def adjust_color(base: HSLColor, depth: int, is_dark: bool) -> HSLColor:
    """Adapt a base color to a nesting depth and display theme.

    Lightness restarts from a theme baseline and moves through a 3-step
    cycle (darker on dark themes, lighter on light themes), so neighbouring
    depths differ while depths three apart repeat. Saturation drops by
    ``SATURATION_STEP`` per full cycle, never below ``MIN_SATURATION``.

    Args:
        base: Palette color
        depth: Nesting depth (>= 0)
        is_dark: Whether the text is shown on a dark background

    Returns:
        New color; the hue is unchanged
    """
    baseline = DARK_BASE_LIGHTNESS if is_dark else LIGHT_BASE_LIGHTNESS
    step = -LIGHTNESS_STEP if is_dark else LIGHTNESS_STEP
    lightness = baseline + (depth % LIGHTNESS_CYCLE) * step

    saturation = max(MIN_SATURATION, base.s - (depth // LIGHTNESS_CYCLE) * SATURATION_STEP)

    return replace(base, s=saturation, l=lightness)
