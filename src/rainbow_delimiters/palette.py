"""Base hue palette for nesting levels."""

from __future__ import annotations

from .colors import HSLColor

DEFAULT_PALETTE_SIZE = 32
BASE_SATURATION = 70
BASE_LIGHTNESS = 50

Palette = tuple[HSLColor, ...]


def generate_base_colors(count: int = DEFAULT_PALETTE_SIZE) -> Palette:
    """Generate ``count`` colors evenly spaced around the hue circle.

    Hues start at 0 and step by ``360 / count``; saturation and lightness are
    fixed. The same count always yields the same palette.

    Args:
        count: Number of colors (0 gives an empty palette)

    Returns:
        Immutable tuple of base colors

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Palette size must not be negative, got {count}")
    if count == 0:
        return ()

    hue_step = 360 / count
    return tuple(HSLColor(i * hue_step, BASE_SATURATION, BASE_LIGHTNESS) for i in range(count))
