"""Rainbow delimiters: color brackets by nesting depth."""

from rainbow_delimiters.adjust import adjust_color
from rainbow_delimiters.colorizer import (
    Decoration,
    DelimiterKind,
    RainbowDelimiters,
    ScanResult,
    colorize,
    render,
    strip_markup,
)
from rainbow_delimiters.colors import (
    HSLColor,
    RGBColor,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hsl,
    to_hex,
)
from rainbow_delimiters.palette import generate_base_colors

__all__ = [
    "Decoration",
    "DelimiterKind",
    "HSLColor",
    "RGBColor",
    "RainbowDelimiters",
    "ScanResult",
    "adjust_color",
    "colorize",
    "generate_base_colors",
    "hsl_to_hex",
    "hsl_to_rgb",
    "render",
    "rgb_to_hsl",
    "strip_markup",
    "to_hex",
]
