"""Color values and conversions between HSL, RGB and hex text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .exceptions import ColorParseError

# Constants for color calculations
HEX_COLOR_SHORT_LENGTH = 3  # Length of shorthand hex colors (#RGB)
HEX_COLOR_FULL_LENGTH = 6  # Length of full hex colors (#RRGGBB)
HUE_SEXTANT = 60  # Degrees covered by each hue sextant
HSL_LIGHTNESS_MIDPOINT = 0.5  # HSL lightness midpoint for saturation formula

# Perceived brightness weights (ITU-R BT.601)
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

_CSS_RGB_PATTERN = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)")


@dataclass(frozen=True)
class HSLColor:
    """Color as hue (degrees), saturation and lightness (percent)."""

    h: float
    s: float
    l: float  # noqa: E741 - conventional HSL component name


@dataclass(frozen=True)
class RGBColor:
    """Color as integer red, green and blue channels (0-255)."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return to_hex(self.r, self.g, self.b)


def _round_channel(value: float) -> int:
    # Round half up, matching how browsers round CSS channel values
    return math.floor(value * 255 + 0.5)


def hsl_to_rgb(h: float, s: float, lightness: float) -> RGBColor:
    """Convert HSL to RGB.

    Args:
        h: Hue in degrees (0-360); callers reduce out-of-range hues themselves
        s: Saturation as percentage (0-100)
        lightness: Lightness as percentage (0-100)

    Returns:
        RGBColor with channels rounded to the nearest integer
    """
    s = s / 100
    lightness = lightness / 100

    c = (1 - abs(2 * lightness - 1)) * s
    x = c * (1 - abs((h / HUE_SEXTANT) % 2 - 1))
    m = lightness - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGBColor(_round_channel(r + m), _round_channel(g + m), _round_channel(b + m))


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """Convert RGB channels (0-255) to HSL.

    Achromatic colors (all channels equal) get hue 0 and saturation 0.
    """
    rf, gf, bf = r / 255, g / 255, b / 255

    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        return HSLColor(0.0, 0.0, lightness * 100)

    if lightness > HSL_LIGHTNESS_MIDPOINT:
        s = delta / (2 - high - low)
    else:
        s = delta / (high + low)

    if high == rf:
        h = (gf - bf) / delta + (6 if gf < bf else 0)
    elif high == gf:
        h = (bf - rf) / delta + 2
    else:
        h = (rf - gf) / delta + 4

    h *= HUE_SEXTANT
    if h < 0:
        h += 360

    return HSLColor(h, s * 100, lightness * 100)


def to_hex(r: int, g: int, b: int) -> str:
    """Format RGB channels as a lowercase ``#rrggbb`` string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hsl_to_hex(h: float, s: float, lightness: float) -> str:
    """Convert HSL directly to a ``#rrggbb`` string."""
    return hsl_to_rgb(h, s, lightness).to_hex()


def parse_hex(text: str) -> RGBColor:
    """Parse ``#rgb`` or ``#rrggbb`` into RGB channels.

    Raises:
        ColorParseError: If the text is not a hex color
    """
    if not text.startswith("#"):
        raise ColorParseError(f"Hex color must start with '#': {text!r}")

    hex_color = text[1:]
    if len(hex_color) == HEX_COLOR_SHORT_LENGTH:
        # Expand shorthand hex (#RGB -> #RRGGBB)
        hex_color = "".join(c * 2 for c in hex_color)
    elif len(hex_color) != HEX_COLOR_FULL_LENGTH:
        raise ColorParseError(f"Invalid hex color length: {text!r}")

    try:
        return RGBColor(
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )
    except ValueError as e:
        raise ColorParseError(f"Invalid hex color characters: {text!r}") from e


def parse_css_rgb(text: str) -> RGBColor | None:
    """Parse a computed-style ``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` value.

    Returns:
        RGBColor, or None when the string is not in that form
    """
    match = _CSS_RGB_PATTERN.search(text)
    if not match:
        return None
    r, g, b = (int(group) for group in match.groups())
    return RGBColor(r, g, b)


def relative_luminance(rgb: RGBColor) -> float:
    """Perceived brightness in [0, 1] (0 = black, 1 = white)."""
    return (LUMA_RED * rgb.r + LUMA_GREEN * rgb.g + LUMA_BLUE * rgb.b) / 255
