"""Working out whether text is displayed on a dark background."""

from __future__ import annotations

from enum import Enum
from html.parser import HTMLParser

from .colors import RGBColor, parse_css_rgb, parse_hex, relative_luminance
from .exceptions import ColorParseError

DARK_MODE_ATTRIBUTE = "data-darkreader-mode"
DEFAULT_LUMINANCE = 0.5  # Used when the background cannot be read
DARK_LUMINANCE_THRESHOLD = 0.5


class ThemeMode(str, Enum):
    """How the display theme is chosen."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"  # Inspect the document / background


class _RootTagParser(HTMLParser):
    """Records the attribute names of the first ``<html>`` tag."""

    def __init__(self) -> None:
        super().__init__()
        self.root_attrs: set[str] | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "html" and self.root_attrs is None:
            self.root_attrs = {name for name, _ in attrs}


def detect_dark_mode(document: str) -> bool:
    """Check whether the page's ``<html>`` tag carries the dark mode marker."""
    parser = _RootTagParser()
    parser.feed(document)
    parser.close()
    return parser.root_attrs is not None and DARK_MODE_ATTRIBUTE in parser.root_attrs


def background_luminance(css_color: str) -> float:
    """Luminance of a CSS background color, 0.5 if it cannot be parsed.

    Accepts computed-style values (``rgb(...)``/``rgba(...)``) and hex.
    """
    rgb: RGBColor | None = parse_css_rgb(css_color)
    if rgb is None:
        try:
            rgb = parse_hex(css_color.strip())
        except ColorParseError:
            return DEFAULT_LUMINANCE
    return relative_luminance(rgb)


def resolve_dark_theme(
    mode: ThemeMode,
    document: str | None = None,
    background: str | None = None,
) -> bool:
    """Turn a theme mode into the boolean the colorizer needs.

    For ``AUTO`` the dark mode marker in ``document`` wins; otherwise a dark
    ``background`` color means a dark theme. With nothing to inspect the
    theme is light.
    """
    if mode is ThemeMode.DARK:
        return True
    if mode is ThemeMode.LIGHT:
        return False

    if document is not None and detect_dark_mode(document):
        return True
    if background is not None:
        return background_luminance(background) < DARK_LUMINANCE_THRESHOLD
    return False
