"""Depth-based delimiter coloring.

The scan walks a text once, left to right. Every opening delimiter takes a
fresh base color from the palette (avoiding colors already handed out in
this scan) and pushes it on a stack; every closing delimiter pops the color
of the most recent opener, so matching pairs share a hue. Lightness and
saturation are then adapted to the depth and theme by ``adjust_color``.

The scanner knows nothing about the language of the text: delimiters inside
strings or comments are colored too, and a ``}`` happily closes a ``(``.
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .adjust import adjust_color
from .colors import HSLColor, hsl_to_hex
from .logger import debug_enabled, get_logger
from .palette import DEFAULT_PALETTE_SIZE, Palette, generate_base_colors

logger = get_logger()

SPAN_TEMPLATE = '<span style="color: {color}">{char}</span>'


class DelimiterKind(Enum):
    """Recognized bracket pairs as (opening, closing) characters."""

    PAREN = ("(", ")")
    BRACKET = ("[", "]")
    BRACE = ("{", "}")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @classmethod
    def for_char(cls, char: str) -> DelimiterKind | None:
        """Return the kind a delimiter character belongs to, if any."""
        for kind in cls:
            if char in kind.value:
                return kind
        return None


OPENING_DELIMITERS = frozenset(kind.opening for kind in DelimiterKind)
CLOSING_DELIMITERS = frozenset(kind.closing for kind in DelimiterKind)

_SPAN_PATTERN = re.compile(r'<span style="color: #[0-9a-f]{6}">([()\[\]{}])</span>')


@dataclass(frozen=True)
class Decoration:
    """A delimiter character at ``position`` and the color it is shown in."""

    position: int
    char: str
    base_color: HSLColor
    color: str  # Adjusted color as #rrggbb
    depth: int  # Depth used for the adjustment
    opening: bool

    @property
    def kind(self) -> DelimiterKind:
        kind = DelimiterKind.for_char(self.char)
        if kind is None:
            raise ValueError(f"Not a delimiter: {self.char!r}")
        return kind

    def markup(self) -> str:
        return SPAN_TEMPLATE.format(color=self.color, char=self.char)


@dataclass
class ScanState:
    """Mutable state of one scan. Never reused across texts."""

    depth: int = 0
    stack: list[HSLColor] = field(default_factory=list[HSLColor])
    used: set[HSLColor] = field(default_factory=set[HSLColor])


@dataclass(frozen=True)
class ScanResult:
    """Decorations found in a text, in text order."""

    text: str
    decorations: tuple[Decoration, ...]
    final_depth: int

    @property
    def opening_count(self) -> int:
        return sum(1 for d in self.decorations if d.opening)

    @property
    def closing_count(self) -> int:
        return sum(1 for d in self.decorations if not d.opening)

    def segments(self) -> Iterator[str | Decoration]:
        """Yield plain text spans and decorations in original order.

        Empty spans between adjacent delimiters are skipped.
        """
        last = 0
        for decoration in self.decorations:
            if decoration.position > last:
                yield self.text[last : decoration.position]
            yield decoration
            last = decoration.position + 1
        if last < len(self.text):
            yield self.text[last:]


class RainbowDelimiters:
    """Colors delimiters by nesting depth using a fixed base palette."""

    def __init__(self, palette_size: int = DEFAULT_PALETTE_SIZE) -> None:
        self.palette: Palette = generate_base_colors(palette_size)

    def next_color(self, state: ScanState) -> HSLColor:
        """Pick the base color for a new nesting level.

        Colors already handed out in this scan are skipped. Once every
        palette entry has been used, the used set is cleared and the pick
        falls back to the unfiltered palette; that pick is not recorded as
        used.
        """
        available = [color for color in self.palette if color not in state.used]
        if not available:
            logger.checks(
                f"Palette of {len(self.palette)} colors exhausted at depth {state.depth}, "
                "recycling"
            )
            state.used.clear()
            return self.palette[state.depth % len(self.palette)]

        color = available[state.depth % len(available)]
        state.used.add(color)
        return color

    def scan(self, text: str, is_dark: bool = False) -> ScanResult:
        """Assign a color to every delimiter in ``text``.

        Never fails: unmatched closers get a fresh color and depth is clamped
        at zero.

        Args:
            text: Text to scan
            is_dark: Whether the text is shown on a dark background

        Returns:
            ScanResult with one decoration per delimiter
        """
        if not self.palette:
            return ScanResult(text=text, decorations=(), final_depth=0)

        state = ScanState()
        decorations: list[Decoration] = []

        for position, char in enumerate(text):
            opening = char in OPENING_DELIMITERS
            if not opening and char not in CLOSING_DELIMITERS:
                continue

            if opening:
                base = self.next_color(state)
            elif state.stack:
                base = state.stack.pop()
            else:
                logger.checks(f"Unmatched {char!r} at position {position}")
                base = self.next_color(state)

            adjusted = adjust_color(base, state.depth, is_dark)
            decoration = Decoration(
                position=position,
                char=char,
                base_color=base,
                color=hsl_to_hex(adjusted.h, adjusted.s, adjusted.l),
                depth=state.depth,
                opening=opening,
            )
            decorations.append(decoration)

            if debug_enabled():
                logger.debug(f"  {char!r} at {position}: depth={state.depth} color={decoration.color}")

            if opening:
                state.stack.append(base)
                state.depth += 1
            else:
                state.depth = max(0, state.depth - 1)

        return ScanResult(text=text, decorations=tuple(decorations), final_depth=state.depth)

    def colorize(self, text: str, is_dark: bool = False) -> str:
        """Return ``text`` with every delimiter wrapped in a color span."""
        return render(self.scan(text, is_dark))


def render(result: ScanResult, escape: bool = False) -> str:
    """Render a scan result as inline color markup.

    Args:
        result: Output of ``RainbowDelimiters.scan``
        escape: HTML-escape the text between delimiters (needed when the
            text came from a document's text content)

    Returns:
        Markup string
    """
    parts: list[str] = []
    for segment in result.segments():
        if isinstance(segment, Decoration):
            parts.append(segment.markup())
        else:
            parts.append(html.escape(segment, quote=False) if escape else segment)
    return "".join(parts)


def strip_markup(markup: str) -> str:
    """Remove color spans added by ``render``, leaving the delimiters."""
    return _SPAN_PATTERN.sub(r"\1", markup)


_default_colorizer = RainbowDelimiters()


def colorize(text: str, is_dark: bool = False) -> str:
    """Colorize ``text`` with the default 32-color palette."""
    return _default_colorizer.colorize(text, is_dark)
