"""Applying delimiter colors to code blocks in HTML and Markdown documents."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any

import mistune

from .colorizer import RainbowDelimiters, render
from .logger import get_logger

logger = get_logger()

DEFAULT_PROCESSED_ATTRIBUTE = "data-rainbow-processed"


@dataclass
class HtmlResult:
    """Rewritten document and what happened to its code blocks."""

    html: str
    processed: int = 0
    skipped: int = 0


class _TextParser(HTMLParser):
    """Collects text like a browser's ``textContent``: no tags, no comments."""

    def __init__(self) -> None:
        super().__init__()
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)


def text_content(fragment: str) -> str:
    """Text of an HTML fragment: tags and comments dropped, entities decoded."""
    parser = _TextParser()
    parser.feed(fragment)
    parser.close()
    return "".join(parser.parts)


@dataclass
class _PreBlock:
    """A closed ``<pre>`` element located in the source document."""

    start: int  # Offset of "<pre"
    start_tag: str
    attrs: dict[str, str | None]
    text: list[str] = field(default_factory=list[str])
    end: int = -1  # Offset just past "</pre>"


class _PreBlockParser(HTMLParser):
    """Finds outermost ``<pre>`` elements with their offsets and text content."""

    def __init__(self, document: str) -> None:
        super().__init__()
        self.document = document
        self.blocks: list[_PreBlock] = []
        self._line_starts = [0] + [i + 1 for i, char in enumerate(document) if char == "\n"]
        self._open: _PreBlock | None = None
        self._nested = 0

    def _offset(self) -> int:
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "pre":
            return
        if self._open is not None:
            self._nested += 1
            return
        self._open = _PreBlock(
            start=self._offset(),
            start_tag=self.get_starttag_text() or "<pre>",
            attrs=dict(attrs),
        )

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # <pre/> opens an element like <pre>
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        if tag != "pre" or self._open is None:
            return
        if self._nested:
            self._nested -= 1
            return
        start = self._offset()
        self._open.end = self.document.index(">", start) + 1
        self.blocks.append(self._open)
        self._open = None

    def handle_data(self, data: str) -> None:
        if self._open is not None:
            self._open.text.append(data)


def _mark_processed(start_tag: str, processed_attribute: str) -> str:
    tag = start_tag[:-1].rstrip()
    if tag.endswith("/"):
        tag = tag[:-1].rstrip()
    return f'{tag} {processed_attribute}="true">'


def colorize_html(
    document: str,
    is_dark: bool,
    colorizer: RainbowDelimiters,
    processed_attribute: str = DEFAULT_PROCESSED_ATTRIBUTE,
) -> HtmlResult:
    """Colorize every ``<pre>`` block not yet marked as processed.

    Each block's inner HTML is replaced by its colorized text content and the
    block is tagged with ``processed_attribute`` so running this again over
    the output leaves it unchanged. Everything outside the blocks is copied
    byte for byte; unclosed ``<pre>`` elements are left alone.

    Args:
        document: HTML page or fragment
        is_dark: Whether the page uses a dark theme
        colorizer: Colorizer to use for every block
        processed_attribute: Marker attribute for already-colorized blocks

    Returns:
        HtmlResult with the rewritten document and block counts
    """
    parser = _PreBlockParser(document)
    parser.feed(document)
    parser.close()

    result = HtmlResult(html=document)
    marker = processed_attribute.lower()
    pieces: list[str] = []
    last = 0

    for block in parser.blocks:
        pieces.append(document[last : block.start])
        last = block.end

        if marker in block.attrs:
            result.skipped += 1
            pieces.append(document[block.start : block.end])
            continue

        scan = colorizer.scan("".join(block.text), is_dark)
        result.processed += 1
        logger.changes(
            f"Colorized <pre> block #{result.processed}: {len(scan.decorations)} delimiters"
        )
        pieces.append(
            f"{_mark_processed(block.start_tag, processed_attribute)}"
            f"{render(scan, escape=True)}</pre>"
        )

    pieces.append(document[last:])
    result.html = "".join(pieces)
    return result


class _RainbowRenderer(mistune.HTMLRenderer):
    """HTML renderer that colorizes code blocks."""

    def __init__(
        self,
        colorizer: RainbowDelimiters,
        is_dark: bool,
        processed_attribute: str,
    ) -> None:
        super().__init__()
        self.colorizer = colorizer
        self.is_dark = is_dark
        self.processed_attribute = processed_attribute
        self.blocks = 0

    def block_code(self, code: str, info: str | None = None, **attrs: Any) -> str:
        scan = self.colorizer.scan(code, self.is_dark)
        self.blocks += 1
        logger.changes(f"Colorized code block #{self.blocks}: {len(scan.decorations)} delimiters")

        code_attrs = ""
        if info:
            language = info.strip().split(None, 1)[0]
            code_attrs = f' class="language-{html.escape(language)}"'
        return (
            f'<pre {self.processed_attribute}="true"><code{code_attrs}>'
            f"{render(scan, escape=True)}</code></pre>\n"
        )


def colorize_markdown(
    markdown: str,
    is_dark: bool,
    colorizer: RainbowDelimiters,
    processed_attribute: str = DEFAULT_PROCESSED_ATTRIBUTE,
) -> str:
    """Render Markdown to HTML with colorized code blocks.

    Fenced and indented code blocks are colorized; inline code spans and the
    rest of the document render as usual.
    """
    renderer = _RainbowRenderer(colorizer, is_dark, processed_attribute)
    to_html = mistune.create_markdown(renderer=renderer)
    output = to_html(markdown)

    # With an HTML renderer the result is always a string
    assert isinstance(output, str), "HTML renderer must return a string"
    return output
