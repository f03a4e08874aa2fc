"""Tests for colorizing code blocks in HTML and Markdown documents."""

import pytest

from rainbow_delimiters.colorizer import RainbowDelimiters, strip_markup
from rainbow_delimiters.document import colorize_html, colorize_markdown, text_content


@pytest.fixture
def colorizer() -> RainbowDelimiters:
    return RainbowDelimiters()


def test_text_content() -> None:
    """Test tags are dropped and entities decoded."""
    assert text_content("<code>a &lt; (b)</code>") == "a < (b)"


def test_colorize_html_pre_block(colorizer: RainbowDelimiters) -> None:
    """Test a pre block is colorized and marked as processed."""
    page = "<p>(prose)</p>\n<pre>(x)</pre>"

    result = colorize_html(page, False, colorizer)

    assert result.processed == 1
    assert result.skipped == 0
    assert result.html.startswith("<p>(prose)</p>\n")
    assert (
        '<pre data-rainbow-processed="true"><span style="color: #981b1b">(</span>x'
        '<span style="color: #ad1f1f">)</span></pre>'
    ) in result.html


def test_colorize_html_keeps_attributes_and_escapes(colorizer: RainbowDelimiters) -> None:
    """Test existing attributes survive and text content is escaped again."""
    page = '<pre class="lang-clj"><code>(if (&lt; a b) "&amp;")</code></pre>'

    result = colorize_html(page, True, colorizer)

    assert result.html.startswith('<pre class="lang-clj" data-rainbow-processed="true">')
    assert "<code>" not in result.html
    assert "&lt; a b" in result.html
    assert '"&amp;"' in result.html
    assert result.html.count("<span") == 4


def test_colorize_html_is_idempotent(colorizer: RainbowDelimiters) -> None:
    """Test running twice leaves already processed blocks alone."""
    page = "<pre>[1 2 {3 4}]</pre><pre>(f)</pre>"

    first = colorize_html(page, False, colorizer)
    second = colorize_html(first.html, False, colorizer)

    assert first.processed == 2
    assert second.processed == 0
    assert second.skipped == 2
    assert second.html == first.html


def test_colorize_html_custom_attribute(colorizer: RainbowDelimiters) -> None:
    page = '<pre data-seen="1">(a)</pre><pre>(b)</pre>'

    result = colorize_html(page, False, colorizer, processed_attribute="data-seen")

    assert result.processed == 1
    assert result.skipped == 1
    assert result.html.startswith('<pre data-seen="1">(a)</pre>')


def test_colorize_html_without_blocks(colorizer: RainbowDelimiters) -> None:
    page = "<html><body><p>(nothing)</p></body></html>"

    result = colorize_html(page, False, colorizer)

    assert result.html == page
    assert result.processed == 0


def test_colorize_html_attribute_containing_angle_bracket(colorizer: RainbowDelimiters) -> None:
    """Test a '>' inside a quoted attribute value does not end the tag."""
    result = colorize_html('<pre title="a>b">(x)</pre>', False, colorizer)

    assert result.processed == 1
    assert result.html == (
        '<pre title="a>b" data-rainbow-processed="true">'
        '<span style="color: #981b1b">(</span>x<span style="color: #ad1f1f">)</span></pre>'
    )


def test_colorize_html_skips_comments(colorizer: RainbowDelimiters) -> None:
    """Test comments inside a block are not part of its text, as in textContent."""
    result = colorize_html("<pre>(a <!-- x > y --> b)</pre>", False, colorizer)

    assert result.html.count("<span") == 2
    assert "y --&gt;" not in result.html
    assert strip_markup(result.html) == '<pre data-rainbow-processed="true">(a  b)</pre>'


def test_colorize_html_ignores_custom_elements(colorizer: RainbowDelimiters) -> None:
    """Test elements whose names only start with 'pre' are left alone."""
    page = "<pre-foo>(x)</pre-foo><prefix>[y]</prefix>"

    result = colorize_html(page, False, colorizer)

    assert result.processed == 0
    assert result.html == page


def test_colorize_html_preserves_surrounding_markup(colorizer: RainbowDelimiters) -> None:
    """Test text outside blocks survives exactly, across several lines."""
    page = (
        "<html>\n<body>\n  <p>a &amp; (b)</p>\n"
        '  <pre\n    class="clj">(+ 1\n   2)</pre>\n'
        "  <p>tail</p>\n  <PRE>[]</PRE>\n</body>\n</html>\n"
    )

    result = colorize_html(page, False, colorizer)

    assert result.processed == 2
    assert result.html.startswith("<html>\n<body>\n  <p>a &amp; (b)</p>\n  <pre\n")
    assert '    class="clj" data-rainbow-processed="true">' in result.html
    assert "</pre>\n  <p>tail</p>\n  <PRE data-rainbow-processed=\"true\">" in result.html
    assert result.html.endswith("</pre>\n</body>\n</html>\n")
    assert strip_markup(result.html).count("(+ 1\n   2)") == 1


def test_colorize_html_nested_pre_is_one_block(colorizer: RainbowDelimiters) -> None:
    result = colorize_html("<pre>(a <pre>b</pre> c)</pre>", False, colorizer)

    assert result.processed == 1
    assert strip_markup(result.html) == '<pre data-rainbow-processed="true">(a b c)</pre>'


def test_colorize_html_unclosed_pre_left_alone(colorizer: RainbowDelimiters) -> None:
    page = "<pre>(x)"

    result = colorize_html(page, False, colorizer)

    assert result.processed == 0
    assert result.html == page


def test_text_content_drops_comments() -> None:
    assert text_content("(a <!-- (b) --> c)") == "(a  c)"


def test_colorize_markdown_code_block(colorizer: RainbowDelimiters) -> None:
    """Test fenced code blocks are colorized and prose is rendered normally."""
    text = "Some *text* with `g(y)`.\n\n```clojure\n(defn f [x] {:a x})\n```\n"

    output = colorize_markdown(text, False, colorizer)

    assert "<p>Some <em>text</em> with <code>g(y)</code>.</p>" in output
    assert '<pre data-rainbow-processed="true"><code class="language-clojure">' in output
    assert output.count("<span") == 6
    code = output.split('<code class="language-clojure">')[1].split("</code>")[0]
    assert strip_markup(code) == "(defn f [x] {:a x})\n"


def test_colorize_markdown_escapes_code(colorizer: RainbowDelimiters) -> None:
    output = colorize_markdown("    if (a < b) {}\n", False, colorizer)

    assert "a &lt; b" in output
    assert '<pre data-rainbow-processed="true"><code>' in output
