"""Tests for HtmlRenderer and the Markdown processor output."""

from __future__ import annotations

import pytest

from lemmark import Markdown
from lemmark.errors import RenderError
from lemmark.location import SourceLocation
from lemmark.nodes import Document, Node, Paragraph, Ruby, Spoiler, Text
from lemmark.renderers.html import HtmlRenderer, html_escape
from lemmark.stringbuilder import StringBuilder


@pytest.fixture
def md() -> Markdown:
    return Markdown()


class TestSpoilerHtml:
    """Spoiler rendering through the full pipeline."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            (
                "::: spoiler click to see more\nbut I never finished",
                "<p>::: spoiler click to see more\nbut I never finished</p>\n",
            ),
            (
                "::: spoiler\nnever added the lead in\n:::",
                "<p>::: spoiler\nnever added the lead in\n:::</p>\n",
            ),
            (
                "::: spoiler click to see more\nhow spicy!\n:::",
                "<details><summary>click to see more</summary><p>how spicy!</p>\n</details>\n",
            ),
            (
                "::: spoiler click to see more\nhow spicy!\n:::\n",
                "<details><summary>click to see more</summary><p>how spicy!</p>\n</details>\n",
            ),
            (
                "::: spoiler _click to see more_\nhow spicy!\n:::\n",
                "<details><summary>_click to see more_</summary><p>how spicy!</p>\n</details>\n",
            ),
            (
                "hey you\npsst, wanna hear a secret?\n::: spoiler lean in and i'll tell you\n"
                "you are breathtaking!\n:::\nwhatcha think about that?",
                "<p>hey you\npsst, wanna hear a secret?</p>\n"
                "<details><summary>lean in and i'll tell you</summary>"
                "<p>you are breathtaking!</p>\n</details>\n"
                "<p>whatcha think about that?</p>\n",
            ),
        ],
    )
    def test_cases(self, md: Markdown, source: str, expected: str) -> None:
        assert md(source) == expected

    def test_nested(self, md: Markdown) -> None:
        html = md("::: spoiler outer\n::: spoiler inner\nx\n:::\ny\n:::")
        assert html == (
            "<details><summary>outer</summary>"
            "<details><summary>inner</summary><p>x</p>\n</details>\n"
            "<p>y</p>\n"
            "</details>\n"
        )

    def test_label_escaped(self, md: Markdown) -> None:
        html = md("::: spoiler <b>&\nx\n:::")
        assert "<summary>&lt;b&gt;&amp;</summary>" in html


class TestRubyHtml:
    """Ruby rendering through the full pipeline."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            (
                "{漢|Kan}{字|ji}",
                "<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby>"
                "<ruby>字<rp>(</rp><rt>ji</rt><rp>)</rp></ruby></p>\n",
            ),
            (
                "\\{foo|bar}{baz|qux}",
                "<p>{foo|bar}<ruby>baz<rp>(</rp><rt>qux</rt><rp>)</rp></ruby></p>\n",
            ),
            (
                "{foo|bar}{baz\\|qux}",
                "<p><ruby>foo<rp>(</rp><rt>bar</rt><rp>)</rp></ruby>{baz|qux}</p>\n",
            ),
            (
                "{foo\\|bar\\}{baz|qux}",
                "<p><ruby>foo|bar}{baz<rp>(</rp><rt>qux</rt><rp>)</rp></ruby></p>\n",
            ),
            (
                "{foo\\|bar}\\{baz|qux}",
                "<p>{foo|bar}{baz|qux}</p>\n",
            ),
            (
                "Some stuff before      {foo      doo|bar            hello}  mid {baz|qux} after      words",
                "<p>Some stuff before      <ruby>foo doo<rp>(</rp><rt>bar hello</rt><rp>)</rp></ruby>"
                "  mid <ruby>baz<rp>(</rp><rt>qux</rt><rp>)</rp></ruby> after      words</p>\n",
            ),
        ],
    )
    def test_cases(self, md: Markdown, source: str, expected: str) -> None:
        assert md(source) == expected

    def test_fields_escaped(self, md: Markdown) -> None:
        assert md("{<b>|&}") == "<p><ruby>&lt;b&gt;<rp>(</rp><rt>&amp;</rt><rp>)</rp></ruby></p>\n"


class TestHtmlRendererNodes:
    """Rendering hand-built trees."""

    def test_ruby_fields_stripped(self) -> None:
        loc = SourceLocation(1, 1)
        doc = Document(
            location=loc,
            children=(Paragraph(location=loc, children=(Ruby(location=loc, base=" a ", reading=" b "),)),),
        )
        assert HtmlRenderer().render(doc) == "<p><ruby>a<rp>(</rp><rt>b</rt><rp>)</rp></ruby></p>\n"

    def test_empty_spoiler(self) -> None:
        loc = SourceLocation(1, 1)
        doc = Document(location=loc, children=(Spoiler(location=loc, label="hint", children=()),))
        assert HtmlRenderer().render(doc) == "<details><summary>hint</summary></details>\n"

    def test_text_quotes(self) -> None:
        loc = SourceLocation(1, 1)
        doc = Document(
            location=loc,
            children=(Paragraph(location=loc, children=(Text(location=loc, content="\"it's\""),)),),
        )
        assert HtmlRenderer().render(doc) == "<p>&quot;it's&quot;</p>\n"

    def test_unknown_node_raises(self) -> None:
        loc = SourceLocation(1, 1)
        doc = Document(location=loc, children=(Node(location=loc),))  # type: ignore[arg-type]
        with pytest.raises(RenderError):
            HtmlRenderer().render(doc)

    def test_html_escape(self) -> None:
        assert html_escape("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;'&amp;'&lt;/a&gt;"


class TestStringBuilder:
    """StringBuilder as used by the renderer."""

    def test_append_skips_empty(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("").append("x").append_line("</p>")
        assert sb.build() == "<p>x</p>\n"

    def test_append_line_without_text(self) -> None:
        assert StringBuilder().append_line().append_line("a").build() == "\na\n"


class TestSourceLocation:
    """String form of locations."""

    def test_with_file(self) -> None:
        assert str(SourceLocation(3, 1, source_file="post.md")) == "post.md:3:1"

    def test_without_file(self) -> None:
        assert str(SourceLocation(3, 7)) == "3:7"
