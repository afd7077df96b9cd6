"""HTML renderer using StringBuilder pattern.

Spoilers render as ``<details>`` with the label as ``<summary>``. Ruby spans
render with ``<rp>`` parentheses so readers without ruby support still see
the reading.

Thread Safety:
The renderer holds no per-render state. Multiple threads can share one
HtmlRenderer instance.
"""

import html

from lemmark.errors import RenderError
from lemmark.nodes import Block, Document, Inline, Paragraph, Ruby, SoftBreak, Spoiler, Text
from lemmark.stringbuilder import StringBuilder


def html_escape(s: str) -> str:
    """Escape <, >, & and " (single quotes are left alone)."""
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render AST to HTML.

    Usage:
        >>> from lemmark import parse
        >>> HtmlRenderer().render(parse("{漢|Kan}"))
        '<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby></p>\\n'

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Raises:
            RenderError: If the tree contains an unknown node type.
        """
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb)
                sb.append_line("</p>")
            case Spoiler():
                self._render_spoiler(block, sb)
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case _:
                raise RenderError(f"Unknown block node: {type(block).__name__}")

    def _render_spoiler(self, spoiler: Spoiler, sb: StringBuilder) -> None:
        sb.append("<details><summary>")
        sb.append(html_escape(spoiler.label))
        sb.append("</summary>")
        for child in spoiler.children:
            self._render_block(child, sb)
        sb.append_line("</details>")

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            match inline:
                case Text():
                    sb.append(html_escape(inline.content))
                case SoftBreak():
                    sb.append("\n")
                case Ruby():
                    self._render_ruby(inline, sb)
                case _:
                    raise RenderError(f"Unknown inline node: {type(inline).__name__}")

    def _render_ruby(self, ruby: Ruby, sb: StringBuilder) -> None:
        sb.append("<ruby>")
        sb.append(html_escape(ruby.base.strip()))
        sb.append("<rp>(</rp><rt>")
        sb.append(html_escape(ruby.reading.strip()))
        sb.append("</rt><rp>)</rp></ruby>")
