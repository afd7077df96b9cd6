"""Renderers for Lemmark ASTs."""

from lemmark.renderers.html import HtmlRenderer, html_escape
from lemmark.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "html_escape"]
