"""
Lemmark — spoiler blocks and ruby annotations for Markdown text.

Recognizes two constructs and turns them into a typed AST:

    ::: spoiler click to see more
    hidden content
    :::

    {漢|Kan}{字|ji}

Quick Start:
    >>> from lemmark import parse, render
    >>> doc = parse("{漢|Kan}")
    >>> render(doc)
    '<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby></p>\\n'

    >>> from lemmark import Markdown
    >>> md = Markdown(plugins=["spoiler"])
    >>> html = md("::: spoiler hint\\nsecret\\n:::")

The scanners behind both constructs live in ``lemmark.scanning`` and can be
used on their own.
"""

from collections.abc import Iterable

from lemmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from lemmark.errors import LemmarkError, PatternError, PluginError, RenderError
from lemmark.location import SourceLocation
from lemmark.nodes import (
    Block,
    Document,
    Inline,
    Node,
    Paragraph,
    Ruby,
    SoftBreak,
    Spoiler,
    Text,
)
from lemmark.parsing import BlockParser
from lemmark.plugins import BUILTIN_PLUGINS, get_plugin
from lemmark.renderers.html import HtmlRenderer
from lemmark.renderers.protocol import ASTRenderer
from lemmark.scanning import ScanResult, normalize, scan_fence, scan_span

__version__ = "0.1.0"


def _parse_document(source: str, source_file: str | None) -> Document:
    blocks = BlockParser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse source text into a typed AST.

    Args:
        source: Markdown source text
        source_file: Optional source file path recorded in node locations
        config: Parse configuration (defaults to all constructs enabled)

    Returns:
        Document AST root node
    """
    with parse_config_context(config or ParseConfig()):
        return _parse_document(source, source_file)


def render(doc: Document) -> str:
    """Render an AST Document to HTML."""
    return HtmlRenderer().render(doc)


class Markdown:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("{漢|Kan}")
        '<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby></p>\\n'

        >>> md = Markdown(plugins=["spoiler"])
        >>> md("{漢|Kan}")
        '<p>{漢|Kan}</p>\\n'

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_plugins", "_renderer")

    def __init__(self, *, plugins: list[str] | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            plugins: Plugin names to enable (e.g., ["ruby"]). ``None`` or
                ["all"] enables every built-in plugin.

        Raises:
            PluginError: If a plugin name is not recognized.
        """
        if plugins is None or "all" in plugins:
            self._plugins = list(BUILTIN_PLUGINS.keys())
        else:
            self._plugins = list(plugins)

        enabled = {get_plugin(name).config_flag for name in self._plugins}
        flags = {
            plugin.config_flag: plugin.config_flag in enabled for plugin in BUILTIN_PLUGINS.values()
        }
        self._config = ParseConfig.from_dict(flags)
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call."""
        return self._renderer.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source text into AST."""
        set_parse_config(self._config)
        try:
            return _parse_document(source, source_file)
        finally:
            reset_parse_config()

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple sources, setting config once for the batch."""
        set_parse_config(self._config)
        try:
            return [_parse_document(source, source_file) for source in sources]
        finally:
            reset_parse_config()


__all__ = [
    # Main API
    "parse",
    "render",
    "Markdown",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Scanners
    "ScanResult",
    "normalize",
    "scan_fence",
    "scan_span",
    # Parsing and rendering
    "BlockParser",
    "HtmlRenderer",
    "ASTRenderer",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Paragraph",
    "Spoiler",
    "Text",
    "SoftBreak",
    "Ruby",
    "SourceLocation",
    # Errors
    "LemmarkError",
    "PatternError",
    "PluginError",
    "RenderError",
    "__version__",
]
