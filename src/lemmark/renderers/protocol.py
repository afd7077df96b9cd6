"""ASTRenderer protocol: stable interface for AST renderers.

The built-in ``HtmlRenderer`` is the reference implementation.
"""

from typing import Protocol

from lemmark.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for AST renderers."""

    def render(self, node: Document) -> str:
        """Render a Document AST to a string."""
        ...
