"""Typed AST nodes for Lemmark.

All AST nodes are frozen dataclasses with slots, safe to share across
threads and usable in match statements.

Node Hierarchy:
Node (base)
├── Block
│   ├── Document
│   ├── Paragraph
│   └── Spoiler
└── Inline
    ├── Text
    ├── SoftBreak
    └── Ruby

"""

from __future__ import annotations

from dataclasses import dataclass

from lemmark.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Line break inside a paragraph."""


@dataclass(frozen=True, slots=True)
class Ruby(Node):
    """Ruby annotation.

    Markdown: {漢|Kan}
    HTML: <ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby>

    Both fields are already normalized: whitespace collapsed, escape
    backslashes removed.

    """

    base: str
    reading: str


type Inline = Text | SoftBreak | Ruby

# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline content."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Spoiler(Node):
    """Collapsible block.

    Markdown:
        ::: spoiler click to see more
        hidden content
        :::

    HTML: <details><summary>label</summary>...</details>

    The label is plain text. Children are parsed from the fenced content
    and may contain nested spoilers.

    """

    label: str
    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node."""

    children: tuple[Block, ...]


type Block = Paragraph | Spoiler | Document
