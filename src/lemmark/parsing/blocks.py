"""Block-level parsing.

Splits source into lines and walks them, offering each line to the block
rules before falling back to paragraphs. Paragraphs run until a blank line
or until a block rule matches on a continuation line.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from lemmark.config import get_parse_config
from lemmark.nodes import Block, Paragraph
from lemmark.parsing.inline import InlineParser
from lemmark.parsing.rules import RuleSet, build_rules
from lemmark.parsing.state import BlockState

# Line endings: LF, CRLF or a lone CR. Other characters str.splitlines
# breaks on (form feed, NEL, U+2028) stay inside the line.
_LINE_ENDING = re.compile(r"\r\n?|\n")


class BlockParser:
    """Parse a source string into block nodes.

    Usage:
        >>> blocks = BlockParser("::: spoiler hint\\nsecret\\n:::").parse()
        >>> blocks[0].label
        'hint'

    Thread Safety:
        Each instance holds only per-parse state. Rules are rebuilt from the
        active ParseConfig unless passed in.

    """

    __slots__ = ("_source", "_line_map", "_source_file", "_rules")

    def __init__(
        self,
        source: str,
        *,
        line_map: Sequence[int] | None = None,
        source_file: str | None = None,
        rules: RuleSet | None = None,
    ) -> None:
        self._source = source
        self._line_map = line_map
        self._source_file = source_file
        self._rules = rules if rules is not None else build_rules(get_parse_config())

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def parse(self) -> list[Block]:
        state = BlockState(
            _LINE_ENDING.split(self._source),
            line_map=self._line_map,
            source_file=self._source_file,
        )
        blocks: list[Block] = []
        while state.line < state.line_max:
            if not state.get_line(state.line).strip():
                state.line += 1
                continue

            matched = self._try_rules(state)
            if matched is None:
                paragraph, matched = self._parse_paragraph(state)
                blocks.append(paragraph)
                if matched is None:
                    continue

            node, consumed = matched
            blocks.append(node)
            state.line += consumed
        return blocks

    def parse_nested(self, content: str, mapping: Sequence[tuple[int, int]]) -> list[Block]:
        """Parse extracted content (see ``BlockState.get_lines``) with the same rules."""
        nested = BlockParser(
            content,
            line_map=[source_line for _, source_line in mapping],
            source_file=self._source_file,
            rules=self._rules,
        )
        return nested.parse()

    def _try_rules(self, state: BlockState) -> tuple[Block, int] | None:
        for rule in self._rules.block_rules:
            result = rule.run(state, self)
            if result is not None:
                return result
        return None

    def _parse_paragraph(self, state: BlockState) -> tuple[Paragraph, tuple[Block, int] | None]:
        """Consume a paragraph starting at ``state.line``.

        Returns the paragraph and, when a block rule interrupted it, that
        rule's match at the new ``state.line``.
        """
        start = state.line
        state.line += 1
        interrupt: tuple[Block, int] | None = None
        while state.line < state.line_max:
            if not state.get_line(state.line).strip():
                break
            interrupt = self._try_rules(state)
            if interrupt is not None:
                break
            state.line += 1

        text = "\n".join(state.get_line(i).lstrip() for i in range(start, state.line)).rstrip()
        location = state.location(start, state.line)
        inline = InlineParser(
            text,
            rules=self._rules,
            lineno=location.lineno,
            source_file=self._source_file,
        )
        return Paragraph(location=location, children=inline.parse()), interrupt
