"""Block spoiler plugin for Lemmark.

Adds support for collapsible ``::: spoiler`` blocks.

Usage:
    >>> md = Markdown(plugins=["spoiler"])
    >>> md("::: spoiler click to see more\\nhow spicy!\\n:::")
    '<details><summary>click to see more</summary><p>how spicy!</p>\\n</details>\\n'

Syntax:
An opening line ``::: spoiler`` followed by a label of one or more words,
and a closing line ``:::``. Spoilers nest. Without a label, or without a
matching close, the lines are ordinary paragraph text.

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lemmark.nodes import Spoiler
from lemmark.plugins import register_plugin
from lemmark.scanning.fence import FENCE_MARK, FENCE_OPEN, find_unclosed_fences, scan_fence
from lemmark.utils.logger import get_logger

if TYPE_CHECKING:
    from lemmark.parsing.blocks import BlockParser
    from lemmark.parsing.rules import RuleSet
    from lemmark.parsing.state import BlockState

logger = get_logger(__name__)


class SpoilerRule:
    """Block rule turning a closed spoiler fence into a Spoiler node."""

    open_pattern = FENCE_OPEN
    close_literal = FENCE_MARK

    def run(self, state: BlockState, parser: BlockParser) -> tuple[Spoiler, int] | None:
        unclosed = state.unclosed_fences.get(self.open_pattern)
        if unclosed is None:
            unclosed = find_unclosed_fences(
                state.lines,
                0,
                state.line_max,
                open_pattern=self.open_pattern,
                close_literal=self.close_literal,
            )
            state.unclosed_fences[self.open_pattern] = unclosed
        if state.line in unclosed:
            logger.debug("Unterminated spoiler at line %d", state.source_line(state.line) + 1)
            return None

        match = scan_fence(
            state.lines,
            state.line + 1,
            state.line_max,
            open_pattern=self.open_pattern,
            close_literal=self.close_literal,
        )
        if match is None:
            return None

        content, mapping = state.get_lines(match.content_start, match.content_end, state.blk_indent)
        node = Spoiler(
            location=state.location(state.line, state.line + match.consumed),
            label=match.label,
            children=tuple(parser.parse_nested(content, mapping)),
        )
        return node, match.consumed


@register_plugin("spoiler")
class SpoilerPlugin:
    """Plugin adding ``::: spoiler`` block support."""

    config_flag = "spoilers_enabled"

    @property
    def name(self) -> str:
        return "spoiler"

    def extend_rules(self, rules: RuleSet) -> None:
        rules.add_block_rule(SpoilerRule())
