"""Host parsing pipeline for Lemmark.

- state: BlockState and InlineState cursors handed to rules
- rules: BlockRule/InlineRule protocols and RuleSet
- blocks: BlockParser (paragraphs plus block rules)
- inline: InlineParser (text, escapes, soft breaks plus inline rules)
"""

from lemmark.parsing.blocks import BlockParser
from lemmark.parsing.inline import InlineParser
from lemmark.parsing.rules import BlockRule, InlineRule, RuleSet, build_rules
from lemmark.parsing.state import BlockState, InlineState

__all__ = [
    "BlockParser",
    "BlockRule",
    "BlockState",
    "InlineParser",
    "InlineRule",
    "InlineState",
    "RuleSet",
    "build_rules",
]
