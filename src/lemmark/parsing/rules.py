"""Rule protocols and the per-parse rule set.

Block rules run at the start of a line; inline rules run when the inline
parser reaches their marker character. Either kind returns ``None`` to
decline, in which case the host treats the input as ordinary text.

Thread Safety:
Rules are stateless. A RuleSet is built per parse from the active config.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from lemmark.config import ParseConfig

if TYPE_CHECKING:
    from lemmark.nodes import Block, Inline
    from lemmark.parsing.blocks import BlockParser
    from lemmark.parsing.state import BlockState, InlineState


class BlockRule(Protocol):
    """Recognizes a block construct at ``state.line``."""

    def run(self, state: BlockState, parser: BlockParser) -> tuple[Block, int] | None:
        """Return the node and number of lines consumed, or None."""
        ...


class InlineRule(Protocol):
    """Recognizes an inline construct starting with ``marker``."""

    marker: str

    def run(self, state: InlineState) -> tuple[Inline, int] | None:
        """Return the node and number of characters consumed, or None."""
        ...


class RuleSet:
    """Block and inline rules active for one parse."""

    __slots__ = ("block_rules", "inline_rules")

    def __init__(self) -> None:
        self.block_rules: list[BlockRule] = []
        self.inline_rules: dict[str, list[InlineRule]] = {}

    def add_block_rule(self, rule: BlockRule) -> None:
        self.block_rules.append(rule)

    def add_inline_rule(self, rule: InlineRule) -> None:
        self.inline_rules.setdefault(rule.marker, []).append(rule)

    @property
    def inline_markers(self) -> frozenset[str]:
        return frozenset(self.inline_rules)


def build_rules(config: ParseConfig) -> RuleSet:
    """Collect rules from every built-in plugin enabled in ``config``."""
    from lemmark.plugins import BUILTIN_PLUGINS

    rules = RuleSet()
    for plugin_cls in BUILTIN_PLUGINS.values():
        plugin = plugin_cls()
        if getattr(config, plugin.config_flag):
            plugin.extend_rules(rules)
    return rules
