"""Ruby annotation plugin for Lemmark.

Adds support for ``{base|reading}`` syntax.

Usage:
    >>> md = Markdown(plugins=["ruby"])
    >>> md("{漢|Kan}{字|ji}")
    '<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby><ruby>字<rp>(</rp><rt>ji</rt><rp>)</rp></ruby></p>\\n'

Syntax:
``{`` base ``|`` reading ``}``. ``\\|`` and ``\\}`` inside the span are
literal. A span with no unescaped ``|`` before its ``}`` stays literal text.

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lemmark.nodes import Ruby
from lemmark.plugins import register_plugin
from lemmark.scanning.span import find_span
from lemmark.utils.logger import get_logger

if TYPE_CHECKING:
    from lemmark.parsing.rules import RuleSet
    from lemmark.parsing.state import InlineState

logger = get_logger(__name__)


class RubyRule:
    """Inline rule turning ``{base|reading}`` into a Ruby node."""

    marker = "{"

    def run(self, state: InlineState) -> tuple[Ruby, int] | None:
        # An earlier decline already covers this marker
        if state.pos < state.span_horizons.get(self.marker, 0):
            return None

        result, horizon = find_span(state.src, state.pos, state.pos_max, marker=self.marker)
        if result is None:
            logger.debug("No ruby span at offset %d", state.pos)
            state.span_horizons[self.marker] = horizon
            return None

        base, reading = result.fields
        node = Ruby(
            location=state.location(state.pos, state.pos + result.consumed),
            base=base,
            reading=reading,
        )
        return node, result.consumed


@register_plugin("ruby")
class RubyPlugin:
    """Plugin adding ``{base|reading}`` support."""

    config_flag = "ruby_enabled"

    @property
    def name(self) -> str:
        return "ruby"

    def extend_rules(self, rules: RuleSet) -> None:
        rules.add_inline_rule(RubyRule())
