"""Inline parsing for paragraph text.

Walks the text once. At a character that some inline rule claims as its
marker, the rules are tried in order; if all decline the marker is kept as
literal text. A backslash before ASCII punctuation yields that punctuation
literally, which is how ``\\{`` keeps a span from opening.
"""

from __future__ import annotations

from lemmark.nodes import Inline, SoftBreak, Text
from lemmark.parsing.charsets import ASCII_PUNCTUATION, LINE_PADDING
from lemmark.parsing.rules import RuleSet
from lemmark.parsing.state import InlineState


class InlineParser:
    """Parse inline text into Text, SoftBreak and rule-produced nodes."""

    __slots__ = ("_state", "_rules", "_markers", "_nodes", "_text", "_text_start")

    def __init__(
        self,
        src: str,
        *,
        rules: RuleSet,
        lineno: int = 1,
        source_file: str | None = None,
    ) -> None:
        self._state = InlineState(src, lineno=lineno, source_file=source_file)
        self._rules = rules
        self._markers = rules.inline_markers
        self._nodes: list[Inline] = []
        self._text: list[str] = []
        self._text_start = 0

    def parse(self) -> tuple[Inline, ...]:
        state = self._state
        src = state.src
        while state.pos < state.pos_max:
            char = src[state.pos]

            if char in self._markers:
                matched = self._try_rules(char)
                if matched is not None:
                    node, consumed = matched
                    self._flush(state.pos)
                    self._nodes.append(node)
                    state.pos += consumed
                    self._text_start = state.pos
                    continue

            if char == "\\" and state.pos + 1 < state.pos_max and src[state.pos + 1] in ASCII_PUNCTUATION:
                self._text.append(src[state.pos + 1])
                state.pos += 2
                continue

            if char == "\n":
                self._soft_break()
                continue

            self._text.append(char)
            state.pos += 1

        self._flush(state.pos)
        return tuple(self._nodes)

    def _try_rules(self, marker: str) -> tuple[Inline, int] | None:
        for rule in self._rules.inline_rules[marker]:
            result = rule.run(self._state)
            if result is not None:
                return result
        return None

    def _soft_break(self) -> None:
        state = self._state
        while self._text and self._text[-1] in LINE_PADDING:
            self._text.pop()
        self._flush(state.pos)
        self._nodes.append(SoftBreak(location=state.location(state.pos, state.pos + 1)))
        state.pos += 1
        while state.pos < state.pos_max and state.src[state.pos] in LINE_PADDING:
            state.pos += 1
        self._text_start = state.pos

    def _flush(self, end: int) -> None:
        if self._text:
            location = self._state.location(self._text_start, end)
            self._nodes.append(Text(location=location, content="".join(self._text)))
            self._text.clear()
        self._text_start = end
