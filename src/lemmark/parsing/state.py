"""Cursor state handed to block and inline rules.

A rule reads the state, and on a match returns the node it built plus how
far the host should advance. Rules never move the cursor themselves.

Thread Safety:
State objects are created per parse call and never shared.

"""

from __future__ import annotations

import re
from collections.abc import Sequence

from lemmark.location import SourceLocation


class BlockState:
    """Line-oriented view of the block being parsed.

    Lines keep their leading indentation; indentation is significant to
    fence recognition.

    Attributes:
        lines: Source lines, without line terminators
        line: Index of the current line
        line_max: Index to stop before
        blk_indent: Indentation stripped from nested content
        line_map: Source line index for each entry of ``lines``
        unclosed_fences: Opening lines known to have no close, per open pattern

    """

    __slots__ = (
        "lines",
        "line",
        "line_max",
        "blk_indent",
        "line_map",
        "source_file",
        "unclosed_fences",
    )

    def __init__(
        self,
        lines: Sequence[str],
        *,
        line: int = 0,
        line_max: int | None = None,
        blk_indent: int = 0,
        line_map: Sequence[int] | None = None,
        source_file: str | None = None,
    ) -> None:
        self.lines = lines
        self.line = line
        self.line_max = len(lines) if line_max is None else line_max
        self.blk_indent = blk_indent
        self.line_map = line_map
        self.source_file = source_file
        self.unclosed_fences: dict[re.Pattern[str], frozenset[int]] = {}

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def source_line(self, index: int) -> int:
        """Map a local line index to its 0-indexed line in the original source."""
        if self.line_map is None:
            return index
        return self.line_map[index]

    def get_lines(self, start: int, end: int, indent: int) -> tuple[str, tuple[tuple[int, int], ...]]:
        """Extract ``lines[start:end]`` as one string for nested parsing.

        Up to ``indent`` leading spaces are removed from each line.

        Returns:
            Tuple of (content text, mapping) where mapping holds one
            ``(offset in content, source line index)`` pair per line.
        """
        parts: list[str] = []
        mapping: list[tuple[int, int]] = []
        offset = 0
        for index in range(start, end):
            line = self.lines[index]
            strip = 0
            while strip < indent and strip < len(line) and line[strip] == " ":
                strip += 1
            line = line[strip:]
            mapping.append((offset, self.source_line(index)))
            parts.append(line)
            offset += len(line) + 1
        return "\n".join(parts), tuple(mapping)

    def location(self, start: int, end: int) -> SourceLocation:
        """Location covering lines ``start`` through ``end - 1``."""
        return SourceLocation(
            lineno=self.source_line(start) + 1,
            col_offset=1,
            end_lineno=self.source_line(end - 1) + 1,
            source_file=self.source_file,
        )


class InlineState:
    """Character cursor over one paragraph's inline text.

    Attributes:
        src: Inline source text
        pos: Current index into ``src``
        pos_max: Index to stop before
        lineno: 1-indexed source line of ``src[0]``
        span_horizons: Per marker, the index before which spans are known to decline

    """

    __slots__ = ("src", "pos", "pos_max", "lineno", "source_file", "span_horizons")

    def __init__(
        self,
        src: str,
        *,
        pos: int = 0,
        pos_max: int | None = None,
        lineno: int = 1,
        source_file: str | None = None,
    ) -> None:
        self.src = src
        self.pos = pos
        self.pos_max = len(src) if pos_max is None else pos_max
        self.lineno = lineno
        self.source_file = source_file
        self.span_horizons: dict[str, int] = {}

    def location(self, start: int, end: int) -> SourceLocation:
        line_start = self.src.rfind("\n", 0, start) + 1
        return SourceLocation(
            lineno=self.lineno + self.src.count("\n", 0, start),
            col_offset=start - line_start + 1,
            offset=start,
            end_offset=end,
            source_file=self.source_file,
        )
