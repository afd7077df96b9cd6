"""Line scanner for nestable ``::: spoiler`` fences.

Opening line grammar: ``:::``, one or more spaces, the keyword, one or more
spaces, then one or more space-separated tokens forming the label. Trailing
whitespace is ignored. A closing line is exactly ``:::`` once trailing
whitespace is removed. Leading indentation is significant for both.

Opening lines seen before the close start nested fences, each of which must
be closed before the outer fence can be.

Thread Safety:
The compiled pattern is built once at import and only read afterwards.

"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from lemmark.errors import PatternError
from lemmark.scanning.normalize import collapse_whitespace
from lemmark.scanning.span import ScanResult, check_window

FENCE_MARK = ":::"
SPOILER_KEYWORD = "spoiler"


def compile_fence_open(keyword: str) -> re.Pattern[str]:
    """Compile the opening-line pattern for ``keyword``.

    ``(\\S+(?: +\\S+)*)`` accepts the same lines as ``(\\S+ *)+`` without
    nested repetition, so failing lines do not backtrack exponentially.

    Raises:
        PatternError: If the pattern does not compile.
    """
    source = rf"^{re.escape(FENCE_MARK)} +{re.escape(keyword)} +(\S+(?: +\S+)*) *$"
    try:
        return re.compile(source)
    except re.error as e:
        raise PatternError(source, str(e)) from e


FENCE_OPEN: re.Pattern[str] = compile_fence_open(SPOILER_KEYWORD)


@dataclass(frozen=True, slots=True)
class FenceMatch(ScanResult):
    """A matched fence.

    ``fields`` holds the label. Content is ``lines[content_start:content_end]``.

    """

    content_start: int = 0
    content_end: int = 0

    @property
    def label(self) -> str:
        return self.fields[0]


def match_fence_open(line: str, open_pattern: re.Pattern[str] = FENCE_OPEN) -> str | None:
    """Return the collapsed label if ``line`` opens a fence, else None.

    Labels are not escape-processed.
    """
    m = open_pattern.match(line.rstrip())
    if m is None:
        return None
    return collapse_whitespace(m.group(1))


def is_fence_close(line: str, close_literal: str = FENCE_MARK) -> bool:
    """Check whether ``line`` closes a fence."""
    return line.rstrip() == close_literal


def scan_fence(
    lines: Sequence[str],
    from_line: int,
    last_line: int | None = None,
    *,
    open_pattern: re.Pattern[str] = FENCE_OPEN,
    close_literal: str = FENCE_MARK,
) -> FenceMatch | None:
    """Find the close matching the fence opened at ``lines[from_line - 1]``.

    Args:
        lines: Source lines (never modified)
        from_line: First line after the opening line
        last_line: Index to stop before (defaults to ``len(lines)``)
        open_pattern: Opening-line pattern, from ``compile_fence_open``
        close_literal: Closing line, after right-trimming

    Returns:
        FenceMatch spanning the opening line through its close, or None if
        the opening line does not match or the fence is never closed.

    Raises:
        ValueError: If the line window lies outside ``lines`` or
            ``from_line`` is 0.
    """
    if last_line is None:
        last_line = len(lines)
    check_window(len(lines), from_line, last_line)
    if from_line < 1:
        raise ValueError("from_line must follow an opening line")

    label = match_fence_open(lines[from_line - 1], open_pattern)
    if label is None:
        return None

    depth = 0
    for index in range(from_line, last_line):
        line = lines[index]
        if is_fence_close(line, close_literal):
            if depth == 0:
                return FenceMatch(
                    fields=(label,),
                    consumed=index - from_line + 2,
                    content_start=from_line,
                    content_end=index,
                )
            depth -= 1
        elif open_pattern.match(line.rstrip()):
            depth += 1
    return None


def find_unclosed_fences(
    lines: Sequence[str],
    start: int = 0,
    end: int | None = None,
    *,
    open_pattern: re.Pattern[str] = FENCE_OPEN,
    close_literal: str = FENCE_MARK,
) -> frozenset[int]:
    """Indices of opening lines in ``lines[start:end]`` that ``scan_fence`` cannot close.

    One pass pairing each close with the innermost open fence gives the same
    pairs as the depth count in ``scan_fence``. A host checks this set before
    scanning so that a run of unclosed openers costs one pass instead of one
    pass per opener.

    Raises:
        ValueError: If the line window lies outside ``lines``.
    """
    if end is None:
        end = len(lines)
    check_window(len(lines), start, end)

    open_fences: list[int] = []
    for index in range(start, end):
        line = lines[index]
        if is_fence_close(line, close_literal):
            if open_fences:
                open_fences.pop()
        elif open_pattern.match(line.rstrip()):
            open_fences.append(index)
    return frozenset(open_fences)
