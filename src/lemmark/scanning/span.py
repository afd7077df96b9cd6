"""Escape-aware scanner for inline two-field spans.

Recognizes ``{field1|field2}`` starting at an opening marker. The separator
and terminator only count when not preceded by a backslash.

Thread Safety:
All functions are pure. Scan state lives in local variables.

"""

from __future__ import annotations

from dataclasses import dataclass

from lemmark.scanning.normalize import normalize

BACKSLASH = "\\"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """A recognized construct.

    Attributes:
        fields: Extracted field values, in source order
        consumed: Source units the host must advance past, delimiters included

    """

    fields: tuple[str, ...]
    consumed: int


def check_window(length: int, start: int, end: int) -> None:
    """Raise ValueError unless ``0 <= start <= end <= length``."""
    if not 0 <= start <= end <= length:
        raise ValueError(f"Invalid scan window [{start}, {end}) for buffer of length {length}")


def find_unescaped(buffer: str, start: int, end: int, target: str, stop: str = "") -> int:
    """Find the first unescaped ``target`` in ``buffer[start:end]``.

    A backslash escapes the unit after it and is itself skipped, so it is
    never a match even when it equals ``target``.

    Args:
        buffer: Source text
        start: First index to examine
        end: Index to stop before
        target: Character to find
        stop: Optional character whose unescaped occurrence aborts the search

    Returns:
        Index of the match, or -1 if none (or if ``stop`` came first)
    """
    escaped = False
    pos = start
    while pos < end:
        char = buffer[pos]
        if char == BACKSLASH:
            escaped = True
        else:
            if not escaped:
                if char == target:
                    return pos
                if char == stop:
                    return -1
            escaped = False
        pos += 1
    return -1


def find_span(
    buffer: str,
    start: int,
    end: int | None = None,
    *,
    marker: str = "{",
    separator: str = "|",
    terminator: str = "}",
) -> tuple[ScanResult | None, int]:
    """Scan like ``scan_span`` and also report how far a decline reaches.

    When the scan declines, every other ``marker`` between ``start`` and the
    returned horizon declines as well: its searches see the same units in the
    same escape state and stop at the same terminator or at ``end``. A host
    can skip those markers without scanning them.

    Returns:
        Tuple of (result, horizon). On a match the horizon is the index just
        past the terminator.

    Raises:
        ValueError: If the window lies outside the buffer.
    """
    if end is None:
        end = len(buffer)
    check_window(len(buffer), start, end)

    if start >= end or buffer[start] != marker:
        return None, start

    sep_pos = find_unescaped(buffer, start + 1, end, separator, stop=terminator)
    if sep_pos < 0:
        stop_pos = find_unescaped(buffer, start + 1, end, terminator)
        return None, end if stop_pos < 0 else stop_pos

    term_pos = find_unescaped(buffer, sep_pos + 1, end, terminator)
    if term_pos < 0:
        return None, end

    result = ScanResult(
        fields=(
            normalize(buffer[start + 1 : sep_pos]),
            normalize(buffer[sep_pos + 1 : term_pos]),
        ),
        consumed=term_pos - start + 1,
    )
    return result, term_pos + 1


def scan_span(
    buffer: str,
    start: int,
    end: int | None = None,
    *,
    marker: str = "{",
    separator: str = "|",
    terminator: str = "}",
) -> ScanResult | None:
    """Scan a ``{field1|field2}`` span opening at ``buffer[start]``.

    Args:
        buffer: Source text (never modified)
        start: Index of the opening marker
        end: End of the scan window (defaults to ``len(buffer)``)
        marker: Opening character
        separator: Character dividing the two fields
        terminator: Closing character

    Returns:
        ScanResult with two normalized fields, or None if the span is not
        complete within the window. An unescaped terminator before any
        separator means no span.

    Raises:
        ValueError: If the window lies outside the buffer.
    """
    result, _ = find_span(
        buffer, start, end, marker=marker, separator=separator, terminator=terminator
    )
    return result
