"""Source location tracking for AST nodes.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    ``lineno`` and ``col_offset`` are 1-indexed. ``offset`` and
    ``end_offset`` are absolute indices into the source buffer.

    Examples:
        >>> loc = SourceLocation(3, 1, source_file="post.md")
        >>> str(loc)
        'post.md:3:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
