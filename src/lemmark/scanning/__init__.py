"""Pure scanners for spoiler fences and ruby spans.

- normalize: whitespace collapsing and escape stripping for captured text
- span: ``{base|reading}`` inline span scanning
- fence: ``::: spoiler label`` ... ``:::`` block fence scanning
"""

from lemmark.scanning.fence import (
    FENCE_MARK,
    FENCE_OPEN,
    FenceMatch,
    compile_fence_open,
    find_unclosed_fences,
    is_fence_close,
    match_fence_open,
    scan_fence,
)
from lemmark.scanning.normalize import collapse_whitespace, normalize
from lemmark.scanning.span import ScanResult, find_span, find_unescaped, scan_span

__all__ = [
    "FENCE_MARK",
    "FENCE_OPEN",
    "FenceMatch",
    "ScanResult",
    "collapse_whitespace",
    "compile_fence_open",
    "find_span",
    "find_unclosed_fences",
    "find_unescaped",
    "is_fence_close",
    "match_fence_open",
    "normalize",
    "scan_fence",
    "scan_span",
]
