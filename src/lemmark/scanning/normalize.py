"""Canonicalization of captured text runs.

Text captured between delimiters is normalized before it becomes a node
field: whitespace runs collapse to one space and escape backslashes are
dropped.

Example:
    >>> normalize("foo\\\\|bar    baz")
    'foo|bar baz'
"""


def collapse_whitespace(raw: str) -> str:
    """Collapse every whitespace run to a single space.

    Runs at either end disappear entirely.
    """
    return " ".join(raw.split())


def normalize(raw: str) -> str:
    """Collapse whitespace, then remove every backslash.

    Any backslash still present after span extraction only escaped a
    delimiter, so none of them belong in rendered output. Backslashes are
    removed per whitespace-separated piece; a piece made only of
    backslashes vanishes along with its separating space, so the result
    never holds a double space and normalizing twice changes nothing.

    Args:
        raw: Text captured between two delimiters

    Returns:
        Normalized text (empty input gives an empty string)
    """
    pieces = (piece.replace("\\", "") for piece in raw.split())
    return " ".join(piece for piece in pieces if piece)
