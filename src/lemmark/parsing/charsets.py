"""Character sets for O(1) classification.

All sets are frozensets: immutable and cached at module level.
"""

# CommonMark: ASCII punctuation characters
# https://spec.commonmark.org/0.31.2/#ascii-punctuation-character
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Spaces and tabs stripped around soft line breaks
LINE_PADDING: frozenset[str] = frozenset(" \t")
