"""Exception classes for Lemmark.

Scanners never raise on unrecognized input: a construct that does not match
is reported as ``None`` and the host falls back to literal text. The
exceptions below cover the remaining failure modes.
"""

from __future__ import annotations


class LemmarkError(Exception):
    """Base exception for all Lemmark errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(LemmarkError):
    """A built-in recognition pattern failed to compile.

    Raised once, at import time. Not recoverable per call.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """Initialize pattern error.

        Args:
            pattern: The regular expression source that failed
            reason: Message from the regex engine
        """
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class RenderError(LemmarkError):
    """Error during HTML rendering.

    Raised when the renderer encounters a node type it cannot render.
    """

    pass


class PluginError(LemmarkError):
    """Error in plugin lookup or registration."""

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
