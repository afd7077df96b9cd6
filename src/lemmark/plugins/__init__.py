"""Plugin system for Lemmark.

Each plugin contributes parsing rules for one construct:
- spoiler: ``::: spoiler label`` ... ``:::`` collapsible blocks
- ruby: ``{base|reading}`` ruby annotations

Usage:
    >>> from lemmark import Markdown
    >>> md = Markdown(plugins=["ruby"])
    >>> md("{漢|Kan}")
    '<p><ruby>漢<rp>(</rp><rt>Kan</rt><rp>)</rp></ruby></p>\\n'

A plugin is enabled when the ParseConfig field named by its
``config_flag`` is true. Rules are rebuilt per parse, so enabling or
disabling a plugin never mutates shared state.

Thread Safety:
All plugins are stateless. The registry is filled at import time and only
read afterwards.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lemmark.errors import PluginError
from lemmark.utils.logger import get_logger

if TYPE_CHECKING:
    from lemmark.parsing.rules import RuleSet

__all__ = [
    "LemmarkPlugin",
    "BUILTIN_PLUGINS",
    "get_plugin",
    "register_plugin",
]

logger = get_logger(__name__)


@runtime_checkable
class LemmarkPlugin(Protocol):
    """Protocol for Lemmark plugins."""

    config_flag: str

    @property
    def name(self) -> str:
        """Plugin identifier."""
        ...

    def extend_rules(self, rules: RuleSet) -> None:
        """Add this plugin's block or inline rules to ``rules``."""
        ...


# Registry of built-in plugins
BUILTIN_PLUGINS: dict[str, type[LemmarkPlugin]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[LemmarkPlugin]], type[LemmarkPlugin]]:
    """Decorator to register a plugin.

    Raises:
        PluginError: If the class names no ``config_flag``.

    Usage:
        @register_plugin("ruby")
        class RubyPlugin:
                ...

    """

    def decorator(cls: type[LemmarkPlugin]) -> type[LemmarkPlugin]:
        if not getattr(cls, "config_flag", ""):
            raise PluginError(name, "plugin class must define config_flag")
        BUILTIN_PLUGINS[name] = cls
        logger.debug("Registered plugin %r (%s)", name, cls.config_flag)
        return cls

    return decorator


def get_plugin(name: str) -> LemmarkPlugin:
    """Get a plugin instance by name.

    Raises:
        PluginError: If plugin name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise PluginError(name, f"unknown plugin. Available: {available}")
    return BUILTIN_PLUGINS[name]()


# These imports trigger the @register_plugin decorators
from lemmark.plugins.ruby import RubyPlugin  # noqa: E402
from lemmark.plugins.spoiler import SpoilerPlugin  # noqa: E402

__all__ += [
    "RubyPlugin",
    "SpoilerPlugin",
]
