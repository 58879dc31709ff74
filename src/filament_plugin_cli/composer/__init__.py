"""composer.json editing, plugin metadata and composer invocation."""

from .editor import DEFAULT_CONSTRAINT, ComposerJsonEditor
from .meta import PluginComposerMeta
from .runner import ComposerRunner

__all__ = [
    "ComposerJsonEditor",
    "ComposerRunner",
    "DEFAULT_CONSTRAINT",
    "PluginComposerMeta",
]
