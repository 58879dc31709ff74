"""Register page classes in a plugin's ``->pages([...])`` call.

The plugin class is located as the first ``src/*Plugin.php`` file. Edits
are line-based: the new entry goes on its own line before the line holding
the closing bracket of the ``->pages([`` array.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

PAGES_OPENER = "->pages(["
DISCOVER_PAGES = "->discoverPages("
ENTRY_INDENT = " " * 12
CLOSER_INDENT = " " * 8


class RegistrationResult(str, Enum):
    """Outcome of :meth:`PluginPageRegistrar.register`."""

    REGISTERED = "registered"
    ALREADY_REGISTERED = "already_registered"
    DISCOVERS_PAGES = "discovers_pages"
    NO_PLUGIN_FILE = "no_plugin_file"
    NO_PAGES_ARRAY = "no_pages_array"
    NO_INSERTION_POINT = "no_insertion_point"

    @property
    def ok(self) -> bool:
        return self in (
            RegistrationResult.REGISTERED,
            RegistrationResult.ALREADY_REGISTERED,
            RegistrationResult.DISCOVERS_PAGES,
        )


def insert_page_entry(content: str, class_fqn: str) -> str | None:
    """Return *content* with ``\\<class_fqn>::class,`` added to the pages array.

    Returns None when no closing bracket follows the ``->pages([`` opener.
    """
    lines = content.splitlines(keepends=True)
    entry = f"{ENTRY_INDENT}\\{class_fqn}::class,\n"

    opener_line = next((i for i, line in enumerate(lines) if PAGES_OPENER in line), None)
    if opener_line is None:
        return None

    for index in range(opener_line, len(lines)):
        line = lines[index]
        start = line.index(PAGES_OPENER) + len(PAGES_OPENER) if index == opener_line else 0
        bracket = line.find("]", start)
        if bracket == -1:
            continue

        head, tail = line[:bracket], line[bracket:]
        if index != opener_line and not head.strip():
            previous = next(i for i in range(index - 1, opener_line - 1, -1) if lines[i].strip())
            text = lines[previous].rstrip()
            if not text.endswith((",", "[")):
                lines[previous] = text + "," + lines[previous][len(text):]
            replacement = [entry, line]
        else:
            head = head.rstrip()
            if not head.endswith((",", "[")):
                head += ","
            replacement = [head + "\n", entry, CLOSER_INDENT + tail]
        return "".join(lines[:index] + replacement + lines[index + 1:])

    return None


class PluginPageRegistrar:
    """Patch the Plugin class of the plugin at *plugin_path*."""

    def __init__(self, plugin_path: Path) -> None:
        self.plugin_path = Path(plugin_path)

    def find_plugin_file(self) -> Path | None:
        candidates = sorted((self.plugin_path / "src").glob("*Plugin.php"))
        return candidates[0] if candidates else None

    def _read(self) -> str | None:
        plugin_file = self.find_plugin_file()
        if plugin_file is None:
            return None
        return plugin_file.read_text(encoding="utf-8")

    def uses_discover_pages(self) -> bool:
        content = self._read()
        return content is not None and DISCOVER_PAGES in content

    def has_pages_array(self) -> bool:
        content = self._read()
        return content is not None and PAGES_OPENER in content

    def register(self, class_fqn: str) -> RegistrationResult:
        plugin_file = self.find_plugin_file()
        if plugin_file is None:
            return RegistrationResult.NO_PLUGIN_FILE

        content = plugin_file.read_text(encoding="utf-8")
        if DISCOVER_PAGES in content:
            return RegistrationResult.DISCOVERS_PAGES
        if PAGES_OPENER not in content:
            return RegistrationResult.NO_PAGES_ARRAY
        if class_fqn in content:
            return RegistrationResult.ALREADY_REGISTERED

        updated = insert_page_entry(content, class_fqn)
        if updated is None:
            return RegistrationResult.NO_INSERTION_POINT

        plugin_file.write_text(updated, encoding="utf-8")
        logger.debug("Registered %s in %s", class_fqn, plugin_file)
        return RegistrationResult.REGISTERED


__all__ = [
    "PluginPageRegistrar",
    "RegistrationResult",
    "insert_page_entry",
]
