"""Stub rendering: token substitution plus conditional sections.

Stub grammar::

    {{NAME}}                  token, replaced wholesale
    {{#TAG}} ... {{/TAG}}     section, kept (unwrapped) or removed

Substitution runs first, then sections are resolved, so a replacement value
that contains section markers is treated as structure. Sections are matched
non-greedily: each opener pairs with the first closer of the same tag after
it. For same-tag nesting this means the outer opener pairs with the inner
closer and the outer closer is left in the output verbatim.

Tags absent from the section map, unknown tokens and unterminated openers
are left untouched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def substitute_tokens(content: str, replacements: Mapping[str, str]) -> str:
    """Replace every literal occurrence of each key in one pass.

    Replacement values are never rescanned for other keys.
    """
    keys = [key for key in replacements if key]
    if not keys:
        return content
    # Longest first so that a key which prefixes another cannot shadow it.
    keys.sort(key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: replacements[match.group(0)], content)


def resolve_conditional_block(content: str, tag: str, keep: bool) -> str:
    """Unwrap (``keep``) or delete every ``{{#tag}}...{{/tag}}`` region."""
    escaped = re.escape(tag)
    pattern = re.compile(r"\{\{#" + escaped + r"\}\}(.*?)\{\{/" + escaped + r"\}\}", re.DOTALL)
    if keep:
        return pattern.sub(lambda match: match.group(1), content)
    return pattern.sub("", content)


def render(
    template: str,
    replacements: Mapping[str, str],
    sections: Mapping[str, bool] | None = None,
) -> str:
    """Render a stub body.

    Args:
        template: Stub text.
        replacements: Token marker (e.g. ``"{{CLASS_NAME}}"``) to value.
        sections: Tag name (e.g. ``"CONFIG"``) to keep/remove decision.

    Returns:
        The rendered text.
    """
    content = substitute_tokens(template, replacements)
    for tag, keep in (sections or {}).items():
        content = resolve_conditional_block(content, tag, bool(keep))
    return content


class StubProcessor:
    """Render stub files onto disk."""

    def process(
        self,
        stub_path: Path,
        destination_path: Path,
        replacements: Mapping[str, str],
        sections: Mapping[str, bool] | None = None,
    ) -> bool:
        """Render *stub_path* into *destination_path*.

        Returns False without writing anything when the stub does not exist.
        Parent directories of the destination are created as needed.
        """
        stub_path = Path(stub_path)
        if not stub_path.is_file():
            logger.warning("Stub not found: %s", stub_path)
            return False

        content = render(stub_path.read_text(encoding="utf-8"), replacements, sections)

        destination = Path(destination_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        logger.debug("Rendered %s -> %s", stub_path.name, destination)
        return True


__all__ = [
    "StubProcessor",
    "render",
    "resolve_conditional_block",
    "substitute_tokens",
]
