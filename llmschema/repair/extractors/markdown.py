"""Pull JSON out of markdown code fences."""

from __future__ import annotations

import re
from dataclasses import dataclass

_JSON_FENCE = re.compile(r"```json\s*\n?(.*?)```", re.IGNORECASE | re.DOTALL)
_ANY_FENCE = re.compile(r"```\s*\n?(.*?)```", re.DOTALL)
_INLINE_OBJECT = re.compile(r"`(\{[^`]*\})`")
_INLINE_ARRAY = re.compile(r"`(\[[^`]*\])`")


@dataclass
class MarkdownExtraction:
    """Outcome of ``extract_from_markdown``."""

    text: str
    extracted: bool
    language: str | None = None


def _looks_like_json(content: str) -> bool:
    return content.startswith(("{", "["))


def extract_from_markdown(text: str) -> MarkdownExtraction:
    """Return the JSON payload of the first suitable code block.

    Lookup order:
    1. A fenced block tagged ``json`` (any case)
    2. Any fenced block whose content starts with ``{`` or ``[``
    3. An inline backtick span holding ``{...}`` or ``[...]``

    When nothing matches, the stripped input comes back with ``extracted=False``.

    Example:
        >>> extract_from_markdown('```json\\n{"a": 1}\\n```')
        MarkdownExtraction(text='{"a": 1}', extracted=True, language='json')
    """
    trimmed = text.strip()

    match = _JSON_FENCE.search(trimmed)
    if match and match.group(1).strip():
        return MarkdownExtraction(text=match.group(1).strip(), extracted=True, language="json")

    for match in _ANY_FENCE.finditer(trimmed):
        content = match.group(1).strip()
        if _looks_like_json(content):
            return MarkdownExtraction(text=content, extracted=True)

    # Backticks inside a bare JSON document are string content, not markup.
    if not _looks_like_json(trimmed):
        for pattern in (_INLINE_OBJECT, _INLINE_ARRAY):
            match = pattern.search(trimmed)
            if match:
                return MarkdownExtraction(text=match.group(1), extracted=True)

    return MarkdownExtraction(text=trimmed, extracted=False)


def extract_all_from_markdown(text: str) -> list[str]:
    """Return the content of every ``json`` fenced block.

    Falls back to every untagged block that starts with ``{`` or ``[`` when no
    ``json`` block exists.
    """
    trimmed = text.strip()
    blocks = [m.group(1).strip() for m in _JSON_FENCE.finditer(trimmed) if m.group(1).strip()]
    if blocks:
        return blocks
    return [
        content
        for content in (m.group(1).strip() for m in _ANY_FENCE.finditer(trimmed))
        if _looks_like_json(content)
    ]
