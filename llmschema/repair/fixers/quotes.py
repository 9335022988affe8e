"""Quote-style fixes for near-JSON text."""

from __future__ import annotations

import re

from llmschema.repair.scanner import StringScanner, replace_after_colon

_BARE_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?=\s*(?:[,}\]]|\Z))")
_JSON_KEYWORDS = frozenset({"true", "false", "null"})


def fix_single_quotes(text: str) -> str:
    """Convert single-quoted strings to double-quoted strings.

    Inside a single-quoted string, ``\\'`` becomes ``\\"`` and a bare ``"``
    is escaped so the converted string stays well-formed. Inside a double-quoted
    string, ``\\'`` becomes a plain apostrophe. Other apostrophes in
    double-quoted strings pass through untouched.

    Example:
        >>> fix_single_quotes("{'name': 'test'}")
        '{"name": "test"}'
    """
    out: list[str] = []
    scanner = StringScanner(text, quotes="\"'")
    for c in scanner:
        if c.kind in ("open", "close"):
            out.append('"')
        elif c.kind == "content" and scanner.delimiter == "'":
            if c.char == "'":
                # Only reachable when escaped; the backslash is already emitted.
                out.append('"')
            elif c.char == '"' and not c.escaped:
                out.append('\\"')
            else:
                out.append(c.char)
        elif c.kind == "content" and c.char == "'" and c.escaped:
            # JSON has no \' escape; replace the emitted backslash.
            out[-1] = "'"
        else:
            out.append(c.char)
    return "".join(out)


def ensure_quoted_values(text: str) -> str:
    """Quote bare identifier values that follow a colon.

    ``true``, ``false`` and ``null`` are left alone.

    Example:
        >>> ensure_quoted_values('{"status": active}')
        '{"status": "active"}'
    """

    def quote(match: re.Match[str]) -> str:
        word = match.group(0)
        return word if word in _JSON_KEYWORDS else f'"{word}"'

    return replace_after_colon(text, _BARE_WORD, quote)
