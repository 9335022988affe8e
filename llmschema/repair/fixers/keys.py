"""Quote unquoted object keys."""

from __future__ import annotations

import re

from llmschema.repair.scanner import StringScanner

_KEY = re.compile(r"[A-Za-z0-9_$]+")


def fix_unquoted_keys(text: str) -> str:
    """Wrap bare identifier keys in double quotes.

    A key is an identifier directly after ``{`` or ``,`` (whitespace allowed)
    and followed by ``:``. Quoted keys and anything inside strings are untouched.

    Example:
        >>> fix_unquoted_keys('{name: "test", age: 25}')
        '{"name": "test", "age": 25}'
    """
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        out.append(c.char)
        if c.kind != "structural" or c.char not in "{,":
            continue

        start = scanner.next_significant()
        match = _KEY.match(text, start)
        if match is None:
            continue
        colon = scanner.next_significant(match.end())
        if colon >= len(text) or text[colon] != ":":
            continue

        out.append(text[scanner.pos : start])
        out.append(f'"{match.group(0)}"')
        out.append(text[match.end() : colon])
        scanner.skip_to(colon)
    return "".join(out)
