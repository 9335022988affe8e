"""Bracket closing and balancing for truncated or over-closed JSON."""

from __future__ import annotations

from llmschema.repair.scanner import StringScanner

_CLOSERS = {"{": "}", "[": "]"}


def _strip_dangling_comma(text: str) -> str:
    stripped = text.rstrip()
    if stripped.endswith(","):
        return stripped[:-1]
    return text


def _close_string(text: str, scanner: StringScanner) -> str:
    # A trailing backslash would escape the closing quote.
    if scanner.pending_escape:
        text += "\\"
    return text + '"'


def try_close_brackets(text: str) -> str:
    """Append whatever closers a truncated document is missing.

    An unterminated string gets its closing quote first (a trailing backslash
    is doubled so it cannot escape that quote), then every unmatched
    ``{``/``[`` is closed innermost-first. A closer with no matching opener is
    left in place; see ``balance_brackets`` for removing those.

    Example:
        >>> try_close_brackets('[1, 2, 3')
        '[1, 2, 3]'
        >>> try_close_brackets('{"name": "te')
        '{"name": "te"}'
    """
    stack: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        if c.kind != "structural":
            continue
        if c.char in _CLOSERS:
            stack.append(_CLOSERS[c.char])
        elif c.char in "}]" and stack and stack[-1] == c.char:
            stack.pop()

    if scanner.in_string:
        return _close_string(text, scanner) + "".join(reversed(stack))
    if not stack:
        return text
    return _strip_dangling_comma(text) + "".join(reversed(stack))


def balance_brackets(text: str) -> str:
    """Drop unmatched closers and append the missing ones.

    Example:
        >>> balance_brackets('{"a": [1, 2]]}')
        '{"a": [1, 2]}'
    """
    stack: list[str] = []
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        if c.kind == "structural":
            if c.char in _CLOSERS:
                stack.append(_CLOSERS[c.char])
            elif c.char in "}]":
                if not stack or stack[-1] != c.char:
                    continue
                stack.pop()
        out.append(c.char)

    result = "".join(out)
    if scanner.in_string:
        result = _close_string(result, scanner)
    elif stack:
        result = _strip_dangling_comma(result)
    return result + "".join(reversed(stack))
