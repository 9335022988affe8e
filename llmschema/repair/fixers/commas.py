"""Comma fixes: trailing commas and missing separators."""

from __future__ import annotations

from llmschema.repair.scanner import WHITESPACE, StringScanner

_VALUE_END = frozenset('"}]')
_NO_COMMA_BEFORE_VALUE = frozenset(",:{[")


def fix_trailing_commas(text: str) -> str:
    """Drop commas that are followed only by whitespace and a closing bracket.

    Example:
        >>> fix_trailing_commas('{"a": 1, "b": 2,}')
        '{"a": 1, "b": 2}'
    """
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        if c.kind == "structural" and c.char == ",":
            nxt = scanner.next_significant()
            if nxt < len(text) and text[nxt] in "}]":
                continue
        out.append(c.char)
    return "".join(out)


def fix_missing_commas(text: str) -> str:
    """Insert a comma between two adjacent values that lack a separator.

    This is a heuristic. A comma is inserted before a string, object or array
    that follows anything other than ``,``, ``:``, ``{`` or ``[``, and before a
    bare token (number or literal) that follows the end of another value after
    whitespace.

    Example:
        >>> fix_missing_commas('{"a": 1 "b": 2}')
        '{"a": 1, "b": 2}'
    """
    out: list[str] = []
    last = ""
    # Insertion point right after the last significant character
    anchor = 0
    gap = False
    for c in StringScanner(text):
        if c.kind in ("content", "close"):
            out.append(c.char)
            if c.kind == "close":
                last, gap, anchor = c.char, False, len(out)
            continue

        char = c.char
        if char in WHITESPACE:
            out.append(char)
            gap = True
            continue

        if char in '"{[':
            if last and last not in _NO_COMMA_BEFORE_VALUE:
                out.insert(anchor, ",")
        elif gap and (char.isalnum() or char == "-"):
            if last in _VALUE_END or last.isalnum():
                out.insert(anchor, ",")

        out.append(char)
        last, gap, anchor = char, False, len(out)
    return "".join(out)
