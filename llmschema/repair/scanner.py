"""Quote-aware, escape-aware character scanner shared by the repair stages.

Every fixer needs to tell structural JSON syntax apart from characters that sit
inside a string literal. ``StringScanner`` walks the text once and labels each
character as it goes:

- ``structural``: outside any string (brackets, commas, whitespace, bare words)
- ``open``: the delimiter that starts a string
- ``content``: a character inside a string, including backslashes and the
  character a backslash escapes
- ``close``: the delimiter that ends a string

A backslash inside a string escapes exactly the next character, so ``\\"`` never
terminates a string. A backslash that is the last character of the input is
reported as plain content.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Literal, NamedTuple

CharKind = Literal["structural", "open", "content", "close"]

WHITESPACE = " \t\n\r\f\v"


class ScannedChar(NamedTuple):
    """One classified character."""

    index: int
    char: str
    kind: CharKind
    escaped: bool = False

    @property
    def in_string(self) -> bool:
        return self.kind != "structural"


class StringScanner:
    """Iterator over ``ScannedChar`` items for a piece of near-JSON text.

    Example:
        >>> [c.kind for c in StringScanner('{"a"}')]
        ['structural', 'open', 'content', 'close', 'structural']

    Args:
        text: Text to scan
        quotes: Characters that open a string. The same character closes it.
    """

    def __init__(self, text: str, quotes: str = '"') -> None:
        self.text = text
        self.quotes = quotes
        self.pos = 0
        self.delimiter: str | None = None
        self._escape_next = False

    def __iter__(self) -> StringScanner:
        return self

    def __next__(self) -> ScannedChar:
        if self.pos >= len(self.text):
            raise StopIteration

        index = self.pos
        char = self.text[index]
        self.pos += 1

        if self.delimiter is not None:
            if self._escape_next:
                self._escape_next = False
                return ScannedChar(index, char, "content", escaped=True)
            if char == "\\":
                self._escape_next = True
                return ScannedChar(index, char, "content")
            if char == self.delimiter:
                self.delimiter = None
                return ScannedChar(index, char, "close")
            return ScannedChar(index, char, "content")

        if char in self.quotes:
            self.delimiter = char
            return ScannedChar(index, char, "open")
        return ScannedChar(index, char, "structural")

    @property
    def in_string(self) -> bool:
        """Whether the scan position is currently inside an unterminated string."""
        return self.delimiter is not None

    @property
    def pending_escape(self) -> bool:
        """Whether the last character scanned was a backslash inside a string."""
        return self._escape_next

    def skip_to(self, pos: int) -> None:
        """Jump forward without classifying the skipped characters.

        Only valid from a structural position; the skipped span must not open a string.
        """
        self.pos = max(self.pos, min(pos, len(self.text)))

    def next_significant(self, pos: int | None = None) -> int:
        """Return the index of the next non-whitespace character at or after ``pos``.

        Returns ``len(text)`` when only whitespace remains.
        """
        i = self.pos if pos is None else pos
        n = len(self.text)
        while i < n and self.text[i] in WHITESPACE:
            i += 1
        return i


def string_mask(text: str) -> list[bool]:
    """Classify every position of ``text`` as in-string (True) or structural (False)."""
    return [c.in_string for c in StringScanner(text)]


def replace_after_colon(
    text: str, pattern: re.Pattern[str], repl: Callable[[re.Match[str]], str]
) -> str:
    """Rewrite value tokens that follow a structural colon.

    ``pattern`` is matched at the first non-whitespace character after every colon
    that sits outside a string. The matched span is replaced by ``repl(match)``.
    Patterns must not match quote characters.
    """
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        out.append(c.char)
        if c.kind != "structural" or c.char != ":":
            continue
        start = scanner.next_significant()
        match = pattern.match(text, start)
        if match is None:
            continue
        out.append(text[scanner.pos : start])
        out.append(repl(match))
        scanner.skip_to(match.end())
    return "".join(out)
