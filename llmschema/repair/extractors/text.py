"""Pull a JSON object or array out of surrounding prose."""

from __future__ import annotations

from dataclasses import dataclass

from llmschema.repair.scanner import StringScanner


@dataclass
class TextExtraction:
    """Outcome of ``extract_json_from_text``.

    ``start`` and ``end`` index into the stripped input and are only set when
    something was extracted.
    """

    text: str
    extracted: bool
    start: int | None = None
    end: int | None = None


def find_balanced(
    text: str, open_char: str, close_char: str, start: int = 0
) -> tuple[int, int] | None:
    """Locate the first balanced ``open_char ... close_char`` span at or after ``start``.

    Brackets inside strings are ignored.

    Returns:
        ``(start, end)`` with ``end`` exclusive, or None when the first opener never closes
    """
    begin = text.find(open_char, start)
    if begin == -1:
        return None

    depth = 0
    scanner = StringScanner(text)
    scanner.skip_to(begin)
    for c in scanner:
        if c.kind != "structural":
            continue
        if c.char == open_char:
            depth += 1
        elif c.char == close_char:
            depth -= 1
            if depth == 0:
                return begin, c.index + 1
    return None


def _is_wrapped(text: str) -> bool:
    if text.startswith("{"):
        return text.endswith("}")
    return text.startswith("[") and text.endswith("]")


def extract_json_from_text(text: str) -> TextExtraction:
    """Return the JSON object or array that starts first in ``text``.

    Input that already starts and ends with matching brackets passes through.
    When the first opener never closes, the value is treated as truncated and
    everything from that opener to the end is returned, so a truncated object
    is never cut down to an inner array. A truncated value that already starts
    the input is left alone.

    Example:
        >>> extract_json_from_text('Here you go: {"a": 1} Cheers!').text
        '{"a": 1}'
    """
    trimmed = text.strip()
    if _is_wrapped(trimmed):
        return TextExtraction(text=trimmed, extracted=False)

    openers = [
        (trimmed.find(open_char), open_char, close_char)
        for open_char, close_char in (("{", "}"), ("[", "]"))
    ]
    openers = [opener for opener in openers if opener[0] != -1]
    if not openers:
        return TextExtraction(text=trimmed, extracted=False)

    begin, open_char, close_char = min(openers)
    span = find_balanced(trimmed, open_char, close_char, begin)
    if span is None:
        if begin == 0:
            return TextExtraction(text=trimmed, extracted=False)
        span = begin, len(trimmed)

    start, end = span
    return TextExtraction(text=trimmed[start:end], extracted=True, start=start, end=end)


def extract_all_json_from_text(text: str) -> list[str]:
    """Return every top-level balanced object or array in order of appearance."""
    found: list[str] = []
    pos = 0
    while pos < len(text):
        candidates = [
            span
            for span in (find_balanced(text, "{", "}", pos), find_balanced(text, "[", "]", pos))
            if span is not None
        ]
        if not candidates:
            break
        start, end = min(candidates)
        found.append(text[start:end])
        pos = end
    return found
