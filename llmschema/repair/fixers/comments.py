"""Strip comments that LLMs like to sprinkle into JSON."""

from __future__ import annotations

from llmschema.repair.scanner import StringScanner


def _skip_line(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def remove_json_comments(text: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments outside strings.

    The newline that ends a line comment is kept. An unterminated block comment
    runs to the end of the text.

    Example:
        >>> remove_json_comments('{"a": 1 /* note */}')
        '{"a": 1 }'
    """
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        if c.kind == "structural" and c.char == "/":
            following = text[c.index + 1 : c.index + 2]
            if following == "/":
                scanner.skip_to(_skip_line(text, c.index + 2))
                continue
            if following == "*":
                end = text.find("*/", c.index + 2)
                scanner.skip_to(len(text) if end == -1 else end + 2)
                continue
        out.append(c.char)
    return "".join(out)


def remove_hash_comments(text: str) -> str:
    """Remove Python-style ``#`` comments outside strings."""
    out: list[str] = []
    scanner = StringScanner(text)
    for c in scanner:
        if c.kind == "structural" and c.char == "#":
            scanner.skip_to(_skip_line(text, c.index + 1))
            continue
        out.append(c.char)
    return "".join(out)


def remove_all_comments(text: str) -> str:
    """Remove both JavaScript-style and hash comments."""
    return remove_hash_comments(remove_json_comments(text))
