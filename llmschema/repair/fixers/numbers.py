"""Number fixes: non-JSON special values and JavaScript number literals."""

from __future__ import annotations

import re

from llmschema.repair.scanner import replace_after_colon

_SPECIAL = re.compile(r"(-?Infinity|NaN|undefined)(?![\w$])")

_LEADING_POINT = re.compile(r"(-?)\.(\d)")
_TRAILING_POINT = re.compile(r"(-?\d+)\.(?=\s*(?:[,}\]]|\Z))")
_RADIX = re.compile(r"(-?)0([xXoObB])([0-9a-fA-F]+)(?![\w$.])")
_BASES = {"x": 16, "o": 8, "b": 2}


def fix_special_numbers(text: str, as_strings: bool = False) -> str:
    """Replace ``NaN``, ``Infinity``, ``-Infinity`` and ``undefined`` values.

    Values become ``null``, or with ``as_strings=True`` their quoted name.
    ``undefined`` always becomes ``null``.

    Example:
        >>> fix_special_numbers('{"value": NaN}')
        '{"value": null}'
        >>> fix_special_numbers('{"value": -Infinity}', as_strings=True)
        '{"value": "-Infinity"}'
    """

    def replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if as_strings and token != "undefined":
            return f'"{token}"'
        return "null"

    return replace_after_colon(text, _SPECIAL, replace)


def fix_number_formats(text: str) -> str:
    """Rewrite value-position number literals that JSON does not allow.

    Handles ``.5`` -> ``0.5``, ``5.`` -> ``5.0`` and hexadecimal, octal or
    binary integers (``0x1f``, ``0o17``, ``0b101``) -> decimal.

    Example:
        >>> fix_number_formats('{"mask": 0xff, "ratio": .5}')
        '{"mask": 255, "ratio": 0.5}'
    """
    text = replace_after_colon(text, _LEADING_POINT, lambda m: f"{m.group(1)}0.{m.group(2)}")
    text = replace_after_colon(text, _TRAILING_POINT, lambda m: f"{m.group(1)}.0")

    def convert(match: re.Match[str]) -> str:
        sign, prefix, digits = match.groups()
        try:
            value = int(digits, _BASES[prefix.lower()])
        except ValueError:
            return match.group(0)
        return f"{'-' if sign else ''}{value}"

    return replace_after_colon(text, _RADIX, convert)
