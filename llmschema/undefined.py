"""Sentinel for values that are absent rather than null.

JSON ``null`` maps to ``None``; a key missing from an object maps to ``UNDEFINED``.
Optional schemas accept ``UNDEFINED``, nullable schemas accept ``None``.
"""

from __future__ import annotations

from typing import Any


class _Undefined:
    """Singleton marker for an absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_undefined(value: Any) -> bool:
    """Check whether a value is the ``UNDEFINED`` sentinel."""
    return value is UNDEFINED
