"""Number schema."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import (
    InvalidTypeIssue,
    NotFiniteIssue,
    NotMultipleOfIssue,
    TooBigIssue,
    TooSmallIssue,
)
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind

MAX_SAFE_INTEGER = 2**53 - 1

_NUMERIC = re.compile(
    r"\s*[+-]?"
    r"(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|Infinity)"
    r"\s*"
)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_to_number(value: Any) -> Any:
    """Parse a numeric-looking string; anything else is returned unchanged."""
    if not isinstance(value, str) or not _NUMERIC.fullmatch(value):
        return value
    text = value.strip()
    sign = -1 if text.startswith("-") else 1
    body = text.lstrip("+-")
    if body == "Infinity":
        return sign * math.inf
    if body[:2].lower() in ("0x", "0o", "0b"):
        return sign * int(body, 0)
    try:
        return int(text)
    except ValueError:
        parsed = float(text)
    return value if math.isnan(parsed) else parsed


@dataclass(frozen=True)
class NumberCheck:
    kind: str
    value: Any = None
    inclusive: bool = True
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class NumberDef(SchemaDef):
    checks: tuple[NumberCheck, ...] = ()


def _is_multiple(value: float, step: float) -> bool:
    if isinstance(value, int) and isinstance(step, int):
        return value % step == 0
    step = abs(step)
    remainder = abs(math.fmod(value, step))
    # Float error grows with the magnitude of the value.
    tolerance = sys.float_info.epsilon * max(1.0, abs(value))
    return remainder < tolerance or abs(remainder - step) < tolerance


class NumberSchema(Schema):
    """Integers and floats. ``bool`` is rejected and NaN never validates."""

    kind = SchemaKind.NUMBER
    _def: NumberDef

    def __init__(self, definition: NumberDef | None = None):
        super().__init__(definition or NumberDef())

    @property
    def checks(self) -> tuple[NumberCheck, ...]:
        return self._def.checks

    def _parse(self, ctx: ParseContext) -> Outcome:
        value = ctx.data
        if ctx.should_coerce:
            value = coerce_to_number(value)

        if not is_number(value):
            return ctx.add_invalid_type("number")
        if isinstance(value, float) and math.isnan(value):
            return ctx.add_issue(InvalidTypeIssue(expected="number", received="nan"))

        ok = True
        for check in self._def.checks:
            if not self._check(ctx, check, value):
                ok = False
        return Valid(value) if ok else Invalid()

    @staticmethod
    def _check(ctx: ParseContext, check: NumberCheck, value: float) -> bool:
        kind = check.kind
        if kind == "min":
            if value < check.value or (not check.inclusive and value == check.value):
                ctx.add_issue(
                    TooSmallIssue(type="number", minimum=check.value, inclusive=check.inclusive),
                    check.message,
                )
                return False
        elif kind == "max":
            if value > check.value or (not check.inclusive and value == check.value):
                ctx.add_issue(
                    TooBigIssue(type="number", maximum=check.value, inclusive=check.inclusive),
                    check.message,
                )
                return False
        elif kind == "int":
            if isinstance(value, float) and not value.is_integer():
                ctx.add_issue(InvalidTypeIssue(expected="integer", received="float"), check.message)
                return False
        elif kind == "positive":
            if value <= 0:
                ctx.add_issue(
                    TooSmallIssue(type="number", minimum=0, inclusive=False),
                    check.message or "Number must be positive",
                )
                return False
        elif kind == "negative":
            if value >= 0:
                ctx.add_issue(
                    TooBigIssue(type="number", maximum=0, inclusive=False),
                    check.message or "Number must be negative",
                )
                return False
        elif kind == "nonnegative":
            if value < 0:
                ctx.add_issue(
                    TooSmallIssue(type="number", minimum=0),
                    check.message or "Number must be non-negative",
                )
                return False
        elif kind == "nonpositive":
            if value > 0:
                ctx.add_issue(
                    TooBigIssue(type="number", maximum=0),
                    check.message or "Number must be non-positive",
                )
                return False
        elif kind == "multiple_of":
            if math.isinf(value) or not _is_multiple(value, check.value):
                ctx.add_issue(NotMultipleOfIssue(multiple_of=check.value), check.message)
                return False
        elif kind == "finite":
            if math.isinf(value):
                ctx.add_issue(NotFiniteIssue(), check.message)
                return False
        return True

    def _json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "number"}
        for check in self._def.checks:
            if check.kind == "min":
                schema["minimum" if check.inclusive else "exclusiveMinimum"] = check.value
            elif check.kind == "max":
                schema["maximum" if check.inclusive else "exclusiveMaximum"] = check.value
            elif check.kind == "int":
                schema["type"] = "integer"
            elif check.kind == "multiple_of":
                schema["multipleOf"] = check.value
        return schema

    def _add_check(
        self, kind: str, value: Any = None, inclusive: bool = True, message: str | None = None
    ) -> NumberSchema:
        check = NumberCheck(kind, value, inclusive, message)
        return self._clone(checks=self._def.checks + (check,))

    def min(self, value: float, message: str | None = None) -> NumberSchema:
        return self._add_check("min", value, True, message)

    gte = min

    def max(self, value: float, message: str | None = None) -> NumberSchema:
        return self._add_check("max", value, True, message)

    lte = max

    def gt(self, value: float, message: str | None = None) -> NumberSchema:
        return self._add_check("min", value, False, message)

    def lt(self, value: float, message: str | None = None) -> NumberSchema:
        return self._add_check("max", value, False, message)

    def int(self, message: str | None = None) -> NumberSchema:
        return self._add_check("int", message=message)

    def positive(self, message: str | None = None) -> NumberSchema:
        return self._add_check("positive", message=message)

    def negative(self, message: str | None = None) -> NumberSchema:
        return self._add_check("negative", message=message)

    def nonnegative(self, message: str | None = None) -> NumberSchema:
        return self._add_check("nonnegative", message=message)

    def nonpositive(self, message: str | None = None) -> NumberSchema:
        return self._add_check("nonpositive", message=message)

    def multiple_of(self, value: float, message: str | None = None) -> NumberSchema:
        if value == 0:
            raise ValueError("multiple_of step must be non-zero")
        return self._add_check("multiple_of", value, message=message)

    def finite(self, message: str | None = None) -> NumberSchema:
        return self._add_check("finite", message=message)

    def safe(self, message: str | None = None) -> NumberSchema:
        """Restrict to the range exactly representable as a double-precision integer."""
        return self.min(-MAX_SAFE_INTEGER, message).max(MAX_SAFE_INTEGER, message)
