"""String schema."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import InvalidStringIssue, TooBigIssue, TooSmallIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.undefined import is_undefined

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
URL_PATTERN = re.compile(r"https?://[^\s/$.?#].[^\s]*", re.IGNORECASE)
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.IGNORECASE
)
CUID_PATTERN = re.compile(r"c[^\s-]{8,}", re.IGNORECASE)

_FORMATS = {"email": EMAIL_PATTERN, "url": URL_PATTERN, "uuid": UUID_PATTERN, "cuid": CUID_PATTERN}
_TRANSFORMS = {"trim": str.strip, "to_lower": str.lower, "to_upper": str.upper}


def coerce_to_string(value: Any) -> Any:
    """Render a non-string value as text for lenient parsing.

    ``None`` and ``UNDEFINED`` are returned unchanged.
    """
    if value is None or is_undefined(value) or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


@dataclass(frozen=True)
class StringCheck:
    kind: str
    value: Any = None
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class StringDef(SchemaDef):
    checks: tuple[StringCheck, ...] = ()


class StringSchema(Schema):
    """Text values.

    Checks run in the order they were added. ``trim``, ``to_lower`` and
    ``to_upper`` rewrite the running value for the checks after them; every
    other check only asserts, and all failing assertions are reported.
    """

    kind = SchemaKind.STRING
    _def: StringDef

    def __init__(self, definition: StringDef | None = None):
        super().__init__(definition or StringDef())

    @property
    def checks(self) -> tuple[StringCheck, ...]:
        return self._def.checks

    def _parse(self, ctx: ParseContext) -> Outcome:
        value = ctx.data
        if ctx.should_coerce:
            value = coerce_to_string(value)
        if not isinstance(value, str):
            return ctx.add_invalid_type("string")

        ok = True
        for check in self._def.checks:
            if check.kind in _TRANSFORMS:
                value = _TRANSFORMS[check.kind](value)
            elif not self._check(ctx, check, value):
                ok = False

        return Valid(value) if ok else Invalid()

    @staticmethod
    def _check(ctx: ParseContext, check: StringCheck, value: str) -> bool:
        kind = check.kind
        if kind == "min":
            if len(value) < check.value:
                ctx.add_issue(TooSmallIssue(type="string", minimum=check.value), check.message)
                return False
        elif kind == "max":
            if len(value) > check.value:
                ctx.add_issue(TooBigIssue(type="string", maximum=check.value), check.message)
                return False
        elif kind == "length":
            if len(value) < check.value:
                ctx.add_issue(
                    TooSmallIssue(type="string", minimum=check.value, exact=True), check.message
                )
                return False
            if len(value) > check.value:
                ctx.add_issue(
                    TooBigIssue(type="string", maximum=check.value, exact=True), check.message
                )
                return False
        elif kind in _FORMATS:
            if not _FORMATS[kind].fullmatch(value):
                ctx.add_issue(InvalidStringIssue(validation=kind), check.message)
                return False
        elif kind == "regex":
            if not check.value.search(value):
                ctx.add_issue(InvalidStringIssue(validation="regex"), check.message)
                return False
        elif kind == "includes":
            if check.value not in value:
                ctx.add_issue(
                    InvalidStringIssue(validation="includes"),
                    check.message or f'String must include "{check.value}"',
                )
                return False
        elif kind == "starts_with":
            if not value.startswith(check.value):
                ctx.add_issue(
                    InvalidStringIssue(validation="starts_with"),
                    check.message or f'String must start with "{check.value}"',
                )
                return False
        elif kind == "ends_with":
            if not value.endswith(check.value):
                ctx.add_issue(
                    InvalidStringIssue(validation="ends_with"),
                    check.message or f'String must end with "{check.value}"',
                )
                return False
        return True

    def _json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "string"}
        for check in self._def.checks:
            if check.kind == "min":
                schema["minLength"] = check.value
            elif check.kind == "max":
                schema["maxLength"] = check.value
            elif check.kind == "length":
                schema["minLength"] = schema["maxLength"] = check.value
            elif check.kind == "email":
                schema["format"] = "email"
            elif check.kind == "url":
                schema["format"] = "uri"
            elif check.kind == "uuid":
                schema["format"] = "uuid"
            elif check.kind == "regex":
                schema["pattern"] = check.value.pattern
        return schema

    def _add_check(self, kind: str, value: Any = None, message: str | None = None) -> StringSchema:
        return self._clone(checks=self._def.checks + (StringCheck(kind, value, message),))

    def min(self, length: int, message: str | None = None) -> StringSchema:
        return self._add_check("min", length, message)

    def max(self, length: int, message: str | None = None) -> StringSchema:
        return self._add_check("max", length, message)

    def length(self, length: int, message: str | None = None) -> StringSchema:
        return self._add_check("length", length, message)

    def nonempty(self, message: str | None = None) -> StringSchema:
        return self.min(1, message or "String cannot be empty")

    def email(self, message: str | None = None) -> StringSchema:
        return self._add_check("email", message=message)

    def url(self, message: str | None = None) -> StringSchema:
        return self._add_check("url", message=message)

    def uuid(self, message: str | None = None) -> StringSchema:
        """Require a version 4 UUID."""
        return self._add_check("uuid", message=message)

    def cuid(self, message: str | None = None) -> StringSchema:
        return self._add_check("cuid", message=message)

    def regex(self, pattern: str | re.Pattern[str], message: str | None = None) -> StringSchema:
        """Require ``pattern`` to match somewhere in the value (``re.search``)."""
        return self._add_check("regex", re.compile(pattern), message)

    def includes(self, value: str, message: str | None = None) -> StringSchema:
        return self._add_check("includes", value, message)

    def starts_with(self, value: str, message: str | None = None) -> StringSchema:
        return self._add_check("starts_with", value, message)

    def ends_with(self, value: str, message: str | None = None) -> StringSchema:
        return self._add_check("ends_with", value, message)

    def trim(self) -> StringSchema:
        return self._add_check("trim")

    def to_lower(self) -> StringSchema:
        return self._add_check("to_lower")

    def to_upper(self) -> StringSchema:
        return self._add_check("to_upper")
