"""Literal, null, undefined, any and unknown schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import InvalidLiteralIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.schemas.number import is_number
from llmschema.undefined import UNDEFINED, is_undefined

_PRIMITIVES = (str, int, float, bool, type(None))


def same_value(expected: Any, received: Any) -> bool:
    """Exact identity for literals.

    Primitives must share the exact type and compare equal, so ``True`` never
    matches ``1``; ``int`` and ``float`` count as one number type. Everything
    else must be the very same object.
    """
    if is_number(expected) and is_number(received):
        return expected == received
    if type(expected) in _PRIMITIVES:
        return type(received) is type(expected) and received == expected
    return received is expected


@dataclass(frozen=True, kw_only=True)
class LiteralDef(SchemaDef):
    value: Any


class LiteralSchema(Schema):
    """Accepts exactly one value."""

    kind = SchemaKind.LITERAL
    _def: LiteralDef

    @property
    def value(self) -> Any:
        return self._def.value

    def constant_value(self) -> Any:
        return self._def.value

    def _parse(self, ctx: ParseContext) -> Outcome:
        if not same_value(self._def.value, ctx.data):
            return ctx.add_issue(InvalidLiteralIssue(expected=self._def.value, received=ctx.data))
        return Valid(self._def.value)

    def _json_schema(self) -> dict[str, Any]:
        if self._def.value is None:
            return {"type": "null"}
        return {"const": self._def.value}


class NullSchema(Schema):
    kind = SchemaKind.NULL

    def __init__(self, definition: SchemaDef | None = None):
        super().__init__(definition or SchemaDef())

    def constant_value(self) -> Any:
        return None

    def _parse(self, ctx: ParseContext) -> Outcome:
        if ctx.data is not None:
            return ctx.add_invalid_type("null")
        return Valid(None)

    def _json_schema(self) -> dict[str, Any]:
        return {"type": "null"}


class UndefinedSchema(Schema):
    """Accepts only a missing value."""

    kind = SchemaKind.UNDEFINED

    def __init__(self, definition: SchemaDef | None = None):
        super().__init__(definition or SchemaDef())

    def _parse(self, ctx: ParseContext) -> Outcome:
        if not is_undefined(ctx.data):
            return ctx.add_invalid_type("undefined")
        return Valid(UNDEFINED)

    def _json_schema(self) -> dict[str, Any]:
        return {}


class AnySchema(Schema):
    kind = SchemaKind.ANY

    def __init__(self, definition: SchemaDef | None = None):
        super().__init__(definition or SchemaDef())

    def _parse(self, ctx: ParseContext) -> Outcome:
        return Valid(ctx.data)

    def _json_schema(self) -> dict[str, Any]:
        return {}


class UnknownSchema(AnySchema):
    """Same runtime behaviour as ``AnySchema``; kept separate for intent."""

    kind = SchemaKind.UNKNOWN
