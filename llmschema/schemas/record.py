"""Record schema: a mapping with dynamic keys."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind


@dataclass(frozen=True, kw_only=True)
class RecordDef(SchemaDef):
    key_schema: Schema
    value_schema: Schema


class RecordSchema(Schema):
    """Every entry's key and value are validated separately.

    An entry reaches the output only when both validate; issues for the key and
    the value are both recorded at the entry's path.
    """

    kind = SchemaKind.RECORD
    _def: RecordDef

    @classmethod
    def of(cls, key_schema: Schema, value_schema: Schema) -> RecordSchema:
        return cls(RecordDef(key_schema=key_schema, value_schema=value_schema))

    @property
    def key_schema(self) -> Schema:
        return self._def.key_schema

    @property
    def value_schema(self) -> Schema:
        return self._def.value_schema

    def _parse(self, ctx: ParseContext) -> Outcome:
        if not isinstance(ctx.data, Mapping):
            return ctx.add_invalid_type("object")

        ok = True
        result: dict[Any, Any] = {}
        for key, value in ctx.data.items():
            key_outcome = self._def.key_schema._parse(ctx.child(key, key))
            value_outcome = self._def.value_schema._parse(ctx.child(value, key))
            if isinstance(key_outcome, Valid) and isinstance(value_outcome, Valid):
                result[key_outcome.value] = value_outcome.value
            else:
                ok = False

        return Valid(result) if ok else Invalid(partial=result)

    def _json_schema(self) -> dict[str, Any]:
        value_schema = self._def.value_schema._annotated_json_schema()
        pattern = self._def.key_schema._json_schema().get("pattern")
        if pattern:
            return {
                "type": "object",
                "patternProperties": {pattern: value_schema},
                "additionalProperties": False,
            }
        return {"type": "object", "additionalProperties": value_schema}
