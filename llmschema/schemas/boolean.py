"""Boolean schema."""

from __future__ import annotations

from typing import Any

from llmschema.parse.context import ParseContext
from llmschema.parse.result import Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind

TRUE_STRINGS = frozenset({"true", "1", "yes"})
FALSE_STRINGS = frozenset({"false", "0", "no"})


def coerce_to_boolean(value: Any) -> Any:
    """Map yes/no style strings and the numbers 1/0 to booleans."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if value == 1:
            return True
        if value == 0:
            return False
    return value


class BooleanSchema(Schema):
    kind = SchemaKind.BOOLEAN

    def __init__(self, definition: SchemaDef | None = None):
        super().__init__(definition or SchemaDef())

    def _parse(self, ctx: ParseContext) -> Outcome:
        value = coerce_to_boolean(ctx.data) if ctx.should_coerce else ctx.data
        if not isinstance(value, bool):
            return ctx.add_invalid_type("boolean")
        return Valid(value)

    def _json_schema(self) -> dict[str, Any]:
        return {"type": "boolean"}
