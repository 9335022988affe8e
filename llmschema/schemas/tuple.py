"""Tuple schema: fixed positions plus an optional variadic tail."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import TooBigIssue, TooSmallIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.array import is_array
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.undefined import is_undefined


@dataclass(frozen=True, kw_only=True)
class TupleDef(SchemaDef):
    items: tuple[Schema, ...]
    rest: Schema | None = None


class TupleSchema(Schema):
    """Without ``rest`` the input length must equal the arity; with it, at least the arity."""

    kind = SchemaKind.TUPLE
    _def: TupleDef

    @classmethod
    def of(cls, items: Iterable[Schema]) -> TupleSchema:
        return cls(TupleDef(items=tuple(items)))

    @property
    def items(self) -> tuple[Schema, ...]:
        return self._def.items

    def rest(self, schema: Schema) -> TupleSchema:
        """Validate elements past the fixed positions against ``schema``."""
        return self._clone(rest=schema)

    def _parse(self, ctx: ParseContext) -> Outcome:
        data = ctx.data
        if not is_array(data):
            return ctx.add_invalid_type("array")

        arity = len(self._def.items)
        if self._def.rest is None and len(data) != arity:
            if len(data) < arity:
                return ctx.add_issue(TooSmallIssue(type="array", minimum=arity, exact=True))
            return ctx.add_issue(TooBigIssue(type="array", maximum=arity, exact=True))
        if len(data) < arity:
            return ctx.add_issue(TooSmallIssue(type="array", minimum=arity))

        ok = True
        result: list[Any] = []
        for index, item in enumerate(data):
            schema = self._def.items[index] if index < arity else self._def.rest
            outcome = schema._parse(ctx.child(item, index))
            if isinstance(outcome, Valid):
                result.append(outcome.value)
            else:
                ok = False
                if not is_undefined(outcome.partial):
                    result.append(outcome.partial)

        return Valid(result) if ok else Invalid(partial=result)

    def _json_schema(self) -> dict[str, Any]:
        arity = len(self._def.items)
        schema: dict[str, Any] = {
            "type": "array",
            "prefixItems": [item._annotated_json_schema() for item in self._def.items],
        }
        if self._def.rest is not None:
            schema["items"] = self._def.rest._annotated_json_schema()
            schema["minItems"] = arity
        else:
            schema["items"] = False
            schema["minItems"] = schema["maxItems"] = arity
        return schema
