"""Array schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import TooBigIssue, TooSmallIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.undefined import is_undefined


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True, kw_only=True)
class ArrayDef(SchemaDef):
    element: Schema
    min_length: int | None = None
    max_length: int | None = None
    exact_length: int | None = None


def check_length(ctx: ParseContext, size: int, definition: ArrayDef) -> bool:
    """Record every violated length bound. Returns True when all hold."""
    ok = True
    if definition.min_length is not None and size < definition.min_length:
        ctx.add_issue(TooSmallIssue(type="array", minimum=definition.min_length))
        ok = False
    if definition.max_length is not None and size > definition.max_length:
        ctx.add_issue(TooBigIssue(type="array", maximum=definition.max_length))
        ok = False
    if definition.exact_length is not None and size != definition.exact_length:
        if size < definition.exact_length:
            ctx.add_issue(TooSmallIssue(type="array", minimum=definition.exact_length, exact=True))
        else:
            ctx.add_issue(TooBigIssue(type="array", maximum=definition.exact_length, exact=True))
        ok = False
    return ok


class ArraySchema(Schema):
    """Homogeneous list.

    Every element is validated even after one fails, so all element issues are
    reported together. On failure the partial value lists the elements that
    validated.
    """

    kind = SchemaKind.ARRAY
    _def: ArrayDef

    @classmethod
    def of(cls, element: Schema) -> ArraySchema:
        return cls(ArrayDef(element=element))

    @property
    def element(self) -> Schema:
        return self._def.element

    def _parse(self, ctx: ParseContext) -> Outcome:
        if not is_array(ctx.data):
            return ctx.add_invalid_type("array")

        ok = check_length(ctx, len(ctx.data), self._def)
        items: list[Any] = []
        for index, item in enumerate(ctx.data):
            outcome = self._def.element._parse(ctx.child(item, index))
            if isinstance(outcome, Valid):
                items.append(outcome.value)
            else:
                ok = False
                if not is_undefined(outcome.partial):
                    items.append(outcome.partial)

        return Valid(items) if ok else Invalid(partial=items)

    def _json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "array",
            "items": self._def.element._annotated_json_schema(),
        }
        if self._def.min_length is not None:
            schema["minItems"] = self._def.min_length
        if self._def.max_length is not None:
            schema["maxItems"] = self._def.max_length
        if self._def.exact_length is not None:
            schema["minItems"] = schema["maxItems"] = self._def.exact_length
        return schema

    def min_length(self, length: int) -> ArraySchema:
        return self._clone(min_length=length)

    min = min_length

    def max_length(self, length: int) -> ArraySchema:
        return self._clone(max_length=length)

    max = max_length

    def length(self, length: int) -> ArraySchema:
        return self._clone(exact_length=length)

    def nonempty(self) -> ArraySchema:
        return self.min_length(1)
