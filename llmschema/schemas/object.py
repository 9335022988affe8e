"""Object schema and its shape operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from llmschema.errors.issues import UnrecognizedKeysIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.schemas.enum import EnumSchema
from llmschema.undefined import UNDEFINED, is_undefined

UnknownKeys = Literal["strict", "strip", "passthrough"]


@dataclass(frozen=True, kw_only=True)
class ObjectDef(SchemaDef):
    shape: Mapping[str, Schema]
    unknown_keys: UnknownKeys = "strip"


class ObjectSchema(Schema):
    """Fixed-shape mapping.

    Keys are validated in declared order. A missing key is validated as
    ``UNDEFINED`` and left out of the output unless its schema produced a value.
    Extra keys are dropped (``strip``, the default), reported (``strict``) or
    copied through (``passthrough``).
    """

    kind = SchemaKind.OBJECT
    _def: ObjectDef

    def __init__(self, definition: ObjectDef):
        # Shape is copied into a read-only mapping.
        frozen = MappingProxyType(dict(definition.shape))
        super().__init__(
            ObjectDef(
                shape=frozen,
                unknown_keys=definition.unknown_keys,
                description=definition.description,
                examples=definition.examples,
            )
        )

    @classmethod
    def of(cls, shape: Mapping[str, Schema]) -> ObjectSchema:
        return cls(ObjectDef(shape=shape))

    @property
    def shape(self) -> Mapping[str, Schema]:
        return self._def.shape

    @property
    def unknown_keys(self) -> UnknownKeys:
        return self._def.unknown_keys

    def _parse(self, ctx: ParseContext) -> Outcome:
        data = ctx.data
        if not isinstance(data, Mapping):
            return ctx.add_invalid_type("object")

        ok = True
        result: dict[str, Any] = {}
        for key, schema in self._def.shape.items():
            present = key in data
            outcome = schema._parse(ctx.child(data[key] if present else UNDEFINED, key))
            if isinstance(outcome, Valid):
                value = outcome.value
            else:
                ok = False
                value = outcome.partial
            if not is_undefined(value) or (present and isinstance(outcome, Valid)):
                result[key] = value

        extra = [key for key in data if key not in self._def.shape]
        if extra:
            if self._def.unknown_keys == "strict":
                ctx.add_issue(UnrecognizedKeysIssue(keys=tuple(str(k) for k in extra)))
                ok = False
            elif self._def.unknown_keys == "passthrough":
                for key in extra:
                    result[key] = data[key]

        return Valid(result) if ok else Invalid(partial=result)

    def _json_schema(self) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        required: list[str] = []
        for key, schema in self._def.shape.items():
            properties[key] = schema._annotated_json_schema()
            if schema.kind not in (SchemaKind.OPTIONAL, SchemaKind.DEFAULT):
                required.append(key)

        result: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            result["required"] = required
        if self._def.unknown_keys == "strict":
            result["additionalProperties"] = False
        return result

    def _with_shape(self, shape: Mapping[str, Schema], keep_meta: bool = True) -> ObjectSchema:
        if keep_meta:
            return self._clone(shape=shape)
        return ObjectSchema(ObjectDef(shape=shape))

    def keyof(self) -> EnumSchema:
        """Enum of this object's keys."""
        return EnumSchema.of(self._def.shape)

    def extend(self, shape: Mapping[str, Schema]) -> ObjectSchema:
        """Add or override keys. Unknown-key policy and metadata carry over."""
        return self._with_shape({**self._def.shape, **shape})

    def merge(self, other: ObjectSchema) -> ObjectSchema:
        """Combine shapes; ``other`` wins on key collisions."""
        return self.extend(other.shape)

    def pick(self, keys: Iterable[str]) -> ObjectSchema:
        wanted = set(keys)
        return self._with_shape(
            {k: s for k, s in self._def.shape.items() if k in wanted}, keep_meta=False
        )

    def omit(self, keys: Iterable[str]) -> ObjectSchema:
        dropped = set(keys)
        return self._with_shape(
            {k: s for k, s in self._def.shape.items() if k not in dropped}, keep_meta=False
        )

    def partial(self) -> ObjectSchema:
        """Make every key optional."""
        return self._with_shape(
            {k: s if s.is_optional() else s.optional() for k, s in self._def.shape.items()},
            keep_meta=False,
        )

    def required(self) -> ObjectSchema:
        """Unwrap every optional key."""
        shape = {}
        for key, schema in self._def.shape.items():
            while schema.is_optional():
                schema = schema.unwrap()
            shape[key] = schema
        return self._with_shape(shape, keep_meta=False)

    def strict(self) -> ObjectSchema:
        return self._clone(unknown_keys="strict")

    def strip(self) -> ObjectSchema:
        return self._clone(unknown_keys="strip")

    def passthrough(self) -> ObjectSchema:
        return self._clone(unknown_keys="passthrough")
