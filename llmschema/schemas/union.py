"""Union, discriminated union and intersection schemas."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import (
    InvalidIntersectionTypesIssue,
    InvalidUnionDiscriminatorIssue,
    InvalidUnionIssue,
    Issue,
)
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Invalid, Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.schemas.number import is_number
from llmschema.schemas.object import ObjectSchema
from llmschema.undefined import UNDEFINED, is_undefined


@dataclass(frozen=True, kw_only=True)
class UnionDef(SchemaDef):
    options: tuple[Schema, ...]


class UnionSchema(Schema):
    """First member, in declared order, that validates cleanly wins.

    Each member is tried on an isolated branch, so failed attempts leave no
    issues behind. When every member fails, one ``invalid_union`` issue carries
    all of their issues.
    """

    kind = SchemaKind.UNION
    _def: UnionDef

    def __init__(self, definition: UnionDef):
        if not definition.options:
            raise ValueError("A union needs at least one option")
        super().__init__(definition)

    @classmethod
    def of(cls, options: Iterable[Schema]) -> UnionSchema:
        return cls(UnionDef(options=tuple(options)))

    @property
    def options(self) -> tuple[Schema, ...]:
        return self._def.options

    def _parse(self, ctx: ParseContext) -> Outcome:
        collected: list[Issue] = []
        for option in self._def.options:
            trial = ctx.branch(ctx.data)
            outcome = option._parse(trial)
            if isinstance(outcome, Valid) and not trial.has_issues:
                return outcome
            collected.extend(trial.issues)
        return ctx.add_issue(InvalidUnionIssue(union_errors=tuple(collected)))

    def _json_schema(self) -> dict[str, Any]:
        return {"anyOf": [option._annotated_json_schema() for option in self._def.options]}


@dataclass(frozen=True, kw_only=True)
class DiscriminatedUnionDef(UnionDef):
    discriminator: str


def _lookup_key(value: Any) -> tuple[Any, Any] | None:
    if not isinstance(value, Hashable):
        return None
    if is_number(value):
        return ("number", value)
    return (type(value), value)


class DiscriminatedUnionSchema(Schema):
    """Union of object schemas told apart by one literal-valued field.

    The lookup from discriminator value to member is built once here; parsing
    reads the field and hands the whole value to the matching member.

    Raises:
        ValueError: If a member is not an object schema, has no constant value
            for the discriminator, or repeats another member's value
    """

    kind = SchemaKind.DISCRIMINATED_UNION
    _def: DiscriminatedUnionDef

    def __init__(self, definition: DiscriminatedUnionDef):
        super().__init__(definition)
        self._lookup: dict[tuple[Any, Any], ObjectSchema] = {}
        self._values: list[Any] = []
        for index, option in enumerate(definition.options):
            if not isinstance(option, ObjectSchema):
                raise ValueError(
                    f"Option {index} of a discriminated union must be an object schema"
                )
            field = option.shape.get(definition.discriminator)
            value = UNDEFINED if field is None else field.constant_value()
            if is_undefined(value):
                raise ValueError(
                    f"Option {index} has no constant value for discriminator "
                    f"'{definition.discriminator}'"
                )
            key = _lookup_key(value)
            if key is None:
                raise ValueError(f"Discriminator value {value!r} is not hashable")
            if key in self._lookup:
                raise ValueError(f"Duplicate discriminator value {value!r}")
            self._lookup[key] = option
            self._values.append(value)

    @classmethod
    def of(cls, discriminator: str, options: Iterable[Schema]) -> DiscriminatedUnionSchema:
        return cls(DiscriminatedUnionDef(discriminator=discriminator, options=tuple(options)))

    @property
    def discriminator(self) -> str:
        return self._def.discriminator

    @property
    def options(self) -> tuple[Schema, ...]:
        return self._def.options

    def _parse(self, ctx: ParseContext) -> Outcome:
        if not isinstance(ctx.data, Mapping):
            return ctx.add_invalid_type("object")

        value = ctx.data.get(self._def.discriminator, UNDEFINED)
        key = _lookup_key(value)
        option = self._lookup.get(key) if key is not None else None
        if option is None:
            return ctx.add_issue(
                InvalidUnionDiscriminatorIssue(
                    options=tuple(str(v) for v in self._values), received=value
                )
            )
        return option._parse(ctx)

    def _json_schema(self) -> dict[str, Any]:
        return {
            "oneOf": [option._annotated_json_schema() for option in self._def.options],
            "discriminator": {"propertyName": self._def.discriminator},
        }


@dataclass(frozen=True, kw_only=True)
class IntersectionDef(SchemaDef):
    left: Schema
    right: Schema


class IntersectionSchema(Schema):
    """Value must satisfy both sides.

    Two mappings are merged shallowly, right side winning. Any other pair of
    results must be equal.
    """

    kind = SchemaKind.INTERSECTION
    _def: IntersectionDef

    @classmethod
    def of(cls, left: Schema, right: Schema) -> IntersectionSchema:
        return cls(IntersectionDef(left=left, right=right))

    @property
    def left(self) -> Schema:
        return self._def.left

    @property
    def right(self) -> Schema:
        return self._def.right

    def _parse(self, ctx: ParseContext) -> Outcome:
        left = self._def.left._parse(ctx)
        side = ctx.branch(ctx.data)
        right = self._def.right._parse(side)
        ctx.absorb(side)

        if isinstance(left, Invalid) or isinstance(right, Invalid):
            return Invalid(partial=_merge_partials(left, right))

        if isinstance(left.value, Mapping) and isinstance(right.value, Mapping):
            return Valid({**left.value, **right.value})
        if type(left.value) is type(right.value) and left.value == right.value:
            return left
        return ctx.add_issue(InvalidIntersectionTypesIssue())

    def _json_schema(self) -> dict[str, Any]:
        return {
            "allOf": [
                self._def.left._annotated_json_schema(),
                self._def.right._annotated_json_schema(),
            ]
        }


def _merge_partials(left: Outcome, right: Outcome) -> Any:
    values = [o.value if isinstance(o, Valid) else o.partial for o in (left, right)]
    if all(isinstance(v, Mapping) for v in values):
        return {**values[0], **values[1]}
    return UNDEFINED
