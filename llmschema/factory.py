"""Schema constructors, exposed as ``llmschema.v``.

Example:
    >>> from llmschema import v
    >>> user = v.object({"name": v.string().min(1), "age": v.number().int().optional()})
    >>> user.parse({"name": "Ada"})
    {'name': 'Ada'}

Several constructors share a name with a builtin (``any``, ``object``,
``tuple``); use them through the ``v`` namespace.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from llmschema.schemas.array import ArraySchema
from llmschema.schemas.base import Schema
from llmschema.schemas.boolean import BooleanSchema
from llmschema.schemas.enum import EnumSchema, NativeEnumSchema
from llmschema.schemas.literals import (
    AnySchema,
    LiteralDef,
    LiteralSchema,
    NullSchema,
    UndefinedSchema,
    UnknownSchema,
)
from llmschema.schemas.number import NumberSchema
from llmschema.schemas.object import ObjectSchema
from llmschema.schemas.record import RecordSchema
from llmschema.schemas.string import StringSchema
from llmschema.schemas.tuple import TupleSchema
from llmschema.schemas.union import DiscriminatedUnionSchema, IntersectionSchema, UnionSchema


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def literal(value: Any) -> LiteralSchema:
    return LiteralSchema(LiteralDef(value=value))


def null() -> NullSchema:
    return NullSchema()


def undefined() -> UndefinedSchema:
    return UndefinedSchema()


def any() -> AnySchema:  # noqa: A001
    return AnySchema()


def unknown() -> UnknownSchema:
    return UnknownSchema()


def object(shape: Mapping[str, Schema]) -> ObjectSchema:  # noqa: A001
    return ObjectSchema.of(shape)


def array(element: Schema) -> ArraySchema:
    return ArraySchema.of(element)


def enum(values: Iterable[str]) -> EnumSchema:
    return EnumSchema.of(values)


def native_enum(enum_class: type[Enum]) -> NativeEnumSchema:
    return NativeEnumSchema.of(enum_class)


def union(options: Iterable[Schema]) -> UnionSchema:
    return UnionSchema.of(options)


def discriminated_union(discriminator: str, options: Iterable[Schema]) -> DiscriminatedUnionSchema:
    return DiscriminatedUnionSchema.of(discriminator, options)


def intersection(left: Schema, right: Schema) -> IntersectionSchema:
    return IntersectionSchema.of(left, right)


def tuple(items: Iterable[Schema]) -> TupleSchema:  # noqa: A001
    return TupleSchema.of(items)


def record(key_or_value: Schema, value: Schema | None = None) -> RecordSchema:
    """``record(value)`` uses string keys; ``record(key, value)`` validates keys too."""
    if value is None:
        return RecordSchema.of(StringSchema(), key_or_value)
    return RecordSchema.of(key_or_value, value)
