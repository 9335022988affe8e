"""Schema classes.

Build schemas through the factory functions in ``llmschema.v`` rather than the
constructors below.
"""

from llmschema.schemas.array import ArraySchema
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.schemas.boolean import BooleanSchema
from llmschema.schemas.enum import EnumSchema, NativeEnumSchema
from llmschema.schemas.literals import (
    AnySchema,
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
from llmschema.schemas.wrappers import DefaultSchema, NullableSchema, OptionalSchema

__all__ = [
    "AnySchema",
    "ArraySchema",
    "BooleanSchema",
    "DefaultSchema",
    "DiscriminatedUnionSchema",
    "EnumSchema",
    "IntersectionSchema",
    "LiteralSchema",
    "NativeEnumSchema",
    "NullSchema",
    "NullableSchema",
    "NumberSchema",
    "ObjectSchema",
    "OptionalSchema",
    "RecordSchema",
    "Schema",
    "SchemaDef",
    "SchemaKind",
    "StringSchema",
    "TupleSchema",
    "UndefinedSchema",
    "UnionSchema",
    "UnknownSchema",
]
