"""String enum and Python ``enum.Enum`` schemas."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from llmschema.errors.issues import InvalidEnumValueIssue
from llmschema.parse.context import ParseContext
from llmschema.parse.result import Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.schemas.literals import same_value
from llmschema.schemas.string import coerce_to_string


@dataclass(frozen=True, kw_only=True)
class EnumDef(SchemaDef):
    values: tuple[str, ...]


class EnumSchema(Schema):
    """One of a fixed set of strings.

    Lenient parsing matches case-insensitively and returns the declared
    spelling.
    """

    kind = SchemaKind.ENUM
    _def: EnumDef

    def __init__(self, definition: EnumDef):
        if not definition.values:
            raise ValueError("An enum needs at least one value")
        super().__init__(definition)

    @classmethod
    def of(cls, values: Iterable[str]) -> EnumSchema:
        return cls(EnumDef(values=tuple(values)))

    @property
    def options(self) -> tuple[str, ...]:
        return self._def.values

    @property
    def enum(self) -> dict[str, str]:
        return {value: value for value in self._def.values}

    def _parse(self, ctx: ParseContext) -> Outcome:
        value = coerce_to_string(ctx.data) if ctx.should_coerce else ctx.data
        if not isinstance(value, str):
            return ctx.add_invalid_type("string")

        if ctx.is_lenient:
            lowered = value.lower()
            for option in self._def.values:
                if option.lower() == lowered:
                    return Valid(option)

        if value not in self._def.values:
            return ctx.add_issue(InvalidEnumValueIssue(options=self._def.values, received=value))
        return Valid(value)

    def _json_schema(self) -> dict[str, Any]:
        return {"type": "string", "enum": list(self._def.values)}

    def extract(self, values: Iterable[str]) -> EnumSchema:
        """Subset containing only ``values``."""
        return EnumSchema.of(values)

    def exclude(self, values: Iterable[str]) -> EnumSchema:
        """Subset without ``values``."""
        dropped = set(values)
        return EnumSchema.of(value for value in self._def.values if value not in dropped)


@dataclass(frozen=True, kw_only=True)
class NativeEnumDef(SchemaDef):
    enum_class: type[enum.Enum]


class NativeEnumSchema(Schema):
    """Values of a Python ``enum.Enum`` class.

    Accepts member values, and members themselves, which are unwrapped to their
    value. Lenient parsing also matches string values case-insensitively.
    """

    kind = SchemaKind.NATIVE_ENUM
    _def: NativeEnumDef

    def __init__(self, definition: NativeEnumDef):
        super().__init__(definition)
        self._values = tuple(member.value for member in definition.enum_class)

    @classmethod
    def of(cls, enum_class: type[enum.Enum]) -> NativeEnumSchema:
        return cls(NativeEnumDef(enum_class=enum_class))

    @property
    def enum(self) -> type[enum.Enum]:
        return self._def.enum_class

    @property
    def options(self) -> tuple[Any, ...]:
        return self._values

    def _parse(self, ctx: ParseContext) -> Outcome:
        value = ctx.data
        if isinstance(value, self._def.enum_class):
            return Valid(value.value)

        for option in self._values:
            if same_value(option, value):
                return Valid(option)

        if ctx.is_lenient and isinstance(value, str):
            lowered = value.lower()
            for option in self._values:
                if isinstance(option, str) and option.lower() == lowered:
                    return Valid(option)

        return ctx.add_issue(
            InvalidEnumValueIssue(options=tuple(str(v) for v in self._values), received=value)
        )

    def _json_schema(self) -> dict[str, Any]:
        if all(isinstance(v, str) for v in self._values):
            return {"type": "string", "enum": list(self._values)}
        if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in self._values):
            return {"type": "number", "enum": list(self._values)}
        return {"oneOf": [{"const": v} for v in self._values]}
