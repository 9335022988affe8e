"""Optional, nullable and default wrappers around another schema."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from llmschema.parse.context import ParseContext
from llmschema.parse.result import Outcome, Valid
from llmschema.schemas.base import Schema, SchemaDef, SchemaKind
from llmschema.undefined import UNDEFINED, is_undefined


@dataclass(frozen=True, kw_only=True)
class WrapperDef(SchemaDef):
    inner: Schema


@dataclass(frozen=True, kw_only=True)
class DefaultDef(WrapperDef):
    default_value: Any


class _Wrapper(Schema):
    _def: WrapperDef

    @property
    def inner(self) -> Schema:
        return self._def.inner

    def unwrap(self) -> Schema:
        return self._def.inner

    def _json_schema(self) -> dict[str, Any]:
        return self._def.inner._annotated_json_schema()


class OptionalSchema(_Wrapper):
    """Accepts a missing value (``UNDEFINED``) as valid."""

    kind = SchemaKind.OPTIONAL

    @classmethod
    def wrap(cls, inner: Schema) -> OptionalSchema:
        return cls(WrapperDef(inner=inner))

    def _parse(self, ctx: ParseContext) -> Outcome:
        if is_undefined(ctx.data):
            return Valid(UNDEFINED)
        return self._def.inner._parse(ctx)


class NullableSchema(_Wrapper):
    """Accepts ``None`` as valid."""

    kind = SchemaKind.NULLABLE

    @classmethod
    def wrap(cls, inner: Schema) -> NullableSchema:
        return cls(WrapperDef(inner=inner))

    def _parse(self, ctx: ParseContext) -> Outcome:
        if ctx.data is None:
            return Valid(None)
        return self._def.inner._parse(ctx)

    def _json_schema(self) -> dict[str, Any]:
        inner = self._def.inner._annotated_json_schema()
        kind = inner.get("type")
        if isinstance(kind, str):
            return {**inner, "type": [kind, "null"]}
        if isinstance(kind, list):
            return {**inner, "type": [*kind, "null"]}
        return {"anyOf": [inner, {"type": "null"}]}


class DefaultSchema(_Wrapper):
    """Substitutes a fallback when the value is missing.

    Only ``UNDEFINED`` triggers the fallback; an explicit ``None`` is passed to
    the inner schema. With lenient parsing and ``use_defaults=False`` the
    missing value goes to the inner schema as well.
    """

    kind = SchemaKind.DEFAULT
    _def: DefaultDef

    @classmethod
    def wrap(cls, inner: Schema, value: Any) -> DefaultSchema:
        return cls(DefaultDef(inner=inner, default_value=value))

    @property
    def default_value(self) -> Any:
        return self._def.default_value

    def remove_default(self) -> Schema:
        return self._def.inner

    def _parse(self, ctx: ParseContext) -> Outcome:
        if is_undefined(ctx.data) and (not ctx.is_lenient or ctx.should_use_defaults):
            # Mutable defaults must not leak between results.
            return Valid(copy.deepcopy(self._def.default_value))
        return self._def.inner._parse(ctx)

    def _json_schema(self) -> dict[str, Any]:
        return {**self._def.inner._annotated_json_schema(), "default": self._def.default_value}
