"""Schema base class.

Every schema is an immutable node wrapping a frozen definition dataclass.
Configuration methods never touch the receiver; they build a new node around
``dataclasses.replace`` of the old definition.
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from llmschema.parse.context import ParseContext, create_lenient_context, create_strict_context
from llmschema.parse.options import LLMParseOptions
from llmschema.parse.result import Outcome, ParseResult
from llmschema.repair.options import RepairOptions
from llmschema.repair.pipeline import repair_json
from llmschema.undefined import UNDEFINED

if TYPE_CHECKING:
    from llmschema.schemas.wrappers import DefaultSchema, NullableSchema, OptionalSchema

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Schema")


class SchemaKind(str, Enum):
    """Variant tag for every concrete schema class."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ANY = "any"
    UNKNOWN = "unknown"
    LITERAL = "literal"
    ENUM = "enum"
    NATIVE_ENUM = "native_enum"
    ARRAY = "array"
    OBJECT = "object"
    RECORD = "record"
    TUPLE = "tuple"
    UNION = "union"
    DISCRIMINATED_UNION = "discriminated_union"
    INTERSECTION = "intersection"
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True, kw_only=True)
class SchemaDef:
    """Metadata shared by every definition. Never affects validation."""

    description: str | None = None
    examples: tuple[Any, ...] = ()


class Schema(ABC):
    """Base class for all schemas."""

    kind: ClassVar[SchemaKind]

    def __init__(self, definition: SchemaDef):
        self._def = definition

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._def!r})"

    @abstractmethod
    def _parse(self, ctx: ParseContext) -> Outcome:
        """Validate ``ctx.data``, recording issues on ``ctx``."""

    @abstractmethod
    def _json_schema(self) -> dict[str, Any]:
        """JSON Schema for this node, without description or examples."""

    def _clone(self: S, **changes: Any) -> S:
        return type(self)(dataclasses.replace(self._def, **changes))

    # Metadata

    def describe(self: S, description: str) -> S:
        """Attach a description for prompts and exported schemas."""
        return self._clone(description=description)

    def examples(self: S, values: Iterable[Any]) -> S:
        """Attach example values for prompts and exported schemas."""
        return self._clone(examples=tuple(values))

    @property
    def description(self) -> str | None:
        return self._def.description

    @property
    def example_values(self) -> tuple[Any, ...]:
        return self._def.examples

    def _annotated_json_schema(self) -> dict[str, Any]:
        """``_json_schema`` plus this node's description and examples."""
        schema = self._json_schema()
        if self._def.description:
            schema["description"] = self._def.description
        if self._def.examples:
            schema["examples"] = list(self._def.examples)
        return schema

    def constant_value(self) -> Any:
        """The single value this schema accepts, or ``UNDEFINED`` when there is none."""
        return UNDEFINED

    # Parsing

    def safe_parse(self, data: Any) -> ParseResult:
        """Validate ``data`` strictly without raising."""
        ctx = create_strict_context(data)
        return ctx.finalize(self._parse(ctx))

    parse_strict = safe_parse

    def parse(self, data: Any) -> Any:
        """Validate ``data`` strictly.

        Raises:
            ValidationError: With every issue found
        """
        return self.safe_parse(data).unwrap()

    def parse_llm(self, data: Any, options: LLMParseOptions | None = None) -> ParseResult:
        """Validate LLM output leniently.

        String input first goes through the repair pipeline; if that yields
        JSON, the parsed value is validated, otherwise the original string is.
        Validation then runs with coercion, case-insensitive enums and default
        substitution enabled.

        Args:
            data: Raw model output or an already-decoded value
            options: Lenient-mode switches

        Returns:
            ParseResult, with ``partial`` populated on failure
        """
        options = options or LLMParseOptions()
        if isinstance(data, str) and options.repair:
            data = self._repair_input(data, options)

        ctx = create_lenient_context(data, options)
        return ctx.finalize(self._parse(ctx))

    @staticmethod
    def _repair_input(text: str, options: LLMParseOptions) -> Any:
        result = repair_json(text, RepairOptions(markdown=options.extract_from_markdown))
        if result.success:
            logger.debug(f"Repair pre-pass produced data ({len(result.repairs)} repairs)")
            return result.data
        logger.debug(f"Repair pre-pass failed, validating raw text: {result.error}")
        return text

    # Wrapping

    def optional(self) -> OptionalSchema:
        from llmschema.schemas.wrappers import OptionalSchema

        return OptionalSchema.wrap(self)

    def nullable(self) -> NullableSchema:
        from llmschema.schemas.wrappers import NullableSchema

        return NullableSchema.wrap(self)

    def default(self, value: Any) -> DefaultSchema:
        from llmschema.schemas.wrappers import DefaultSchema

        return DefaultSchema.wrap(self, value)

    def is_optional(self) -> bool:
        return self.kind is SchemaKind.OPTIONAL

    def is_nullable(self) -> bool:
        return self.kind is SchemaKind.NULLABLE

    # Export

    def to_json_schema(self, **options: Any) -> dict[str, Any]:
        """Export as JSON Schema. See ``llmschema.export.to_json_schema``."""
        from llmschema.export.json_schema import to_json_schema

        return to_json_schema(self, **options)

    def to_openai(self, name: str, **options: Any) -> dict[str, Any]:
        from llmschema.export.json_schema import to_openai

        return to_openai(self, name, **options)

    def to_claude(self, name: str, **options: Any) -> dict[str, Any]:
        from llmschema.export.json_schema import to_claude

        return to_claude(self, name, **options)

    def to_gemini(self, name: str, **options: Any) -> dict[str, Any]:
        from llmschema.export.json_schema import to_gemini

        return to_gemini(self, name, **options)