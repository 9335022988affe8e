"""Export schemas as JSON Schema and as LLM tool definitions."""

from __future__ import annotations

from typing import Any, Literal

from llmschema.schemas.base import Schema

DRAFT_URIS = {
    "2020-12": "https://json-schema.org/draft/2020-12/schema",
    "draft-07": "http://json-schema.org/draft-07/schema#",
}


def to_json_schema(
    schema: Schema,
    *,
    include_descriptions: bool = True,
    include_examples: bool = True,
    include_schema: bool = False,
    draft: Literal["2020-12", "draft-07"] = "2020-12",
    id: str | None = None,
) -> dict[str, Any]:
    """Render ``schema`` as a JSON Schema document.

    Nested nodes always carry their own description and examples; the flags
    only control the root.

    Args:
        schema: Schema to export
        include_descriptions: Add the root description
        include_examples: Add the root examples
        include_schema: Add a ``$schema`` URI for ``draft``
        draft: JSON Schema draft used for ``$schema``
        id: Optional ``$id``

    Returns:
        JSON-serializable dict
    """
    document = schema._json_schema()
    if include_descriptions and schema.description:
        document["description"] = schema.description
    if include_examples and schema.example_values:
        document["examples"] = list(schema.example_values)
    if include_schema:
        document["$schema"] = DRAFT_URIS[draft]
    if id:
        document["$id"] = id
    return document


def _named(name: str, description: str | None) -> dict[str, Any]:
    named: dict[str, Any] = {"name": name}
    if description:
        named["description"] = description
    return named


def _object_parameters(schema: Schema) -> dict[str, Any]:
    document = to_json_schema(schema)
    parameters: dict[str, Any] = {"type": "object", "properties": document.get("properties", {})}
    if "required" in document:
        parameters["required"] = document["required"]
    return parameters


def to_openai(
    schema: Schema, name: str, *, description: str | None = None, strict: bool = False
) -> dict[str, Any]:
    """OpenAI function-calling tool definition."""
    parameters = _object_parameters(schema)
    if strict:
        parameters["additionalProperties"] = False
    function = _named(name, description or schema.description)
    function["parameters"] = parameters
    if strict:
        function["strict"] = True
    return {"type": "function", "function": function}


def to_claude(schema: Schema, name: str, *, description: str | None = None) -> dict[str, Any]:
    """Anthropic tool definition."""
    tool = _named(name, description or schema.description)
    tool["input_schema"] = _object_parameters(schema)
    return tool


def to_gemini(schema: Schema, name: str, *, description: str | None = None) -> dict[str, Any]:
    """Gemini function declaration."""
    declaration = _named(name, description or schema.description)
    declaration["parameters"] = to_json_schema(schema)
    return declaration
