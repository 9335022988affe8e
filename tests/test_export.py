"""Tests for JSON Schema and tool-definition export."""

import json

import pytest

from llmschema import v
from llmschema.export import to_json_schema
from llmschema.export.json_schema import DRAFT_URIS


@pytest.fixture
def weather():
    """Tool input schema with description, constraints and an optional field."""
    return v.object(
        {
            "city": v.string().min(1).describe("City name"),
            "days": v.number().int().min(1).max(7),
            "units": v.enum(["metric", "imperial"]).default("metric"),
            "note": v.string().optional(),
        }
    ).describe("Weather lookup")


class TestJsonSchema:
    """Tests for JSON Schema rendering."""

    def test_object(self, weather):
        """Test properties, constraints and required keys."""
        document = to_json_schema(weather)
        assert document["type"] == "object"
        assert document["description"] == "Weather lookup"
        assert document["required"] == ["city", "days"]
        props = document["properties"]
        assert props["city"] == {"type": "string", "minLength": 1, "description": "City name"}
        assert props["days"] == {"type": "integer", "minimum": 1, "maximum": 7}
        assert props["units"] == {
            "type": "string",
            "enum": ["metric", "imperial"],
            "default": "metric",
        }
        assert props["note"] == {"type": "string"}
        json.dumps(document)

    def test_root_flags(self, weather):
        """Test root description toggle and $schema."""
        document = weather.to_json_schema(
            include_descriptions=False, include_schema=True, id="urn:weather"
        )
        assert "description" not in document
        assert document["properties"]["city"]["description"] == "City name"
        assert document["$schema"] == DRAFT_URIS["2020-12"]
        assert document["$id"] == "urn:weather"

    def test_draft_07(self):
        """Test the older draft URI."""
        document = v.string().to_json_schema(include_schema=True, draft="draft-07")
        assert document["$schema"] == "http://json-schema.org/draft-07/schema#"

    def test_examples(self):
        """Test examples on the root."""
        document = v.string().examples(["a", "b"]).to_json_schema()
        assert document["examples"] == ["a", "b"]
        assert "examples" not in v.string().examples(["a"]).to_json_schema(include_examples=False)

    def test_strict_object(self):
        """Test strict objects forbid extra properties."""
        document = v.object({"a": v.string()}).strict().to_json_schema()
        assert document["additionalProperties"] is False

    def test_nullable(self):
        """Test nullable types become type lists."""
        assert v.string().nullable().to_json_schema() == {"type": ["string", "null"]}
        union = v.union([v.string(), v.number()]).nullable().to_json_schema()
        members = [{"type": "string"}, {"type": "number"}]
        assert union == {"anyOf": [{"anyOf": members}, {"type": "null"}]}

    def test_collections(self):
        """Test array, tuple and record shapes."""
        assert v.array(v.number()).min(1).to_json_schema() == {
            "type": "array",
            "items": {"type": "number"},
            "minItems": 1,
        }
        assert v.tuple([v.string(), v.number()]).to_json_schema() == {
            "type": "array",
            "prefixItems": [{"type": "string"}, {"type": "number"}],
            "items": False,
            "minItems": 2,
            "maxItems": 2,
        }
        assert v.record(v.boolean()).to_json_schema() == {
            "type": "object",
            "additionalProperties": {"type": "boolean"},
        }

    def test_literals(self):
        """Test literal and null output."""
        assert v.literal("x").to_json_schema() == {"const": "x"}
        assert v.null().to_json_schema() == {"type": "null"}
        assert v.any().to_json_schema() == {}

    def test_discriminated_union(self):
        """Test oneOf with a discriminator."""
        schema = v.discriminated_union(
            "kind",
            [v.object({"kind": v.literal("a")}), v.object({"kind": v.literal("b")})],
        )
        document = schema.to_json_schema()
        assert len(document["oneOf"]) == 2
        assert document["discriminator"] == {"propertyName": "kind"}

    def test_intersection(self):
        """Test allOf."""
        document = v.intersection(v.string(), v.string().max(3)).to_json_schema()
        assert document == {"allOf": [{"type": "string"}, {"type": "string", "maxLength": 3}]}


class TestToolDefinitions:
    """Tests for provider tool formats."""

    def test_openai(self, weather):
        """Test the OpenAI function shape."""
        tool = weather.to_openai("get_weather")
        assert tool["type"] == "function"
        function = tool["function"]
        assert function["name"] == "get_weather"
        assert function["description"] == "Weather lookup"
        assert function["parameters"]["type"] == "object"
        assert function["parameters"]["required"] == ["city", "days"]
        assert "strict" not in function

    def test_openai_strict(self, weather):
        """Test strict mode flags."""
        function = weather.to_openai("get_weather", strict=True)["function"]
        assert function["strict"] is True
        assert function["parameters"]["additionalProperties"] is False

    def test_claude(self, weather):
        """Test the Anthropic tool shape."""
        tool = weather.to_claude("get_weather", description="Look up weather")
        assert tool["name"] == "get_weather"
        assert tool["description"] == "Look up weather"
        assert set(tool["input_schema"]["properties"]) == {"city", "days", "units", "note"}

    def test_gemini(self, weather):
        """Test the Gemini declaration shape."""
        declaration = weather.to_gemini("get_weather")
        assert declaration["name"] == "get_weather"
        assert declaration["parameters"]["type"] == "object"
        assert declaration["parameters"]["description"] == "Weather lookup"

    def test_no_description(self):
        """Test the description key is left out when there is none."""
        tool = v.object({"a": v.string()}).to_claude("t")
        assert "description" not in tool
