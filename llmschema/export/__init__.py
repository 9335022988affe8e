"""Schema exporters."""

from llmschema.export.json_schema import to_claude, to_gemini, to_json_schema, to_openai

__all__ = ["to_claude", "to_gemini", "to_json_schema", "to_openai"]
