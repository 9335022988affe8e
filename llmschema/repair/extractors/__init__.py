"""Locate a JSON document inside markdown or prose."""

from llmschema.repair.extractors.markdown import (
    MarkdownExtraction,
    extract_all_from_markdown,
    extract_from_markdown,
)
from llmschema.repair.extractors.text import (
    TextExtraction,
    extract_all_json_from_text,
    extract_json_from_text,
)

__all__ = [
    "MarkdownExtraction",
    "TextExtraction",
    "extract_all_from_markdown",
    "extract_all_json_from_text",
    "extract_from_markdown",
    "extract_json_from_text",
]
