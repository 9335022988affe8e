"""Parse context, outcomes and lenient-mode options."""

from llmschema.parse.context import (
    ParseContext,
    ParseMode,
    create_lenient_context,
    create_strict_context,
)
from llmschema.parse.options import LLMParseOptions
from llmschema.parse.result import Invalid, Outcome, ParseResult, Valid

__all__ = [
    "Invalid",
    "LLMParseOptions",
    "Outcome",
    "ParseContext",
    "ParseMode",
    "ParseResult",
    "Valid",
    "create_lenient_context",
    "create_strict_context",
]
