"""Tolerant JSON repair for LLM output.

Example:
    >>> from llmschema.repair import repair_json
    >>> result = repair_json("```json\\n{name: 'test', value: 123,}\\n```")
    >>> result.data
    {'name': 'test', 'value': 123}
"""

from llmschema.repair.extractors import (
    MarkdownExtraction,
    TextExtraction,
    extract_all_from_markdown,
    extract_all_json_from_text,
    extract_from_markdown,
    extract_json_from_text,
)
from llmschema.repair.fixers import (
    balance_brackets,
    ensure_quoted_values,
    fix_missing_commas,
    fix_number_formats,
    fix_single_quotes,
    fix_special_numbers,
    fix_trailing_commas,
    fix_unquoted_keys,
    remove_all_comments,
    remove_hash_comments,
    remove_json_comments,
    try_close_brackets,
)
from llmschema.repair.options import RepairOptions
from llmschema.repair.pipeline import (
    RepairAction,
    RepairResult,
    is_repairable_json,
    is_valid_json,
    parse_and_repair,
    repair_json,
)
from llmschema.repair.scanner import StringScanner, string_mask

__all__ = [
    "MarkdownExtraction",
    "RepairAction",
    "RepairOptions",
    "RepairResult",
    "StringScanner",
    "TextExtraction",
    "balance_brackets",
    "ensure_quoted_values",
    "extract_all_from_markdown",
    "extract_all_json_from_text",
    "extract_from_markdown",
    "extract_json_from_text",
    "fix_missing_commas",
    "fix_number_formats",
    "fix_single_quotes",
    "fix_special_numbers",
    "fix_trailing_commas",
    "fix_unquoted_keys",
    "is_repairable_json",
    "is_valid_json",
    "parse_and_repair",
    "remove_all_comments",
    "remove_hash_comments",
    "remove_json_comments",
    "repair_json",
    "string_mask",
    "try_close_brackets",
]
