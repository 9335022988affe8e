"""Pure text-to-text repair passes. Each one leaves double-quoted string content alone."""

from llmschema.repair.fixers.brackets import balance_brackets, try_close_brackets
from llmschema.repair.fixers.commas import fix_missing_commas, fix_trailing_commas
from llmschema.repair.fixers.comments import (
    remove_all_comments,
    remove_hash_comments,
    remove_json_comments,
)
from llmschema.repair.fixers.keys import fix_unquoted_keys
from llmschema.repair.fixers.numbers import fix_number_formats, fix_special_numbers
from llmschema.repair.fixers.quotes import ensure_quoted_values, fix_single_quotes

__all__ = [
    "balance_brackets",
    "ensure_quoted_values",
    "fix_missing_commas",
    "fix_number_formats",
    "fix_single_quotes",
    "fix_special_numbers",
    "fix_trailing_commas",
    "fix_unquoted_keys",
    "remove_all_comments",
    "remove_hash_comments",
    "remove_json_comments",
    "try_close_brackets",
]
