"""llmschema: schema validation and JSON repair for LLM output.

Example:
    >>> from llmschema import v
    >>> schema = v.object({"status": v.enum(["active", "inactive"]), "count": v.number()})
    >>> result = schema.parse_llm('```json\\n{status: "ACTIVE", count: "3",}\\n```')
    >>> result.data
    {'status': 'active', 'count': 3}
"""

from llmschema import factory as v
from llmschema.errors import Issue, IssueCode, RepairError, ValidationError
from llmschema.parse import LLMParseOptions, ParseResult
from llmschema.repair import (
    RepairAction,
    RepairOptions,
    RepairResult,
    is_repairable_json,
    is_valid_json,
    parse_and_repair,
    repair_json,
)
from llmschema.schemas import Schema, SchemaKind
from llmschema.undefined import UNDEFINED, is_undefined
from llmschema.version import __version__

__all__ = [
    "Issue",
    "IssueCode",
    "LLMParseOptions",
    "ParseResult",
    "RepairAction",
    "RepairError",
    "RepairOptions",
    "RepairResult",
    "Schema",
    "SchemaKind",
    "UNDEFINED",
    "ValidationError",
    "__version__",
    "is_repairable_json",
    "is_undefined",
    "is_valid_json",
    "parse_and_repair",
    "repair_json",
    "v",
]
