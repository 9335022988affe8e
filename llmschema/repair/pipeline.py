"""Repair orchestrator: extraction and fixer stages in a fixed order, then a strict parse.

Stage order:
    markdown -> extract_from_text -> remove_comments -> single_quotes ->
    unquoted_keys -> special_numbers -> number_formats -> trailing_commas ->
    close_brackets

Extraction runs first so the fixers only ever see a single JSON value. Bracket
closing runs last since every other stage can change the bracket count.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from llmschema.errors.exceptions import RepairError
from llmschema.repair.extractors.markdown import extract_from_markdown
from llmschema.repair.extractors.text import extract_json_from_text
from llmschema.repair.fixers.brackets import try_close_brackets
from llmschema.repair.fixers.commas import fix_trailing_commas
from llmschema.repair.fixers.comments import remove_json_comments
from llmschema.repair.fixers.keys import fix_unquoted_keys
from llmschema.repair.fixers.numbers import fix_number_formats, fix_special_numbers
from llmschema.repair.fixers.quotes import fix_single_quotes
from llmschema.repair.options import RepairOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepairAction:
    """One stage that changed the text."""

    kind: str
    description: str


@dataclass
class RepairResult:
    """Outcome of ``repair_json``.

    Attributes:
        success: Whether the final text parsed as strict JSON
        data: Parsed value (None on failure, and also for a literal ``null`` document)
        text: Final text after all enabled stages
        repaired: Whether ``text`` differs from the input
        repairs: Stages that changed the text, in order
        error: The parse error on failure
    """

    success: bool
    text: str
    repaired: bool = False
    data: Any = None
    repairs: list[RepairAction] = field(default_factory=list)
    error: ValueError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "success": self.success,
            "data": self.data,
            "text": self.text,
            "repaired": self.repaired,
            "repairs": [{"kind": r.kind, "description": r.description} for r in self.repairs],
            "error": str(self.error) if self.error else None,
        }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text: str) -> Any:
    """``json.loads`` that also rejects ``NaN``, ``Infinity`` and ``-Infinity``."""
    return json.loads(text, parse_constant=_reject_constant)


def is_valid_json(text: str) -> bool:
    """Check whether ``text`` parses as strict JSON, without repairing it."""
    try:
        loads_strict(text)
    except ValueError:
        return False
    return True


def _markdown(text: str, options: RepairOptions) -> str:
    result = extract_from_markdown(text)
    return result.text if result.extracted else text


def _extract_from_text(text: str, options: RepairOptions) -> str:
    result = extract_json_from_text(text)
    return result.text if result.extracted else text


def _special_numbers(text: str, options: RepairOptions) -> str:
    return fix_special_numbers(text, as_strings=options.special_numbers_as_strings)


_Stage = tuple[str, str, Callable[[str, RepairOptions], str]]

STAGES: list[_Stage] = [
    ("markdown", "Extracted JSON from markdown code block", _markdown),
    ("extract_from_text", "Extracted JSON from surrounding text", _extract_from_text),
    ("remove_comments", "Removed comments", lambda t, _: remove_json_comments(t)),
    (
        "single_quotes",
        "Converted single quotes to double quotes",
        lambda t, _: fix_single_quotes(t),
    ),
    ("unquoted_keys", "Added quotes to unquoted keys", lambda t, _: fix_unquoted_keys(t)),
    ("special_numbers", "Replaced special number values", _special_numbers),
    ("number_formats", "Fixed non-standard number formats", lambda t, _: fix_number_formats(t)),
    ("trailing_commas", "Removed trailing commas", lambda t, _: fix_trailing_commas(t)),
    ("close_brackets", "Closed unclosed brackets", lambda t, _: try_close_brackets(t)),
]


def repair_json(text: str, options: RepairOptions | None = None) -> RepairResult:
    """Repair near-JSON text produced by an LLM and parse it.

    Text that is already valid JSON is returned untouched with an empty action
    log. Otherwise every enabled stage runs in order and each one that changes
    the text is recorded. This never raises on bad input; a failed parse is
    reported through ``success`` and ``error``.

    Args:
        text: Raw model output
        options: Stage toggles (all enabled by default)

    Returns:
        RepairResult with the parsed data on success

    Example:
        >>> repair_json("{name: 'test', value: 123,}").data
        {'name': 'test', 'value': 123}
    """
    options = options or RepairOptions()

    try:
        data = loads_strict(text)
    except ValueError:
        pass
    else:
        return RepairResult(success=True, data=data, text=text)

    repairs: list[RepairAction] = []
    current = text
    for kind, description, stage in STAGES:
        if not getattr(options, kind):
            continue
        updated = stage(current, options)
        if updated != current:
            logger.debug(f"Repair stage {kind} changed the text")
            repairs.append(RepairAction(kind=kind, description=description))
            current = updated

    try:
        data = loads_strict(current)
    except ValueError as e:
        logger.debug(f"Repaired text still fails to parse: {e}")
        return RepairResult(
            success=False,
            text=current,
            repaired=current != text,
            repairs=repairs,
            error=e,
        )

    return RepairResult(
        success=True,
        data=data,
        text=current,
        repaired=current != text,
        repairs=repairs,
    )


def parse_and_repair(text: str, options: RepairOptions | None = None) -> Any:
    """Repair and parse ``text``, returning the data.

    Raises:
        RepairError: If the repaired text still does not parse
    """
    result = repair_json(text, options)
    if not result.success:
        raise RepairError(result)
    return result.data


def is_repairable_json(text: str, options: RepairOptions | None = None) -> bool:
    """Check whether ``repair_json`` would succeed on ``text``."""
    return repair_json(text, options).success
