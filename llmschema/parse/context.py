"""Per-call validation state.

A context holds the value under inspection, its path from the root, the active
mode and a reference to the issue list for the whole call. Children share that
list, so an issue recorded deep in the tree is visible from every ancestor.
Branches get a fresh list, so a failed union trial leaves no trace.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from llmschema.errors.exceptions import ValidationError
from llmschema.errors.issues import CustomIssue, InvalidTypeIssue, Issue, Path, PathSegment
from llmschema.errors.messages import render_message, type_name
from llmschema.parse.options import LLMParseOptions
from llmschema.parse.result import Invalid, Outcome, ParseResult, Valid


class ParseMode(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class ParseContext:
    """Validation state for one position in the data.

    Args:
        data: Value being validated
        mode: Strict or lenient validation
        path: Segments from the root to ``data``
        issues: Shared issue list; a new one is created when omitted
        options: Lenient-mode switches
    """

    def __init__(
        self,
        data: Any,
        mode: ParseMode = ParseMode.STRICT,
        path: Path = (),
        issues: list[Issue] | None = None,
        options: LLMParseOptions | None = None,
    ):
        self.data = data
        self.mode = mode
        self.path = tuple(path)
        self.issues: list[Issue] = [] if issues is None else issues
        self.options = options or LLMParseOptions()
        self._mark = len(self.issues)

    def child(self, data: Any, segment: PathSegment) -> ParseContext:
        """Context for a nested value, one path segment deeper, sharing the issue list."""
        return ParseContext(data, self.mode, self.path + (segment,), self.issues, self.options)

    def branch(self, data: Any) -> ParseContext:
        """Isolated context at the same path for trying an alternative."""
        return ParseContext(data, self.mode, self.path, None, self.options)

    def absorb(self, branch: ParseContext) -> None:
        """Copy a branch's issues into this context."""
        self.issues.extend(branch.own_issues)

    @property
    def own_issues(self) -> list[Issue]:
        """Issues recorded by this context or its descendants."""
        return self.issues[self._mark :]

    @property
    def has_issues(self) -> bool:
        return len(self.issues) > self._mark

    @property
    def is_lenient(self) -> bool:
        return self.mode is ParseMode.LENIENT

    @property
    def should_coerce(self) -> bool:
        return self.is_lenient and self.options.coerce

    @property
    def should_use_defaults(self) -> bool:
        return self.is_lenient and self.options.use_defaults

    def add_issue(self, issue: Issue, message: str | None = None) -> Invalid:
        """Record ``issue`` at this context's path.

        Args:
            issue: Issue without path; its message is rendered when empty
            message: Override for the rendered message

        Returns:
            An ``Invalid`` outcome, so schemas can ``return ctx.add_issue(...)``
        """
        placed = dataclasses.replace(issue, path=self.path)
        text = message or placed.message or render_message(placed)
        self.issues.append(dataclasses.replace(placed, message=text))
        return Invalid()

    def add_invalid_type(self, expected: str, message: str | None = None) -> Invalid:
        return self.add_issue(
            InvalidTypeIssue(expected=expected, received=type_name(self.data)), message
        )

    def add_custom(self, message: str, **params: Any) -> Invalid:
        return self.add_issue(CustomIssue(message=message, params=params))

    def finalize(self, outcome: Outcome) -> ParseResult:
        """Turn the root outcome into a ``ParseResult``."""
        if isinstance(outcome, Valid) and not self.has_issues:
            return ParseResult(success=True, data=outcome.value)

        partial = outcome.value if isinstance(outcome, Valid) else outcome.partial
        return ParseResult(
            success=False,
            error=ValidationError(self.own_issues),
            partial=partial,
        )


def create_strict_context(data: Any) -> ParseContext:
    return ParseContext(data, ParseMode.STRICT)


def create_lenient_context(data: Any, options: LLMParseOptions | None = None) -> ParseContext:
    return ParseContext(data, ParseMode.LENIENT, options=options)
