"""Exceptions raised at the library boundary.

Validation itself never raises; ``Schema.parse`` converts a failed result into
``ValidationError`` and ``parse_and_repair`` converts a failed repair into
``RepairError``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from llmschema.errors.issues import CustomIssue, Issue, PathSegment

if TYPE_CHECKING:
    from llmschema.repair.pipeline import RepairResult


def _format_issues(issues: Sequence[Issue]) -> str:
    if not issues:
        return "Unknown validation error"

    if len(issues) == 1:
        issue = issues[0]
        where = f' at "{issue.dotted_path}"' if issue.path else ""
        return f"{issue.message}{where}"

    lines = []
    for issue in issues:
        prefix = f"{issue.dotted_path}: " if issue.path else ""
        lines.append(f"  {prefix}{issue.message}")
    return f"{len(issues)} validation errors:\n" + "\n".join(lines)


def _dotted(path: Sequence[PathSegment]) -> str:
    return ".".join(str(segment) for segment in path)


class ValidationError(Exception):
    """Aggregated validation failure.

    Attributes:
        issues: Every issue raised during the call, in traversal order
    """

    def __init__(self, issues: Sequence[Issue]):
        self.issues = list(issues)
        super().__init__(_format_issues(self.issues))

    def flatten(self) -> dict[str, Any]:
        """Group messages into root-level and per-field errors.

        Returns:
            ``{"form_errors": [...], "field_errors": {"dotted.path": [...]}}``
        """
        form_errors: list[str] = []
        field_errors: dict[str, list[str]] = {}
        for issue in self.issues:
            if not issue.path:
                form_errors.append(issue.message)
            else:
                field_errors.setdefault(issue.dotted_path, []).append(issue.message)
        return {"form_errors": form_errors, "field_errors": field_errors}

    def format_for_llm(self) -> str:
        """Short bullet list suitable for a retry prompt."""
        lines = ["Validation errors:"]
        for issue in self.issues:
            lines.append(f"- {issue.dotted_path or 'root'}: {issue.message}")
        return "\n".join(lines)

    @property
    def first_issue(self) -> Issue | None:
        return self.issues[0] if self.issues else None

    def issues_at_path(self, path: Sequence[PathSegment]) -> list[Issue]:
        target = _dotted(path)
        return [issue for issue in self.issues if issue.dotted_path == target]

    def has_errors_at_path(self, path: Sequence[PathSegment]) -> bool:
        return bool(self.issues_at_path(path))

    @classmethod
    def from_issue(cls, issue: Issue) -> ValidationError:
        return cls([issue])

    @classmethod
    def custom(cls, message: str, path: Sequence[PathSegment] = ()) -> ValidationError:
        """Build an error holding a single custom issue."""
        return cls([CustomIssue(message=message, path=tuple(path))])


class RepairError(ValueError):
    """JSON text that could not be repaired into a parseable document.

    Attributes:
        result: The full repair result, including the action log and parse error
    """

    def __init__(self, result: RepairResult):
        super().__init__(f"Failed to repair JSON: {result.error}")
        self.result = result
