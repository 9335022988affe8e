"""Default issue messages, one renderer per issue code."""

from __future__ import annotations

import datetime
import json
from collections.abc import Callable, Mapping
from typing import Any

from llmschema.errors.issues import Issue, IssueCode, TooBigIssue, TooSmallIssue
from llmschema.undefined import is_undefined


def type_name(value: Any) -> str:
    """Name of a value's type as used in messages (``null``, ``array``, ``object`` ...)."""
    if value is None:
        return "null"
    if is_undefined(value):
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def display(value: Any) -> str:
    """Render a value the way it would look in JSON."""
    if is_undefined(value):
        return "undefined"
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def _number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _options(options: tuple[Any, ...]) -> str:
    return " | ".join(f"'{option}'" for option in options)


_STRING_MESSAGES = {
    "email": "Invalid email address",
    "url": "Invalid URL",
    "uuid": "Invalid UUID",
    "cuid": "Invalid CUID",
    "regex": "Invalid format",
    "includes": "Invalid input",
    "starts_with": "Invalid input",
    "ends_with": "Invalid input",
}

_SIZE_NOUNS = {"string": "character(s)", "array": "element(s)", "set": "element(s)"}
_SIZE_SUBJECTS = {
    "string": "String",
    "number": "Number",
    "array": "Array",
    "set": "Set",
    "date": "Date",
}


def _too_small(issue: TooSmallIssue) -> str:
    bound = _number(issue.minimum)
    subject = _SIZE_SUBJECTS.get(issue.type, "Value")
    if issue.exact:
        if issue.type == "string":
            return f"String must be exactly {bound} character(s)"
        if issue.type in ("array", "set"):
            return f"{subject} must contain exactly {bound} element(s)"
        return f"Value must be exactly {bound}"
    if issue.type in _SIZE_NOUNS:
        noun = _SIZE_NOUNS[issue.type]
        verb = "must be" if issue.type == "string" else "must contain"
        qualifier = "at least" if issue.inclusive else "more than"
        return f"{subject} {verb} {qualifier} {bound} {noun}"
    if issue.type in ("number", "date"):
        relation = "greater than or equal to" if issue.inclusive else "greater than"
        return f"{subject} must be {relation} {bound}"
    return "Value is too small"


def _too_big(issue: TooBigIssue) -> str:
    bound = _number(issue.maximum)
    subject = _SIZE_SUBJECTS.get(issue.type, "Value")
    if issue.exact:
        if issue.type == "string":
            return f"String must be exactly {bound} character(s)"
        if issue.type in ("array", "set"):
            return f"{subject} must contain exactly {bound} element(s)"
        return f"Value must be exactly {bound}"
    if issue.type in _SIZE_NOUNS:
        noun = _SIZE_NOUNS[issue.type]
        verb = "must be" if issue.type == "string" else "must contain"
        qualifier = "at most" if issue.inclusive else "less than"
        return f"{subject} {verb} {qualifier} {bound} {noun}"
    if issue.type in ("number", "date"):
        relation = "less than or equal to" if issue.inclusive else "less than"
        return f"{subject} must be {relation} {bound}"
    return "Value is too big"


def _mismatch(issue: Any) -> str:
    return f"Expected {display(issue.expected)}, received {display(issue.received)}"


def _enum_mismatch(issue: Any) -> str:
    return f"Expected {_options(issue.options)}, received {display(issue.received)}"


def _unrecognized(issue: Any) -> str:
    return "Unrecognized key(s): " + ", ".join(f"'{key}'" for key in issue.keys)


MESSAGES: dict[IssueCode, Callable[[Any], str]] = {
    IssueCode.INVALID_TYPE: lambda i: f"Expected {i.expected}, received {i.received}",
    IssueCode.INVALID_LITERAL: _mismatch,
    IssueCode.INVALID_ENUM_VALUE: _enum_mismatch,
    IssueCode.INVALID_UNION: lambda i: "Invalid input",
    IssueCode.INVALID_UNION_DISCRIMINATOR: (
        lambda i: f"Invalid discriminator. Expected {_options(i.options)}"
    ),
    IssueCode.INVALID_DATE: lambda i: "Invalid date",
    IssueCode.INVALID_STRING: lambda i: _STRING_MESSAGES.get(i.validation, "Invalid string"),
    IssueCode.INVALID_INTERSECTION_TYPES: lambda i: "Intersection results could not be merged",
    IssueCode.NOT_MULTIPLE_OF: lambda i: f"Number must be a multiple of {_number(i.multiple_of)}",
    IssueCode.NOT_FINITE: lambda i: "Number must be finite",
    IssueCode.TOO_SMALL: _too_small,
    IssueCode.TOO_BIG: _too_big,
    IssueCode.UNRECOGNIZED_KEYS: _unrecognized,
    IssueCode.CUSTOM: lambda i: i.message or "Invalid input",
}


def render_message(issue: Issue) -> str:
    """Default message for ``issue``."""
    return MESSAGES[issue.code](issue)
