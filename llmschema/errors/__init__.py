"""Validation issues, their messages, and the exceptions that carry them."""

from llmschema.errors.exceptions import RepairError, ValidationError
from llmschema.errors.issues import (
    CustomIssue,
    InvalidDateIssue,
    InvalidEnumValueIssue,
    InvalidIntersectionTypesIssue,
    InvalidLiteralIssue,
    InvalidStringIssue,
    InvalidTypeIssue,
    InvalidUnionDiscriminatorIssue,
    InvalidUnionIssue,
    Issue,
    IssueCode,
    NotFiniteIssue,
    NotMultipleOfIssue,
    Path,
    PathSegment,
    TooBigIssue,
    TooSmallIssue,
    UnrecognizedKeysIssue,
)
from llmschema.errors.messages import render_message, type_name

__all__ = [
    "CustomIssue",
    "InvalidDateIssue",
    "InvalidEnumValueIssue",
    "InvalidIntersectionTypesIssue",
    "InvalidLiteralIssue",
    "InvalidStringIssue",
    "InvalidTypeIssue",
    "InvalidUnionDiscriminatorIssue",
    "InvalidUnionIssue",
    "Issue",
    "IssueCode",
    "NotFiniteIssue",
    "NotMultipleOfIssue",
    "Path",
    "PathSegment",
    "RepairError",
    "TooBigIssue",
    "TooSmallIssue",
    "UnrecognizedKeysIssue",
    "ValidationError",
    "render_message",
    "type_name",
]
