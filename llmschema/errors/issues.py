"""Issue taxonomy.

An issue is an immutable record of one validation failure. Schemas create
issues without a path or message; the parse context fills both in when the
issue is recorded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Literal

PathSegment = str | int
Path = tuple[PathSegment, ...]


class IssueCode(str, Enum):
    """Kind tag carried by every issue."""

    INVALID_TYPE = "invalid_type"
    INVALID_LITERAL = "invalid_literal"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    INVALID_UNION = "invalid_union"
    INVALID_UNION_DISCRIMINATOR = "invalid_union_discriminator"
    INVALID_DATE = "invalid_date"
    INVALID_STRING = "invalid_string"
    INVALID_INTERSECTION_TYPES = "invalid_intersection_types"
    NOT_MULTIPLE_OF = "not_multiple_of"
    NOT_FINITE = "not_finite"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    UNRECOGNIZED_KEYS = "unrecognized_keys"
    CUSTOM = "custom"


StringValidation = Literal[
    "email", "url", "uuid", "cuid", "regex", "includes", "starts_with", "ends_with"
]
SizeType = Literal["string", "number", "array", "set", "date"]


@dataclass(frozen=True, kw_only=True)
class Issue:
    """Base issue. ``path`` runs from the validation root to the failing value."""

    code: ClassVar[IssueCode] = IssueCode.CUSTOM

    path: Path = ()
    message: str = ""

    @property
    def dotted_path(self) -> str:
        return ".".join(str(segment) for segment in self.path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain data, nested union issues included."""
        data: dict[str, Any] = {"code": self.code.value}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "path":
                value = list(value)
            elif f.name == "union_errors":
                value = [issue.to_dict() for issue in value]
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data


@dataclass(frozen=True, kw_only=True)
class InvalidTypeIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_TYPE
    expected: str
    received: str


@dataclass(frozen=True, kw_only=True)
class InvalidLiteralIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_LITERAL
    expected: Any
    received: Any


@dataclass(frozen=True, kw_only=True)
class InvalidEnumValueIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_ENUM_VALUE
    options: tuple[Any, ...]
    received: Any


@dataclass(frozen=True, kw_only=True)
class InvalidUnionIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_UNION
    union_errors: tuple[Issue, ...] = ()


@dataclass(frozen=True, kw_only=True)
class InvalidUnionDiscriminatorIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_UNION_DISCRIMINATOR
    options: tuple[Any, ...]
    received: Any


@dataclass(frozen=True, kw_only=True)
class InvalidStringIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_STRING
    validation: StringValidation


@dataclass(frozen=True, kw_only=True)
class InvalidDateIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_DATE


@dataclass(frozen=True, kw_only=True)
class InvalidIntersectionTypesIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.INVALID_INTERSECTION_TYPES


@dataclass(frozen=True, kw_only=True)
class NotMultipleOfIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.NOT_MULTIPLE_OF
    multiple_of: float


@dataclass(frozen=True, kw_only=True)
class NotFiniteIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.NOT_FINITE


@dataclass(frozen=True, kw_only=True)
class TooSmallIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.TOO_SMALL
    type: SizeType
    minimum: float
    inclusive: bool = True
    exact: bool = False


@dataclass(frozen=True, kw_only=True)
class TooBigIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.TOO_BIG
    type: SizeType
    maximum: float
    inclusive: bool = True
    exact: bool = False


@dataclass(frozen=True, kw_only=True)
class UnrecognizedKeysIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.UNRECOGNIZED_KEYS
    keys: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class CustomIssue(Issue):
    code: ClassVar[IssueCode] = IssueCode.CUSTOM
    params: Mapping[str, Any] = field(default_factory=dict)