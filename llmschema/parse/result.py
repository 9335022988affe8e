"""Parse outcomes.

``Valid`` and ``Invalid`` are what each schema's ``_parse`` returns while the
tree is being walked. ``ParseResult`` is what callers of ``safe_parse`` and
``parse_llm`` get back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llmschema.errors.exceptions import ValidationError
from llmschema.errors.issues import Issue
from llmschema.undefined import UNDEFINED


@dataclass(frozen=True)
class Valid:
    value: Any


@dataclass(frozen=True)
class Invalid:
    """Failed validation. ``partial`` holds whatever part of a container did validate."""

    partial: Any = UNDEFINED


Outcome = Valid | Invalid


@dataclass
class ParseResult:
    """Result of ``safe_parse`` or ``parse_llm``.

    On success only ``data`` is meaningful. On failure ``error`` holds every
    issue and ``partial`` holds the best partial reconstruction, or
    ``UNDEFINED`` when nothing could be salvaged.
    """

    success: bool
    data: Any = None
    error: ValidationError | None = None
    partial: Any = UNDEFINED

    @property
    def issues(self) -> list[Issue]:
        return self.error.issues if self.error else []

    def unwrap(self) -> Any:
        """Return ``data``, raising the ``ValidationError`` on failure."""
        if self.error is not None:
            raise self.error
        return self.data
