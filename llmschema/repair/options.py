"""Repair pipeline options."""

from pydantic import BaseModel, Field


class RepairOptions(BaseModel):
    """Stage toggles for ``repair_json``. Every stage is enabled by default."""

    model_config = {"frozen": True}

    markdown: bool = Field(default=True, description="Extract JSON from markdown code blocks")
    extract_from_text: bool = Field(
        default=True, description="Extract a JSON object or array from surrounding prose"
    )
    remove_comments: bool = Field(default=True, description="Strip // and /* */ comments")
    single_quotes: bool = Field(default=True, description="Convert single-quoted strings")
    unquoted_keys: bool = Field(default=True, description="Quote bare object keys")
    special_numbers: bool = Field(
        default=True, description="Replace NaN, Infinity and undefined values"
    )
    number_formats: bool = Field(
        default=True, description="Normalize .5, 5. and hex/octal/binary literals"
    )
    trailing_commas: bool = Field(default=True, description="Remove trailing commas")
    close_brackets: bool = Field(default=True, description="Close truncated strings and brackets")
    special_numbers_as_strings: bool = Field(
        default=False,
        description="Emit special numbers as quoted strings instead of null",
    )

    @classmethod
    def stage_names(cls) -> list[str]:
        """Names of the toggleable stages, in pipeline order."""
        return [name for name in cls.model_fields if name != "special_numbers_as_strings"]

    def without(self, *stages: str) -> "RepairOptions":
        """Return a copy with the named stages disabled.

        Raises:
            ValueError: If a name is not a pipeline stage
        """
        known = self.stage_names()
        unknown = [stage for stage in stages if stage not in known]
        if unknown:
            raise ValueError(f"Unknown repair stage(s): {', '.join(unknown)}")
        return self.model_copy(update=dict.fromkeys(stages, False))
