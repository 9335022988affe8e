"""Options for lenient (LLM) parsing."""

from pydantic import BaseModel, Field


class LLMParseOptions(BaseModel):
    """Behaviour switches for ``Schema.parse_llm``."""

    model_config = {"frozen": True}

    coerce: bool = Field(default=True, description="Coerce strings, numbers and booleans")
    repair: bool = Field(default=True, description="Run the JSON repair pipeline on string input")
    extract_from_markdown: bool = Field(
        default=True, description="Pull JSON out of markdown code fences before repair"
    )
    use_defaults: bool = Field(default=True, description="Substitute defaults for missing values")
