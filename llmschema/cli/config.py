"""Configuration management for the llmschema CLI.

Settings live in a YAML file in the platform config directory.
The LLMSCHEMA_OUTPUT_FORMAT environment variable overrides the stored output format.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, Field

from llmschema.repair.options import RepairOptions

# Linux: ~/.config/llmschema
# macOS: ~/Library/Application Support/llmschema
# Windows: C:\\Users\\<user>\\AppData\\Local\\llmschema
CONFIG_DIR = Path(user_config_dir("llmschema", appauthor=False))
CONFIG_FILE = CONFIG_DIR / "config.yaml"

OUTPUT_FORMAT_ENV = "LLMSCHEMA_OUTPUT_FORMAT"
OUTPUT_FORMATS = ("text", "json")


class OutputConfig(BaseModel):
    """Output formatting settings."""

    format: str = Field(default="text", description="Output format (text, json)")
    color: bool = Field(default=True, description="Enable colored output")
    verbose: bool = Field(default=False, description="Verbose output")


class CLIConfig(BaseModel):
    """Complete CLI configuration."""

    repair: RepairOptions = Field(default_factory=RepairOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)


def ensure_config_dir() -> None:
    """Create config directory if it doesn't exist."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_config() -> CLIConfig:
    """Load configuration from file, falling back to defaults."""
    if not CONFIG_FILE.exists():
        return CLIConfig()

    try:
        with open(CONFIG_FILE) as f:
            data = yaml.safe_load(f) or {}
            return CLIConfig(**data)
    except (yaml.YAMLError, ValueError, TypeError):
        return CLIConfig()


def save_config(config: CLIConfig) -> None:
    """Save configuration to file."""
    ensure_config_dir()

    with open(CONFIG_FILE, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False)


def reset_config() -> CLIConfig:
    """Overwrite the stored configuration with defaults."""
    config = CLIConfig()
    save_config(config)
    return config


def _coerce(current: Any, value: Any) -> Any:
    if isinstance(current, bool):
        text = str(value).lower()
        if text in ("true", "1", "yes", "on"):
            return True
        if text in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"Expected a boolean, got: {value}")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    return value


def update_config(key: str, value: Any) -> None:
    """Update a specific config value.

    Args:
        key: Dot-notation key (e.g., "repair.trailing_commas", "output.format")
        value: New value, coerced to the type of the current value

    Raises:
        ValueError: If the key is unknown or the value cannot be coerced
    """
    config = load_config()

    parts = key.split(".")
    if len(parts) != 2:
        raise ValueError(f"Invalid config key format: {key}")

    section, field = parts
    if section not in CLIConfig.model_fields:
        raise ValueError(f"Unknown section: {section}")

    section_obj = getattr(config, section)
    if field not in type(section_obj).model_fields:
        raise ValueError(f"Unknown field: {field} in {section}")

    value = _coerce(getattr(section_obj, field), value)
    if section == "output" and field == "format" and value not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid output format: {value}. Must be 'text' or 'json'")

    # Sections may be frozen, so replace rather than mutate
    setattr(config, section, section_obj.model_copy(update={field: value}))
    save_config(config)


def get_effective_config(
    output_format: str | None = None,
    disabled_stages: list[str] | None = None,
    verbose: bool | None = None,
) -> CLIConfig:
    """Get effective config with environment and command-line overrides applied.

    Priority: command line > LLMSCHEMA_OUTPUT_FORMAT > stored config.

    Args:
        output_format: Override output format ("text" or "json")
        disabled_stages: Repair stages to switch off for this run
        verbose: Override verbose output

    Raises:
        ValueError: On an unknown output format or repair stage
    """
    config = load_config()

    env_format = os.environ.get(OUTPUT_FORMAT_ENV)
    if env_format:
        config.output.format = env_format
    if output_format:
        config.output.format = output_format
    if config.output.format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid output format: {config.output.format}. Must be 'text' or 'json'"
        )

    if disabled_stages:
        config.repair = config.repair.without(*disabled_stages)
    if verbose is not None:
        config.output.verbose = verbose

    return config


def get_config_paths() -> dict[str, Path]:
    """Get paths to config files for debugging."""
    return {
        "config_dir": CONFIG_DIR,
        "config_file": CONFIG_FILE,
    }
