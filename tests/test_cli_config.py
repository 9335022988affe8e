"""Tests for CLI configuration management."""

import os
from unittest.mock import patch

import pytest
import yaml

from llmschema.cli.config import (
    CLIConfig,
    OutputConfig,
    get_config_paths,
    get_effective_config,
    load_config,
    reset_config,
    save_config,
    update_config,
)
from llmschema.repair import RepairOptions


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "llmschema"

    # Patch the config paths
    with (
        patch("llmschema.cli.config.CONFIG_DIR", config_dir),
        patch("llmschema.cli.config.CONFIG_FILE", config_dir / "config.yaml"),
    ):
        yield config_dir


@pytest.fixture
def clean_env():
    """Remove the output format override from the environment."""
    with patch.dict(os.environ, {}, clear=False):
        os.environ.pop("LLMSCHEMA_OUTPUT_FORMAT", None)
        yield


class TestCLIConfig:
    """Tests for CLI configuration."""

    def test_default_config(self):
        """Test default configuration values."""
        config = CLIConfig()
        assert config.output.format == "text"
        assert config.output.color is True
        assert config.output.verbose is False
        assert config.repair == RepairOptions()

    def test_custom_config(self):
        """Test custom configuration."""
        config = CLIConfig(
            repair=RepairOptions(close_brackets=False),
            output=OutputConfig(format="json"),
        )
        assert config.repair.close_brackets is False
        assert config.output.format == "json"


class TestConfigPersistence:
    """Tests for config file read/write."""

    def test_save_and_load_config(self, temp_config_dir):
        """Test saving and loading config."""
        config = CLIConfig(repair=RepairOptions(markdown=False))
        config.output.verbose = True
        save_config(config)

        loaded = load_config()
        assert loaded.repair.markdown is False
        assert loaded.output.verbose is True

    def test_saved_as_yaml(self, temp_config_dir):
        """Test the file is plain YAML."""
        save_config(CLIConfig())
        data = yaml.safe_load((temp_config_dir / "config.yaml").read_text())
        assert data["output"]["format"] == "text"
        assert data["repair"]["trailing_commas"] is True

    def test_load_missing_config(self, temp_config_dir):
        """Test loading config when file doesn't exist."""
        config = load_config()
        assert isinstance(config, CLIConfig)
        assert config.output.format == "text"

    def test_load_corrupt_config(self, temp_config_dir):
        """Test a broken file falls back to defaults."""
        temp_config_dir.mkdir(parents=True)
        (temp_config_dir / "config.yaml").write_text("output: [unclosed\n")
        assert load_config() == CLIConfig()

    def test_load_wrong_shape(self, temp_config_dir):
        """Test a file with invalid values falls back to defaults."""
        temp_config_dir.mkdir(parents=True)
        (temp_config_dir / "config.yaml").write_text("repair:\n  markdown: [1, 2]\n")
        assert load_config() == CLIConfig()

    def test_reset(self, temp_config_dir):
        """Test resetting to defaults."""
        update_config("output.format", "json")
        reset_config()
        assert load_config().output.format == "text"

    def test_config_paths(self, temp_config_dir):
        """Test reported paths."""
        paths = get_config_paths()
        assert paths["config_dir"] == temp_config_dir
        assert paths["config_file"] == temp_config_dir / "config.yaml"


class TestUpdateConfig:
    """Tests for config update functionality."""

    def test_update_output_format(self, temp_config_dir):
        """Test updating a string setting."""
        update_config("output.format", "json")

        config = load_config()
        assert config.output.format == "json"

    def test_update_repair_stage(self, temp_config_dir):
        """Test updating a frozen section."""
        update_config("repair.trailing_commas", "false")

        config = load_config()
        assert config.repair.trailing_commas is False
        assert config.repair.markdown is True

    def test_update_boolean(self, temp_config_dir):
        """Test updating boolean setting."""
        update_config("output.verbose", "yes")

        config = load_config()
        assert config.output.verbose is True

    def test_invalid_boolean(self, temp_config_dir):
        """Test error on a value that is not a boolean."""
        with pytest.raises(ValueError, match="Expected a boolean"):
            update_config("output.color", "sometimes")

    def test_invalid_format(self, temp_config_dir):
        """Test error on an unknown output format."""
        with pytest.raises(ValueError, match="Invalid output format"):
            update_config("output.format", "xml")

    def test_invalid_section(self, temp_config_dir):
        """Test error on invalid section."""
        with pytest.raises(ValueError, match="Unknown section"):
            update_config("invalid.key", "value")

    def test_invalid_field(self, temp_config_dir):
        """Test error on invalid field."""
        with pytest.raises(ValueError, match="Unknown field"):
            update_config("repair.bogus", "true")

    def test_invalid_key(self, temp_config_dir):
        """Test error on invalid key format."""
        with pytest.raises(ValueError, match="Invalid config key"):
            update_config("toplevel", "value")


class TestEffectiveConfig:
    """Tests for effective config with overrides."""

    def test_no_overrides(self, temp_config_dir, clean_env):
        """Test stored config is used as-is."""
        update_config("output.format", "json")
        config = get_effective_config()
        assert config.output.format == "json"

    def test_env_overrides_file(self, temp_config_dir):
        """Test the environment variable wins over the file."""
        update_config("output.format", "text")
        with patch.dict(os.environ, {"LLMSCHEMA_OUTPUT_FORMAT": "json"}):
            config = get_effective_config()
        assert config.output.format == "json"

    def test_cli_overrides_env(self, temp_config_dir):
        """Test the command-line value wins over the environment."""
        with patch.dict(os.environ, {"LLMSCHEMA_OUTPUT_FORMAT": "json"}):
            config = get_effective_config(output_format="text")
        assert config.output.format == "text"

    def test_invalid_env_format(self, temp_config_dir):
        """Test a bad environment value is rejected."""
        with patch.dict(os.environ, {"LLMSCHEMA_OUTPUT_FORMAT": "yaml"}):
            with pytest.raises(ValueError, match="Invalid output format"):
                get_effective_config()

    def test_disabled_stages(self, temp_config_dir, clean_env):
        """Test stages disabled for one run."""
        config = get_effective_config(disabled_stages=["markdown", "close_brackets"])
        assert config.repair.markdown is False
        assert config.repair.close_brackets is False
        assert config.repair.trailing_commas is True
        # Stored config is untouched.
        assert load_config().repair.markdown is True

    def test_unknown_stage(self, temp_config_dir, clean_env):
        """Test an unknown stage name is rejected."""
        with pytest.raises(ValueError, match="Unknown repair stage"):
            get_effective_config(disabled_stages=["bogus"])

    def test_verbose_override(self, temp_config_dir, clean_env):
        """Test the verbose flag."""
        assert get_effective_config(verbose=True).output.verbose is True
        assert get_effective_config().output.verbose is False
