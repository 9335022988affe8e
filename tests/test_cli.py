"""Tests for the llmschema command-line interface."""

import json
import os
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

# Set NO_COLOR for clean test output
os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["COLUMNS"] = "200"

from llmschema.cli.main import app  # noqa: E402
from llmschema.version import __version__  # noqa: E402

runner = CliRunner()


@pytest.fixture(autouse=True)
def temp_config_dir(tmp_path):
    """Keep every CLI run away from the real config directory."""
    config_dir = tmp_path / "llmschema"
    with (
        patch("llmschema.cli.config.CONFIG_DIR", config_dir),
        patch("llmschema.cli.config.CONFIG_FILE", config_dir / "config.yaml"),
        patch.dict(os.environ, {}, clear=False),
    ):
        os.environ.pop("LLMSCHEMA_OUTPUT_FORMAT", None)
        yield config_dir


class TestVersion:
    """Tests for the version flag."""

    def test_version(self):
        """Test --version prints and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"llmschema version {__version__}" in result.output


class TestRepairCommand:
    """Tests for ``llmschema repair``."""

    def test_repair_stdin(self):
        """Test repairing input from stdin."""
        result = runner.invoke(app, ["repair"], input="{name: 'Ada', tags: ['x',],}")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "Ada", "tags": ["x"]}

    def test_repair_file(self, tmp_path):
        """Test repairing a file."""
        path = tmp_path / "response.txt"
        path.write_text('Here you go:\n```json\n{"a": 1,}\n```\n')
        result = runner.invoke(app, ["repair", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"a": 1}

    def test_missing_file(self, tmp_path):
        """Test a nonexistent path is rejected."""
        result = runner.invoke(app, ["repair", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0

    def test_json_output(self):
        """Test machine-readable output."""
        result = runner.invoke(app, ["repair", "-o", "json"], input='{"a": 1,}')
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["data"] == {"a": 1}
        assert [r["kind"] for r in data["repairs"]] == ["trailing_commas"]

    def test_disable_stage(self):
        """Test --disable turns a stage off."""
        result = runner.invoke(
            app, ["repair", "-o", "json", "--disable", "trailing_commas"], input='{"a": 1,}'
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["success"] is False

    def test_unknown_stage(self):
        """Test an unknown stage name is an error."""
        result = runner.invoke(app, ["repair", "--disable", "bogus"], input="{}")
        assert result.exit_code == 1
        assert "Unknown repair stage" in result.output

    def test_special_as_strings(self):
        """Test the special-number flag."""
        result = runner.invoke(app, ["repair", "--special-as-strings"], input='{"a": NaN}')
        assert result.exit_code == 0
        assert json.loads(result.output) == {"a": "NaN"}

    def test_unrepairable(self):
        """Test failure exit code and message."""
        result = runner.invoke(app, ["repair"], input="no json here")
        assert result.exit_code == 1
        assert "Could not repair JSON" in result.output

    def test_invalid_output_format(self):
        """Test an unknown output format."""
        result = runner.invoke(app, ["repair", "-o", "xml"], input="{}")
        assert result.exit_code == 1
        assert "Invalid output format" in result.output

    def test_env_output_format(self):
        """Test the environment variable selects JSON output."""
        with patch.dict(os.environ, {"LLMSCHEMA_OUTPUT_FORMAT": "json"}):
            result = runner.invoke(app, ["repair"], input="[1, 2")
        assert json.loads(result.output)["data"] == [1, 2]

    def test_stored_stage_setting(self):
        """Test stages disabled in the config file stay off."""
        runner.invoke(app, ["config", "set", "repair.close_brackets", "false"])
        result = runner.invoke(app, ["repair"], input="[1, 2")
        assert result.exit_code == 1


class TestExtractCommand:
    """Tests for ``llmschema extract``."""

    def test_extract_markdown(self):
        """Test extracting a fenced block."""
        text = 'Result:\n```json\n{"a": 1}\n```\nDone.'
        result = runner.invoke(app, ["extract"], input=text)
        assert result.exit_code == 0
        assert result.output.strip() == '{"a": 1}'

    def test_extract_from_prose(self):
        """Test extracting from surrounding text."""
        result = runner.invoke(app, ["extract", "-o", "json"], input='The answer is [1, 2] ok')
        data = json.loads(result.output)
        assert data["text"] == "[1, 2]"
        assert data["extracted"] is True
        assert data["source"] == "text"
        assert data["language"] is None

    def test_extract_language(self):
        """Test the fence language is reported."""
        text = '```json\n{"a": 1}\n```'
        data = json.loads(runner.invoke(app, ["extract", "-o", "json"], input=text).output)
        assert data["source"] == "markdown"
        assert data["language"] == "json"

    def test_nothing_to_extract(self):
        """Test plain text is passed through."""
        data = json.loads(runner.invoke(app, ["extract", "-o", "json"], input="hello").output)
        assert data["text"] == "hello"
        assert data["extracted"] is False
        assert data["source"] is None


class TestCheckCommand:
    """Tests for ``llmschema check``."""

    def test_valid(self):
        """Test valid input."""
        result = runner.invoke(app, ["check"], input='{"a": [1, 2]}')
        assert result.exit_code == 0
        assert "Valid JSON" in result.output

    def test_invalid(self):
        """Test invalid input."""
        result = runner.invoke(app, ["check"], input='{"a": 1,}')
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_special_numbers_invalid(self):
        """Test NaN is not strict JSON."""
        result = runner.invoke(app, ["check", "-o", "json"], input="[NaN]")
        assert result.exit_code == 1
        assert json.loads(result.output) == {"valid": False}

    def test_json_output(self):
        """Test machine-readable output."""
        result = runner.invoke(app, ["check", "-o", "json"], input="true")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"valid": True}


class TestConfigCommands:
    """Tests for ``llmschema config``."""

    def test_show(self):
        """Test showing the configuration."""
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "trailing_commas" in result.output
        assert "format" in result.output

    def test_set(self, temp_config_dir):
        """Test setting a value."""
        result = runner.invoke(app, ["config", "set", "output.format", "json"])
        assert result.exit_code == 0
        assert "Set output.format = json" in result.output
        assert (temp_config_dir / "config.yaml").exists()

    def test_set_invalid(self):
        """Test an invalid key."""
        result = runner.invoke(app, ["config", "set", "nope.key", "1"])
        assert result.exit_code == 1
        assert "Unknown section" in result.output

    def test_path(self, temp_config_dir):
        """Test path output."""
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert "config.yaml" in result.output

    def test_reset_force(self):
        """Test reset without confirmation."""
        runner.invoke(app, ["config", "set", "output.format", "json"])
        result = runner.invoke(app, ["config", "reset", "--force"])
        assert result.exit_code == 0
        assert "Configuration reset to defaults" in result.output

    def test_reset_declined(self):
        """Test declining the confirmation aborts."""
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == 1
