"""Tests for the repair orchestrator."""

import json

import pytest

from llmschema import RepairError
from llmschema.repair import (
    RepairOptions,
    is_repairable_json,
    is_valid_json,
    parse_and_repair,
    repair_json,
)

MESSY_INPUTS = [
    "```json\n{name: 'test', value: 123,}\n```",
    '{"a": 1, "b": 2,}',
    "[1, 2, 3",
    '{"value": NaN}',
    "{'name': 'test\\'s value'}",
    'Here is the data: {"ok": true, // yes\n "n": .5}',
    '{"mask": 0xff, "items": [1, 2,]',
    'Sure! {"a": [1, 2',
    '{"a": "foo\\',
    "{\"a\": \"it\\'s\"}",
    'Here are the users: [{"name": "a"}, {"name": "b"}] hope that helps',
    "this is not json",
]


class TestRepairScenarios:
    """Concrete repair scenarios."""

    def test_markdown_with_unquoted_keys(self):
        """Test fenced block with bare keys, single quotes and a trailing comma."""
        result = repair_json("```json\n{name: 'test', value: 123,}\n```")
        assert result.success is True
        assert result.repaired is True
        assert result.data == {"name": "test", "value": 123}

    def test_trailing_comma(self):
        """Test trailing comma removal."""
        result = repair_json('{"a": 1, "b": 2,}')
        assert result.data == {"a": 1, "b": 2}
        assert [r.kind for r in result.repairs] == ["trailing_commas"]

    def test_truncated_array(self):
        """Test closing a truncated array."""
        result = repair_json("[1, 2, 3")
        assert result.data == [1, 2, 3]
        assert result.text == "[1, 2, 3]"

    def test_nan(self):
        """Test NaN becomes null."""
        result = repair_json('{"value": NaN}')
        assert result.success is True
        assert result.data == {"value": None}

    def test_escaped_single_quote(self):
        """Test an escaped quote inside a single-quoted string."""
        result = repair_json("{'name': 'test\\'s value'}")
        assert result.success is True
        assert result.data == {"name": 'test"s value'}

    def test_prose_and_comments(self):
        """Test extraction from prose followed by comment and number fixes."""
        result = repair_json('Here is the data: {"ok": true, // yes\n "n": .5}')
        assert result.data == {"ok": True, "n": 0.5}
        kinds = [r.kind for r in result.repairs]
        assert kinds == ["extract_from_text", "remove_comments", "number_formats"]

    def test_truncated_after_preamble(self):
        """Test a cut-off value after prose is sliced out and closed."""
        result = repair_json('Sure! {"a": [1, 2')
        assert result.data == {"a": [1, 2]}
        assert [r.kind for r in result.repairs] == ["extract_from_text", "close_brackets"]

    def test_string_ending_in_backslash(self):
        """Test a truncated string ending in a backslash keeps the backslash."""
        result = repair_json('{"a": "foo\\')
        assert result.success is True
        assert result.data == {"a": "foo\\"}

    def test_escaped_apostrophe_in_double_quotes(self):
        """Test an invalid \\' escape in a double-quoted string."""
        result = repair_json("{\"a\": \"it\\'s\"}")
        assert result.data == {"a": "it's"}
        assert [r.kind for r in result.repairs] == ["single_quotes"]

    def test_special_numbers_as_strings(self):
        """Test the option to keep special values as strings."""
        options = RepairOptions(special_numbers_as_strings=True)
        result = repair_json('{"value": Infinity}', options)
        assert result.data == {"value": "Infinity"}

    def test_unrepairable(self):
        """Test failure is reported, not raised."""
        result = repair_json("this is not json")
        assert result.success is False
        assert result.data is None
        assert isinstance(result.error, ValueError)

    def test_to_dict(self):
        """Test the serializable form of a result."""
        data = repair_json('{"a": 1,}').to_dict()
        assert data["success"] is True
        assert data["data"] == {"a": 1}
        assert data["repairs"][0]["kind"] == "trailing_commas"
        assert data["error"] is None
        json.dumps(data)


class TestRepairProperties:
    """Invariants of the orchestrator."""

    @pytest.mark.parametrize("text", MESSY_INPUTS)
    def test_idempotent(self, text):
        """Test repairing repaired text changes nothing further."""
        first = repair_json(text)
        second = repair_json(first.text)
        assert second.text == first.text
        assert second.repairs == []
        assert second.repaired is False
        assert second.data == first.data

    @pytest.mark.parametrize(
        "text",
        ['{"a": 1}', "[1, 2.5, null]", '"plain"', "42", "true", '{"s": "it\'s // not, a comment"}'],
    )
    def test_round_trip_on_clean_input(self, text):
        """Test valid JSON comes back unchanged with its parsed value."""
        result = repair_json(text)
        assert result.success is True
        assert result.repaired is False
        assert result.repairs == []
        assert result.text == text
        assert result.data == json.loads(text)

    def test_all_stages_disabled(self):
        """Test that disabling every stage leaves a plain parse attempt."""
        options = RepairOptions().without(*RepairOptions.stage_names())
        result = repair_json('{"a": 1,}', options)
        assert result.success is False
        assert result.repairs == []
        assert result.text == '{"a": 1,}'

    def test_disabled_stage_skipped(self):
        """Test that a disabled stage does not run."""
        options = RepairOptions().without("trailing_commas")
        assert repair_json('{"a": 1,}', options).success is False

    def test_stage_order(self):
        """Test repairs are logged in pipeline order."""
        result = repair_json("```json\n{a: 'x', b: NaN, c: [1, 2,\n```")
        kinds = [r.kind for r in result.repairs]
        assert kinds == [
            "markdown",
            "single_quotes",
            "unquoted_keys",
            "special_numbers",
            "close_brackets",
        ]
        assert result.data == {"a": "x", "b": None, "c": [1, 2]}


class TestRepairHelpers:
    """Tests for the convenience wrappers."""

    def test_is_valid_json(self):
        """Test strict validity checks."""
        assert is_valid_json('{"a": 1}') is True
        assert is_valid_json('{"a": 1,}') is False
        assert is_valid_json("") is False

    def test_is_valid_json_rejects_special_numbers(self):
        """Test NaN and Infinity are not strict JSON."""
        assert is_valid_json("NaN") is False
        assert is_valid_json('{"a": Infinity}') is False
        assert is_valid_json("[-Infinity]") is False

    def test_parse_and_repair(self):
        """Test data is returned directly."""
        assert parse_and_repair("{a: 1}") == {"a": 1}

    def test_parse_and_repair_raises(self):
        """Test unrepairable input raises RepairError carrying the result."""
        with pytest.raises(RepairError) as exc_info:
            parse_and_repair("not json at all")
        assert exc_info.value.result.success is False
        assert isinstance(exc_info.value, ValueError)

    def test_is_repairable_json(self):
        """Test repairability check."""
        assert is_repairable_json("{a: 1,}") is True
        assert is_repairable_json("nope") is False


class TestRepairOptions:
    """Tests for stage toggles."""

    def test_defaults(self):
        """Test every stage is on by default."""
        options = RepairOptions()
        assert all(getattr(options, stage) for stage in RepairOptions.stage_names())
        assert options.special_numbers_as_strings is False

    def test_stage_names_order(self):
        """Test stage names follow pipeline order."""
        assert RepairOptions.stage_names()[0] == "markdown"
        assert RepairOptions.stage_names()[-1] == "close_brackets"
        assert "special_numbers_as_strings" not in RepairOptions.stage_names()

    def test_without_unknown_stage(self):
        """Test an unknown stage name is rejected."""
        with pytest.raises(ValueError, match="Unknown repair stage"):
            RepairOptions().without("bogus")

    def test_without_returns_copy(self):
        """Test the original options are not modified."""
        options = RepairOptions()
        reduced = options.without("markdown")
        assert options.markdown is True
        assert reduced.markdown is False
