"""Tests for the quote-aware string scanner."""

from llmschema.repair.scanner import StringScanner, string_mask


class TestStringScanner:
    """Tests for character classification."""

    def test_classifies_simple_string(self):
        """Test open, content and close markers around a key."""
        kinds = [c.kind for c in StringScanner('{"a"}')]
        assert kinds == ["structural", "open", "content", "close", "structural"]

    def test_escaped_quote_does_not_close(self):
        """Test that a backslash-escaped quote stays inside the string."""
        text = r'"a\"b"'
        kinds = [c.kind for c in StringScanner(text)]
        assert kinds == ["open", "content", "content", "content", "content", "close"]

    def test_escaped_flag(self):
        """Test that the escaped character is flagged."""
        chars = list(StringScanner(r'"\""'))
        assert chars[2].char == '"'
        assert chars[2].escaped is True
        assert chars[3].kind == "close"

    def test_double_backslash_then_quote_closes(self):
        """Test that an escaped backslash does not escape the following quote."""
        chars = list(StringScanner(r'"a\\"'))
        assert chars[-1].kind == "close"

    def test_dangling_backslash(self):
        """Test that a trailing backslash is treated as plain content."""
        chars = list(StringScanner('"abc\\'))
        assert chars[-1].char == "\\"
        assert chars[-1].kind == "content"

    def test_pending_escape(self):
        """Test that a trailing backslash inside a string is reported as pending."""
        scanner = StringScanner('"abc\\')
        list(scanner)
        assert scanner.pending_escape
        scanner = StringScanner('"abc\\\\')
        list(scanner)
        assert not scanner.pending_escape

    def test_unterminated_string(self):
        """Test that the scanner reports an open string at end of input."""
        scanner = StringScanner('{"name": "te')
        list(scanner)
        assert scanner.in_string

    def test_custom_quotes(self):
        """Test that single quotes open strings when requested."""
        scanner = StringScanner("'it\"s'", quotes="\"'")
        kinds = [c.kind for c in scanner]
        assert kinds[0] == "open"
        assert kinds[3] == "content"
        assert kinds[-1] == "close"

    def test_next_significant(self):
        """Test whitespace skipping."""
        scanner = StringScanner("a   b")
        assert scanner.next_significant(1) == 4
        assert scanner.next_significant(5) == 5


class TestStringMask:
    """Tests for in-string masking."""

    def test_brackets_inside_string_masked(self):
        """Test that syntax inside strings is flagged as string content."""
        mask = string_mask('{"a": "}"}')
        assert mask[7] is True
        assert mask[0] is False
        assert mask[-1] is False

    def test_empty_input(self):
        """Test that empty text yields an empty mask."""
        assert string_mask("") == []
