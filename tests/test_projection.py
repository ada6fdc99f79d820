"""Tests for the data-level render projection."""

from routines_md.formatting.ir import BlockType, InlineType, LinkTarget, LogicalLine
from routines_md.formatting.projection import (
    decode_link,
    inline_spans,
    parse_table,
    split_cells,
)


class TestDecodeLink:
    """Tests for link span decoding."""

    def test_full_url(self):
        """Test that http(s) URLs are used as-is."""
        assert decode_link("go|http://x") == LinkTarget("go", "http://x", "http://x")

    def test_bare_domain_gets_scheme(self):
        """Test that scheme-less URLs get https:// prepended."""
        target = decode_link("docs|example.com")

        assert target.url == "example.com"
        assert target.href == "https://example.com"

    def test_custom_scheme(self):
        """Test overriding the default scheme."""
        assert decode_link("a|b.org", default_scheme="http://").href == "http://b.org"

    def test_pipe_in_text_falls_back(self):
        """Test that a field-count mismatch gives no target."""
        assert decode_link("a|b|c") is None

    def test_missing_pipe_falls_back(self):
        """Test content without any delimiter."""
        assert decode_link("nopipe") is None


class TestParseTable:
    """Tests for table decoding."""

    def test_header_table(self):
        """Test a table with a separator row."""
        table = parse_table("| a | b |\n|---|---|\n| 1 | 2 |")

        assert table.rows == (("a", "b"), ("1", "2"))
        assert table.has_header is True
        assert table.header == ("a", "b")
        assert table.body == (("1", "2"),)
        assert table.column_count == 2

    def test_headerless_table(self):
        """Test a table without a separator row."""
        table = parse_table("| a | b |\n| c | d |")

        assert table.has_header is False
        assert table.header == ()
        assert table.body == table.rows

    def test_empty_content(self):
        """Test that empty content gives an empty table."""
        table = parse_table("")

        assert table.rows == ()
        assert table.column_count == 0

    def test_raw_rows_are_trimmed(self):
        """Test rows buffered with surrounding whitespace."""
        assert parse_table("  | a |  \n\n").rows == (("a",),)

    def test_blank_cells_dropped(self):
        """Test that empty cells are removed."""
        assert split_cells("| a |  | b |") == ("a", "b")


class TestInlineSpans:
    """Tests for choosing which lines get inline spans."""

    def test_prose_line(self):
        """Test that text lines are scanned."""
        spans = inline_spans(LogicalLine(BlockType.QUOTE, "*calm*"))

        assert spans[0].inline_type == InlineType.ITALIC

    def test_structural_lines(self):
        """Test that tables, code and rules are not scanned."""
        for block_type in (
            BlockType.TABLE,
            BlockType.CODE_BLOCK,
            BlockType.INLINE_CODE_LINE,
            BlockType.HORIZONTAL_RULE,
            BlockType.EMPTY,
        ):
            assert inline_spans(LogicalLine(block_type, "**x**")) == []
