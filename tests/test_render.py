"""Tests for the terminal renderer."""

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from routines_md.formatting.ir import BlockType, InlineSpan, InlineType, LogicalLine
from routines_md.formatting.parser import MarkdownParser
from routines_md.render import TerminalRenderer


class TestTerminalRenderer:
    """Tests for the TerminalRenderer class."""

    @pytest.fixture
    def renderer(self) -> TerminalRenderer:
        """Create a renderer with fixed settings."""
        return TerminalRenderer(bullet_glyph="•", code_block_label="Code")

    @pytest.fixture
    def parser(self) -> MarkdownParser:
        return MarkdownParser()

    def test_full_entry(
        self,
        renderer: TerminalRenderer,
        parser: MarkdownParser,
        record_console: Console,
        sample_markdown: str,
    ):
        """Test rendering every block type of a journal entry."""
        renderer.print(parser.parse(sample_markdown), record_console)
        output = record_console.export_text()

        assert "Monday" in output
        assert "• Buy milk" in output
        assert "1. Call mom" in output
        assert "│ Stay curious" in output
        assert 'print("hi")' in output
        assert "Code" in output
        assert "Task" in output and "Run" in output
        assert "Docs" in output
        assert "**" not in output
        assert "|------|" not in output

    def test_numbered_items_count_per_run(
        self, renderer: TerminalRenderer, parser: MarkdownParser
    ):
        """Test that numbering restarts after a non-numbered line."""
        doc = parser.parse("1. a\n1. b\ntext\n1. c")
        plains = [r.plain for r in renderer.render(doc)]

        assert plains == ["1. a", "2. b", "text", "1. c"]

    def test_heading_markers_removed(self, renderer: TerminalRenderer):
        """Test that heading content is rendered through inline spans."""
        text = renderer.render_line(LogicalLine(BlockType.H1, "**Big** day"))

        assert isinstance(text, Text)
        assert text.plain == "Big day"

    def test_link_span(self, renderer: TerminalRenderer):
        """Test that decodable links carry their href."""
        text = renderer.inline_span(InlineSpan(InlineType.LINK, "go|x.com"))

        assert text.plain == "go"
        assert text.style.link == "https://x.com"

    def test_undecodable_link_span(self, renderer: TerminalRenderer):
        """Test the plain-text fallback for a pipe in the label."""
        text = renderer.inline_span(InlineSpan(InlineType.LINK, "a|b|c"))

        assert text.plain == "a|b|c"

    def test_structural_lines(self, renderer: TerminalRenderer):
        """Test renderables chosen for non-prose lines."""
        assert renderer.render_line(LogicalLine(BlockType.TABLE_SEPARATOR, "|---|")) is None
        assert isinstance(renderer.render_line(LogicalLine(BlockType.HORIZONTAL_RULE, "---")), Rule)
        assert renderer.render_line(LogicalLine(BlockType.EMPTY, "")).plain == ""
        assert isinstance(renderer.render_line(LogicalLine(BlockType.CODE_BLOCK, "x")), Panel)

    def test_inline_code_line_not_scanned(self, renderer: TerminalRenderer):
        """Test that a whole-line code span keeps its markers inside."""
        text = renderer.render_line(LogicalLine(BlockType.INLINE_CODE_LINE, "**x**"))

        assert text.plain == "**x**"

    def test_table_header(self, renderer: TerminalRenderer):
        """Test that a separator row turns on the header."""
        table = renderer.render_line(
            LogicalLine(BlockType.TABLE, "| a | b |\n|---|---|\n| 1 | 2 |")
        )

        assert isinstance(table, Table)
        assert table.show_header is True
        assert len(table.columns) == 2
        assert table.row_count == 1

    def test_table_without_header(self, renderer: TerminalRenderer):
        """Test a table with no separator row."""
        table = renderer.render_line(LogicalLine(BlockType.TABLE, "| a | b |\n| c | d |"))

        assert table.show_header is False
        assert table.row_count == 2

    def test_empty_table(self, renderer: TerminalRenderer):
        """Test that an empty table line still renders."""
        table = renderer.render_line(LogicalLine(BlockType.TABLE, ""))

        assert isinstance(table, Table)
        assert table.row_count == 0
