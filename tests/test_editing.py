"""Tests for the markdown editing commands."""

import pytest

from routines_md.core.editing import (
    TABLE_TEMPLATE,
    EditContext,
    Markup,
    Selection,
    apply_markup,
    insert_markup,
    insert_table,
)
from routines_md.formatting.ir import BlockType, LogicalLine
from routines_md.formatting.segmenter import segment


class TestInsertMarkup:
    """Tests for appending markers at the end of an entry."""

    def test_empty_text(self):
        """Test that an empty entry gets the markers directly."""
        assert insert_markup("", "# ") == "# "

    def test_adds_newline(self):
        """Test that markers start on a new line."""
        assert insert_markup("ab", "**", "**") == "ab\n****"

    def test_keeps_existing_newline(self):
        """Test that no blank line is added after a trailing newline."""
        assert insert_markup("ab\n", "- ") == "ab\n- "


class TestApplyMarkup:
    """Tests for toolbar actions on a selection."""

    def test_wrap_selection(self):
        """Test that a selection is wrapped and grows over the markers."""
        ctx = EditContext("hello world", Selection(0, 5))
        result = apply_markup(ctx, Markup.BOLD)

        assert result.text == "**hello** world"
        assert result.selection == Selection(0, 9)

    def test_cursor_inside_text(self):
        """Test that the cursor lands between inserted markers."""
        result = apply_markup(EditContext("ab", Selection(1)), Markup.ITALIC)

        assert result.text == "a**b"
        assert result.selection == Selection(2)

    def test_cursor_at_end(self):
        """Test that markers are appended on a new line at the end."""
        result = apply_markup(EditContext("ab", Selection(2)), Markup.H1)

        assert result.text == "ab\n# "
        assert result.selection == Selection(5)

    def test_empty_entry(self):
        """Test that the cursor sits between markers in an empty entry."""
        result = apply_markup(EditContext(), Markup.BOLD)

        assert result.text == "****"
        assert result.selection == Selection(2)

    def test_horizontal_rule_always_appended(self):
        """Test that a rule ignores the selection."""
        result = apply_markup(EditContext("ab", Selection(0, 1)), Markup.HORIZONTAL_RULE)

        assert result.text == "ab\n---"
        assert result.selection == Selection(6)

    def test_selection_clamped_to_text(self):
        """Test that a selection past the end only wraps existing text."""
        result = apply_markup(EditContext("abc", Selection(1, 10)), Markup.BOLD)

        assert result.text == "a**bc**"
        assert result.selection == Selection(1, 6)

    @pytest.mark.parametrize(
        "markup, block_type, content",
        [
            (Markup.H2, BlockType.H2, "note"),
            (Markup.QUOTE, BlockType.QUOTE, "note"),
            (Markup.NUMBERED, BlockType.NUMBERED, "note"),
            (Markup.STRIKETHROUGH, BlockType.TEXT, "~~note~~"),
            (Markup.INLINE_CODE, BlockType.TEXT, "`note`"),
            (Markup.LINK, BlockType.LINK_LINE, "[note](url)"),
            (Markup.CODE_BLOCK, BlockType.CODE_BLOCK, "note"),
        ],
    )
    def test_wrapped_line_classifies(
        self, markup: Markup, block_type: BlockType, content: str
    ):
        """Test that wrapping a whole line yields the matching block type."""
        result = apply_markup(EditContext("note", Selection(0, 4)), markup)

        assert segment(result.text) == [LogicalLine(block_type, content)]


class TestInsertTable:
    """Tests for inserting the table template."""

    def test_appends_on_new_line(self):
        """Test that the template starts on its own line."""
        result = insert_table(EditContext("ab", Selection(0)))

        assert result.text == "ab\n" + TABLE_TEMPLATE
        assert result.selection == Selection(len(result.text))

    def test_template_is_one_table(self):
        """Test that the template segments to a single table line."""
        result = insert_table(EditContext())
        lines = segment(result.text)

        assert len(lines) == 1
        assert lines[0].block_type == BlockType.TABLE
        assert lines[0].content == TABLE_TEMPLATE
