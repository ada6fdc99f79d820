"""Markdown parser for converting journal entries to IR."""

from typing import Optional

from routines_md.formatting.classifier import LineClassifier
from routines_md.formatting.inline import InlineScanner
from routines_md.formatting.ir import (
    BlockType,
    InlineSpan,
    LogicalLine,
    MarkdownDocument,
)
from routines_md.formatting.projection import inline_spans, parse_table
from routines_md.formatting.segmenter import FENCE_MARKER, BlockSegmenter


class MarkdownParser:
    """Parse journal markdown into logical lines and inline spans."""

    # Markers used when writing lines back out as markdown
    LINE_PREFIXES = {
        BlockType.H1: "# ",
        BlockType.H2: "## ",
        BlockType.H3: "### ",
        BlockType.BULLET: "- ",
        BlockType.QUOTE: "> ",
    }

    def __init__(
        self,
        segmenter: Optional[BlockSegmenter] = None,
        scanner: Optional[InlineScanner] = None,
    ) -> None:
        self.segmenter = segmenter or BlockSegmenter(LineClassifier())
        self.scanner = scanner or InlineScanner()

    def parse(
        self,
        markdown_text: str,
        metadata: Optional[dict] = None,
    ) -> MarkdownDocument:
        """Convert markdown text to a MarkdownDocument.

        Args:
            markdown_text: Raw markdown of one journal entry
            metadata: Optional metadata to carry along (e.g. source path)

        Returns:
            MarkdownDocument with the segmented logical lines
        """
        return MarkdownDocument(
            lines=self.segmenter.segment(markdown_text),
            source=markdown_text,
            metadata=metadata or {},
        )

    def spans(self, line: LogicalLine) -> list[InlineSpan]:
        """Get inline spans for a line, [] for non-prose block types."""
        return inline_spans(line, self.scanner)

    def to_plain_text(self, doc: MarkdownDocument) -> str:
        """Convert a MarkdownDocument to plain text without markers."""
        lines: list[str] = []

        for line in doc.lines:
            block_type = line.block_type
            if block_type.has_inline_content:
                lines.append(self.scanner.plain_text(line.content))
            elif block_type is BlockType.TABLE:
                table = parse_table(line.content)
                lines.extend("\t".join(row) for row in table.rows)
            elif block_type in (BlockType.HORIZONTAL_RULE, BlockType.TABLE_SEPARATOR):
                lines.append("")
            else:
                lines.append(line.content)

        return "\n".join(lines)

    def to_markdown(self, doc: MarkdownDocument) -> str:
        """Convert a MarkdownDocument back to markdown.

        Numbered items are renumbered per run of consecutive items, since
        the original numbers are not kept.
        """
        lines: list[str] = []
        number = 0

        for line in doc.lines:
            block_type = line.block_type
            number = number + 1 if block_type is BlockType.NUMBERED else 0

            if block_type in self.LINE_PREFIXES:
                lines.append(self.LINE_PREFIXES[block_type] + line.content)
            elif block_type is BlockType.NUMBERED:
                lines.append(f"{number}. {line.content}")
            elif block_type is BlockType.STRIKETHROUGH_LINE:
                lines.append(f"~~{line.content}~~")
            elif block_type is BlockType.INLINE_CODE_LINE:
                lines.append(f"`{line.content}`")
            elif block_type is BlockType.CODE_BLOCK:
                lines.append(FENCE_MARKER + line.info)
                if line.content:
                    lines.append(line.content)
                lines.append(FENCE_MARKER)
            else:
                lines.append(line.content)

        return "\n".join(lines)
