"""Intermediate Representation for parsed journal markdown.

This module defines the value records produced by the block segmenter and
the inline scanner. Renderers and format handlers consume these records
without ever touching the raw markdown again.
"""

from dataclasses import dataclass, field
from enum import Enum


# =============================================================================
# Tags
# =============================================================================

class BlockType(str, Enum):
    """Block-level classification of a logical line."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    BULLET = "bullet"
    NUMBERED = "numbered"
    STRIKETHROUGH_LINE = "strikethrough_line"
    CODE_BLOCK = "code_block"
    INLINE_CODE_LINE = "inline_code_line"
    LINK_LINE = "link_line"
    QUOTE = "quote"
    TABLE = "table"
    TABLE_SEPARATOR = "table_separator"
    HORIZONTAL_RULE = "horizontal_rule"
    TEXT = "text"
    EMPTY = "empty"

    @property
    def is_heading(self) -> bool:
        """Check if this is one of the heading levels."""
        return self in (BlockType.H1, BlockType.H2, BlockType.H3)

    @property
    def is_table_row(self) -> bool:
        """Check if lines of this type are buffered into a table run."""
        return self in (BlockType.TABLE, BlockType.TABLE_SEPARATOR)

    @property
    def has_inline_content(self) -> bool:
        """Check if the content should go through the inline scanner."""
        return self in _INLINE_BLOCK_TYPES


_INLINE_BLOCK_TYPES = frozenset({
    BlockType.H1,
    BlockType.H2,
    BlockType.H3,
    BlockType.BULLET,
    BlockType.NUMBERED,
    BlockType.STRIKETHROUGH_LINE,
    BlockType.LINK_LINE,
    BlockType.QUOTE,
    BlockType.TEXT,
})


class InlineType(str, Enum):
    """Formatting intent of an inline span."""

    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    LINK = "link"


LINK_DELIMITER = "|"


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class LogicalLine:
    """One classified unit of block structure.

    Attributes:
        block_type: The block classification
        content: Payload; its meaning depends on block_type (marker-stripped
            text for headings and lists, the joined body for code blocks,
            the joined raw rows for tables)
        info: Fence info string of a code block (e.g. "python"), else ""
    """

    block_type: BlockType
    content: str = ""
    info: str = ""

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class InlineSpan:
    """A run of characters inside a textual line with a single style.

    Attributes:
        inline_type: The formatting intent
        content: The text without markers; "<text>|<url>" for links
    """

    inline_type: InlineType
    content: str = ""

    @classmethod
    def link(cls, text: str, url: str) -> "InlineSpan":
        """Build a link span using the pipe-delimited encoding."""
        return cls(InlineType.LINK, f"{text}{LINK_DELIMITER}{url}")

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class LinkTarget:
    """Decoded form of a link span.

    Attributes:
        text: Display text
        url: URL exactly as written
        href: URL with a scheme, ready to open
    """

    text: str
    url: str
    href: str


@dataclass(frozen=True)
class TableModel:
    """Decoded form of a table logical line.

    Attributes:
        rows: Cell texts per row, separator rows removed
        has_header: Whether a separator row was present
    """

    rows: tuple[tuple[str, ...], ...] = ()
    has_header: bool = False

    @property
    def header(self) -> tuple[str, ...]:
        """Get the header row, or an empty tuple if there is none."""
        if self.has_header and self.rows:
            return self.rows[0]
        return ()

    @property
    def body(self) -> tuple[tuple[str, ...], ...]:
        """Get the rows below the header."""
        if self.has_header:
            return self.rows[1:]
        return self.rows

    @property
    def column_count(self) -> int:
        """Get the widest row's cell count."""
        return max((len(row) for row in self.rows), default=0)


@dataclass
class MarkdownDocument:
    """Complete parse result for one markdown source.

    Attributes:
        lines: Logical lines in document order
        source: The raw markdown the lines were parsed from
        metadata: Free-form metadata (e.g. the source path)
    """

    lines: list[LogicalLine] = field(default_factory=list)
    source: str = ""
    metadata: dict = field(default_factory=dict)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def of_type(self, *block_types: BlockType) -> list[LogicalLine]:
        """Get the lines matching any of the given block types."""
        return [line for line in self.lines if line.block_type in block_types]

    @property
    def headings(self) -> list[LogicalLine]:
        """Get all heading lines in order."""
        return [line for line in self.lines if line.block_type.is_heading]

    @property
    def title(self) -> str:
        """Get the content of the first heading, or "" if there is none."""
        headings = self.headings
        return headings[0].content if headings else ""
