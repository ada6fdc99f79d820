"""routines-md: markdown parsing and rendering for journal entries."""

from routines_md.formatting import (
    BlockType,
    InlineType,
    LogicalLine,
    InlineSpan,
    MarkdownDocument,
    MarkdownParser,
    classify,
    scan,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BlockType",
    "InlineType",
    "LogicalLine",
    "InlineSpan",
    "MarkdownDocument",
    "MarkdownParser",
    "classify",
    "scan",
    "segment",
]
