"""Formatting utilities for parsing and rendering journal markdown."""

from routines_md.formatting.ir import (
    BlockType,
    InlineType,
    LogicalLine,
    InlineSpan,
    LinkTarget,
    TableModel,
    MarkdownDocument,
)
from routines_md.formatting.inline import InlineScanner, scan
from routines_md.formatting.classifier import LineClassifier, classify
from routines_md.formatting.segmenter import BlockSegmenter, segment
from routines_md.formatting.projection import decode_link, parse_table
from routines_md.formatting.parser import MarkdownParser

__all__ = [
    "BlockType",
    "InlineType",
    "LogicalLine",
    "InlineSpan",
    "LinkTarget",
    "TableModel",
    "MarkdownDocument",
    "InlineScanner",
    "LineClassifier",
    "BlockSegmenter",
    "MarkdownParser",
    "scan",
    "classify",
    "segment",
    "decode_link",
    "parse_table",
]
