"""Block segmentation: the stateful walk over a whole document."""

import logging
import re
from typing import Optional

from routines_md.formatting.classifier import LineClassifier
from routines_md.formatting.ir import BlockType, LogicalLine

logger = logging.getLogger(__name__)


FENCE_MARKER = "```"

# The boundaries str.splitlines() knows, but a trailing newline still yields
# a final empty line
NEWLINE_PATTERN = re.compile(r"\r\n|[\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029]")


def split_lines(document: str) -> list[str]:
    """Split text on any newline without dropping a trailing empty line."""
    return NEWLINE_PATTERN.split(document)


class BlockSegmenter:
    """Walk all lines of a document and emit classified logical lines.

    Two constructs span several physical lines:
    - fenced code blocks, captured verbatim up to the closing fence
      (or the end of the document when the fence is never closed)
    - table runs, buffered row by row and emitted as one TABLE line

    A fence always wins over a table run; the pending run is flushed first
    so output order follows the source.
    """

    def __init__(self, classifier: Optional[LineClassifier] = None) -> None:
        """Initialize the segmenter.

        Args:
            classifier: Line classifier to use (default: a new LineClassifier)
        """
        self.classifier = classifier or LineClassifier()

    def segment(self, document: str) -> list[LogicalLine]:
        """Convert a document into logical lines.

        Args:
            document: Raw markdown text

        Returns:
            Logical lines in document order; never empty
        """
        lines = split_lines(document)
        result: list[LogicalLine] = []
        table_rows: list[str] = []
        i = 0

        while i < len(lines):
            line = lines[i]

            if self._is_fence(line):
                self._flush_table(table_rows, result)
                i = self._capture_code_block(lines, i, result)
            else:
                parsed = self.classifier.classify(line)

                if parsed.block_type.is_table_row:
                    table_rows.append(line)
                else:
                    self._flush_table(table_rows, result)
                    result.append(parsed)

            i += 1

        self._flush_table(table_rows, result)
        logger.debug("segmented %d physical lines into %d logical lines",
                     len(lines), len(result))
        return result

    def _is_fence(self, line: str) -> bool:
        return line.strip().startswith(FENCE_MARKER)

    def _capture_code_block(
        self, lines: list[str], start: int, result: list[LogicalLine]
    ) -> int:
        """Capture a fenced block opening at lines[start].

        Returns:
            Index of the closing fence, or len(lines) if it never closes
        """
        info = lines[start].strip()[len(FENCE_MARKER):].strip()
        body: list[str] = []
        i = start + 1

        while i < len(lines):
            if self._is_fence(lines[i]):
                break
            body.append(lines[i])
            i += 1
        else:
            logger.debug("code fence opened on line %d is never closed", start + 1)

        result.append(LogicalLine(BlockType.CODE_BLOCK, "\n".join(body), info))
        return i

    def _flush_table(self, rows: list[str], result: list[LogicalLine]) -> None:
        """Emit buffered table rows as a single TABLE line and clear the buffer."""
        if rows:
            result.append(LogicalLine(BlockType.TABLE, "\n".join(rows)))
            rows.clear()


_default_segmenter = BlockSegmenter()


def segment(document: str) -> list[LogicalLine]:
    """Segment a document with a shared segmenter instance."""
    return _default_segmenter.segment(document)
