"""Single-line block classification."""

import re

from routines_md.formatting.ir import BlockType, LogicalLine


class LineClassifier:
    """Assign a block type and content payload to one line.

    The classifier has no memory of earlier lines; fenced code blocks and
    table runs are handled by the block segmenter.

    Checks run in a fixed order and the first match wins:
    headings, bullets, numbered items, the inline-format short-circuit,
    whole-line strikethrough, whole-line code, table rows, horizontal
    rules, quotes, link lines, empty lines, plain text.
    """

    HEADING_PREFIXES = (
        ("# ", BlockType.H1),
        ("## ", BlockType.H2),
        ("### ", BlockType.H3),
    )
    BULLET_PREFIX = "- "
    QUOTE_PREFIX = "> "
    NUMBERED_PATTERN = re.compile(r"^\d+\.\s")
    RULE_PATTERN = re.compile(r"^-{3,}$")

    # Any of these sends the line straight to TEXT, ahead of the
    # whole-line strikethrough, code and link checks
    INLINE_MARKERS = ("**", "*", "~~", "`")

    def classify(self, line: str) -> LogicalLine:
        """Classify a single line.

        Args:
            line: One physical line, surrounding whitespace allowed

        Returns:
            The LogicalLine for this line
        """
        trimmed = line.strip()

        for prefix, block_type in self.HEADING_PREFIXES:
            if trimmed.startswith(prefix):
                return LogicalLine(block_type, trimmed[len(prefix):])

        if trimmed.startswith(self.BULLET_PREFIX):
            return LogicalLine(BlockType.BULLET, trimmed[len(self.BULLET_PREFIX):])

        numbered = self.NUMBERED_PATTERN.match(trimmed)
        if numbered:
            return LogicalLine(BlockType.NUMBERED, trimmed[numbered.end():])

        if any(marker in trimmed for marker in self.INLINE_MARKERS):
            return LogicalLine(BlockType.TEXT, trimmed)

        if self._is_strikethrough_line(trimmed):
            return LogicalLine(BlockType.STRIKETHROUGH_LINE, trimmed[2:-2])

        if trimmed.startswith("`") and trimmed.endswith("`"):
            return LogicalLine(BlockType.INLINE_CODE_LINE, trimmed[1:-1])

        if trimmed.startswith("|") and trimmed.endswith("|"):
            if "---" in trimmed:
                return LogicalLine(BlockType.TABLE_SEPARATOR, trimmed)
            return LogicalLine(BlockType.TABLE, trimmed)

        if self.RULE_PATTERN.match(trimmed):
            return LogicalLine(BlockType.HORIZONTAL_RULE, trimmed)

        if trimmed.startswith(self.QUOTE_PREFIX):
            return LogicalLine(BlockType.QUOTE, trimmed[len(self.QUOTE_PREFIX):])

        if "[" in trimmed and "](" in trimmed:
            return LogicalLine(BlockType.LINK_LINE, trimmed)

        if not trimmed:
            return LogicalLine(BlockType.EMPTY, "")

        return LogicalLine(BlockType.TEXT, trimmed)

    def _is_strikethrough_line(self, trimmed: str) -> bool:
        """Check for a line wrapped in a single pair of ~~ markers."""
        return (
            trimmed.startswith("~~")
            and trimmed.endswith("~~")
            and "~~" not in trimmed[2:-2]
        )


_default_classifier = LineClassifier()


def classify(line: str) -> LogicalLine:
    """Classify a line with a shared classifier instance."""
    return _default_classifier.classify(line)
