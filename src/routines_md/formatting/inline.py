"""Inline span scanner.

Spans are extracted in five passes with a fixed order: bold, italic,
inline code, link, strikethrough. Each pass consumes matches from the
remainder left by the previous pass; text emitted before a match is never
scanned again by a later pass. Pass order, not source position, decides
which of two overlapping candidates wins.
"""

import logging
import re

from routines_md.formatting.ir import LINK_DELIMITER, InlineSpan, InlineType

logger = logging.getLogger(__name__)


class InlineScanner:
    """Tokenize one line of text into typed inline spans."""

    BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
    ITALIC_PATTERN = re.compile(r"\*([^*\n]+)\*")
    CODE_PATTERN = re.compile(r"`(.*?)`")
    LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
    STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")

    # Order matters: every pass only sees what the previous passes left over
    PASSES = (
        (BOLD_PATTERN, InlineType.BOLD),
        (ITALIC_PATTERN, InlineType.ITALIC),
        (CODE_PATTERN, InlineType.INLINE_CODE),
        (LINK_PATTERN, InlineType.LINK),
        (STRIKETHROUGH_PATTERN, InlineType.STRIKETHROUGH),
    )

    def scan(self, text: str) -> list[InlineSpan]:
        """Convert text into an ordered list of inline spans.

        Args:
            text: A single line of markdown text

        Returns:
            The spans in emission order; never empty
        """
        logger.debug("scanning inline text %r", text)
        spans: list[InlineSpan] = []
        remainder = text

        for pattern, inline_type in self.PASSES:
            remainder = self._run_pass(pattern, inline_type, remainder, spans)

        if remainder:
            spans.append(InlineSpan(InlineType.TEXT, remainder))

        if not spans:
            return [InlineSpan(InlineType.TEXT, text)]

        for span in spans:
            logger.debug("  %s: %r", span.inline_type.value, span.content)
        return spans

    def _run_pass(
        self,
        pattern: re.Pattern,
        inline_type: InlineType,
        remainder: str,
        spans: list[InlineSpan],
    ) -> str:
        """Extract every match of one pattern, returning the unscanned tail."""
        while True:
            match = pattern.search(remainder)
            if match is None:
                return remainder

            before = remainder[:match.start()]
            if before:
                spans.append(InlineSpan(InlineType.TEXT, before))

            if inline_type is InlineType.LINK:
                spans.append(InlineSpan.link(match.group(1), match.group(2)))
            else:
                spans.append(InlineSpan(inline_type, match.group(1)))

            remainder = remainder[match.end():]

    def plain_text(self, text: str) -> str:
        """Get the text with inline markers removed.

        Links keep their label. A link whose content does not split into
        exactly two fields keeps its raw content.
        """
        parts: list[str] = []
        for span in self.scan(text):
            if span.inline_type is InlineType.LINK:
                fields = span.content.split(LINK_DELIMITER)
                parts.append(fields[0] if len(fields) == 2 else span.content)
            else:
                parts.append(span.content)
        return "".join(parts)


_default_scanner = InlineScanner()


def scan(text: str) -> list[InlineSpan]:
    """Scan text with a shared scanner instance."""
    return _default_scanner.scan(text)
