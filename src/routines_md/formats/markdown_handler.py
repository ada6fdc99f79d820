"""Markdown file handler."""

from pathlib import Path

from routines_md.formats.base import FormatHandler
from routines_md.formatting.ir import MarkdownDocument
from routines_md.formatting.parser import MarkdownParser


class MarkdownHandler(FormatHandler):
    """Handler for markdown (.md, .markdown) files.

    Writing normalizes the source: surrounding whitespace is trimmed,
    numbered items are renumbered and code fences are rewritten.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def write(self, document: MarkdownDocument, path: Path) -> None:
        """Write the document back out as markdown."""
        content = MarkdownParser().to_markdown(document)
        path.write_text(content, encoding="utf-8")
