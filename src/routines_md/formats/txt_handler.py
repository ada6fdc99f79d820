"""Plain text file handler."""

from pathlib import Path

from routines_md.formats.base import FormatHandler
from routines_md.formatting.ir import MarkdownDocument
from routines_md.formatting.parser import MarkdownParser


class TXTHandler(FormatHandler):
    """Handler for plain text (.txt) files.

    Output drops every markdown marker:
    - headings, list and quote markers are removed
    - inline styles keep only their text, links keep their label
    - table rows become tab-separated cells
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def write(self, document: MarkdownDocument, path: Path) -> None:
        """Write the document as plain text."""
        content = MarkdownParser().to_plain_text(document)
        path.write_text(content, encoding="utf-8")
