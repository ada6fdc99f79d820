"""JSON export handler."""

import json
from pathlib import Path
from typing import Any, Optional

from routines_md.config import get_settings
from routines_md.formats.base import FormatHandler
from routines_md.formatting.inline import InlineScanner
from routines_md.formatting.ir import MarkdownDocument
from routines_md.formatting.projection import inline_spans


class JSONHandler(FormatHandler):
    """Handler for structured JSON (.json) exports.

    Each logical line is written with its type, content, fence info and,
    for prose lines, the inline spans.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = get_settings().json_indent if indent is None else indent
        self.scanner = InlineScanner()

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def to_dict(self, document: MarkdownDocument) -> dict[str, Any]:
        """Convert a document to JSON-ready data."""
        lines = []
        for line in document.lines:
            spans = inline_spans(line, self.scanner)
            lines.append({
                "type": line.block_type.value,
                "content": line.content,
                "info": line.info,
                "spans": [
                    {"type": span.inline_type.value, "content": span.content}
                    for span in spans
                ],
            })
        return {"lines": lines, "metadata": document.metadata}

    def write(self, document: MarkdownDocument, path: Path) -> None:
        """Write the document as JSON."""
        content = json.dumps(
            self.to_dict(document),
            indent=self.indent or None,
            ensure_ascii=False,
            default=str,
        )
        path.write_text(content, encoding="utf-8")
