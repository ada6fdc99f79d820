"""Data-level render projection shared by every renderer.

Renderers turn logical lines into visuals; the decoding they all need
(splitting table rows into cells, unpacking link spans) lives here so the
terminal renderer and the export handlers agree on it.
"""

from typing import Optional

from routines_md.formatting.inline import InlineScanner
from routines_md.formatting.ir import (
    LINK_DELIMITER,
    InlineSpan,
    LinkTarget,
    LogicalLine,
    TableModel,
)

WEB_SCHEMES = ("http://", "https://")


def decode_link(content: str, default_scheme: str = "https://") -> Optional[LinkTarget]:
    """Unpack the "<text>|<url>" content of a link span.

    Args:
        content: Link span content
        default_scheme: Prefix for URLs written without http:// or https://

    Returns:
        The LinkTarget, or None when the content does not split into exactly
        two fields (a "|" in the display text). Callers render the raw
        content as plain link-styled text in that case.
    """
    fields = content.split(LINK_DELIMITER)
    if len(fields) != 2:
        return None

    text, url = fields
    href = url if url.startswith(WEB_SCHEMES) else default_scheme + url
    return LinkTarget(text=text, url=url, href=href)


def split_cells(row: str) -> tuple[str, ...]:
    """Split a "| a | b |" row into stripped, non-blank cells."""
    return tuple(cell.strip() for cell in row.split("|") if cell.strip())


def parse_table(content: str) -> TableModel:
    """Decode the joined rows of a TABLE logical line.

    Rows containing "---" are separators: they are dropped and mark the
    first remaining row as a header.
    """
    rows: list[tuple[str, ...]] = []
    has_header = False

    for row in content.splitlines():
        trimmed = row.strip()
        if not trimmed:
            continue
        if "---" in trimmed:
            has_header = True
        else:
            rows.append(split_cells(trimmed))

    return TableModel(rows=tuple(rows), has_header=has_header)


def inline_spans(line: LogicalLine, scanner: Optional[InlineScanner] = None) -> list[InlineSpan]:
    """Get inline spans for a line whose content is prose, else []."""
    if not line.block_type.has_inline_content:
        return []
    return (scanner or InlineScanner()).scan(line.content)
