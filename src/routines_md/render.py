"""Terminal rendering of parsed journal markdown with rich."""

from typing import Iterator, Optional

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from routines_md.config import get_settings
from routines_md.formatting.inline import InlineScanner
from routines_md.formatting.ir import (
    BlockType,
    InlineSpan,
    InlineType,
    LogicalLine,
    MarkdownDocument,
)
from routines_md.formatting.projection import decode_link, parse_table


BLOCK_STYLES: dict[BlockType, str] = {
    BlockType.H1: "bold underline",
    BlockType.H2: "bold",
    BlockType.H3: "bold dim",
    BlockType.STRIKETHROUGH_LINE: "strike",
    BlockType.QUOTE: "dim italic",
}

INLINE_STYLES: dict[InlineType, str] = {
    InlineType.TEXT: "",
    InlineType.BOLD: "bold",
    InlineType.ITALIC: "italic",
    InlineType.STRIKETHROUGH: "strike",
    InlineType.INLINE_CODE: "bold cyan on grey15",
    InlineType.LINK: "underline blue",
}

QUOTE_GUTTER = "│ "


class TerminalRenderer:
    """Map logical lines and inline spans to rich renderables."""

    def __init__(
        self,
        scanner: Optional[InlineScanner] = None,
        link_scheme: Optional[str] = None,
        bullet_glyph: Optional[str] = None,
        code_block_label: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.scanner = scanner or InlineScanner()
        self.link_scheme = link_scheme or settings.link_scheme
        self.bullet_glyph = bullet_glyph or settings.bullet_glyph
        self.code_block_label = code_block_label or settings.code_block_label

    def render(self, doc: MarkdownDocument) -> Iterator[RenderableType]:
        """Yield one renderable per visible logical line."""
        number = 0
        for line in doc.lines:
            number = number + 1 if line.block_type is BlockType.NUMBERED else 0
            renderable = self.render_line(line, number)
            if renderable is not None:
                yield renderable

    def print(self, doc: MarkdownDocument, console: Console) -> None:
        """Render a document straight to a console."""
        for renderable in self.render(doc):
            console.print(renderable)

    def render_line(self, line: LogicalLine, number: int = 1) -> Optional[RenderableType]:
        """Render a single logical line.

        Args:
            line: The line to render
            number: Position within a run of numbered items

        Returns:
            A renderable, or None for lines with no visual (table separators)
        """
        block_type = line.block_type

        if block_type.is_heading or block_type is BlockType.STRIKETHROUGH_LINE:
            return self.inline_text(line.content, BLOCK_STYLES[block_type])
        if block_type is BlockType.BULLET:
            return self._prefixed(f"{self.bullet_glyph} ", line.content)
        if block_type is BlockType.NUMBERED:
            return self._prefixed(f"{number}. ", line.content)
        if block_type is BlockType.QUOTE:
            return self._prefixed(QUOTE_GUTTER, line.content, BLOCK_STYLES[block_type])
        if block_type is BlockType.CODE_BLOCK:
            return self._code_block(line)
        if block_type is BlockType.INLINE_CODE_LINE:
            return Text(line.content, style=INLINE_STYLES[InlineType.INLINE_CODE])
        if block_type is BlockType.TABLE:
            return self._table(line.content)
        if block_type is BlockType.TABLE_SEPARATOR:
            return None
        if block_type is BlockType.HORIZONTAL_RULE:
            return Rule()
        if block_type is BlockType.EMPTY:
            return Text("")
        if block_type in (BlockType.TEXT, BlockType.LINK_LINE):
            return self.inline_text(line.content)

        # Unknown tags still show their content
        return Text(line.content)

    def inline_text(self, content: str, base_style: str = "") -> Text:
        """Build a styled Text from the inline spans of content."""
        text = Text(style=base_style)
        for span in self.scanner.scan(content):
            text.append_text(self.inline_span(span))
        return text

    def inline_span(self, span: InlineSpan) -> Text:
        """Build a styled Text for one inline span."""
        if span.inline_type is InlineType.LINK:
            target = decode_link(span.content, self.link_scheme)
            if target is None:
                return Text(span.content, style=INLINE_STYLES[InlineType.LINK])
            style = Style.parse(INLINE_STYLES[InlineType.LINK]) + Style(link=target.href)
            return Text(target.text, style=style)
        return Text(span.content, style=INLINE_STYLES.get(span.inline_type, ""))

    def _prefixed(self, prefix: str, content: str, style: str = "") -> Text:
        text = Text()
        text.append(prefix, style="dim")
        text.append_text(self.inline_text(content, style))
        return text

    def _code_block(self, line: LogicalLine) -> Panel:
        body = Syntax(line.content, line.info or "text", word_wrap=False)
        return Panel(body, title=self.code_block_label, title_align="left")

    def _table(self, content: str) -> Table:
        model = parse_table(content)
        table = Table(show_header=model.has_header, show_lines=True)

        header = model.header
        for index in range(model.column_count):
            title = self.inline_text(header[index]) if index < len(header) else ""
            table.add_column(title)

        for row in model.body:
            table.add_row(*(self.inline_text(cell) for cell in row))

        return table
