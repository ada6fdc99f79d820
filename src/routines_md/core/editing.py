"""Markdown editing commands for journal entries.

Each command takes an explicit EditContext (the entry text plus the current
selection) and returns a new one. Nothing is kept between calls, so the
caller decides which editor the command applies to.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Markup(str, Enum):
    """Formatting actions offered by the editor toolbar."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    BULLET = "bullet"
    NUMBERED = "numbered"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    LINK = "link"
    QUOTE = "quote"
    HORIZONTAL_RULE = "horizontal_rule"

    @property
    def prefix(self) -> str:
        """Get the marker inserted before the selection."""
        return MARKERS[self][0]

    @property
    def suffix(self) -> str:
        """Get the marker inserted after the selection."""
        return MARKERS[self][1]


MARKERS: dict[Markup, tuple[str, str]] = {
    Markup.H1: ("# ", ""),
    Markup.H2: ("## ", ""),
    Markup.H3: ("### ", ""),
    Markup.BOLD: ("**", "**"),
    Markup.ITALIC: ("*", "*"),
    Markup.STRIKETHROUGH: ("~~", "~~"),
    Markup.BULLET: ("- ", ""),
    Markup.NUMBERED: ("1. ", ""),
    Markup.INLINE_CODE: ("`", "`"),
    Markup.CODE_BLOCK: ("```\n", "\n```"),
    Markup.LINK: ("[", "](url)"),
    Markup.QUOTE: ("> ", ""),
    Markup.HORIZONTAL_RULE: ("---", ""),
}

TABLE_TEMPLATE = (
    "| Column 1 | Column 2 | Column 3 |\n"
    "|-----|-----|-----|\n"
    "| Cell 1 | Cell 2 | Cell 3 |\n"
    "| Cell 4 | Cell 5 | Cell 6 |"
)


@dataclass(frozen=True)
class Selection:
    """A selected range in the entry text; length 0 is a bare cursor."""

    location: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        return self.location + self.length


@dataclass(frozen=True)
class EditContext:
    """The entry being edited and its selection.

    Attributes:
        text: Current markdown of the entry
        selection: Selected range or cursor position
    """

    text: str = ""
    selection: Selection = Selection()


def insert_markup(text: str, prefix: str, suffix: str = "") -> str:
    """Append markers on a new line at the end of text.

    An empty entry gets the markers directly; otherwise a newline is added
    first unless the text already ends with one.
    """
    if not text:
        return prefix + suffix
    newline = "" if text.endswith("\n") else "\n"
    return text + newline + prefix + suffix


def apply_markup(ctx: EditContext, markup: Markup) -> EditContext:
    """Apply a toolbar action to the selection of an edit context.

    - selection inside the text: wrap it, the selection grows to cover
      the markers
    - cursor inside the text: insert both markers at the cursor and put
      the cursor between them
    - cursor at or past the end: append the markers on a new line

    Horizontal rules are always appended.
    """
    text = ctx.text
    sel = ctx.selection
    prefix, suffix = markup.prefix, markup.suffix

    if markup is Markup.HORIZONTAL_RULE or sel.location >= len(text):
        new_text = insert_markup(text, prefix, suffix)
        cursor = len(new_text) - len(suffix)
        return EditContext(new_text, Selection(cursor))

    if sel.length > 0:
        end = min(sel.end, len(text))
        selected = text[sel.location:end]
        new_text = text[:sel.location] + prefix + selected + suffix + text[end:]
        grown = Selection(sel.location, len(selected) + len(prefix) + len(suffix))
        return EditContext(new_text, grown)

    new_text = text[:sel.location] + prefix + suffix + text[sel.location:]
    return replace(ctx, text=new_text, selection=Selection(sel.location + len(prefix)))


def insert_table(ctx: EditContext, template: str = TABLE_TEMPLATE) -> EditContext:
    """Append a table template to the entry on its own line."""
    text = ctx.text
    newline = "" if not text or text.endswith("\n") else "\n"
    new_text = text + newline + template
    return EditContext(new_text, Selection(len(new_text)))
