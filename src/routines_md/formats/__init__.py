"""Document format handlers for routines-md."""

from routines_md.formats.base import FormatHandler
from routines_md.formats.txt_handler import TXTHandler
from routines_md.formats.json_handler import JSONHandler
from routines_md.formats.markdown_handler import MarkdownHandler

__all__ = [
    "FormatHandler",
    "TXTHandler",
    "JSONHandler",
    "MarkdownHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".json": JSONHandler,
    ".txt": TXTHandler,
    ".md": MarkdownHandler,
    ".markdown": MarkdownHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())

# Extensions accepted as markdown input
SOURCE_EXTENSIONS = (".md", ".markdown", ".txt")


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
