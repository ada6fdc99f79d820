"""File conversion orchestrator."""

import logging
from pathlib import Path
from typing import Optional

from routines_md.formats import SOURCE_EXTENSIONS, get_handler
from routines_md.formatting.ir import MarkdownDocument
from routines_md.formatting.parser import MarkdownParser

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error during document conversion."""

    pass


class DocumentConverter:
    """Orchestrates the conversion pipeline.

    Pipeline:
    1. Read the markdown source
    2. Segment it into logical lines
    3. Write the parsed document with the handler for the output extension
    """

    def __init__(self, parser: Optional[MarkdownParser] = None) -> None:
        """Initialize the converter.

        Args:
            parser: Parser to use (default: a new MarkdownParser)
        """
        self.parser = parser or MarkdownParser()

    def load(self, input_path: Path) -> MarkdownDocument:
        """Read and parse a markdown source file.

        Args:
            input_path: Path to a .md, .markdown or .txt file

        Returns:
            The parsed MarkdownDocument

        Raises:
            ConversionError: If the file is missing or not a markdown source
        """
        if not input_path.exists():
            raise ConversionError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SOURCE_EXTENSIONS:
            raise ConversionError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SOURCE_EXTENSIONS)}"
            )

        handler = get_handler(ext)()
        text = handler.read(input_path)

        # Empty entries are fine: they parse to a single EMPTY line
        return self.parser.parse(text, metadata={"source": str(input_path)})

    def convert_file(self, input_path: Path, output_path: Path) -> MarkdownDocument:
        """Convert a markdown file into the format of output_path.

        Args:
            input_path: Path to the markdown source
            output_path: Path for the output; its extension picks the format

        Returns:
            The MarkdownDocument that was written

        Raises:
            ConversionError: If reading or writing fails
        """
        document = self.load(input_path)

        try:
            output_handler = get_handler(output_path.suffix)()
        except ValueError as e:
            raise ConversionError(str(e)) from e

        output_handler.write(document, output_path)
        logger.info("wrote %d logical lines to %s", len(document), output_path)

        return document

    def convert_text(self, text: str) -> MarkdownDocument:
        """Parse markdown text without file I/O."""
        return self.parser.parse(text)
