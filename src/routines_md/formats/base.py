"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from routines_md.formatting.ir import MarkdownDocument


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Every handler reads markdown source text and writes a parsed
    MarkdownDocument out in its own format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.json',))."""
        ...

    def read(self, path: Path) -> str:
        """Read the raw markdown of a journal entry.

        Args:
            path: Path to the source file

        Returns:
            The file content decoded as UTF-8
        """
        return path.read_text(encoding="utf-8")

    @abstractmethod
    def write(self, document: MarkdownDocument, path: Path) -> None:
        """Write a parsed document to file.

        Args:
            document: The parsed MarkdownDocument
            path: Path to write the output document
        """
        ...
