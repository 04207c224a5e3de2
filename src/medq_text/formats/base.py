"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from medq_text.formatting.ir import Document


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Each handler renders a parsed Document into one output
    representation and can write that rendering to a file.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format name used on the command line (e.g., 'json')."""
        ...

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.json',))."""
        ...

    @abstractmethod
    def render(self, document: Document) -> str:
        """Render a document to a string.

        Args:
            document: The parsed Document

        Returns:
            The document in this handler's format
        """
        ...

    def write(self, document: Document, path: Path) -> None:
        """Write a rendered document to file.

        Args:
            document: The parsed Document
            path: Path to write the output to
        """
        path.write_text(self.render(document), encoding="utf-8")
