"""Normalized markdown handler."""

from medq_text.formats.base import FormatHandler
from medq_text.formatting.ir import Document
from medq_text.formatting.parser import MarkdownParser


class MarkdownHandler(FormatHandler):
    """Handler for markdown (.md) output.

    Writes the document back in the same grammar it was parsed from,
    with list markers normalized.
    """

    def __init__(self) -> None:
        self.parser = MarkdownParser()

    @property
    def name(self) -> str:
        return "markdown"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def render(self, document: Document) -> str:
        return self.parser.to_markdown(document)
