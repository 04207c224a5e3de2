"""Markdown-like parser for converting AI output to IR."""

from medq_text.formatting.ir import (
    Block,
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    NumberedItem,
    Span,
)
from medq_text.formatting.segmenter import FENCE, segment
from medq_text.formatting.tokenizer import inline_spans


class MarkdownParser:
    """Parse the fixed study-content grammar into structured IR.

    Supported: ``#``-``###`` headings, ``-``/``•``/``*`` bullets,
    ``1.``/``1)`` numbered items, ``---`` dividers, fenced code,
    and flat ``**bold**``, ``*italic*`` and ``code`` spans.
    """

    def parse(self, markdown_text: str) -> Document:
        """Convert text to a Document.

        Args:
            markdown_text: The markdown-formatted text from the AI

        Returns:
            Document with parsed blocks
        """
        return segment(markdown_text)

    def spans(self, block: Block) -> tuple[Span, ...]:
        """Get the inline spans of a block (empty for code and dividers)."""
        return inline_spans(block)

    def to_plain_text(self, doc: Document) -> str:
        """Convert a Document back to plain text."""
        return doc.plain_text

    def to_markdown(self, doc: Document) -> str:
        """Convert a Document back to normalized markdown.

        Bullets are written with ``-`` and numbered items with ``.``;
        parsing the result gives back an equal Document. The one
        exception is a Document without blocks (e.g. from a lone
        unterminated fence): it renders as "", which parses to a single
        blank Paragraph.
        """
        return "\n".join(self._block_to_markdown(block) for block in doc)

    def _block_to_markdown(self, block: Block) -> str:
        if isinstance(block, CodeBlock):
            lines = [f"{FENCE}{block.language}"]
            if block.text:
                lines.append(block.text)
            lines.append(FENCE)
            return "\n".join(lines)
        if isinstance(block, Divider):
            return "---"

        text = "".join(span.markup for span in inline_spans(block))
        if isinstance(block, Heading):
            return f"{'#' * block.level} {text}"
        if isinstance(block, BulletItem):
            return f"- {text}"
        if isinstance(block, NumberedItem):
            return f"{block.ordinal}. {text}"
        return text
