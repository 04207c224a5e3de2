"""Parsing of AI-generated study text into blocks and inline spans."""

from medq_text.formatting.ir import (
    Block,
    Bold,
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    InlineBlock,
    InlineCode,
    Italic,
    NumberedItem,
    Paragraph,
    PlainText,
    Span,
    TextStyle,
)
from medq_text.formatting.parser import MarkdownParser
from medq_text.formatting.segmenter import segment
from medq_text.formatting.tokenizer import inline_spans, tokenize

__all__ = [
    "Block",
    "Bold",
    "BulletItem",
    "CodeBlock",
    "Divider",
    "Document",
    "Heading",
    "InlineBlock",
    "InlineCode",
    "Italic",
    "NumberedItem",
    "Paragraph",
    "PlainText",
    "Span",
    "TextStyle",
    "MarkdownParser",
    "segment",
    "tokenize",
    "inline_spans",
]
