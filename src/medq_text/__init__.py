"""medq-text: lightweight formatting engine for AI-generated study content."""

from medq_text.formatting import Document, MarkdownParser, inline_spans, segment, tokenize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Document",
    "MarkdownParser",
    "segment",
    "tokenize",
    "inline_spans",
]
