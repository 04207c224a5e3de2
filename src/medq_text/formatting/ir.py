"""Intermediate Representation for formatted study content.

This module defines the data structures that sit between raw AI output
and whatever presentation layer draws it. A Document is an ordered tuple
of Blocks; the displayable text of a Block is split into Spans by the
inline tokenizer.

All types are frozen: a parse always yields fresh values and nothing
downstream can mutate them.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import ClassVar, Iterator, Literal, Union


class TextStyle(Flag):
    """Inline styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()


# =============================================================================
# Spans
# =============================================================================

@dataclass(frozen=True)
class _SpanBase:
    """Shared behaviour of inline spans.

    Attributes:
        text: The span content with delimiters stripped
    """

    text: str

    delimiter: ClassVar[str] = ""
    style: ClassVar[TextStyle] = TextStyle.NONE

    @property
    def markup(self) -> str:
        """The span as written in the source, delimiters included."""
        return f"{self.delimiter}{self.text}{self.delimiter}"

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class PlainText(_SpanBase):
    """Unstyled text, copied verbatim from the source line."""


@dataclass(frozen=True)
class Bold(_SpanBase):
    """Text wrapped in ``**``."""

    delimiter: ClassVar[str] = "**"
    style: ClassVar[TextStyle] = TextStyle.BOLD


@dataclass(frozen=True)
class Italic(_SpanBase):
    """Text wrapped in ``*``."""

    delimiter: ClassVar[str] = "*"
    style: ClassVar[TextStyle] = TextStyle.ITALIC


@dataclass(frozen=True)
class InlineCode(_SpanBase):
    """Text wrapped in backticks."""

    delimiter: ClassVar[str] = "`"
    style: ClassVar[TextStyle] = TextStyle.CODE


Span = Union[PlainText, Bold, Italic, InlineCode]


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Paragraph:
    """A line of running text. Empty text renders as vertical spacing."""

    text: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class Heading:
    """A ``#``, ``##`` or ``###`` heading.

    Attributes:
        level: Number of leading ``#`` characters (1-3)
        text: Heading content after the marker
    """

    level: Literal[1, 2, 3]
    text: str


@dataclass(frozen=True)
class BulletItem:
    """An unordered list item."""

    text: str


@dataclass(frozen=True)
class NumberedItem:
    """An ordered list item.

    Attributes:
        ordinal: The digits exactly as written; never renumbered
        text: Item content after the marker
    """

    ordinal: str
    text: str


@dataclass(frozen=True)
class Divider:
    """A horizontal rule."""


@dataclass(frozen=True)
class CodeBlock:
    """Verbatim fenced code.

    Attributes:
        text: Lines between the fences, trailing whitespace removed
        language: Info string after the opening fence, if any
    """

    text: str
    language: str = ""


Block = Union[Paragraph, Heading, BulletItem, NumberedItem, Divider, CodeBlock]
InlineBlock = Union[Paragraph, Heading, BulletItem, NumberedItem]

INLINE_BLOCK_TYPES = (Paragraph, Heading, BulletItem, NumberedItem)


def has_inline_text(block: Block) -> bool:
    """Check whether a block's text goes through the inline tokenizer."""
    return isinstance(block, INLINE_BLOCK_TYPES)


# =============================================================================
# Document
# =============================================================================

@dataclass(frozen=True)
class Document:
    """Parsed document ready for rendering.

    Attributes:
        blocks: Blocks in source line order
    """

    blocks: tuple[Block, ...] = ()

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def plain_text(self) -> str:
        """Get all displayable text without markup, one block per line."""
        # Imported here: the tokenizer depends on this module.
        from medq_text.formatting.tokenizer import inline_spans

        lines: list[str] = []
        for block in self.blocks:
            if isinstance(block, CodeBlock):
                lines.append(block.text)
            elif isinstance(block, Divider):
                lines.append("")
            else:
                lines.append("".join(span.text for span in inline_spans(block)))
        return "\n".join(lines)
