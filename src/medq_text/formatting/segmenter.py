"""Block segmenter: split raw text into typed blocks, one pass per call."""

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Optional

from medq_text.formatting.ir import (
    Block,
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    NumberedItem,
    Paragraph,
)

logger = logging.getLogger(__name__)

FENCE = "```"
BULLET_GLYPHS = "-•*"

# U+FEFF counts as whitespace, so a leading byte-order mark is trimmed.
EDGE_SPACE_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
FENCE_INFO_PATTERN = re.compile(r"`{3,}[\s\ufeff]*([^`\s\ufeff]*)")
DIVIDER_PATTERN = re.compile(r"-{3,}")
HEADING_PATTERN = re.compile(r"(#{1,3})[\s\ufeff]+(.+)")
BULLET_PATTERN = re.compile(rf"[{re.escape(BULLET_GLYPHS)}][\s\ufeff]+")
NUMBERED_PATTERN = re.compile(r"([0-9]+)[.)][\s\ufeff]+(.+)")


@dataclass
class _ScanState:
    """Accumulator threaded through a single segment() call."""

    blocks: list[Block] = field(default_factory=list)
    in_code: bool = False
    code_lines: list[str] = field(default_factory=list)
    language: str = ""

    def flush_code(self) -> None:
        text = "\n".join(self.code_lines).rstrip()
        self.blocks.append(CodeBlock(text=text, language=self.language))
        self.code_lines = []
        self.language = ""


def _match_divider(trimmed: str) -> Optional[Block]:
    if DIVIDER_PATTERN.fullmatch(trimmed):
        return Divider()
    return None


def _match_heading(trimmed: str) -> Optional[Block]:
    match = HEADING_PATTERN.fullmatch(trimmed)
    if match:
        return Heading(level=len(match.group(1)), text=match.group(2))
    return None


def _match_bullet(trimmed: str) -> Optional[Block]:
    match = BULLET_PATTERN.match(trimmed)
    if match:
        return BulletItem(text=trimmed[match.end() :])
    return None


def _match_numbered(trimmed: str) -> Optional[Block]:
    match = NUMBERED_PATTERN.fullmatch(trimmed)
    if match:
        return NumberedItem(ordinal=match.group(1), text=match.group(2))
    return None


# First match wins; anything left over is a paragraph.
LINE_RULES: tuple[Callable[[str], Optional[Block]], ...] = (
    _match_divider,
    _match_heading,
    _match_bullet,
    _match_numbered,
)


def classify_line(trimmed: str) -> Block:
    """Classify one stripped, non-code line into a block."""
    for rule in LINE_RULES:
        block = rule(trimmed)
        if block is not None:
            return block
    return Paragraph(text=trimmed)


def trim(line: str) -> str:
    """Strip leading and trailing whitespace, byte-order marks included."""
    return EDGE_SPACE_PATTERN.sub("", line)


def _scan_line(state: _ScanState, line: str) -> _ScanState:
    trimmed = trim(line)

    if trimmed.startswith(FENCE):
        if state.in_code:
            state.flush_code()
            state.in_code = False
        else:
            state.in_code = True
            state.language = FENCE_INFO_PATTERN.match(trimmed).group(1)
        return state

    if state.in_code:
        state.code_lines.append(line)
        return state

    state.blocks.append(classify_line(trimmed))
    return state


def segment(raw: str) -> Document:
    """Parse raw text into a Document.

    Never raises: malformed markup degrades to paragraphs and an
    unterminated fence keeps whatever it buffered.

    Args:
        raw: Text to parse, lines separated by ``\\n``

    Returns:
        A new Document with one block per line, except that fenced
        code collapses into a single CodeBlock.
    """
    state = reduce(_scan_line, raw.split("\n"), _ScanState())

    if state.in_code and state.code_lines:
        logger.debug(
            "Unterminated code fence, recovering %d buffered line(s)",
            len(state.code_lines),
        )
        state.flush_code()

    return Document(blocks=tuple(state.blocks))
