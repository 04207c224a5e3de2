"""Inline tokenizer: split one line of text into styled spans."""

import re

from medq_text.formatting.ir import (
    Block,
    Bold,
    InlineCode,
    Italic,
    PlainText,
    Span,
    has_inline_text,
)

# Span content never crosses a line terminator.
SPAN_TEXT = r"[^\n\r\u2028\u2029]+?"

# Alternatives are tried in this order at each position, so "**" is
# claimed by bold before italic can see a single "*".
INLINE_PATTERN = re.compile(
    rf"\*\*(?P<bold>{SPAN_TEXT})\*\*"
    rf"|\*(?P<italic>{SPAN_TEXT})\*"
    rf"|`(?P<code>{SPAN_TEXT})`"
)

_SPAN_TYPES: dict[str, type] = {
    "bold": Bold,
    "italic": Italic,
    "code": InlineCode,
}


def tokenize(line: str) -> tuple[Span, ...]:
    """Tokenize a line into PlainText, Bold, Italic and InlineCode spans.

    Emphasis is flat: the content of a match is never scanned again.
    Unmatched markers stay in the surrounding PlainText.

    Args:
        line: A single line of display text

    Returns:
        Spans whose texts, concatenated, equal ``line`` minus delimiters.
        A line without markup yields a single PlainText span.
    """
    spans: list[Span] = []
    last_end = 0

    for match in INLINE_PATTERN.finditer(line):
        if match.start() > last_end:
            spans.append(PlainText(line[last_end : match.start()]))

        kind = match.lastgroup
        spans.append(_SPAN_TYPES[kind](match.group(kind)))
        last_end = match.end()

    if last_end < len(line):
        spans.append(PlainText(line[last_end:]))

    if not spans:
        return (PlainText(line),)
    return tuple(spans)


def inline_spans(block: Block) -> tuple[Span, ...]:
    """Tokenize a block's text; code blocks and dividers have no spans."""
    if not has_inline_text(block):
        return ()
    return tokenize(block.text)
