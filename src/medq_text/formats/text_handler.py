"""Plain text handler."""

from medq_text.formats.base import FormatHandler
from medq_text.formatting.ir import (
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    NumberedItem,
)
from medq_text.formatting.tokenizer import inline_spans

DIVIDER_LINE = "─" * 40
CODE_INDENT = "    "


class TextHandler(FormatHandler):
    """Handler for plain text (.txt) output.

    All markup is dropped:
    - bullets get a "• " prefix, numbered items keep their ordinal
    - dividers become a rule of box-drawing characters
    - code blocks are indented by four spaces
    """

    @property
    def name(self) -> str:
        return "text"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def render(self, document: Document) -> str:
        lines: list[str] = []

        for block in document:
            if isinstance(block, CodeBlock):
                lines.extend(
                    f"{CODE_INDENT}{code_line}" if code_line else ""
                    for code_line in block.text.split("\n")
                )
                continue
            if isinstance(block, Divider):
                lines.append(DIVIDER_LINE)
                continue

            text = "".join(span.text for span in inline_spans(block))
            if isinstance(block, Heading):
                lines.append(text.upper() if block.level == 1 else text)
            elif isinstance(block, BulletItem):
                lines.append(f"• {text}")
            elif isinstance(block, NumberedItem):
                lines.append(f"{block.ordinal}. {text}")
            else:
                lines.append(text)

        return "\n".join(lines)
