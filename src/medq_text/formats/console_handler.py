"""Terminal handler built on rich."""

from io import StringIO
from typing import Iterator, Optional

from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.rule import Rule
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from medq_text.formats.base import FormatHandler
from medq_text.formatting.ir import (
    Block,
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    NumberedItem,
    Span,
    TextStyle,
)
from medq_text.formatting.tokenizer import inline_spans

ACCENT = "cyan"

HEADING_STYLES = {
    1: "bold underline",
    2: "bold",
    3: "bold dim",
}

SPAN_STYLES = {
    TextStyle.NONE: "",
    TextStyle.BOLD: "bold",
    TextStyle.ITALIC: "italic",
    TextStyle.CODE: "bold magenta",
}


def spans_to_text(spans: tuple[Span, ...], base_style: str = "") -> Text:
    """Build a rich Text from spans, one styled segment per span."""
    text = Text(style=base_style)
    for span in spans:
        text.append(span.text, style=SPAN_STYLES[span.style])
    return text


class ConsoleHandler(FormatHandler):
    """Handler for terminal output (.ans when written to a file).

    Headings get a style per level, list markers use the accent colour,
    dividers are rules and code blocks are highlighted in a panel.
    """

    def __init__(
        self,
        code_theme: str = "monokai",
        width: Optional[int] = None,
    ) -> None:
        self.code_theme = code_theme
        self.width = width

    @property
    def name(self) -> str:
        return "console"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".ans",)

    def renderables(self, document: Document) -> Iterator[RenderableType]:
        """Yield one rich renderable per block."""
        for block in document:
            yield self._render_block(block)

    def _render_block(self, block: Block) -> RenderableType:
        if isinstance(block, CodeBlock):
            syntax = Syntax(
                block.text,
                block.language or "text",
                theme=self.code_theme,
                word_wrap=True,
            )
            return Panel(syntax, border_style="dim", expand=True)
        if isinstance(block, Divider):
            return Rule(style="dim")

        text = spans_to_text(inline_spans(block))
        if isinstance(block, Heading):
            text.stylize(HEADING_STYLES[block.level])
            top = 1 if block.level == 1 else 0
            return Padding(text, (top, 0, 0, 0))
        if isinstance(block, BulletItem):
            return self._list_row(Text("•", style=ACCENT), text)
        if isinstance(block, NumberedItem):
            return self._list_row(
                Text(f"{block.ordinal}.", style=f"bold {ACCENT}"), text
            )
        # Paragraph; an empty one is a blank line.
        return text

    def _list_row(self, marker: Text, body: Text) -> Table:
        row = Table.grid(padding=(0, 1))
        row.add_column(no_wrap=True)
        row.add_column(ratio=1)
        row.add_row(marker, body)
        return row

    def print(self, document: Document, console: Console) -> None:
        """Print a document to a console."""
        for renderable in self.renderables(document):
            console.print(renderable)

    def render(self, document: Document) -> str:
        """Render to text through a recording console, styles dropped."""
        console = Console(
            file=StringIO(),
            record=True,
            width=self.width or 80,
            color_system=None,
            force_terminal=False,
        )
        self.print(document, console)
        return console.export_text()
