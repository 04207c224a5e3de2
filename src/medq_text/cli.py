"""Command-line interface for medq-text."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from medq_text import __version__
from medq_text.config import get_settings
from medq_text.core.transformer import DocumentTransformer, TransformationError
from medq_text.formats import SUPPORTED_FORMATS, ConsoleHandler

app = typer.Typer(
    name="medq-text",
    help="Render AI-generated study text as formatted blocks.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"medq-text v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logs through rich at the configured level."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def read_input(path: Optional[Path]) -> str:
    """Read raw text from a file, or stdin when no path is given."""
    if path is None:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise TransformationError(f"Input file is not valid UTF-8: {path}") from e


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Text file to render (reads stdin when omitted)",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendering to this file; format follows its extension",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: console)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render study text with headings, lists, dividers, code and emphasis.

    Examples:

        medq-text answer.txt

        medq-text answer.txt --format json

        medq-text answer.txt -o answer.md

        cat answer.txt | medq-text --format text
    """
    try:
        configure_logging(verbose)
        transformer = DocumentTransformer()
    except ValidationError as e:
        problems = "; ".join(
            f"{error['loc'][0]}: {error['msg']}" for error in e.errors()
        )
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(problems)}")
        raise typer.Exit(1)

    try:
        if output is not None and path is not None:
            document = transformer.transform_file(path, output, fmt)
            console.print(f"[green]Success:[/green] {output}")
            if verbose:
                console.print(f"[blue]Blocks:[/blue] {len(document)}")
            raise typer.Exit(0)

        raw = read_input(path)
        handler = transformer.handler_for(fmt, output)
        document = transformer.parser.parse(raw)

        if output is not None:
            handler.write(document, output)
            console.print(f"[green]Success:[/green] {output}")
        elif isinstance(handler, ConsoleHandler):
            handler.print(document, console)
        else:
            typer.echo(handler.render(document))
    except TransformationError as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
