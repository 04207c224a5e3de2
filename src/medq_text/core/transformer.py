"""Main rendering orchestrator."""

import logging
from pathlib import Path
from typing import Optional

from medq_text.config import get_settings
from medq_text.formats import FormatHandler, create_handler
from medq_text.formatting.ir import Document
from medq_text.formatting.parser import MarkdownParser

logger = logging.getLogger(__name__)


class TransformationError(Exception):
    """Error while reading, rendering or writing a document."""

    pass


class DocumentTransformer:
    """Orchestrates the text rendering pipeline.

    Pipeline:
    1. Read input text (UTF-8)
    2. Segment into blocks and tokenize inline spans
    3. Render with the format handler for the requested output
    4. Write to the output file
    """

    def __init__(self, default_format: Optional[str] = None) -> None:
        """Initialize the transformer.

        Args:
            default_format: Handler used when neither a format nor an
                output suffix picks one (default: from settings)
        """
        settings = get_settings()
        self.default_format = default_format or settings.default_format
        self.parser = MarkdownParser()

    def handler_for(
        self,
        fmt: Optional[str] = None,
        output_path: Optional[Path] = None,
    ) -> FormatHandler:
        """Pick a handler by explicit format, then output suffix, then default.

        Raises:
            TransformationError: If the format is not supported
        """
        key = fmt or (output_path.suffix if output_path and output_path.suffix else None)
        try:
            return create_handler(key or self.default_format)
        except ValueError as e:
            raise TransformationError(str(e)) from e

    def render_text(self, raw: str, fmt: Optional[str] = None) -> str:
        """Parse raw text and render it without file I/O.

        Args:
            raw: Text to parse
            fmt: Output format name (default: the transformer's default)

        Returns:
            The rendered document
        """
        handler = self.handler_for(fmt)
        return handler.render(self.parser.parse(raw))

    def transform_file(
        self,
        input_path: Path,
        output_path: Path,
        fmt: Optional[str] = None,
    ) -> Document:
        """Render a text file into another file.

        Args:
            input_path: Path to the raw text
            output_path: Path for the rendered output
            fmt: Output format; inferred from output_path when omitted

        Returns:
            The Document that was written

        Raises:
            TransformationError: If the input cannot be read or the
                output format is unsupported
        """
        if not input_path.exists():
            raise TransformationError(f"Input file not found: {input_path}")

        handler = self.handler_for(fmt, output_path)

        try:
            raw = input_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise TransformationError(
                f"Input file is not valid UTF-8: {input_path}"
            ) from e
        logger.info("Read %d characters from %s", len(raw), input_path)

        document = self.parser.parse(raw)
        handler.write(document, output_path)
        logger.info(
            "Wrote %d block(s) to %s as %s", len(document), output_path, handler.name
        )

        return document
