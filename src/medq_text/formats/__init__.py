"""Output format handlers for medq-text."""

from typing import Optional

from medq_text.config import Settings, get_settings
from medq_text.formats.base import FormatHandler
from medq_text.formats.console_handler import ConsoleHandler
from medq_text.formats.json_handler import JSONHandler
from medq_text.formats.markdown_handler import MarkdownHandler
from medq_text.formats.text_handler import TextHandler

__all__ = [
    "FormatHandler",
    "TextHandler",
    "MarkdownHandler",
    "JSONHandler",
    "ConsoleHandler",
    "get_handler",
    "create_handler",
]

# Map format names to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    "text": TextHandler,
    "markdown": MarkdownHandler,
    "json": JSONHandler,
    "console": ConsoleHandler,
}

# Map file extensions to handlers
EXTENSION_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TextHandler,
    ".md": MarkdownHandler,
    ".markdown": MarkdownHandler,
    ".json": JSONHandler,
    ".ans": ConsoleHandler,
}

SUPPORTED_FORMATS = tuple(HANDLER_MAP.keys())
SUPPORTED_EXTENSIONS = tuple(EXTENSION_MAP.keys())


def get_handler(key: str) -> type[FormatHandler]:
    """Get the handler class for a format name or file extension."""
    key = key.lower()
    handler = HANDLER_MAP.get(key) or EXTENSION_MAP.get(key)
    if handler is None:
        raise ValueError(
            f"Unsupported output format: {key}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}; "
            f"extensions: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return handler


def create_handler(key: str, settings: Optional[Settings] = None) -> FormatHandler:
    """Instantiate the handler for ``key`` configured from settings."""
    settings = settings or get_settings()
    handler_class = get_handler(key)
    if handler_class is JSONHandler:
        return JSONHandler(indent=settings.json_indent)
    if handler_class is ConsoleHandler:
        return ConsoleHandler(
            code_theme=settings.code_theme,
            width=settings.console_width,
        )
    return handler_class()
