"""JSON handler: serialize a Document for a client-side renderer.

Every node is a dict with a ``_type`` discriminator naming its class.
Inline blocks also carry their derived ``spans`` so a consumer does not
need its own tokenizer; ``from_dict`` ignores them and re-derives on use.

Example:
    doc = segment("## Hello **World**")
    restored = from_json(to_json(doc))
    assert doc == restored
"""

import json
from dataclasses import MISSING, fields
from typing import Any, Optional

from medq_text.formats.base import FormatHandler
from medq_text.formatting.ir import (
    Block,
    Bold,
    BulletItem,
    CodeBlock,
    Divider,
    Document,
    Heading,
    InlineCode,
    Italic,
    NumberedItem,
    Paragraph,
    PlainText,
    Span,
    has_inline_text,
)
from medq_text.formatting.tokenizer import inline_spans

# Registry of block type names to classes for deserialization
_BLOCK_TYPES: dict[str, type] = {
    "Paragraph": Paragraph,
    "Heading": Heading,
    "BulletItem": BulletItem,
    "NumberedItem": NumberedItem,
    "Divider": Divider,
    "CodeBlock": CodeBlock,
}

_SPAN_TYPES: dict[str, type] = {
    "PlainText": PlainText,
    "Bold": Bold,
    "Italic": Italic,
    "InlineCode": InlineCode,
}


def span_to_dict(span: Span) -> dict[str, Any]:
    return {"_type": type(span).__name__, "text": span.text}


def block_to_dict(block: Block) -> dict[str, Any]:
    """Convert a block to a JSON-compatible dict."""
    result: dict[str, Any] = {"_type": type(block).__name__}
    for f in fields(block):
        result[f.name] = getattr(block, f.name)
    if has_inline_text(block):
        result["spans"] = [span_to_dict(span) for span in inline_spans(block)]
    return result


def to_dict(document: Document) -> dict[str, Any]:
    """Convert a document to a JSON-compatible dict."""
    return {
        "_type": "Document",
        "blocks": [block_to_dict(block) for block in document],
    }


def _lookup(registry: dict[str, type], data: dict[str, Any]) -> type:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a serialized node, got {type(data).__name__}")
    type_name = data.get("_type")
    if type_name is None:
        raise ValueError("Missing '_type' field in serialized node")
    node_cls = registry.get(type_name)
    if node_cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")
    return node_cls


def _check_field(type_name: str, name: str, value: Any) -> None:
    if name == "level":
        # bool is an int subclass
        if type(value) is not int or value not in (1, 2, 3):
            raise ValueError(f"{type_name}.level must be 1, 2 or 3, got {value!r}")
        return
    if not isinstance(value, str):
        raise ValueError(
            f"{type_name}.{name} must be a string, got {type(value).__name__}"
        )
    if name == "ordinal" and not (value.isascii() and value.isdigit()):
        raise ValueError(f"{type_name}.ordinal must be ASCII digits, got {value!r}")


def block_from_dict(data: dict[str, Any]) -> Block:
    """Reconstruct a block from a dict produced by block_to_dict.

    Fields with a default may be omitted; every other field must be
    present with the right type.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a field is
            missing or invalid.
    """
    block_cls = _lookup(_BLOCK_TYPES, data)
    kwargs = {}
    for f in fields(block_cls):
        if f.name not in data:
            if f.default is MISSING:
                raise ValueError(f"{block_cls.__name__} is missing field {f.name!r}")
            continue
        _check_field(block_cls.__name__, f.name, data[f.name])
        kwargs[f.name] = data[f.name]
    return block_cls(**kwargs)


def span_from_dict(data: dict[str, Any]) -> Span:
    """Reconstruct a span; raises ValueError on a bad node."""
    span_cls = _lookup(_SPAN_TYPES, data)
    if "text" not in data:
        raise ValueError(f"{span_cls.__name__} is missing field 'text'")
    _check_field(span_cls.__name__, "text", data["text"])
    return span_cls(text=data["text"])


def from_dict(data: dict[str, Any]) -> Document:
    """Reconstruct a document from a dict produced by to_dict.

    Raises:
        ValueError: If the document or any of its blocks is malformed.
    """
    if not isinstance(data, dict) or data.get("_type") != "Document":
        found = data.get("_type") if isinstance(data, dict) else type(data).__name__
        raise ValueError(f"Expected a Document, got {found!r}")
    blocks = data.get("blocks", [])
    if not isinstance(blocks, list):
        raise ValueError(f"Document.blocks must be a list, got {type(blocks).__name__}")
    return Document(blocks=tuple(block_from_dict(item) for item in blocks))


def to_json(document: Document, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(document), ensure_ascii=False, indent=indent)


def from_json(text: str) -> Document:
    return from_dict(json.loads(text))


class JSONHandler(FormatHandler):
    """Handler for JSON (.json) output."""

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    @property
    def name(self) -> str:
        return "json"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def render(self, document: Document) -> str:
        return to_json(document, indent=self.indent)
