"""Rendering pipeline for medq-text."""

from medq_text.core.transformer import DocumentTransformer, TransformationError

__all__ = [
    "DocumentTransformer",
    "TransformationError",
]
