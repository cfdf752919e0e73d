"""Resumable byte stream transformers and the helpers that drive them."""

from __future__ import annotations

from .base import (
    MIN_BUFFER_SIZE,
    ReadableBuffer,
    Status,
    TransformError,
    TransformResult,
    Transformer,
    WritableBuffer,
)
from .chain import Chain
from .stream import TransformReader, TransformWriter, transform_bytes

__all__ = [
    "Chain",
    "MIN_BUFFER_SIZE",
    "ReadableBuffer",
    "Status",
    "TransformError",
    "TransformReader",
    "TransformResult",
    "TransformWriter",
    "Transformer",
    "WritableBuffer",
    "transform_bytes",
]
