"""Streaming GSM 03.38 codecs and septet packing for SMS text."""

from .codec import (
    decode_gsm7_text,
    decode_packed,
    encode_gsm7_text,
    encode_packed,
    pack_septets,
    unpack_septets,
)
from .gsm import DEFAULT_REPLACEMENT, Decoder, Encoder
from .septets import SeptetPacker, SeptetUnpacker
from .transform import (
    MIN_BUFFER_SIZE,
    Chain,
    Status,
    TransformError,
    TransformReader,
    TransformWriter,
    Transformer,
    transform_bytes,
)

__all__ = [
    "Chain",
    "DEFAULT_REPLACEMENT",
    "MIN_BUFFER_SIZE",
    "Decoder",
    "Encoder",
    "SeptetPacker",
    "SeptetUnpacker",
    "Status",
    "TransformError",
    "TransformReader",
    "TransformWriter",
    "Transformer",
    "transform_bytes",
    "encode_gsm7_text",
    "decode_gsm7_text",
    "pack_septets",
    "unpack_septets",
    "encode_packed",
    "decode_packed",
]
