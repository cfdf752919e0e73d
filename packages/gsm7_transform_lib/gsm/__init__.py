"""GSM 03.38 alphabet transformers."""

from __future__ import annotations

from .decoder import Decoder
from .encoder import DEFAULT_REPLACEMENT, Encoder
from .tables import (
    DECODE_TABLE,
    ENCODE_TABLE,
    ESCAPE,
    ESCAPE_DECODE_TABLE,
    EXTENSION_ENCODE_TABLE,
    GSM7_BASIC_TABLE,
    GSM7_EXTENDED_TABLE,
)

__all__ = [
    "DECODE_TABLE",
    "DEFAULT_REPLACEMENT",
    "Decoder",
    "ENCODE_TABLE",
    "ESCAPE",
    "ESCAPE_DECODE_TABLE",
    "EXTENSION_ENCODE_TABLE",
    "Encoder",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
]
