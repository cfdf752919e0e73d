"""High level encode/decode helpers built on the streaming transformers."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from .gsm import DEFAULT_REPLACEMENT, Decoder, Encoder
from .septets import SeptetPacker, SeptetUnpacker
from .transform import transform_bytes


def encode_gsm7_text(text: str, replacement: int = DEFAULT_REPLACEMENT) -> bytes:
    """Return the loose GSM 7-bit codes (one per byte) representing *text*."""

    return transform_bytes(Encoder(replacement), text.encode("utf-8"))


def decode_gsm7_text(data: Union[bytes, Iterable[int]]) -> str:
    """Decode loose GSM 7-bit codes into text."""

    return transform_bytes(Decoder(), bytes(data)).decode("utf-8")


def pack_septets(septets: Union[bytes, Iterable[int]]) -> bytes:
    return transform_bytes(SeptetPacker(), bytes(septets))


def unpack_septets(data: bytes, septets: Optional[int] = None) -> bytes:
    return transform_bytes(SeptetUnpacker(septets), data)


def encode_packed(
    text: str, replacement: int = DEFAULT_REPLACEMENT
) -> Tuple[bytes, int]:
    """Return the packed octets for *text* and the number of septets they hold."""

    septets = encode_gsm7_text(text, replacement)
    return pack_septets(septets), len(septets)


def decode_packed(data: bytes, septets: Optional[int] = None) -> str:
    return decode_gsm7_text(unpack_septets(data, septets))


__all__ = [
    "encode_gsm7_text",
    "decode_gsm7_text",
    "pack_septets",
    "unpack_septets",
    "encode_packed",
    "decode_packed",
]
