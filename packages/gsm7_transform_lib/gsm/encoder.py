"""UTF-8 to GSM 7-bit transformer."""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Optional, Tuple

from ..transform.base import (
    ReadableBuffer,
    Status,
    TransformResult,
    Transformer,
    WritableBuffer,
)
from .tables import ENCODE_KEYS, ENCODE_TABLE, ESCAPE, EXTENSION_ENCODE_TABLE

DEFAULT_REPLACEMENT = 0x3F  # "?"

# Largest output of a single code point: an extension pair or ESC ESC.
MAX_UNIT_SIZE = 2


def _continuation_range(lead: int) -> Tuple[int, int, int]:
    """Return (sequence size, lowest, highest) allowed second byte for *lead*."""

    if 0xC2 <= lead <= 0xDF:
        return 2, 0x80, 0xBF
    if 0xE0 <= lead <= 0xEF:
        low = 0xA0 if lead == 0xE0 else 0x80
        high = 0x9F if lead == 0xED else 0xBF
        return 3, low, high
    if 0xF0 <= lead <= 0xF4:
        low = 0x90 if lead == 0xF0 else 0x80
        high = 0x8F if lead == 0xF4 else 0xBF
        return 4, low, high
    return 0, 0, 0


def decode_code_point(src: ReadableBuffer, pos: int) -> Tuple[Optional[int], int]:
    """Decode the UTF-8 sequence starting at *pos*.

    Returns ``(code_point, size)``. An invalid sequence yields ``(None, 1)``;
    a valid prefix cut off by the end of *src* yields ``(None, 0)``.
    """

    lead = src[pos]
    if lead < 0x80:
        return lead, 1
    size, low, high = _continuation_range(lead)
    if not size:
        return None, 1
    available = len(src) - pos
    for offset in range(1, min(size, available)):
        byte = src[pos + offset]
        if offset > 1:
            low, high = 0x80, 0xBF
        if not low <= byte <= high:
            return None, 1
    if available < size:
        return None, 0
    return ord(bytes(src[pos : pos + size]).decode("utf-8")), size


class Encoder(Transformer):
    """Encodes UTF-8 text into loose GSM 7-bit codes (one per byte).

    Code points outside the basic and extension tables are written as the
    *replacement* byte. The encoder is stateless; a code point split across
    chunks is left unconsumed until the rest of it arrives.

    Every code point needs two free output bytes before it is decoded, so the
    rollback of an extension pair that does not fit is only a safety net for
    that guarantee.
    """

    def __init__(
        self,
        replacement: Optional[int] = DEFAULT_REPLACEMENT,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        if not replacement:
            replacement = DEFAULT_REPLACEMENT
        if not 0 < replacement <= 0xFF:
            raise ValueError(f"Replacement byte {replacement!r} out of range")
        self._replacement = replacement
        self._logger = logger or logging.getLogger(__name__)

    @property
    def replacement(self) -> int:
        return self._replacement

    def reset(self) -> None:
        pass

    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        n_dst = 0
        n_src = 0
        while n_src < len(src):
            if n_dst + MAX_UNIT_SIZE > len(dst):
                return n_dst, n_src, Status.DESTINATION_FULL
            code_point, size = decode_code_point(src, n_src)
            if not size:
                if not final:
                    return n_dst, n_src, Status.SOURCE_SHORT
                size = 1
            n_src += size
            if code_point is None:
                self._logger.debug(
                    "Invalid UTF-8 byte 0x%02X replaced", src[n_src - size]
                )
                dst[n_dst] = self._replacement
                n_dst += 1
                continue

            index = bisect_left(ENCODE_KEYS, code_point)
            if index < len(ENCODE_KEYS) and ENCODE_KEYS[index] == code_point:
                code = ENCODE_TABLE[index][0]
                dst[n_dst] = code
                n_dst += 1
                if code == ESCAPE:
                    dst[n_dst] = ESCAPE
                    n_dst += 1
                continue

            for escape, code, extended in EXTENSION_ENCODE_TABLE:
                if extended == code_point:
                    if n_dst + 2 > len(dst):
                        return n_dst, n_src - size, Status.DESTINATION_FULL
                    dst[n_dst] = escape
                    dst[n_dst + 1] = code
                    n_dst += 2
                    break
            else:
                self._logger.debug(
                    "Code point U+%04X not in GSM alphabet, replaced", code_point
                )
                dst[n_dst] = self._replacement
                n_dst += 1
        return n_dst, n_src, Status.OK


__all__ = ["DEFAULT_REPLACEMENT", "Encoder", "decode_code_point"]
