"""Septet packing (3GPP TS 23.038, section 6.1.2.1)."""

from __future__ import annotations

from ..transform.base import (
    ReadableBuffer,
    Status,
    TransformResult,
    Transformer,
    WritableBuffer,
)


class SeptetPacker(Transformer):
    """Packs loose septets, one per input byte, into dense octets.

    ``_shift`` runs from 1 to 7 and counts the low bits of the next septet
    already written into the previous octet, plus one. Every eighth septet
    ends exactly on an octet boundary and is absorbed without an octet of
    its own.
    """

    def __init__(self) -> None:
        self._shift = 1

    def reset(self) -> None:
        self._shift = 1

    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        n_dst = 0
        n_src = 0
        while n_src < len(src):
            has_partner = n_src + 1 < len(src)
            if not has_partner and not final:
                return n_dst, n_src, Status.SOURCE_SHORT
            if n_dst >= len(dst):
                return n_dst, n_src, Status.DESTINATION_FULL
            octet = (src[n_src] & 0x7F) >> (self._shift - 1)
            if not has_partner:
                dst[n_dst] = octet
                n_dst += 1
                n_src += 1
                self._shift = 1
                break
            octet |= ((src[n_src + 1] & 0x7F) << (8 - self._shift)) & 0xFF
            dst[n_dst] = octet
            n_dst += 1
            n_src += 1
            self._shift += 1
            if self._shift == 8:
                n_src += 1
                self._shift = 1
        return n_dst, n_src, Status.OK


__all__ = ["SeptetPacker"]
