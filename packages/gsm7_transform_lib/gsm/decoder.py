"""GSM 7-bit to UTF-8 transformer."""

from __future__ import annotations

from ..transform.base import (
    ReadableBuffer,
    Status,
    TransformResult,
    Transformer,
    WritableBuffer,
)
from .tables import DECODE_TABLE, ESCAPE, ESCAPE_DECODE_TABLE


class Decoder(Transformer):
    """Decodes loose GSM 7-bit codes (one per byte) into UTF-8.

    The decoder keeps no state between calls: a trailing escape byte on a
    non-final chunk is left unconsumed instead.
    """

    def reset(self) -> None:
        pass

    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        n_dst = 0
        n_src = 0
        while n_src < len(src):
            code = src[n_src] & 0x7F
            size = 1
            data = DECODE_TABLE[code]
            if code == ESCAPE:
                if n_src + 1 < len(src):
                    extended = ESCAPE_DECODE_TABLE.get(src[n_src + 1] & 0x7F)
                    if extended is not None:
                        data = extended
                        size = 2
                elif not final:
                    return n_dst, n_src, Status.SOURCE_SHORT
            end = n_dst + len(data)
            if end > len(dst):
                return n_dst, n_src, Status.DESTINATION_FULL
            dst[n_dst:end] = data
            n_dst = end
            n_src += size
        return n_dst, n_src, Status.OK


__all__ = ["Decoder"]
