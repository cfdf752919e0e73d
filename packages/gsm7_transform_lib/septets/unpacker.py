"""Septet unpacking, the inverse of :mod:`.packer`."""

from __future__ import annotations

from typing import Optional

from ..transform.base import (
    ReadableBuffer,
    Status,
    TransformResult,
    Transformer,
    WritableBuffer,
)


class SeptetUnpacker(Transformer):
    """Unpacks dense octets into loose septets, one per output byte.

    Seven octets carry eight septets; the eighth is assembled from carried
    bits alone and may be flushed on the following call when the output
    buffer is full. A packed stream of ``8k + 7`` septets ends with seven
    padding bits that unpack as an extra zero septet; pass *septets* to stop
    after the expected count.
    """

    def __init__(self, septets: Optional[int] = None) -> None:
        if septets is not None and septets < 0:
            raise ValueError("Septet count must not be negative")
        self._limit = septets
        self.reset()

    def reset(self) -> None:
        self._carry = 0
        self._shift = 1
        self._emitted = 0

    def _exhausted(self) -> bool:
        return self._limit is not None and self._emitted >= self._limit

    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        n_dst = 0
        n_src = 0
        if self._shift == 8:
            if not self._exhausted():
                if n_dst >= len(dst):
                    return n_dst, n_src, Status.DESTINATION_FULL
                dst[n_dst] = self._carry
                n_dst += 1
                self._emitted += 1
            self._carry = 0
            self._shift = 1
        while n_src < len(src):
            if self._exhausted():
                return n_dst, len(src), Status.OK
            if n_dst >= len(dst):
                return n_dst, n_src, Status.DESTINATION_FULL
            octet = src[n_src]
            dst[n_dst] = (((octet << self._shift) & 0xFF) >> 1) | self._carry
            self._carry = octet >> (8 - self._shift)
            self._shift += 1
            self._emitted += 1
            n_dst += 1
            n_src += 1
            if self._shift == 8:
                if self._exhausted():
                    self._carry = 0
                    self._shift = 1
                    continue
                if n_dst >= len(dst):
                    return n_dst, n_src, Status.DESTINATION_FULL
                dst[n_dst] = self._carry
                n_dst += 1
                self._emitted += 1
                self._carry = 0
                self._shift = 1
        return n_dst, n_src, Status.OK


__all__ = ["SeptetUnpacker"]
