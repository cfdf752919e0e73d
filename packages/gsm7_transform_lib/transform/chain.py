"""Composition of several transformers into one."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .base import (
    MIN_BUFFER_SIZE,
    ReadableBuffer,
    Status,
    TransformError,
    TransformResult,
    Transformer,
    WritableBuffer,
)

DEFAULT_BUFFER_SIZE = 256


class Chain(Transformer):
    """Runs transformers back to back, each feeding the next.

    Bytes produced by one link and not yet taken by the next are held in an
    internal buffer. A link stops producing once its buffer holds
    *buffer_size* bytes, which bounds memory regardless of the caller's
    chunk sizes. *buffer_size* must hold the largest unit any link writes;
    a link that cannot write one unit into an empty buffer raises
    :class:`TransformError`. A final call reports ``OK`` only once all of
    *src* and every internal buffer has been drained.
    """

    def __init__(
        self,
        *transformers: Transformer,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        if not transformers:
            raise ValueError("Chain requires at least one transformer")
        if buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(
                f"Chain buffer size must be at least {MIN_BUFFER_SIZE} bytes"
            )
        self._links: Sequence[Transformer] = tuple(transformers)
        self._buffer_size = buffer_size
        self._pending: List[bytearray] = [bytearray() for _ in self._links[1:]]
        self._logger = logger or logging.getLogger(__name__)

    @property
    def links(self) -> Sequence[Transformer]:
        return self._links

    def reset(self) -> None:
        for link in self._links:
            link.reset()
        for pending in self._pending:
            pending.clear()

    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        source = memoryview(src)
        target = memoryview(dst)
        last = len(self._links) - 1
        statuses = [Status.OK] * len(self._links)
        n_dst = 0
        n_src = 0
        progress = True
        while progress:
            progress = False
            upstream_final = final
            for index, link in enumerate(self._links):
                if index < last and len(self._pending[index]) >= self._buffer_size:
                    statuses[index] = Status.DESTINATION_FULL
                    upstream_final = False
                    continue
                if index == 0:
                    link_src: ReadableBuffer = source[n_src:]
                else:
                    link_src = bytes(self._pending[index - 1])
                if index == last:
                    link_dst: WritableBuffer = target[n_dst:]
                else:
                    link_dst = bytearray(self._buffer_size)
                written, consumed, status = link.transform(
                    link_dst, link_src, upstream_final
                )
                statuses[index] = status
                if (
                    index < last
                    and status is Status.DESTINATION_FULL
                    and not written
                    and not consumed
                ):
                    raise TransformError(
                        f"Link {index} produces units larger than the "
                        f"{self._buffer_size}-byte chain buffer"
                    )
                if index == 0:
                    n_src += consumed
                else:
                    del self._pending[index - 1][:consumed]
                if index == last:
                    n_dst += written
                else:
                    self._pending[index].extend(link_dst[:written])
                if written or consumed:
                    progress = True
                upstream_final = (
                    upstream_final
                    and status is Status.OK
                    and consumed == len(link_src)
                )
        if statuses[last] is Status.DESTINATION_FULL:
            return n_dst, n_src, Status.DESTINATION_FULL
        if statuses[0] is Status.SOURCE_SHORT:
            return n_dst, n_src, Status.SOURCE_SHORT
        if Status.DESTINATION_FULL in statuses:
            return n_dst, n_src, Status.DESTINATION_FULL
        if final:
            if n_src < len(source) or any(self._pending):
                return n_dst, n_src, Status.DESTINATION_FULL
            self._logger.debug(
                "Chain of %d transformers flushed %d bytes", len(self._links), n_dst
            )
        return n_dst, n_src, Status.OK


__all__ = ["Chain", "DEFAULT_BUFFER_SIZE"]
