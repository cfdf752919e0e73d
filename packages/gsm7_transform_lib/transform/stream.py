"""Drivers that run a transformer over whole inputs and binary streams."""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from .base import (
    MIN_BUFFER_SIZE,
    ReadableBuffer,
    Status,
    TransformError,
    Transformer,
)

DEFAULT_BUFFER_SIZE = 4096


def transform_bytes(
    transformer: Transformer,
    data: ReadableBuffer,
    *,
    logger: logging.Logger | None = None,
) -> bytes:
    """Reset *transformer* and return the result of running it over *data*."""

    log = logger or logging.getLogger(__name__)
    transformer.reset()
    source = memoryview(data)
    scratch = bytearray(max(16, len(source) * 2))
    out = bytearray()
    pos = 0
    while True:
        written, consumed, status = transformer.transform(scratch, source[pos:], True)
        out.extend(scratch[:written])
        pos += consumed
        if status is Status.OK:
            return bytes(out)
        if status is Status.SOURCE_SHORT:
            raise TransformError(
                f"Transformer stalled with {len(source) - pos} bytes of final input"
            )
        if not written and not consumed:
            scratch = bytearray(len(scratch) * 2)
            log.debug("Grew transform buffer to %d bytes", len(scratch))


class TransformReader(io.RawIOBase):
    """Readable stream yielding the transformed contents of *stream*.

    The output scratch buffer starts at *buffer_size* bytes and doubles
    whenever the transformer cannot write a single unit into it.
    """

    def __init__(
        self,
        stream: BinaryIO,
        transformer: Transformer,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__()
        self._stream = stream
        self._transformer = transformer
        self._buffer_size = buffer_size
        self._scratch_size = buffer_size
        self._logger = logger or logging.getLogger(__name__)
        self._src = bytearray()
        self._out = bytearray()
        self._eof = False
        self._done = False
        self._starved = False
        if buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(f"Buffer size must be at least {MIN_BUFFER_SIZE} bytes")

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        while not self._out:
            if self._done:
                return 0
            self._fill()
        count = min(len(buffer), len(self._out))
        buffer[:count] = self._out[:count]
        del self._out[:count]
        return count

    def _fill(self) -> None:
        if not self._eof and (len(self._src) < self._buffer_size or self._starved):
            chunk = self._stream.read(self._buffer_size)
            if chunk:
                self._src.extend(chunk)
            else:
                self._eof = True
        scratch = bytearray(self._scratch_size)
        written, consumed, status = self._transformer.transform(
            scratch, bytes(self._src), self._eof
        )
        del self._src[:consumed]
        self._out.extend(scratch[:written])
        progress = bool(written or consumed)
        self._starved = status is Status.SOURCE_SHORT and not progress
        if status is Status.OK and self._eof and not self._src:
            self._done = True
            self._logger.debug("Transform reader reached end of stream")
        elif status is Status.DESTINATION_FULL and not progress:
            self._scratch_size *= 2
            self._logger.debug("Grew reader buffer to %d bytes", self._scratch_size)
        elif self._eof and not progress:
            raise TransformError("Transformer made no progress at end of stream")


class TransformWriter(io.RawIOBase):
    """Writable stream that transforms bytes before writing them to *stream*.

    Closing the writer flushes the transformer with the final flag set; the
    wrapped stream is left open.
    """

    def __init__(
        self,
        stream: BinaryIO,
        transformer: Transformer,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__()
        self._stream = stream
        self._transformer = transformer
        self._buffer_size = buffer_size
        self._logger = logger or logging.getLogger(__name__)
        self._src = bytearray()
        if buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(f"Buffer size must be at least {MIN_BUFFER_SIZE} bytes")

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        if self.closed:
            raise ValueError("I/O operation on closed writer")
        chunk = bytes(data)
        self._src.extend(chunk)
        self._drain(final=False)
        return len(chunk)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._drain(final=True)
            if self._src:
                raise TransformError(
                    f"{len(self._src)} bytes left untransformed at close"
                )
            self._logger.debug("Transform writer flushed")
        finally:
            super().close()

    def _drain(self, final: bool) -> None:
        scratch = bytearray(self._buffer_size)
        while True:
            written, consumed, status = self._transformer.transform(
                scratch, bytes(self._src), final
            )
            del self._src[:consumed]
            if written:
                self._stream.write(bytes(scratch[:written]))
            if status is not Status.DESTINATION_FULL:
                return
            if not written and not consumed:
                scratch = bytearray(len(scratch) * 2)
                self._logger.debug("Grew writer buffer to %d bytes", len(scratch))


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "TransformReader",
    "TransformWriter",
    "transform_bytes",
]
