"""Streaming transform primitives shared by every codec in the package."""

from __future__ import annotations

import abc
import enum
from typing import Tuple, Union

WritableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


class TransformError(ValueError):
    """Raised when a transformer cannot make progress with the data it was given."""


class Status(enum.Enum):
    """Outcome of a single :meth:`Transformer.transform` call."""

    OK = "ok"
    DESTINATION_FULL = "destination_full"
    SOURCE_SHORT = "source_short"


TransformResult = Tuple[int, int, Status]

# Largest output of one unit of any transformer here: a 4-byte UTF-8 sequence.
MIN_BUFFER_SIZE = 4


class Transformer(abc.ABC):
    """Abstract base class for resumable byte stream transformers.

    A call converts as much of *src* into *dst* as possible and returns the
    number of bytes written, the number of bytes consumed and a
    :class:`Status`. ``DESTINATION_FULL`` asks the caller for more output
    room, ``SOURCE_SHORT`` for more input; in both cases the caller calls
    again with the unconsumed remainder of *src*. Units are never split
    across calls.
    """

    @abc.abstractmethod
    def transform(
        self, dst: WritableBuffer, src: ReadableBuffer, final: bool = False
    ) -> TransformResult:
        """Transform *src* into *dst*; *final* marks the last chunk of the stream."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Return to the start-of-stream state."""


__all__ = [
    "MIN_BUFFER_SIZE",
    "ReadableBuffer",
    "Status",
    "TransformError",
    "TransformResult",
    "Transformer",
    "WritableBuffer",
]
