"""Septet packing for the GSM 7-bit default alphabet."""

from __future__ import annotations

from .packer import SeptetPacker
from .unpacker import SeptetUnpacker

__all__ = ["SeptetPacker", "SeptetUnpacker"]
