"""GSM 03.38 7-bit alphabet tables."""

from __future__ import annotations

from typing import Dict, Tuple

ESCAPE = 0x1B

# Index is the GSM code. 0x1B is shown as NO-BREAK SPACE when it is not
# followed by an extension code.
GSM7_BASIC_TABLE = (
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ"
    "\u00a0ÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?¡"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

GSM7_EXTENDED_TABLE = {
    0x0A: "\u000c",
    0x14: "^",
    0x28: "{",
    0x29: "}",
    0x2F: "\\",
    0x3C: "[",
    0x3D: "~",
    0x3E: "]",
    0x40: "|",
    0x65: "€",
}

DECODE_TABLE: Tuple[bytes, ...] = tuple(ch.encode("utf-8") for ch in GSM7_BASIC_TABLE)

# ESC ESC is what the encoder writes for a plain 0x1B code.
ESCAPE_DECODE_TABLE: Dict[int, bytes] = {
    **{code: ch.encode("utf-8") for code, ch in GSM7_EXTENDED_TABLE.items()},
    ESCAPE: GSM7_BASIC_TABLE[ESCAPE].encode("utf-8"),
}

# (gsm code, code point), ascending by code point.
ENCODE_TABLE: Tuple[Tuple[int, int], ...] = tuple(
    sorted(
        ((code, ord(ch)) for code, ch in enumerate(GSM7_BASIC_TABLE)),
        key=lambda entry: entry[1],
    )
)
ENCODE_KEYS: Tuple[int, ...] = tuple(code_point for _, code_point in ENCODE_TABLE)

# (escape, gsm code, code point)
EXTENSION_ENCODE_TABLE: Tuple[Tuple[int, int, int], ...] = tuple(
    (ESCAPE, code, ord(ch)) for code, ch in GSM7_EXTENDED_TABLE.items()
)


__all__ = [
    "ESCAPE",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "DECODE_TABLE",
    "ESCAPE_DECODE_TABLE",
    "ENCODE_TABLE",
    "ENCODE_KEYS",
    "EXTENSION_ENCODE_TABLE",
]
