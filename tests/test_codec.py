import pytest

from gsm7_transform_lib import (
    decode_gsm7_text,
    decode_packed,
    encode_gsm7_text,
    encode_packed,
    pack_septets,
    unpack_septets,
)


def test_encode_and_decode_text() -> None:
    septets = encode_gsm7_text("Hello {world} €")
    assert septets[:5] == b"Hello"
    assert septets[-2:] == b"\x1b\x65"
    assert decode_gsm7_text(septets) == "Hello {world} €"


def test_decode_accepts_integer_sequences() -> None:
    assert decode_gsm7_text([0x04, 0x05, 0x0B, 0x12]) == "èéØΦ"


def test_unsupported_characters_are_replaced() -> None:
    assert encode_gsm7_text("ok 👍") == b"ok ?"
    assert encode_gsm7_text("ok 👍", replacement=0x20) == b"ok  "


def test_pack_and_unpack_septets() -> None:
    assert pack_septets([0x31, 0x32]) == b"\x31\x19"
    assert unpack_septets(b"\x31\x19") == b"\x31\x32"
    assert unpack_septets(b"\x31\x19", septets=1) == b"\x31"


@pytest.mark.parametrize(
    "text",
    ["", "A", "1234567", "12345678", "hello world", "ÆØÅ [~] | \\ € " * 9],
)
def test_packed_round_trip(text: str) -> None:
    packed, count = encode_packed(text)
    assert len(packed) == (count * 7 + 7) // 8
    assert decode_packed(packed, count) == text


def test_packed_vector() -> None:
    packed, count = encode_packed("hellohello")
    assert count == 10
    assert packed.hex().upper() == "E8329BFD4697D9EC37"
