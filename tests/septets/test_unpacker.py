import pytest

from gsm7_transform_lib import (
    SeptetPacker,
    SeptetUnpacker,
    Status,
    transform_bytes,
)

UNPACKING_VECTORS = [
    (bytes([0x31, 0x19]), bytes([0x31, 0x32])),
    (
        bytes([0x31, 0xD9, 0x8C, 0x56, 0xB3, 0xDD, 0x70, 0x39]),
        bytes(range(0x31, 0x3A)),
    ),
    (
        bytes([0x31, 0xD9, 0x8C, 0x56, 0xB3, 0xDD, 0x70]) * 3,
        bytes(range(0x31, 0x39)) * 3,
    ),
]


def run_chunked(
    unpacker: SeptetUnpacker, data: bytes, chunk_size: int, out_size: int
) -> bytes:
    out = bytearray()
    buffer = bytearray(out_size)
    pending = b""
    for start in range(0, max(len(data), 1), chunk_size):
        pending += data[start : start + chunk_size]
        final = start + chunk_size >= len(data)
        while True:
            written, consumed, status = unpacker.transform(buffer, pending, final)
            out += buffer[:written]
            pending = pending[consumed:]
            if status is not Status.DESTINATION_FULL:
                break
    assert pending == b""
    return bytes(out)


@pytest.mark.parametrize("packed, unpacked", UNPACKING_VECTORS)
def test_unpacking_vectors(packed: bytes, unpacked: bytes) -> None:
    assert transform_bytes(SeptetUnpacker(), packed) == unpacked


def test_carried_septet_flushed_on_next_call() -> None:
    unpacker = SeptetUnpacker()
    packed = bytes([0x31, 0xD9, 0x8C, 0x56, 0xB3, 0xDD, 0x70])
    buffer = bytearray(7)
    assert unpacker.transform(buffer, packed) == (7, 7, Status.DESTINATION_FULL)
    assert bytes(buffer) == bytes(range(0x31, 0x38))
    assert unpacker.transform(buffer, b"", True) == (1, 0, Status.OK)
    assert buffer[0] == 0x38


def test_trailing_padding_septet_without_count() -> None:
    septets = bytes(range(0x41, 0x48))
    packed = transform_bytes(SeptetPacker(), septets)
    assert len(packed) == 7
    assert transform_bytes(SeptetUnpacker(), packed) == septets + b"\x00"
    assert transform_bytes(SeptetUnpacker(septets=7), packed) == septets


def test_septet_count_discards_remaining_input() -> None:
    unpacker = SeptetUnpacker(septets=2)
    buffer = bytearray(16)
    packed = bytes([0x31, 0xD9, 0x8C, 0x56])
    assert unpacker.transform(buffer, packed, True) == (2, 4, Status.OK)
    assert bytes(buffer[:2]) == b"\x31\x32"


def test_negative_septet_count_rejected() -> None:
    with pytest.raises(ValueError):
        SeptetUnpacker(septets=-1)


@pytest.mark.parametrize("count", range(0, 41))
def test_round_trip(count: int) -> None:
    septets = bytes((index * 37 + 11) & 0x7F for index in range(count))
    packed = transform_bytes(SeptetPacker(), septets)
    assert transform_bytes(SeptetUnpacker(septets=count), packed) == septets
    if count % 8 != 7:
        assert transform_bytes(SeptetUnpacker(), packed) == septets


def test_reset_matches_fresh_instance() -> None:
    packed = bytes([0x31, 0xD9, 0x8C, 0x56, 0xB3, 0xDD, 0x70, 0x39])
    unpacker = SeptetUnpacker()
    unpacker.transform(bytearray(16), bytes([0xFF, 0xFF, 0xFF]))
    unpacker.reset()
    assert run_chunked(unpacker, packed, 64, 64) == bytes(range(0x31, 0x3A))


@pytest.mark.parametrize("chunk_size", [1, 2, 7, 8])
@pytest.mark.parametrize("out_size", [1, 2, 64])
def test_chunking_invariance(chunk_size: int, out_size: int) -> None:
    septets = bytes(range(0x20, 0x5A))
    packed = transform_bytes(SeptetPacker(), septets)
    unpacker = SeptetUnpacker(septets=len(septets))
    assert run_chunked(unpacker, packed, chunk_size, out_size) == septets
