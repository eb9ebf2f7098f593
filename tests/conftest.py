from __future__ import annotations

import pytest

SOI = b"\xff\xd8"
EOI = b"\xff\xd9"

# DC table taken from a camera JPEG
DC0_LENGTHS = [0, 0, 6, 3, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0]
DC0_VALUES = [0, 0, 1, 2, 6, 7, 8, 3, 5, 9, 4, 10]

# JPEG Annex K.3, table K.3 (luminance DC) and K.4 (chrominance DC)
STD_DC_LUMA_LENGTHS = [0, 1, 5, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0]
STD_DC_CHROMA_LENGTHS = [0, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0]
STD_DC_VALUES = list(range(12))


def table_def(spec_byte: int, lengths: list[int], values: list[int]) -> bytes:
    return bytes([spec_byte]) + bytes(lengths) + bytes(values)


def dht_segment(*definitions: bytes, declared_length: int | None = None) -> bytes:
    body = b"".join(definitions)
    if declared_length is None:
        declared_length = len(body) + 2
    return b"\xff\xc4" + declared_length.to_bytes(2, "big") + body


def app0() -> bytes:
    payload = b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
    return b"\xff\xe0" + (len(payload) + 2).to_bytes(2, "big") + payload


@pytest.fixture
def two_table_jpeg() -> bytes:
    seg = dht_segment(
        table_def(0x00, DC0_LENGTHS, DC0_VALUES),
        table_def(0x10, STD_DC_CHROMA_LENGTHS, STD_DC_VALUES),
    )
    return SOI + app0() + seg + EOI
