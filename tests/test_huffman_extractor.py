from __future__ import annotations

import pytest

from conftest import DC0_LENGTHS, DC0_VALUES, EOI, SOI, STD_DC_VALUES, app0, dht_segment, table_def
from huffman_extractor import extract_huffman_tables
from jpeg_common import TableClass
from jpeg_errors import NoHuffmanTableError, NotAJpegError
from marker_scanner import find_dht_marker


def test_find_dht_marker_offset(two_table_jpeg: bytes) -> None:
    assert find_dht_marker(two_table_jpeg) == 20


def test_extract_partitions_tables(two_table_jpeg: bytes) -> None:
    tables = extract_huffman_tables(two_table_jpeg)
    assert len(tables.dc_tables) == 1
    assert len(tables.ac_tables) == 1
    dc, ac = tables.dc_tables[0], tables.ac_tables[0]
    assert (dc.table_class, dc.id, dc.byte_offset) == (TableClass.DC, 0, 24)
    assert (ac.table_class, ac.id, ac.byte_offset) == (TableClass.AC, 0, 53)
    assert ac.values == tuple(STD_DC_VALUES)
    assert tables.segment.declared_length == 60
    assert tables.get_table(TableClass.AC, 0) is ac
    with pytest.raises(KeyError):
        tables.get_table(TableClass.DC, 3)


def test_not_a_jpeg() -> None:
    data = b"\x89PNG\r\n\x1a\n" + dht_segment(table_def(0x00, DC0_LENGTHS, DC0_VALUES))
    with pytest.raises(NotAJpegError):
        extract_huffman_tables(data)


@pytest.mark.parametrize("data", [b"", b"\xff"])
def test_too_short_for_soi(data: bytes) -> None:
    with pytest.raises(NotAJpegError):
        extract_huffman_tables(data)


def test_no_dht_marker() -> None:
    with pytest.raises(NoHuffmanTableError):
        extract_huffman_tables(SOI + app0() + EOI)


def test_only_first_dht_segment_is_read() -> None:
    first = dht_segment(table_def(0x00, DC0_LENGTHS, DC0_VALUES))
    second = dht_segment(table_def(0x01, DC0_LENGTHS, DC0_VALUES), table_def(0x11, DC0_LENGTHS, DC0_VALUES))
    tables = extract_huffman_tables(SOI + first + second + EOI)
    assert [t.id for t in tables.dc_tables] == [0]
    assert tables.ac_tables == ()


def test_accepts_memoryview(two_table_jpeg: bytes) -> None:
    assert extract_huffman_tables(memoryview(two_table_jpeg)) == extract_huffman_tables(two_table_jpeg)


def test_determinism(two_table_jpeg: bytes) -> None:
    assert extract_huffman_tables(two_table_jpeg) == extract_huffman_tables(bytes(two_table_jpeg))


def test_to_dict_record_shape(two_table_jpeg: bytes) -> None:
    doc = extract_huffman_tables(two_table_jpeg).to_dict()
    dc = doc["dcTables"][0]
    assert set(dc) == {
        "tableClass", "id", "byteOffset", "segmentByteLength", "codeLengths", "codeLengthSum", "values", "tree"}
    assert dc["tableClass"] == "DC"
    assert dc["codeLengthSum"] == 12
    assert dc["segmentByteLength"] == 29
    assert doc["acTables"][0]["tableClass"] == "AC"
    # first two 3-bit codes are both symbol 0
    assert dc["tree"][0][0] == [0, 0]
