from dataclasses import dataclass
from typing import Tuple

from huff import HuffTable
from jpeg_common import TableClass, debug_print
from marker_parsers.dht_parser import DhtParser, DhtSegment
from marker_scanner import find_dht_marker


@dataclass(frozen=True)
class HuffmanTables:
    dc_tables: Tuple[HuffTable, ...]
    ac_tables: Tuple[HuffTable, ...]
    segment: DhtSegment

    def get_table(self, table_class, table_id):
        tables = self.dc_tables if table_class is TableClass.DC else self.ac_tables
        for table in tables:
            if table.id == table_id:
                return table
        raise KeyError(f"no {table_class.name} table with id {table_id}")

    def to_dict(self):
        return {
            "dcTables": [t.to_dict() for t in self.dc_tables],
            "acTables": [t.to_dict() for t in self.ac_tables],
        }


def extract_huffman_tables(data):
    """Parse the first DHT segment of a JPEG buffer into DC and AC tables.

    ``data`` is any bytes-like object starting with SOI. Raises a
    ``jpeg_errors.HuffmanExtractError`` subclass when it cannot be parsed.
    """
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)

    marker_offset = find_dht_marker(data)
    segment = DhtParser().parse(data, marker_offset)
    debug_print(f"{len(segment.tables)} huffman tables in DHT segment of length {segment.declared_length}")
    return HuffmanTables(segment.get_dc_tables(), segment.get_ac_tables(), segment)
