from dataclasses import dataclass
from typing import Tuple

from jpeg_common import *
from jpeg_errors import CorruptTableError, TruncatedSegmentError
from marker_parsers.i_parser import IParser
from huff import HuffTable, generate_huff_tree, kraft_sum


@dataclass(frozen=True)
class DhtSegment:
    marker_offset: int
    # includes the two length bytes, excludes the marker
    declared_length: int
    tables: Tuple[HuffTable, ...]

    def get_dc_tables(self):
        return tuple(t for t in self.tables if t.table_class is TableClass.DC)

    def get_ac_tables(self):
        return tuple(t for t in self.tables if t.table_class is TableClass.AC)


class DhtParser(IParser):
    max_symbol_length = MAX_CODE_LENGTH
    max_num_symbols = MAX_NUM_SYMBOLS

    def parse(self, data, marker_offset):
        debug_print("DHT parser started")
        length_idx = marker_offset + len(DHT_MARKER)
        if length_idx + 2 > len(data):
            raise TruncatedSegmentError(f"DHT marker at idx={marker_offset} has no length field")
        declared_length = int.from_bytes(data[length_idx: length_idx + 2], byteorder='big')
        if declared_length < 2:
            raise CorruptTableError(f"Illegal DHT segment length {declared_length}")

        start_idx = length_idx + 2
        end_idx = start_idx + declared_length - 2

        def take(idx, n, what):
            if idx + n > len(data):
                raise TruncatedSegmentError(
                    f"{what} at idx={idx} needs {n} bytes, buffer ends at {len(data)}")
            if idx + n > end_idx:
                raise TruncatedSegmentError(
                    f"{what} at idx={idx} runs past the declared segment end {end_idx}")
            return data[idx: idx + n]

        tables = []
        idx = start_idx
        while idx < end_idx:
            # Start parsing a new table
            ht_info = take(idx, 1, "Table specification")[0]
            table_num = ht_info & 0x0F
            if table_num > MAX_TABLE_ID:
                raise CorruptTableError(f"Huffman table at idx={idx} has illegal id {table_num}")
            table_class = TableClass.from_spec_byte(ht_info)

            symbols_of_length = tuple(take(idx + 1, self.max_symbol_length, "Code lengths"))
            symbols_part_length = sum(symbols_of_length)
            if symbols_part_length > self.max_num_symbols:
                raise CorruptTableError(f"Huffman table at idx={idx} has {symbols_part_length} symbols")
            if kraft_sum(symbols_of_length) > 1 << self.max_symbol_length:
                raise CorruptTableError(f"Huffman table at idx={idx} has more codes than fit its lengths")

            symbols_part = tuple(take(idx + 1 + self.max_symbol_length, symbols_part_length, "Values"))
            huff_table = HuffTable(table_class, table_num, idx, symbols_of_length, symbols_part,
                                   generate_huff_tree(symbols_of_length, symbols_part))
            debug_print(f"{table_class.name} table {table_num} at idx={idx}: {symbols_part_length} symbols")
            tables.append(huff_table)
            idx += huff_table.segment_byte_length

        debug_print("DHT parser ended successfully")
        return DhtSegment(marker_offset, declared_length, tuple(tables))
