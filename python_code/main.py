import argparse
import json
import sys

import jpeg_common
from huffman_extractor import extract_huffman_tables
from jpeg_common import info_print
from jpeg_errors import EXIT_OK, EXIT_USAGE, HuffmanExtractError
from jpeg_source import hex_dump, load_jpeg_bytes


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="jpeg-huffman-extract",
        description="Print the Huffman tables of the first DHT segment of a JPEG.")
    parser.add_argument("source", help="path to a JPEG file, or a data:image/jpeg;base64 URI")
    parser.add_argument("--json", action="store_true", help="print one JSON document instead of a summary")
    parser.add_argument("--hex", action="store_true", help="also print the DHT segment bytes")
    parser.add_argument("--log-level", choices=["quiet", "info", "debug"], default="info")
    return parser


def print_table(table):
    info_print(f"{table.table_class.name} table {table.id} (idx={table.byte_offset}, "
               f"length={table.segment_byte_length})")
    info_print("  code lengths:", list(table.code_lengths))
    info_print("  values:", list(table.values))
    for code, value in table.get_tree().get_codes():
        info_print(f"    {code:>16} -> {value:#04x}")


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    jpeg_common.log_level = args.log_level

    try:
        data = load_jpeg_bytes(args.source)
        tables = extract_huffman_tables(data)
    except OSError as e:
        print(f"jpeg-huffman-extract: cannot read {args.source}: {e}", file=sys.stderr)
        return EXIT_USAGE
    except HuffmanExtractError as e:
        print(f"jpeg-huffman-extract: {type(e).__name__}: {e}", file=sys.stderr)
        return e.exit_code

    segment = tables.segment
    segment_bytes = data[segment.marker_offset: segment.marker_offset + 2 + segment.declared_length]
    if args.json:
        doc = tables.to_dict()
        if args.hex:
            doc["segmentHex"] = hex_dump(segment_bytes)
        print(json.dumps(doc))
        return EXIT_OK

    info_print(f"DHT segment at idx={segment.marker_offset}, length={segment.declared_length}")
    if args.hex:
        info_print(" ".join(hex_dump(segment_bytes)))
    for table in tables.dc_tables + tables.ac_tables:
        print_table(table)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
