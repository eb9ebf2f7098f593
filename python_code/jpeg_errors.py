"""Typed errors raised while extracting Huffman tables.

Every error is terminal for the parse that raised it. The CLI maps each error
to the exit code it carries.
"""

from dataclasses import dataclass

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_CORRUPT = 10
EXIT_NO_TABLES = 11


@dataclass(frozen=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Bad arguments or an input that is not a JPEG data URI"),
    ExitCodeInfo(EXIT_CORRUPT, "CORRUPT", "Input is not a JPEG or its DHT segment is corrupt/truncated"),
    ExitCodeInfo(EXIT_NO_TABLES, "NO_TABLES", "Input is a JPEG without a DHT marker"),
)

_EXIT_CODE_BY_CODE = {e.code: e for e in EXIT_CODES}


def exit_code_info(code):
    return _EXIT_CODE_BY_CODE.get(int(code))


class HuffmanExtractError(Exception):
    """Base error for Huffman table extraction."""

    exit_code = EXIT_CORRUPT


class NotAJpegError(HuffmanExtractError):
    pass


class NoHuffmanTableError(HuffmanExtractError):
    exit_code = EXIT_NO_TABLES


class CorruptTableError(HuffmanExtractError):
    pass


class TruncatedSegmentError(HuffmanExtractError):
    pass


class InvalidDataUriError(HuffmanExtractError):
    exit_code = EXIT_USAGE
