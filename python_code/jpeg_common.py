from enum import Enum

log_level = "info"

SOI_MARKER = b'\xFF\xD8'
DHT_MARKER = b'\xFF\xC4'

MAX_CODE_LENGTH = 16
MAX_NUM_SYMBOLS = 256
MAX_TABLE_ID = 3


class TableClass(Enum):
    DC = 0
    AC = 1

    @staticmethod
    def from_spec_byte(ht_info):
        # any non-zero high nibble is an AC table
        return TableClass.DC if (ht_info >> 4) == 0 else TableClass.AC


def debug_print(*arg, newline=True):
    if log_level == "debug":
        if newline:
            print(*arg)
        if not newline:
            print(*arg, end=" ")


def info_print(*arg, newline=True):
    if log_level == "info" or log_level == "debug":
        if newline:
            print(*arg)
        if not newline:
            print(*arg, end=" ")
