# ascon_rom/model/helpers.py
# common hex-string helpers shared by the chunk encoder and the byte swapper
# a "row" is one 128-bit ROM word = 16 bytes = 32 hex digits, MSB first

import string
from typing import List

BYTES_PER_ROW = 16
HEX_PER_BYTE = 2
HEX_PER_ROW = BYTES_PER_ROW * HEX_PER_BYTE

ZERO_ROW = "0" * HEX_PER_ROW

_HEX_DIGITS = frozenset(string.hexdigits)


def normalize_hex(s: str) -> str:
    # KAT payloads are compared/emitted in uppercase, no surrounding whitespace
    return s.strip().upper()


def is_hex(s: str) -> bool:
    return all(c in _HEX_DIGITS for c in s)


def pad_hex_to_row(s: str) -> str:
    # right-pad with '0' up to the next row boundary (padding lands in the LSB digits)
    rem = len(s) % HEX_PER_ROW
    if rem == 0:
        return s
    return s + "0" * (HEX_PER_ROW - rem)


def chunk_hex(s: str) -> List[str]:
    # split into 32-digit rows; only the final row is padded
    # empty input -> empty list, callers synthesize the "empty" row themselves
    padded = pad_hex_to_row(s)
    return [padded[i:i + HEX_PER_ROW] for i in range(0, len(padded), HEX_PER_ROW)]
