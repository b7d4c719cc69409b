# ascon_rom/model/chunker.py
# splits one hex payload field into 128-bit ROM rows
#
# padding rules:
# - the final row is right-padded with '0' (least significant digits)
# - pad_bytes is computed once from the final row and stamped on EVERY row of the
#   field; the RTL expects a constant pad length across a multi-row run
# - an empty field becomes a single all-zero row with pad_bytes = 16
# - an optional cap keeps only the first `cap` rows (used for ciphertext)

from dataclasses import dataclass
from typing import List, Optional

from ascon_rom.model.helpers import (
    BYTES_PER_ROW,
    HEX_PER_BYTE,
    HEX_PER_ROW,
    ZERO_ROW,
    chunk_hex,
    normalize_hex,
)

EMPTY_PAD_BYTES = BYTES_PER_ROW


@dataclass(frozen=True)
class Chunk:
    data: str             # 32 hex digits, meaningful bytes first
    used_bytes: int       # 0..16
    is_last: bool
    is_empty_field: bool
    pad_bytes: int        # field-level, same value on every chunk


def pad_bytes_for_field(field: str) -> int:
    # bytes of padding needed to bring the field to a multiple of 128 bits
    s = field.strip()
    if not s:
        return EMPTY_PAD_BYTES
    rem = len(s) % HEX_PER_ROW
    if rem == 0:
        return 0
    return (HEX_PER_ROW - rem) // HEX_PER_BYTE


def encode_field(field: str, cap: Optional[int] = None) -> List[Chunk]:
    s = normalize_hex(field)
    if not s:
        return [Chunk(ZERO_ROW, 0, True, True, EMPTY_PAD_BYTES)]

    rows = chunk_hex(s)
    if cap is not None and len(rows) > cap:
        rows = rows[:cap]

    pb = pad_bytes_for_field(s)
    last = len(rows) - 1
    out = []
    for idx, row in enumerate(rows):
        used = BYTES_PER_ROW - pb if idx == last else BYTES_PER_ROW
        out.append(Chunk(row, used, idx == last, False, pb))
    return out
