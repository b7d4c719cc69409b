# ascon_rom/model/byte_swap.py
# optional in-row byte reordering of the *data* bytes of a 128-bit chunk
#
# only the first used_bytes (MSB end) are touched; the right-side padding stays put.
# a malformed chunk (wrong length / non-hex) is replaced by an all-zero row
# instead of raising, since the chunk encoder never produces one.
# callers are expected to normalize hex case at the parse boundary.

import numpy as np

from ascon_rom.model.helpers import BYTES_PER_ROW, HEX_PER_BYTE, HEX_PER_ROW, ZERO_ROW, is_hex

SWAP_NONE = "none"
SWAP_DATA_REVERSE = "reverse-data"

SWAP_MODES = (SWAP_NONE, SWAP_DATA_REVERSE)


def _reverse_bytes(data_hex: str) -> str:
    b = np.frombuffer(bytes.fromhex(data_hex), dtype=np.uint8)
    return b[::-1].tobytes().hex().upper()


def apply_byte_swap(chunk: str, used_bytes: int, mode: str = SWAP_NONE) -> str:
    """Return ``chunk`` with its first ``used_bytes`` bytes reordered per ``mode``.

    Byte i of the data portion moves to position used_bytes-1-i under
    SWAP_DATA_REVERSE. Unknown modes pass the chunk through unchanged.
    """
    if len(chunk) != HEX_PER_ROW or not is_hex(chunk):
        return ZERO_ROW

    used_bytes = min(max(used_bytes, 0), BYTES_PER_ROW)

    if mode == SWAP_NONE or used_bytes == 0:
        return chunk

    split = used_bytes * HEX_PER_BYTE
    data_hex, pad_hex = chunk[:split], chunk[split:]

    if mode == SWAP_DATA_REVERSE:
        return _reverse_bytes(data_hex) + pad_hex
    return chunk
