# ascon_rom/hdl/rom_emitter.py
# renders parsed KAT vectors into the ascon_test_rom SystemVerilog module
#
# each ROM row is 135 bits: { empty(1), last(1), pad_bytes(5), data(128) }
# rows are addressed by 13'h<count>_<chunk index>, one case table per payload kind
# (plain / associated / cipher). Output is a pure function of (vectors, swap mode).

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence

from ascon_rom.model.byte_swap import SWAP_NONE, apply_byte_swap
from ascon_rom.model.chunker import Chunk, encode_field
from ascon_rom.model.kat_parser import TestVector

MODULE_NAME = "ascon_test_rom"
INDEX_BITS = 13
ROW_BITS = 135
CIPHER_MAX_CHUNKS = 3


class FieldKind(NamedTuple):
    name: str             # signal prefix: <name>_index / <name>_text
    attr: str             # TestVector attribute holding the hex payload
    cap: Optional[int]    # max rows emitted per vector, None = unlimited
    banner: str


FIELD_KINDS = (
    FieldKind("plain", "pt", None, "PT (Plain)"),
    FieldKind("associated", "ad", None, "AD (Associated)"),
    FieldKind("cipher", "ct", CIPHER_MAX_CHUNKS, "CT (Cipher)"),
)


_HEADER = f"""/**
 *  Module: {MODULE_NAME}
 *  Auto-generated.
 **/
module {MODULE_NAME} (
    // key/nonce ROM removed (constant elsewhere)
    input  [{INDEX_BITS - 1}:0] plain_index,
    input  [{INDEX_BITS - 1}:0] associated_index,
    input  [{INDEX_BITS - 1}:0] cipher_index,
    output logic [{ROW_BITS - 1}:0] plain_text,
    output logic [{ROW_BITS - 1}:0] associated_text,
    output logic [{ROW_BITS - 1}:0] cipher_text
);
"""

_FOOTER = f"""
endmodule : {MODULE_NAME}
"""


def _case_open(kind: FieldKind) -> str:
    rule = f"// ---- {kind.banner} "
    rule += "-" * (79 - len(rule))
    return (
        f"\n{rule}\n"
        f"always_comb begin : {kind.name}_text_mux\n"
        f"    case ({kind.name}_index)\n"
    )


def _case_close(kind: FieldKind) -> str:
    return (
        f"        default: {kind.name}_text = {ROW_BITS}'d0;\n"
        "    endcase\n"
        "end\n"
    )


def format_rom_line(kind: str, count: int, index: int, chunk: Chunk, data_hex: str) -> str:
    empty_bit = "1'b1" if chunk.is_empty_field else "1'b0"
    last_bit = "1'b1" if chunk.is_last else "1'b0"
    addr = f"{INDEX_BITS}'h{count:X}_{index:X}"
    return (
        f"        {addr:<6}: {kind}_text = "
        f"{{{empty_bit}, {last_bit}, 5'd{chunk.pad_bytes}, 128'h{data_hex}}};\n"
    )


def emit_field_lines(kind: str, count: int, hex_field: str, cap: Optional[int], mode: str = SWAP_NONE) -> List[str]:
    lines = []
    for idx, chunk in enumerate(encode_field(hex_field, cap)):
        data_hex = apply_byte_swap(chunk.data, chunk.used_bytes, mode)
        lines.append(format_rom_line(kind, count, idx, chunk, data_hex))
    return lines


def build_case_bodies(vectors: Sequence[TestVector], mode: str = SWAP_NONE) -> Dict[str, List[str]]:
    bodies: Dict[str, List[str]] = {k.name: [] for k in FIELD_KINDS}
    for v in vectors:
        for k in FIELD_KINDS:
            bodies[k.name].extend(emit_field_lines(k.name, v.count, getattr(v, k.attr), k.cap, mode))
    return bodies


def generate_rom(vectors: Sequence[TestVector], mode: str = SWAP_NONE) -> str:
    bodies = build_case_bodies(vectors, mode)
    sections = [_HEADER]
    for k in FIELD_KINDS:
        sections.append(_case_open(k))
        sections.extend(bodies[k.name])
        sections.append(_case_close(k))
    sections.append(_FOOTER)
    return "".join(sections)


@dataclass
class RomSummary:
    vectors: int
    code_bytes: int
    rows: Dict[str, int] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {"vectors": self.vectors, "code_bytes": self.code_bytes, "rows": dict(self.rows)}


def summarize(vectors: Sequence[TestVector], code: str) -> RomSummary:
    rows = {
        k.name: sum(len(encode_field(getattr(v, k.attr), k.cap)) for v in vectors)
        for k in FIELD_KINDS
    }
    return RomSummary(vectors=len(vectors), code_bytes=len(code.encode("utf-8")), rows=rows)
