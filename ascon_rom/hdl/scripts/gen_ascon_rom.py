#!/usr/bin/env python3
"""Generate a SystemVerilog test ROM from an Ascon KAT file.

The KAT's PT/AD/CT payloads are split into 128-bit rows and written as three
case tables of the ``ascon_test_rom`` module, so AEAD testbenches can replay
the reference vectors without file I/O in simulation.

examples:
  python -m ascon_rom.hdl.scripts.gen_ascon_rom LWC_AEAD_KAT_128_128.txt
  python -m ascon_rom.hdl.scripts.gen_ascon_rom kat.txt rtl/ascon_rom.sv --sb -y
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Iterable

from ascon_rom.model.byte_swap import SWAP_DATA_REVERSE, SWAP_NONE
from ascon_rom.model.kat_parser import KatFormatError, parse_kat_file
from ascon_rom.hdl.rom_emitter import generate_rom, summarize

DEFAULT_OUT_PATH = "ascon_rom.sv"

logger = logging.getLogger(__name__)


def _confirm_overwrite(path: Path) -> bool:
    try:
        answer = input(f"File {path} already exists. Overwrite? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _write_atomic(path: Path, text: str) -> None:
    # render fully in memory, then tmp + rename so a failed write never leaves half a ROM
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(text, encoding="utf-8")
    os.replace(tmp_path, path)


def generate(args: argparse.Namespace) -> int:
    in_path = Path(args.in_path)
    out_path = Path(args.out_path)
    mode = SWAP_DATA_REVERSE if args.swap_bytes else SWAP_NONE

    if out_path.exists() and not args.yes and not _confirm_overwrite(out_path):
        raise SystemExit(f"File {out_path} already exists")

    logger.info("Generating Ascon ROM from %s to %s with swap-bytes: %s", in_path, out_path, args.swap_bytes)

    try:
        vectors = parse_kat_file(in_path)
    except KatFormatError as e:
        raise SystemExit(f"failed to parse KAT file: {e}")
    except OSError as e:
        raise SystemExit(f"failed to read KAT file {in_path}: {e}")
    logger.info("parsed %d vectors", len(vectors))

    code = generate_rom(vectors, mode)
    summary = summarize(vectors, code)
    logger.info("generated %d bytes of code", summary.code_bytes)
    for kind, rows in summary.rows.items():
        logger.debug("  %-10s %d rows", kind, rows)

    try:
        _write_atomic(out_path, code)
    except OSError as e:
        raise SystemExit(f"failed to write {out_path}: {e}")
    logger.info("wrote %s", out_path)

    if args.summary:
        summary_path = Path(args.summary)
        meta = summary.as_dict()
        meta.update({"input": str(in_path), "output": str(out_path), "swap": mode})
        with summary_path.open("w", encoding="utf-8") as f:
            json.dump(meta, f, indent=2)
        logger.info("summary written to %s", summary_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a SystemVerilog ROM from an Ascon KAT file")
    p.add_argument("in_path", metavar="in-path", help="KAT file (Count/Key/Nonce/PT/AD/CT records)")
    p.add_argument("out_path", metavar="out-path", nargs="?", default=DEFAULT_OUT_PATH,
                   help=f"Generated SystemVerilog file (default: {DEFAULT_OUT_PATH})")
    p.add_argument("--swap-bytes", "--sb", dest="swap_bytes", action="store_true",
                   help="Swap the byte order of the data portion (padding unchanged)")
    p.add_argument("-y", "--yes", action="store_true", help="Overwrite out-path without asking")
    p.add_argument("--summary", help="Also write a JSON summary (vector/row counts) to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")
    return generate(args)


if __name__ == "__main__":
    raise SystemExit(main())
