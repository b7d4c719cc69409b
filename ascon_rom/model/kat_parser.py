# ascon_rom/model/kat_parser.py
# reader for .rsp-style Ascon KAT files:
#
#   Count = 1
#   Key = 000102...
#   Nonce = 000102...
#   PT = 00
#   AD =
#   CT = 4C...
#
# one TestVector per Count tag, in file order. Unknown tags (e.g. "Tag") are ignored.
# A non-blank line without '=' is fatal; a non-numeric Count silently becomes 0.

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from ascon_rom.model.helpers import normalize_hex

logger = logging.getLogger(__name__)

# tag -> TestVector attribute
FIELD_TAGS = {
    "Key": "key",
    "Nonce": "nonce",
    "PT": "pt",
    "AD": "ad",
    "CT": "ct",
}


class KatFormatError(ValueError):
    """A non-blank KAT line that is not ``key = value``."""

    def __init__(self, source: str, line_no: int, line: str):
        self.source = source
        self.line_no = line_no
        self.line = line
        super().__init__(f"{source}:{line_no}: expected key=value, got {line!r}")


@dataclass
class TestVector:
    """One KAT case. Hex fields are uppercase without a 0x prefix."""

    __test__ = False  # keep pytest from collecting this as a test class

    count: int = 0
    key: str = ""    # key/nonce kept for potential KAT sanity checks
    nonce: str = ""
    pt: str = ""
    ad: str = ""
    ct: str = ""

    def is_zero(self) -> bool:
        return not (self.key or self.nonce or self.pt or self.ad or self.ct)


def _parse_count(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        logger.debug("non-numeric Count %r, using 0", value)
        return 0


def parse_lines(lines: Iterable[str], source: str = "<input>") -> List[TestVector]:
    vectors: List[TestVector] = []
    v = TestVector()
    ln = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            logger.debug("skipping empty line %d", ln)
            ln += 1
            continue

        tag, sep, value = line.partition("=")
        if not sep:
            raise KatFormatError(source, ln, line)
        tag = tag.strip()
        value = value.strip()

        if tag == "Count":
            # flush previous vector if it has content
            if not v.is_zero():
                vectors.append(v)
            v = TestVector(count=_parse_count(value))
        elif tag in FIELD_TAGS:
            setattr(v, FIELD_TAGS[tag], normalize_hex(value))
        ln += 1

    logger.debug("scanned %d lines from %s", ln, source)
    # push last one
    if not v.is_zero():
        vectors.append(v)
    return vectors


def parse_kat_file(path: Union[str, Path]) -> List[TestVector]:
    # OSError from open/read is left to the caller
    with open(path, "r", encoding="utf-8") as f:
        return parse_lines(f, source=str(path))
