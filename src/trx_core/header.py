"""TRX header layout."""
from __future__ import annotations

import struct
from dataclasses import dataclass, field

from trx_core.protocol import HEADER_FMT, HEADER_LEN


@dataclass
class TRXHeader:
    magic: int
    len: int
    crc: int
    flags_vers: int
    offsets: tuple[int, int, int] = field(default=(0, 0, 0))

    def to_dict(self) -> dict:
        return {
            "magic": self.magic,
            "len": self.len,
            "crc": self.crc,
            "flags_vers": self.flags_vers,
            "offsets": list(self.offsets),
        }


def decode_header(buf: bytes) -> TRXHeader:
    """Decode the first HEADER_LEN bytes of ``buf``."""
    if len(buf) < HEADER_LEN:
        raise ValueError(f"Need {HEADER_LEN} bytes for a TRX header, got {len(buf)}")
    magic, length, crc, flags_vers, o0, o1, o2 = struct.unpack_from(HEADER_FMT, buf)
    return TRXHeader(magic, length, crc, flags_vers, (o0, o1, o2))


def encode_header(h: TRXHeader) -> bytes:
    return struct.pack(HEADER_FMT, h.magic, h.len, h.crc, h.flags_vers, *h.offsets)
