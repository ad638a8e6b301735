"""TRX checksum: table-driven reflected CRC-32 without the final complement."""
from __future__ import annotations

import threading

from trx_core.protocol import CRC_INIT, CRC_POLY

_table: list[int] | None = None
_table_lock = threading.Lock()


def build_table() -> list[int]:
    """Return the 256-entry lookup table, building it on first call."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                table = []
                for n in range(256):
                    c = n
                    for _ in range(8):
                        c = (CRC_POLY ^ (c >> 1)) if c & 1 else (c >> 1)
                    table.append(c)
                _table = table
    return _table


def checksum(data: bytes, length: int | None = None) -> int:
    """Checksum the first ``length`` bytes of ``data`` (all of it by default).

    Equivalent to ``zlib.crc32(data) ^ 0xFFFFFFFF``: the accumulator is returned
    as-is, which is what deployed TRX images carry.
    """
    table = build_table()
    if length is not None:
        data = data[: max(length, 0)]
    crc = CRC_INIT
    for b in data:
        crc = table[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return crc
