from __future__ import annotations

import pytest

from trx_core.crc import checksum
from trx_core.header import TRXHeader, encode_header
from trx_core.protocol import CRC_START, HEADER_LEN, TRX_MAGIC


def make_trx(payload: bytes, flags_vers: int = 0x10000, offsets=(HEADER_LEN, 0, 0)) -> bytes:
    """Wrap payload in a correct TRX header."""
    h = TRXHeader(TRX_MAGIC, HEADER_LEN + len(payload), 0, flags_vers, tuple(offsets))
    h.crc = checksum(encode_header(h)[CRC_START:] + payload)
    return encode_header(h) + payload


class RecordingWriter:
    def __init__(self):
        self.calls: list[tuple[str, bytes]] = []

    def __call__(self, path, data):
        self.calls.append((str(path), bytes(data)))
        return len(data)


@pytest.fixture
def writer():
    return RecordingWriter()
