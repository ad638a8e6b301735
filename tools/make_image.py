"""Generate a synthetic firmware image, raw or wrapped in a valid TRX header."""
import os
from pathlib import Path

from trx_core.crc import checksum
from trx_core.header import TRXHeader, encode_header
from trx_core.protocol import CRC_START, HEADER_LEN, TRX_MAGIC

# Random bytes could start with the magic by chance; raw images must not.
RAW_PREFIX = b"\x27\x05\x19\x56"  # uImage magic, as a stock kernel would begin


def generate_image(out_path: str, size: int = 4096, trx: bool = False) -> Path:
    payload = RAW_PREFIX + os.urandom(max(size - len(RAW_PREFIX), 0))
    payload = payload[:size]

    if trx:
        total = HEADER_LEN + len(payload)
        h = TRXHeader(TRX_MAGIC, total, 0, 0x10000, (HEADER_LEN, 0, 0))
        body = encode_header(h)[CRC_START:] + payload
        h.crc = checksum(body)
        blob = encode_header(h) + payload
    else:
        blob = payload

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(blob)
    print(f"GENERATED: {out} ({len(blob)} bytes)")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_image.py OUT [--size N] [--trx]

    args = [a for a in sys.argv[1:] if a]

    trx = "--trx" in args
    args = [a for a in args if a != "--trx"]

    size = 4096
    if "--size" in args:
        i = args.index("--size")
        if i + 1 >= len(args):
            raise SystemExit("--size requires a value")
        size = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    if not args:
        raise SystemExit("Usage: make_image.py OUT [--size N] [--trx]")

    generate_image(args[0], size=size, trx=trx)
