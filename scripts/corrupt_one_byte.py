import sys
from pathlib import Path

from trx_core.protocol import HEADER_LEN


def main():
    args = sys.argv[1:]

    # Default: first payload byte after the TRX header. Magic and length stay
    # intact, so only the checksum check should fail.
    idx = HEADER_LEN
    if "--offset" in args:
        i = args.index("--offset")
        if i + 1 >= len(args):
            raise SystemExit("--offset requires a value")
        idx = int(args[i + 1], 0)
        args = args[:i] + args[i + 2:]

    if len(args) != 1:
        print("Usage: corrupt_one_byte.py <file> [--offset N]")
        raise SystemExit(2)

    p = Path(args[0])
    b = bytearray(p.read_bytes())
    if not 0 <= idx < len(b):
        print(f"Offset {idx} is outside {p} ({len(b)} bytes).")
        raise SystemExit(2)

    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
