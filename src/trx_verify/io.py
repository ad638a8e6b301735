from __future__ import annotations
from pathlib import Path


def read_image(path: str | Path) -> bytes:
    """Read a whole firmware image from disk."""
    return Path(path).read_bytes()


def write_image(path: str | Path, data: bytes) -> int:
    """Atomic write to target path, creating or truncating it."""
    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        written = tmp.write_bytes(data)
        tmp.replace(p)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    return written
