from __future__ import annotations

from pathlib import Path
from typing import Callable
from warnings import warn

from trx_core.crc import checksum
from trx_core.header import TRXHeader, decode_header, encode_header
from trx_core.protocol import (
    CRC_START,
    FALLBACK_FLAGS_VERS,
    FALLBACK_OFFSETS,
    HEADER_LEN,
    LINKSYS_LENGTH_OFFSET,
    OUTPUT_SUFFIX,
    TRX_MAGIC,
)
from .const import (
    ERRORS,
    OUTCOME_IO_ERROR,
    OUTCOME_NEW_HEADER,
    OUTCOME_OVERWRITE,
    OUTCOME_VALID,
)
from .io import read_image, write_image

Writer = Callable[[str, bytes], int]


def output_path(source_path: str | Path) -> str:
    return f"{source_path}{OUTPUT_SUFFIX}"


def _error(code: str, **detail) -> dict:
    return {"code": code, "message": ERRORS[code], **detail}


def _result(status: str, outcome: str, errors: list[dict], source, *, output=None,
            header: TRXHeader | None = None, expected: TRXHeader | None = None) -> dict:
    return {
        "status": status,
        "outcome": outcome,
        "error_count": len(errors),
        "errors": errors,
        "source": str(source),
        "output": output,
        "header": header.to_dict() if header else None,
        "expected": expected.to_dict() if expected else None,
    }


def _prepend_header(data: bytes, expected: TRXHeader) -> bytes:
    """Build header + original bytes; ``expected`` is updated to what was written."""
    expected.len += HEADER_LEN
    buf = bytearray(encode_header(expected))
    buf += data
    expected.crc = checksum(buf[CRC_START:expected.len])
    buf[:HEADER_LEN] = encode_header(expected)
    return bytes(buf)


def _overwrite_header(data: bytes, expected: TRXHeader, linksys_offset: int = 0) -> bytes:
    """Copy ``data`` with its first HEADER_LEN bytes replaced by ``expected``.

    The copy is zero-padded to at least HEADER_LEN bytes. A non-zero
    ``linksys_offset`` shrinks the reported length (and the checksummed range)
    without shrinking the file.
    """
    buf = bytearray(data)
    if len(buf) < HEADER_LEN:
        buf.extend(bytes(HEADER_LEN - len(buf)))
    expected.len = len(buf)
    if linksys_offset:
        reported = expected.len - linksys_offset
        if reported < HEADER_LEN:
            warn(f"Linksys offset {linksys_offset} exceeds image size {expected.len}; "
                 f"reporting {HEADER_LEN} bytes")
            reported = HEADER_LEN
        expected.len = reported
    buf[:HEADER_LEN] = encode_header(expected)
    expected.crc = checksum(buf[CRC_START:expected.len])
    buf[:HEADER_LEN] = encode_header(expected)
    return bytes(buf)


def validate_and_repair(
    file_bytes: bytes,
    source_path: str | Path,
    linksys_mode: bool = False,
    *,
    linksys_offset: int = LINKSYS_LENGTH_OFFSET,
    writer: Writer = write_image,
) -> dict:
    """Check the TRX header of ``file_bytes`` and write ``<source_path>.trx`` if it is wrong.

    At most one check fails per call: a missing magic prepends a fresh header
    built from the fallback values; a bad length or checksum overwrites the
    existing header in a copy of the image. The input is never modified.
    """
    size = len(file_bytes)
    observed = decode_header(bytes(file_bytes[:HEADER_LEN]).ljust(HEADER_LEN, b"\x00"))

    # Assume the header is present until the magic says otherwise.
    expected = TRXHeader(TRX_MAGIC, size, 0, observed.flags_vers, observed.offsets)
    if size > HEADER_LEN:
        expected.crc = checksum(file_bytes[CRC_START:size])

    errors: list[dict] = []
    if observed.magic != expected.magic:
        errors.append(_error("E_NO_HEADER", expected=expected.magic, found=observed.magic))
        expected.flags_vers = FALLBACK_FLAGS_VERS
        expected.offsets = FALLBACK_OFFSETS
        outcome = OUTCOME_NEW_HEADER
        repaired = _prepend_header(file_bytes, expected)
    else:
        if observed.len < HEADER_LEN:
            errors.append(_error("E_SIZE_TOO_SMALL", expected=HEADER_LEN, found=observed.len))
        elif observed.len != expected.len:
            errors.append(_error("E_LENGTH_MISMATCH", expected=expected.len, found=observed.len))
        else:
            if size <= HEADER_LEN:
                expected.crc = checksum(file_bytes[CRC_START:size])
            if observed.crc != expected.crc:
                errors.append(_error("E_CHECKSUM_MISMATCH", expected=expected.crc, found=observed.crc))

        if not errors:
            return _result("PASS", OUTCOME_VALID, errors, source_path,
                           header=observed, expected=expected)

        outcome = OUTCOME_OVERWRITE
        repaired = _overwrite_header(file_bytes, expected, linksys_offset if linksys_mode else 0)

    out = output_path(source_path)
    try:
        writer(out, repaired)
    except OSError as e:
        errors.append(_error("E_IO_WRITE", path=out, detail=str(e)))
        return _result("FAIL", OUTCOME_IO_ERROR, errors, source_path,
                       header=observed, expected=expected)

    return _result("REPAIRED", outcome, errors, source_path, output=out,
                   header=observed, expected=expected)


def verify_image(
    path: str | Path,
    linksys_mode: bool = False,
    *,
    linksys_offset: int = LINKSYS_LENGTH_OFFSET,
    writer: Writer = write_image,
    loader: Callable[[str | Path], bytes] = read_image,
) -> dict:
    try:
        data = loader(path)
    except OSError as e:
        errors = [_error("E_IO_READ", path=str(path), detail=str(e))]
        return _result("FAIL", OUTCOME_IO_ERROR, errors, path)

    return validate_and_repair(data, path, linksys_mode,
                               linksys_offset=linksys_offset, writer=writer)
