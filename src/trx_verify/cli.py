import json
from pathlib import Path

import click

from trx_core.protocol import HEADER_LEN, LINKSYS_DOCUMENTED_OFFSET, LINKSYS_LENGTH_OFFSET
from .const import EXIT_CODES, OUTCOME_VALID
from .logic import verify_image


def render(result: dict) -> list[str]:
    """Human-readable progress lines for a verify_image() result."""
    lines: list[str] = []
    errors = {e["code"]: e for e in result["errors"]}

    if "E_IO_READ" in errors:
        return [f"FATAL: cannot read {result['source']}: {errors['E_IO_READ']['detail']}"]

    header = result["header"]
    if "E_NO_HEADER" in errors:
        e = errors["E_NO_HEADER"]
        lines.append("TRX header not found.")
        lines.append(f"\tMagic expected: {e['expected']:08X}\t Magic found: {e['found']:08X}")
    else:
        lines.append(f"TRX header found: {header['magic']:08X}")
        if "E_SIZE_TOO_SMALL" in errors:
            lines.append("Error: TRX file size is too small")
            lines.append(f"\tFile size is smaller than TRX header size ({HEADER_LEN} bytes)")
        elif "E_LENGTH_MISMATCH" in errors:
            e = errors["E_LENGTH_MISMATCH"]
            lines.append("Error: Expected and actual file length do not match")
            lines.append(f"\tLength expected: {e['expected']}\tLength found: {e['found']}")
        else:
            lines.append(f"TRX file length: {header['len']}")
            if "E_CHECKSUM_MISMATCH" in errors:
                e = errors["E_CHECKSUM_MISMATCH"]
                lines.append("Error: Bad TRX checksum")
                lines.append(f"\tExpected: {e['expected']:08X}\tFound: {e['found']:08X}")
            else:
                lines.append(f"TRX checksum is correct: {header['crc']:08X}")

    if result["output"]:
        lines.append(f"Writing revised binary with TRX header to {result['output']}... done!")
    elif "E_IO_WRITE" in errors:
        e = errors["E_IO_WRITE"]
        lines.append(f"Error: could not write {e['path']}: {e['detail']}")
    elif result["outcome"] == OUTCOME_VALID:
        lines.append("TRX header is valid!")
    return lines


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("-l", "--linksys", is_flag=True,
              help="Write a shortened length field, as some Linksys web GUIs require.")
@click.option("--linksys-offset", type=click.IntRange(min=0), default=LINKSYS_LENGTH_OFFSET,
              show_default=True,
              help=f"Bytes subtracted from the length in Linksys mode "
                   f"(older documentation states {LINKSYS_DOCUMENTED_OFFSET}).")
@click.option("--json", "as_json", is_flag=True, help="Print the result as one JSON line.")
def main(path: Path, linksys: bool, linksys_offset: int, as_json: bool):
    """Verify the TRX header of PATH.

    If the header is missing or wrong, a corrected image is written to
    PATH.trx. The exit status is 0 when valid, 1 on I/O failure, 3 when a new
    header was prepended and 4 when the existing header was rewritten.
    """
    result = verify_image(path, linksys, linksys_offset=linksys_offset)
    if as_json:
        click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    else:
        failed = result["status"] == "FAIL"
        for line in render(result):
            click.echo(line, err=failed and line.startswith(("FATAL", "Error: could not")))
    raise SystemExit(EXIT_CODES[result["outcome"]])


if __name__ == "__main__":
    main()
