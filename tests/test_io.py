from pathlib import Path

import pytest

from trx_verify.io import read_image, write_image


def test_write_then_read(tmp_path):
    p = tmp_path / "fw.bin.trx"
    assert write_image(p, b"HDR0" * 8) == 32
    assert read_image(p) == b"HDR0" * 8
    assert not (tmp_path / "fw.bin.trx.tmp").exists()


def test_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    p = tmp_path / "fw.bin.trx"

    def failing_replace(self, target):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(Path, "replace", failing_replace)
    with pytest.raises(OSError):
        write_image(p, b"\x00" * 64)

    assert not (tmp_path / "fw.bin.trx.tmp").exists()
    assert not p.exists()
