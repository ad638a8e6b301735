import os
import subprocess
import sys
from pathlib import Path

def run(cmd, cwd):
    env = {**os.environ, "PYTHONPATH": str(Path(cwd) / "src")}
    return subprocess.run(cmd, cwd=cwd, env=env, check=False, capture_output=True, text=True)

def test_generate_repair_corrupt_repair(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    raw = tmp_path / "firmware.bin"

    r = run([sys.executable, "tools/make_image.py", str(raw), "--size", "2048"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout
    assert raw.stat().st_size == 2048

    # Raw image: new header prepended
    r = run([sys.executable, "-m", "trx_verify.cli", str(raw)], cwd=repo)
    assert r.returncode == 3, r.stderr + r.stdout
    fixed = tmp_path / "firmware.bin.trx"
    assert fixed.stat().st_size == 2048 + 28

    r = run([sys.executable, "-m", "trx_verify.cli", str(fixed)], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout
    assert "TRX header is valid!" in r.stdout

    # Corrupt and ensure the checksum path rewrites the header
    r = run([sys.executable, "scripts/corrupt_one_byte.py", str(fixed)], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    r = run([sys.executable, "-m", "trx_verify.cli", str(fixed)], cwd=repo)
    assert r.returncode == 4, r.stderr + r.stdout
    assert "Error: Bad TRX checksum" in r.stdout

    r = run([sys.executable, "-m", "trx_verify.cli", str(tmp_path / "firmware.bin.trx.trx")], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

def test_generated_trx_image_is_valid(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    img = tmp_path / "wrapped.trx"

    r = run([sys.executable, "tools/make_image.py", str(img), "--size", "512", "--trx"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    r = run([sys.executable, "-m", "trx_verify.cli", str(img), "--json"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout
    assert '"outcome":"valid"' in r.stdout

def test_corrupt_at_offset_hits_length_field(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    img = tmp_path / "wrapped.trx"

    r = run([sys.executable, "tools/make_image.py", str(img), "--size", "512", "--trx"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    r = run([sys.executable, "scripts/corrupt_one_byte.py", str(img), "--offset", "0x5"], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout
    assert "offset 5" in r.stdout

    r = run([sys.executable, "-m", "trx_verify.cli", str(img)], cwd=repo)
    assert r.returncode == 4, r.stderr + r.stdout
    assert "Error: Expected and actual file length do not match" in r.stdout
