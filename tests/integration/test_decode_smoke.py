# tests/integration/test_decode_smoke.py
import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]  # project root


def _run(*argv, stdin=None):
    cmd = [sys.executable, "main.py", *argv]
    return subprocess.run(cmd, cwd=ROOT, input=stdin, capture_output=True,
                          text=True, check=False, timeout=20)


def test_decode_fixture_frame_smoke():
    proc = _run("056408c40a000100fc42c0c00e7edc")
    assert proc.returncode == 0, proc.stderr

    report = json.loads(proc.stdout)
    assert report["DataLinkLayer"]["Control"]["Function Code"] == "Unconfirmed User Data (4)"
    assert report["ApplicationLayer"]["Function Code"] == "Warm Restart (0xe)"


def test_stdin_stream_skips_bad_frames():
    frames = "ffffffffffffffffffffffff\n05640a4401000a006e25c1c0810001c4fd\n"
    proc = _run("--input", "-", "--format", "text", "--strict", stdin=frames)
    assert proc.returncode == 1
    assert "Function Code: Response (0x81)" in proc.stdout
    assert "Decoded 1 frame(s), skipped 1" in proc.stderr
    assert "not DNP3" in proc.stderr
