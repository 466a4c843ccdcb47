from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[2]
SCRIPT = ROOT / "apps" / "run_convert.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    cmd = [sys.executable, str(SCRIPT), *args]
    return subprocess.run(cmd, check=False, capture_output=True, text=True, encoding="utf-8", env=env)


def test_encode_values_with_preset() -> None:
    result = _run("encode", "144.5", "143.75", "--preset", "dozenal")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["100;6", "↋↋;9"]


def test_encode_scientific_with_base() -> None:
    result = _run("encode", "123456789", "--base", "10", "--notation", "scientific", "--max-fraction-length", "4")
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "1.2346e8"


def test_decode_values() -> None:
    result = _run("decode", "84;4↊e6", "--preset", "dozenal")
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "299801088"


def test_conversion_error_exits_2() -> None:
    result = _run("decode", "12x", "--base", "10")
    assert result.returncode == 2
    assert "error:" in result.stderr


def test_base_above_62_exits_2() -> None:
    result = _run("encode", "5", "--base", "63")
    assert result.returncode == 2
    assert "62" in result.stderr


def test_csv_batch(tmp_path: Path) -> None:
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    pd.DataFrame({"price": ["255", "16"], "sym": ["a", "b"]}).to_csv(src, index=False)
    result = _run("encode", "--csv", str(src), "--column", "price", "--base", "16", "--output", str(dst))
    assert result.returncode == 0, result.stderr
    assert "wrote 2 rows" in result.stdout
    out = pd.read_csv(dst, dtype=str)
    assert list(out["price_base16"]) == ["FF", "10"]
