"""Run the verify/python programs and compare their stdout."""

import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
VERIFY_DIR = ROOT / "verify" / "python"
BENCH_DIR = ROOT / "bench"

EXPECTED = {
    "01_ackermann_base.py": "931",
    "02_ackermann_3_3.py": "61",
    "03_ackermann_driver.py": "8189",
    "04_ackermann_iterative.py": "50002",
    "05_ackermann_calls.py": "44",
}


def run_script(path):
    proc = subprocess.run(
        [sys.executable, str(path)],
        capture_output=True,
        text=True,
        timeout=120,
    )
    return proc.returncode, proc.stdout.strip()


def test_every_program_has_an_expectation():
    assert sorted(p.name for p in VERIFY_DIR.glob("*.py")) == sorted(EXPECTED)


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_verify_program(name):
    returncode, out = run_script(VERIFY_DIR / name)
    assert returncode == 0
    assert out == EXPECTED[name]


def test_driver_script_prints_result():
    returncode, out = run_script(BENCH_DIR / "ackermann.py")
    assert returncode == 0
    assert out == "8189"
