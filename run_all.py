#!/usr/bin/env python3
"""run_all.py

Runs the worked exercises once per strategy and writes the outputs under _out/.

Usage:
python run_all.py
"""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys


def run(cmd: list[str]) -> None:
    print("\n$", " ".join(cmd))
    subprocess.run(cmd, check=True)


def main() -> int:
    root = Path(__file__).resolve().parent
    script = str(root / "tools" / "run_exercises.py")
    out_root = root / "_out"

    run([sys.executable, script, "--out-dir", str(out_root / "reference"), "--plot"])
    run([sys.executable, script, "--out-dir", str(out_root / "validated"), "--validate"])
    run([sys.executable, script, "--out-dir", str(out_root / "single_pass_bitmask"),
         "--disjunction-strategy", "single_pass", "--combination-strategy", "bitmask"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
