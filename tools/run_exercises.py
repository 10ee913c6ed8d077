#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from listops.config import OpsConfig, load_config  # noqa: E402
from listops.exercises import WINDOW_K, WINDOW_VALUES, run_exercises, write_report  # noqa: E402
from listops.logger import ExerciseLogger  # noqa: E402
from listops.windows import window_aggregate  # noqa: E402


def _plot_window(out_dir: Path, *, fn: str, k: int) -> Path:
    agg = window_aggregate(WINDOW_VALUES, k, fn)
    # window i covers positions i..i+k-1, plot it at its right edge
    x_agg = list(range(k - 1, k - 1 + len(agg)))

    fig = plt.figure(figsize=(9, 4.5))
    plt.plot(range(len(WINDOW_VALUES)), WINDOW_VALUES, marker="o", linewidth=1.0, label="values")
    plt.plot(x_agg, agg, marker="s", linewidth=2.0, label=f"{fn} (k={k})")
    plt.title(f"Sliding window {fn}", fontsize=14, pad=15)
    plt.xlabel("Position", fontsize=12)
    plt.grid(True, alpha=0.3, linestyle="--")
    plt.legend()
    fig.tight_layout()
    out_path = out_dir / f"window_{fn}.png"
    fig.savefig(out_path, dpi=140)
    plt.close(fig)
    return out_path


def main() -> int:
    ap = argparse.ArgumentParser(description="Run the worked list-algorithm exercises and write a report.")
    ap.add_argument("--out-dir", type=str, default="_out", help="Output directory.")
    ap.add_argument("--config", type=str, default="", help="YAML file with OpsConfig fields.")
    ap.add_argument("--validate", action="store_true", help="Check that sorted inputs are strictly ascending.")
    ap.add_argument("--disjunction-strategy", type=str, default="", help="compose or single_pass.")
    ap.add_argument("--combination-strategy", type=str, default="", help="recursive or bitmask.")
    ap.add_argument("--plot", action="store_true", help="Write a PNG of the window aggregate with matplotlib.")
    args = ap.parse_args()

    if args.config:
        cfg_path = Path(args.config)
        if not cfg_path.exists():
            raise SystemExit(f"Missing config: {cfg_path}")
        cfg = load_config(cfg_path)
    else:
        cfg = OpsConfig()

    changes = {}
    if args.validate:
        changes["validate_inputs"] = True
    if args.disjunction_strategy:
        changes["disjunction_strategy"] = args.disjunction_strategy
    if args.combination_strategy:
        changes["combination_strategy"] = args.combination_strategy
    cfg = cfg.replace(**changes)
    cfg.validate()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    logger = ExerciseLogger(out_dir)
    report = run_exercises(config=cfg, logger=logger)
    paths = write_report(report, out_dir)

    if args.plot:
        _plot_window(out_dir, fn=cfg.window_fn, k=WINDOW_K)

    for r in report.results:
        print(f"{'ok  ' if r.passed else 'FAIL'} {r.family:<13} {r.name}")
    s = report.summary()
    print(f"\n{s['n_passed']}/{s['n']} passed -> {paths['json']}")
    return 0 if report.all_passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
