"""Worked exercises with their expected answers, and a runner.

Each exercise is a zero-argument call plus the answer the textbook gives
for it. :func:`run_exercises` evaluates them, compares the results and
builds a report that :func:`write_report` stores as JSON and CSV.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import numpy as np
import pandas as pd

from .combinations import combinations, count_combinations, power_set
from .config import OpsConfig, resolve_config
from .logger import ExerciseLogger
from .sorted_ops import SORTED_OPERATIONS
from .unsorted_ops import UNSORTED_OPERATIONS
from .validation import InvalidInput, ensure_choice
from .windows import rolling_aggregate, window_aggregate


REPORT_VERSION = "0.1.0"
COMPARE_MODES = ("exact", "float", "set", "set_of_sets")

SORTED_A = [1, 2, 3, 4, 5, 6, 7]
SORTED_B = [1, 4, 6, 7, 8, 9, 12]
SORTED_EXPECTED = {
    "intersection": [1, 4, 6, 7],
    "difference": [2, 3, 5],
    "union": [1, 2, 3, 4, 5, 6, 7, 8, 9, 12],
    "disjunction": [2, 3, 5, 8, 9, 12],
}

WINDOW_VALUES = [1, 3, 2, 6, -1, 4, 1, 8, 2]
WINDOW_K = 5

UNSORTED_1 = [5, 1, 4, 9, 2]
UNSORTED_2 = [2, 7, 5, 3]
UNSORTED_EXPECTED = {
    "intersection": [5, 2],
    "difference": [1, 4, 9],
    "union": [5, 1, 4, 9, 2, 7, 3],
    "disjunction": [1, 4, 9, 7, 3],
}


@dataclass(frozen=True)
class Exercise:
    name: str
    family: str
    call: Callable[[], Any]
    expected: Any
    compare: str = "exact"


@dataclass(frozen=True)
class ExerciseResult:
    name: str
    family: str
    compare: str
    passed: bool
    result: Any
    expected: Any


@dataclass(frozen=True)
class ExerciseReport:
    version: str
    created_utc: str
    config: Dict[str, Any]
    results: List[ExerciseResult] = field(default_factory=list)

    @property
    def n_passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def all_passed(self) -> bool:
        return self.n_passed == len(self.results)

    def summary(self) -> Dict[str, Any]:
        return {
            "n": len(self.results),
            "n_passed": self.n_passed,
            "n_failed": len(self.results) - self.n_passed,
            "all_passed": self.all_passed,
        }


def matches(result: Any, expected: Any, *, compare: str = "exact", tol: float = 1e-9) -> bool:
    """Compare an exercise result with its expected answer.

    - exact: plain equality, order included
    - float: same length and element-wise close within ``tol``
    - set: same elements, no duplicates in ``result``, order ignored
    - set_of_sets: same subsets, order ignored at both levels
    """
    ensure_choice(compare, COMPARE_MODES, "compare")
    if compare == "exact":
        return list(result) == list(expected)
    if compare == "float":
        r = np.asarray(result, dtype=float)
        e = np.asarray(expected, dtype=float)
        return r.shape == e.shape and bool(np.allclose(r, e, rtol=0.0, atol=tol))
    if compare == "set":
        return len(set(result)) == len(result) and set(result) == set(expected)
    got = [frozenset(s) for s in result]
    return len(set(got)) == len(got) and set(got) == {frozenset(s) for s in expected}


def default_exercises(config: OpsConfig | None = None) -> List[Exercise]:
    cfg = resolve_config(config)
    out: List[Exercise] = []

    for name, op in SORTED_OPERATIONS.items():
        out.append(
            Exercise(
                name=f"sorted_{name}",
                family="sorted_ops",
                call=lambda op=op: op(SORTED_A, SORTED_B, config=cfg),
                expected=SORTED_EXPECTED[name],
            )
        )

    out.append(
        Exercise(
            name="window_mean",
            family="windows",
            call=lambda: window_aggregate(WINDOW_VALUES, WINDOW_K, "mean"),
            expected=[2.2, 2.8, 2.4, 3.6, 2.8],
            compare="float",
        )
    )
    out.append(
        Exercise(
            name="window_max",
            family="windows",
            call=lambda: window_aggregate(WINDOW_VALUES, WINDOW_K, max),
            expected=[6, 6, 6, 8, 8],
        )
    )
    # cross-check of the scan against pandas rolling windows
    out.append(
        Exercise(
            name=f"window_{cfg.window_fn}_rolling",
            family="windows",
            call=lambda: window_aggregate(WINDOW_VALUES, WINDOW_K, cfg.window_fn),
            expected=rolling_aggregate(WINDOW_VALUES, WINDOW_K, cfg.window_fn).tolist(),
            compare="float",
        )
    )

    out.append(
        Exercise(
            name="combinations_3_choose_2",
            family="combinations",
            call=lambda: combinations([1, 2, 3], 2, config=cfg),
            expected=[[1, 2], [1, 3], [2, 3]],
            compare="set_of_sets",
        )
    )
    out.append(
        Exercise(
            name="power_set_3",
            family="combinations",
            call=lambda: power_set([1, 2, 3], config=cfg),
            expected=[[], [1], [2], [3], [1, 2], [1, 3], [2, 3], [1, 2, 3]],
            compare="set_of_sets",
        )
    )
    out.append(
        Exercise(
            name="combinations_count_5_choose_3",
            family="combinations",
            call=lambda: [len(combinations(list(range(5)), 3, config=cfg))],
            expected=[count_combinations(5, 3)],
        )
    )

    for name, op in UNSORTED_OPERATIONS.items():
        out.append(
            Exercise(
                name=f"unsorted_{name}",
                family="unsorted_ops",
                call=lambda op=op: op(UNSORTED_1, UNSORTED_2),
                expected=UNSORTED_EXPECTED[name],
                compare="set",
            )
        )
    return out


def run_exercises(
    exercises: Sequence[Exercise] | None = None,
    *,
    config: OpsConfig | None = None,
    logger: ExerciseLogger | None = None,
) -> ExerciseReport:
    cfg = resolve_config(config)
    cfg.validate()
    if exercises is None:
        exercises = default_exercises(cfg)

    names = [ex.name for ex in exercises]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise InvalidInput(f"Duplicate exercise names: {dupes}")

    if logger is not None:
        logger.log("run_start", {"n": len(exercises), "config": cfg.to_dict()})

    results: List[ExerciseResult] = []
    for ex in exercises:
        result = ex.call()
        passed = matches(result, ex.expected, compare=ex.compare, tol=cfg.float_tol)
        results.append(
            ExerciseResult(
                name=ex.name,
                family=ex.family,
                compare=ex.compare,
                passed=passed,
                result=result,
                expected=ex.expected,
            )
        )
        if logger is not None:
            logger.log("exercise", {"name": ex.name, "family": ex.family, "passed": passed, "result": result})

    report = ExerciseReport(
        version=REPORT_VERSION,
        created_utc=datetime.now(timezone.utc).isoformat(),
        config=cfg.to_dict(),
        results=results,
    )
    if logger is not None:
        logger.log("run_end", report.summary())
    return report


def _json_default(obj: Any) -> Any:
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    return str(obj)


def report_frame(report: ExerciseReport) -> pd.DataFrame:
    rows = [
        {
            "name": r.name,
            "family": r.family,
            "compare": r.compare,
            "passed": bool(r.passed),
            "result": json.dumps(r.result, default=_json_default),
            "expected": json.dumps(r.expected, default=_json_default),
        }
        for r in report.results
    ]
    return pd.DataFrame(rows, columns=["name", "family", "compare", "passed", "result", "expected"])


def write_report(report: ExerciseReport, out_dir: str | Path) -> Dict[str, Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    payload = {
        "version": report.version,
        "created_utc": report.created_utc,
        "config": report.config,
        "summary": report.summary(),
        "results": [
            {
                "name": r.name,
                "family": r.family,
                "compare": r.compare,
                "passed": r.passed,
                "result": r.result,
                "expected": r.expected,
            }
            for r in report.results
        ],
    }
    json_path = out_dir / "exercise_report.json"
    json_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False, default=_json_default),
        encoding="utf-8",
    )
    csv_path = out_dir / "exercise_summary.csv"
    report_frame(report).to_csv(csv_path, index=False)
    return {"json": json_path, "csv": csv_path}
