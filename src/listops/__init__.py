"""listops

Textbook list algorithms with their worked exercises.

The package exposes:
- set operations on sorted, duplicate-free sequences by two-pointer co-scan
- the same operations on unsorted lists through hash sets
- sliding-window aggregation, plain and through pandas rolling windows
- k-combinations and power set, recursive or bitmask enumeration
- a runner that checks the worked exercises and writes a report
"""

from .combinations import combinations, count_combinations, power_set
from .config import OpsConfig, load_config
from .exercises import Exercise, ExerciseReport, default_exercises, run_exercises, write_report
from .logger import ExerciseLogger
from .sorted_ops import SORTED_OPERATIONS, difference, disjunction, disjunction_single_pass, intersection, union
from .unsorted_ops import (
    UNSORTED_OPERATIONS,
    unsorted_difference,
    unsorted_disjunction,
    unsorted_intersection,
    unsorted_union,
)
from .validation import InvalidInput, ensure_strictly_ascending, is_strictly_ascending
from .windows import iter_windows, rolling_aggregate, window_aggregate

__version__ = "0.1.0"

__all__ = [
    "intersection",
    "difference",
    "union",
    "disjunction",
    "disjunction_single_pass",
    "SORTED_OPERATIONS",
    "unsorted_intersection",
    "unsorted_difference",
    "unsorted_union",
    "unsorted_disjunction",
    "UNSORTED_OPERATIONS",
    "iter_windows",
    "window_aggregate",
    "rolling_aggregate",
    "combinations",
    "count_combinations",
    "power_set",
    "InvalidInput",
    "is_strictly_ascending",
    "ensure_strictly_ascending",
    "OpsConfig",
    "load_config",
    "ExerciseLogger",
    "Exercise",
    "ExerciseReport",
    "default_exercises",
    "run_exercises",
    "write_report",
]
