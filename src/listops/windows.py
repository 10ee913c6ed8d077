from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import WINDOW_FUNCTIONS
from .validation import InvalidInput, ensure_positive_int


_REDUCERS: Dict[str, Callable[[np.ndarray], Any]] = {
    "mean": np.mean,
    "sum": np.sum,
    "min": np.min,
    "max": np.max,
    "median": np.median,
    "std": np.std,
}


def _resolve_fn(fn: str | Callable[[Sequence[Any]], Any]) -> Callable[[Sequence[Any]], Any]:
    if callable(fn):
        return fn
    if fn not in _REDUCERS:
        raise InvalidInput(f"fn must be callable or one of {list(WINDOW_FUNCTIONS)}, got {fn!r}")
    reducer = _REDUCERS[fn]
    return lambda w: float(reducer(np.asarray(w, dtype=float)))


def iter_windows(values: Sequence[Any], k: int) -> Iterator[Tuple[Any, ...]]:
    """Lazy iterator over every contiguous length-``k`` window, sliding by one.

    ``k`` is checked at call time. A trailing partial window is never
    produced, so ``k > len(values)`` yields nothing.
    """
    k = ensure_positive_int(k, "k")
    return (tuple(values[start:start + k]) for start in range(len(values) - k + 1))


def window_aggregate(
    values: Sequence[Any],
    k: int,
    fn: str | Callable[[Sequence[Any]], Any] = "mean",
) -> List[Any]:
    """Apply ``fn`` to each window of :func:`iter_windows`.

    ``fn`` is either a callable taking the window tuple, or the name of a
    numpy reduction (mean, sum, min, max, median, std).
    """
    f = _resolve_fn(fn)
    return [f(w) for w in iter_windows(values, k)]


def rolling_aggregate(values: Sequence[float], k: int, how: str = "mean") -> np.ndarray:
    """Same windows as :func:`window_aggregate`, computed with ``pandas.Series.rolling``.

    Only full windows are kept. Standard deviation uses ``ddof=0`` to
    match ``np.std``.
    """
    k = ensure_positive_int(k, "k")
    if how not in _REDUCERS:
        raise InvalidInput(f"how must be one of {list(WINDOW_FUNCTIONS)}, got {how!r}")
    s = pd.Series(np.asarray(values, dtype=float))
    if k > len(s):
        return np.empty(0, dtype=float)
    roll = s.rolling(k, min_periods=k)
    if how == "std":
        out = roll.std(ddof=0)
    else:
        out = getattr(roll, how)()
    return out.iloc[k - 1:].to_numpy(dtype=float)
