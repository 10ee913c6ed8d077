"""Enumeration of k-element sub-selections and of the power set.

Two strategies give the same subsets:

- ``recursive``: walk the indices, at each position either take the
  element or skip it, and stop a branch once ``k`` elements are taken.
  The walk keeps its pending branches on an explicit stack.
- ``bitmask``: count from ``0`` to ``2**N - 1`` and map the set bits of
  each mask to element positions.

Inside a subset, elements keep their input order. Both strategies list
subsets of the same size lexicographically by element position.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

from .config import COMBINATION_STRATEGIES, OpsConfig, resolve_config
from .validation import ensure_choice, ensure_int


def count_combinations(n: int, k: int) -> int:
    if k < 0 or n < 0:
        return 0
    return math.comb(n, k)


def _combinations_recursive(values: Sequence[Any], k: int) -> List[List[Any]]:
    """Include/exclude walk over the indices, run on an explicit stack.

    Stack depth does not grow with ``len(values)``. Branches that cannot
    reach ``k`` elements are never pushed.
    """
    res: List[List[Any]] = []
    n = len(values)
    stack: List[Tuple[int, List[Any]]] = [(0, [])]
    while stack:
        start, cur = stack.pop()
        need = k - len(cur)
        if need == 0:
            res.append(cur)
            continue
        # reversed so the smallest index is popped first
        for i in reversed(range(start, n - need + 1)):
            stack.append((i + 1, cur + [values[i]]))
    return res


def _subset_from_mask(values: Sequence[Any], mask: int) -> List[Any]:
    return [values[i] for i in range(len(values)) if mask >> i & 1]


def _combinations_bitmask(values: Sequence[Any], k: int) -> List[List[Any]]:
    n = len(values)
    masks = [mask for mask in range(1 << n) if bin(mask).count("1") == k]
    # same order as the stack walk: lexicographic by element positions
    masks.sort(key=lambda m: [i for i in range(n) if m >> i & 1])
    return [_subset_from_mask(values, mask) for mask in masks]


def combinations(
    values: Sequence[Any],
    k: int,
    *,
    strategy: str | None = None,
    config: OpsConfig | None = None,
) -> List[List[Any]]:
    """All ``k``-element sub-selections of ``values``.

    ``k == 0`` gives ``[[]]`` and ``k > len(values)`` gives ``[]``.
    """
    k = ensure_int(k, "k", minimum=0)
    cfg = resolve_config(config)
    how = ensure_choice(cfg.combination_strategy if strategy is None else strategy, COMBINATION_STRATEGIES, "strategy")
    if k > len(values):
        return []
    if how == "bitmask":
        return _combinations_bitmask(values, k)
    return _combinations_recursive(values, k)


def power_set(
    values: Sequence[Any],
    *,
    strategy: str | None = None,
    config: OpsConfig | None = None,
) -> List[List[Any]]:
    out: List[List[Any]] = []
    for k in range(len(values) + 1):
        out.extend(combinations(values, k, strategy=strategy, config=config))
    return out
