"""Set operations on ascending, duplicate-free sequences.

Each operation walks both inputs once with two cursors and compares the
current heads. Inputs are never converted to hash sets and never
mutated; the result is always a fresh list.

Precondition: both inputs are strictly ascending. It is not checked
unless ``validate=True`` (or ``OpsConfig.validate_inputs``) is set.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from .config import DISJUNCTION_STRATEGIES, OpsConfig, resolve_config
from .validation import InvalidInput, ensure_choice, ensure_strictly_ascending


def _check(a: Sequence[Any], b: Sequence[Any], validate: bool | None, config: OpsConfig | None) -> None:
    if validate is not None and not isinstance(validate, bool):
        raise InvalidInput(f"validate must be a bool or None, got {validate!r}")
    flag = resolve_config(config).validate_inputs if validate is None else validate
    if flag:
        ensure_strictly_ascending(a, "a")
        ensure_strictly_ascending(b, "b")


def intersection(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    validate: bool | None = None,
    config: OpsConfig | None = None,
) -> List[Any]:
    _check(a, b, validate, config)
    out: List[Any] = []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        x, y = a[i], b[j]
        if x < y:
            i += 1
        elif y < x:
            j += 1
        else:
            out.append(x)
            i += 1
            j += 1
    return out


def difference(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    validate: bool | None = None,
    config: OpsConfig | None = None,
) -> List[Any]:
    """Elements of ``a`` that are not in ``b``."""
    _check(a, b, validate, config)
    out: List[Any] = []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        x, y = a[i], b[j]
        if x < y:
            out.append(x)
            i += 1
        elif y < x:
            j += 1
        else:
            i += 1
            j += 1
    out.extend(a[i:])
    return out


def union(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    validate: bool | None = None,
    config: OpsConfig | None = None,
) -> List[Any]:
    _check(a, b, validate, config)
    out: List[Any] = []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        x, y = a[i], b[j]
        if x < y:
            out.append(x)
            i += 1
        elif y < x:
            out.append(y)
            j += 1
        else:
            out.append(x)
            i += 1
            j += 1
    # at most one of these is non-empty
    out.extend(a[i:])
    out.extend(b[j:])
    return out


def disjunction_single_pass(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    validate: bool | None = None,
    config: OpsConfig | None = None,
) -> List[Any]:
    """Symmetric difference in one co-scan: emit the smaller head, skip equal heads."""
    _check(a, b, validate, config)
    out: List[Any] = []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        x, y = a[i], b[j]
        if x < y:
            out.append(x)
            i += 1
        elif y < x:
            out.append(y)
            j += 1
        else:
            i += 1
            j += 1
    out.extend(a[i:])
    out.extend(b[j:])
    return out


def disjunction(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    strategy: str | None = None,
    validate: bool | None = None,
    config: OpsConfig | None = None,
) -> List[Any]:
    """Elements present in exactly one of ``a`` and ``b``.

    With the default ``"compose"`` strategy this is
    ``difference(union(a, b), intersection(a, b))``, which costs two
    extra passes. ``"single_pass"`` gives the same output in one scan.
    """
    cfg = resolve_config(config)
    how = ensure_choice(cfg.disjunction_strategy if strategy is None else strategy, DISJUNCTION_STRATEGIES, "strategy")
    _check(a, b, validate, cfg)
    if how == "single_pass":
        return disjunction_single_pass(a, b, validate=False)
    return difference(union(a, b, validate=False), intersection(a, b, validate=False), validate=False)


SORTED_OPERATIONS: Dict[str, Callable[..., List[Any]]] = {
    "intersection": intersection,
    "difference": difference,
    "union": union,
    "disjunction": disjunction,
}
