from __future__ import annotations

import numbers
from typing import Any, Sequence


class InvalidInput(ValueError):
    """Raised when an input violates the contract of a list operation."""


def _first_violation(seq: Sequence[Any]) -> int | None:
    prev = None
    for i, x in enumerate(seq):
        if i > 0 and not prev < x:
            return i
        prev = x
    return None


def is_strictly_ascending(seq: Sequence[Any]) -> bool:
    return _first_violation(seq) is None


def ensure_strictly_ascending(seq: Sequence[Any], name: str = "a") -> None:
    """Single O(n) pass. Duplicates count as a violation."""
    i = _first_violation(seq)
    if i is not None:
        raise InvalidInput(
            f"{name} must be strictly ascending: {name}[{i - 1}]={seq[i - 1]!r} is not < {name}[{i}]={seq[i]!r}"
        )


def ensure_int(value: int, name: str, *, minimum: int) -> int:
    # bool subclasses int but is rejected
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(f"{name} must be an int, got {value!r}")
    if value < minimum:
        raise InvalidInput(f"{name} must be >= {minimum}, got {value!r}")
    return int(value)


def ensure_positive_int(value: int, name: str) -> int:
    return ensure_int(value, name, minimum=1)


def ensure_choice(value: str, choices: Sequence[str], name: str) -> str:
    if value not in choices:
        raise InvalidInput(f"{name} must be one of {list(choices)}, got {value!r}")
    return value
