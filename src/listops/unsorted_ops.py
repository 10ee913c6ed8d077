"""Set operations on arbitrary lists, through hash sets.

Expected O(n + m). Results carry no ordering guarantee beyond being
deterministic: elements come out in first-appearance order, ``list1``
before ``list2``. Elements must be hashable.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Sequence


def _unique(values: Iterable[Any]) -> List[Any]:
    # dict keeps insertion order
    return list(dict.fromkeys(values))


def unsorted_intersection(list1: Sequence[Any], list2: Sequence[Any]) -> List[Any]:
    s2 = set(list2)
    return _unique(x for x in list1 if x in s2)


def unsorted_union(list1: Sequence[Any], list2: Sequence[Any]) -> List[Any]:
    return _unique([*list1, *list2])


def unsorted_difference(list1: Sequence[Any], list2: Sequence[Any]) -> List[Any]:
    s2 = set(list2)
    return _unique(x for x in list1 if x not in s2)


def unsorted_disjunction(list1: Sequence[Any], list2: Sequence[Any]) -> List[Any]:
    s1 = set(list1)
    s2 = set(list2)
    return _unique([*(x for x in list1 if x not in s2), *(y for y in list2 if y not in s1)])


UNSORTED_OPERATIONS: Dict[str, Callable[[Sequence[Any], Sequence[Any]], List[Any]]] = {
    "intersection": unsorted_intersection,
    "difference": unsorted_difference,
    "union": unsorted_union,
    "disjunction": unsorted_disjunction,
}
