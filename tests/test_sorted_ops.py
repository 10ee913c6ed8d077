import numpy as np
import pytest

from listops.config import OpsConfig
from listops.sorted_ops import difference, disjunction, disjunction_single_pass, intersection, union
from listops.validation import InvalidInput, is_strictly_ascending


A = [1, 2, 3, 4, 5, 6, 7]
B = [1, 4, 6, 7, 8, 9, 12]


def _random_sorted(rng: np.random.Generator, n: int, hi: int = 40) -> list:
    return np.unique(rng.integers(0, hi, size=n)).tolist()


def _pairs(n_pairs: int = 50, seed: int = 7):
    rng = np.random.default_rng(seed)
    for _ in range(n_pairs):
        yield _random_sorted(rng, int(rng.integers(0, 20))), _random_sorted(rng, int(rng.integers(0, 20)))


def test_concrete_scenario():
    assert intersection(A, B) == [1, 4, 6, 7]
    assert difference(A, B) == [2, 3, 5]
    assert union(A, B) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 12]
    assert disjunction(A, B) == [2, 3, 5, 8, 9, 12]


def test_both_empty():
    for op in (intersection, difference, union, disjunction):
        assert op([], []) == []


def test_one_side_empty():
    assert difference(A, []) == A
    assert difference([], B) == []
    assert union(A, []) == A
    assert union([], B) == B
    assert intersection(A, []) == []
    assert intersection([], B) == []
    assert disjunction(A, []) == A
    assert disjunction([], B) == B


def test_self_operations():
    assert intersection(A, A) == A
    assert union(A, A) == A
    assert difference(A, A) == []
    assert disjunction(A, A) == []


def test_inputs_not_mutated_and_result_is_fresh():
    a, b = list(A), list(B)
    out = union(a, [])
    assert out == a
    assert out is not a
    difference(a, b)
    disjunction(a, b)
    assert a == A and b == B


def test_matches_set_semantics_on_random_inputs():
    for a, b in _pairs():
        sa, sb = set(a), set(b)
        inter = intersection(a, b)
        diff = difference(a, b)
        uni = union(a, b)
        dis = disjunction(a, b)

        assert inter == sorted(sa & sb)
        assert diff == sorted(sa - sb)
        assert uni == sorted(sa | sb)
        assert dis == sorted(sa ^ sb)
        for out in (inter, diff, uni, dis):
            assert is_strictly_ascending(out)


def test_disjunction_is_symmetric_and_compositional():
    for a, b in _pairs(seed=11):
        assert disjunction(a, b) == disjunction(b, a)
        assert disjunction(a, b) == difference(union(a, b), intersection(a, b))


def test_single_pass_matches_compose():
    for a, b in _pairs(seed=3):
        expected = disjunction(a, b, strategy="compose")
        assert disjunction_single_pass(a, b) == expected
        assert disjunction(a, b, strategy="single_pass") == expected
        assert disjunction(a, b, config=OpsConfig(disjunction_strategy="single_pass")) == expected


def test_unknown_disjunction_strategy_rejected():
    with pytest.raises(InvalidInput):
        disjunction(A, B, strategy="three_way")


def test_works_on_other_sequences():
    assert intersection(range(0, 20, 2), range(0, 20, 3)) == [0, 6, 12, 18]
    assert union(("a", "c"), ("b", "d")) == ["a", "b", "c", "d"]
    assert difference(np.array([1, 2, 3]), np.array([2])) == [1, 3]


def test_validation_off_by_default():
    # unsorted input is accepted silently; the output is unspecified
    intersection([3, 1, 2], [1, 2, 3])


@pytest.mark.parametrize("op", [intersection, difference, union, disjunction])
def test_validation_rejects_unsorted(op):
    with pytest.raises(InvalidInput):
        op([3, 1, 2], B, validate=True)
    with pytest.raises(InvalidInput):
        op(A, [1, 1, 2], validate=True)
    with pytest.raises(InvalidInput):
        op(A, [2, 1], config=OpsConfig(validate_inputs=True))


def test_explicit_validate_false_overrides_config():
    cfg = OpsConfig(validate_inputs=True)
    intersection([2, 1], [1, 2], validate=False, config=cfg)


def test_validation_accepts_sorted():
    assert union(A, B, validate=True) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 12]


def test_non_bool_validate_flag_rejected():
    with pytest.raises(InvalidInput):
        intersection(A, B, validate="false")


def test_config_with_string_flag_rejected():
    with pytest.raises(ValueError, match="validate_inputs"):
        union(A, B, config=OpsConfig(validate_inputs="false"))
