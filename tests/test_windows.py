import numpy as np
import pytest

from listops.validation import InvalidInput
from listops.windows import iter_windows, rolling_aggregate, window_aggregate


VALUES = [1, 3, 2, 6, -1, 4, 1, 8, 2]


def test_window_mean_example():
    out = window_aggregate(VALUES, 5, "mean")
    assert out == pytest.approx([2.2, 2.8, 2.4, 3.6, 2.8])


def test_iter_windows_is_lazy_and_drops_partial_window():
    it = iter_windows([1, 2, 3, 4], 3)
    assert next(it) == (1, 2, 3)
    assert list(it) == [(2, 3, 4)]


def test_window_sizes():
    assert list(iter_windows(VALUES, 1)) == [(v,) for v in VALUES]
    assert window_aggregate(VALUES, len(VALUES), sum) == [sum(VALUES)]
    assert window_aggregate(VALUES, len(VALUES) + 1, "mean") == []
    assert window_aggregate([], 3, "mean") == []


def test_callable_receives_window():
    assert window_aggregate(VALUES, 5, max) == [6, 6, 6, 8, 8]
    assert window_aggregate(["a", "b", "c"], 2, "".join) == ["ab", "bc"]


@pytest.mark.parametrize("k", [0, -2])
def test_invalid_k(k):
    with pytest.raises(InvalidInput):
        window_aggregate(VALUES, k, "mean")
    with pytest.raises(InvalidInput):
        rolling_aggregate(VALUES, k)


def test_unknown_fn_name():
    with pytest.raises(InvalidInput):
        window_aggregate(VALUES, 3, "mode")
    with pytest.raises(InvalidInput):
        rolling_aggregate(VALUES, 3, "mode")


@pytest.mark.parametrize("how", ["mean", "sum", "min", "max", "median", "std"])
def test_rolling_matches_scan(how):
    rng = np.random.default_rng(7)
    x = rng.normal(0.0, 1.0, size=40)
    for k in (1, 3, 7, 40):
        a = np.asarray(window_aggregate(x, k, how), dtype=float)
        b = rolling_aggregate(x, k, how)
        assert a.shape == b.shape
        assert np.allclose(a, b)


def test_rolling_short_input():
    assert rolling_aggregate([1.0, 2.0], 3).shape == (0,)


def test_iter_windows_checks_k_at_call_time():
    with pytest.raises(InvalidInput):
        iter_windows([1, 2, 3], 0)


@pytest.mark.parametrize("k", [2.7, True, "3"])
def test_non_int_k_rejected(k):
    with pytest.raises(InvalidInput):
        iter_windows(VALUES, k)
    with pytest.raises(InvalidInput):
        rolling_aggregate(VALUES, k)


def test_numpy_int_k_accepted():
    assert window_aggregate(VALUES, np.int64(5), "mean") == pytest.approx([2.2, 2.8, 2.4, 3.6, 2.8])
