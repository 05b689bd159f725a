import pytest

from hpclab.reduce import (
    Strategy,
    reduce_grain_size,
    reduce_num_tasks,
    reduce_serial,
    reduce_with,
)


def test_single_term_series():
    assert reduce_serial(1) == 0
    assert reduce_serial(2) == 0


def test_small_series():
    assert reduce_serial(3) == 2


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("n", [1, 2, 3, 50, 1000, 250_001])
def test_strategies_agree(strategy, n):
    assert reduce_with(strategy, n) == reduce_serial(n)


def test_series_is_increasing():
    values = [reduce_serial(n) for n in range(1, 40)]
    assert values == sorted(values)


@pytest.mark.parametrize("grain", [1, 7, 100])
def test_grain_size_independent(grain):
    assert reduce_grain_size(500, grain) == reduce_serial(500)


@pytest.mark.parametrize("tasks", [1, 3, 50, 600])
def test_num_tasks_independent(tasks):
    assert reduce_num_tasks(500, tasks) == reduce_serial(500)


def test_wraps_to_64_bits():
    n = 4_000_000
    result = reduce_with(Strategy.SIMD, n)
    assert 0 <= result < 2**64
    assert reduce_with(Strategy.NUM_TASKS_SIMD, n) == result
    assert reduce_serial(n) == result


@pytest.mark.parametrize("n", [0, -5])
def test_invalid_n(n):
    with pytest.raises(ValueError):
        reduce_serial(n)
    with pytest.raises(ValueError):
        reduce_with(Strategy.SIMD, n)


def test_invalid_grain_size():
    with pytest.raises(ValueError):
        reduce_grain_size(10, 0)


def test_invalid_num_tasks():
    with pytest.raises(ValueError):
        reduce_num_tasks(10, 0)


def test_unknown_strategy():
    with pytest.raises(ValueError):
        reduce_with("bogus", 10)