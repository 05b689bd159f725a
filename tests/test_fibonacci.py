import pytest

from hpclab.fibonacci import fib, parallel_fib


def test_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_small_value():
    assert fib(10) == 55


def test_negative_returns_itself():
    assert fib(-3) == -3
    assert parallel_fib(-3) == -3


@pytest.mark.parametrize("n", range(2, 20))
def test_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


@pytest.mark.parametrize("n, threshold", [(25, 20), (12, 2), (15, 5), (10, 20)])
def test_parallel_matches_serial(n, threshold):
    assert parallel_fib(n, threshold) == fib(n)