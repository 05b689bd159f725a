import random

import pytest

from hpclab.sorting import heap_sort, max_digits, nth_smallest, quick_select, radix_sort


def _sample(seed, size=50, low=0, high=1000):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


@pytest.mark.parametrize("n", [1, 5, 50])
def test_nth_smallest(n):
    values = _sample(1)
    assert nth_smallest(values, n) == sorted(values)[n - 1]


@pytest.mark.parametrize("n", [0, -3, 4])
def test_nth_smallest_invalid(n):
    with pytest.raises(ValueError):
        nth_smallest([1, 2, 3], n)


@pytest.mark.parametrize("seed", range(5))
def test_quick_select_every_index(seed):
    values = _sample(seed, size=30, high=20)
    ordered = sorted(values)
    for k in range(len(values)):
        assert quick_select(values, k) == ordered[k]


def test_quick_select_leaves_input_alone():
    values = [5, 3, 9, 1]
    copy = list(values)
    quick_select(values, 2)
    assert values == copy


def test_quick_select_out_of_range():
    with pytest.raises(IndexError):
        quick_select([1, 2], 2)


@pytest.mark.parametrize("seed", range(5))
def test_heap_sort(seed):
    values = _sample(seed, low=-500)
    expected = sorted(values)
    heap_sort(values)
    assert values == expected


def test_heap_sort_empty():
    values = []
    heap_sort(values)
    assert values == []


@pytest.mark.parametrize("seed", range(5))
def test_radix_sort(seed):
    values = _sample(seed, high=99999)
    expected = sorted(values)
    radix_sort(values)
    assert values == expected


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_max_digits():
    assert max_digits([7, 123, 45]) == 3
    assert max_digits([]) == 0


@pytest.mark.parametrize("seed", range(3))
def test_max_digits_matches_length_of_max(seed):
    values = _sample(seed, low=1, high=10**6)
    assert max_digits(values) == len(str(max(values)))