"""Selection and sorting algorithms."""

import heapq
from typing import Iterable, List, MutableSequence, Sequence


def nth_smallest(values: Iterable[int], n: int) -> int:
    """Return the ``n``-th smallest value (1-based) using a bounded heap."""
    items = list(values)
    if n <= 0 or n > len(items):
        raise ValueError(f"invalid value of n: {n}")
    return heapq.nsmallest(n, items)[-1]


def quick_select(values: Sequence[int], k: int) -> int:
    """Return the value at index ``k`` of the sorted ``values`` without sorting them fully."""
    items = list(values)
    if not 0 <= k < len(items):
        raise IndexError(f"index {k} out of range for {len(items)} values")
    low, high = 0, len(items) - 1
    while True:
        pivot = items[low]
        left, right = low, high
        while left < right:
            while left < right and items[right] >= pivot:
                right -= 1
            while left < right and items[left] <= pivot:
                left += 1
            items[left], items[right] = items[right], items[left]
        items[low], items[left] = items[left], items[low]
        if k == left:
            return items[left]
        if k < left:
            high = left - 1
        else:
            low = left + 1


def _sift_down(values: MutableSequence[int], size: int, index: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and values[child] > values[largest]:
                largest = child
        if largest == index:
            return
        values[largest], values[index] = values[index], values[largest]
        index = largest


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place in ascending order."""
    size = len(values)
    for index in range(size // 2, -1, -1):
        _sift_down(values, size, index)
    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)


def max_digits(values: Iterable[int]) -> int:
    """Return the number of decimal digits of the largest value; 0 for none or zero."""
    largest = max(values, default=0)
    return len(str(abs(largest))) if largest else 0


def radix_sort(values: MutableSequence[int]) -> None:
    """Sort non-negative integers in place with a least-significant-digit radix sort."""
    if any(v < 0 for v in values):
        raise ValueError("radix sort needs non-negative integers")
    base = 1
    for _ in range(max_digits(values)):
        buckets: List[List[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[value // base % 10].append(value)
        values[:] = [v for bucket in buckets for v in bucket]
        base *= 10