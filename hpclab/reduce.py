"""Sum of ``i * (i + 1)`` over ``0 <= i < n - 1`` with several work-splitting strategies.

Results wrap modulo 2**64, as an unsigned 64-bit accumulator does.
"""

import enum
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Tuple

import numpy as np

_MASK = (1 << 64) - 1

_Range = Tuple[int, int]


class Strategy(enum.Enum):
    """How the summation is split into work."""

    SERIAL = "serial"
    GRAIN_SIZE = "grain_size"
    NUM_TASKS = "num_tasks"
    NUM_TASKS_SIMD = "num_tasks_simd"
    SIMD = "simd"
    GRAIN_SIZE_REDUCE = "grain_size_reduce"


def _check_n(n: int) -> int:
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return n - 1


def _partial(start: int, stop: int) -> int:
    return sum(i * (i + 1) for i in range(start, stop)) & _MASK


def _partial_vectorized(start: int, stop: int) -> int:
    if stop <= start:
        return 0
    i = np.arange(start, stop, dtype=np.uint64)
    return int(np.sum(i * (i + np.uint64(1)), dtype=np.uint64))


def _run_chunks(chunks: Iterable[_Range], worker: Callable[[int, int], int]) -> int:
    with ThreadPoolExecutor() as pool:
        return sum(pool.map(lambda bounds: worker(*bounds), chunks)) & _MASK


def _even_chunks(count: int, num_tasks: int) -> list:
    if num_tasks < 1:
        raise ValueError(f"num_tasks must be positive, got {num_tasks}")
    return [(count * k // num_tasks, count * (k + 1) // num_tasks) for k in range(num_tasks)]


def reduce_serial(n: int) -> int:
    """Sum the series in a single loop."""
    return _partial(0, _check_n(n))


def reduce_grain_size(n: int, grain_size: int = 100_000) -> int:
    """Sum the series in tasks of at most ``grain_size`` iterations each."""
    if grain_size < 1:
        raise ValueError(f"grain_size must be positive, got {grain_size}")
    count = _check_n(n)
    chunks = [(s, min(s + grain_size, count)) for s in range(0, count, grain_size)]
    return _run_chunks(chunks, _partial)


def reduce_num_tasks(n: int, num_tasks: int = 50) -> int:
    """Sum the series split evenly into ``num_tasks`` tasks."""
    return _run_chunks(_even_chunks(_check_n(n), num_tasks), _partial)


def _reduce_num_tasks_simd(n: int, num_tasks: int = 50) -> int:
    return _run_chunks(_even_chunks(_check_n(n), num_tasks), _partial_vectorized)


def _reduce_simd(n: int) -> int:
    return _partial_vectorized(0, _check_n(n))


_DISPATCH = {
    Strategy.SERIAL: reduce_serial,
    Strategy.GRAIN_SIZE: reduce_grain_size,
    Strategy.NUM_TASKS: reduce_num_tasks,
    Strategy.NUM_TASKS_SIMD: _reduce_num_tasks_simd,
    Strategy.SIMD: _reduce_simd,
    Strategy.GRAIN_SIZE_REDUCE: reduce_grain_size,
}


def reduce_with(strategy: Strategy, n: int) -> int:
    """Sum the series using ``strategy``."""
    return _DISPATCH[Strategy(strategy)](n)