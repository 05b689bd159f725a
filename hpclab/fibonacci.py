"""Recursive Fibonacci numbers, serial and task-parallel."""

from concurrent.futures import ThreadPoolExecutor


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion; ``n`` itself for ``n < 2``."""
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)


def parallel_fib(n: int, threshold: int = 20) -> int:
    """Return the ``n``-th Fibonacci number, computing ``fib(n - 1)`` in its own task above ``threshold``."""
    if n < 2:
        return n
    if n <= threshold:
        return fib(n)
    with ThreadPoolExecutor(max_workers=1) as pool:
        first = pool.submit(parallel_fib, n - 1, threshold)
        second = parallel_fib(n - 2, threshold)
        return first.result() + second