"""Timing parallel variants against their serial counterparts."""

import argparse
import sys
from typing import Callable, Dict, Optional, Sequence, Tuple, TypeVar

from hpclab.fibonacci import fib, parallel_fib
from hpclab.reduce import Strategy, reduce_serial, reduce_with
from hpclab.timer import Timer
from hpclab.unbound_loop import SubProcess, UnboundLoop

T = TypeVar("T")

Timing = Tuple[float, float]

_REDUCE_LABELS = (
    (Strategy.GRAIN_SIZE, "GrainSizeSubProcess TaskLoop"),
    (Strategy.NUM_TASKS, "NumTasksSubProcess TaskLoop"),
    (Strategy.NUM_TASKS_SIMD, "NumTasksSIMDSubProcess TaskLoop"),
    (Strategy.SIMD, "SIMDSubProcess TaskLoop"),
    (Strategy.GRAIN_SIZE_REDUCE, "GrainSizeReduceSubProcess TaskLoop"),
)

_RULE = "*" * 36


def _timed(func: Callable[[], T]) -> Tuple[T, float]:
    with Timer() as timer:
        result = func()
    return result, timer.duration()


def _compare(label: str, parallel: Callable[[], T], serial: Callable[[], T]) -> Timing:
    parallel_result, parallel_ms = _timed(parallel)
    serial_result, serial_ms = _timed(serial)
    if parallel_result != serial_result:
        raise RuntimeError(f"{label}: parallel result {parallel_result} != serial result {serial_result}")
    print(label)
    print(f"OMP duration is :{parallel_ms}ms")
    print(f"Nor duration is :{serial_ms}ms")
    print()
    return parallel_ms, serial_ms


def profile_fib(n: int = 30) -> Dict[str, Timing]:
    """Time task-parallel against serial Fibonacci of ``n``."""
    print(_RULE)
    print("profile for the omp task Fib")
    timings = {"Fib": _compare("Fib", lambda: parallel_fib(n), lambda: fib(n))}
    print(_RULE)
    return timings


def profile_unbound_loop(n: int = 100) -> Dict[str, Timing]:
    """Time every sub-process kind over ``n`` nodes, task-parallel against serial."""
    print(_RULE)
    print("profile for the omp task unbound_loop")
    loop = UnboundLoop(n)
    timings = {
        kind.name: _compare(
            kind.name,
            lambda kind=kind: loop.parallel_process(kind),
            lambda kind=kind: loop.serial_process(kind),
        )
        for kind in SubProcess
    }
    print(_RULE)
    return timings


def profile_reduce(n: int = 5_000_000) -> Dict[str, Timing]:
    """Time every reduction strategy against the serial loop for ``n``."""
    print(_RULE)
    print("profile for the omp task taskloop")
    timings = {
        label: _compare(
            label,
            lambda strategy=strategy: reduce_with(strategy, n),
            lambda: reduce_serial(n),
        )
        for strategy, label in _REDUCE_LABELS
    }
    print(_RULE)
    return timings


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run all three profiles with sizes from the command line."""
    parser = argparse.ArgumentParser(
        prog="hpclab-benchmark", description="Compare parallel and serial timings."
    )
    parser.add_argument("--fib", type=int, default=30, help="Fibonacci index")
    parser.add_argument("--loop", type=int, default=100, help="number of list nodes")
    parser.add_argument("--reduce", type=int, default=5_000_000, help="series length")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    profile_fib(args.fib)
    profile_unbound_loop(args.loop)
    profile_reduce(args.reduce)
    return 0