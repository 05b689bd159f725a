"""Applying a per-node computation over a list of unknown length, serially or as tasks."""

import enum
import threading
import traceback
from concurrent.futures import ThreadPoolExecutor
from typing import List, Union

import numpy as np

_MASK = (1 << 64) - 1


def dump_stack() -> List[str]:
    """Print the current call stack and return its formatted lines."""
    lines = traceback.format_stack()[:-1]
    for line in lines:
        print(line, end="")
    return lines


class SubProcess(enum.Enum):
    """The computation applied to each node value."""

    MULTIPLY = 1
    DISCARD = 2
    ACCUMULATE = 3
    SPIN = 4

    def apply(self, acc: int, n: int) -> int:
        """Return the accumulator after processing node value ``n``."""
        if self is SubProcess.MULTIPLY:
            return acc * (n + 1) & _MASK
        if self is SubProcess.DISCARD:
            _ = n * (n + 1)
            return acc
        if self is SubProcess.ACCUMULATE:
            count = n + 3 + 10
            return (acc + sum(i * (i + 1) for i in range(1, count - 1))) & _MASK
        count = (2 * n + 1) * 1000
        i = np.arange(1, count - 1, dtype=np.uint64)
        np.sum(i * (i + np.uint64(1)), dtype=np.uint64)
        return acc


def _resolve(kind: Union[SubProcess, int]) -> SubProcess:
    try:
        return SubProcess(kind)
    except ValueError:
        dump_stack()
        raise


class UnboundLoop:
    """A list of node values ``0 .. n-1`` processed one node at a time."""

    def __init__(self, n: int) -> None:
        self.nodes = tuple(range(n))

    def serial_process(self, kind: Union[SubProcess, int]) -> int:
        """Process every node in order and return the accumulator, which starts at 1."""
        kind = _resolve(kind)
        acc = 1
        for value in self.nodes:
            acc = kind.apply(acc, value)
        return acc

    def parallel_process(self, kind: Union[SubProcess, int]) -> int:
        """Process every node as a separate task on four workers; return the accumulator."""
        kind = _resolve(kind)
        acc = 1
        guard = threading.Lock()

        def task(value: int) -> None:
            nonlocal acc
            with guard:
                acc = kind.apply(acc, value)

        with ThreadPoolExecutor(max_workers=4) as pool:
            for future in [pool.submit(task, value) for value in self.nodes]:
                future.result()
        return acc