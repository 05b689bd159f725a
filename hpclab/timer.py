"""Wall-clock timing in milliseconds and a small task-ordering demonstration."""

import threading
from concurrent.futures import ThreadPoolExecutor
from time import perf_counter
from typing import List, Optional, Tuple


class Timer:
    """Stopwatch measuring the time between ``start`` and ``stop`` in milliseconds."""

    def __init__(self) -> None:
        self._started: Optional[float] = None
        self._stopped: Optional[float] = None

    def start(self) -> None:
        """Start (or restart) the measurement."""
        self._started = perf_counter()
        self._stopped = None

    def stop(self) -> None:
        """Stop the measurement."""
        if self._started is None:
            raise RuntimeError("timer was stopped before it was started")
        self._stopped = perf_counter()

    def duration(self) -> float:
        """Return the measured time in milliseconds."""
        if self._started is None or self._stopped is None:
            raise RuntimeError("timer has not been started and stopped")
        return (self._stopped - self._started) * 1000.0

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


def task_order_demo() -> List[Tuple[int, str]]:
    """Run A and D on thread 0 while B and C are handed to a second thread.

    Each event is printed as it happens; the list of ``(thread, label)`` pairs
    is returned in the order they were recorded.
    """
    events: List[Tuple[int, str]] = []
    guard = threading.Lock()

    def report(label: str, thread_num: int) -> None:
        with guard:
            events.append((thread_num, label))
            print(f"{thread_num}{label} ")

    report("A", 0)
    with ThreadPoolExecutor(max_workers=1) as pool:
        pool.submit(report, "B", 1)
        pool.submit(report, "C", 1)
        report("D", 0)
    return events