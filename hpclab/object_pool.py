"""A spin lock and a fixed-size pool of reusable objects."""

import sys
import threading
import time
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")

FIXED_SIZE = 512
_YIELD_ATTEMPTS = 32


class SpinLock:
    """A lock taken by retrying, yielding the processor and then sleeping briefly."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def try_lock(self) -> bool:
        """Take the lock if it is free; return whether it was taken."""
        return self._flag.acquire(blocking=False)

    def lock(self) -> None:
        """Spin until the lock is taken."""
        attempts = 0
        while not self.try_lock():
            time.sleep(0 if attempts < _YIELD_ATTEMPTS else 1e-6)
            attempts += 1

    def unlock(self) -> None:
        """Release the lock."""
        try:
            self._flag.release()
        except RuntimeError:
            raise RuntimeError("unlock of an unlocked spin lock") from None

    def __enter__(self) -> "SpinLock":
        self.lock()
        return self

    def __exit__(self, *args: object) -> None:
        self.unlock()


class ObjectPool(Generic[T]):
    """A pool of up to 512 objects made by ``factory``, handed out and returned by ``acquire``."""

    def __init__(self, factory: Callable[[], T], size: int = 4) -> None:
        self._factory = factory
        self._lock = SpinLock()
        self._objects: List[T] = []
        self._free: List[bool] = []
        self.init(size)

    def init(self, n: int) -> None:
        """Replace the pool's contents with ``n`` fresh, free objects."""
        if not 0 <= n <= FIXED_SIZE:
            raise ValueError(f"pool size must be between 0 and {FIXED_SIZE}, got {n}")
        try:
            objects = [self._factory() for _ in range(n)]
        except MemoryError:
            objects = []
        with self._lock:
            self._objects = objects
            self._free = [True] * len(objects)

    def size(self) -> int:
        """Return how many objects are free."""
        with self._lock:
            return sum(self._free)

    def capacity(self) -> int:
        """Return how many objects the pool holds."""
        return len(self._objects)

    def empty(self) -> bool:
        """Return whether no object is free."""
        with self._lock:
            return not any(self._free)

    def full(self) -> bool:
        """Return whether every object is free."""
        with self._lock:
            return sum(self._free) == len(self._objects)

    def is_from_pool(self, obj: object) -> bool:
        """Return whether ``obj`` is one of the pool's objects."""
        return any(item is obj for item in self._objects)

    def _allocate(self) -> Optional[int]:
        with self._lock:
            for index, free in enumerate(self._free):
                if free:
                    self._free[index] = False
                    return index
            return None

    def _deallocate(self, index: int) -> None:
        with self._lock:
            if 0 <= index < len(self._free):
                self._free[index] = True

    @contextmanager
    def acquire(self) -> Iterator[Optional[T]]:
        """Lend a free object for the duration of the block; ``None`` when none is free."""
        index = self._allocate()
        if index is None:
            yield None
            return
        try:
            yield self._objects[index]
        finally:
            self._deallocate(index)


class _Resource:
    def __init__(self) -> None:
        print("construct A")
        self.storage = bytearray(10)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the pool's free count while one object is borrowed and after it is returned."""
    args = list(sys.argv[1:] if argv is None else argv)
    size = int(args[0]) if args else 4
    print("construct objectpool")
    pool = ObjectPool(_Resource, size)
    with pool.acquire():
        print(f"a.size() = {pool.size()} capacity() is {pool.capacity()}")
    print(f"a.size() = {pool.size()} capacity() is {pool.capacity()}")
    return 0