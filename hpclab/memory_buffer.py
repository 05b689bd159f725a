"""A growable buffer with an inline capacity that grows by half again when full."""

import sys
from typing import Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")

INLINE_BUFFER_SIZE = 256


def to_unsigned(value: int) -> int:
    """Return ``value`` unchanged, refusing negative values."""
    if value < 0:
        raise ValueError(f"negative value: {value}")
    return value


class MemoryBuffer(Generic[T]):
    """A sequence that starts with an inline capacity and grows 1.5 times when it runs out."""

    def __init__(self, inline_size: int = INLINE_BUFFER_SIZE) -> None:
        self._inline_size = to_unsigned(inline_size)
        self._capacity = self._inline_size
        self._inline = True
        self._items: List[Optional[T]] = []

    def capacity(self) -> int:
        """Return how many items fit before the buffer has to grow."""
        return self._capacity

    def is_inline(self) -> bool:
        """Return whether the buffer still uses its inline storage."""
        return self._inline

    def _grow(self, size: int) -> None:
        new_capacity = self._capacity + self._capacity // 2
        self._capacity = max(new_capacity, size)
        self._inline = False

    def reserve(self, new_capacity: int) -> None:
        """Make room for at least ``new_capacity`` items."""
        if to_unsigned(new_capacity) > self._capacity:
            self._grow(new_capacity)

    def resize(self, new_size: int) -> None:
        """Set the number of items, padding with ``None`` or dropping from the end."""
        self.reserve(new_size)
        if new_size > len(self._items):
            self._items.extend([None] * (new_size - len(self._items)))
        else:
            del self._items[new_size:]

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._items.clear()

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        self.reserve(len(self._items) + 1)
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        """Add every item of ``values`` at the end."""
        new_items = list(values)
        self.reserve(len(self._items) + len(new_items))
        self._items.extend(new_items)

    def take(self) -> "MemoryBuffer[T]":
        """Move the contents into a new buffer and leave this one empty and inline."""
        moved: MemoryBuffer[T] = MemoryBuffer(self._inline_size)
        moved._items = self._items
        moved._capacity = self._capacity
        moved._inline = self._inline
        self._items = []
        self._capacity = self._inline_size
        self._inline = True
        return moved

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Append one value and print it together with the size."""
    args = list(sys.argv[1:] if argv is None else argv)
    buffer: MemoryBuffer[float] = MemoryBuffer()
    buffer.append(float(args[0]) if args else 1.0)
    print(f"the first num is : {buffer[0]:g} size : {len(buffer)}")
    return 0