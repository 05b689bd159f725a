"""Lazily evaluated element-wise expressions over fixed-size vectors."""

import abc
import operator
import sys
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence


class Expression(abc.ABC):
    """Something that yields one element per index and combines lazily with others."""

    @abc.abstractmethod
    def get(self, index: int) -> Any:
        """Return the element at ``index``."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    def __add__(self, other: "Expression") -> "BinaryOp":
        return BinaryOp(operator.add, self, other)

    def __sub__(self, other: "Expression") -> "BinaryOp":
        return BinaryOp(operator.sub, self, other)

    def __mul__(self, other: "Expression") -> "BinaryOp":
        return BinaryOp(operator.mul, self, other)


class BinaryOp(Expression):
    """An element-wise ``func(left[i], right[i])``, evaluated only when read."""

    def __init__(self, func: Callable[[Any, Any], Any], left: Expression, right: Expression) -> None:
        if len(left) != len(right):
            raise ValueError(f"operand sizes differ: {len(left)} and {len(right)}")
        self.func = func
        self.left = left
        self.right = right

    def get(self, index: int) -> Any:
        return self.func(self.left.get(index), self.right.get(index))

    def __len__(self) -> int:
        return len(self.left)


class Matrix(Expression):
    """A fixed-size vector of values, zero-filled unless ``values`` are given."""

    def __init__(self, size: int, values: Optional[Iterable[Any]] = None) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        data: List[Any] = [0.0] * size if values is None else list(values)
        if len(data) != size:
            raise ValueError(f"expected {size} values, got {len(data)}")
        self._data = data

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")
        return index

    def get(self, index: int) -> Any:
        return self._data[self._check(index)]

    def assign(self, expression: Expression) -> "Matrix":
        """Evaluate ``expression`` element by element into this matrix and return it."""
        if len(expression) != len(self._data):
            raise ValueError(f"cannot assign size {len(expression)} to size {len(self._data)}")
        self._data[:] = [expression.get(i) for i in range(len(self._data))]
        return self

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._check(index)] = value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compute ``a + b - c`` for a = b = 0..n-1 and c = a + 2 (n defaults to 4) and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    size = int(args[0]) if args else 4
    a = Matrix(size, [float(i) for i in range(size)])
    b = Matrix(size, [float(i) for i in range(size)])
    c = Matrix(size, [float(i + 2) for i in range(size)])
    d = Matrix(size).assign(a + b - c)
    print("".join(f"{value:g} " for value in d))
    return 0