"""Anti-diagonal traversal and in-place transposition of row-major matrices."""

import sys
from typing import List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


def diagonal_order(matrix: Sequence[Sequence[T]]) -> List[List[T]]:
    """Return the anti-diagonals of ``matrix``, each read from the top row down."""
    rows = len(matrix)
    if rows == 0:
        return []
    cols = len(matrix[0])
    return [
        [matrix[k][d - k] for k in range(max(0, d - cols + 1), min(rows, d + 1))]
        for d in range(rows + cols - 1)
    ]


def transpose_in_place(data: MutableSequence[T], rows: int, cols: int) -> None:
    """Transpose a row-major ``rows`` x ``cols`` matrix stored in ``data`` in place."""
    if rows < 0 or cols < 0 or len(data) != rows * cols:
        raise ValueError(f"data of length {len(data)} does not hold a {rows}x{cols} matrix")

    def destination(position: int) -> int:
        i, j = divmod(position, cols)
        return j * rows + i

    for start in range(rows * cols):
        position = destination(start)
        while position > start:
            position = destination(position)
        if position < start:
            continue  # this cycle was rotated from a smaller leader
        value = data[start]
        position = destination(start)
        while position != start:
            data[position], value = value, data[position]
            position = destination(position)
        data[start] = value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Transpose a rows x cols matrix of 0..n-1 (default 4x4) and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    rows, cols = (int(args[0]), int(args[1])) if len(args) >= 2 else (4, 4)
    data = list(range(rows * cols))
    transpose_in_place(data, rows, cols)
    for value in data:
        print(value)
    return 0