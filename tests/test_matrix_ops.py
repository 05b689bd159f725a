import pytest

from hpclab.matrix_ops import diagonal_order, main, transpose_in_place


def test_diagonal_order_source_example():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    assert diagonal_order(matrix) == [[1], [2, 5], [3, 6, 9], [4, 7, 10], [8, 11], [12]]


def test_diagonal_order_empty():
    assert diagonal_order([]) == []


def test_diagonal_order_keeps_every_element_once():
    matrix = [[r * 5 + c for c in range(5)] for r in range(3)]
    flat = [v for diagonal in diagonal_order(matrix) for v in diagonal]
    assert sorted(flat) == sorted(v for row in matrix for v in row)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (3, 2), (4, 4), (5, 7), (1, 6)])
def test_transpose_matches_zip(rows, cols):
    data = list(range(rows * cols))
    as_rows = [data[r * cols:(r + 1) * cols] for r in range(rows)]
    expected = [v for column in zip(*as_rows) for v in column]
    transpose_in_place(data, rows, cols)
    assert data == expected


def test_double_transpose_is_identity():
    data = list(range(24))
    transpose_in_place(data, 4, 6)
    transpose_in_place(data, 6, 4)
    assert data == list(range(24))


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        transpose_in_place([1, 2, 3], 2, 2)


def test_main_prints_transposed(capsys):
    assert main(["2", "3"]) == 0
    printed = [int(line) for line in capsys.readouterr().out.split()]
    expected = list(range(6))
    transpose_in_place(expected, 2, 3)
    assert printed == expected