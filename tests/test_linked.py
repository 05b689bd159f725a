import pytest

from hpclab.linked import (
    TreeNode,
    add_numbers,
    build_list,
    judge_tree_same,
    list_values,
    main,
    reverse_list,
)


def _digits(n):
    return [int(c) for c in str(n)]


@pytest.mark.parametrize("values", [[], [1], [3, 1, 4, 1, 5]])
def test_build_round_trip(values):
    assert list_values(build_list(values)) == values


@pytest.mark.parametrize("values", [[7], [1, 2], list(range(10))])
def test_reverse(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


def test_reverse_twice_is_identity():
    values = [5, 6, 7, 8]
    assert list_values(reverse_list(reverse_list(build_list(values)))) == values


def test_reverse_empty():
    assert reverse_list(None) is None


@pytest.mark.parametrize("a,b", [(0, 0), (12, 345), (999, 1), (5, 5), (123456, 98765)])
def test_add_numbers_matches_integer_sum(a, b):
    result = add_numbers(build_list(_digits(a)), build_list(_digits(b)))
    assert list_values(result) == _digits(a + b)


def test_add_numbers_carries_into_new_digit():
    assert list_values(add_numbers(build_list([9, 9]), build_list([1]))) == [1, 0, 0]


def test_add_numbers_with_empty_operand():
    assert list_values(add_numbers(build_list([4, 2]), None)) == [4, 2]


def test_trees_both_empty():
    assert judge_tree_same(None, None) is True


def test_tree_against_empty():
    assert judge_tree_same(TreeNode(1), None) is False


def test_single_nodes():
    assert judge_tree_same(TreeNode(1), TreeNode(1)) is True
    assert judge_tree_same(TreeNode(1), TreeNode(2)) is False


def test_symmetric_trees_match():
    left = TreeNode(1, TreeNode(2), TreeNode(2))
    right = TreeNode(1, TreeNode(2), TreeNode(2))
    assert judge_tree_same(left, right) is True


def test_asymmetric_children_do_not_match():
    left = TreeNode(1, TreeNode(2), TreeNode(3))
    right = TreeNode(1, TreeNode(2), TreeNode(3))
    assert judge_tree_same(left, right) is False


def test_main_prints_reversed(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "43210"